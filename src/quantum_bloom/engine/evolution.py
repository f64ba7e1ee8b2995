"""Stationary-phase time evolution of evaluated eigenmodes.

Each mode is rotated by exp(+i*E*t/hbar):
    real = psi * cos(E*t/hbar),  imag = psi * sin(E*t/hbar)
Superpositions add the two weighted, rotated modes. The positive phase sign
does not change single-mode densities (cos^2 + sin^2 = 1) but does set the
sign of the interference term and of the phase-space marker.
"""
from __future__ import annotations

import numpy as np

from quantum_bloom.engine.wavefunction import HBAR, evaluate
from quantum_bloom.types.system import (
    ComplexAmplitude,
    ModeContribution,
    Real,
    SystemParameters,
)


def _rotate(mode: ModeContribution, t: float, weight: float = 1.0) -> tuple[Real, Real]:
    phase = mode.energy * t / HBAR
    return weight * mode.psi * np.cos(phase), weight * mode.psi * np.sin(phase)


def amplitude_at(params: SystemParameters, x: Real, t: float | None = None) -> ComplexAmplitude:
    """Complex amplitude psi(x, t). ``t`` defaults to the snapshot's own time."""
    if t is None:
        t = params.time
    modes = evaluate(params, x)

    if modes.mode2 is None:
        real, imag = _rotate(modes.mode1, t)
        return ComplexAmplitude(real, imag)

    w1, w2 = params.weights
    re1, im1 = _rotate(modes.mode1, t, w1)
    re2, im2 = _rotate(modes.mode2, t, w2)
    return ComplexAmplitude(re1 + re2, im1 + im2)
