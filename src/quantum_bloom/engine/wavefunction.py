"""Closed-form eigenmodes for the three supported systems.

Particle in a box (walls at -L and +L):
    psi_n(x) = sqrt(2/L) * sin(n*pi*(x + L) / (2L))
    E_n = n^2 * pi^2 * hbar^2 / (2 * m * L^2)

Harmonic oscillator:
    psi_n(x) = H_n(x) * exp(-x^2/2) / sqrt(2^n * n! * sqrt(pi))
    E_n = hbar * omega * (n + 1/2)

Superposition (n=1,2) always evaluates box modes 1 and 2; the configured
quantum number is ignored for that kind.
"""
from __future__ import annotations

import math

import numpy as np

from quantum_bloom.engine.hermite import hermite
from quantum_bloom.types.system import (
    Evaluation,
    ModeContribution,
    QuantumSystemKind,
    Real,
    SystemParameters,
)

HBAR = 1.0
M = 1.0
OMEGA = 1.0

SUPERPOSITION_MODES = (1, 2)


def box_mode(n: int, L: float, x: Real) -> Real:
    """Box eigenfunction psi_n(x) on [-L, L]."""
    return np.sqrt(2.0 / L) * np.sin(n * np.pi * (x + L) / (2.0 * L))


def box_energy(n: int, L: float) -> float:
    return (n * n * math.pi**2 * HBAR**2) / (2.0 * M * L * L)


def oscillator_mode(n: int, x: Real) -> Real:
    """Hermite-Gaussian eigenfunction psi_n(x) of the unit oscillator."""
    norm = math.sqrt(2.0**n * float(math.factorial(n)) * math.sqrt(math.pi))
    return hermite(n, x) * np.exp(-x * x / 2.0) / norm


def oscillator_energy(n: int) -> float:
    return HBAR * OMEGA * (n + 0.5)


def evaluate(params: SystemParameters, x: Real) -> Evaluation:
    """Per-mode spatial amplitudes and energies of ``params`` at position ``x``."""
    L = params.scale
    n = params.quantum_number

    if params.kind is QuantumSystemKind.PARTICLE_IN_BOX:
        return Evaluation(ModeContribution(box_mode(n, L, x), box_energy(n, L)))
    if params.kind is QuantumSystemKind.HARMONIC_OSCILLATOR:
        return Evaluation(ModeContribution(oscillator_mode(n, x), oscillator_energy(n)))

    n1, n2 = SUPERPOSITION_MODES
    return Evaluation(
        ModeContribution(box_mode(n1, L, x), box_energy(n1, L)),
        ModeContribution(box_mode(n2, L, x), box_energy(n2, L)),
    )
