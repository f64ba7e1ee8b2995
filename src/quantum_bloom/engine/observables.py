"""Derived observables: pure reductions over the evaluator and time evolution.

Every function takes an immutable SystemParameters snapshot and returns fresh
values; none of them mutate their inputs or keep state between calls.
"""
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from quantum_bloom.engine.evolution import amplitude_at
from quantum_bloom.engine.wavefunction import (
    box_energy,
    box_mode,
    oscillator_energy,
    oscillator_mode,
)
from quantum_bloom.types.system import (
    ComplexAmplitude,
    QuantumSystemKind,
    Real,
    SystemParameters,
)

ENERGY_LEVEL_COUNT = 5
EXPECTATION_POINTS = 201
HEATMAP_SIZE = 50
HEATMAP_TIME_STEP = 0.5
MOMENTUM_STEP = 0.1
TRACE_POINTS = 201
TRACE_TIME_STEP = 0.1


# --- Sampling grids ---

def _half_width(points: int) -> int:
    if points < 3 or points % 2 == 0:
        raise ValueError(f"Grid needs an odd number of points >= 3, got {points}")
    return (points - 1) // 2


def position_grid(params: SystemParameters, points: int = EXPECTATION_POINTS) -> np.ndarray:
    """Evenly spaced positions x_i = (i - h) * L / h over [-L, L], h = (points - 1) / 2.

    ``points`` must be odd so that the grid is symmetric and ends at +L.
    """
    half = _half_width(points)
    return (np.arange(points) - half) * params.scale / half


def momentum_grid(points: int = EXPECTATION_POINTS, step: float = MOMENTUM_STEP) -> np.ndarray:
    """Symmetric momenta p_i = (i - h) * step; ``points`` must be odd."""
    half = _half_width(points)
    return (np.arange(points) - half) * step


def heatmap_axes(params: SystemParameters) -> tuple[np.ndarray, np.ndarray]:
    """Position and time coordinates of the heatmap rows and columns."""
    half = HEATMAP_SIZE // 2
    x_axis = (np.arange(HEATMAP_SIZE) - half) * params.scale / half
    t_axis = np.arange(HEATMAP_SIZE) * HEATMAP_TIME_STEP
    return x_axis, t_axis


# --- Observables ---

def energy_level(params: SystemParameters, n: int) -> float:
    """Closed-form E_n for the snapshot's system, independent of its quantum number."""
    if params.kind.uses_box_modes:
        return box_energy(n, params.scale)
    return oscillator_energy(n)


def energy_levels(params: SystemParameters, count: int = ENERGY_LEVEL_COUNT) -> np.ndarray:
    """Energy ladder [E_1, ..., E_count]."""
    return np.array([energy_level(params, n) for n in range(1, count + 1)])


def probability_density(params: SystemParameters, x: Real, t: float | None = None) -> Real:
    return amplitude_at(params, x, t).density


def amplitude_magnitude(params: SystemParameters, x: Real, t: float | None = None) -> Real:
    """|psi(x, t)|, the value read out under the position marker."""
    return amplitude_at(params, x, t).magnitude


def momentum_profile(params: SystemParameters, p: Real) -> Real:
    """Momentum-space stand-in profile.

    This is not a Fourier transform of the spatial state. It reuses the
    spatial closed forms at the momentum coordinate with a parity sign:
    (-1)^n for the box, no sign for the oscillator, and mode 2 negated in
    the superposition.
    """
    L = params.scale
    n = params.quantum_number

    if params.kind is QuantumSystemKind.PARTICLE_IN_BOX:
        return (-1) ** n * box_mode(n, L, p)
    if params.kind is QuantumSystemKind.HARMONIC_OSCILLATOR:
        return oscillator_mode(n, p)

    w1, w2 = params.weights
    return w1 * box_mode(1, L, p) - w2 * box_mode(2, L, p)


def expectation_position(params: SystemParameters, t: float | None = None) -> float:
    """Riemann-sum estimate of <x> over 201 points spanning [-L, L]."""
    x = position_grid(params, EXPECTATION_POINTS)
    dx = 2.0 * params.scale / (EXPECTATION_POINTS - 1)
    return float(np.sum(x * probability_density(params, x, t)) * dx)


def expectation_trace(
    params: SystemParameters, times: np.ndarray | None = None
) -> np.ndarray:
    """<x>(t) over ``times`` (default t_i = 0.1 * i for i = 0..200)."""
    if times is None:
        times = np.arange(TRACE_POINTS) * TRACE_TIME_STEP
    return np.array([expectation_position(params, float(t)) for t in times])


def phase_point(params: SystemParameters, t: float | None = None) -> ComplexAmplitude:
    """Amplitude at x = 0, used as a single phase-space marker."""
    return amplitude_at(params, 0.0, t)


def probability_heatmap_grid(params: SystemParameters) -> np.ndarray:
    """50x50 densities; row i is x = (i - 25) * L / 25, column j is t = 0.5 * j."""
    x_axis, t_axis = heatmap_axes(params)
    return np.column_stack(
        [probability_density(params, x_axis, float(t)) for t in t_axis]
    )


# --- Frame bundle ---

@dataclass(frozen=True)
class ObservableSnapshot:
    """Every observable for one parameter snapshot, as consumed by a renderer."""

    params: SystemParameters
    energies: np.ndarray
    x: np.ndarray
    amplitude: ComplexAmplitude
    p: np.ndarray
    momentum: np.ndarray
    times: np.ndarray
    expectation: np.ndarray
    phase: ComplexAmplitude
    heatmap: np.ndarray
    heatmap_x: np.ndarray
    heatmap_t: np.ndarray
    marker_x: float = 0.0
    marker_magnitude: float = 0.0

    @property
    def density(self) -> np.ndarray:
        return self.amplitude.density


def snapshot(params: SystemParameters, marker_x: float = 0.0) -> ObservableSnapshot:
    """Evaluate all observables at the snapshot's own time."""
    x = position_grid(params)
    p = momentum_grid()
    times = np.arange(TRACE_POINTS) * TRACE_TIME_STEP
    heatmap_x, heatmap_t = heatmap_axes(params)
    return ObservableSnapshot(
        params=params,
        energies=energy_levels(params),
        x=x,
        amplitude=amplitude_at(params, x),
        p=p,
        momentum=momentum_profile(params, p),
        times=times,
        expectation=expectation_trace(params, times),
        phase=phase_point(params),
        heatmap=probability_heatmap_grid(params),
        heatmap_x=heatmap_x,
        heatmap_t=heatmap_t,
        marker_x=marker_x,
        marker_magnitude=float(amplitude_magnitude(params, marker_x)),
    )
