"""Quantum-state evaluation and observable derivation."""

from __future__ import annotations

from quantum_bloom.engine.evolution import amplitude_at
from quantum_bloom.engine.hermite import hermite
from quantum_bloom.engine.observables import (
    ObservableSnapshot,
    amplitude_magnitude,
    energy_level,
    energy_levels,
    expectation_position,
    expectation_trace,
    heatmap_axes,
    momentum_grid,
    momentum_profile,
    phase_point,
    position_grid,
    probability_density,
    probability_heatmap_grid,
    snapshot,
)
from quantum_bloom.engine.wavefunction import evaluate

__all__ = [
    "hermite",
    "evaluate",
    "amplitude_at",
    "energy_level",
    "energy_levels",
    "probability_density",
    "amplitude_magnitude",
    "momentum_profile",
    "expectation_position",
    "expectation_trace",
    "phase_point",
    "probability_heatmap_grid",
    "position_grid",
    "momentum_grid",
    "heatmap_axes",
    "ObservableSnapshot",
    "snapshot",
]
