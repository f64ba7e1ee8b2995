"""Matplotlib visualization of the studio observables."""

from __future__ import annotations

from quantum_bloom.viz.figures import (
    setup_studio_style,
    plot_energy_levels,
    plot_wavefunction,
    plot_probability_density,
    plot_momentum_profile,
    plot_expectation_trace,
    plot_phase_point,
    plot_heatmap,
    plot_dashboard,
)

__all__ = [
    "setup_studio_style",
    "plot_energy_levels",
    "plot_wavefunction",
    "plot_probability_density",
    "plot_momentum_profile",
    "plot_expectation_trace",
    "plot_phase_point",
    "plot_heatmap",
    "plot_dashboard",
]
