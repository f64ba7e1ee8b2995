"""Matplotlib figures for the six observables and the combined dashboard."""

from __future__ import annotations

import matplotlib.pyplot as plt
import numpy as np

from quantum_bloom.engine.observables import ObservableSnapshot
from quantum_bloom.types.system import SystemParameters

_ACCENT = "#b266ff"
_HIGHLIGHT = "#ff80bf"
_TEAL = "#339999"


def setup_studio_style() -> None:
    """Configure matplotlib defaults for studio figures."""
    plt.rcParams.update({
        "font.family": "sans-serif",
        "font.size": 10,
        "axes.titlesize": 12,
        "axes.labelsize": 10,
        "xtick.labelsize": 9,
        "ytick.labelsize": 9,
        "legend.fontsize": 9,
        "figure.dpi": 150,
        "savefig.dpi": 150,
        "savefig.bbox": "tight",
        "axes.spines.top": False,
        "axes.spines.right": False,
    })


def _axes(ax: plt.Axes | None, figsize: tuple[float, float] = (6, 4)) -> tuple[plt.Figure, plt.Axes]:
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
        return fig, ax
    return ax.figure, ax


def _grid(ax: plt.Axes, show_grid: bool) -> None:
    if show_grid:
        ax.grid(True, alpha=0.3)
    else:
        ax.grid(False)


def _highlighted_levels(params: SystemParameters, count: int) -> set[int]:
    if params.kind.is_superposition:
        return {1, 2}
    return {params.quantum_number} if params.quantum_number <= count else set()


def plot_energy_levels(
    snap: ObservableSnapshot,
    show_grid: bool = False,
    ax: plt.Axes | None = None,
) -> plt.Figure:
    """Energy ladder E_1..E_5; the occupied level(s) are highlighted."""
    fig, ax = _axes(ax, (4, 4))
    count = len(snap.energies)
    active = _highlighted_levels(snap.params, count)

    for n, energy in enumerate(snap.energies, start=1):
        color = _HIGHLIGHT if n in active else _TEAL
        ax.hlines(energy, 0.2, 0.8, colors=color, linewidth=3)
        ax.text(0.82, energy, f"n={n}  E={energy:.2f}", va="center", fontsize=8)

    ax.set_xlim(0, 1.3)
    ax.set_xticks([])
    ax.set_ylabel("Energy")
    ax.set_title("Energy Levels")
    _grid(ax, show_grid)
    fig.tight_layout()
    return fig


def plot_wavefunction(
    snap: ObservableSnapshot,
    show_grid: bool = False,
    ax: plt.Axes | None = None,
) -> plt.Figure:
    """Real part, imaginary part and density over [-L, L] with the readout marker."""
    fig, ax = _axes(ax, (8, 4))

    ax.plot(snap.x, snap.amplitude.real, color=_ACCENT, linewidth=1.5, label=r"Re $\psi$")
    ax.plot(snap.x, snap.amplitude.imag, color=_TEAL, linewidth=1.0, alpha=0.8,
            label=r"Im $\psi$")
    ax.fill_between(snap.x, snap.density, color=_HIGHLIGHT, alpha=0.3, label=r"$|\psi|^2$")
    ax.axvline(snap.marker_x, color="k", linestyle="--", linewidth=0.8)
    ax.annotate(
        f"x={snap.marker_x:.2f}, |psi|={snap.marker_magnitude:.2f}",
        xy=(snap.marker_x, snap.marker_magnitude),
        xytext=(5, 5), textcoords="offset points", fontsize=8,
    )

    ax.set_xlabel("x")
    ax.set_ylabel("Amplitude")
    ax.set_title(f"{snap.params.kind.value} (t = {snap.params.time:.2f})")
    ax.legend(loc="upper right")
    _grid(ax, show_grid)
    fig.tight_layout()
    return fig


def plot_probability_density(
    snap: ObservableSnapshot,
    show_grid: bool = False,
    ax: plt.Axes | None = None,
) -> plt.Figure:
    fig, ax = _axes(ax)
    ax.plot(snap.x, snap.density, color=_ACCENT, linewidth=1.5)
    ax.set_xlabel("x")
    ax.set_ylabel(r"$|\psi(x,t)|^2$")
    ax.set_title("Probability Density")
    _grid(ax, show_grid)
    fig.tight_layout()
    return fig


def plot_momentum_profile(
    snap: ObservableSnapshot,
    show_grid: bool = False,
    ax: plt.Axes | None = None,
) -> plt.Figure:
    fig, ax = _axes(ax)
    ax.plot(snap.p, snap.momentum, color=_TEAL, linewidth=1.5)
    ax.axhline(0, color="k", linewidth=0.5)
    ax.set_xlabel("p")
    ax.set_ylabel(r"$\phi(p)$")
    ax.set_title("Momentum Space")
    _grid(ax, show_grid)
    fig.tight_layout()
    return fig


def plot_expectation_trace(
    snap: ObservableSnapshot,
    show_grid: bool = False,
    ax: plt.Axes | None = None,
) -> plt.Figure:
    """<x>(t) with the snapshot's current time marked."""
    fig, ax = _axes(ax)
    ax.plot(snap.times, snap.expectation, color=_TEAL, linewidth=1.5)
    if snap.times[0] <= snap.params.time <= snap.times[-1]:
        ax.axvline(snap.params.time, color=_HIGHLIGHT, linewidth=1.0)
    ax.set_xlabel("t")
    ax.set_ylabel(r"$\langle x \rangle$")
    ax.set_title("Position Expectation")
    _grid(ax, show_grid)
    fig.tight_layout()
    return fig


def plot_phase_point(
    snap: ObservableSnapshot,
    show_grid: bool = False,
    ax: plt.Axes | None = None,
) -> plt.Figure:
    """psi(0, t) in the complex plane."""
    fig, ax = _axes(ax, (4, 4))
    ax.axhline(0, color="k", linewidth=0.5)
    ax.axvline(0, color="k", linewidth=0.5)
    ax.scatter([snap.phase.real], [snap.phase.imag], s=60, color=_HIGHLIGHT, zorder=3)

    lim = max(1.0, 1.2 * float(np.hypot(snap.phase.real, snap.phase.imag)))
    ax.set_xlim(-lim, lim)
    ax.set_ylim(-lim, lim)
    ax.set_aspect("equal")
    ax.set_xlabel(r"Re $\psi(0,t)$")
    ax.set_ylabel(r"Im $\psi(0,t)$")
    ax.set_title("Phase Plot")
    _grid(ax, show_grid)
    fig.tight_layout()
    return fig


def plot_heatmap(
    snap: ObservableSnapshot,
    show_grid: bool = False,
    ax: plt.Axes | None = None,
) -> plt.Figure:
    """Density over the position (rows) x time (columns) grid."""
    fig, ax = _axes(ax)
    extent = [snap.heatmap_t[0], snap.heatmap_t[-1], snap.heatmap_x[0], snap.heatmap_x[-1]]
    im = ax.imshow(snap.heatmap, cmap="magma", origin="lower", aspect="auto", extent=extent)
    fig.colorbar(im, ax=ax, label=r"$|\psi|^2$")
    ax.set_xlabel("t")
    ax.set_ylabel("x")
    ax.set_title("Probability Heatmap")
    _grid(ax, show_grid)
    fig.tight_layout()
    return fig


def plot_dashboard(snap: ObservableSnapshot, show_grid: bool = False) -> plt.Figure:
    """All panels on one figure: main plot on top, six observables below."""
    fig = plt.figure(figsize=(14, 10))
    gs = fig.add_gridspec(3, 3, height_ratios=[1.3, 1, 1])

    plot_wavefunction(snap, show_grid, ax=fig.add_subplot(gs[0, :]))
    plot_energy_levels(snap, show_grid, ax=fig.add_subplot(gs[1, 0]))
    plot_probability_density(snap, show_grid, ax=fig.add_subplot(gs[1, 1]))
    plot_momentum_profile(snap, show_grid, ax=fig.add_subplot(gs[1, 2]))
    plot_phase_point(snap, show_grid, ax=fig.add_subplot(gs[2, 0]))
    plot_expectation_trace(snap, show_grid, ax=fig.add_subplot(gs[2, 1]))
    plot_heatmap(snap, show_grid, ax=fig.add_subplot(gs[2, 2]))

    fig.suptitle("Quantum Bloom Studio", fontsize=14)
    return fig
