"""CLI entry point for quantum-bloom.

Usage:
    quantum-bloom summary [STATE_FILE]            Print observables for a saved state
    quantum-bloom figures [STATE_FILE] [OUT_DIR]  Render the observable dashboard to PNG
    quantum-bloom init STATE_FILE                 Write a state file with default values
    quantum-bloom version                         Show version
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path


def main() -> None:
    """Main CLI entry point."""
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(0)

    command = sys.argv[1].lower()
    args = sys.argv[2:]

    if command == "summary":
        _run_summary(args)
    elif command == "figures":
        _run_figures(args)
    elif command == "init":
        _run_init(args)
    elif command in ("version", "--version", "-v"):
        from quantum_bloom import __version__
        print(f"quantum-bloom {__version__}")
    elif command in ("help", "--help", "-h"):
        print(__doc__)
    else:
        print(f"Unknown command: {command}")
        print(__doc__)
        sys.exit(1)


def _setup_logging() -> None:
    from quantum_bloom.utils.config import load_config
    config = load_config()
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def _load_state(args: list[str]):
    """Load the state named on the command line, or the configured defaults."""
    from quantum_bloom.knowledge.state_store import load_state
    from quantum_bloom.utils.config import load_config

    if args:
        path = Path(args[0])
        if not path.exists():
            print(f"State file not found: {path}")
            sys.exit(1)
        return load_state(path)
    return load_config().defaults.to_state()


def _run_summary(args: list[str]) -> None:
    """Print energies, marker readout, phase point and <x> for a state."""
    _setup_logging()
    from quantum_bloom.engine import (
        amplitude_magnitude,
        energy_levels,
        expectation_position,
        phase_point,
    )
    from quantum_bloom.utils.config import load_config
    from quantum_bloom.verification.normalization import run_checks

    state = _load_state(args)
    params = state.params
    marker_x = load_config().marker_x

    print(f"\nSystem: {params.kind.value}")
    if params.kind.is_superposition:
        w1, w2 = params.weights
        print(f"Weights: w1={w1:.4f}, w2={w2:.4f}")
    else:
        print(f"n = {params.quantum_number}")
    print(f"L = {params.scale:.2f}, t = {params.time:.2f}")

    print("\nEnergy levels:")
    for n, energy in enumerate(energy_levels(params), start=1):
        print(f"  n={n}  E={energy:.5f}")

    phase = phase_point(params)
    print(f"\n|psi({marker_x:.2f}, t)| = {float(amplitude_magnitude(params, marker_x)):.5f}")
    print(f"psi(0, t) = {float(phase.real):.5f} {float(phase.imag):+.5f}i")
    print(f"<x>(t) = {expectation_position(params):.5f}")

    print("\nChecks:")
    for check in run_checks(params):
        status = "PASS" if check.passed else "FAIL"
        print(f"  [{status}] {check.name}: {check.message}")


def _run_figures(args: list[str]) -> None:
    """Render the dashboard for a state to OUT_DIR/dashboard.png."""
    _setup_logging()
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    from quantum_bloom.engine import snapshot
    from quantum_bloom.utils.config import load_config
    from quantum_bloom.viz.figures import plot_dashboard, setup_studio_style

    config = load_config()
    state = _load_state(args[:1])
    out_dir = Path(args[1]) if len(args) > 1 else Path(config.output_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    setup_studio_style()
    fig = plot_dashboard(snapshot(state.params, marker_x=config.marker_x), state.show_grid)
    out_path = out_dir / "dashboard.png"
    fig.savefig(out_path, dpi=config.dpi)
    plt.close(fig)
    logging.getLogger(__name__).info("Wrote %s", out_path)
    print(f"Dashboard written to {out_path}")


def _run_init(args: list[str]) -> None:
    """Write the configured default state to STATE_FILE."""
    _setup_logging()
    from quantum_bloom.knowledge.state_store import save_state
    from quantum_bloom.utils.config import load_config

    if not args:
        print("Usage: quantum-bloom init STATE_FILE")
        sys.exit(1)
    path = save_state(load_config().defaults.to_state(), args[0])
    print(f"State written to {path}")


if __name__ == "__main__":
    main()
