"""Numerical sanity checks on evaluated states."""

from __future__ import annotations

import numpy as np

from quantum_bloom.engine.observables import (
    expectation_position,
    position_grid,
    probability_density,
    probability_heatmap_grid,
)
from quantum_bloom.types.system import Real, SystemParameters
from quantum_bloom.types.validation import CheckResult


def check_weight_normalization(
    params: SystemParameters, tolerance: float = 1e-9
) -> CheckResult:
    """Check that the derived superposition weights satisfy w1^2 + w2^2 = 1."""
    w1, w2 = params.weights
    error = abs(w1 * w1 + w2 * w2 - 1.0)
    return CheckResult(
        name="weight_normalization",
        passed=bool(error < tolerance),
        value=float(error),
        threshold=tolerance,
        message=f"|w1^2 + w2^2 - 1| = {error:.2e}",
    )


def check_stationarity(
    params: SystemParameters,
    x: Real | None = None,
    t0: float = 0.0,
    t1: float = 5.0,
    tolerance: float = 1e-9,
) -> CheckResult:
    """Check that the density at ``x`` is unchanged between ``t0`` and ``t1``.

    Holds for single-mode states; a superposition is expected to fail.

    Args:
        params: Snapshot to evaluate.
        x: Positions to compare at. Defaults to the 201-point position grid.
        t0: First time.
        t1: Second time.
        tolerance: Maximum allowed absolute density change.
    """
    if x is None:
        x = position_grid(params)
    drift = np.max(np.abs(
        np.asarray(probability_density(params, x, t1))
        - np.asarray(probability_density(params, x, t0))
    ))
    return CheckResult(
        name="stationarity",
        passed=bool(drift < tolerance),
        value=float(drift),
        threshold=tolerance,
        message=f"Max density change between t={t0:g} and t={t1:g}: {drift:.2e}",
    )


def check_density_positivity(params: SystemParameters) -> CheckResult:
    """Check that every heatmap density is non-negative."""
    min_val = float(np.min(probability_heatmap_grid(params)))
    return CheckResult(
        name="density_positivity",
        passed=min_val >= 0.0,
        value=min_val,
        threshold=0.0,
        message=f"Min density: {min_val:.4e}",
    )


def check_parity(
    params: SystemParameters, t: float | None = None, tolerance: float = 1e-9
) -> CheckResult:
    """Check that <x> vanishes for single-mode states, whose density is even in x."""
    if params.kind.is_superposition:
        return CheckResult(
            name="parity",
            passed=True,
            value=0.0,
            threshold=tolerance,
            message="Superposition -- parity not defined.",
        )

    x_mean = expectation_position(params, t)
    return CheckResult(
        name="parity",
        passed=bool(abs(x_mean) < tolerance),
        value=abs(x_mean),
        threshold=tolerance,
        message=f"|<x>| = {abs(x_mean):.2e}",
    )


def run_checks(params: SystemParameters) -> list[CheckResult]:
    checks = [
        check_weight_normalization(params),
        check_density_positivity(params),
        check_parity(params),
    ]
    if not params.kind.is_superposition:
        checks.append(check_stationarity(params))
    return checks
