"""Tests for numerical sanity checks."""
from __future__ import annotations

import numpy as np

from quantum_bloom.types.system import QuantumSystemKind, SystemParameters
from quantum_bloom.verification.normalization import (
    check_density_positivity,
    check_parity,
    check_stationarity,
    check_weight_normalization,
    run_checks,
)


class TestChecks:
    def test_weight_normalization(self):
        for w in np.linspace(0, 1, 11):
            result = check_weight_normalization(SystemParameters(weight=float(w)))
            assert result.passed
            assert result.name == "weight_normalization"

    def test_stationarity_single_mode(self, box_params, oscillator_params):
        assert check_stationarity(box_params).passed
        assert check_stationarity(oscillator_params, x=np.array([0.0, 0.5, 1.5])).passed

    def test_stationarity_fails_for_superposition(self, superposition_params):
        result = check_stationarity(superposition_params, t0=0.0, t1=1.0)
        assert not result.passed
        assert result.value > 0

    def test_density_positivity(self, superposition_params):
        result = check_density_positivity(superposition_params)
        assert result.passed
        assert result.value >= 0.0

    def test_parity_single_mode(self):
        params = SystemParameters(kind=QuantumSystemKind.HARMONIC_OSCILLATOR, quantum_number=5)
        assert check_parity(params).passed

    def test_parity_not_applicable_to_superposition(self, superposition_params):
        result = check_parity(superposition_params)
        assert result.passed
        assert "not defined" in result.message


class TestRunChecks:
    def test_single_mode_all_pass(self, box_params):
        results = run_checks(box_params)
        assert {r.name for r in results} == {
            "weight_normalization", "density_positivity", "parity", "stationarity",
        }
        assert all(r.passed for r in results)

    def test_superposition_skips_stationarity(self, superposition_params):
        names = [r.name for r in run_checks(superposition_params)]
        assert "stationarity" not in names
