"""Tests for the Hermite polynomial recurrence."""
from __future__ import annotations

import numpy as np
import pytest

from quantum_bloom.engine.hermite import hermite

SAMPLE_X = [-2.5, -1.0, 0.0, 0.3, 1.7, 4.0]


class TestHermite:
    """Closed forms and edge cases of H_n."""

    @pytest.mark.parametrize("x", SAMPLE_X)
    def test_closed_forms(self, x):
        assert hermite(0, x) == pytest.approx(1.0)
        assert hermite(1, x) == pytest.approx(2 * x)
        assert hermite(2, x) == pytest.approx(4 * x**2 - 2)
        assert hermite(3, x) == pytest.approx(8 * x**3 - 12 * x)

    def test_higher_order_matches_numpy(self):
        """Recurrence agrees with numpy's physicists' Hermite series."""
        x = np.linspace(-3, 3, 13)
        for n in range(0, 11):
            coeffs = np.zeros(n + 1)
            coeffs[n] = 1.0
            expected = np.polynomial.hermite.hermval(x, coeffs)
            np.testing.assert_allclose(hermite(n, x), expected, rtol=1e-10, atol=1e-8)

    def test_array_input(self):
        x = np.array([0.0, 1.0, 2.0])
        result = hermite(2, x)
        assert result.shape == (3,)
        np.testing.assert_allclose(result, [-2.0, 2.0, 14.0])

    def test_order_zero_array(self):
        result = hermite(0, np.zeros(4))
        np.testing.assert_array_equal(result, np.ones(4))

    def test_value_at_origin(self):
        """H_n(0) vanishes for odd n and alternates for even n."""
        assert hermite(2, 0.0) == pytest.approx(-2.0)
        assert hermite(4, 0.0) == pytest.approx(12.0)
        assert hermite(5, 0.0) == pytest.approx(0.0)

    def test_negative_order_rejected(self):
        with pytest.raises(ValueError):
            hermite(-1, 0.5)
