"""Tests for stationary-phase time evolution."""
from __future__ import annotations

import math

import numpy as np
import pytest

from quantum_bloom.engine.evolution import amplitude_at
from quantum_bloom.engine.wavefunction import box_energy
from quantum_bloom.types.system import QuantumSystemKind, SystemParameters


class TestAmplitudeAt:
    def test_single_mode_at_zero_time(self, box_params):
        amp = amplitude_at(box_params, 0.0, 0.0)
        assert amp.real == pytest.approx(math.sqrt(0.2))
        assert amp.imag == pytest.approx(0.0)
        assert amp.density == pytest.approx(0.2)

    def test_positive_phase_convention(self, box_params):
        """Phase rotates as exp(+i*E*t): imaginary part follows +sin(E*t)."""
        t = 3.0
        E = box_energy(1, 10.0)
        amp = amplitude_at(box_params, 0.0, t)
        assert amp.real == pytest.approx(math.sqrt(0.2) * math.cos(E * t))
        assert amp.imag == pytest.approx(math.sqrt(0.2) * math.sin(E * t))
        assert amp.imag > 0

    def test_superposition_at_center(self, superposition_params):
        amp = amplitude_at(superposition_params, 0.0, 0.0)
        assert amp.real == pytest.approx(math.sqrt(0.5) * math.sqrt(0.2))
        assert amp.real == pytest.approx(0.3162, abs=1e-4)
        assert amp.imag == pytest.approx(0.0, abs=1e-12)

    def test_superposition_weighted_sum(self):
        params = SystemParameters(kind=QuantumSystemKind.SUPERPOSITION_12, scale=7.0, weight=0.2)
        x, t = 2.3, 4.1
        w1, w2 = math.sqrt(0.2), math.sqrt(0.8)
        psi1 = math.sqrt(2 / 7.0) * math.sin(math.pi * (x + 7.0) / 14.0)
        psi2 = math.sqrt(2 / 7.0) * math.sin(2 * math.pi * (x + 7.0) / 14.0)
        E1, E2 = box_energy(1, 7.0), box_energy(2, 7.0)
        amp = amplitude_at(params, x, t)
        assert amp.real == pytest.approx(w1 * psi1 * math.cos(E1 * t) + w2 * psi2 * math.cos(E2 * t))
        assert amp.imag == pytest.approx(w1 * psi1 * math.sin(E1 * t) + w2 * psi2 * math.sin(E2 * t))

    def test_time_defaults_to_snapshot(self, superposition_params):
        later = superposition_params.with_time(1.7)
        x = np.linspace(-10, 10, 11)
        np.testing.assert_allclose(
            amplitude_at(later, x).real, amplitude_at(superposition_params, x, 1.7).real
        )

    def test_pure_weight_reduces_to_single_mode(self):
        """weight = 1 leaves only box mode 1."""
        sup = SystemParameters(kind=QuantumSystemKind.SUPERPOSITION_12, weight=1.0)
        box = SystemParameters(kind=QuantumSystemKind.PARTICLE_IN_BOX, quantum_number=1)
        x = np.linspace(-10, 10, 41)
        np.testing.assert_allclose(amplitude_at(sup, x, 2.0).real, amplitude_at(box, x, 2.0).real)
        np.testing.assert_allclose(amplitude_at(sup, x, 2.0).imag, amplitude_at(box, x, 2.0).imag)
