"""Shared test fixtures for Quantum Bloom."""

import pytest

from quantum_bloom.types.system import QuantumSystemKind, SystemParameters


@pytest.fixture
def tmp_output_dir(tmp_path):
    """Temporary directory for test outputs."""
    out = tmp_path / "output"
    out.mkdir()
    return out


@pytest.fixture
def box_params():
    """Ground state of a box of half-width 10."""
    return SystemParameters(
        kind=QuantumSystemKind.PARTICLE_IN_BOX, quantum_number=1, scale=10.0
    )


@pytest.fixture
def oscillator_params():
    return SystemParameters(
        kind=QuantumSystemKind.HARMONIC_OSCILLATOR, quantum_number=2, scale=10.0
    )


@pytest.fixture
def superposition_params():
    """Equal-weight superposition of box modes 1 and 2."""
    return SystemParameters(
        kind=QuantumSystemKind.SUPERPOSITION_12, scale=10.0, weight=0.5
    )
