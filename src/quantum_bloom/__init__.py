"""Quantum Bloom: closed-form evaluation of idealized quantum systems and their observables."""

__version__ = "0.1.0"

from quantum_bloom.types.system import QuantumSystemKind, SystemParameters

__all__ = ["QuantumSystemKind", "SystemParameters", "__version__"]
