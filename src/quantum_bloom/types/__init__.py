"""Core data types for Quantum Bloom."""

from quantum_bloom.types.system import (
    ComplexAmplitude,
    Evaluation,
    ModeContribution,
    QuantumSystemKind,
    SystemParameters,
)
from quantum_bloom.types.validation import CheckResult

__all__ = [
    # system
    "QuantumSystemKind",
    "SystemParameters",
    "ModeContribution",
    "Evaluation",
    "ComplexAmplitude",
    # validation
    "CheckResult",
]
