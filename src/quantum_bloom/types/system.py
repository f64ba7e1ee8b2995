"""System selection, parameter snapshots and per-evaluation value types."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Union

import numpy as np
from pydantic import BaseModel, Field

# Scalar or elementwise array of samples
Real = Union[float, np.ndarray]

N_MIN, N_MAX = 1, 10
SCALE_MIN, SCALE_MAX = 5.0, 20.0
WEIGHT_MIN, WEIGHT_MAX = 0.0, 1.0


class QuantumSystemKind(str, Enum):
    PARTICLE_IN_BOX = "Particle in a Box"
    HARMONIC_OSCILLATOR = "Quantum Harmonic Oscillator"
    SUPERPOSITION_12 = "Superposition (n=1,2)"

    @property
    def is_superposition(self) -> bool:
        return self is QuantumSystemKind.SUPERPOSITION_12

    @property
    def uses_box_modes(self) -> bool:
        """Box eigenmodes (and the box energy ladder) apply to this kind."""
        return self is not QuantumSystemKind.HARMONIC_OSCILLATOR


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class SystemParameters(BaseModel):
    """Immutable snapshot of every input needed for one evaluation.

    The superposition weights are never stored: they are derived from the
    single slider value ``weight`` as ``(sqrt(w), sqrt(1 - w))`` so that
    ``w1**2 + w2**2 == 1`` holds by construction.

    Direct construction rejects out-of-range values. Use ``from_controls``
    when building from raw user or file input, which clamps instead.
    """

    model_config = {"frozen": True, "allow_inf_nan": False}

    kind: QuantumSystemKind = QuantumSystemKind.PARTICLE_IN_BOX
    quantum_number: int = Field(default=1, ge=N_MIN, le=N_MAX)
    scale: float = Field(default=10.0, ge=SCALE_MIN, le=SCALE_MAX)
    weight: float = Field(default=0.5, ge=WEIGHT_MIN, le=WEIGHT_MAX)
    time: float = Field(default=0.0, ge=0.0)

    @classmethod
    def from_controls(
        cls,
        kind: QuantumSystemKind | str = QuantumSystemKind.PARTICLE_IN_BOX,
        quantum_number: float = 1,
        scale: float = 10.0,
        weight: float = 0.5,
        time: float = 0.0,
    ) -> SystemParameters:
        """Build a snapshot from raw control values, clamping each into range."""
        n = int(round(_clamp(float(quantum_number), N_MIN, N_MAX)))
        return cls(
            kind=QuantumSystemKind(kind),
            quantum_number=n,
            scale=_clamp(float(scale), SCALE_MIN, SCALE_MAX),
            weight=_clamp(float(weight), WEIGHT_MIN, WEIGHT_MAX),
            time=max(0.0, float(time)),
        )

    @property
    def weights(self) -> tuple[float, float]:
        return math.sqrt(self.weight), math.sqrt(1.0 - self.weight)

    def with_time(self, time: float) -> SystemParameters:
        """Return a new snapshot identical to this one except for ``time``."""
        return type(self)(**{**self.model_dump(), "time": time})


@dataclass(frozen=True)
class ModeContribution:
    """Spatial amplitude and energy of one eigenmode at a position."""

    psi: Real
    energy: float


@dataclass(frozen=True)
class Evaluation:
    """Mode contributions at a position; ``mode2`` is set only for superpositions."""

    mode1: ModeContribution
    mode2: ModeContribution | None = None


@dataclass(frozen=True)
class ComplexAmplitude:
    """Time-evolved amplitude psi(x, t) as a (real, imag) pair."""

    real: Real
    imag: Real

    @property
    def density(self) -> Real:
        return self.real * self.real + self.imag * self.imag

    @property
    def magnitude(self) -> Real:
        return np.sqrt(self.density)
