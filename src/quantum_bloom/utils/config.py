"""Configuration loading and validation."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from quantum_bloom.knowledge.state_store import StudioState
from quantum_bloom.types.system import QuantumSystemKind, SystemParameters

# Default config directory relative to package root
_PACKAGE_ROOT = Path(__file__).resolve().parent.parent.parent.parent
_CONFIGS_DIR = _PACKAGE_ROOT / "configs"


class StudioDefaults(BaseModel):
    """Initial control values, as raw slider positions."""

    system: QuantumSystemKind = QuantumSystemKind.PARTICLE_IN_BOX
    n: int = 1
    L: float = 10.0
    weight: float = 0.5
    time: float = 0.0
    show_grid: bool = False

    def to_state(self) -> StudioState:
        params = SystemParameters.from_controls(
            kind=self.system,
            quantum_number=self.n,
            scale=self.L,
            weight=self.weight,
            time=self.time,
        )
        return StudioState(params=params, show_grid=self.show_grid)


class QuantumBloomConfig(BaseModel):
    """Top-level configuration."""

    output_dir: str = "output"
    log_level: str = "INFO"
    dpi: int = 150
    marker_x: float = 0.0
    defaults: StudioDefaults = Field(default_factory=StudioDefaults)


def load_config(path: str | Path | None = None) -> QuantumBloomConfig:
    """Load config from a YAML file.

    Falls back to configs/default.yaml if no path is given.
    """
    if path is None:
        path = _CONFIGS_DIR / "default.yaml"
    path = Path(path)

    if not path.exists():
        return QuantumBloomConfig()

    with open(path) as f:
        raw: dict[str, Any] = yaml.safe_load(f) or {}

    return QuantumBloomConfig(**raw)
