"""Tests for the configuration system."""

import yaml

from quantum_bloom.knowledge.state_store import StudioState
from quantum_bloom.types.system import QuantumSystemKind
from quantum_bloom.utils.config import (
    QuantumBloomConfig,
    StudioDefaults,
    load_config,
)


class TestStudioDefaults:
    def test_defaults(self):
        defaults = StudioDefaults()
        assert defaults.system == QuantumSystemKind.PARTICLE_IN_BOX
        assert defaults.n == 1
        assert defaults.L == 10.0
        assert defaults.weight == 0.5
        assert defaults.time == 0.0
        assert defaults.show_grid is False

    def test_to_state(self):
        state = StudioDefaults(system="Superposition (n=1,2)", L=8.0, show_grid=True).to_state()
        assert isinstance(state, StudioState)
        assert state.params.kind == QuantumSystemKind.SUPERPOSITION_12
        assert state.params.scale == 8.0
        assert state.show_grid is True

    def test_to_state_clamps(self):
        state = StudioDefaults(n=25, L=2.0).to_state()
        assert state.params.quantum_number == 10
        assert state.params.scale == 5.0


class TestQuantumBloomConfig:
    def test_defaults(self):
        config = QuantumBloomConfig()
        assert config.output_dir == "output"
        assert config.log_level == "INFO"
        assert isinstance(config.defaults, StudioDefaults)

    def test_fields(self):
        assert set(QuantumBloomConfig.model_fields) == {
            "output_dir", "log_level", "dpi", "marker_x", "defaults",
        }


class TestLoadConfig:
    def test_load_default_config(self):
        config = load_config()
        assert isinstance(config, QuantumBloomConfig)
        assert config.log_level == "INFO"
        assert config.defaults.system == QuantumSystemKind.PARTICLE_IN_BOX

    def test_load_nonexistent_returns_defaults(self, tmp_path):
        config = load_config(tmp_path / "nonexistent.yaml")
        assert config.output_dir == "output"

    def test_load_from_yaml(self, tmp_path):
        yaml_path = tmp_path / "test.yaml"
        yaml_path.write_text(yaml.dump({
            "output_dir": "custom_output",
            "dpi": 72,
            "defaults": {"system": "Quantum Harmonic Oscillator", "n": 3},
        }))
        config = load_config(yaml_path)
        assert config.output_dir == "custom_output"
        assert config.dpi == 72
        assert config.defaults.system == QuantumSystemKind.HARMONIC_OSCILLATOR
        assert config.defaults.n == 3

    def test_empty_yaml(self, tmp_path):
        yaml_path = tmp_path / "empty.yaml"
        yaml_path.write_text("")
        assert load_config(yaml_path) == QuantumBloomConfig()
