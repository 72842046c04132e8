"""Tests for configuration validation and presets."""

import pytest

from space_shooter import GameConfig, RestartPolicy
from runners.configs.shooter_config import PRESETS


class TestGameConfig:
    def test_defaults(self):
        config = GameConfig()
        assert (config.width, config.height) == (300.0, 500.0)
        assert config.tick_seconds == pytest.approx(1 / 60)
        assert config.player_spawn == (150.0, 400.0)
        assert config.boss_wave_period == 10
        assert config.restart_policy is RestartPolicy.INPUT_GATED_ON_DEATH

    def test_restart_policy_from_string(self):
        config = GameConfig(restart_policy="auto-on-death")
        assert config.restart_policy is RestartPolicy.AUTO_ON_DEATH

    @pytest.mark.parametrize("kwargs", [
        {"width": 0},
        {"height": -5},
        {"tick_rate": 0},
        {"wave_delay": 0},
        {"enemies_per_wave": -1},
        {"boss_wave_period": 0},
        {"bosses_per_wave": 0},
        {"player_speed": float("nan")},
        {"max_catchup_ticks": 0},
        {"restart_policy": "never"},
    ])
    def test_invalid_values_rejected(self, kwargs):
        with pytest.raises(ValueError):
            GameConfig(**kwargs)

    def test_from_dict_rejects_unknown_keys(self):
        with pytest.raises(ValueError, match="Unknown config keys"):
            GameConfig.from_dict({"width": 100.0, "gravity": 9.8})

    @pytest.mark.parametrize("name", sorted(PRESETS))
    def test_presets_load(self, name):
        config = GameConfig.from_dict(PRESETS[name])
        assert config.width == 300.0

    def test_boss_rush_preset(self):
        config = GameConfig.from_dict(PRESETS["boss_rush"])
        assert config.bosses_per_wave == 2
        assert config.boss_hit_damage >= config.boss_health
        assert config.restart_policy is RestartPolicy.INPUT_GATED_ON_DEATH
