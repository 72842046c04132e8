"""Tests for the gymnasium environment wrapper."""

import numpy as np
import pytest

from space_shooter import GameConfig, RestartPolicy, ShooterEnv
from space_shooter.env import R_DEATH


@pytest.fixture
def env():
    env = ShooterEnv(max_steps=20)
    yield env
    env.close()


class TestShooterEnv:
    def test_reset_observation(self, env):
        obs, info = env.reset(seed=0)

        assert obs.shape == (24,)
        assert obs.dtype == np.float32
        assert env.observation_space.contains(obs)
        assert info["health"] == 100
        assert info["step"] == 0

    def test_never_auto_restarts(self):
        env = ShooterEnv(config=GameConfig(restart_policy=RestartPolicy.AUTO_ON_DEATH))
        assert env.config.restart_policy is RestartPolicy.INPUT_GATED_ON_DEATH

    def test_step_before_reset(self, env):
        with pytest.raises(RuntimeError):
            env.step([1, 1, 0])

    def test_invalid_action(self, env):
        env.reset(seed=0)
        with pytest.raises(ValueError):
            env.step([3, 1, 0])

    def test_step_moves_player(self, env):
        env.reset(seed=0)

        obs, reward, terminated, truncated, info = env.step([2, 1, 0])

        assert env.sim.player.x == pytest.approx(155.0)
        assert not terminated
        assert not truncated
        assert reward > 0
        assert env.observation_space.contains(obs)

    def test_truncates_at_max_steps(self, env):
        env.reset(seed=0)
        truncated = False
        steps = 0
        while not truncated:
            _, _, terminated, truncated, _ = env.step([1, 1, 0])
            assert not terminated
            steps += 1
        assert steps == 20

    def test_terminates_on_death(self, env):
        env.reset(seed=0)
        env.sim.player.health = 0

        obs, reward, terminated, truncated, info = env.step([1, 1, 1])

        assert terminated
        assert not truncated
        assert reward < -R_DEATH + 1
        assert info["health"] == 0

    def test_seeded_resets_are_reproducible(self):
        actions = [np.array([i % 3, (i // 3) % 3, i % 2]) for i in range(200)]
        results = []
        for _ in range(2):
            env = ShooterEnv(max_steps=500)
            obs, _ = env.reset(seed=123)
            trace = [obs]
            for action in actions:
                obs, reward, terminated, truncated, _ = env.step(action)
                trace.append(obs)
                if terminated:
                    break
            results.append(np.stack(trace))
            env.close()
        np.testing.assert_array_equal(results[0], results[1])

    def test_hostiles_observed(self):
        env = ShooterEnv(config=GameConfig(wave_delay=0.05), k_hostiles=3)
        obs, _ = env.reset(seed=1)
        for _ in range(10):
            obs, *_ = env.step([1, 1, 0])

        # First hostile slot filled with an enemy marker
        assert obs[4 + 2] == -1.0
        assert env.observation_space.contains(obs)
        env.close()
