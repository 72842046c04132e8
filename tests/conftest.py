"""Pytest configuration and fixtures for shooter tests."""

import pytest

from space_shooter import GameConfig, RestartPolicy, Simulation


@pytest.fixture
def config():
    """Default 300x500 world at 60 ticks/s."""
    return GameConfig()


@pytest.fixture
def auto_config():
    return GameConfig(restart_policy=RestartPolicy.AUTO_ON_DEATH)


@pytest.fixture
def sim(config):
    """Fresh, deterministically seeded simulation."""
    return Simulation(config, seed=42)


@pytest.fixture
def session(sim):
    return sim.session
