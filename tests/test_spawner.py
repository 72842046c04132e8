"""Tests for the enemy wave spawner."""

import pytest

from space_shooter import BodyKind, EnemySpawner, GameConfig, Simulation

def run_waves(spawner, session, waves, dt=0.25, delay=1.0):
    """Advance exactly ``waves`` wave periods and return the bodies spawned per wave."""
    per_wave = []
    steps = int(delay / dt)
    for _ in range(waves):
        spawned = []
        for _ in range(steps):
            spawned += spawner.update(dt, session)
        per_wave.append(spawned)
    return per_wave

class TestEnemySpawner:
    def test_no_spawn_before_delay(self, session):
        spawner = EnemySpawner(enemies_per_wave=3, wave_delay=1.0)
        for _ in range(3):
            assert spawner.update(0.25, session) == []
        assert spawner.time_since_spawn == pytest.approx(0.75)

    def test_wave_fires_and_resets_timer(self, session):
        spawner = EnemySpawner(enemies_per_wave=3, wave_delay=1.0)
        for _ in range(3):
            spawner.update(0.25, session)

        spawned = spawner.update(0.25, session)

        assert len(spawned) == 3
        assert all(b.kind is BodyKind.ENEMY for b in spawned)
        assert all(b in session.registry for b in spawned)
        assert spawner.time_since_spawn == 0.0
        assert session.stats.enemies_spawned == 3

    def test_cadence_over_regular_waves(self, session):
        spawner = EnemySpawner(enemies_per_wave=2, wave_delay=1.0, boss_wave_period=10)

        waves = run_waves(spawner, session, 7)

        assert [len(w) for w in waves] == [2] * 7
        assert session.stats.enemies_spawned == 14
        assert session.stats.bosses_spawned == 0
        assert not spawner.boss_due

    def test_boss_replaces_wave_after_period(self, session):
        spawner = EnemySpawner(enemies_per_wave=2, wave_delay=1.0, boss_wave_period=10)

        run_waves(spawner, session, 10)
        assert spawner.boss_due
        assert session.stats.enemies_spawned == 20

        boss_wave = run_waves(spawner, session, 1)[0]

        assert [b.kind for b in boss_wave] == [BodyKind.BOSS]
        assert not spawner.boss_due
        assert session.stats.bosses_spawned == 1
        assert session.stats.enemies_spawned == 20

    def test_cycle_repeats(self, session):
        spawner = EnemySpawner(enemies_per_wave=1, wave_delay=1.0, boss_wave_period=10)

        waves = run_waves(spawner, session, 33)
        kinds = [w[0].kind for w in waves]

        boss_waves = [i + 1 for i, k in enumerate(kinds) if k is BodyKind.BOSS]
        assert boss_waves == [11, 22, 33]
        assert session.stats.enemies_spawned == 30
        assert session.stats.bosses_spawned == 3

    def test_boss_pairs(self, session):
        spawner = EnemySpawner(enemies_per_wave=1, wave_delay=1.0, boss_wave_period=1, bosses_per_wave=2)

        waves = run_waves(spawner, session, 2)

        assert [b.kind for b in waves[1]] == [BodyKind.BOSS, BodyKind.BOSS]
        assert session.stats.bosses_spawned == 2

    def test_spawn_positions_in_world(self, session, config):
        spawner = EnemySpawner(enemies_per_wave=50, wave_delay=1.0)
        spawned = run_waves(spawner, session, 1)[0]

        xs = [b.x for b in spawned]
        assert all(0 <= x <= config.width for x in xs)
        assert all(b.y == 0 for b in spawned)
        assert len(set(xs)) > 1

    def test_cadence_at_tick_rate(self):
        """0.5s is exactly 30 ticks at 60 ticks/s; waves land on every 30th tick."""
        sim = Simulation(GameConfig(wave_delay=0.5, tick_rate=60), seed=0)

        wave_ticks = []
        for tick in range(1, 181):
            before = sim.session.stats.enemies_spawned
            sim.step()
            if sim.session.stats.enemies_spawned > before:
                wave_ticks.append(tick)

        assert wave_ticks == [30, 60, 90, 120, 150, 180]
        assert sim.session.stats.enemies_spawned == 6

    def test_from_config(self, config):
        spawner = EnemySpawner.from_config(config)
        assert spawner.enemies_per_wave == 1
        assert spawner.wave_delay == 0.55
        assert spawner.boss_wave_period == 10
        assert spawner.bosses_per_wave == 1
