"""
Enemy wave spawner
"""

from __future__ import annotations

import logging
from typing import List, TYPE_CHECKING

from .entities import Body, spawn_boss, spawn_enemy
from .utils import reached

if TYPE_CHECKING:
    from .simulation import Session

logger = logging.getLogger(__name__)


class EnemySpawner:
    """Timer-driven wave emitter.

    Each time ``wave_delay`` seconds have accumulated the timer resets to zero
    and one wave is emitted: ``enemies_per_wave`` regular enemies, or, when the
    boss flag is set, ``bosses_per_wave`` bosses instead. The flag is raised
    after every ``boss_wave_period`` regular waves and cleared by the boss wave.
    """

    def __init__(self, enemies_per_wave: int, wave_delay: float,
                 boss_wave_period: int = 10, bosses_per_wave: int = 1):
        self.enemies_per_wave = enemies_per_wave
        self.wave_delay = wave_delay
        self.boss_wave_period = boss_wave_period
        self.bosses_per_wave = bosses_per_wave

        self.time_since_spawn = 0.0
        self.boss_due = False
        self.wave_count = 0  # regular waves since the last boss flag
        self.waves_emitted = 0

    @classmethod
    def from_config(cls, config) -> "EnemySpawner":
        return cls(
            enemies_per_wave=config.enemies_per_wave,
            wave_delay=config.wave_delay,
            boss_wave_period=config.boss_wave_period,
            bosses_per_wave=config.bosses_per_wave,
        )

    def update(self, dt: float, session: "Session") -> List[Body]:
        """Advance the timer; returns the bodies spawned this tick (if any)"""
        self.time_since_spawn += dt
        if not reached(self.time_since_spawn, self.wave_delay):
            return []
        self.time_since_spawn = 0.0
        return self._emit_wave(session)

    def _emit_wave(self, session: "Session") -> List[Body]:
        spawned = []
        stats = session.stats
        self.waves_emitted += 1

        if self.boss_due:
            self.boss_due = False
            for _ in range(self.bosses_per_wave):
                spawned.append(spawn_boss(session.registry, session.config, session.rng))
                stats.bosses_spawned += 1
            logger.debug("Boss wave %d: %d boss(es)", self.waves_emitted, len(spawned))
            return spawned

        for _ in range(self.enemies_per_wave):
            spawned.append(spawn_enemy(session.registry, session.config, session.rng))
            stats.enemies_spawned += 1

        self.wave_count += 1
        if self.wave_count >= self.boss_wave_period:
            self.wave_count = 0
            self.boss_due = True
            logger.debug("Boss due after wave %d", self.waves_emitted)
        return spawned
