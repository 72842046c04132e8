"""
Simulation configuration
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Dict, Optional


class RestartPolicy(str, Enum):
    """What happens after the player dies"""
    AUTO_ON_DEATH = "auto-on-death"
    INPUT_GATED_ON_DEATH = "input-gated-on-death"


# Collision rule table damage (fixed, not tunable)
ENEMY_CONTACT_DAMAGE = 25.0
BOSS_CONTACT_DAMAGE = 100.0
ENEMY_HIT_DAMAGE = 100.0

DEFAULT_HEALTH = 100.0
KILL_SCORE = 30


@dataclass
class GameConfig:
    """World, timing and spawner settings, validated once at session start"""

    # World
    width: float = 300.0
    height: float = 500.0

    # Timing
    tick_rate: int = 60  # fixed ticks per second
    max_catchup_ticks: Optional[int] = 240  # None = catch up without limit

    # Spawner
    enemies_per_wave: int = 1
    wave_delay: float = 0.55  # seconds
    boss_wave_period: int = 10  # regular waves before a boss wave
    bosses_per_wave: int = 1

    # Bodies (speeds are units per tick)
    body_size: float = 10.0
    boss_size: float = 40.0
    boss_health: float = 1000.0
    boss_hit_damage: float = 7.0
    player_speed: float = 5.0
    player_spawn_offset: float = 100.0  # distance above the bottom edge
    projectile_speed: float = 10.0
    enemy_speed: float = 2.0
    boss_speed: float = 1.0
    fire_cooldown: float = 0.1  # seconds

    restart_policy: RestartPolicy = field(default=RestartPolicy.INPUT_GATED_ON_DEATH)

    def __post_init__(self):
        self.restart_policy = RestartPolicy(self.restart_policy)

        for name in ("width", "height", "body_size", "boss_size", "boss_health", "wave_delay"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise ValueError(f"{name} must be a positive finite number, got {value!r}")

        for name in ("player_speed", "projectile_speed", "enemy_speed", "boss_speed",
                     "fire_cooldown", "boss_hit_damage", "player_spawn_offset"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"{name} must be a non-negative finite number, got {value!r}")

        if self.tick_rate <= 0:
            raise ValueError(f"tick_rate must be positive, got {self.tick_rate!r}")
        if self.enemies_per_wave < 0:
            raise ValueError(f"enemies_per_wave must be >= 0, got {self.enemies_per_wave!r}")
        if self.boss_wave_period < 1:
            raise ValueError(f"boss_wave_period must be >= 1, got {self.boss_wave_period!r}")
        if self.bosses_per_wave < 1:
            raise ValueError(f"bosses_per_wave must be >= 1, got {self.bosses_per_wave!r}")
        if self.max_catchup_ticks is not None and self.max_catchup_ticks < 1:
            raise ValueError(f"max_catchup_ticks must be >= 1 or None, got {self.max_catchup_ticks!r}")

    @property
    def tick_seconds(self) -> float:
        """Duration of one fixed tick"""
        return 1.0 / self.tick_rate

    @property
    def player_spawn(self):
        return self.width / 2, self.height - self.player_spawn_offset

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> "GameConfig":
        """Build a config from a preset dict, rejecting unknown keys"""
        known = {f.name for f in fields(cls)}
        unknown = set(values) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")
        return cls(**values)
