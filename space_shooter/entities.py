"""
Game entity dataclasses

Every simulated body is a single ``Body`` record tagged with a ``BodyKind``.
Variant-specific fields (player controls, fire timer, vertical speed) live on
the same record; behaviour is looked up by tag in ``motion`` and ``collision``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional, Tuple, TYPE_CHECKING

import numpy as np

from .config import DEFAULT_HEALTH, GameConfig

if TYPE_CHECKING:
    from .registry import EntityRegistry


class BodyKind(str, Enum):
    PLAYER = "player"
    PROJECTILE = "projectile"
    ENEMY = "enemy"
    BOSS = "boss"


@dataclass
class ControlState:
    """Control vector written by the input collaborator, read by the player"""
    move_x: int = 0
    move_y: int = 0
    action_1: bool = False


@dataclass
class Body:
    """Any simulated body: position, velocity, size, health"""
    id: int
    kind: BodyKind
    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    width: float = 10.0
    height: float = 10.0
    health: float = DEFAULT_HEALTH
    speed: float = 0.0  # units per tick

    # Player only
    controls: Optional[ControlState] = None
    diag_speed: float = 0.0
    time_since_fired: float = 0.0

    @property
    def half_size(self) -> Tuple[float, float]:
        return self.width / 2, self.height / 2

    def is_dead(self) -> bool:
        return self.health <= 0

    def drawable(self) -> "Drawable":
        return Drawable(
            id=self.id,
            kind=self.kind,
            x=self.x,
            y=self.y,
            width=self.width,
            height=self.height,
            health=self.health,
            vx=self.vx,
            vy=self.vy,
        )


class Drawable(NamedTuple):
    """Read-only per-body snapshot handed to the render collaborator"""
    id: int
    kind: BodyKind
    x: float
    y: float
    width: float
    height: float
    health: float
    vx: float
    vy: float


# ----------------------------
# Variant constructors
# ----------------------------

def spawn_player(registry: "EntityRegistry", config: GameConfig,
                 controls: Optional[ControlState] = None) -> Body:
    x, y = config.player_spawn
    body = Body(
        id=registry.next_id(),
        kind=BodyKind.PLAYER,
        x=x,
        y=y,
        width=config.body_size,
        height=config.body_size,
        speed=config.player_speed,
        controls=controls if controls is not None else ControlState(),
        diag_speed=config.player_speed * math.cos(math.pi / 4),
    )
    return registry.add(body)


def spawn_projectile(registry: "EntityRegistry", config: GameConfig, x: float, y: float) -> Body:
    body = Body(
        id=registry.next_id(),
        kind=BodyKind.PROJECTILE,
        x=x,
        y=y,
        width=config.body_size,
        height=config.body_size,
        speed=config.projectile_speed,
    )
    return registry.add(body)


def spawn_enemy(registry: "EntityRegistry", config: GameConfig, rng: np.random.Generator) -> Body:
    # Enemies enter along the top edge at a random x
    body = Body(
        id=registry.next_id(),
        kind=BodyKind.ENEMY,
        x=float(rng.uniform(0.0, config.width)),
        y=0.0,
        width=config.body_size,
        height=config.body_size,
        speed=config.enemy_speed,
    )
    return registry.add(body)


def spawn_boss(registry: "EntityRegistry", config: GameConfig, rng: np.random.Generator) -> Body:
    body = Body(
        id=registry.next_id(),
        kind=BodyKind.BOSS,
        x=float(rng.uniform(0.0, config.width)),
        y=0.0,
        width=config.boss_size,
        height=config.boss_size,
        health=config.boss_health,
        speed=config.boss_speed,
    )
    return registry.add(body)
