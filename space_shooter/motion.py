"""
Per-tick body updates, dispatched on the body's kind
"""

from __future__ import annotations

from typing import Callable, Dict, TYPE_CHECKING

from .entities import Body, BodyKind, spawn_projectile
from .utils import clamp, reached

if TYPE_CHECKING:
    from .simulation import Session


def _apply_velocity(body: Body, dt: float):
    body.x += body.vx * dt
    body.y += body.vy * dt


def _clip_to_world(body: Body, session: "Session"):
    body.x = clamp(body.x, 0.0, session.config.width)
    body.y = clamp(body.y, 0.0, session.config.height)


def update_base(body: Body, dt: float, session: "Session"):
    _apply_velocity(body, dt)
    _clip_to_world(body, session)


def update_player(body: Body, dt: float, session: "Session"):
    controls = body.controls

    # Diagonal input moves at speed * cos(45deg) on both axes
    if controls.move_x != 0 and controls.move_y != 0:
        body.x += controls.move_x * body.diag_speed
        body.y += controls.move_y * body.diag_speed
    else:
        body.x += controls.move_x * body.speed
        body.y += controls.move_y * body.speed

    update_base(body, dt, session)

    if body.is_dead():
        session.registry.remove(body)
        return

    body.time_since_fired += dt
    if controls.action_1 and reached(body.time_since_fired, session.config.fire_cooldown):
        body.time_since_fired = 0.0
        spawn_projectile(session.registry, session.config, body.x, body.y)
        session.stats.projectiles_fired += 1


def update_projectile(body: Body, dt: float, session: "Session"):
    body.y -= body.speed
    if body.y <= 0:
        session.registry.remove(body)
    update_base(body, dt, session)


def update_descending(body: Body, dt: float, session: "Session"):
    """Enemies and bosses fall at constant speed and leave through the bottom"""
    body.y += body.speed
    if body.y >= session.config.height:
        session.registry.remove(body)
    update_base(body, dt, session)


UPDATE_HANDLERS: Dict[BodyKind, Callable[[Body, float, "Session"], None]] = {
    BodyKind.PLAYER: update_player,
    BodyKind.PROJECTILE: update_projectile,
    BodyKind.ENEMY: update_descending,
    BodyKind.BOSS: update_descending,
}


def update_body(body: Body, dt: float, session: "Session"):
    UPDATE_HANDLERS.get(body.kind, update_base)(body, dt, session)
