"""
Collision detection and resolution

Every ordered pair of distinct bodies is tested once per tick with a
center/half-extent AABB check. Rules are looked up by the roles of the pair,
so (A, B) and (B, A) resolve independently.

The scan is sequential over a snapshot of the registry taken when the pass
starts: a health change from an earlier pair is visible to later pairs in the
same pass. Kills are credited only on the hit that takes a body from alive to
dead, so extra hits on an already-dead body never count twice.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional, Tuple, TYPE_CHECKING

from .config import BOSS_CONTACT_DAMAGE, ENEMY_CONTACT_DAMAGE, ENEMY_HIT_DAMAGE
from .entities import Body, BodyKind
from .utils import aabb_overlap

if TYPE_CHECKING:
    from .simulation import Session

logger = logging.getLogger(__name__)

Rule = Callable[[Body, Body, "Session"], None]


def bodies_overlap(b1: Body, b2: Body) -> bool:
    hw1, hh1 = b1.half_size
    hw2, hh2 = b2.half_size
    return aabb_overlap(b1.x, b1.y, hw1, hh1, b2.x, b2.y, hw2, hh2)


def _damage(body: Body, amount: float) -> bool:
    """Apply damage. Returns True if this hit killed the body."""
    was_alive = not body.is_dead()
    body.health -= amount
    return was_alive and body.is_dead()


def player_hit_by_enemy(player: Body, enemy: Body, session: "Session"):
    _damage(player, ENEMY_CONTACT_DAMAGE)


def player_hit_by_boss(player: Body, boss: Body, session: "Session"):
    _damage(player, BOSS_CONTACT_DAMAGE)


def enemy_hit(enemy: Body, other: Body, session: "Session"):
    killed = _damage(enemy, ENEMY_HIT_DAMAGE)
    if enemy.is_dead():
        session.registry.remove(enemy)
    if killed:
        session.stats.enemies_killed += 1
        logger.debug("Enemy %d destroyed by %s %d", enemy.id, other.kind.value, other.id)


def boss_hit_by_projectile(boss: Body, projectile: Body, session: "Session"):
    killed = _damage(boss, session.config.boss_hit_damage)
    if boss.is_dead():
        session.registry.remove(boss)
        if killed:
            session.stats.enemies_killed += 1
            session.stats.bosses_killed += 1
            logger.debug("Boss %d destroyed by projectile %d", boss.id, projectile.id)
    else:
        # the projectile is consumed unless its hit finished the boss
        session.registry.remove(projectile)


COLLISION_RULES: Dict[Tuple[BodyKind, BodyKind], Rule] = {
    (BodyKind.PLAYER, BodyKind.ENEMY): player_hit_by_enemy,
    (BodyKind.PLAYER, BodyKind.BOSS): player_hit_by_boss,
    (BodyKind.ENEMY, BodyKind.PLAYER): enemy_hit,
    (BodyKind.ENEMY, BodyKind.PROJECTILE): enemy_hit,
    (BodyKind.BOSS, BodyKind.PROJECTILE): boss_hit_by_projectile,
}


class CollisionHandler:
    """All-pairs collision pass over the registry"""

    def __init__(self, rules: Optional[Dict[Tuple[BodyKind, BodyKind], Rule]] = None):
        self.rules = COLLISION_RULES if rules is None else rules

    def update(self, session: "Session") -> int:
        """Resolve one tick of collisions. Returns the number of rules applied."""
        bodies = session.registry.bodies()
        applied = 0
        for e1 in bodies:
            for e2 in bodies:
                if e1 is e2:
                    continue
                rule = self.rules.get((e1.kind, e2.kind))
                if rule is None:
                    continue
                if bodies_overlap(e1, e2):
                    rule(e1, e2, session)
                    applied += 1
        return applied
