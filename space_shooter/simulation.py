"""
Fixed-timestep simulation loop
------------------------------
- ``Session`` holds everything one game owns: registry, player, spawner, counters
- ``Simulation`` drives sessions with a fixed-timestep accumulator and handles
  game over, restart and the process-lifetime high score

Per tick: update every body -> resolve collisions -> flush removals ->
run the spawner -> terminal check.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, NamedTuple, Optional

import numpy as np

from .collision import CollisionHandler
from .config import GameConfig, KILL_SCORE, RestartPolicy
from .entities import Body, ControlState, Drawable, spawn_player
from .motion import update_body
from .registry import EntityRegistry
from .spawner import EnemySpawner
from .utils import make_rng, reached

logger = logging.getLogger(__name__)


@dataclass
class SessionStats:
    """Per-session counters, updated once per consumed tick"""
    enemies_spawned: int = 0
    enemies_killed: int = 0
    bosses_spawned: int = 0
    bosses_killed: int = 0
    projectiles_fired: int = 0
    alive_ticks: int = 0
    time_alive: float = 0.0
    score: int = 0

    def compute_score(self) -> int:
        return int(math.floor(KILL_SCORE * self.enemies_killed + self.time_alive))


@dataclass
class Session:
    """All mutable state of one game, passed into every per-tick operation"""
    config: GameConfig
    rng: np.random.Generator
    registry: EntityRegistry
    player: Body
    spawner: EnemySpawner
    collisions: CollisionHandler = field(default_factory=CollisionHandler)
    stats: SessionStats = field(default_factory=SessionStats)
    ticks: int = 0
    game_over: bool = False

    @classmethod
    def start(cls, config: GameConfig, rng: np.random.Generator,
              controls: Optional[ControlState] = None) -> "Session":
        registry = EntityRegistry()
        player = spawn_player(registry, config, controls)
        return cls(
            config=config,
            rng=rng,
            registry=registry,
            player=player,
            spawner=EnemySpawner.from_config(config),
        )


class HudState(NamedTuple):
    """Read-only scalars for the HUD collaborator"""
    tick_count: int
    score: int
    high_score: int
    time_alive: float
    enemies_spawned: int
    enemies_killed: int
    bosses_spawned: int
    bosses_killed: int
    game_over: bool


class Simulation:
    """Fixed-timestep driver for game sessions"""

    def __init__(self, config: Optional[GameConfig] = None, seed: Optional[int] = None):
        self.config = config if config is not None else GameConfig()
        self.rng = make_rng(seed)

        # Shared with every player this simulation creates; the input
        # collaborator writes here
        self.controls = ControlState()

        self.high_score = 0
        self.tick_count = 0
        self.sessions_played = 0

        self._last_time: Optional[float] = None
        self._leftover = 0.0

        self.session: Session = None  # type: ignore
        self.start()

    # ----------------------------
    # Session lifecycle
    # ----------------------------

    def start(self) -> Session:
        """Throw away the current session and begin a fresh one"""
        self.session = Session.start(self.config, self.rng, self.controls)
        self.sessions_played += 1
        logger.info("Session %d started (high score %d)", self.sessions_played, self.high_score)
        return self.session

    @property
    def player(self) -> Body:
        return self.session.player

    def _record_score(self, session: Session):
        if session.stats.score > self.high_score:
            logger.info("New high score: %d (was %d)", session.stats.score, self.high_score)
            self.high_score = session.stats.score

    def _should_restart(self) -> bool:
        if self.config.restart_policy is RestartPolicy.AUTO_ON_DEATH:
            return True
        return bool(self.controls.action_1)

    # ----------------------------
    # Ticking
    # ----------------------------

    def step(self) -> bool:
        """Consume exactly one fixed tick. Returns True if the player died on it."""
        s = self.session
        dt = self.config.tick_seconds

        for body in s.registry.bodies():
            update_body(body, dt, s)

        s.collisions.update(s)
        s.registry.flush()
        s.spawner.update(dt, s)

        s.ticks += 1
        self.tick_count += 1

        died = False
        if not s.game_over:
            if s.player.is_dead():
                s.game_over = True
                died = True
            else:
                # Seconds derived from the tick count so whole seconds stay exact
                s.stats.alive_ticks += 1
                s.stats.time_alive = s.stats.alive_ticks / self.config.tick_rate
            s.stats.score = s.stats.compute_score()
            if died:
                logger.info("Player died after %.2fs with score %d", s.stats.time_alive, s.stats.score)
                self._record_score(s)

        if s.game_over and self._should_restart():
            self.start()

        return died

    def accumulate(self, elapsed: float) -> int:
        """Add wall-clock time and consume as many whole ticks as it covers.

        Non-finite or negative ``elapsed`` is treated as zero. At most
        ``max_catchup_ticks`` ticks run per call; time beyond that is dropped.
        Returns the number of ticks consumed.
        """
        if not math.isfinite(elapsed) or elapsed < 0:
            logger.warning("Ignoring invalid elapsed time %r", elapsed)
            elapsed = 0.0

        self._leftover += elapsed
        tick = self.config.tick_seconds
        cap = self.config.max_catchup_ticks

        ticks = 0
        while reached(self._leftover, tick):
            if cap is not None and ticks >= cap:
                logger.warning("Catch-up limit of %d ticks reached, dropping %.3fs", cap, self._leftover)
                self._leftover = 0.0
                break
            self.step()
            self._leftover -= tick
            ticks += 1
        return ticks

    def advance(self, now: float) -> int:
        """Drive the loop from an absolute clock reading in seconds"""
        if not math.isfinite(now):
            logger.warning("Ignoring non-finite clock reading %r", now)
            return 0
        if self._last_time is None:
            self._last_time = now
            return 0
        elapsed = now - self._last_time
        self._last_time = now
        return self.accumulate(elapsed)

    @property
    def leftover(self) -> float:
        return self._leftover

    # ----------------------------
    # Collaborator views
    # ----------------------------

    def snapshot(self) -> List[Drawable]:
        return [body.drawable() for body in self.session.registry.bodies()]

    def hud(self) -> HudState:
        stats = self.session.stats
        return HudState(
            tick_count=self.tick_count,
            score=stats.score,
            high_score=self.high_score,
            time_alive=stats.time_alive,
            enemies_spawned=stats.enemies_spawned,
            enemies_killed=stats.enemies_killed,
            bosses_spawned=stats.bosses_spawned,
            bosses_killed=stats.bosses_killed,
            game_over=self.session.game_over,
        )

    def info(self) -> Dict[str, Any]:
        info = asdict(self.session.stats)
        info.update(
            health=self.player.health,
            num_bodies=len(self.session.registry),
            tick=self.tick_count,
            high_score=self.high_score,
            game_over=self.session.game_over,
        )
        return info
