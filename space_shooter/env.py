"""
ShooterEnv - gymnasium wrapper around the arcade shooter simulation
--------------------------------------------------------------------
- One gym step consumes ``ticks_per_step`` fixed simulation ticks
- Action space MultiDiscrete([3, 3, 2]): move_x (-1/0/+1), move_y (-1/0/+1), fire
- Vector observation: player state + K nearest enemies/bosses
- Episode terminates when the player dies, truncates at ``max_steps``

Install:
    pip install gymnasium arcade numpy
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, List, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .config import DEFAULT_HEALTH, GameConfig, RestartPolicy
from .entities import Body, BodyKind
from .simulation import Session, Simulation
from .utils import clamp

# Reward shaping
R_KILL = 1.0
R_BOSS_KILL = 5.0
R_DAMAGE = 1.0  # per full health bar lost
R_SHOT = 0.01
R_TIME = 0.001  # survival bonus per step
R_DEATH = 5.0


class ShooterEnv(gym.Env):
    """Vertical shooter environment backed by ``Simulation``"""

    metadata = {"render_modes": ["human"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        config: Optional[GameConfig] = None,
        max_steps: int = 3600,  # 60s at 60 ticks/s
        ticks_per_step: int = 1,
        k_hostiles: int = 5,
    ):
        super().__init__()

        assert render_mode is None or render_mode in self.metadata["render_modes"]
        if ticks_per_step < 1:
            raise ValueError("ticks_per_step must be >= 1")

        self.render_mode = render_mode
        # The environment ends episodes itself; never restart behind its back
        base = config if config is not None else GameConfig()
        self.config = replace(base, restart_policy=RestartPolicy.INPUT_GATED_ON_DEATH)
        self.max_steps = max_steps
        self.ticks_per_step = ticks_per_step
        self.k_hostiles = k_hostiles

        self.action_space = spaces.MultiDiscrete([3, 3, 2])

        # Player: pos(2) health(1) fire readiness(1)
        # Each hostile: rel pos(2) is_boss(1) health(1)
        obs_dim = 4 + self.k_hostiles * 4
        self.observation_space = spaces.Box(low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32)

        self.sim: Optional[Simulation] = None
        self._session: Optional[Session] = None
        self._step_count = 0
        self._window = None

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)

        sim_seed = seed if seed is not None else int(self.np_random.integers(0, 2**31 - 1))
        self.sim = Simulation(self.config, seed=sim_seed)
        self._session = self.sim.session
        self._step_count = 0
        if self._window is not None:
            self._window.attach(self.sim)

        return self._get_obs(), self._get_info()

    def step(self, action):
        if self.sim is None:
            raise RuntimeError("Call reset() before step()")
        action = np.asarray(action, dtype=np.int64)
        if not self.action_space.contains(action):
            raise ValueError(f"Invalid action {action!r}")

        controls = self.sim.controls
        controls.move_x = int(action[0]) - 1
        controls.move_y = int(action[1]) - 1
        controls.action_1 = bool(action[2])

        session = self._session
        stats = session.stats
        before = (stats.enemies_killed, stats.bosses_killed, stats.projectiles_fired, session.player.health)

        terminated = False
        for _ in range(self.ticks_per_step):
            if self.sim.step():
                terminated = True
                break

        self._step_count += 1
        truncated = not terminated and self._step_count >= self.max_steps

        reward = self._compute_reward(before, terminated)

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def _compute_reward(self, before, died: bool) -> float:
        kills0, boss_kills0, shots0, health0 = before
        stats = self._session.stats
        player = self._session.player

        boss_kills = stats.bosses_killed - boss_kills0
        kills = stats.enemies_killed - kills0 - boss_kills
        shots = stats.projectiles_fired - shots0
        damage = max(0.0, health0 - player.health) / DEFAULT_HEALTH

        reward = R_KILL * kills + R_BOSS_KILL * boss_kills
        reward -= R_DAMAGE * damage
        reward -= R_SHOT * shots
        reward += R_TIME
        if died:
            reward -= R_DEATH
        return float(reward)

    # ----------------------------
    # Observation / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        cfg = self.config
        player = self._session.player

        readiness = player.time_since_fired / cfg.fire_cooldown if cfg.fire_cooldown > 0 else 1.0
        obs_parts: List[float] = [
            player.x / cfg.width * 2 - 1,
            player.y / cfg.height * 2 - 1,
            clamp(player.health / DEFAULT_HEALTH, 0, 1) * 2 - 1,
            clamp(readiness, 0, 1) * 2 - 1,
        ]

        hostiles = sorted(
            self._session.registry.of_kind(BodyKind.ENEMY, BodyKind.BOSS),
            key=lambda b: (b.x - player.x) ** 2 + (b.y - player.y) ** 2,
        )
        for i in range(self.k_hostiles):
            if i < len(hostiles):
                obs_parts += self._hostile_features(player, hostiles[i])
            else:
                obs_parts += [0.0, 0.0, 0.0, 0.0]

        return np.array(obs_parts, dtype=np.float32)

    def _hostile_features(self, player: Body, hostile: Body) -> List[float]:
        cfg = self.config
        max_health = cfg.boss_health if hostile.kind is BodyKind.BOSS else DEFAULT_HEALTH
        return [
            clamp((hostile.x - player.x) / cfg.width, -1, 1),
            clamp((hostile.y - player.y) / cfg.height, -1, 1),
            1.0 if hostile.kind is BodyKind.BOSS else -1.0,
            clamp(hostile.health / max_health, 0, 1) * 2 - 1,
        ]

    def _get_info(self) -> Dict[str, Any]:
        stats = self._session.stats
        return {
            "health": self._session.player.health,
            "score": stats.score,
            "enemies_killed": stats.enemies_killed,
            "bosses_killed": stats.bosses_killed,
            "enemies_spawned": stats.enemies_spawned,
            "bosses_spawned": stats.bosses_spawned,
            "time_alive": stats.time_alive,
            "num_bodies": len(self._session.registry),
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering
    # ----------------------------

    def render(self):
        if self.render_mode != "human" or self.sim is None:
            return None

        if self._window is None:
            # arcade needs a display; only pull it in when a window is wanted
            from .window import ShooterWindow
            self._window = ShooterWindow(self.sim, drive_clock=False)

        self._window.dispatch_events()
        self._window.on_draw()
        self._window.flip()
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None
