"""Space shooter simulation kernel - fixed-timestep 2D arcade shooter"""

from .config import GameConfig, RestartPolicy
from .entities import Body, BodyKind, ControlState, Drawable
from .registry import EntityRegistry
from .collision import CollisionHandler
from .spawner import EnemySpawner
from .simulation import HudState, Session, SessionStats, Simulation
from .controls import InputHandler
from .env import ShooterEnv

__all__ = [
    "GameConfig",
    "RestartPolicy",
    "Body",
    "BodyKind",
    "ControlState",
    "Drawable",
    "EntityRegistry",
    "CollisionHandler",
    "EnemySpawner",
    "HudState",
    "Session",
    "SessionStats",
    "Simulation",
    "InputHandler",
    "ShooterEnv",
]
