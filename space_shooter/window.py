"""
Arcade front-end: draws the simulation, feeds keyboard input and drives the clock
"""

from __future__ import annotations

import arcade

from .controls import InputHandler
from .entities import BodyKind, Drawable
from .simulation import Simulation
from .utils import clamp

KEY_NAMES = {
    arcade.key.A: "left",
    arcade.key.LEFT: "left",
    arcade.key.D: "right",
    arcade.key.RIGHT: "right",
    arcade.key.W: "up",
    arcade.key.UP: "up",
    arcade.key.S: "down",
    arcade.key.DOWN: "down",
    arcade.key.SPACE: "space",
}


class ShooterWindow(arcade.Window):
    """Arcade window for playing or watching a ``Simulation``"""

    def __init__(self, sim: Simulation, drive_clock: bool = True, title: str = "Space Shooter"):
        super().__init__(int(sim.config.width), int(sim.config.height), title,
                         update_rate=sim.config.tick_seconds)
        self.drive_clock = drive_clock
        self.sim: Simulation = None  # type: ignore
        self.input: InputHandler = None  # type: ignore
        self.attach(sim)

        # Colors
        self.BG = (255, 255, 255)
        self.PLAYER_C = (0, 0, 0)
        self.ENEMY_C = (255, 0, 0)
        self.BOSS_C = (160, 0, 160)
        self.PROJECTILE_C = (0, 200, 0)
        self.VELOCITY_C = (0, 255, 0)
        self.HUD_C = (40, 40, 40)

    def attach(self, sim: Simulation):
        self.sim = sim
        self.input = InputHandler(sim.controls)

    # ----------------------------
    # Clock / input
    # ----------------------------

    def on_update(self, delta_time: float):
        if self.drive_clock:
            self.sim.accumulate(delta_time)

    def on_key_press(self, symbol: int, modifiers: int):
        name = KEY_NAMES.get(symbol)
        if name is not None:
            self.input.press(name, source=symbol)
        elif symbol == arcade.key.ESCAPE:
            self.close()

    def on_key_release(self, symbol: int, modifiers: int):
        name = KEY_NAMES.get(symbol)
        if name is not None:
            self.input.release(name, source=symbol)

    # ----------------------------
    # Drawing
    # ----------------------------

    def _sy(self, y: float) -> float:
        # Simulation y grows downward, arcade y grows upward
        return self.height - y

    def on_draw(self):
        self.clear()
        arcade.set_background_color(self.BG)

        for body in self.sim.snapshot():
            if body.kind is BodyKind.PLAYER:
                self._draw_triangle(body, self.PLAYER_C, pointing_up=True)
            elif body.kind is BodyKind.ENEMY:
                self._draw_triangle(body, self.ENEMY_C, pointing_up=False)
            elif body.kind is BodyKind.BOSS:
                self._draw_boss(body)
            else:
                self._draw_box(body, self.PROJECTILE_C)
            self._draw_velocity(body)

        self._draw_hud()

    def _draw_triangle(self, body: Drawable, color, pointing_up: bool):
        hw, hh = body.width / 2, body.height / 2
        x, y = body.x, self._sy(body.y)
        tip = hh if pointing_up else -hh
        arcade.draw_triangle_outline(x, y + tip, x + hw, y - tip, x - hw, y - tip, color)

    def _draw_box(self, body: Drawable, color):
        hw, hh = body.width / 2, body.height / 2
        x, y = body.x, self._sy(body.y)
        arcade.draw_lrbt_rectangle_filled(x - hw, x + hw, y - hh, y + hh, color)

    def _draw_boss(self, body: Drawable):
        hw, hh = body.width / 2, body.height / 2
        x, y = body.x, self._sy(body.y)
        arcade.draw_lrbt_rectangle_outline(x - hw, x + hw, y - hh, y + hh, self.BOSS_C, 2)

        # Health bar above the boss
        fill = clamp(body.health / self.sim.config.boss_health, 0, 1)
        top = y + hh + 6
        arcade.draw_lrbt_rectangle_filled(x - hw, x + hw, top - 3, top, (200, 200, 200))
        if fill > 0:
            arcade.draw_lrbt_rectangle_filled(x - hw, x - hw + body.width * fill, top - 3, top, self.BOSS_C)

    def _draw_velocity(self, body: Drawable):
        if body.vx == 0 and body.vy == 0:
            return
        x, y = body.x, self._sy(body.y)
        arcade.draw_line(x, y, x + body.vx / 10, y - body.vy / 10, self.VELOCITY_C)

    def _draw_hud(self):
        hud = self.sim.hud()
        lines = [
            f"loop count {hud.tick_count}",
            f"enemies killed {hud.enemies_killed}",
            f"time alive {hud.time_alive:.2f}",
            f"enemies spawned {hud.enemies_spawned}",
            f"bosses {hud.bosses_killed}/{hud.bosses_spawned}",
            f"score {hud.score}  high {hud.high_score}",
        ]
        for i, line in enumerate(lines):
            arcade.draw_text(line, 6, self.height - 14 - i * 12, self.HUD_C, 9)

        if hud.game_over:
            cx, cy = self.width / 2, self.height / 2
            arcade.draw_text("Game Over", cx, cy, self.HUD_C, 30, anchor_x="center")
            arcade.draw_text("press space to restart", cx, cy - 18, self.HUD_C, 12, anchor_x="center")


def run_window(sim: Simulation):
    """Open a window on ``sim`` and block until it is closed"""
    window = ShooterWindow(sim)
    arcade.run()
    return window
