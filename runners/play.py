"""
Play the shooter in an arcade window

Controls: WASD / arrow keys to move, space to fire (and restart after game over)

Usage:
    python -m runners.play --preset classic
"""

import argparse
import logging

from space_shooter import GameConfig, Simulation
from runners.configs.shooter_config import PRESETS


def main():
    parser = argparse.ArgumentParser(description="Play the space shooter")
    parser.add_argument("--preset", type=str, default="classic", choices=sorted(PRESETS),
                        help="Config preset")
    parser.add_argument("--restart", type=str, default=None,
                        choices=["auto-on-death", "input-gated-on-death"],
                        help="Override the preset's restart policy")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for enemy spawns")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    preset = dict(PRESETS[args.preset])
    if args.restart:
        preset["restart_policy"] = args.restart
    sim = Simulation(GameConfig.from_dict(preset), seed=args.seed)

    # Imported here so the rest of the package works without a display
    from space_shooter.window import run_window
    run_window(sim)

    print(f"High score this run: {sim.high_score}")


if __name__ == "__main__":
    main()
