"""
Headless batch runner: plays episodes with a scripted policy and records metrics
Records per episode: score, kills, boss kills, survival time, length.
"""

import os
import csv
import argparse
import logging
from typing import Any, Callable, Dict, List, Optional

import numpy as np

from space_shooter import GameConfig, ShooterEnv
from runners.configs.shooter_config import PRESETS, SIMULATE_CONFIG

Policy = Callable[[ShooterEnv, np.ndarray, int], np.ndarray]

CSV_FIELDS = ["episode", "seed", "reward", "length", "score", "kills", "boss_kills",
              "time_alive", "died"]


def random_policy(env: ShooterEnv, obs: np.ndarray, step: int) -> np.ndarray:
    return env.action_space.sample()


def turret_policy(env: ShooterEnv, obs: np.ndarray, step: int) -> np.ndarray:
    """Stand still and fire continuously"""
    return np.array([1, 1, 1], dtype=np.int64)


def sweep_policy(env: ShooterEnv, obs: np.ndarray, step: int, period: int = 90) -> np.ndarray:
    """Strafe left and right across the screen while firing"""
    move_x = 2 if (step // period) % 2 == 0 else 0
    return np.array([move_x, 1, 1], dtype=np.int64)


POLICIES: Dict[str, Policy] = {
    "random": random_policy,
    "turret": turret_policy,
    "sweep": sweep_policy,
}


def run_episodes(
    config: GameConfig,
    policy: Policy,
    n_episodes: int = 10,
    seed: Optional[int] = None,
    max_steps: int = 3600,
    ticks_per_step: int = 1,
    csv_path: Optional[str] = None,
    verbose: int = 1,
) -> Dict[str, Any]:
    """
    Play ``n_episodes`` and summarize them

    Args:
        config: Game configuration
        policy: Callable (env, obs, step) -> action
        n_episodes: Number of episodes to play
        seed: Base seed; episode i uses seed + i
        max_steps: Truncation limit per episode
        ticks_per_step: Simulation ticks per env step
        csv_path: Optional CSV file for per-episode rows
        verbose: 0 silent, 1 per-episode lines
    """
    env = ShooterEnv(config=config, max_steps=max_steps, ticks_per_step=ticks_per_step)
    if seed is not None:
        env.action_space.seed(seed)

    rows: List[Dict[str, Any]] = []
    for episode in range(n_episodes):
        ep_seed = seed + episode if seed is not None else None
        obs, info = env.reset(seed=ep_seed)

        terminated = truncated = False
        total_reward = 0.0
        steps = 0
        while not (terminated or truncated):
            action = policy(env, obs, steps)
            obs, reward, terminated, truncated, info = env.step(action)
            total_reward += reward
            steps += 1

        row = {
            "episode": episode + 1,
            "seed": ep_seed,
            "reward": total_reward,
            "length": steps,
            "score": info["score"],
            "kills": info["enemies_killed"],
            "boss_kills": info["bosses_killed"],
            "time_alive": info["time_alive"],
            "died": bool(terminated),
        }
        rows.append(row)

        if verbose > 0:
            print(f"Episode {episode + 1}/{n_episodes}: "
                  f"Score = {row['score']}, Kills = {row['kills']}, "
                  f"Time alive = {row['time_alive']:.2f}s")

    env.close()

    if csv_path:
        write_csv(csv_path, rows)
        if verbose > 0:
            print(f"Saved {len(rows)} episodes to {csv_path}")

    return summarize(rows)


def write_csv(csv_path: str, rows: List[Dict[str, Any]]):
    directory = os.path.dirname(csv_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(csv_path, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        writer.writeheader()
        writer.writerows(rows)


def summarize(rows: List[Dict[str, Any]]) -> Dict[str, Any]:
    if not rows:
        return {}
    scores = [r["score"] for r in rows]
    return {
        "n_episodes": len(rows),
        "mean_score": float(np.mean(scores)),
        "std_score": float(np.std(scores)),
        "best_score": int(np.max(scores)),
        "mean_kills": float(np.mean([r["kills"] for r in rows])),
        "mean_time_alive": float(np.mean([r["time_alive"] for r in rows])),
        "death_rate": float(np.mean([r["died"] for r in rows])),
        "episodes": rows,
    }


def main():
    parser = argparse.ArgumentParser(description="Run headless shooter episodes")
    parser.add_argument("--preset", type=str, default="classic", choices=sorted(PRESETS))
    parser.add_argument("--policy", type=str, default="sweep", choices=sorted(POLICIES))
    parser.add_argument("--episodes", type=int, default=SIMULATE_CONFIG["n_episodes"])
    parser.add_argument("--max-steps", type=int, default=SIMULATE_CONFIG["max_steps"])
    parser.add_argument("--ticks-per-step", type=int, default=SIMULATE_CONFIG["ticks_per_step"])
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--log-dir", type=str, default=SIMULATE_CONFIG["log_dir"])
    parser.add_argument("--no-csv", action="store_true", help="Do not write a metrics CSV")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    config = GameConfig.from_dict(PRESETS[args.preset])
    csv_path = None if args.no_csv else os.path.join(args.log_dir, f"{args.preset}_{args.policy}_metrics.csv")

    summary = run_episodes(
        config,
        POLICIES[args.policy],
        n_episodes=args.episodes,
        seed=args.seed,
        max_steps=args.max_steps,
        ticks_per_step=args.ticks_per_step,
        csv_path=csv_path,
    )

    print("\n" + "=" * 50)
    print(f"Results ({summary['n_episodes']} episodes, policy={args.policy}, preset={args.preset}):")
    print(f"Mean Score: {summary['mean_score']:.1f} ± {summary['std_score']:.1f}")
    print(f"Best Score: {summary['best_score']}")
    print(f"Mean Kills: {summary['mean_kills']:.1f}")
    print(f"Mean Time Alive: {summary['mean_time_alive']:.2f}s")
    print(f"Death Rate: {summary['death_rate']:.0%}")
    print("=" * 50)


if __name__ == "__main__":
    main()
