"""
Game configuration presets
Each preset is a plain dict accepted by ``GameConfig.from_dict``
"""

# Classic rules: one enemy every 0.55s, boss after 10 waves, space to restart
CLASSIC_CONFIG = {
    "width": 300.0,
    "height": 500.0,
    "tick_rate": 60,
    "enemies_per_wave": 1,
    "wave_delay": 0.55,
    "boss_wave_period": 10,
    "bosses_per_wave": 1,
    "boss_hit_damage": 7.0,
    "restart_policy": "input-gated-on-death",
}

# Same rules, restarts immediately on death
AUTO_RESTART_CONFIG = {
    **CLASSIC_CONFIG,
    "restart_policy": "auto-on-death",
}

# Escalated mode: boss pairs, projectiles one-shot bosses
BOSS_RUSH_CONFIG = {
    **CLASSIC_CONFIG,
    "enemies_per_wave": 2,
    "bosses_per_wave": 2,
    "boss_hit_damage": 1000.0,
}

PRESETS = {
    "classic": CLASSIC_CONFIG,
    "auto": AUTO_RESTART_CONFIG,
    "boss_rush": BOSS_RUSH_CONFIG,
}

# Headless batch settings
SIMULATE_CONFIG = {
    "n_episodes": 10,
    "max_steps": 3600,
    "ticks_per_step": 1,
    "log_dir": "./logs",
}


if __name__ == "__main__":
    for name, preset in PRESETS.items():
        print(f"{name:10} | " + ", ".join(f"{k}={v}" for k, v in preset.items()))
