"""
Configuration for the Side Shooter round, environment and evaluation runs
Several reward shaping settings for comparing scripted/random policies
"""

from sideshooter.shooter_env import DEFAULT_REWARD_CONFIG

# Round parameters (shared by the interactive game and the environment)
ROUND_CONFIG = {
    "width": 800,
    "height": 600,
    "start_life": 5,
    "kill_reward": 5,   # score per enemy destroyed
}

# Environment parameters
ENV_CONFIG = {
    # "render_mode": None,  # "human" opens an arcade window, much slower
    **ROUND_CONFIG,
    "max_steps": 3600,  # 60 seconds at 60 FPS
    "k_enemies": 3,
}

# ==============================================================================
# REWARD SHAPING CONFIGURATIONS
# ==============================================================================

# Reward Config 1: BASELINE (balanced)
REWARD_CONFIG_BASELINE = {
    **DEFAULT_REWARD_CONFIG,  # ShooterEnv defaults; keep a single source
    "description": "Balanced reward shaping",
}

# Reward Config 2: DEFENSIVE (every breach hurts)
REWARD_CONFIG_DEFENSIVE = {
    "name": "defensive",
    "description": "Protect the left edge - breaches and game over cost much more",
    "R_KILL": 0.5,
    "R_BREACH": 3.0,     # MUCH higher breach penalty
    "R_SHOT": 0.0,       # Free ammunition
    "R_TIME": 0.002,
    "R_DEATH": 10.0,
}

# Reward Config 3: SHARPSHOOTER (kills matter, wasted shots cost)
REWARD_CONFIG_SHARPSHOOTER = {
    "name": "sharpshooter",
    "description": "Reward kills, punish missed shots",
    "R_KILL": 2.0,
    "R_BREACH": 0.5,
    "R_SHOT": 0.1,       # MUCH higher shot cost
    "R_TIME": 0.0,
    "R_DEATH": 3.0,
}

# All reward configs for easy iteration
REWARD_CONFIGS = {
    "baseline": REWARD_CONFIG_BASELINE,
    "defensive": REWARD_CONFIG_DEFENSIVE,
    "sharpshooter": REWARD_CONFIG_SHARPSHOOTER,
}

# ==============================================================================
# EVALUATION SETTINGS
# ==============================================================================

EVAL_CONFIG = {
    "seed": 42,
    "n_episodes": 10,
    "policies": ["random", "scripted"],
    "reward_config": "baseline",
}


def get_reward_config(name: str) -> dict:
    """Look up a reward config by name"""
    if name not in REWARD_CONFIGS:
        raise ValueError(
            f"Unknown reward config: {name} (choose from {', '.join(REWARD_CONFIGS)})"
        )
    return REWARD_CONFIGS[name]


# Print config summary when run directly
if __name__ == "__main__":
    print("Environment:")
    for key, value in ENV_CONFIG.items():
        print(f"  {key:12} = {value}")
    print("\nReward configs:")
    print("-" * 70)
    for name, cfg in REWARD_CONFIGS.items():
        print(f"  {name:14} | {cfg['description']}")
    print("-" * 70)
