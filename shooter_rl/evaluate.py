"""
Evaluation script for Side Shooter policies
Plays random and scripted policies through ShooterEnv and reports statistics.
"""

import argparse
import logging
import time
from typing import Callable, Optional

import numpy as np

from sideshooter import ShooterEnv
from shooter_rl.configs.shooter_config import ENV_CONFIG, EVAL_CONFIG, get_reward_config

logger = logging.getLogger(__name__)

Policy = Callable[[ShooterEnv], int]


def random_policy(env: ShooterEnv) -> int:
    """Uniformly random action"""
    return int(env.action_space.sample())


def scripted_policy(env: ShooterEnv) -> int:
    """
    Line up with the enemy closest to the left edge and fire once aligned.

    Reads the round directly rather than the observation vector, so it is a
    reference opponent rather than something a learner could imitate 1:1.
    """
    c = env.controller
    if c.enemies.is_empty():
        return 0

    target = min(c.enemies, key=lambda e: e.x)
    ship_mid = c.ship.y + c.ship.height / 2
    target_mid = target.y + target.height / 2
    offset = target_mid - ship_mid

    aligned = abs(offset) < target.height / 4
    ahead = target.x > c.ship.x + c.ship.width
    # Don't spam: only fire when no bullet is already in flight
    fire = aligned and ahead and c.bullets.is_empty()

    if offset < -c.ship.y_speed:
        return 4 if fire else 1
    if offset > c.ship.y_speed:
        return 5 if fire else 2
    return 3 if fire else 0


POLICIES = {
    "random": random_policy,
    "scripted": scripted_policy,
}


def evaluate_policy(
    policy: Policy,
    n_episodes: int = 10,
    seed: Optional[int] = None,
    render: bool = False,
    reward_config: Optional[dict] = None,
):
    """
    Evaluate a policy

    Args:
        policy: Callable mapping the env to an action
        n_episodes: Number of episodes to evaluate
        seed: Base seed; episode i uses seed + i
        render: Whether to render the environment
        reward_config: Reward shaping weights (defaults to the env's)
    """
    env = ShooterEnv(
        render_mode="human" if render else None,
        reward_config=reward_config,
        **ENV_CONFIG,
    )

    episode_rewards = []
    episode_lengths = []
    episode_scores = []

    for episode in range(n_episodes):
        obs, info = env.reset(seed=seed + episode if seed is not None else None)
        if seed is not None:
            env.action_space.seed(seed + episode)

        terminated = False
        truncated = False
        total_reward = 0.0
        steps = 0

        while not (terminated or truncated):
            action = policy(env)
            obs, reward, terminated, truncated, info = env.step(action)
            total_reward += reward
            steps += 1

            if render:
                time.sleep(1 / env.metadata["render_fps"])

        episode_rewards.append(total_reward)
        episode_lengths.append(steps)
        episode_scores.append(info["score"])

        print(f"Episode {episode + 1}/{n_episodes}: "
              f"Reward = {total_reward:.2f}, Score = {info['score']}, Length = {steps}")

    env.close()

    results = {
        "mean_reward": float(np.mean(episode_rewards)),
        "std_reward": float(np.std(episode_rewards)),
        "mean_length": float(np.mean(episode_lengths)),
        "mean_score": float(np.mean(episode_scores)),
        "max_score": int(np.max(episode_scores)),
        "episode_rewards": episode_rewards,
        "episode_lengths": episode_lengths,
        "episode_scores": episode_scores,
    }
    logger.info("Evaluated %d episodes, mean score %.1f", n_episodes, results["mean_score"])
    return results


def main():
    parser = argparse.ArgumentParser(description="Evaluate Side Shooter policies")
    parser.add_argument(
        "--policy",
        type=str,
        nargs="+",
        default=EVAL_CONFIG["policies"],
        choices=list(POLICIES),
        help="Policies to evaluate (default: all)",
    )
    parser.add_argument(
        "--n-episodes",
        type=int,
        default=EVAL_CONFIG["n_episodes"],
        help=f"Number of evaluation episodes (default: {EVAL_CONFIG['n_episodes']})",
    )
    parser.add_argument(
        "--reward-config",
        type=str,
        default=EVAL_CONFIG["reward_config"],
        help=f"Reward shaping config (default: {EVAL_CONFIG['reward_config']})",
    )
    parser.add_argument(
        "--render",
        action="store_true",
        help="Render episodes in an arcade window",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=EVAL_CONFIG["seed"],
        help=f"Random seed (default: {EVAL_CONFIG['seed']})",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    reward_config = get_reward_config(args.reward_config)

    all_results = {}
    for name in args.policy:
        print(f"\n{'='*50}")
        print(f"Evaluating {name} policy ({args.reward_config} rewards)")
        print(f"{'='*50}")
        all_results[name] = evaluate_policy(
            POLICIES[name],
            n_episodes=args.n_episodes,
            seed=args.seed,
            render=args.render,
            reward_config=reward_config,
        )

    print("\n" + "="*50)
    print(f"Evaluation Results ({args.n_episodes} episodes):")
    for name, results in all_results.items():
        print(f"  {name:10} Mean Reward: {results['mean_reward']:.2f} ± {results['std_reward']:.2f}"
              f" | Mean Score: {results['mean_score']:.1f}"
              f" | Mean Length: {results['mean_length']:.1f}")
    print("="*50)


if __name__ == "__main__":
    main()
