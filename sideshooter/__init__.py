"""Side Shooter - horizontal arcade shooter core, arcade front-end and Gymnasium env"""

from .round import RoundController, RoundPhase, RoundState, FrameInput
from .shooter_env import ShooterEnv, run_random_episode

__all__ = [
    'RoundController',
    'RoundPhase',
    'RoundState',
    'FrameInput',
    'ShooterEnv',
    'run_random_episode',
]
