"""
ShooterEnv - the Side Shooter round as a Gymnasium environment
--------------------------------------------------------------
- Same rules as the interactive game (RoundController drives both)
- Gymnasium API, one step = one game frame
- Discrete action space: no-op, up, down, fire, up+fire, down+fire
- Vector observation: ship state + round state + K nearest enemies
- Arcade window for "human" rendering, numpy rasterizer for "rgb_array"

Quick test:
    python -m sideshooter.shooter_env
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .round import (
    FrameInput,
    RenderFrame,
    RoundController,
    EnemiesBreachedEvent,
    EnemiesDestroyedEvent,
    BulletFiredEvent,
    GameOverEvent,
    DIFF_MAX,
)
from .utils import clamp

# action -> (vertical direction, fire)
ACTIONS = {
    0: (0, False),
    1: (-1, False),
    2: (1, False),
    3: (0, True),
    4: (-1, True),
    5: (1, True),
}

DEFAULT_REWARD_CONFIG = {
    "name": "baseline",
    "R_KILL": 1.0,       # Reward per enemy destroyed
    "R_BREACH": 1.0,     # Penalty per enemy reaching the left edge
    "R_SHOT": 0.01,      # Penalty per bullet (encourage aiming)
    "R_TIME": 0.001,     # Small survival bonus per frame
    "R_DEATH": 5.0,      # Game over penalty
}


class ShooterEnv(gym.Env):
    """Side Shooter environment backed by RoundController"""

    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        width: int = 800,
        height: int = 600,
        start_life: int = 5,
        kill_reward: int = 5,
        max_steps: int = 3600,  # 60s at 60 FPS
        k_enemies: int = 3,
        reward_config: Optional[Dict[str, Any]] = None,
    ):
        super().__init__()

        if render_mode is not None and render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"Unknown render_mode: {render_mode}")
        self.render_mode = render_mode

        self.width = width
        self.height = height
        self.start_life = start_life
        self.kill_reward = kill_reward
        self.max_steps = max_steps
        self.k_enemies = k_enemies
        self.reward_config = dict(reward_config or DEFAULT_REWARD_CONFIG)

        self.action_space = spaces.Discrete(len(ACTIONS))

        # Ship: y(1)  Round: life(1) timer(1) diff(1)  Each enemy: rel pos(2)
        obs_dim = 1 + 3 + self.k_enemies * 2
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self._window = None

        self.controller: RoundController = None  # type: ignore
        self._step_count = 0

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)

        self._step_count = 0
        # High score lives for the whole process, not one episode
        high_score = self.controller.high_score if self.controller is not None else 0
        self.controller = RoundController(
            width=self.width,
            height=self.height,
            start_life=self.start_life,
            kill_reward=self.kill_reward,
            rng=self.np_random,
        )
        self.controller.high_score = high_score
        if self._window is not None:
            self._window.controller = self.controller

        return self._get_obs(), self._get_info()

    def step(self, action):
        assert self.action_space.contains(action), f"Invalid action: {action!r}"
        direction, fire = ACTIONS[int(action)]

        if fire:
            self.controller.fire()
        events = self.controller.update(
            FrameInput(up=direction < 0, down=direction > 0)
        )

        reward = self._compute_reward(events)

        terminated = self.controller.state.loss
        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        obs = self._get_obs()
        info = self._get_info()

        if self.render_mode == "human":
            self.render()

        return obs, reward, terminated, truncated, info

    # ----------------------------
    # Observation / reward / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        c = self.controller
        ship = c.ship
        state = c.state

        span_y = max(1.0, self.height - ship.height)
        obs_parts = [
            (ship.y / span_y) * 2 - 1,
            (state.life / self.start_life) * 2 - 1,
            clamp(state.timer, 0.0, 1.0) * 2 - 1,
            (state.diff / DIFF_MAX) * 2 - 1,
        ]

        # Enemies: the K closest to the left edge are the most urgent
        nose_x = ship.x + ship.width
        nose_y = ship.y + ship.height / 2
        enemies_sorted = sorted(c.enemies, key=lambda e: e.x)
        for i in range(self.k_enemies):
            if i < len(enemies_sorted):
                e = enemies_sorted[i]
                dx = (e.x - nose_x) / self.width
                dy = (e.y + e.height / 2 - nose_y) / self.height
                obs_parts += [clamp(dx, -1, 1), clamp(dy, -1, 1)]
            else:
                obs_parts += [0.0, 0.0]

        obs = np.array([clamp(v, -1.0, 1.0) for v in obs_parts], dtype=np.float32)
        return obs

    def _compute_reward(self, events: List[Any]) -> float:
        cfg = self.reward_config
        reward = 0.0

        for event in events:
            if isinstance(event, EnemiesDestroyedEvent):
                reward += cfg["R_KILL"] * event.count
            elif isinstance(event, EnemiesBreachedEvent):
                reward -= cfg["R_BREACH"] * event.count
            elif isinstance(event, BulletFiredEvent):
                reward -= cfg["R_SHOT"]
            elif isinstance(event, GameOverEvent):
                reward -= cfg["R_DEATH"]

        if not self.controller.state.loss:
            reward += cfg["R_TIME"]

        return float(reward)

    def _get_info(self) -> Dict[str, Any]:
        c = self.controller
        return {
            "life": c.state.life,
            "score": c.state.score,
            "high_score": c.high_score,
            "num_enemies": len(c.enemies),
            "num_bullets": len(c.bullets),
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self.render_mode == "rgb_array":
            return rasterize(self.controller.display())

        if self._window is None:
            from .window import ShooterWindow

            self._window = ShooterWindow(self.controller, "Side Shooter - ShooterEnv")

        self._window.dispatch_events()
        self._window.on_draw()
        self._window.flip()
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


def rasterize(frame: RenderFrame) -> np.ndarray:
    """
    Rasterize a render frame's shapes into an (H, W, 3) uint8 image.
    Text is not drawn.
    """
    img = np.empty((frame.height, frame.width, 3), dtype=np.uint8)
    img[:, :] = frame.background

    # Pixel centers
    ys, xs = np.mgrid[0:frame.height, 0:frame.width]
    px = xs + 0.5
    py = ys + 0.5

    for shape in frame.shapes:
        if shape.kind == "rect":
            (x0, y0), (x1, y1) = shape.points
            mask = (px >= x0) & (px < x1) & (py >= y0) & (py < y1)
        elif shape.kind == "triangle":
            (ax, ay), (bx, by), (cx, cy) = shape.points
            d1 = (px - bx) * (ay - by) - (ax - bx) * (py - by)
            d2 = (px - cx) * (by - cy) - (bx - cx) * (py - cy)
            d3 = (px - ax) * (cy - ay) - (cx - ax) * (py - ay)
            has_neg = (d1 < 0) | (d2 < 0) | (d3 < 0)
            has_pos = (d1 > 0) | (d2 > 0) | (d3 > 0)
            mask = ~(has_neg & has_pos)
        else:
            continue
        img[mask] = shape.color

    return img


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(render: bool = True):
    """Run a random episode for testing"""
    env = ShooterEnv(render_mode="human" if render else None)
    obs, info = env.reset(seed=42)

    terminated = False
    truncated = False
    total = 0.0

    print("Running episode... close the window to stop early.")

    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

    print(f"Random episode return: {total:.2f} (score {info['score']}, steps {info['step']})")
    env.close()


if __name__ == "__main__":
    run_random_episode(render=True)
