"""
Round controller - orchestrates one game of Side Shooter.
NO UI DEPENDENCIES.

The controller owns the ship, both entity collections and the round state.
A driver (arcade window, Gymnasium env, tests) calls ``update`` once per
frame and forwards discrete input through ``fire``, ``toggle_pause`` and
``click``. Presentation reads ``display()`` and draws what it returns.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Tuple

import numpy as np

from .entities import Bullet, Color, Enemy, Shape, Ship, SHIP_HEIGHT, SHIP_WIDTH
from .systems import BulletSystem, EnemySystem
from .utils import clamp, map_range

logger = logging.getLogger(__name__)

START_LIFE = 5
KILL_REWARD = 5
START_DIFF = 0.1
SPAWN_THRESHOLD = 1.0

# Difficulty curve: score range mapped onto the per-frame timer increment
DIFF_SCORE_MAX = 1_000_000
DIFF_MIN = 0.01
DIFF_MAX = 0.5

SHIP_START_X = 50
BACKGROUND: Color = (0, 0, 0)
TEXT_COLOR: Color = (250, 250, 250)


class RoundPhase(Enum):
    """Current phase of the round."""
    PLAYING = auto()
    PAUSED = auto()
    GAME_OVER = auto()


@dataclass
class RoundState:
    """Scalar state of a single round."""
    life: int = START_LIFE
    score: int = 0
    timer: float = 0.0
    diff: float = START_DIFF
    playing: bool = True
    loss: bool = False


@dataclass
class FrameInput:
    """Continuous (held) input sampled for one frame."""
    up: bool = False
    down: bool = False


@dataclass
class Text:
    """A centered line of text"""
    content: str
    x: float
    y: float
    size: int
    color: Color = TEXT_COLOR


@dataclass
class RenderFrame:
    """Everything the presentation layer needs to draw one frame."""
    width: int
    height: int
    background: Color = BACKGROUND
    shapes: List[Shape] = field(default_factory=list)
    texts: List[Text] = field(default_factory=list)


@dataclass
class RoundEvent:
    """Something that happened during a frame (for UI/agents to react to)."""
    pass


@dataclass
class EnemiesDestroyedEvent(RoundEvent):
    count: int
    score: int


@dataclass
class EnemiesBreachedEvent(RoundEvent):
    count: int
    life: int


@dataclass
class EnemySpawnedEvent(RoundEvent):
    y: float


@dataclass
class BulletFiredEvent(RoundEvent):
    x: float
    y: float


@dataclass
class GameOverEvent(RoundEvent):
    score: int
    high_score: int
    new_high_score: bool


@dataclass
class RoundResetEvent(RoundEvent):
    pass


@dataclass
class PauseToggledEvent(RoundEvent):
    playing: bool


def difficulty(score: float) -> float:
    """Per-frame spawn timer increment for a given score."""
    diff = map_range(score, 0, DIFF_SCORE_MAX, DIFF_MIN, DIFF_MAX)
    return clamp(diff, DIFF_MIN, DIFF_MAX)


class RoundController:
    """
    Owns the round and applies the per-frame rules.

    Usage:
        controller = RoundController(width=800, height=600)
        while running:
            events = controller.update(FrameInput(up=..., down=...))
            draw(controller.display())
    """

    def __init__(
        self,
        width: int = 800,
        height: int = 600,
        start_life: int = START_LIFE,
        kill_reward: int = KILL_REWARD,
        rng: Optional[np.random.Generator] = None,
    ):
        if width <= SHIP_WIDTH or height <= SHIP_HEIGHT:
            raise ValueError(
                f"Canvas {width}x{height} is too small for a {SHIP_WIDTH}x{SHIP_HEIGHT} ship"
            )
        if start_life <= 0:
            raise ValueError(f"start_life must be positive, got {start_life}")

        self.width = width
        self.height = height
        self.start_life = start_life
        self.kill_reward = kill_reward
        self.rng = rng if rng is not None else np.random.default_rng()

        self.high_score = 0
        self.bullets = BulletSystem()
        self.enemies = EnemySystem()

        # Events produced by input callbacks between frames
        self._pending: List[RoundEvent] = []

        self.setup()

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def setup(self):
        """Fresh round with one enemy already on its way."""
        self.ship = Ship(SHIP_START_X, self.height / 2)
        self.state = RoundState(life=self.start_life)
        self.bullets.clear()
        self.enemies.clear()
        self._pending = []
        self.enemies.add(Enemy(self.width - 50 - SHIP_WIDTH, self.height / 2))

    def reset(self):
        """Start a new round. The high score is kept."""
        self.ship = Ship(SHIP_START_X, self.height / 2)
        self.state.life = self.start_life
        self.state.score = 0
        self.state.timer = 0.0
        self.bullets.clear()
        self.enemies.clear()
        self.state.loss = False
        self.state.playing = True
        self._pending.append(RoundResetEvent())
        logger.info("Round reset (high score %d)", self.high_score)

    @property
    def phase(self) -> RoundPhase:
        if self.state.loss:
            return RoundPhase.GAME_OVER
        if not self.state.playing:
            return RoundPhase.PAUSED
        return RoundPhase.PLAYING

    @property
    def active(self) -> bool:
        return self.state.playing and not self.state.loss

    # =========================================================================
    # FRAME UPDATE
    # =========================================================================

    def update(self, frame_input: Optional[FrameInput] = None) -> List[RoundEvent]:
        """
        Advance the round by one frame.

        Returns the events produced since the previous call, including the
        ones raised by input callbacks in between.
        """
        events = self._pending
        self._pending = []

        if not self.active:
            return events

        frame_input = frame_input or FrameInput()
        self.ship.steer(frame_input.up, frame_input.down, self.height)

        destroyed = self.bullets.update(self.enemies, self.width)
        if destroyed:
            self.state.score += self.kill_reward * destroyed
            events.append(EnemiesDestroyedEvent(destroyed, self.state.score))

        breached = self.enemies.update()
        if breached:
            self.state.life -= breached
            events.append(EnemiesBreachedEvent(breached, self.state.life))

        game_over = self.check_game_over()
        if game_over is not None:
            events.append(game_over)

        spawned = self.add_enemy()
        if spawned is not None:
            events.append(spawned)

        self.state.timer += self.state.diff
        self.state.diff = difficulty(self.state.score)

        return events

    def check_game_over(self) -> Optional[GameOverEvent]:
        """Flag the loss once life is gone and record the high score."""
        if self.state.life > 0:
            return None

        first = not self.state.loss
        self.state.loss = True

        new_high = self.state.score > self.high_score
        if new_high:
            self.high_score = self.state.score

        if not first:
            return None
        logger.info("Game over: score %d, high score %d", self.state.score, self.high_score)
        return GameOverEvent(self.state.score, self.high_score, new_high)

    def add_enemy(self) -> Optional[EnemySpawnedEvent]:
        """Spawn an enemy at the right edge once the timer has filled up."""
        if self.state.timer < SPAWN_THRESHOLD:
            return None

        y = float(self.rng.uniform(0, self.height - SHIP_HEIGHT))
        self.enemies.add(Enemy(self.width, y))
        self.state.timer = 0.0
        logger.debug("Spawned enemy at y=%.1f", y)
        return EnemySpawnedEvent(y)

    # =========================================================================
    # INPUT COMMANDS
    # =========================================================================

    def fire(self) -> bool:
        """Fire a bullet from the ship's nose. Only while playing."""
        if not self.active:
            return False

        bx = self.ship.x + self.ship.width
        by = self.ship.y + self.ship.height / 2
        self.bullets.add(Bullet(bx, by))
        self._pending.append(BulletFiredEvent(bx, by))
        return True

    def toggle_pause(self) -> bool:
        """Pause or resume. Ignored once the round is lost."""
        if self.state.loss:
            return False

        self.state.playing = not self.state.playing
        self._pending.append(PauseToggledEvent(self.state.playing))
        logger.info("Round %s", "resumed" if self.state.playing else "paused")
        return True

    def play_again_box(self) -> Tuple[float, float, float, float]:
        """(left, top, right, bottom) of the Play Again hit box."""
        cx, cy = self.width / 2, self.height / 2
        return (cx - 50, cy + 85, cx + 50, cy + 115)

    def click(self, x: float, y: float) -> bool:
        """Pointer press. Inside Play Again on the game over screen resets."""
        if not self.state.loss:
            return False

        left, top, right, bottom = self.play_again_box()
        if left < x < right and top < y < bottom:
            self.reset()
            return True
        return False

    # =========================================================================
    # PRESENTATION DATA
    # =========================================================================

    def display(self) -> RenderFrame:
        """Shapes and text for the current frame."""
        frame = RenderFrame(self.width, self.height)
        frame.shapes.extend(self.ship.shapes())
        frame.shapes.extend(self.bullets.display())
        frame.shapes.extend(self.enemies.display())

        w, h = self.width, self.height
        phase = self.phase
        if phase is RoundPhase.PLAYING:
            frame.texts.append(Text(f"Score: {self.state.score}", w / 4, 50, 20))
            frame.texts.append(Text(f"Lives: {self.state.life}", 3 * w / 4, 50, 20))
        elif phase is RoundPhase.PAUSED:
            frame.texts.append(Text("PAUSED", w / 2, h / 2, 30))
        else:
            frame.texts.append(Text("GAME OVER", w / 2, h / 2 - 30, 30))
            frame.texts.append(Text(f"Final Score: {self.state.score}", w / 2, h / 2 + 20, 20))
            frame.texts.append(Text(f"Your High Score: {self.high_score}", w / 2, h / 2 + 50, 20))
            frame.texts.append(Text("Play Again", w / 2, h / 2 + 100, 25))

        return frame
