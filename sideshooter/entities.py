"""
Game entity dataclasses

Coordinates are canvas pixels with the origin at the top-left corner and
y growing downwards. Positions are the upper-left corner of the entity.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from .utils import Point, clamp

# Craft geometry (ship and enemies share a hull size)
SHIP_WIDTH = 60
SHIP_HEIGHT = 30
SHIP_SPEED = 5.0
ENEMY_SPEED = 2.0

BULLET_WIDTH = 20
BULLET_HEIGHT = 5
BULLET_SPEED = 5.0

Color = Tuple[int, int, int]


class Facing(Enum):
    """Direction a craft's nose points to"""
    RIGHT = 1
    LEFT = -1


@dataclass
class Shape:
    """A filled primitive for the presentation layer to draw"""
    kind: str  # "triangle" or "rect"
    points: Tuple[Point, ...]
    color: Color


@dataclass
class Craft:
    """
    Arrow-shaped ship drawn as two triangles.

    The upper triangle is the full nose (back-top corner, nose tip at
    mid-height, back-bottom corner) and doubles as the collidable polygon.
    The lower triangle is a shaded fin drawn on top of it.
    """
    x: float
    y: float
    width: float = SHIP_WIDTH
    height: float = SHIP_HEIGHT
    facing: Facing = Facing.RIGHT
    hull_color: Color = (236, 239, 241)
    fin_color: Color = (207, 216, 220)

    @property
    def back_x(self) -> float:
        return self.x if self.facing is Facing.RIGHT else self.x + self.width

    @property
    def nose_x(self) -> float:
        return self.x + self.width if self.facing is Facing.RIGHT else self.x

    def to_polygon(self) -> List[Point]:
        """Collidable polygon: the nose triangle"""
        return [
            (self.back_x, self.y),
            (self.nose_x, self.y + self.height / 2),
            (self.back_x, self.y + self.height),
        ]

    def fin(self) -> List[Point]:
        return [
            (self.back_x, self.y + self.height / 2),
            (self.nose_x, self.y + self.height / 2),
            (self.back_x, self.y + self.height),
        ]

    def shapes(self) -> List[Shape]:
        return [
            Shape("triangle", tuple(self.to_polygon()), self.hull_color),
            Shape("triangle", tuple(self.fin()), self.fin_color),
        ]


@dataclass
class Ship(Craft):
    """Player controlled ship, moves vertically only"""
    y_speed: float = SHIP_SPEED

    def move(self, direction: int, canvas_height: float):
        """Move up (-1), down (+1) or not at all (0), staying on the canvas"""
        if direction == 0:
            return
        step = -self.y_speed if direction < 0 else self.y_speed
        self.y = clamp(self.y + step, 0.0, canvas_height - self.height)

    def steer(self, up: bool, down: bool, canvas_height: float):
        """
        Apply held keys. Up wins, unless the ship already sits on the top
        edge, in which case a held down key still moves it.
        """
        top = self.y <= 0
        bottom = self.y + self.height >= canvas_height

        if up and not top:
            self.move(-1, canvas_height)
        elif down and not bottom:
            self.move(1, canvas_height)


@dataclass
class Enemy(Craft):
    """Enemy ship flying right to left"""
    facing: Facing = Facing.LEFT
    hull_color: Color = (97, 97, 97)
    fin_color: Color = (66, 66, 66)
    x_speed: float = ENEMY_SPEED
    alive: bool = True

    def move(self):
        self.x -= self.x_speed


@dataclass
class Bullet:
    """Bullet projectile fired from the ship"""
    x: float
    y: float
    width: float = BULLET_WIDTH
    height: float = BULLET_HEIGHT
    x_speed: float = BULLET_SPEED
    color: Color = (244, 67, 54)
    alive: bool = True

    @property
    def leading_x(self) -> float:
        return self.x + self.width

    def move(self):
        self.x += self.x_speed

    def shapes(self) -> List[Shape]:
        x0, y0 = self.x, self.y
        x1, y1 = self.x + self.width, self.y + self.height
        return [Shape("rect", ((x0, y0), (x1, y1)), self.color)]
