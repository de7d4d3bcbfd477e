"""
Entity collections for bullets and enemies.

Update passes never remove while iterating: entities are flagged dead
during the pass and the list is compacted afterwards, so every live entity
is visited exactly once per frame.
"""

import logging
from typing import Generic, Iterator, List, TypeVar

from .entities import Bullet, Enemy, Shape
from .utils import collide_rect_poly

logger = logging.getLogger(__name__)

T = TypeVar("T", Bullet, Enemy)


class EntitySystem(Generic[T]):
    """Ordered collection of entities, insertion order is draw/update order"""

    def __init__(self):
        self.system: List[T] = []

    def add(self, entity: T):
        self.system.append(entity)

    def get(self, index: int) -> T:
        return self.system[index]

    def remove(self, index: int):
        del self.system[index]

    def is_empty(self) -> bool:
        return len(self.system) < 1

    def size(self) -> int:
        return len(self.system)

    def clear(self):
        self.system = []

    def display(self) -> List[Shape]:
        shapes: List[Shape] = []
        for entity in self.system:
            shapes.extend(entity.shapes())
        return shapes

    def _compact(self):
        self.system = [e for e in self.system if e.alive]

    def __len__(self) -> int:
        return len(self.system)

    def __iter__(self) -> Iterator[T]:
        return iter(self.system)


class BulletSystem(EntitySystem[Bullet]):
    """Bullets fired by the player"""

    def update(self, enemies: "EnemySystem", canvas_width: float) -> int:
        """
        Advance every bullet and resolve hits.

        A bullet whose leading edge leaves the canvas is dropped without a
        collision test. Otherwise it is tested against enemies in order and
        the first enemy it overlaps is destroyed along with the bullet.

        Returns the number of enemies destroyed this frame.
        """
        destroyed = 0

        for b in self.system:
            b.move()

            if b.leading_x > canvas_width:
                b.alive = False
                continue

            for e in enemies:
                if not e.alive:
                    continue
                if collide_rect_poly(b.x, b.y, b.width, b.height, e.to_polygon()):
                    b.alive = False
                    e.alive = False
                    destroyed += 1
                    logger.debug("Bullet hit enemy at (%.1f, %.1f)", e.x, e.y)
                    break

        self._compact()
        enemies._compact()
        return destroyed


class EnemySystem(EntitySystem[Enemy]):
    """Enemies currently on the canvas"""

    def update(self) -> int:
        """
        Advance every enemy still inside the canvas; drop the ones whose
        nose has reached the left edge.

        Returns the number of enemies that got through this frame.
        """
        breached = 0

        for e in self.system:
            if e.x > 0:
                e.move()
            else:
                e.alive = False
                breached += 1

        if breached:
            logger.debug("%d enemy(ies) reached the left edge", breached)
        self._compact()
        return breached
