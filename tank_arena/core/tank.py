"""Tank and bullet entities and their grid movement."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from tank_arena.core.world import Point, World


class Direction(Enum):
    """Cardinal heading of a mobile entity."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    def step(self, x: int, y: int) -> Point:
        return Point(x + self.dx, y + self.dy)


HEADINGS = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


@dataclass
class Tank:
    """A tank on the grid; player and enemies share this shape."""

    name: str
    x: int
    y: int
    heading: Direction = Direction.RIGHT
    ident: Optional[int] = None

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)

    def turn(self, heading: Direction) -> None:
        self.heading = heading

    def move(self, world: World) -> bool:
        """Step once along the heading unless the border or a wall is in the way."""

        target = self.heading.step(self.x, self.y)
        if world.is_blocked(*target):
            return False
        self.x, self.y = target
        return True


@dataclass
class Bullet:
    """Projectile travelling one cell per tick until it hits something."""

    x: int
    y: int
    heading: Direction
    active: bool = True

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)

    def advance(self, world: World) -> Optional[Point]:
        """Move one cell; return the wall cell destroyed by this step, if any."""

        if not self.active:
            return None
        self.x, self.y = self.heading.step(self.x, self.y)
        if not world.is_interior(self.x, self.y):
            self.active = False
            return None
        if world.is_wall(self.x, self.y):
            self.active = False
            world.remove_wall(self.position)
            return self.position
        return None

    def deactivate(self) -> None:
        self.active = False
