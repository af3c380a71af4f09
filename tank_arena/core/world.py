"""Bounded grid arena holding the destructible wall cells."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, List, NamedTuple, Optional, Set

PLAYER_START_X = 2


class Point(NamedTuple):
    """Integer grid coordinate."""

    x: int
    y: int


@dataclass
class ArenaSettings:
    """Configuration options for arena generation."""

    width: int = 40
    height: int = 20
    wall_count: int = 40
    reserved_columns: int = 5  # no random walls left of this column
    divider_top: int = 5
    divider_bottom: int = 15
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.reserved_columns <= PLAYER_START_X:
            raise ValueError(
                f"reserved_columns {self.reserved_columns} does not clear start column {PLAYER_START_X}"
            )
        if self.width // 2 < self.reserved_columns or self.width < 10:
            raise ValueError(
                f"arena width {self.width} leaves no room right of the start band"
            )
        if self.height < 5:
            raise ValueError(f"arena height {self.height} is too small")
        if self.wall_count < 0:
            raise ValueError("wall_count must not be negative")


class World:
    """Grid with a one-cell border ring and a set of destructible walls."""

    def __init__(
        self,
        settings: Optional[ArenaSettings] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.settings = settings or ArenaSettings()
        self.width = self.settings.width
        self.height = self.settings.height
        self._rng = rng or random.Random(self.settings.seed)
        self.walls: Set[Point] = set()
        self._generate()

    def _generate(self) -> None:
        rng = self._rng
        for _ in range(self.settings.wall_count):
            x = rng.randint(1, self.width - 2)
            y = rng.randint(1, self.height - 2)
            # Keep the player's starting band clear.
            if x < self.settings.reserved_columns:
                continue
            self.walls.add(Point(x, y))

        top = max(1, self.settings.divider_top)
        bottom = min(self.height - 1, self.settings.divider_bottom)
        for y in range(top, bottom):
            self.walls.add(Point(self.width // 2, y))

    # ------------------------------------------------------------------
    # Queries
    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_interior(self, x: int, y: int) -> bool:
        """Return True for cells strictly inside the border ring."""

        return 0 < x < self.width - 1 and 0 < y < self.height - 1

    def is_border(self, x: int, y: int) -> bool:
        return self.is_inside(x, y) and not self.is_interior(x, y)

    def is_wall(self, x: int, y: int) -> bool:
        return Point(x, y) in self.walls

    def is_blocked(self, x: int, y: int) -> bool:
        return not self.is_interior(x, y) or self.is_wall(x, y)

    # ------------------------------------------------------------------
    # Mutation
    def add_wall(self, point: Point) -> None:
        if not self.is_interior(*point):
            raise ValueError(f"wall {tuple(point)} is outside the interior")
        self.walls.add(Point(*point))

    def remove_wall(self, point: Point) -> bool:
        """Destroy a wall cell, returning whether one was there."""

        point = Point(*point)
        if point in self.walls:
            self.walls.discard(point)
            return True
        return False

    def clear_walls(self) -> None:
        self.walls.clear()

    # ------------------------------------------------------------------
    # Utilities
    def iter_rows(self) -> Iterable[str]:
        for y in range(self.height):
            row_chars = []
            for x in range(self.width):
                if self.is_border(x, y):
                    row_chars.append("#")
                elif self.is_wall(x, y):
                    row_chars.append("%")
                else:
                    row_chars.append(" ")
            yield "".join(row_chars)

    def copy_grid(self) -> List[List[str]]:
        return [list(row) for row in self.iter_rows()]
