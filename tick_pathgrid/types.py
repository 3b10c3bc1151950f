"""Shared types and errors for tick-pathgrid."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

Coord = tuple[int, int]


@dataclass(frozen=True, slots=True)
class Cell:
    """A single tile of a TileGrid.

    Attributes:
        position: (x, y) lattice coordinate, unique within a grid.
        cost: Cost of entering this cell. 0 means impassable.
        walkable: Pass None (the default) to derive it as cost > 0; an explicit
            value must agree with cost. Always a bool once constructed.
    """

    position: Coord
    cost: int = 1
    walkable: bool | None = None

    def __post_init__(self) -> None:
        if self.cost < 0:
            raise ValueError(f"cost must be >= 0, got {self.cost}")
        passable = self.cost > 0
        if self.walkable is None:
            object.__setattr__(self, "walkable", passable)
        elif self.walkable != passable:
            raise ValueError(
                f"Cell {self.position}: walkable={self.walkable} "
                f"disagrees with cost={self.cost}"
            )

    @property
    def x(self) -> int:
        return self.position[0]

    @property
    def y(self) -> int:
        return self.position[1]


class FollowState(Enum):
    IDLE = "idle"
    MOVING = "moving"
    ARRIVED = "arrived"


class Facing(Enum):
    RIGHT = (1, 0)
    LEFT = (-1, 0)
    UP = (0, 1)
    DOWN = (0, -1)


class PathError(Exception):
    """Base class for pathfinding outcomes that produce no path."""


class InvalidEndpoint(PathError, ValueError):
    """Raised when a start or goal is outside the grid or not walkable."""

    def __init__(self, position: Coord, role: str, message: str) -> None:
        self.position = position
        self.role = role
        super().__init__(message)


class NoPath(PathError):
    """Raised when the search exhausts the open set without reaching the goal."""

    def __init__(self, start: Coord, goal: Coord) -> None:
        self.start = start
        self.goal = goal
        super().__init__(f"No path from {start} to {goal}")


class CorruptSearchState(RuntimeError):
    """Raised when parent links do not lead back to the start."""
