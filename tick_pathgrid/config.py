"""Configuration dataclasses for grid generation and path following."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GridConfig:
    """Immutable configuration for TileGrid.generate.

    Attributes:
        width: Number of columns (x range).
        height: Number of rows (y range).
        obstacle_probability: Chance in [0, 1] that a cell is an obstacle.
        seed: RNG seed. None draws a fresh seed on each generation.
    """

    width: int = 10
    height: int = 10
    obstacle_probability: float = 0.2
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"grid dimensions must be positive, got {self.width}x{self.height}"
            )
        if not 0.0 <= self.obstacle_probability <= 1.0:
            raise ValueError(
                f"obstacle_probability must be in [0, 1], got {self.obstacle_probability}"
            )


@dataclass(frozen=True)
class FollowerConfig:
    """Immutable configuration for PathFollower.

    Attributes:
        speed: World units travelled per second.
        epsilon: Distance at which a waypoint counts as reached.
        cell_size: World size of one grid cell.
        origin: World position of the grid's (0, 0) corner.
    """

    speed: float = 3.0
    epsilon: float = 0.05
    cell_size: float = 1.0
    origin: tuple[float, float] = (0.0, 0.0)

    def __post_init__(self) -> None:
        if self.speed <= 0:
            raise ValueError(f"speed must be positive, got {self.speed}")
        if self.epsilon < 0:
            raise ValueError(f"epsilon must be >= 0, got {self.epsilon}")
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
