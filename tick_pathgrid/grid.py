"""TileGrid - rectangular 4-connected tile grid with per-cell cost."""
from __future__ import annotations

import logging
import os
import random
from typing import Sequence

from tick_pathgrid.config import GridConfig
from tick_pathgrid.pathfind import manhattan
from tick_pathgrid.types import Cell, Coord

logger = logging.getLogger(__name__)

# Neighbor order is up, down, left, right; search tie-breaking depends on it.
_DIRS_4 = [(0, 1), (0, -1), (-1, 0), (1, 0)]


class TileGrid:
    def __init__(self) -> None:
        self._width = 0
        self._height = 0
        self._seed: int | None = None
        self._cells: dict[Coord, Cell] = {}

    @classmethod
    def from_costs(cls, rows: Sequence[Sequence[int]]) -> TileGrid:
        """Build a grid from explicit costs, indexed as rows[y][x]."""
        height = len(rows)
        width = len(rows[0]) if rows else 0
        cells: dict[Coord, Cell] = {}
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(
                    f"row {y} has {len(row)} cells, expected {width}"
                )
            for x, cost in enumerate(row):
                cells[(x, y)] = Cell((x, y), cost)
        grid = cls()
        grid._replace(width, height, cells, seed=None)
        return grid

    @classmethod
    def from_layout(cls, lines: Sequence[str], wall: str = "#") -> TileGrid:
        """Build a grid from text. Wall chars cost 0, digits cost their value,
        anything else costs 1. lines[0] is y = 0.
        """
        rows = [
            [0 if ch == wall else int(ch) if ch.isdigit() else 1 for ch in line]
            for line in lines
        ]
        return cls.from_costs(rows)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def seed(self) -> int | None:
        return self._seed

    def generate(
        self,
        width: int,
        height: int,
        obstacle_probability: float = 0.2,
        seed: int | None = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"grid dimensions must be positive, got {width}x{height}")
        if not 0.0 <= obstacle_probability <= 1.0:
            raise ValueError(
                f"obstacle_probability must be in [0, 1], got {obstacle_probability}"
            )
        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        rng = random.Random(seed)

        cells: dict[Coord, Cell] = {}
        for x in range(width):
            for y in range(height):
                walkable = rng.random() >= obstacle_probability
                cells[(x, y)] = Cell((x, y), 1 if walkable else 0)
        self._replace(width, height, cells, seed)

    def generate_from(self, config: GridConfig) -> None:
        self.generate(
            config.width, config.height, config.obstacle_probability, config.seed
        )

    def _replace(
        self, width: int, height: int, cells: dict[Coord, Cell], seed: int | None
    ) -> None:
        # Readers see either the old map or the new one, never a partial build.
        self._cells = cells
        self._width = width
        self._height = height
        self._seed = seed
        obstacles = sum(1 for c in cells.values() if not c.walkable)
        logger.info(
            "Generated %dx%d grid: %d obstacles, seed=%s",
            width, height, obstacles, seed,
        )

    def get(self, position: Coord) -> Cell | None:
        return self._cells.get(position)

    def get_at(self, x: int, y: int) -> Cell | None:
        return self._cells.get((x, y))

    def __contains__(self, position: object) -> bool:
        return position in self._cells

    def __len__(self) -> int:
        return len(self._cells)

    def neighbors(self, cell: Cell | Coord) -> list[Cell]:
        x, y = cell.position if isinstance(cell, Cell) else cell
        result: list[Cell] = []
        for dx, dy in _DIRS_4:
            n = self._cells.get((x + dx, y + dy))
            if n is not None and n.walkable:
                result.append(n)
        return result

    def all_cells(self) -> list[Cell]:
        return list(self._cells.values())

    def walkable_cells(self) -> list[Cell]:
        return [c for c in self._cells.values() if c.walkable]

    def heuristic(self, a: Coord, b: Coord) -> int:
        return manhattan(a, b)

