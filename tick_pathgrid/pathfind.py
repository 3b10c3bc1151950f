"""A* pathfinding over a TileGrid."""
from __future__ import annotations

import heapq
import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Sequence

from tick_pathgrid.types import CorruptSearchState, Coord, InvalidEndpoint, NoPath

if TYPE_CHECKING:
    from tick_pathgrid.grid import TileGrid

logger = logging.getLogger(__name__)

Heuristic = Callable[[Coord, Coord], int]


def manhattan(a: Coord, b: Coord) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a successful search.

    Attributes:
        path: Positions from start to goal, both included.
        cost: Sum of the costs of every cell entered after the start.
        expanded: Number of cells moved to the closed set.
    """

    path: list[Coord]
    cost: int
    expanded: int


class _SearchState:
    """Per-run bookkeeping. A fresh instance per search keeps runs independent."""

    __slots__ = ("g", "h", "parent", "order", "closed")

    def __init__(self) -> None:
        self.g: dict[Coord, float] = {}
        self.h: dict[Coord, int] = {}
        self.parent: dict[Coord, Coord] = {}
        self.order: dict[Coord, int] = {}
        self.closed: set[Coord] = set()

    def g_cost(self, pos: Coord) -> float:
        return self.g.get(pos, math.inf)

    def f_cost(self, pos: Coord) -> float:
        return self.g[pos] + self.h[pos]


class PathFinder:
    def __init__(self, heuristic: Heuristic = manhattan) -> None:
        self._heuristic = heuristic

    def _endpoint(self, grid: TileGrid, pos: Coord, role: str) -> None:
        cell = grid.get(pos)
        if cell is None:
            raise InvalidEndpoint(pos, role, f"{role} {pos} is outside the grid")
        if not cell.walkable:
            raise InvalidEndpoint(pos, role, f"{role} {pos} is not walkable")

    def search(self, grid: TileGrid, start: Coord, goal: Coord) -> SearchResult:
        start, goal = tuple(start), tuple(goal)
        self._endpoint(grid, start, "start")
        self._endpoint(grid, goal, "goal")

        state = _SearchState()
        state.g[start] = 0
        state.h[start] = self._heuristic(start, goal)
        state.order[start] = 0
        # Entries are (f, h, first-seen order, pos): lowest f, then lowest h,
        # then the cell that entered the open set first.
        open_heap: list[tuple[float, int, int, Coord]] = [
            (state.f_cost(start), state.h[start], 0, start)
        ]
        open_set: set[Coord] = {start}

        while open_heap:
            f, _, _, current = heapq.heappop(open_heap)
            if current in state.closed or f != state.f_cost(current):
                continue
            open_set.discard(current)
            state.closed.add(current)

            if current == goal:
                path = self._reconstruct(state, start, goal)
                result = SearchResult(
                    path=path, cost=int(state.g[goal]), expanded=len(state.closed)
                )
                logger.debug(
                    "Path %s -> %s: %d steps, cost %d, %d expanded",
                    start, goal, len(path) - 1, result.cost, result.expanded,
                )
                return result

            for neighbor in grid.neighbors(current):
                pos = neighbor.position
                if pos in state.closed:
                    continue
                tentative = state.g[current] + neighbor.cost
                if tentative < state.g_cost(pos) or pos not in open_set:
                    state.g[pos] = tentative
                    state.h[pos] = self._heuristic(pos, goal)
                    state.parent[pos] = current
                    if pos not in open_set:
                        open_set.add(pos)
                        state.order.setdefault(pos, len(state.order))
                    heapq.heappush(
                        open_heap,
                        (state.f_cost(pos), state.h[pos], state.order[pos], pos),
                    )

        logger.debug(
            "No path %s -> %s after %d expanded", start, goal, len(state.closed)
        )
        raise NoPath(start, goal)

    def find_path(self, grid: TileGrid, start: Coord, goal: Coord) -> list[Coord]:
        return self.search(grid, start, goal).path

    @staticmethod
    def _reconstruct(state: _SearchState, start: Coord, goal: Coord) -> list[Coord]:
        path: list[Coord] = [goal]
        current = goal
        while current != start:
            parent = state.parent.get(current)
            if parent is None or len(path) > len(state.closed):
                raise CorruptSearchState(
                    f"Parent chain from {goal} broke at {current} before reaching {start}"
                )
            current = parent
            path.append(current)
        path.reverse()
        return path


_default_finder = PathFinder()


def find_path(grid: TileGrid, start: Coord, goal: Coord) -> list[Coord]:
    return _default_finder.find_path(grid, start, goal)


def path_cost(grid: TileGrid, path: Sequence[Coord]) -> int:
    """Accrued cost of walking path: every entered cell's cost, start excluded."""
    total = 0
    for pos in path[1:]:
        cell = grid.get(pos)
        if cell is None:
            raise KeyError(f"{pos} is not on the grid")
        total += cell.cost
    return total
