"""PathFollower - moves an agent along a path of cell centres, one tick at a time."""
from __future__ import annotations

import logging
import math
from collections import deque
from typing import Callable, Iterable

from tick_pathgrid.config import FollowerConfig
from tick_pathgrid.types import Coord, Facing, FollowState

logger = logging.getLogger(__name__)

Vec2 = tuple[float, float]


def cell_center(
    coord: Coord, cell_size: float = 1.0, origin: Vec2 = (0.0, 0.0)
) -> Vec2:
    return (
        origin[0] + (coord[0] + 0.5) * cell_size,
        origin[1] + (coord[1] + 0.5) * cell_size,
    )


def _distance(a: Vec2, b: Vec2) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])


def _move_towards(current: Vec2, target: Vec2, max_step: float) -> Vec2:
    dist = _distance(current, target)
    if dist <= max_step or dist == 0.0:
        return target
    t = max_step / dist
    return (
        current[0] + (target[0] - current[0]) * t,
        current[1] + (target[1] - current[1]) * t,
    )


class PathFollower:
    """Interpolates a position through a queue of waypoints at fixed speed.

    Waypoints are the world-space centres of the path's cells. The follower
    holds no reference to the grid; it only sees positions.
    """

    def __init__(
        self,
        config: FollowerConfig | None = None,
        on_arrive: Callable[[PathFollower], None] | None = None,
    ) -> None:
        self._config = config or FollowerConfig()
        self._on_arrive = on_arrive
        self._waypoints: deque[Vec2] = deque()
        self._position: Vec2 | None = None
        self._state = FollowState.IDLE
        self._facing = Facing.RIGHT

    @property
    def config(self) -> FollowerConfig:
        return self._config

    @property
    def position(self) -> Vec2 | None:
        return self._position

    @property
    def state(self) -> FollowState:
        return self._state

    @property
    def facing(self) -> Facing:
        return self._facing

    @property
    def remaining(self) -> int:
        return len(self._waypoints)

    def set_path(self, positions: Iterable[Coord]) -> None:
        cfg = self._config
        self._waypoints = deque(
            cell_center(p, cfg.cell_size, cfg.origin) for p in positions
        )
        if self._position is None and self._waypoints:
            self._position = self._waypoints[0]
        self._state = FollowState.IDLE

    def start(self) -> None:
        if self._state is FollowState.MOVING or not self._waypoints:
            return
        if self._position is None:
            self._position = self._waypoints[0]
        self._state = FollowState.MOVING
        self._face(self._position, self._waypoints[0])

    def _face(self, origin: Vec2, target: Vec2) -> None:
        # Heading in cell units.
        size = self._config.cell_size
        dx = round((target[0] - origin[0]) / size)
        dy = round((target[1] - origin[1]) / size)
        if dx > 0:
            self._facing = Facing.RIGHT
        elif dx < 0:
            self._facing = Facing.LEFT
        elif dy > 0:
            self._facing = Facing.UP
        elif dy < 0:
            self._facing = Facing.DOWN

    def advance(self, dt: float) -> FollowState:
        if dt < 0:
            raise ValueError(f"dt must be >= 0, got {dt}")
        if self._state is not FollowState.MOVING or self._position is None:
            return self._state

        budget = self._config.speed * dt
        while self._waypoints:
            target = self._waypoints[0]
            step = min(budget, _distance(self._position, target))
            self._position = _move_towards(self._position, target, step)
            budget -= step
            if _distance(self._position, target) > self._config.epsilon:
                break
            self._position = self._waypoints.popleft()
            if self._waypoints:
                self._face(self._position, self._waypoints[0])
            if budget <= 0:
                break

        if not self._waypoints:
            self._state = FollowState.ARRIVED
            logger.info("Follower arrived at %s", self._position)
            if self._on_arrive is not None:
                self._on_arrive(self)
        return self._state
