"""tick-pathgrid - Tile grid generation, A* pathfinding and path following."""
from __future__ import annotations

from tick_pathgrid.config import FollowerConfig, GridConfig
from tick_pathgrid.follower import PathFollower, cell_center
from tick_pathgrid.grid import TileGrid
from tick_pathgrid.pathfind import (
    PathFinder,
    SearchResult,
    find_path,
    manhattan,
    path_cost,
)
from tick_pathgrid.systems import make_follow_system
from tick_pathgrid.types import (
    Cell,
    Coord,
    CorruptSearchState,
    Facing,
    FollowState,
    InvalidEndpoint,
    NoPath,
    PathError,
)

__all__ = [
    "Cell",
    "Coord",
    "CorruptSearchState",
    "Facing",
    "FollowState",
    "FollowerConfig",
    "GridConfig",
    "InvalidEndpoint",
    "NoPath",
    "PathError",
    "PathFinder",
    "PathFollower",
    "SearchResult",
    "TileGrid",
    "cell_center",
    "find_path",
    "make_follow_system",
    "manhattan",
    "path_cost",
]
