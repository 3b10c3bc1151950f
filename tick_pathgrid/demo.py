"""Pathgrid demo -- generate a grid, find a path, walk an agent along it.

Run:
    python -m tick_pathgrid.demo [OPTIONS]

Options:
    --width, --height   Grid size (default: 10x10)
    --obstacles         Obstacle probability (default: 0.2)
    --seed              RNG seed (default: 42)
    --start X,Y         Start cell (default: first walkable cell)
    --goal X,Y          Goal cell (default: last walkable cell)
    --tps               Ticks per second for the walk (default: 20)
    --speed             Agent speed in cells per second (default: 3.0)
    --max-ticks         Give up walking after this many ticks (default: 10000)
    --verbose, -v       Log generation, search and arrival
"""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Sequence

from tick_pathgrid.config import FollowerConfig, GridConfig
from tick_pathgrid.follower import PathFollower
from tick_pathgrid.grid import TileGrid
from tick_pathgrid.pathfind import PathFinder
from tick_pathgrid.systems import make_follow_system
from tick_pathgrid.types import Coord, FollowState, PathError


@dataclass(frozen=True)
class _Tick:
    tick_number: int
    dt: float


def _coord(text: str) -> Coord:
    try:
        x, y = (int(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected X,Y, got {text!r}") from None
    return (x, y)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Tile grid pathfinding demo")
    parser.add_argument("--width", type=int, default=10, help="grid width (default: 10)")
    parser.add_argument("--height", type=int, default=10, help="grid height (default: 10)")
    parser.add_argument("--obstacles", type=float, default=0.2,
                        help="obstacle probability (default: 0.2)")
    parser.add_argument("--seed", "-s", type=int, default=42, help="RNG seed (default: 42)")
    parser.add_argument("--start", type=_coord, default=None, help="start cell X,Y")
    parser.add_argument("--goal", type=_coord, default=None, help="goal cell X,Y")
    parser.add_argument("--tps", type=int, default=20, help="ticks per second (default: 20)")
    parser.add_argument("--speed", type=float, default=3.0,
                        help="agent speed in cells per second (default: 3.0)")
    parser.add_argument("--max-ticks", type=int, default=10_000,
                        help="tick limit for the walk (default: 10000)")
    parser.add_argument("--verbose", "-v", action="store_true", help="enable logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    if args.tps <= 0:
        print("tps must be positive", file=sys.stderr)
        return 2

    try:
        grid_config = GridConfig(args.width, args.height, args.obstacles, args.seed)
        follower_config = FollowerConfig(speed=args.speed)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 2

    grid = TileGrid()
    grid.generate_from(grid_config)
    walkable = grid.walkable_cells()
    if not walkable:
        print("Grid has no walkable cells", file=sys.stderr)
        return 1
    start = args.start if args.start is not None else walkable[0].position
    goal = args.goal if args.goal is not None else walkable[-1].position

    try:
        result = PathFinder().search(grid, start, goal)
    except PathError as exc:
        print(exc)
        return 1

    print(f"Grid {grid.width}x{grid.height}, seed {grid.seed}")
    print(f"Path {start} -> {goal}: {len(result.path)} cells, cost {result.cost}")
    print(" ".join(f"({x},{y})" for x, y in result.path))

    follower = PathFollower(follower_config)
    follower.set_path(result.path)
    follower.start()
    system = make_follow_system([follower])
    dt = 1.0 / args.tps
    for tick_number in range(1, args.max_ticks + 1):
        system(None, _Tick(tick_number, dt))
        if follower.state is FollowState.ARRIVED:
            print(f"Arrived on tick {tick_number} ({tick_number * dt:.2f}s)")
            return 0

    print(f"Still walking after {args.max_ticks} ticks")
    return 1


if __name__ == "__main__":
    sys.exit(main())
