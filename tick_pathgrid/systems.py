"""System factories for tick-pathgrid."""
from __future__ import annotations

from typing import Any, Callable, Iterable

from tick_pathgrid.follower import PathFollower
from tick_pathgrid.types import FollowState


def make_follow_system(
    followers: Iterable[PathFollower],
    on_arrive: Callable[[PathFollower], None] | None = None,
) -> Callable[[Any, Any], None]:
    tracked = list(followers)

    def follow_system(world: Any, ctx: Any) -> None:
        for follower in tracked:
            was_moving = follower.state is FollowState.MOVING
            state = follower.advance(ctx.dt)
            if was_moving and state is FollowState.ARRIVED and on_arrive is not None:
                on_arrive(follower)

    return follow_system
