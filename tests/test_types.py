"""
Test suite for tick-pathgrid value types and configuration.

Tests cover:
- Cell walkability derived from cost
- Cell constructor consistency checks
- Error attributes
- GridConfig and FollowerConfig validation
"""

import pytest
from tick_pathgrid import (
    Cell,
    FollowerConfig,
    GridConfig,
    InvalidEndpoint,
    NoPath,
    PathError,
)


class TestCell:
    """Test Cell construction and derived walkability."""

    def test_positive_cost_is_walkable(self):
        cell = Cell((2, 3), 1)
        assert cell.walkable is True
        assert cell.x == 2
        assert cell.y == 3

    def test_zero_cost_is_obstacle(self):
        assert Cell((0, 0), 0).walkable is False

    def test_explicit_none_resolves_to_bool(self):
        assert Cell((0, 0), 2, walkable=None).walkable is True
        assert Cell((0, 0), 0, walkable=None).walkable is False

    def test_matching_walkable_flag_is_accepted(self):
        assert Cell((0, 0), 3, walkable=True).cost == 3

    def test_walkable_disagreeing_with_cost_raises(self):
        with pytest.raises(ValueError):
            Cell((0, 0), 1, walkable=False)
        with pytest.raises(ValueError):
            Cell((0, 0), 0, walkable=True)

    def test_negative_cost_raises(self):
        with pytest.raises(ValueError):
            Cell((0, 0), -1)

    def test_cells_are_immutable(self):
        cell = Cell((0, 0), 1)
        with pytest.raises(AttributeError):
            cell.cost = 5


class TestErrors:
    """Test the path error taxonomy."""

    def test_invalid_endpoint_carries_position_and_role(self):
        err = InvalidEndpoint((4, 4), "goal", "goal (4, 4) is not walkable")
        assert err.position == (4, 4)
        assert err.role == "goal"
        assert isinstance(err, PathError)
        assert isinstance(err, ValueError)

    def test_no_path_carries_endpoints(self):
        err = NoPath((0, 0), (3, 3))
        assert err.start == (0, 0)
        assert err.goal == (3, 3)
        assert "(3, 3)" in str(err)


class TestConfig:
    """Test configuration validation."""

    def test_grid_config_defaults(self):
        cfg = GridConfig()
        assert (cfg.width, cfg.height) == (10, 10)
        assert cfg.obstacle_probability == 0.2
        assert cfg.seed is None

    def test_grid_config_rejects_non_positive_size(self):
        with pytest.raises(ValueError):
            GridConfig(width=0)
        with pytest.raises(ValueError):
            GridConfig(height=-3)

    def test_grid_config_rejects_bad_probability(self):
        with pytest.raises(ValueError):
            GridConfig(obstacle_probability=1.5)
        with pytest.raises(ValueError):
            GridConfig(obstacle_probability=-0.1)

    def test_follower_config_defaults(self):
        cfg = FollowerConfig()
        assert cfg.speed == 3.0
        assert cfg.epsilon == 0.05

    def test_follower_config_rejects_bad_values(self):
        with pytest.raises(ValueError):
            FollowerConfig(speed=0)
        with pytest.raises(ValueError):
            FollowerConfig(epsilon=-1)
        with pytest.raises(ValueError):
            FollowerConfig(cell_size=0)
