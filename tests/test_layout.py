"""Tests for layout computation and caching."""
from __future__ import annotations

import math
from dataclasses import replace

import pytest
from tick_ballline.config import DEFAULT_CONFIG, LEGACY_CONFIG, BallLineConfig
from tick_ballline.layout import LayoutCache, compute_layout
from tick_ballline.render import FixedSurface
from tick_ballline.types import LayoutError


class TestComputeLayout:
    def test_height_bound_radius(self) -> None:
        """Wide surface: radius is half the height."""
        layout = compute_layout(1100, 40, 0, 0, DEFAULT_CONFIG)
        assert layout.static_radius == 20.0
        assert [b.x for b in layout.static_balls] == [60.0, 140.0, 220.0, 300.0, 380.0]
        assert layout.y == 20.0

    def test_width_bound_radius(self) -> None:
        """Narrow surface: radius comes from the 11 diameters of width."""
        layout = compute_layout(220, 100, 0, 0, DEFAULT_CONFIG)
        assert layout.static_radius == 10.0
        assert [b.x for b in layout.static_balls] == [30.0, 70.0, 110.0, 150.0, 190.0]
        assert layout.y == 50.0

    def test_padding_shifts_and_narrows(self) -> None:
        layout = compute_layout(240, 100, 10, 10, DEFAULT_CONFIG)
        assert layout.static_radius == 10.0
        assert layout.static_balls[0].x == 40.0
        assert layout.bounds.min_x == 17.5

    def test_motion_bounds(self) -> None:
        layout = compute_layout(1100, 40, 0, 0, DEFAULT_CONFIG)
        assert layout.dynamic_radius == 15.0
        assert layout.bounds.min_x == 15.0
        assert layout.bounds.max_x == 425.0

    def test_legacy_layout(self) -> None:
        """Legacy preset reproduces the 5N + 3 radii row: x = r * (4 + 5i)."""
        layout = compute_layout(230, 100, 0, 0, LEGACY_CONFIG)
        assert layout.static_radius == 10.0
        assert [b.x for b in layout.static_balls] == [40.0, 90.0, 140.0, 190.0]
        assert layout.bounds.max_x == 10.0 * 23 - 7.5

    def test_shared_radius_and_y_even_spacing(self) -> None:
        for count in (1, 2, 5, 9):
            for gap in (0.75, 1.0, 1.5):
                config = BallLineConfig(ball_count=count, ball_gap_ratio=gap)
                layout = compute_layout(733, 57, 13, 7, config)
                balls = layout.static_balls
                assert len(balls) == count
                assert len({b.radius for b in balls}) == 1
                assert len({b.y for b in balls}) == 1
                steps = [b.x - a.x for a, b in zip(balls, balls[1:])]
                assert all(s > 0 for s in steps)
                for s in steps:
                    assert math.isclose(s, steps[0])

    def test_row_fits_inside_span(self) -> None:
        layout = compute_layout(500, 300, 20, 30, DEFAULT_CONFIG)
        last = layout.static_balls[-1]
        assert last.x + last.radius <= 500 - 30
        assert layout.static_balls[0].x - layout.static_radius >= 20

    def test_dynamic_radius_uses_size_ratio(self) -> None:
        config = replace(DEFAULT_CONFIG, ball_size_ratio=0.5)
        layout = compute_layout(1100, 40, 0, 0, config)
        assert layout.dynamic_radius == 10.0

    def test_deterministic(self) -> None:
        a = compute_layout(640, 80, 4, 4, DEFAULT_CONFIG)
        b = compute_layout(640, 80, 4, 4, DEFAULT_CONFIG)
        assert a == b

    def test_zero_size_rejected(self) -> None:
        with pytest.raises(ValueError):
            compute_layout(0, 40, 0, 0, DEFAULT_CONFIG)
        with pytest.raises(ValueError):
            compute_layout(100, 0, 0, 0, DEFAULT_CONFIG)

    def test_zero_diameter_count_is_reported(self) -> None:
        config = BallLineConfig(ball_count=1, ball_gap_ratio=-0.5)
        with pytest.raises(LayoutError, match="diameter count"):
            compute_layout(100, 40, 0, 0, config)

    def test_zero_ball_count_is_reported(self) -> None:
        with pytest.raises(LayoutError, match="ball_count"):
            compute_layout(100, 40, 0, 0, BallLineConfig(ball_count=0))

    def test_padding_consuming_width(self) -> None:
        with pytest.raises(LayoutError, match="no horizontal room"):
            compute_layout(10, 40, 5, 5, DEFAULT_CONFIG)


class TestLayoutCache:
    def test_deferred_until_sized(self) -> None:
        cache = LayoutCache(DEFAULT_CONFIG)
        surface = FixedSurface()
        assert cache.get(surface) is None
        assert cache.computations == 0

        surface.resize(1100, 40)
        assert cache.get(surface) is not None
        assert cache.computations == 1

    def test_reused_while_size_unchanged(self) -> None:
        cache = LayoutCache(DEFAULT_CONFIG)
        surface = FixedSurface(1100, 40)
        first = cache.get(surface)
        for _ in range(10):
            assert cache.get(surface) is first
        assert cache.computations == 1

    def test_recomputed_on_resize(self) -> None:
        cache = LayoutCache(DEFAULT_CONFIG)
        surface = FixedSurface(1100, 40)
        cache.get(surface)
        surface.resize(220, 100)
        layout = cache.get(surface)
        assert cache.computations == 2
        assert layout is not None
        assert layout.static_radius == 10.0

    def test_recomputed_on_padding_change(self) -> None:
        cache = LayoutCache(DEFAULT_CONFIG)
        surface = FixedSurface(1100, 40)
        cache.get(surface)
        surface.left = 10
        cache.get(surface)
        assert cache.computations == 2

    def test_invalidate(self) -> None:
        cache = LayoutCache(DEFAULT_CONFIG)
        surface = FixedSurface(1100, 40)
        cache.get(surface)
        cache.invalidate()
        cache.get(surface)
        cache.get(surface)
        assert cache.computations == 2

    def test_deferred_while_padding_fills_width(self) -> None:
        """Padding as wide as the surface defers like a zero size."""
        cache = LayoutCache(DEFAULT_CONFIG)
        surface = FixedSurface(40, 100, left=24, right=24)
        assert cache.get(surface) is None
        assert cache.computations == 0

        surface.resize(1100, 100)
        assert cache.get(surface) is not None
        assert cache.computations == 1
