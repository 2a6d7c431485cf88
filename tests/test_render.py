"""Tests for frame generation and backend emission."""
from __future__ import annotations

from dataclasses import replace

import pytest
from tick_ballline.config import BLUE, DEFAULT_CONFIG, BallLineConfig
from tick_ballline.path import MoveTo
from tick_ballline.render import BallLineView, CommandRecorder, DrawCircle, DrawPath, FixedSurface
from tick_ballline.types import Circle, LayoutError


def kinds(commands) -> list[str]:
    return ["circle" if isinstance(c, DrawCircle) else "path" for c in commands]


class TestFrame:
    def test_unsized_surface_draws_nothing(self) -> None:
        view = BallLineView()
        assert view.frame(FixedSurface(), 0.0) == []
        assert view.layout is None
        assert view.layout_computations == 0

    def test_padding_wider_than_surface_draws_nothing(self) -> None:
        view = BallLineView()
        surface = FixedSurface(40, 100, left=24, right=24)
        assert view.frame(surface, 0.5) == []
        assert view.layout is None

        surface.resize(1100, 100)
        assert len(view.frame(surface, 0.5)) >= 6
        assert view.layout_computations == 1

    def test_zero_ball_count_is_reported(self) -> None:
        view = BallLineView(BallLineConfig(ball_count=0))
        with pytest.raises(LayoutError):
            view.frame(FixedSurface(100, 40), 0.5)

    def test_order_dynamic_first_then_left_to_right(self) -> None:
        """Dynamic ball, then each static ball followed by its connector."""
        view = BallLineView()
        commands = view.frame(FixedSurface(1100, 40), 0.0)
        assert kinds(commands) == ["circle", "circle", "path", "circle", "circle", "circle", "circle"]
        assert commands[0] == DrawCircle(Circle(15.0, 20.0, 15.0), BLUE)
        static_xs = [c.circle.x for c in commands[1:] if isinstance(c, DrawCircle)]
        assert static_xs == [60.0, 140.0, 220.0, 300.0, 380.0]

    def test_connector_joins_static_and_dynamic(self) -> None:
        view = BallLineView()
        commands = view.frame(FixedSurface(1100, 40), 0.0)
        path = commands[2]
        assert isinstance(path, DrawPath)
        assert path.commands[0] == MoveTo(60.0, 0.0)
        assert path.color == BLUE

    def test_connector_at_right_end(self) -> None:
        view = BallLineView()
        commands = view.frame(FixedSurface(1100, 40), 1.0)
        assert kinds(commands)[-2:] == ["circle", "path"]

    def test_no_connector_when_fully_merged(self) -> None:
        view = BallLineView()
        commands = view.frame(FixedSurface(1100, 40), 45 / 410)
        assert commands[0].circle.x == pytest.approx(60.0)
        assert "path" not in kinds(commands)

    def test_merge_rule_from_config(self) -> None:
        """Partial overlap: connected under full_intersect, merged under intersect."""
        surface = FixedSurface(1100, 40)
        progress = 55 / 410
        refined = BallLineView(DEFAULT_CONFIG).frame(surface, progress)
        legacy = BallLineView(replace(DEFAULT_CONFIG, merge_rule="intersect")).frame(surface, progress)
        assert "path" in kinds(refined)
        assert "path" not in kinds(legacy)

    def test_uses_config_color(self) -> None:
        view = BallLineView(BallLineConfig(ball_color=(1, 2, 3)))
        commands = view.frame(FixedSurface(1100, 40), 0.0)
        assert {c.color for c in commands} == {(1, 2, 3)}

    def test_unknown_merge_rule(self) -> None:
        with pytest.raises(KeyError):
            BallLineView(BallLineConfig(merge_rule="touching"))


class TestLayoutReuse:
    def test_layout_computed_once_per_size(self) -> None:
        view = BallLineView()
        surface = FixedSurface()
        view.frame(surface, 0.0)
        surface.resize(1100, 40)
        for i in range(50):
            view.frame(surface, i / 50)
        assert view.layout_computations == 1

        surface.resize(220, 100)
        view.frame(surface, 0.0)
        assert view.layout_computations == 2

    def test_invalidate_forces_recompute(self) -> None:
        view = BallLineView()
        surface = FixedSurface(1100, 40)
        view.frame(surface, 0.0)
        view.invalidate()
        view.frame(surface, 0.0)
        assert view.layout_computations == 2


class TestRender:
    def test_emits_to_backend(self) -> None:
        view = BallLineView()
        backend = CommandRecorder()
        count = view.render(FixedSurface(1100, 40), backend, 0.0)
        assert count == 7
        assert backend.names() == ["circle", "circle", "path", "circle", "circle", "circle", "circle"]
        assert backend.calls[0] == ("circle", (15.0, 20.0, 15.0, BLUE))
        name, (commands, color) = backend.calls[2]
        assert name == "path"
        assert len(commands) == 5
        assert color == BLUE

    def test_unsized_emits_nothing(self) -> None:
        backend = CommandRecorder()
        assert BallLineView().render(FixedSurface(), backend, 0.5) == 0
        assert backend.calls == []

    def test_frame_callback(self) -> None:
        view = BallLineView()
        surface = FixedSurface(1100, 40)
        on_progress = view.frame_callback(surface)
        assert on_progress(0.0) == view.frame(surface, 0.0)
