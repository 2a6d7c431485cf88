"""Demo pages: one ball line view, surface and driver per tab."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from tick_ballline import (
    DEFAULT_CONFIG,
    LEGACY_CONFIG,
    AnimationDriver,
    BallLineConfig,
    BallLineView,
    from_mapping,
)

from ui.canvas import PageSurface
from ui.constants import CYCLE_MS, PAGE_PADDING, TPS

# Flat named values, as a host would read them from its settings.
CUSTOM_SETTINGS: dict[str, Any] = {
    "ball_count": 7,
    "ball_color": "#00C8FF",
    "ball_size_ratio": 0.6,
    "ball_gap_ratio": 0.8,
}


@dataclass
class Page:
    title: str
    view: BallLineView
    surface: PageSurface
    driver: AnimationDriver


def make_page(title: str, config: BallLineConfig, width: int, height: int) -> Page:
    surface = PageSurface(width, height, PAGE_PADDING)
    return Page(
        title=title,
        view=BallLineView(config),
        surface=surface,
        driver=AnimationDriver(surface, duration=CYCLE_MS, tps=TPS),
    )


def make_pages(width: int, height: int) -> list[Page]:
    return [
        make_page("Classic", LEGACY_CONFIG, width, height),
        make_page("Refined", DEFAULT_CONFIG, width, height),
        make_page("Custom", from_mapping(CUSTOM_SETTINGS), width, height),
    ]


class PageSet:
    """Pages sharing one window. Only the selected, shown page animates."""

    def __init__(self, pages: list[Page], selected: int = 0) -> None:
        self.pages = pages
        self.selected = selected
        self.hidden = False
        for i, page in enumerate(pages):
            if i != selected:
                page.driver.set_visible(False)
            page.driver.attach()

    @property
    def current(self) -> Page:
        return self.pages[self.selected]

    @property
    def titles(self) -> list[str]:
        return [page.title for page in self.pages]

    def select(self, index: int) -> None:
        if index == self.selected or not 0 <= index < len(self.pages):
            return
        self.current.driver.set_visible(False)
        self.selected = index
        self.hidden = False
        self.current.driver.set_visible(True)

    def toggle_hidden(self) -> None:
        self.hidden = not self.hidden
        self.current.driver.set_visible(not self.hidden)

    def resize(self, width: int, height: int) -> None:
        for page in self.pages:
            page.surface.resize(width, height)

    def update(self, frame_ms: float) -> None:
        for page in self.pages:
            page.driver.update(frame_ms)

    def close(self) -> None:
        for page in self.pages:
            page.driver.detach()
