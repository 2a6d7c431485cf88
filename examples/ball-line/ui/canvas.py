"""pygame host surface and rendering backend for a ball line page."""
from __future__ import annotations

import pygame

from tick_ballline import flatten_path
from tick_ballline.path import PathCommand

from ui.constants import CURVE_SEGMENTS, PAGE_BG


class PageSurface:
    """Offscreen canvas for one page. Repaint requests mark it stale."""

    def __init__(self, width: int, height: int, padding: int) -> None:
        self.canvas = pygame.Surface((max(width, 0), max(height, 0)))
        self.padding = padding
        self.needs_repaint = True

    def width(self) -> int:
        return self.canvas.get_width()

    def height(self) -> int:
        return self.canvas.get_height()

    def padding_left(self) -> int:
        return self.padding

    def padding_right(self) -> int:
        return self.padding

    def request_repaint(self) -> None:
        self.needs_repaint = True

    def resize(self, width: int, height: int) -> None:
        self.canvas = pygame.Surface((max(width, 0), max(height, 0)))
        self.needs_repaint = True


class PygameBackend:
    """Fills circles directly and connectors as flattened polygons."""

    def __init__(self, canvas: pygame.Surface, segments: int = CURVE_SEGMENTS) -> None:
        self.canvas = canvas
        self.segments = segments

    def draw_filled_circle(self, x: float, y: float, radius: float, color: tuple[int, int, int]) -> None:
        pygame.draw.circle(self.canvas, color, (x, y), radius)

    def draw_filled_closed_path(self, commands: tuple[PathCommand, ...], color: tuple[int, int, int]) -> None:
        points = flatten_path(commands, self.segments)
        if len(points) >= 3:
            pygame.draw.polygon(self.canvas, color, points)


def repaint(surface: PageSurface, view, progress: float) -> bool:
    """Redraw the page canvas if a repaint was requested. Returns True if drawn."""
    if not surface.needs_repaint:
        return False
    surface.canvas.fill(PAGE_BG)
    view.render(surface, PygameBackend(surface.canvas), progress)
    surface.needs_repaint = False
    return True
