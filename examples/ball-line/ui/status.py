"""Bottom status bar."""
from __future__ import annotations

import pygame

from game.pages import Page
from ui.constants import RUNNING_COLOR, STATUS_BG, STATUS_H, TAB_BORDER, TEXT_DIM


def draw_status_bar(surface: pygame.Surface, font: pygame.font.Font, page: Page) -> None:
    """Draw driver state, progress and key bindings for the current page."""
    width = surface.get_width()
    y = surface.get_height() - STATUS_H
    pygame.draw.rect(surface, STATUS_BG, (0, y, width, STATUS_H))
    pygame.draw.line(surface, TAB_BORDER, (0, y), (width, y))

    driver = page.driver
    state_color = RUNNING_COLOR if driver.running else TEXT_DIM
    state = font.render(f"{driver.state.value.upper()} {driver.progress:4.2f}", True, state_color)
    surface.blit(state, (8, y + STATUS_H // 2 - state.get_height() // 2))

    info = (
        f"merge={page.view.config.merge_rule}  layouts={page.view.layout_computations}"
        "   [Tab/1-3] Page  [Space] Hide  [Esc] Quit"
    )
    label = font.render(info, True, TEXT_DIM)
    surface.blit(label, (8 + state.get_width() + 16, y + STATUS_H // 2 - label.get_height() // 2))
