"""Tab bar across the top of the window."""
from __future__ import annotations

import pygame

from ui.constants import TAB_ACTIVE_BG, TAB_BG, TAB_BORDER, TAB_H, TEXT_COLOR, TEXT_DIM


def draw_tab_bar(
    surface: pygame.Surface,
    font: pygame.font.Font,
    titles: list[str],
    selected: int,
) -> None:
    """Draw one equal-width tab per page, highlighting the selected one."""
    width = surface.get_width()
    pygame.draw.rect(surface, TAB_BG, (0, 0, width, TAB_H))
    if not titles:
        return

    tab_w = width // len(titles)
    for i, title in enumerate(titles):
        x = i * tab_w
        if i == selected:
            pygame.draw.rect(surface, TAB_ACTIVE_BG, (x, 0, tab_w, TAB_H))
        pygame.draw.line(surface, TAB_BORDER, (x, 0), (x, TAB_H))

        color = TEXT_COLOR if i == selected else TEXT_DIM
        label = font.render(f"{i + 1}  {title}", True, color)
        surface.blit(
            label,
            (x + tab_w // 2 - label.get_width() // 2, TAB_H // 2 - label.get_height() // 2),
        )
    pygame.draw.line(surface, TAB_BORDER, (0, TAB_H - 1), (width, TAB_H - 1))
