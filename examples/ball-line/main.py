"""Ball Line: elastic bezier connectors between a moving ball and a row of balls.

Exercises tick-ballline: layout, motion, connectors and the animation driver.

Controls:
  Tab     Next page
  1-3     Select page
  Space   Hide / show the current page (stops / restarts its animation)
  Esc     Quit

The window is resizable; each page lays itself out again on the next frame.
"""
from __future__ import annotations

import logging
import sys

import pygame

from game.pages import PageSet, make_pages
from ui.canvas import repaint
from ui.constants import BG_COLOR, FPS, SCREEN_H, SCREEN_W, STATUS_H, TAB_H
from ui.status import draw_status_bar
from ui.tabs import draw_tab_bar

PAGE_KEYS = {pygame.K_1: 0, pygame.K_2: 1, pygame.K_3: 2}


def page_size(width: int, height: int) -> tuple[int, int]:
    return max(width, 0), max(height - TAB_H - STATUS_H, 0)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H), pygame.RESIZABLE)
    pygame.display.set_caption("Ball Line - tick-ballline demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    pages = PageSet(make_pages(*page_size(SCREEN_W, SCREEN_H)), selected=1)
    running = True

    while running:
        frame_ms = clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.VIDEORESIZE:
                screen = pygame.display.set_mode(event.size, pygame.RESIZABLE)
                pages.resize(*page_size(*event.size))

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_TAB:
                    pages.select((pages.selected + 1) % len(pages.pages))
                elif event.key in PAGE_KEYS:
                    pages.select(PAGE_KEYS[event.key])
                elif event.key == pygame.K_SPACE:
                    pages.toggle_hidden()

        # --- Tick ---
        pages.update(frame_ms)

        # --- Render ---
        screen.fill(BG_COLOR)
        page = pages.current
        if not pages.hidden:
            repaint(page.surface, page.view, page.driver.progress)
            screen.blit(page.surface.canvas, (0, TAB_H))
        draw_tab_bar(screen, font, pages.titles, pages.selected)
        draw_status_bar(screen, font, page)

        pygame.display.flip()

    pages.close()
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
