from __future__ import annotations

from typing import Tuple

import numpy as np
import pygame


def _color_for_value(v: int) -> Tuple[int, int, int]:
    return (20, 20, 26) if v == 0 else (70, 200, 120)


class Renderer:
    def __init__(self, cell_size: int = 30, margin: int = 20) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self._font = None

    def window_size(self, rows: int, cols: int) -> Tuple[int, int]:
        return cols * self.cell_size + self.margin * 2, rows * self.cell_size + self.margin * 2

    def _grid_surface(self, state: np.ndarray) -> pygame.Surface:
        h, w = state.shape
        width = w * self.cell_size
        height = h * self.cell_size
        surf = pygame.Surface((width, height))
        surf.fill((30, 30, 36))
        for y in range(h):
            for x in range(w):
                color = _color_for_value(int(state[y, x]))
                rect = pygame.Rect(
                    x * self.cell_size,
                    y * self.cell_size,
                    self.cell_size - 1,
                    self.cell_size - 1,
                )
                pygame.draw.rect(surf, color, rect)
        return surf

    def draw(self, screen: pygame.Surface, state: np.ndarray, game_over: bool = False) -> None:
        screen.fill((10, 10, 14))
        if game_over:
            if self._font is None:
                self._font = pygame.font.SysFont(None, 36)
            text = self._font.render("Game Over - R to restart, ESC to quit", True, (255, 255, 255))
            rect = text.get_rect(center=(screen.get_width() // 2, screen.get_height() // 2))
            screen.blit(text, rect)
        else:
            screen.blit(self._grid_surface(state), (self.margin, self.margin))
        pygame.display.flip()
