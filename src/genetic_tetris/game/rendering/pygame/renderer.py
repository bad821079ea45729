# src/genetic_tetris/game/rendering/pygame/renderer.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import pygame

from genetic_tetris.game.core.constants import SPAWN_OFFSET
from genetic_tetris.game.core.game import GameState
from genetic_tetris.game.core.piece import Piece
from genetic_tetris.game.core.types import Position
from genetic_tetris.game.rendering.pygame.palette import Color, Palette

__all__ = ["PygameRenderer", "WindowSpec"]


@dataclass(frozen=True)
class WindowSpec:
    cell: int = 30
    title: str = "Genetic Tetris"
    fps: int = 0  # 0 = uncapped


class PygameRenderer:
    """
    Draws the locked board, the active piece, its ghost, the spawn line, the
    score and a game-over overlay.

    Window creation happens in the constructor; pygame errors propagate.
    """

    def __init__(self, *, board_w: int, board_h: int, spec: Optional[WindowSpec] = None,
                 palette: Optional[Palette] = None) -> None:
        self.spec = spec or WindowSpec()
        self.palette = palette or Palette()
        self.cell = int(self.spec.cell)

        pygame.init()
        pygame.display.set_caption(self.spec.title)
        self.screen = pygame.display.set_mode((self.cell * int(board_w), self.cell * int(board_h)))
        self.font = pygame.font.SysFont(None, 24)
        self.big_font = pygame.font.SysFont(None, 48)
        self.clock = pygame.time.Clock()

    def close(self) -> None:
        pygame.display.quit()

    def render(self, state: GameState) -> None:
        # keep the window responsive; input is not read here
        pygame.event.pump()

        screen = self.screen
        screen.fill(self.palette.bg)

        spawn_y = self.cell * SPAWN_OFFSET
        pygame.draw.rect(screen, self.palette.spawn_line, pygame.Rect(0, spawn_y, screen.get_width(), 1))

        self._draw_piece(state.current_piece, state.pos, alpha=255)
        self._draw_piece(state.current_piece, state.ghost_pos, alpha=int(self.palette.ghost_alpha))

        grid = state.board.grid
        for y in range(state.board.h):
            for x in range(state.board.w):
                pid = int(grid[y, x])
                if pid == 0:
                    continue
                self._draw_cell(x, y, self.palette.color_for_piece_id(pid), alpha=255)

        score = self.font.render(f"Score: {int(state.score)}", True, self.palette.text)
        screen.blit(score, (4, 4))

        if state.game_over:
            overlay = pygame.Surface(screen.get_size(), flags=pygame.SRCALPHA)
            overlay.fill(self.palette.overlay_rgba)
            screen.blit(overlay, (0, 0))
            text = self.big_font.render("Game Over!", True, self.palette.warn)
            rect = text.get_rect(center=(screen.get_width() // 2, screen.get_height() // 2))
            screen.blit(text, rect)

        pygame.display.flip()
        if int(self.spec.fps) > 0:
            self.clock.tick(int(self.spec.fps))

    def _draw_piece(self, piece: Piece, pos: Position, *, alpha: int) -> None:
        color = self.palette.color_for_piece_id(int(piece.color))
        for x, y in piece.cells(pos):
            self._draw_cell(x, y, color, alpha=alpha)

    def _draw_cell(self, x: int, y: int, color: Color, *, alpha: int) -> None:
        size: Tuple[int, int] = (self.cell - 1, self.cell - 1)
        surf = pygame.Surface(size, flags=pygame.SRCALPHA)
        surf.fill((*color, int(alpha)))
        self.screen.blit(surf, (self.cell * int(x), self.cell * int(y)))
