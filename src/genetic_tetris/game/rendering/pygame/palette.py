# src/genetic_tetris/game/rendering/pygame/palette.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class Palette:
    """
    UI palette for the pygame renderer.

    Piece colors are indexed by PieceColor value (1..7; 0 = empty). UI-only.
    """

    bg: Color = (255, 255, 255)
    text: Color = (0, 0, 0)
    spawn_line: Color = (153, 0, 0)
    overlay_rgba: Tuple[int, int, int, int] = (0, 0, 0, 230)
    warn: Color = (255, 77, 77)
    fallback_piece: Color = (180, 180, 180)

    ghost_alpha: int = 64  # 0..255

    piece_1: Color = (0x00, 0x80, 0x80)  # teal (I)
    piece_2: Color = (0x03, 0x41, 0xAE)  # blue (J)
    piece_3: Color = (0xFF, 0x97, 0x1C)  # orange (L)
    piece_4: Color = (0xFF, 0xD5, 0x00)  # yellow (O)
    piece_5: Color = (0x72, 0xCB, 0x3B)  # green (S)
    piece_6: Color = (0x80, 0x00, 0x80)  # purple (T)
    piece_7: Color = (0xFF, 0x32, 0x13)  # red (Z)

    def color_for_piece_id(self, piece_id: int) -> Color:
        pid = int(piece_id)
        if pid <= 0:
            return self.bg
        return getattr(self, f"piece_{pid}", self.fallback_piece)


__all__ = ["Color", "Palette"]
