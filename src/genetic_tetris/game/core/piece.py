# src/genetic_tetris/game/core/piece.py
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, Tuple

import numpy as np

from genetic_tetris.game.core.constants import NUM_PIECES
from genetic_tetris.game.core.types import Position

Cell = Tuple[int, int]
Shape = Tuple[Cell, Cell, Cell, Cell]


class PieceColor(IntEnum):
    """Board cell values. 0 is empty; colors only tag ownership for rendering."""

    EMPTY = 0
    TEAL = 1
    BLUE = 2
    ORANGE = 3
    YELLOW = 4
    GREEN = 5
    PURPLE = 6
    RED = 7


# (color, shape, rotation center); order defines the piece index
_CANONICAL: Tuple[Tuple[PieceColor, Shape, Tuple[float, float]], ...] = (
    (PieceColor.TEAL, ((0, 0), (1, 0), (2, 0), (3, 0)), (2.0, 1.0)),
    (PieceColor.BLUE, ((0, 0), (0, 1), (1, 1), (2, 1)), (1.0, 1.0)),
    (PieceColor.ORANGE, ((2, 0), (0, 1), (1, 1), (2, 1)), (2.0, 1.0)),
    (PieceColor.YELLOW, ((0, 0), (1, 0), (0, 1), (1, 1)), (1.0, 1.0)),
    (PieceColor.GREEN, ((1, 0), (2, 0), (0, 1), (1, 1)), (1.0, 1.0)),
    (PieceColor.PURPLE, ((1, 0), (0, 1), (1, 1), (2, 1)), (1.0, 1.0)),
    (PieceColor.RED, ((0, 0), (1, 0), (1, 1), (2, 1)), (1.0, 1.0)),
)

_KIND_NAMES: dict[PieceColor, str] = {
    PieceColor.TEAL: "I",
    PieceColor.BLUE: "J",
    PieceColor.ORANGE: "L",
    PieceColor.YELLOW: "O",
    PieceColor.GREEN: "S",
    PieceColor.PURPLE: "T",
    PieceColor.RED: "Z",
}


@dataclass
class Piece:
    """
    A tetromino: four (x, y) offsets from the anchor, a rotation center and a color.

    rotate() replaces `shape` on this object. Copy first when the rotation is
    hypothetical.
    """

    color: PieceColor
    shape: Shape
    center: Tuple[float, float]

    @classmethod
    def from_index(cls, idx: int) -> "Piece":
        ii = int(idx)
        if ii < 0 or ii >= len(_CANONICAL):
            raise ValueError(f"piece index out of range: {ii} (valid 0..{len(_CANONICAL) - 1})")
        color, shape, center = _CANONICAL[ii]
        return cls(color=color, shape=shape, center=center)

    @property
    def kind(self) -> str:
        return _KIND_NAMES[self.color]

    def copy(self) -> "Piece":
        return Piece(color=self.color, shape=self.shape, center=self.center)

    def rotate(self) -> None:
        """
        Rotate 90 degrees about the center.

        Rotated coordinates are truncated toward zero, so a fractional center
        does not round-trip after four rotations. All canonical centers are
        integral.
        """
        cx, cy = self.center
        out = []
        for x0, y0 in self.shape:
            x = float(x0) - cx
            y = float(y0) - cy
            out.append((int(-y + cx), int(x + cy)))
        self.shape = tuple(out)  # type: ignore[assignment]

    def x_bounds(self) -> Tuple[int, int]:
        xs = [x for x, _y in self.shape]
        return int(min(xs)), int(max(xs))

    def cells(self, position: Position) -> Iterator[Cell]:
        """Absolute (x, y) board cells when anchored at `position`."""
        for x, y in self.shape:
            yield int(position.x + x), int(position.y + y)


def random_piece(rng: np.random.Generator) -> Piece:
    return Piece.from_index(int(rng.integers(0, NUM_PIECES)))


def all_pieces() -> list[Piece]:
    return [Piece.from_index(i) for i in range(len(_CANONICAL))]


__all__ = ["Piece", "PieceColor", "all_pieces", "random_piece"]
