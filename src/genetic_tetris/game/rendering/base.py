# src/genetic_tetris/game/rendering/base.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Protocol, runtime_checkable

DrawMode = Literal["all", "none", "every_n"]


@dataclass(frozen=True)
class DrawConfig:
    """When the game loop hands the state to the renderer."""

    mode: DrawMode = "all"
    every: int = 1

    @classmethod
    def all_frames(cls) -> "DrawConfig":
        return cls(mode="all")

    @classmethod
    def no_frames(cls) -> "DrawConfig":
        return cls(mode="none")

    @classmethod
    def every_n(cls, n: int) -> "DrawConfig":
        if int(n) < 1:
            raise ValueError(f"every_n requires n >= 1, got {n}")
        return cls(mode="every_n", every=int(n))

    def should_render(self, drop_count: int) -> bool:
        if self.mode == "all":
            return True
        if self.mode == "none":
            return False
        return int(drop_count) % int(self.every) == 0


@runtime_checkable
class Renderer(Protocol):
    def render(self, state: Any) -> None:
        raise NotImplementedError


class NullRenderer:
    def render(self, state: Any) -> None:
        _ = state


__all__ = ["DrawConfig", "DrawMode", "NullRenderer", "Renderer"]
