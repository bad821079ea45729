from .base import DrawConfig, NullRenderer, Renderer

__all__ = ["DrawConfig", "NullRenderer", "Renderer"]
