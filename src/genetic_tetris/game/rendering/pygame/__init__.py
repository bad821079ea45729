from .palette import Palette
from .renderer import PygameRenderer, WindowSpec

__all__ = ["Palette", "PygameRenderer", "WindowSpec"]
