from .algorithm import GAAlgorithm, hill_climb
from .config import GAConfig, GAFitnessConfig
from .types import GAStats

__all__ = [
    "GAAlgorithm",
    "GAConfig",
    "GAFitnessConfig",
    "GAStats",
    "hill_climb",
]
