# src/planning_ga/__init__.py
from .callbacks import CallbackList, PlanningCallback
from .ga import GAAlgorithm, GAConfig, GAFitnessConfig, GAStats, hill_climb
from .policies import PlanningPolicy, VectorParamPolicy

__all__ = [
    "CallbackList",
    "GAAlgorithm",
    "GAConfig",
    "GAFitnessConfig",
    "GAStats",
    "PlanningCallback",
    "PlanningPolicy",
    "VectorParamPolicy",
    "hill_climb",
]
