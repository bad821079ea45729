from .base import PlanningPolicy, VectorParamPolicy

__all__ = ["PlanningPolicy", "VectorParamPolicy"]
