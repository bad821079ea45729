from .base import CallbackList, PlanningCallback, wrap_callbacks

__all__ = ["CallbackList", "PlanningCallback", "wrap_callbacks"]
