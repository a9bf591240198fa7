"""Application services."""

from .generation import WorkoutGenerator
from .plan_parser import EmptyPlanError, PlanParseError, parse_workout_plan

__all__ = [
    "EmptyPlanError",
    "parse_workout_plan",
    "PlanParseError",
    "WorkoutGenerator",
]
