"""Data models for workout-ai."""

from .progress import WorkoutProgress
from .user import User, validate_credentials
from .workout import GenerationRequest, PlannedExercise, WorkoutDay

__all__ = [
    "GenerationRequest",
    "PlannedExercise",
    "User",
    "validate_credentials",
    "WorkoutDay",
    "WorkoutProgress",
]
