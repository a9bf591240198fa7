"""Database layer for workout-ai."""

from .engine import connect, get_db_path, init_db, resolve_db_path, unit_of_work
from .repositories import (
    UserRepository,
    WorkoutPlanRepository,
    WorkoutProgressRepository,
)

__all__ = [
    "connect",
    "get_db_path",
    "init_db",
    "resolve_db_path",
    "unit_of_work",
    "UserRepository",
    "WorkoutPlanRepository",
    "WorkoutProgressRepository",
]
