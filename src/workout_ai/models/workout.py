"""Workout plan data models."""

from dataclasses import dataclass, field
from datetime import datetime

DEFAULT_EXERCISE_NAME = "Unknown Exercise"


@dataclass
class PlannedExercise:
    """One movement within a training day."""

    name: str
    sets: int = 0
    reps: int = 0
    rest_time: int = 0  # seconds
    video_link: str = ""  # exercise name used as a video search hint
    order_index: int = 0
    id: int | None = None

    def to_dict(self) -> dict:
        """Convert to the response dictionary shape."""
        return {
            "name": self.name,
            "sets": self.sets,
            "reps": self.reps,
            "restTime": self.rest_time,
            "videoLink": self.video_link,
        }

    @classmethod
    def from_dict(cls, data: dict, order_index: int = 0) -> "PlannedExercise":
        """Create from an AI-generated exercise object, filling in defaults."""
        raw_name = data.get("name")
        video_link = data.get("videoLink")
        if video_link is None:
            video_link = raw_name if raw_name is not None else ""

        return cls(
            name=raw_name if raw_name is not None else DEFAULT_EXERCISE_NAME,
            sets=data.get("sets") or 0,
            reps=data.get("reps") or 0,
            rest_time=data.get("restTime") or 0,
            video_link=video_link,
            order_index=order_index,
        )


@dataclass
class WorkoutDay:
    """A single named training day in a user's plan."""

    name: str
    exercises: list[PlannedExercise] = field(default_factory=list)
    day_number: int = 1
    id: int | None = None
    user_id: int | None = None
    created_at: datetime | None = None

    def to_dict(self) -> dict:
        """Convert to the response dictionary shape.

        The ``excercises`` key keeps its historical spelling; clients
        depend on it.
        """
        return {
            "name": self.name,
            "excercises": [ex.to_dict() for ex in self.exercises],
        }

    @classmethod
    def from_dict(cls, data: dict, day_number: int = 1) -> "WorkoutDay":
        """Create from an AI-generated workout object, filling in defaults."""
        name = data.get("name")
        return cls(
            name=name if name is not None else f"Day {day_number}",
            exercises=[
                PlannedExercise.from_dict(ex, order_index=i)
                for i, ex in enumerate(data.get("excercises") or [])
            ],
            day_number=day_number,
        )


@dataclass
class GenerationRequest:
    """Inputs for generating a weekly workout plan."""

    user_id: int
    age: int
    history: str
    goal: str
    location: str
    weight: int
    height: int
    amount: int
    gender: str | None = None

    def get_summary(self) -> str:
        """Short description for log lines."""
        return (
            f"user={self.user_id} age={self.age} goal={self.goal!r} "
            f"workouts/week={self.amount}"
        )
