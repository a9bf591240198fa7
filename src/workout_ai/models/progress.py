"""Completed-exercise progress model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class WorkoutProgress:
    """A record of one completed exercise.

    Stores what the user actually did (sets, reps and the weight used)
    along with optional free-text notes.
    """

    user_id: int
    exercise_name: str
    sets: int = 0
    reps: int = 0
    weight: float = 0.0  # kg
    notes: str = ""
    completed_at: datetime | None = None
    id: int | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "userId": self.user_id,
            "exerciseName": self.exercise_name,
            "sets": self.sets,
            "reps": self.reps,
            "weight": self.weight,
            "notes": self.notes,
            "completedAt": self.completed_at.isoformat() if self.completed_at else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WorkoutProgress":
        """Create from a request dictionary."""
        return cls(
            user_id=data["userId"],
            exercise_name=data["exerciseName"],
            sets=data.get("sets", 0),
            reps=data.get("reps", 0),
            weight=data.get("weight", 0.0),
            notes=data.get("notes") or "",
        )
