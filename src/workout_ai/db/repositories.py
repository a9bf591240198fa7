"""Data access layer for workout-ai."""

import logging
from datetime import datetime
from pathlib import Path

import aiosqlite

from ..models.progress import WorkoutProgress
from ..models.user import User
from ..models.workout import PlannedExercise, WorkoutDay
from .engine import connect, get_db_path, unit_of_work

logger = logging.getLogger(__name__)


def _parse_timestamp(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None


class UserRepository:
    """Repository for user accounts."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, username: str, password: str) -> User:
        """Create a new user.

        Raises:
            aiosqlite.IntegrityError: If the username is already taken
        """
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                "INSERT INTO users (username, password) VALUES (?, ?)",
                (username, password),
            )
            await db.commit()
            user_id = cursor.lastrowid

        return User(username=username, password=password, id=user_id)

    async def get_by_username(self, username: str) -> User | None:
        """Get a user by exact username."""
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                "SELECT * FROM users WHERE username = ?", (username,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_user(row)

    async def authenticate(self, username: str, password: str) -> User | None:
        """Find the user matching both username and password exactly."""
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                "SELECT * FROM users WHERE username = ? AND password = ?",
                (username, password),
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_user(row)

    def _row_to_user(self, row: aiosqlite.Row) -> User:
        """Convert a database row to a User."""
        return User(
            username=row["username"],
            password=row["password"],
            id=row["id"],
            created_at=_parse_timestamp(row["created_at"]),
        )


class WorkoutPlanRepository:
    """Repository for a user's workout plan (one row per training day)."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def replace_for_user(self, user_id: int, workouts: list[WorkoutDay]) -> list[int]:
        """Replace every plan the user owns with the given workouts.

        The delete and all inserts share one transaction: either the whole
        new plan is stored or the previous one is left untouched. Day numbers
        and exercise order indices are taken from list positions.

        Returns:
            IDs of the inserted workout plans, in day order
        """
        plan_ids = []
        async with unit_of_work(self.db_path) as db:
            await db.execute(
                """
                DELETE FROM exercises WHERE workout_plan_id IN (
                    SELECT id FROM workout_plans WHERE user_id = ?
                )
                """,
                (user_id,),
            )
            cursor = await db.execute(
                "DELETE FROM workout_plans WHERE user_id = ?", (user_id,)
            )
            logger.debug("Removed %d previous plans for user %s", cursor.rowcount, user_id)

            for day_number, workout in enumerate(workouts, start=1):
                cursor = await db.execute(
                    """
                    INSERT INTO workout_plans (user_id, name, day_number)
                    VALUES (?, ?, ?)
                    """,
                    (user_id, workout.name, day_number),
                )
                plan_id = cursor.lastrowid
                plan_ids.append(plan_id)

                await db.executemany(
                    """
                    INSERT INTO exercises
                    (workout_plan_id, name, sets, reps, rest_time, video_link, order_index)
                    VALUES (?, ?, ?, ?, ?, ?, ?)
                    """,
                    [
                        (
                            plan_id,
                            ex.name,
                            ex.sets,
                            ex.reps,
                            ex.rest_time,
                            ex.video_link,
                            order_index,
                        )
                        for order_index, ex in enumerate(workout.exercises)
                    ],
                )

        return plan_ids

    async def list_for_user(self, user_id: int) -> list[WorkoutDay]:
        """Get the user's plan ordered by day, exercises ordered by position."""
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                """
                SELECT * FROM workout_plans
                WHERE user_id = ?
                ORDER BY day_number, id
                """,
                (user_id,),
            )
            plan_rows = await cursor.fetchall()
            if not plan_rows:
                return []

            cursor = await db.execute(
                """
                SELECT e.* FROM exercises e
                JOIN workout_plans wp ON wp.id = e.workout_plan_id
                WHERE wp.user_id = ?
                ORDER BY e.workout_plan_id, e.order_index
                """,
                (user_id,),
            )
            exercise_rows = await cursor.fetchall()

        exercises_by_plan: dict[int, list[PlannedExercise]] = {}
        for row in exercise_rows:
            exercises_by_plan.setdefault(row["workout_plan_id"], []).append(
                self._row_to_exercise(row)
            )

        return [
            WorkoutDay(
                name=row["name"],
                exercises=exercises_by_plan.get(row["id"], []),
                day_number=row["day_number"],
                id=row["id"],
                user_id=row["user_id"],
                created_at=_parse_timestamp(row["created_at"]),
            )
            for row in plan_rows
        ]

    def _row_to_exercise(self, row: aiosqlite.Row) -> PlannedExercise:
        """Convert a database row to a PlannedExercise."""
        return PlannedExercise(
            name=row["name"],
            sets=row["sets"],
            reps=row["reps"],
            rest_time=row["rest_time"],
            video_link=row["video_link"],
            order_index=row["order_index"],
            id=row["id"],
        )


class WorkoutProgressRepository:
    """Repository for completed-exercise records."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, progress: WorkoutProgress) -> int:
        """Store a progress record.

        Raises:
            aiosqlite.IntegrityError: If the user does not exist
        """
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                """
                INSERT INTO workout_progress
                (user_id, exercise_name, sets, reps, weight, notes)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    progress.user_id,
                    progress.exercise_name,
                    progress.sets,
                    progress.reps,
                    progress.weight,
                    progress.notes,
                ),
            )
            await db.commit()
            return cursor.lastrowid

    async def list_for_user(self, user_id: int) -> list[WorkoutProgress]:
        """List a user's progress records, newest first."""
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                """
                SELECT * FROM workout_progress
                WHERE user_id = ?
                ORDER BY completed_at DESC, id DESC
                """,
                (user_id,),
            )
            rows = await cursor.fetchall()
            return [self._row_to_progress(row) for row in rows]

    def _row_to_progress(self, row: aiosqlite.Row) -> WorkoutProgress:
        """Convert a database row to a WorkoutProgress."""
        return WorkoutProgress(
            user_id=row["user_id"],
            exercise_name=row["exercise_name"],
            sets=row["sets"],
            reps=row["reps"],
            weight=row["weight"],
            notes=row["notes"] or "",
            completed_at=_parse_timestamp(row["completed_at"]),
            id=row["id"],
        )
