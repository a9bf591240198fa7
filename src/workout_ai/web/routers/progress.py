"""Completed-exercise progress routes."""

import logging

import aiosqlite
from fastapi import APIRouter, Query, Request
from pydantic import BaseModel

from ...db.repositories import WorkoutProgressRepository
from ...models.progress import WorkoutProgress
from ..problems import PROGRESS_FAILED, problem_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/progress", tags=["progress"])


class ProgressEntry(BaseModel):
    """Request body for recording a completed exercise."""

    userId: int
    exerciseName: str | None = None
    sets: int = 0
    reps: int = 0
    weight: float = 0.0
    notes: str | None = None


def get_progress_repo(request: Request) -> WorkoutProgressRepository:
    """Get a progress repository bound to the app's database."""
    return WorkoutProgressRepository(request.app.state.db_path)


@router.post("")
async def record_progress(entry: ProgressEntry, request: Request):
    """Record one completed exercise."""
    if not entry.exerciseName or not entry.exerciseName.strip():
        return {"success": False, "message": "Exercise name is required"}

    progress = WorkoutProgress.from_dict(entry.model_dump())
    try:
        progress_id = await get_progress_repo(request).create(progress)
    except aiosqlite.IntegrityError:
        return {"success": False, "message": "Unknown user"}

    logger.info("Recorded %s for user %s", progress.exercise_name, progress.user_id)
    return {"success": True, "message": "Progress recorded", "id": progress_id}


@router.get("")
async def list_progress(request: Request, user_id: int = Query(..., alias="userId")):
    """List a user's recorded progress, newest first."""
    try:
        records = await get_progress_repo(request).list_for_user(user_id)
    except Exception:
        logger.exception("Progress lookup failed for user %s", user_id)
        return problem_response(PROGRESS_FAILED)

    return [record.to_dict() for record in records]
