"""Workout plan routes."""

import logging

from fastapi import APIRouter, Query, Request, Response

from ...agents.client import CompletionError
from ...db.repositories import WorkoutPlanRepository
from ...models.workout import GenerationRequest
from ...services.generation import WorkoutGenerator
from ...services.plan_parser import EmptyPlanError, PlanParseError
from ..problems import (
    GENERATION_FAILED,
    LOOKUP_FAILED,
    PLAN_UNPARSEABLE,
    REPLACEMENT_FAILED,
    problem_response,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["workouts"])


def get_generator(request: Request) -> WorkoutGenerator:
    """Build a generator from the app's completion client and database."""
    return WorkoutGenerator(
        client=request.app.state.completion_client,
        plan_repo=WorkoutPlanRepository(request.app.state.db_path),
    )


@router.get("/get-user-workout")
async def get_user_workout(request: Request, user_id: int = Query(..., alias="userId")):
    """Return the user's stored plan, or an empty list."""
    logger.info("Workout lookup for user %s", user_id)

    try:
        workouts = await WorkoutPlanRepository(request.app.state.db_path).list_for_user(user_id)
    except Exception:
        logger.exception("Workout lookup failed for user %s", user_id)
        return problem_response(LOOKUP_FAILED)

    logger.info("Found %d workouts for user %s", len(workouts), user_id)
    return [workout.to_dict() for workout in workouts]


@router.get("/workouts")
async def generate_workouts(
    request: Request,
    user_id: int = Query(..., alias="userId"),
    age: int = Query(...),
    history: str = Query(...),
    goal: str = Query(...),
    location: str = Query(...),
    weight: int = Query(...),
    height: int = Query(...),
    amount: int = Query(...),
    gender: str | None = Query(None),
):
    """Generate a new plan, replace the stored one and return it."""
    generation_request = GenerationRequest(
        user_id=user_id,
        age=age,
        gender=gender,
        history=history,
        goal=goal,
        location=location,
        weight=weight,
        height=height,
        amount=amount,
    )
    logger.info("Workout generation requested: %s", generation_request.get_summary())

    try:
        plan_text = await get_generator(request).generate(generation_request)
    except CompletionError:
        logger.exception("Completion failed for user %s", user_id)
        return problem_response(GENERATION_FAILED, status_code=502)
    except EmptyPlanError:
        logger.warning("No workouts were parsed for user %s; stored plan kept", user_id)
        return problem_response(PLAN_UNPARSEABLE)
    except PlanParseError:
        logger.exception("Could not parse workout plan for user %s", user_id)
        return problem_response(PLAN_UNPARSEABLE)
    except Exception:
        logger.exception("Workout generation failed for user %s", user_id)
        return problem_response(GENERATION_FAILED)

    return Response(content=plan_text, media_type="application/json")


@router.get("/replace-exercise")
async def replace_exercise(request: Request, exercise_name: str = Query(..., alias="exerciseName")):
    """Suggest a single alternative exercise (not stored)."""
    logger.info("Replacement requested for exercise: %s", exercise_name)

    try:
        exercise_text = await get_generator(request).suggest_replacement(exercise_name)
    except CompletionError:
        logger.exception("Completion failed for replacement of %s", exercise_name)
        return problem_response(REPLACEMENT_FAILED, status_code=502)
    except Exception:
        logger.exception("Replacement failed for %s", exercise_name)
        return problem_response(REPLACEMENT_FAILED)

    return Response(content=exercise_text, media_type="application/json")
