"""Workout generation and exercise replacement service."""

import logging

from ..agents.client import CompletionClient
from ..agents.prompts import build_replacement_prompt, build_workout_prompt
from ..db.repositories import WorkoutPlanRepository
from ..models.workout import GenerationRequest, WorkoutDay
from ..utils.json_text import clean_json_string, preview
from .plan_parser import parse_workout_plan

logger = logging.getLogger(__name__)


class WorkoutGenerator:
    """Generates workout plans with a completion client and stores them."""

    def __init__(self, client: CompletionClient, plan_repo: WorkoutPlanRepository):
        self.client = client
        self.plan_repo = plan_repo

    async def generate(self, request: GenerationRequest) -> str:
        """Generate and persist a new plan for the requesting user.

        The user's previous plan is replaced only once the new one has been
        parsed successfully.

        Returns:
            The cleaned model output, exactly as parsed

        Raises:
            CompletionError: If the completion request fails
            PlanParseError: If the output is not a usable plan
        """
        prompt = build_workout_prompt(request)
        logger.debug("Workout prompt:\n%s", prompt)

        raw = await self.client.complete(prompt)
        clean = clean_json_string(raw)
        logger.info("Received workout plan for user %s: %s", request.user_id, preview(clean))

        workouts = parse_workout_plan(clean)
        await self.save(request.user_id, workouts)
        return clean

    async def save(self, user_id: int, workouts: list[WorkoutDay]) -> list[int]:
        """Replace the user's stored plan with ``workouts``."""
        logger.info("Saving %d workouts for user %s", len(workouts), user_id)
        for workout in workouts:
            logger.debug(
                "Day %d '%s': %d exercises",
                workout.day_number,
                workout.name,
                len(workout.exercises),
            )
        plan_ids = await self.plan_repo.replace_for_user(user_id, workouts)
        logger.info("Saved workout plan for user %s", user_id)
        return plan_ids

    async def suggest_replacement(self, exercise_name: str) -> str:
        """Ask for one alternative exercise.

        The cleaned output is returned without parsing or storing it.
        """
        raw = await self.client.complete(build_replacement_prompt(exercise_name))
        clean = clean_json_string(raw)
        logger.info("Alternative for '%s': %s", exercise_name, preview(clean))
        return clean
