"""Parsing of AI-generated workout plans."""

import json

from ..models.workout import WorkoutDay

EXERCISE_COUNT_FIELDS = ("sets", "reps", "restTime")
EXERCISE_TEXT_FIELDS = ("name", "videoLink")

# Counts are stored as 32-bit integers
MAX_COUNT = 2**31 - 1


class PlanParseError(ValueError):
    """Raised when model output is not a list of workout objects."""


class EmptyPlanError(PlanParseError):
    """Raised when model output parses but contains no workouts."""


def _check_exercise(data, day: int, position: int) -> None:
    where = f"workout {day}, exercise {position}"
    if not isinstance(data, dict):
        raise PlanParseError(f"{where}: expected an object")

    for key in EXERCISE_TEXT_FIELDS:
        value = data.get(key)
        if value is not None and not isinstance(value, str):
            raise PlanParseError(f"{where}: '{key}' must be a string")

    for key in EXERCISE_COUNT_FIELDS:
        value = data.get(key)
        # bool is an int subclass but never a valid count
        if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
            raise PlanParseError(f"{where}: '{key}' must be an integer")
        if value is not None and not 0 <= value <= MAX_COUNT:
            raise PlanParseError(f"{where}: '{key}' is out of range")


def _check_workout(data, day: int) -> None:
    if not isinstance(data, dict):
        raise PlanParseError(f"workout {day}: expected an object")

    name = data.get("name")
    if name is not None and not isinstance(name, str):
        raise PlanParseError(f"workout {day}: 'name' must be a string")

    exercises = data.get("excercises")
    if exercises is None:
        return
    if not isinstance(exercises, list):
        raise PlanParseError(f"workout {day}: 'excercises' must be an array")
    for position, exercise in enumerate(exercises):
        _check_exercise(exercise, day, position)


def parse_workout_plan(text: str) -> list[WorkoutDay]:
    """Parse cleaned model output into workout days.

    The text must be a JSON array of workout objects. Property names are
    matched exactly. Missing names, exercise lists and counts fall back to
    the defaults applied by ``WorkoutDay.from_dict``. Day numbers are the
    1-based array positions.

    Raises:
        PlanParseError: If the text is not valid JSON or has the wrong shape
        EmptyPlanError: If the array (or a JSON null) holds no workouts
    """
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, TypeError) as e:
        raise PlanParseError(f"Invalid JSON: {e}") from e

    if data is None:
        raise EmptyPlanError("No workouts in model output")
    if not isinstance(data, list):
        raise PlanParseError(f"Expected a JSON array, got {type(data).__name__}")
    if not data:
        raise EmptyPlanError("No workouts in model output")

    for day, workout in enumerate(data, start=1):
        _check_workout(workout, day)

    return [
        WorkoutDay.from_dict(workout, day_number=day)
        for day, workout in enumerate(data, start=1)
    ]
