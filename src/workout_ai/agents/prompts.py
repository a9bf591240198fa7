"""Prompt templates for workout generation."""

from ..models.workout import GenerationRequest

# Example object shown to the model; field names (including the
# "excercises" spelling) are what the parser expects back.
WORKOUT_SHAPE_EXAMPLE = """{
    "name": "workout day name",
    "excercises": [
        {
            "name": "exercise name",
            "sets": 3,
            "reps": 12,
            "restTime": 60,
            "videoLink": "exercise name"
        }
    ]
}"""

EXERCISE_SHAPE_EXAMPLE = """{
    "name": "exercise name",
    "sets": 3,
    "reps": 12,
    "restTime": 60,
    "videoLink": "exercise name"
}"""

VIDEO_LINK_RULE = """CRITICAL: For videoLink - put ONLY the exercise name as plain text. DO NOT include any URLs or links.
Example: "videoLink": "{example}" NOT "videoLink": "https://..." """


def format_user_stats(request: GenerationRequest) -> str:
    """Format the user's stats block for inclusion in the workout prompt."""
    lines = [
        f"height: {request.height}cm, weight: {request.weight}kg, age: {request.age}",
    ]
    if request.gender:
        lines.append(f"gender: {request.gender}")
    lines.extend([
        f"goal: {request.goal}",
        f"workout history: {request.history}",
        f"goal workouts per week: {request.amount}",
        f"workout location: {request.location}",
    ])
    return "\n".join(lines)


def build_workout_prompt(request: GenerationRequest) -> str:
    """Build the prompt asking for a weekly plan of ``request.amount`` days.

    Free-text fields are inserted as-is.
    """
    return f"""i have the following json structure:
{WORKOUT_SHAPE_EXAMPLE}

build me a workout for someone with these stats:
{format_user_stats(request)}

Return ONLY a JSON array of {request.amount} workout objects (one for each day).
Each workout MUST have a 'name' field (like 'Push Day', 'Pull Day', etc.) and an 'excercises' array (note: excercises with TWO e's).

{VIDEO_LINK_RULE.format(example="bench press").rstrip()}

DO NOT RETURN ANY OTHER TEXT EXCEPT THE JSON ARRAY."""


def build_replacement_prompt(exercise_name: str) -> str:
    """Build the prompt asking for one alternative to ``exercise_name``."""
    return f"""Find an alternative exercise for: {exercise_name}

Return ONLY a JSON object in this exact format (no other text):
{EXERCISE_SHAPE_EXAMPLE}

{VIDEO_LINK_RULE.format(example="dumbbell press").rstrip()}

DO NOT return any text except the JSON object."""
