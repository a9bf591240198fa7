"""Shared test helpers."""

import json


class StubCompletionClient:
    """Completion client returning queued replies and recording prompts.

    A queued exception is raised instead of returned.
    """

    def __init__(self, *replies):
        self.replies = list(replies)
        self.prompts: list[str] = []

    def queue(self, *replies) -> None:
        self.replies.extend(replies)

    async def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


def make_workouts_json(*days: tuple[str, list[str]], fenced: bool = False) -> str:
    """Build model-style output for the given (day name, exercise names)."""
    text = json.dumps([
        {
            "name": name,
            "excercises": [
                {
                    "name": exercise,
                    "sets": 3,
                    "reps": 10 + i,
                    "restTime": 60,
                    "videoLink": exercise.lower(),
                }
                for i, exercise in enumerate(exercises)
            ],
        }
        for name, exercises in days
    ], indent=2)
    if fenced:
        return f"```json\n{text}\n```"
    return text
