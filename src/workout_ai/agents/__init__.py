"""AI prompt construction and completion clients."""

from .client import AnthropicCompletionClient, CompletionClient, CompletionError
from .prompts import build_replacement_prompt, build_workout_prompt

__all__ = [
    "AnthropicCompletionClient",
    "build_replacement_prompt",
    "build_workout_prompt",
    "CompletionClient",
    "CompletionError",
]
