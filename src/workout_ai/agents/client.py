"""Text-completion clients used for workout generation."""

import logging
from typing import Protocol

import anthropic

from ..config import Settings

logger = logging.getLogger(__name__)


class CompletionError(RuntimeError):
    """Raised when the completion provider fails or returns nothing usable."""


class CompletionClient(Protocol):
    """Anything that turns a prompt into raw model text."""

    async def complete(self, prompt: str) -> str:
        ...


class AnthropicCompletionClient:
    """Single-turn completions through the Anthropic Messages API."""

    def __init__(
        self,
        api_key: str | None,
        model: str,
        max_tokens: int,
        timeout: float | None = None,
    ):
        client_kwargs = {"api_key": api_key}
        if timeout is not None:
            client_kwargs["timeout"] = timeout
        self.client = anthropic.AsyncAnthropic(**client_kwargs)
        self.model = model
        self.max_tokens = max_tokens

    @classmethod
    def from_settings(cls, settings: Settings) -> "AnthropicCompletionClient":
        """Create a client from application settings."""
        if not settings.anthropic_api_key:
            logger.warning("ANTHROPIC_API_KEY is not set; AI requests will fail")
        return cls(
            api_key=settings.anthropic_api_key,
            model=settings.model,
            max_tokens=settings.max_tokens,
            timeout=settings.timeout,
        )

    async def complete(self, prompt: str) -> str:
        """Send the prompt and return the concatenated text blocks.

        Raises:
            CompletionError: On any API or transport error, or an empty reply
        """
        if self.client.api_key is None and self.client.auth_token is None:
            raise CompletionError("No Anthropic credentials configured")

        try:
            message = await self.client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.AnthropicError as e:
            raise CompletionError(f"Completion request failed: {e}") from e

        text = "".join(
            block.text for block in message.content if getattr(block, "type", None) == "text"
        )
        if not text:
            raise CompletionError("Completion returned no text")
        return text
