"""Runtime configuration loaded from the environment."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Default data directory
DATA_DIR = Path(__file__).parent.parent.parent / "data"

DEFAULT_MODEL = "claude-3-5-haiku-latest"
DEFAULT_MAX_TOKENS = 4096


@dataclass
class Settings:
    """Application settings."""

    database_url: str | None = None
    anthropic_api_key: str | None = None
    model: str = DEFAULT_MODEL
    max_tokens: int = DEFAULT_MAX_TOKENS
    timeout: float | None = None
    log_level: str = "INFO"
    cors_origins: list[str] = field(default_factory=lambda: ["*"])


def _split_origins(value: str | None) -> list[str]:
    if not value:
        return ["*"]
    return [origin.strip() for origin in value.split(",") if origin.strip()]


def get_settings() -> Settings:
    """Build settings from environment variables (and a local .env file)."""
    load_dotenv()

    # Empty values count as unset
    timeout = os.getenv("WORKOUT_AI_TIMEOUT")
    return Settings(
        database_url=os.getenv("DATABASE_URL") or None,
        anthropic_api_key=os.getenv("ANTHROPIC_API_KEY") or None,
        model=os.getenv("WORKOUT_AI_MODEL") or DEFAULT_MODEL,
        max_tokens=int(os.getenv("WORKOUT_AI_MAX_TOKENS") or DEFAULT_MAX_TOKENS),
        timeout=float(timeout) if timeout else None,
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        cors_origins=_split_origins(os.getenv("CORS_ORIGINS")),
    )
