"""workout-ai: AI-generated workout plans over a small HTTP API."""

__version__ = "0.1.0"
