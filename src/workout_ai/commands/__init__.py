"""CLI commands for workout-ai."""

from .init import init
from .serve import serve

__all__ = [
    "init",
    "serve",
]
