"""HTTP interface for workout-ai."""

from .app import create_app

__all__ = ["create_app"]
