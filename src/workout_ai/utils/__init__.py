"""Utility functions for workout-ai."""

from .json_text import clean_json_string, preview

__all__ = ["clean_json_string", "preview"]
