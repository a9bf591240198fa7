"""User account model."""

from dataclasses import dataclass
from datetime import datetime

MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 6


@dataclass
class User:
    """A registered user.

    Passwords are stored as given; there is no hashing.
    """

    username: str
    password: str
    id: int | None = None
    created_at: datetime | None = None


def validate_credentials(username: str | None, password: str | None) -> str | None:
    """Check registration input.

    Returns:
        An error message, or None when the credentials are acceptable
    """
    if not username or not username.strip() or not password or not password.strip():
        return "Username and password are required"
    if len(username) < MIN_USERNAME_LENGTH:
        return f"Username must be at least {MIN_USERNAME_LENGTH} characters"
    if len(password) < MIN_PASSWORD_LENGTH:
        return f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
    return None
