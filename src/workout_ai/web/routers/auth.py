"""Registration and login routes."""

import logging

import aiosqlite
from fastapi import APIRouter, Request
from pydantic import BaseModel

from ...db.repositories import UserRepository
from ...models.user import validate_credentials

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])

USERNAME_TAKEN = "Username already exists"


class UserCredentials(BaseModel):
    """Request body for /register and /login."""

    username: str | None = None
    password: str | None = None


def get_user_repo(request: Request) -> UserRepository:
    """Get a user repository bound to the app's database."""
    return UserRepository(request.app.state.db_path)


def _failure(message: str) -> dict:
    return {"success": False, "message": message}


@router.post("/register")
async def register(credentials: UserCredentials, request: Request):
    """Register a new user."""
    error = validate_credentials(credentials.username, credentials.password)
    if error:
        return _failure(error)

    user_repo = get_user_repo(request)
    if await user_repo.get_by_username(credentials.username):
        return _failure(USERNAME_TAKEN)

    try:
        user = await user_repo.create(credentials.username, credentials.password)
    except aiosqlite.IntegrityError:
        # Lost a race with a concurrent registration
        return _failure(USERNAME_TAKEN)

    logger.info("New user created: %s with ID: %s", user.username, user.id)
    return {
        "success": True,
        "message": "User registered successfully",
        "username": user.username,
        "userId": user.id,
    }


@router.post("/login")
async def login(credentials: UserCredentials, request: Request):
    """Check credentials and return the matching user."""
    if (
        not credentials.username
        or not credentials.username.strip()
        or not credentials.password
        or not credentials.password.strip()
    ):
        return _failure("Username and password are required")

    user = await get_user_repo(request).authenticate(
        credentials.username, credentials.password
    )
    if user is None:
        return _failure("Invalid username or password")

    logger.info("User logged in: %s with ID: %s", user.username, user.id)
    return {
        "success": True,
        "message": "Login successful",
        "username": user.username,
        "userId": user.id,
    }
