"""Database engine setup and initialization."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

import aiosqlite

from ..config import DATA_DIR, get_settings

logger = logging.getLogger(__name__)

SQLITE_PREFIX = "sqlite:///"


def resolve_db_path(database_url: str | None = None, data_dir: Path | None = None) -> Path:
    """Turn a DATABASE_URL into a SQLite file path.

    Accepts ``sqlite:///relative/or/absolute.db`` URLs or a bare file path.
    Falls back to ``workout.db`` inside the data directory when no URL is set.
    """
    if not database_url:
        if data_dir is None:
            data_dir = DATA_DIR
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir / "workout.db"

    if database_url.startswith(SQLITE_PREFIX):
        path = database_url[len(SQLITE_PREFIX):]
        if path:
            return Path(path)

    if database_url.startswith("sqlite:"):
        raise ValueError(
            f"SQLite URL '{database_url}' has no file path: use sqlite:///path/to.db"
        )

    if "://" in database_url:
        scheme = database_url.split("://", 1)[0]
        raise ValueError(f"Unsupported database scheme '{scheme}': only SQLite is supported")

    return Path(database_url)


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path from the configured DATABASE_URL."""
    if data_dir is not None:
        return resolve_db_path(None, data_dir)
    return resolve_db_path(get_settings().database_url)


@asynccontextmanager
async def connect(db_path: Path) -> AsyncIterator[aiosqlite.Connection]:
    """Open a connection with row access by name and foreign keys enforced."""
    async with aiosqlite.connect(db_path) as db:
        db.row_factory = aiosqlite.Row
        await db.execute("PRAGMA foreign_keys = ON")
        yield db


@asynccontextmanager
async def unit_of_work(db_path: Path) -> AsyncIterator[aiosqlite.Connection]:
    """Open a connection wrapped in a single write transaction.

    Commits when the block exits normally and rolls back on any exception.
    BEGIN IMMEDIATE takes the write lock up front, so two units of work
    touching the same rows run one after the other.
    """
    async with aiosqlite.connect(db_path, isolation_level=None) as db:
        db.row_factory = aiosqlite.Row
        await db.execute("PRAGMA foreign_keys = ON")
        await db.execute("BEGIN IMMEDIATE")
        try:
            yield db
        except BaseException:
            await db.execute("ROLLBACK")
            raise
        else:
            await db.execute("COMMIT")


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    db_path.parent.mkdir(parents=True, exist_ok=True)
    logger.info("Initializing database at %s", db_path)

    async with aiosqlite.connect(db_path) as db:
        await db.execute("""
            CREATE TABLE IF NOT EXISTS users (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                username TEXT UNIQUE NOT NULL,
                password TEXT NOT NULL,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

        # One row per training day
        await db.execute("""
            CREATE TABLE IF NOT EXISTS workout_plans (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id INTEGER NOT NULL,
                name TEXT NOT NULL,
                day_number INTEGER NOT NULL,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                FOREIGN KEY (user_id) REFERENCES users(id) ON DELETE CASCADE
            )
        """)

        await db.execute("""
            CREATE TABLE IF NOT EXISTS exercises (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                workout_plan_id INTEGER NOT NULL,
                name TEXT NOT NULL,
                sets INTEGER NOT NULL DEFAULT 0,
                reps INTEGER NOT NULL DEFAULT 0,
                rest_time INTEGER NOT NULL DEFAULT 0,
                video_link TEXT NOT NULL DEFAULT '',
                order_index INTEGER NOT NULL,
                FOREIGN KEY (workout_plan_id) REFERENCES workout_plans(id) ON DELETE CASCADE
            )
        """)

        await db.execute("""
            CREATE TABLE IF NOT EXISTS workout_progress (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id INTEGER NOT NULL,
                exercise_name TEXT NOT NULL,
                sets INTEGER NOT NULL DEFAULT 0,
                reps INTEGER NOT NULL DEFAULT 0,
                weight REAL NOT NULL DEFAULT 0,
                notes TEXT DEFAULT '',
                completed_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                FOREIGN KEY (user_id) REFERENCES users(id) ON DELETE CASCADE
            )
        """)

        # Create indexes for common queries
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_workout_plans_user
            ON workout_plans(user_id, day_number)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_exercises_plan
            ON exercises(workout_plan_id, order_index)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_workout_progress_user
            ON workout_progress(user_id)
        """)

        await db.commit()
