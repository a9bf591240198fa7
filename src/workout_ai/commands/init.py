"""Initialize database command."""

import click

from ..db import get_db_path, init_db
from .base import async_command, echo_error, echo_info, echo_success


@click.command()
@async_command
async def init():
    """Create the workout-ai database schema.

    The database location comes from DATABASE_URL (a sqlite:/// URL or a
    file path) and defaults to data/workout.db.
    """
    try:
        db_path = get_db_path()
    except ValueError as e:
        echo_error(str(e))
        raise click.exceptions.Exit(1)

    echo_info(f"Initializing database at {db_path}")
    await init_db(db_path)
    echo_success("Database initialized")

    click.echo()
    click.echo("Next step:")
    click.echo("  workout-ai serve")
