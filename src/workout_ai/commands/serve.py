"""Web server command."""

import click

from ..config import get_settings
from ..db.engine import resolve_db_path
from .base import configure_logging, echo_error


@click.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to (default: 127.0.0.1)")
@click.option("--port", "-p", default=8000, type=int, help="Port to bind to (default: 8000)")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
def serve(host: str, port: int, reload: bool):
    """Start the API server.

    The database schema is created on startup if it does not exist yet.

    Examples:

        # Start on default port (8000)
        workout-ai serve

        # Expose to network (all interfaces)
        workout-ai serve --host 0.0.0.0 --port 8080

        # Development mode with auto-reload
        workout-ai serve --reload
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    try:
        resolve_db_path(settings.database_url)
    except ValueError as e:
        echo_error(str(e))
        raise click.exceptions.Exit(1)

    import uvicorn

    from ..web import create_app

    click.echo()
    click.echo(click.style("Starting workout-ai API server...", fg="green"))
    click.echo(f"  Local:   http://{host}:{port}")
    click.echo()

    uvicorn.run(
        create_app(settings) if not reload else "workout_ai.web:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=reload,
        log_level=settings.log_level.lower(),
    )
