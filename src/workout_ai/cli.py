"""CLI entry point for workout-ai."""

import click

from . import __version__
from .commands import init, serve


@click.group()
@click.version_option(version=__version__, prog_name="workout-ai")
def main():
    """workout-ai: AI-generated workout plans over HTTP.

    Example usage:

        # Create the database
        workout-ai init

        # Run the API
        workout-ai serve --port 8080
    """
    pass


# Register commands
main.add_command(init)
main.add_command(serve)


if __name__ == "__main__":
    main()
