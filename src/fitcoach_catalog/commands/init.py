"""Initialize database command."""

import click

from ..config import get_db_path
from ..db import init_db
from .base import async_command, echo_info, echo_success


@click.command()
@async_command
async def init():
    """Create the data directory and the catalog schema.

    Production databases already carry the schema; this is for local
    databases and test runs.
    """
    db_path = get_db_path()
    echo_info(f"Initializing catalog database at {db_path}")

    await init_db(db_path)
    echo_success("Database initialized")

    click.echo()
    click.echo("Next steps:")
    click.echo("  fitcoach-catalog reconcile --owner <user-id> --dry-run")
    click.echo("  fitcoach-catalog reconcile --owner <user-id>")
