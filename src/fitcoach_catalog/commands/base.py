"""Shared CLI utilities."""

import asyncio
import logging
from functools import wraps
from pathlib import Path

import click

from ..config import get_db_path, get_settings


def async_command(f):
    """Decorator to run async Click commands."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging from FITCOACH_LOG_LEVEL or --verbose."""
    level = logging.DEBUG if verbose else getattr(logging, get_settings().log_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def ensure_initialized(ctx: click.Context) -> Path:
    """Ensure the database is initialized and return its path."""
    db_path = get_db_path()
    if not db_path.exists():
        click.echo(
            click.style("Error: ", fg="red")
            + "Database not initialized. Run 'fitcoach-catalog init' first."
        )
        ctx.exit(1)
    return db_path


def resolve_owner(ctx: click.Context, owner: str | None) -> str:
    """Use --owner or FITCOACH_OWNER_ID; exit when neither is set."""
    owner = owner or get_settings().owner_id
    if not owner:
        echo_error("No owner given. Pass --owner or set FITCOACH_OWNER_ID.")
        ctx.exit(1)
    return owner


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message, err=True)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.echo(click.style("[WARN] ", fg="yellow") + message)


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = ["".join(h.ljust(widths[i] + padding) for i, h in enumerate(headers))]
    lines.append("".join("-" * w + " " * padding for w in widths))
    for row in rows:
        lines.append("".join(str(cell).ljust(widths[i] + padding) for i, cell in enumerate(row)))

    return "\n".join(line.rstrip() for line in lines)
