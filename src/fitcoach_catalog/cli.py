"""CLI entry point for fitcoach-catalog."""

import click

from . import __version__
from .commands import export, init, reconcile_cmd, restore, spec, status
from .commands.base import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="fitcoach-catalog")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """fitcoach-catalog: keep class types and exercises in line with the canonical catalog.

    Example usage:

        # Create a local database
        fitcoach-catalog init

        # Preview, then apply, reconciliation for one trainer
        fitcoach-catalog reconcile --owner <user-id> --dry-run
        fitcoach-catalog reconcile --owner <user-id>

        # Keep only the listed class types
        fitcoach-catalog reconcile --owner <user-id> --keep Yoga --keep HIIT

        # Compare counts and take a backup
        fitcoach-catalog status --owner <user-id>
        fitcoach-catalog export --owner <user-id> -o backup.json
    """
    configure_logging(verbose)


# Register commands
main.add_command(init)
main.add_command(reconcile_cmd)
main.add_command(status)
main.add_command(export)
main.add_command(restore)
main.add_command(spec)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
