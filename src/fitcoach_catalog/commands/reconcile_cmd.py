"""Reconcile command: bring an owner's catalog to the canonical spec."""

from pathlib import Path

import click

from ..config import get_settings
from ..data import load_canonical_spec
from ..db import CatalogStore
from ..errors import CatalogError
from ..models.report import ReconciliationReport
from ..reconcile import ReconcileOptions, reconcile
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
    resolve_owner,
)


def format_report(report: ReconciliationReport) -> str:
    """Render the per-entity counts of a report as a table."""
    rows = [
        [kind.value, str(c.created), str(c.kept), str(c.removed)]
        for kind, c in report.counts.items()
    ]
    return format_table(["Entity", "Created", "Kept", "Removed"], rows)


@click.command(name="reconcile")
@click.option("--owner", "-u", help="Owning user id (default: FITCOACH_OWNER_ID)")
@click.option(
    "--spec",
    "spec_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Canonical catalog JSON (default: built-in catalog)",
)
@click.option(
    "--keep",
    "-k",
    multiple=True,
    help="Class type to retain; all others are removed. Repeatable.",
)
@click.option("--dry-run", is_flag=True, help="Show what would change, then roll back")
@click.pass_context
@async_command
async def reconcile_cmd(ctx, owner: str | None, spec_path: Path | None, keep: tuple[str, ...], dry_run: bool):
    """Reconcile class types and exercises with the canonical catalog.

    Creates missing class types and exercises, removes duplicate class
    types and excess exercises, and with --keep removes every class type
    not listed. Removals cascade to routines, calendar events and programs.
    Everything runs in one transaction.
    """
    db_path = ensure_initialized(ctx)
    owner_id = resolve_owner(ctx, owner)

    try:
        spec = load_canonical_spec(spec_path or get_settings().canonical_spec)
        options = ReconcileOptions(keep_list=set(keep) if keep else None, dry_run=dry_run)
        async with await CatalogStore.open(db_path) as store:
            report = await reconcile(store, owner_id, spec, options)
    except CatalogError as e:
        echo_error(f"Reconciliation failed: {e}")
        ctx.exit(1)

    click.echo()
    click.echo(format_report(report))
    click.echo()
    if dry_run:
        echo_info("Dry run: no changes were committed")
    elif report.has_changes:
        echo_success(f"Catalog reconciled for {owner_id}")
    else:
        echo_success("Catalog already matches the canonical spec")
