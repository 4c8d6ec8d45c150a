"""Status command: compare current exercise counts with the canonical spec."""

from pathlib import Path

import click

from ..config import get_settings
from ..data import load_canonical_spec
from ..db import CatalogStore
from ..errors import CatalogError
from ..reconcile import read_snapshot
from .base import (
    async_command,
    echo_error,
    echo_info,
    ensure_initialized,
    format_table,
    resolve_owner,
)


@click.command()
@click.option("--owner", "-u", help="Owning user id (default: FITCOACH_OWNER_ID)")
@click.option(
    "--spec",
    "spec_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Canonical catalog JSON (default: built-in catalog)",
)
@click.pass_context
@async_command
async def status(ctx, owner: str | None, spec_path: Path | None):
    """Show class types with their exercise counts against the canonical counts."""
    db_path = ensure_initialized(ctx)
    owner_id = resolve_owner(ctx, owner)

    try:
        spec = load_canonical_spec(spec_path or get_settings().canonical_spec)
        async with await CatalogStore.open(db_path) as store:
            snapshot = await read_snapshot(store, owner_id)
    except CatalogError as e:
        echo_error(str(e))
        ctx.exit(1)

    if not snapshot.class_types:
        echo_info(f"No class types found for {owner_id}")
        return

    rows = []
    for class_type in snapshot.class_types:
        actual = len(snapshot.exercises_for(class_type.id))
        ct_spec = spec.get(class_type.name)
        if ct_spec is None:
            expected, state = "-", "not canonical"
        else:
            expected = str(len(ct_spec.exercises))
            if len(snapshot.find_class_types(class_type.name)) > 1:
                state = "duplicate"
            elif actual > len(ct_spec.exercises):
                state = f"{actual - len(ct_spec.exercises)} excess"
            elif actual < len(ct_spec.exercises):
                state = "missing"
            else:
                state = "ok"
        rows.append([class_type.name, str(actual), expected, state])

    missing = [ct.name for ct in spec if not snapshot.find_class_types(ct.name)]
    for name in missing:
        rows.append([name, "0", str(len(spec.get(name).exercises)), "not created"])

    click.echo()
    click.echo(format_table(["Class Type", "Exercises", "Expected", "Status"], rows))
    click.echo()
    click.echo(f"Total: {len(snapshot.class_types)} class type(s)")
