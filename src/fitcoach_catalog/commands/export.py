"""Export command: JSON backup of an owner's catalog."""

import json
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path

import click

from ..db import CatalogStore, RoutineRepository
from ..errors import CatalogError
from ..reconcile import read_snapshot
from .base import async_command, echo_error, echo_success, ensure_initialized, resolve_owner

BACKUP_TABLES = ["class_types", "exercises", "routines", "routine_exercises"]


def _json_default(value):
    if isinstance(value, datetime):
        return value.isoformat()
    raise TypeError(f"Cannot serialize {type(value).__name__}")


async def build_backup(store: CatalogStore, owner_id: str) -> dict:
    """Collect the owner's class types, exercises, routines and routine links."""
    snapshot = await read_snapshot(store, owner_id)
    routines = RoutineRepository(store)
    owner_routines = await routines.list_for_owner(owner_id)
    links = await routines.list_exercises([r.id for r in owner_routines])

    exercises = [ex for ct in snapshot.class_types for ex in snapshot.exercises_for(ct.id)]
    return {
        "metadata": {
            "created_at": datetime.now(timezone.utc).isoformat(),
            "owner_id": owner_id,
            "description": (
                f"Catalog backup - {len(snapshot.class_types)} class types, "
                f"{len(exercises)} exercises"
            ),
            "version": "1.0",
            "tables_backed_up": BACKUP_TABLES,
        },
        "data": {
            "class_types": [asdict(ct) for ct in snapshot.class_types],
            "exercises": [asdict(ex) for ex in exercises],
            "routines": [asdict(r) for r in owner_routines],
            "routine_exercises": [asdict(link) for link in links],
        },
    }


@click.command()
@click.option("--owner", "-u", help="Owning user id (default: FITCOACH_OWNER_ID)")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (default: catalog-backup-<timestamp>.json)",
)
@click.pass_context
@async_command
async def export(ctx, owner: str | None, output: Path | None):
    """Write a JSON backup of the owner's catalog and routines."""
    db_path = ensure_initialized(ctx)
    owner_id = resolve_owner(ctx, owner)

    try:
        async with await CatalogStore.open(db_path) as store:
            backup = await build_backup(store, owner_id)
    except CatalogError as e:
        echo_error(str(e))
        ctx.exit(1)

    if output is None:
        timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        output = Path(f"catalog-backup-{timestamp}.json")

    output.write_text(json.dumps(backup, indent=2, default=_json_default))
    echo_success(f"Backup written to {output} ({backup['metadata']['description']})")
