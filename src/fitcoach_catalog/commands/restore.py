"""Restore command: reload an owner's catalog from an export backup."""

import json
import logging
from pathlib import Path

import click

from ..db import CatalogStore, ClassTypeRepository, ExerciseRepository, RoutineRepository
from ..errors import CatalogError, ValidationError
from ..models.catalog import ClassType, Exercise, Routine, RoutineExercise
from ..reconcile import read_snapshot, remove_class_type, remove_owner_routines
from .base import async_command, echo_error, echo_info, echo_success, ensure_initialized
from .export import BACKUP_TABLES

logger = logging.getLogger(__name__)


def parse_backup(backup: dict) -> tuple[str, dict[str, list]]:
    """Validate a backup document and build typed records per table.

    Returns:
        The owner id from the metadata and the records keyed by table name

    Raises:
        ValidationError: if a section is missing or a record is malformed
    """
    if not isinstance(backup, dict) or not all(
        isinstance(backup.get(section), dict) for section in ("metadata", "data")
    ):
        raise ValidationError("Backup must have 'metadata' and 'data' sections")

    owner_id = backup["metadata"].get("owner_id")
    if not owner_id:
        raise ValidationError("Backup metadata has no owner_id")

    builders = {
        "class_types": ClassType.from_dict,
        "exercises": Exercise.from_dict,
        "routines": Routine.from_dict,
        "routine_exercises": RoutineExercise.from_dict,
    }
    records = {}
    for table in BACKUP_TABLES:
        rows = backup["data"].get(table, [])
        try:
            records[table] = [builders[table](row) for row in rows]
        except (KeyError, TypeError, ValueError) as e:
            raise ValidationError(f"Invalid {table} record: {e}", table) from e

    for record in records["class_types"] + records["routines"]:
        if record.created_by_user_id != owner_id:
            raise ValidationError("Record belongs to another owner", record.id)

    return owner_id, records


async def restore_backup(store: CatalogStore, backup: dict) -> dict[str, int]:
    """Replace an owner's catalog and routines with the rows of a backup.

    The owner's current class types are removed with their dependents,
    then any remaining routines of the owner. Backup rows are inserted
    parents first. Everything runs in one transaction.

    Returns:
        Rows inserted per table
    """
    owner_id, records = parse_backup(backup)

    class_types = ClassTypeRepository(store)
    exercises = ExerciseRepository(store)
    routines = RoutineRepository(store)

    async with store.transaction():
        snapshot = await read_snapshot(store, owner_id)
        for class_type in snapshot.class_types:
            await remove_class_type(store, class_type.id)
        await remove_owner_routines(store, owner_id)

        for class_type in records["class_types"]:
            await class_types.add(class_type)
        for exercise in records["exercises"]:
            await exercises.add(exercise)
        for routine in records["routines"]:
            await routines.add(routine)
        for link in records["routine_exercises"]:
            await routines.add_exercise(link)

    counts = {table: len(records[table]) for table in BACKUP_TABLES}
    logger.info("Restored catalog of %s: %s", owner_id, counts)
    return counts


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--yes", "-y", is_flag=True, help="Replace the catalog without asking")
@click.pass_context
@async_command
async def restore(ctx, path: Path, yes: bool):
    """Restore an owner's catalog from a backup written by export.

    The owner's current class types, exercises and routines are replaced.
    """
    db_path = ensure_initialized(ctx)

    try:
        backup = json.loads(path.read_text())
        owner_id, _ = parse_backup(backup)
    except json.JSONDecodeError as e:
        echo_error(f"Backup file is not valid JSON: {e}")
        ctx.exit(1)
    except ValidationError as e:
        echo_error(f"Restore failed: {e}")
        ctx.exit(1)

    if not yes and not click.confirm(f"Replace the catalog of {owner_id}?"):
        echo_info("Restore cancelled")
        return

    try:
        async with await CatalogStore.open(db_path) as store:
            counts = await restore_backup(store, backup)
    except CatalogError as e:
        echo_error(f"Restore failed: {e}")
        ctx.exit(1)

    echo_success(
        f"Restored {counts['class_types']} class types, {counts['exercises']} exercises, "
        f"{counts['routines']} routines and {counts['routine_exercises']} routine links"
    )
