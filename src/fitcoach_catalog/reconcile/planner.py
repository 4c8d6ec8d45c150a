"""Reconciliation planning.

Planning is a pure function of a catalog snapshot and a canonical spec:
it never touches the store, so the action list can be inspected (and
tested) before anything is mutated.
"""

import logging
from collections.abc import Iterable

from ..models.canonical import CanonicalSpec
from ..models.catalog import Exercise, fold_name
from ..models.plan import (
    CreateClassType,
    CreateExercise,
    KeepClassType,
    KeepExercise,
    ReconciliationPlan,
    RemovalReason,
    RemoveClassType,
    RemoveExercise,
)
from .snapshot import CatalogSnapshot

logger = logging.getLogger(__name__)


def partition_exercises(
    canonical_names: list[str], existing: list[Exercise]
) -> tuple[list[KeepExercise], list[Exercise], list[str]]:
    """Split the existing exercises of one class type into keep and remove sets.

    Args:
        canonical_names: Desired exercise names, in canonical order
        existing: Current exercise rows, earliest created first

    Returns:
        Tuple of (kept rows, rows to remove, canonical names to create)

    Rows whose name matches an unclaimed canonical name are kept first.
    When fewer rows match than there are canonical names, the earliest
    created leftovers are promoted into the keep set and stand in for the
    unmatched names, so drifted names keep their row identity.
    """
    limit = len(canonical_names)
    unclaimed = {fold_name(name): name for name in canonical_names}

    keep: list[KeepExercise] = []
    remove: list[Exercise] = []
    for exercise in existing:
        if exercise.key in unclaimed and len(keep) < limit:
            keep.append(KeepExercise(exercise, unclaimed.pop(exercise.key)))
        else:
            remove.append(exercise)

    open_names = list(unclaimed.values())
    while remove and len(keep) < limit:
        keep.append(KeepExercise(remove.pop(0), open_names.pop(0), promoted=True))

    return keep, remove, open_names


def plan_reconciliation(
    snapshot: CatalogSnapshot,
    spec: CanonicalSpec,
    keep_list: Iterable[str] | None = None,
) -> ReconciliationPlan:
    """Compute the create/keep/remove actions that bring ``snapshot`` to ``spec``.

    Args:
        snapshot: Current catalog of the owner
        spec: Validated canonical spec
        keep_list: Optional class-type names to retain; every other class
            type of the owner is scheduled for cascaded removal. Canonical
            class types are always retained.

    Returns:
        ReconciliationPlan listing every action, in no particular execution order
    """
    plan = ReconciliationPlan(owner_id=snapshot.owner_id)
    removed_ids: set[str] = set()

    for ct_spec in spec:
        matches = snapshot.find_class_types(ct_spec.name)
        if not matches:
            plan.class_type_creates.append(CreateClassType(ct_spec))
            plan.exercise_creates.extend(
                CreateExercise(ct_spec.name, ex_spec) for ex_spec in ct_spec.exercises
            )
            continue

        keeper, *duplicates = matches
        plan.class_type_keeps.append(KeepClassType(keeper, ct_spec))
        for duplicate in duplicates:
            plan.class_type_removes.append(
                RemoveClassType(duplicate, RemovalReason.DUPLICATE)
            )
            removed_ids.add(duplicate.id)

        keep, remove, create_names = partition_exercises(
            ct_spec.exercise_names, snapshot.exercises_for(keeper.id)
        )
        plan.exercise_keeps.extend(keep)
        plan.exercise_removes.extend(RemoveExercise(ex) for ex in remove)

        wanted = {fold_name(name) for name in create_names}
        plan.exercise_creates.extend(
            CreateExercise(ct_spec.name, ex_spec)
            for ex_spec in ct_spec.exercises
            if ex_spec.key in wanted
        )

        promoted = sum(1 for k in keep if k.promoted)
        if remove or create_names or promoted:
            logger.info(
                "%s: keep %d (%d promoted), remove %d, create %d exercises",
                keeper.name,
                len(keep),
                promoted,
                len(remove),
                len(create_names),
            )

    if keep_list is not None:
        retained = {fold_name(name) for name in keep_list}
        retained.update(ct_spec.key for ct_spec in spec)
        for class_type in snapshot.class_types:
            if class_type.id in removed_ids or class_type.key in retained:
                continue
            plan.class_type_removes.append(
                RemoveClassType(class_type, RemovalReason.NOT_IN_KEEP_LIST)
            )
            removed_ids.add(class_type.id)

    logger.info("Planned reconciliation for %s: %s", snapshot.owner_id, plan.summary())
    return plan
