"""Cascaded removal of class types and exercises.

The schema has no ON DELETE CASCADE on catalog references, so children
are deleted explicitly, always before the rows they reference.
"""

import logging
from dataclasses import dataclass, field

from ..db.repositories import (
    CalendarEventRepository,
    ClassTypeRepository,
    ExerciseRepository,
    ProgramRepository,
    RoutineRepository,
)
from ..db.store import CatalogStore
from ..errors import NotFoundError
from ..models.catalog import EntityKind

logger = logging.getLogger(__name__)


@dataclass
class CascadeResult:
    """Rows deleted per entity kind by one cascaded removal."""

    removed: dict[EntityKind, int] = field(default_factory=dict)

    def add(self, kind: EntityKind, count: int) -> None:
        self.removed[kind] = self.removed.get(kind, 0) + count

    def __getitem__(self, kind: EntityKind) -> int:
        return self.removed.get(kind, 0)

    @property
    def total(self) -> int:
        return sum(self.removed.values())


async def remove_exercise(store: CatalogStore, exercise_id: str) -> CascadeResult:
    """Delete an exercise after the routine links that reference it.

    Raises:
        NotFoundError: if the exercise row no longer exists
    """
    result = CascadeResult()
    result.add(
        EntityKind.ROUTINE_EXERCISE,
        await RoutineRepository(store).delete_exercise_links(exercise_id),
    )

    deleted = await ExerciseRepository(store).delete(exercise_id)
    if deleted == 0:
        raise NotFoundError("Exercise disappeared before removal", exercise_id)
    result.add(EntityKind.EXERCISE, deleted)

    logger.debug("Removed exercise %s: %s", exercise_id, result.removed)
    return result


async def remove_class_type(store: CatalogStore, class_type_id: str) -> CascadeResult:
    """Delete a class type together with every row that references it.

    Order: routine links to its exercises, exercises, links and calendar
    events of its routines, routines, calendar events, program
    enrollments, programs, and finally the class type itself.

    Raises:
        NotFoundError: if the class type row no longer exists
    """
    routines = RoutineRepository(store)
    events = CalendarEventRepository(store)
    programs = ProgramRepository(store)

    result = CascadeResult()
    result.add(
        EntityKind.ROUTINE_EXERCISE,
        await routines.delete_links_for_class_type_exercises(class_type_id),
    )
    result.add(
        EntityKind.EXERCISE,
        await ExerciseRepository(store).delete_by_class_type(class_type_id),
    )

    result.add(
        EntityKind.ROUTINE_EXERCISE,
        await routines.delete_links_for_class_type_routines(class_type_id),
    )
    result.add(
        EntityKind.CALENDAR_EVENT,
        await events.delete_for_class_type_routines(class_type_id),
    )
    result.add(EntityKind.ROUTINE, await routines.delete_by_class_type(class_type_id))

    result.add(EntityKind.CALENDAR_EVENT, await events.delete_by_class_type(class_type_id))

    result.add(
        EntityKind.PROGRAM_ENROLLMENT,
        await programs.delete_enrollments_for_class_type(class_type_id),
    )
    result.add(EntityKind.PROGRAM, await programs.delete_by_class_type(class_type_id))

    deleted = await ClassTypeRepository(store).delete(class_type_id)
    if deleted == 0:
        raise NotFoundError("Class type disappeared before removal", class_type_id)
    result.add(EntityKind.CLASS_TYPE, deleted)

    logger.debug("Removed class type %s: %s", class_type_id, result.removed)
    return result


async def remove_owner_routines(store: CatalogStore, owner_id: str) -> CascadeResult:
    """Delete all routines of an owner with their links and calendar events."""
    routines = RoutineRepository(store)

    result = CascadeResult()
    result.add(
        EntityKind.ROUTINE_EXERCISE,
        await routines.delete_links_for_owner_routines(owner_id),
    )
    result.add(
        EntityKind.CALENDAR_EVENT,
        await CalendarEventRepository(store).delete_for_owner_routines(owner_id),
    )
    result.add(EntityKind.ROUTINE, await routines.delete_by_owner(owner_id))

    logger.debug("Removed routines of %s: %s", owner_id, result.removed)
    return result
