"""Owner-scoped, case-insensitive existence checks and idempotent inserts."""

import logging
import uuid

from ..db.repositories import ClassTypeRepository, ExerciseRepository, utcnow
from ..db.store import CatalogStore
from ..models.canonical import ClassTypeSpec, ExerciseSpec
from ..models.catalog import ClassType, Exercise

logger = logging.getLogger(__name__)


def new_id() -> str:
    """Generate a row identifier."""
    return str(uuid.uuid4())


async def find_class_type(store: CatalogStore, owner_id: str, name: str) -> ClassType | None:
    return await ClassTypeRepository(store).find_by_name(owner_id, name)


async def find_exercise(
    store: CatalogStore, owner_id: str, class_type_id: str, name: str
) -> Exercise | None:
    return await ExerciseRepository(store).find_by_name(owner_id, class_type_id, name)


async def ensure_class_type(
    store: CatalogStore, owner_id: str, spec: ClassTypeSpec
) -> tuple[ClassType, bool]:
    """Return the owner's class type named like ``spec``, creating it if absent.

    The existence check runs right before the insert, so a row created
    since planning turns the create into a no-op.

    Returns:
        Tuple of (class type, created flag)
    """
    existing = await find_class_type(store, owner_id, spec.name)
    if existing is not None:
        logger.info("Class type %r already exists (%s), skipping", spec.name, existing.id)
        return existing, False

    class_type = ClassType(
        id=new_id(),
        name=spec.name,
        description=spec.description,
        is_default=spec.is_default,
        created_by_user_id=owner_id,
        created_at=utcnow(),
    )
    await ClassTypeRepository(store).add(class_type)
    logger.debug("Created class type %r (%s)", class_type.name, class_type.id)
    return class_type, True


async def ensure_exercise(
    store: CatalogStore, owner_id: str, class_type_id: str, spec: ExerciseSpec
) -> tuple[Exercise, bool]:
    """Return the owner's exercise under ``class_type_id`` named like ``spec``, creating it if absent.

    Returns:
        Tuple of (exercise, created flag)
    """
    existing = await find_exercise(store, owner_id, class_type_id, spec.name)
    if existing is not None:
        logger.info("Exercise %r already exists (%s), skipping", spec.name, existing.id)
        return existing, False

    exercise = Exercise(
        id=new_id(),
        name=spec.name,
        description=spec.description,
        difficulty_level=spec.difficulty_level,
        equipment_needed=spec.equipment_needed,
        primary_muscles=spec.primary_muscles,
        secondary_muscles=spec.secondary_muscles,
        category=spec.category,
        calories_per_minute=spec.calories_per_minute,
        modifications=spec.modifications,
        safety_notes=spec.safety_notes,
        class_type_id=class_type_id,
        created_by_user_id=owner_id,
        is_public=spec.is_public,
        created_at=utcnow(),
    )
    await ExerciseRepository(store).add(exercise)
    logger.debug("Created exercise %r (%s)", exercise.name, exercise.id)
    return exercise, True
