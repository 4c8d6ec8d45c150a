"""Read-only view of an owner's current catalog."""

from dataclasses import dataclass, field

from ..db.repositories import ClassTypeRepository, ExerciseRepository
from ..db.store import CatalogStore
from ..models.catalog import ClassType, Exercise, fold_name


@dataclass
class CatalogSnapshot:
    """Class types of one owner with their exercises.

    Both levels are ordered by creation time ascending; the planner's
    tie-breaks depend on it.
    """

    owner_id: str
    class_types: list[ClassType] = field(default_factory=list)
    exercises: dict[str, list[Exercise]] = field(default_factory=dict)

    def exercises_for(self, class_type_id: str) -> list[Exercise]:
        return self.exercises.get(class_type_id, [])

    def find_class_types(self, name: str) -> list[ClassType]:
        """All class types matching ``name`` case-insensitively, earliest first."""
        key = fold_name(name)
        return [ct for ct in self.class_types if ct.key == key]

    def counts(self) -> dict[str, int]:
        """Exercise count per class type name."""
        return {ct.name: len(self.exercises_for(ct.id)) for ct in self.class_types}


async def read_snapshot(store: CatalogStore, owner_id: str) -> CatalogSnapshot:
    """Query the current class types and exercises of ``owner_id``."""
    class_types = await ClassTypeRepository(store).list_for_owner(owner_id)
    exercise_repo = ExerciseRepository(store)

    snapshot = CatalogSnapshot(owner_id=owner_id, class_types=class_types)
    for class_type in class_types:
        snapshot.exercises[class_type.id] = await exercise_repo.list_for_class_type(
            class_type.id
        )
    return snapshot
