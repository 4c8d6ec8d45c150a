"""Data access layer for catalog tables.

Every repository works on an explicit ``CatalogStore`` so callers decide
which connection and transaction the statements run in.
"""

from datetime import datetime, timezone

import aiosqlite

from ..models.catalog import (
    CalendarEvent,
    ClassType,
    DifficultyLevel,
    Exercise,
    ExerciseCategory,
    Program,
    Routine,
    RoutineExercise,
    fold_name,
)
from .store import CatalogStore

# Rows sharing a timestamp fall back to insertion order.
CREATION_ORDER = "created_at ASC, rowid ASC"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _ts(value: datetime | None) -> str | None:
    return value.isoformat(timespec="microseconds") if value else None


def _parse_ts(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None


class ClassTypeRepository:
    """Repository for class types."""

    def __init__(self, store: CatalogStore):
        self.store = store

    async def list_for_owner(self, owner_id: str) -> list[ClassType]:
        """List an owner's class types, earliest created first."""
        rows = await self.store.fetch_all(
            f"SELECT * FROM class_types WHERE created_by_user_id = ? ORDER BY {CREATION_ORDER}",
            (owner_id,),
            entity_key=owner_id,
        )
        return [self._row_to_class_type(row) for row in rows]

    async def find_by_name(self, owner_id: str, name: str) -> ClassType | None:
        """Find the earliest class type of an owner matching ``name`` case-insensitively."""
        key = fold_name(name)
        for class_type in await self.list_for_owner(owner_id):
            if class_type.key == key:
                return class_type
        return None

    async def get(self, class_type_id: str) -> ClassType | None:
        row = await self.store.fetch_one(
            "SELECT * FROM class_types WHERE id = ?",
            (class_type_id,),
            entity_key=class_type_id,
        )
        if row is None:
            return None
        return self._row_to_class_type(row)

    async def add(self, class_type: ClassType) -> None:
        await self.store.execute(
            """
            INSERT INTO class_types
            (id, name, description, is_default, created_by_user_id, created_at)
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            (
                class_type.id,
                class_type.name,
                class_type.description,
                1 if class_type.is_default else 0,
                class_type.created_by_user_id,
                _ts(class_type.created_at),
            ),
            entity_key=class_type.name,
        )

    async def delete(self, class_type_id: str) -> int:
        return await self.store.execute(
            "DELETE FROM class_types WHERE id = ?",
            (class_type_id,),
            entity_key=class_type_id,
        )

    def _row_to_class_type(self, row: aiosqlite.Row) -> ClassType:
        """Convert a database row to a ClassType."""
        return ClassType(
            id=row["id"],
            name=row["name"],
            description=row["description"],
            is_default=bool(row["is_default"]),
            created_by_user_id=row["created_by_user_id"],
            created_at=_parse_ts(row["created_at"]),
        )


class ExerciseRepository:
    """Repository for exercises."""

    def __init__(self, store: CatalogStore):
        self.store = store

    async def list_for_class_type(self, class_type_id: str) -> list[Exercise]:
        """List exercises of a class type, earliest created first."""
        rows = await self.store.fetch_all(
            f"SELECT * FROM exercises WHERE class_type_id = ? ORDER BY {CREATION_ORDER}",
            (class_type_id,),
            entity_key=class_type_id,
        )
        return [self._row_to_exercise(row) for row in rows]

    async def find_by_name(
        self, owner_id: str, class_type_id: str, name: str
    ) -> Exercise | None:
        """Find an owner's exercise under a class type by case-insensitive name."""
        key = fold_name(name)
        rows = await self.store.fetch_all(
            f"""
            SELECT * FROM exercises
            WHERE class_type_id = ? AND created_by_user_id = ?
            ORDER BY {CREATION_ORDER}
            """,
            (class_type_id, owner_id),
            entity_key=name,
        )
        for row in rows:
            if fold_name(row["name"]) == key:
                return self._row_to_exercise(row)
        return None

    async def exists(self, exercise_id: str) -> bool:
        row = await self.store.fetch_one(
            "SELECT 1 FROM exercises WHERE id = ?", (exercise_id,), entity_key=exercise_id
        )
        return row is not None

    async def add(self, exercise: Exercise) -> None:
        await self.store.execute(
            """
            INSERT INTO exercises
            (id, name, description, difficulty_level, equipment_needed,
             primary_muscles, secondary_muscles, category, calories_per_minute,
             modifications, safety_notes, class_type_id, created_by_user_id,
             is_public, created_at)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                exercise.id,
                exercise.name,
                exercise.description,
                exercise.difficulty_level.value,
                exercise.equipment_needed,
                exercise.primary_muscles,
                exercise.secondary_muscles,
                exercise.category.value,
                exercise.calories_per_minute,
                exercise.modifications,
                exercise.safety_notes,
                exercise.class_type_id,
                exercise.created_by_user_id,
                1 if exercise.is_public else 0,
                _ts(exercise.created_at),
            ),
            entity_key=exercise.name,
        )

    async def delete(self, exercise_id: str) -> int:
        return await self.store.execute(
            "DELETE FROM exercises WHERE id = ?", (exercise_id,), entity_key=exercise_id
        )

    async def delete_by_class_type(self, class_type_id: str) -> int:
        return await self.store.execute(
            "DELETE FROM exercises WHERE class_type_id = ?",
            (class_type_id,),
            entity_key=class_type_id,
        )

    def _row_to_exercise(self, row: aiosqlite.Row) -> Exercise:
        """Convert a database row to an Exercise."""
        return Exercise(
            id=row["id"],
            name=row["name"],
            description=row["description"],
            difficulty_level=DifficultyLevel(row["difficulty_level"]),
            equipment_needed=row["equipment_needed"],
            primary_muscles=row["primary_muscles"],
            secondary_muscles=row["secondary_muscles"],
            category=ExerciseCategory(row["category"]),
            calories_per_minute=row["calories_per_minute"],
            modifications=row["modifications"],
            safety_notes=row["safety_notes"],
            class_type_id=row["class_type_id"],
            created_by_user_id=row["created_by_user_id"],
            is_public=bool(row["is_public"]),
            created_at=_parse_ts(row["created_at"]),
        )


class RoutineRepository:
    """Repository for routines and their exercise links."""

    def __init__(self, store: CatalogStore):
        self.store = store

    async def add(self, routine: Routine) -> None:
        await self.store.execute(
            """
            INSERT INTO routines
            (id, name, description, class_type_id, created_by_user_id,
             is_public, total_duration, created_at)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                routine.id,
                routine.name,
                routine.description,
                routine.class_type_id,
                routine.created_by_user_id,
                1 if routine.is_public else 0,
                routine.total_duration,
                _ts(routine.created_at or utcnow()),
            ),
            entity_key=routine.id,
        )

    async def add_exercise(self, link: RoutineExercise) -> None:
        await self.store.execute(
            """
            INSERT INTO routine_exercises
            (id, routine_id, exercise_id, order_index, duration_seconds,
             repetitions, sets, rest_seconds, notes)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                link.id,
                link.routine_id,
                link.exercise_id,
                link.order_index,
                link.duration_seconds,
                link.repetitions,
                link.sets,
                link.rest_seconds,
                link.notes,
            ),
            entity_key=link.id,
        )

    async def list_for_owner(self, owner_id: str) -> list[Routine]:
        rows = await self.store.fetch_all(
            f"SELECT * FROM routines WHERE created_by_user_id = ? ORDER BY {CREATION_ORDER}",
            (owner_id,),
            entity_key=owner_id,
        )
        return [
            Routine(
                id=row["id"],
                name=row["name"],
                description=row["description"],
                class_type_id=row["class_type_id"],
                created_by_user_id=row["created_by_user_id"],
                is_public=bool(row["is_public"]),
                total_duration=row["total_duration"],
                created_at=_parse_ts(row["created_at"]),
            )
            for row in rows
        ]

    async def list_exercises(self, routine_ids: list[str]) -> list[RoutineExercise]:
        """List exercise links of the given routines in routine order."""
        if not routine_ids:
            return []
        placeholders = ", ".join("?" for _ in routine_ids)
        rows = await self.store.fetch_all(
            f"""
            SELECT * FROM routine_exercises
            WHERE routine_id IN ({placeholders})
            ORDER BY routine_id, order_index
            """,
            routine_ids,
        )
        return [
            RoutineExercise(
                id=row["id"],
                routine_id=row["routine_id"],
                exercise_id=row["exercise_id"],
                order_index=row["order_index"],
                duration_seconds=row["duration_seconds"],
                repetitions=row["repetitions"],
                sets=row["sets"],
                rest_seconds=row["rest_seconds"],
                notes=row["notes"],
            )
            for row in rows
        ]

    async def delete_exercise_links(self, exercise_id: str) -> int:
        """Delete routine links pointing at one exercise."""
        return await self.store.execute(
            "DELETE FROM routine_exercises WHERE exercise_id = ?",
            (exercise_id,),
            entity_key=exercise_id,
        )

    async def delete_links_for_class_type_exercises(self, class_type_id: str) -> int:
        """Delete routine links pointing at any exercise of a class type."""
        return await self.store.execute(
            """
            DELETE FROM routine_exercises WHERE exercise_id IN
                (SELECT id FROM exercises WHERE class_type_id = ?)
            """,
            (class_type_id,),
            entity_key=class_type_id,
        )

    async def delete_links_for_class_type_routines(self, class_type_id: str) -> int:
        """Delete exercise links belonging to routines of a class type."""
        return await self.store.execute(
            """
            DELETE FROM routine_exercises WHERE routine_id IN
                (SELECT id FROM routines WHERE class_type_id = ?)
            """,
            (class_type_id,),
            entity_key=class_type_id,
        )

    async def delete_by_class_type(self, class_type_id: str) -> int:
        return await self.store.execute(
            "DELETE FROM routines WHERE class_type_id = ?",
            (class_type_id,),
            entity_key=class_type_id,
        )

    async def delete_links_for_owner_routines(self, owner_id: str) -> int:
        """Delete exercise links belonging to an owner's routines."""
        return await self.store.execute(
            """
            DELETE FROM routine_exercises WHERE routine_id IN
                (SELECT id FROM routines WHERE created_by_user_id = ?)
            """,
            (owner_id,),
            entity_key=owner_id,
        )

    async def delete_by_owner(self, owner_id: str) -> int:
        return await self.store.execute(
            "DELETE FROM routines WHERE created_by_user_id = ?",
            (owner_id,),
            entity_key=owner_id,
        )


class CalendarEventRepository:
    """Repository for calendar events."""

    def __init__(self, store: CatalogStore):
        self.store = store

    async def add(self, event: CalendarEvent) -> None:
        await self.store.execute(
            """
            INSERT INTO calendar_events
            (id, user_id, class_type_id, routine_id, title,
             start_datetime, end_datetime, location, created_at)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                event.id,
                event.user_id,
                event.class_type_id,
                event.routine_id,
                event.title,
                _ts(event.start_datetime),
                _ts(event.end_datetime),
                event.location,
                _ts(event.created_at or utcnow()),
            ),
            entity_key=event.id,
        )

    async def delete_for_class_type_routines(self, class_type_id: str) -> int:
        """Delete events scheduled with a routine of the class type."""
        return await self.store.execute(
            """
            DELETE FROM calendar_events WHERE routine_id IN
                (SELECT id FROM routines WHERE class_type_id = ?)
            """,
            (class_type_id,),
            entity_key=class_type_id,
        )

    async def delete_for_owner_routines(self, owner_id: str) -> int:
        """Delete events scheduled with one of an owner's routines."""
        return await self.store.execute(
            """
            DELETE FROM calendar_events WHERE routine_id IN
                (SELECT id FROM routines WHERE created_by_user_id = ?)
            """,
            (owner_id,),
            entity_key=owner_id,
        )

    async def delete_by_class_type(self, class_type_id: str) -> int:
        return await self.store.execute(
            "DELETE FROM calendar_events WHERE class_type_id = ?",
            (class_type_id,),
            entity_key=class_type_id,
        )


class ProgramRepository:
    """Repository for programs and their enrollments."""

    def __init__(self, store: CatalogStore):
        self.store = store

    async def add(self, program: Program) -> None:
        await self.store.execute(
            """
            INSERT INTO programs
            (id, name, description, trainer_id, class_type_id, created_at)
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            (
                program.id,
                program.name,
                program.description,
                program.trainer_id,
                program.class_type_id,
                _ts(program.created_at or utcnow()),
            ),
            entity_key=program.id,
        )

    async def enroll(self, enrollment_id: str, program_id: str, client_id: str) -> None:
        await self.store.execute(
            """
            INSERT INTO program_enrollments (id, program_id, client_id, enrolled_at)
            VALUES (?, ?, ?, ?)
            """,
            (enrollment_id, program_id, client_id, _ts(utcnow())),
            entity_key=enrollment_id,
        )

    async def delete_enrollments_for_class_type(self, class_type_id: str) -> int:
        return await self.store.execute(
            """
            DELETE FROM program_enrollments WHERE program_id IN
                (SELECT id FROM programs WHERE class_type_id = ?)
            """,
            (class_type_id,),
            entity_key=class_type_id,
        )

    async def delete_by_class_type(self, class_type_id: str) -> int:
        return await self.store.execute(
            "DELETE FROM programs WHERE class_type_id = ?",
            (class_type_id,),
            entity_key=class_type_id,
        )
