"""Pytest configuration and fixtures."""

import tempfile
import uuid
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
import pytest_asyncio

from fitcoach_catalog.db import (
    CalendarEventRepository,
    CatalogStore,
    ClassTypeRepository,
    ExerciseRepository,
    ProgramRepository,
    RoutineRepository,
    init_db,
)
from fitcoach_catalog.models import (
    CalendarEvent,
    ClassType,
    ClassTypeSpec,
    DifficultyLevel,
    Exercise,
    ExerciseCategory,
    ExerciseSpec,
    Program,
    Routine,
    RoutineExercise,
)

OWNER = "0c982f0e-6872-4d4b-bc97-a4f217d10d8f"
OTHER_OWNER = "9f1d2c3b-0000-4a4a-8b8b-123456789abc"
BASE_TIME = datetime(2025, 1, 6, 9, 0, tzinfo=timezone.utc)

TABLES = [
    "class_types",
    "exercises",
    "routines",
    "routine_exercises",
    "calendar_events",
    "programs",
    "program_enrollments",
]

YOGA_EXERCISES = [
    "Downward Facing Dog",
    "Child's Pose",
    "Warrior I",
    "Warrior II",
    "Tree Pose",
]


def at(minutes: int) -> datetime:
    """A fixed timestamp ``minutes`` after the test epoch."""
    return BASE_TIME + timedelta(minutes=minutes)


def exercise_spec(name: str) -> ExerciseSpec:
    return ExerciseSpec(
        name=name,
        difficulty_level=DifficultyLevel.BEGINNER,
        category=ExerciseCategory.FLEXIBILITY,
        equipment_needed="Yoga mat",
    )


def class_type_spec(name: str, exercise_names: list[str]) -> ClassTypeSpec:
    return ClassTypeSpec(
        name=name,
        description=f"{name} class",
        exercises=[exercise_spec(n) for n in exercise_names],
    )


class Seeder:
    """Insert catalog and dependent rows with controlled timestamps."""

    def __init__(self, store: CatalogStore):
        self.store = store

    async def class_type(self, name: str, minutes: int = 0, owner: str = OWNER) -> ClassType:
        class_type = ClassType(
            id=str(uuid.uuid4()),
            name=name,
            description=f"{name} class",
            is_default=True,
            created_by_user_id=owner,
            created_at=at(minutes),
        )
        await ClassTypeRepository(self.store).add(class_type)
        return class_type

    async def exercise(
        self, class_type: ClassType, name: str, minutes: int = 0, owner: str = OWNER
    ) -> Exercise:
        exercise = Exercise(
            id=str(uuid.uuid4()),
            name=name,
            difficulty_level=DifficultyLevel.INTERMEDIATE,
            category=ExerciseCategory.STRENGTH,
            class_type_id=class_type.id,
            created_by_user_id=owner,
            created_at=at(minutes),
        )
        await ExerciseRepository(self.store).add(exercise)
        return exercise

    async def routine(self, class_type: ClassType, exercises: list[Exercise] = ()) -> Routine:
        repo = RoutineRepository(self.store)
        routine = Routine(
            id=str(uuid.uuid4()),
            name=f"{class_type.name} routine",
            class_type_id=class_type.id,
            created_by_user_id=class_type.created_by_user_id or OWNER,
        )
        await repo.add(routine)
        for i, exercise in enumerate(exercises):
            await repo.add_exercise(
                RoutineExercise(
                    id=str(uuid.uuid4()),
                    routine_id=routine.id,
                    exercise_id=exercise.id,
                    order_index=i,
                    duration_seconds=60,
                )
            )
        return routine

    async def event(self, class_type: ClassType, routine: Routine | None = None) -> CalendarEvent:
        event = CalendarEvent(
            id=str(uuid.uuid4()),
            user_id=OWNER,
            title=f"{class_type.name} session",
            start_datetime=at(60),
            end_datetime=at(120),
            class_type_id=class_type.id,
            routine_id=routine.id if routine else None,
        )
        await CalendarEventRepository(self.store).add(event)
        return event

    async def program(self, class_type: ClassType, enrollments: int = 0) -> Program:
        repo = ProgramRepository(self.store)
        program = Program(
            id=str(uuid.uuid4()),
            name=f"{class_type.name} program",
            trainer_id=OWNER,
            class_type_id=class_type.id,
        )
        await repo.add(program)
        for _ in range(enrollments):
            await repo.enroll(str(uuid.uuid4()), program.id, str(uuid.uuid4()))
        return program

    async def count(self, table: str, column: str | None = None, value: str | None = None) -> int:
        if column is None:
            row = await self.store.fetch_one(f"SELECT COUNT(*) FROM {table}")
        else:
            row = await self.store.fetch_one(
                f"SELECT COUNT(*) FROM {table} WHERE {column} = ?", (value,)
            )
        return row[0]

    async def dump(self) -> dict[str, list[tuple]]:
        """Every row of every catalog table, for before/after comparisons."""
        result = {}
        for table in TABLES:
            rows = await self.store.fetch_all(f"SELECT * FROM {table} ORDER BY id")
            result[table] = [tuple(row) for row in rows]
        return result


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest_asyncio.fixture
async def store(temp_db_path):
    """An open store on a freshly initialized database."""
    await init_db(temp_db_path)
    catalog_store = await CatalogStore.open(temp_db_path)
    yield catalog_store
    await catalog_store.close()


@pytest.fixture
def seed(store):
    return Seeder(store)


@pytest.fixture
def yoga_spec():
    return class_type_spec("Yoga", YOGA_EXERCISES)
