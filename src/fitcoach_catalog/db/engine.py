"""Database schema setup and initialization."""

from pathlib import Path

import aiosqlite

from ..config import get_db_path

SCHEMA = [
    """
    CREATE TABLE IF NOT EXISTS class_types (
        id TEXT PRIMARY KEY,
        name TEXT NOT NULL,
        description TEXT,
        is_default INTEGER DEFAULT 0,
        created_by_user_id TEXT,
        created_at TIMESTAMP NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS exercises (
        id TEXT PRIMARY KEY,
        name TEXT NOT NULL,
        description TEXT,
        difficulty_level TEXT NOT NULL
            CHECK (difficulty_level IN ('Beginner', 'Intermediate', 'Advanced')),
        equipment_needed TEXT,
        primary_muscles TEXT,
        secondary_muscles TEXT,
        category TEXT NOT NULL
            CHECK (category IN ('strength', 'cardio', 'flexibility', 'balance')),
        calories_per_minute INTEGER,
        modifications TEXT,
        safety_notes TEXT,
        class_type_id TEXT REFERENCES class_types(id),
        created_by_user_id TEXT,
        is_public INTEGER DEFAULT 1,
        created_at TIMESTAMP NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS routines (
        id TEXT PRIMARY KEY,
        name TEXT NOT NULL,
        description TEXT,
        class_type_id TEXT REFERENCES class_types(id),
        created_by_user_id TEXT NOT NULL,
        is_public INTEGER DEFAULT 0,
        total_duration INTEGER DEFAULT 0,
        created_at TIMESTAMP NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS routine_exercises (
        id TEXT PRIMARY KEY,
        routine_id TEXT NOT NULL REFERENCES routines(id),
        exercise_id TEXT NOT NULL REFERENCES exercises(id),
        order_index INTEGER NOT NULL,
        duration_seconds INTEGER,
        repetitions INTEGER,
        sets INTEGER,
        rest_seconds INTEGER,
        notes TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS calendar_events (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL,
        class_type_id TEXT REFERENCES class_types(id),
        routine_id TEXT REFERENCES routines(id),
        title TEXT NOT NULL,
        start_datetime TIMESTAMP NOT NULL,
        end_datetime TIMESTAMP NOT NULL,
        location TEXT,
        created_at TIMESTAMP NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS programs (
        id TEXT PRIMARY KEY,
        name TEXT NOT NULL,
        description TEXT,
        trainer_id TEXT NOT NULL,
        class_type_id TEXT REFERENCES class_types(id),
        created_at TIMESTAMP NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS program_enrollments (
        id TEXT PRIMARY KEY,
        program_id TEXT NOT NULL REFERENCES programs(id),
        client_id TEXT NOT NULL,
        enrolled_at TIMESTAMP NOT NULL
    )
    """,
]

INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_class_types_owner ON class_types(created_by_user_id)",
    "CREATE INDEX IF NOT EXISTS idx_exercises_class_type ON exercises(class_type_id)",
    "CREATE INDEX IF NOT EXISTS idx_routines_class_type ON routines(class_type_id)",
    "CREATE INDEX IF NOT EXISTS idx_routine_exercises_exercise ON routine_exercises(exercise_id)",
    "CREATE INDEX IF NOT EXISTS idx_routine_exercises_routine ON routine_exercises(routine_id)",
    "CREATE INDEX IF NOT EXISTS idx_calendar_events_class_type ON calendar_events(class_type_id)",
    "CREATE INDEX IF NOT EXISTS idx_programs_class_type ON programs(class_type_id)",
    "CREATE INDEX IF NOT EXISTS idx_program_enrollments_program ON program_enrollments(program_id)",
]


async def init_db(db_path: Path | None = None) -> Path:
    """Initialize the database schema and return the database path."""
    if db_path is None:
        db_path = get_db_path()

    async with aiosqlite.connect(db_path) as db:
        await db.execute("PRAGMA foreign_keys = ON")
        for statement in SCHEMA:
            await db.execute(statement)
        for statement in INDEXES:
            await db.execute(statement)
        await db.commit()

    return db_path
