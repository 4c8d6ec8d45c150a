"""Database layer for fitcoach-catalog."""

from .engine import init_db
from .repositories import (
    CalendarEventRepository,
    ClassTypeRepository,
    ExerciseRepository,
    ProgramRepository,
    RoutineRepository,
)
from .store import CatalogStore

__all__ = [
    "CalendarEventRepository",
    "CatalogStore",
    "ClassTypeRepository",
    "ExerciseRepository",
    "init_db",
    "ProgramRepository",
    "RoutineRepository",
]
