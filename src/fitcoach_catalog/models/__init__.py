"""Data models for fitcoach-catalog."""

from .canonical import CanonicalSpec, ClassTypeSpec, ExerciseSpec
from .catalog import (
    CalendarEvent,
    ClassType,
    DifficultyLevel,
    EntityKind,
    Exercise,
    ExerciseCategory,
    Program,
    Routine,
    RoutineExercise,
    fold_name,
)
from .plan import ReconciliationPlan, RemovalReason
from .report import EntityCounts, ReconciliationReport

__all__ = [
    "CalendarEvent",
    "CanonicalSpec",
    "ClassType",
    "ClassTypeSpec",
    "DifficultyLevel",
    "EntityCounts",
    "EntityKind",
    "Exercise",
    "ExerciseCategory",
    "ExerciseSpec",
    "fold_name",
    "Program",
    "ReconciliationPlan",
    "ReconciliationReport",
    "RemovalReason",
    "Routine",
    "RoutineExercise",
]
