"""Catalog row records: class types, exercises and the rows that reference them."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class DifficultyLevel(str, Enum):
    """Exercise difficulty levels."""

    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


class ExerciseCategory(str, Enum):
    """Exercise categories."""

    STRENGTH = "strength"
    CARDIO = "cardio"
    FLEXIBILITY = "flexibility"
    BALANCE = "balance"


class EntityKind(str, Enum):
    """Tables touched by reconciliation, in report order."""

    CLASS_TYPE = "class_types"
    EXERCISE = "exercises"
    ROUTINE = "routines"
    ROUTINE_EXERCISE = "routine_exercises"
    CALENDAR_EVENT = "calendar_events"
    PROGRAM = "programs"
    PROGRAM_ENROLLMENT = "program_enrollments"


def fold_name(name: str) -> str:
    """Normalize a catalog name for case-insensitive matching."""
    return " ".join(name.split()).casefold()


def _parse_datetime(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None


@dataclass
class ClassType:
    """A kind of group fitness class (Yoga, HIIT, ...) owned by a user."""

    id: str
    name: str
    description: str | None = None
    is_default: bool = False
    created_by_user_id: str | None = None
    created_at: datetime | None = None

    @property
    def key(self) -> str:
        return fold_name(self.name)

    @classmethod
    def from_dict(cls, data: dict) -> "ClassType":
        """Create from a backup record."""
        return cls(
            id=data["id"],
            name=data["name"],
            description=data.get("description"),
            is_default=bool(data.get("is_default", False)),
            created_by_user_id=data.get("created_by_user_id"),
            created_at=_parse_datetime(data.get("created_at")),
        )


@dataclass
class Exercise:
    """An exercise row, optionally attached to a class type."""

    id: str
    name: str
    difficulty_level: DifficultyLevel
    category: ExerciseCategory
    description: str | None = None
    equipment_needed: str | None = None
    primary_muscles: str | None = None
    secondary_muscles: str | None = None
    calories_per_minute: int | None = None
    modifications: str | None = None
    safety_notes: str | None = None
    class_type_id: str | None = None
    created_by_user_id: str | None = None
    is_public: bool = True
    created_at: datetime | None = None

    @property
    def key(self) -> str:
        return fold_name(self.name)

    @classmethod
    def from_dict(cls, data: dict) -> "Exercise":
        """Create from a backup record."""
        return cls(
            id=data["id"],
            name=data["name"],
            difficulty_level=DifficultyLevel(data["difficulty_level"]),
            category=ExerciseCategory(data["category"]),
            description=data.get("description"),
            equipment_needed=data.get("equipment_needed"),
            primary_muscles=data.get("primary_muscles"),
            secondary_muscles=data.get("secondary_muscles"),
            calories_per_minute=data.get("calories_per_minute"),
            modifications=data.get("modifications"),
            safety_notes=data.get("safety_notes"),
            class_type_id=data.get("class_type_id"),
            created_by_user_id=data.get("created_by_user_id"),
            is_public=bool(data.get("is_public", True)),
            created_at=_parse_datetime(data.get("created_at")),
        )


@dataclass
class Routine:
    """A trainer routine; only its class-type reference matters here."""

    id: str
    name: str
    created_by_user_id: str
    class_type_id: str | None = None
    description: str | None = None
    is_public: bool = False
    total_duration: int = 0
    created_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "Routine":
        """Create from a backup record."""
        return cls(
            id=data["id"],
            name=data["name"],
            created_by_user_id=data["created_by_user_id"],
            class_type_id=data.get("class_type_id"),
            description=data.get("description"),
            is_public=bool(data.get("is_public", False)),
            total_duration=data.get("total_duration") or 0,
            created_at=_parse_datetime(data.get("created_at")),
        )


@dataclass
class RoutineExercise:
    """Link row placing an exercise inside a routine."""

    id: str
    routine_id: str
    exercise_id: str
    order_index: int
    duration_seconds: int | None = None
    repetitions: int | None = None
    sets: int | None = None
    rest_seconds: int | None = None
    notes: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "RoutineExercise":
        """Create from a backup record."""
        return cls(
            id=data["id"],
            routine_id=data["routine_id"],
            exercise_id=data["exercise_id"],
            order_index=data["order_index"],
            duration_seconds=data.get("duration_seconds"),
            repetitions=data.get("repetitions"),
            sets=data.get("sets"),
            rest_seconds=data.get("rest_seconds"),
            notes=data.get("notes"),
        )


@dataclass
class CalendarEvent:
    """A scheduled class on a trainer's calendar."""

    id: str
    user_id: str
    title: str
    start_datetime: datetime
    end_datetime: datetime
    class_type_id: str | None = None
    routine_id: str | None = None
    location: str | None = None
    created_at: datetime | None = None


@dataclass
class Program:
    """A multi-week program built around a class type."""

    id: str
    name: str
    trainer_id: str
    class_type_id: str | None = None
    description: str | None = None
    created_at: datetime | None = None
