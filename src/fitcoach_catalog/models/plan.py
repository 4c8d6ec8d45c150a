"""Planned reconciliation actions."""

from dataclasses import dataclass, field
from enum import Enum

from .canonical import ClassTypeSpec, ExerciseSpec
from .catalog import ClassType, Exercise


class RemovalReason(str, Enum):
    """Why a row was scheduled for removal."""

    DUPLICATE = "duplicate"
    NOT_IN_KEEP_LIST = "not_in_keep_list"
    EXCESS = "excess"


@dataclass(frozen=True)
class CreateClassType:
    spec: ClassTypeSpec


@dataclass(frozen=True)
class KeepClassType:
    class_type: ClassType
    spec: ClassTypeSpec | None = None


@dataclass(frozen=True)
class RemoveClassType:
    class_type: ClassType
    reason: RemovalReason


@dataclass(frozen=True)
class CreateExercise:
    """Create an exercise under a canonical class type.

    The class type is referenced by name because it may only come into
    existence during execution.
    """

    class_type_name: str
    spec: ExerciseSpec


@dataclass(frozen=True)
class KeepExercise:
    """Keep an existing exercise row.

    ``promoted`` rows did not match any canonical name and stand in for
    ``canonical_name`` to preserve row identity.
    """

    exercise: Exercise
    canonical_name: str
    promoted: bool = False


@dataclass(frozen=True)
class RemoveExercise:
    exercise: Exercise
    reason: RemovalReason = RemovalReason.EXCESS


@dataclass
class ReconciliationPlan:
    """Explicit action list computed before any mutation."""

    owner_id: str
    class_type_creates: list[CreateClassType] = field(default_factory=list)
    class_type_keeps: list[KeepClassType] = field(default_factory=list)
    class_type_removes: list[RemoveClassType] = field(default_factory=list)
    exercise_keeps: list[KeepExercise] = field(default_factory=list)
    exercise_removes: list[RemoveExercise] = field(default_factory=list)
    exercise_creates: list[CreateExercise] = field(default_factory=list)

    @property
    def is_noop(self) -> bool:
        """True when the plan neither creates nor removes anything."""
        return not (
            self.class_type_creates
            or self.class_type_removes
            or self.exercise_removes
            or self.exercise_creates
        )

    def summary(self) -> dict[str, int]:
        return {
            "class_type_creates": len(self.class_type_creates),
            "class_type_keeps": len(self.class_type_keeps),
            "class_type_removes": len(self.class_type_removes),
            "exercise_keeps": len(self.exercise_keeps),
            "exercise_removes": len(self.exercise_removes),
            "exercise_creates": len(self.exercise_creates),
        }
