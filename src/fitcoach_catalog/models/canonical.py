"""Desired-state description of the catalog."""

from dataclasses import dataclass, field

from .catalog import DifficultyLevel, ExerciseCategory, fold_name


@dataclass
class ExerciseSpec:
    """Canonical attributes of one exercise."""

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
    is_public: bool = True

    @property
    def key(self) -> str:
        return fold_name(self.name)

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "name": self.name,
            "description": self.description,
            "difficulty_level": self.difficulty_level.value,
            "equipment_needed": self.equipment_needed,
            "primary_muscles": self.primary_muscles,
            "secondary_muscles": self.secondary_muscles,
            "category": self.category.value,
            "calories_per_minute": self.calories_per_minute,
            "modifications": self.modifications,
            "safety_notes": self.safety_notes,
            "is_public": self.is_public,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ExerciseSpec":
        """Create from dictionary."""
        return cls(
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
            is_public=data.get("is_public", True),
        )


@dataclass
class ClassTypeSpec:
    """Canonical class type with its ordered exercises."""

    name: str
    exercises: list[ExerciseSpec]
    description: str | None = None
    is_default: bool = True

    @property
    def key(self) -> str:
        return fold_name(self.name)

    @property
    def exercise_names(self) -> list[str]:
        return [ex.name for ex in self.exercises]

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "name": self.name,
            "description": self.description,
            "is_default": self.is_default,
            "exercises": [ex.to_dict() for ex in self.exercises],
        }


@dataclass
class CanonicalSpec:
    """Ordered collection of canonical class types.

    Build instances through ``fitcoach_catalog.data.build_canonical_spec``,
    which validates names and ordering.
    """

    class_types: list[ClassTypeSpec] = field(default_factory=list)

    def __iter__(self):
        return iter(self.class_types)

    def __len__(self) -> int:
        return len(self.class_types)

    @property
    def names(self) -> list[str]:
        return [ct.name for ct in self.class_types]

    def get(self, name: str) -> ClassTypeSpec | None:
        """Look up a class type by case-insensitive name."""
        key = fold_name(name)
        for ct in self.class_types:
            if ct.key == key:
                return ct
        return None

    def to_dict(self) -> dict:
        """Convert to the JSON document shape accepted by the loader."""
        return {"class_types": [ct.to_dict() for ct in self.class_types]}
