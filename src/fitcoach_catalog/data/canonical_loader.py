"""Canonical catalog loader from JSON or the built-in defaults."""

import copy
import json
import logging
from pathlib import Path

from ..errors import ValidationError
from ..models.canonical import CanonicalSpec, ClassTypeSpec, ExerciseSpec
from .default_catalog import DEFAULT_CLASS_TYPES

logger = logging.getLogger(__name__)


def get_default_spec_path() -> Path:
    """Get the path of an optional canonical catalog JSON shipped with the data directory."""
    return Path(__file__).parent.parent.parent.parent / "data" / "canonical_catalog.json"


def validate_canonical_spec(spec: CanonicalSpec) -> CanonicalSpec:
    """Check names and exercise lists of a canonical spec.

    Raises:
        ValidationError: on an empty name, an empty exercise list, or a
            duplicate (case-insensitive) class-type or exercise name
    """
    seen_class_types: dict[str, str] = {}
    for class_type in spec.class_types:
        if not class_type.name or not class_type.name.strip():
            raise ValidationError("Class type name must not be empty")
        if class_type.key in seen_class_types:
            raise ValidationError(
                f"Duplicate class type {class_type.name!r} "
                f"(already defined as {seen_class_types[class_type.key]!r})",
                class_type.name,
            )
        seen_class_types[class_type.key] = class_type.name

        if not class_type.exercises:
            raise ValidationError(
                f"Class type {class_type.name!r} has no exercises", class_type.name
            )

        seen_exercises: set[str] = set()
        for exercise in class_type.exercises:
            if not exercise.name or not exercise.name.strip():
                raise ValidationError(
                    f"Exercise name must not be empty in {class_type.name!r}",
                    class_type.name,
                )
            if exercise.key in seen_exercises:
                raise ValidationError(
                    f"Duplicate exercise {exercise.name!r} in {class_type.name!r}",
                    f"{class_type.name}/{exercise.name}",
                )
            seen_exercises.add(exercise.key)

    return spec


def build_canonical_spec(data: dict) -> CanonicalSpec:
    """Build and validate a canonical spec from its JSON document shape.

    Args:
        data: ``{"class_types": [{"name", "description", "is_default",
            "exercises": [...]}, ...]}``

    Returns:
        Validated CanonicalSpec preserving document order
    """
    if not isinstance(data, dict) or not isinstance(data.get("class_types"), list):
        raise ValidationError("Canonical spec must contain a 'class_types' list")

    class_types = []
    for ct_data in data["class_types"]:
        if not isinstance(ct_data, dict):
            raise ValidationError(f"Class type entry must be an object, got {ct_data!r}")
        name = ct_data.get("name") or ""
        exercises = []
        for ex_data in ct_data.get("exercises") or []:
            try:
                exercises.append(ExerciseSpec.from_dict(ex_data))
            except (KeyError, ValueError, TypeError) as e:
                ex_name = ex_data.get("name", "unknown") if isinstance(ex_data, dict) else "unknown"
                raise ValidationError(
                    f"Invalid exercise {ex_name!r}: {e}", f"{name}/{ex_name}"
                ) from e
        class_types.append(
            ClassTypeSpec(
                name=name,
                description=ct_data.get("description"),
                is_default=ct_data.get("is_default", True),
                exercises=exercises,
            )
        )

    return validate_canonical_spec(CanonicalSpec(class_types=class_types))


def default_canonical_spec() -> CanonicalSpec:
    """The built-in five-class catalog."""
    return validate_canonical_spec(
        CanonicalSpec(class_types=copy.deepcopy(DEFAULT_CLASS_TYPES))
    )


def load_canonical_spec(path: Path | None = None) -> CanonicalSpec:
    """Load the canonical spec from a JSON file.

    Falls back to the built-in catalog when no path is given and no
    ``canonical_catalog.json`` exists in the data directory.
    """
    if path is None:
        path = get_default_spec_path()
        if not path.exists():
            return default_canonical_spec()

    try:
        with open(path) as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Canonical spec is not valid JSON: {e}", str(path)) from e
    except OSError as e:
        raise ValidationError(f"Cannot read canonical spec: {e}", str(path)) from e

    spec = build_canonical_spec(data)
    logger.info("Loaded canonical spec with %d class types from %s", len(spec), path)
    return spec
