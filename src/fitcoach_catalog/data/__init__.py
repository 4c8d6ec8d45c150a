"""Canonical catalog loading."""

from .canonical_loader import (
    build_canonical_spec,
    default_canonical_spec,
    load_canonical_spec,
    validate_canonical_spec,
)

__all__ = [
    "build_canonical_spec",
    "default_canonical_spec",
    "load_canonical_spec",
    "validate_canonical_spec",
]
