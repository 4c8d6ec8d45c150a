"""fitcoach-catalog: keep a fitness class catalog in line with its canonical spec."""

from .errors import (
    CatalogError,
    ConstraintViolation,
    NotFoundError,
    StoreConnectionError,
    ValidationError,
)
from .reconcile import ReconcileOptions, reconcile

__version__ = "0.1.0"

__all__ = [
    "CatalogError",
    "ConstraintViolation",
    "NotFoundError",
    "reconcile",
    "ReconcileOptions",
    "StoreConnectionError",
    "ValidationError",
]
