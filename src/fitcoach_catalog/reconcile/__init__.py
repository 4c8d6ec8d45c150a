"""Catalog reconciliation: snapshot, plan, execute."""

from .cascade import CascadeResult, remove_class_type, remove_exercise, remove_owner_routines
from .coordinator import ReconcileOptions, Reconciler, RunState, reconcile
from .matcher import ensure_class_type, ensure_exercise, find_class_type, find_exercise
from .planner import partition_exercises, plan_reconciliation
from .snapshot import CatalogSnapshot, read_snapshot

__all__ = [
    "CascadeResult",
    "CatalogSnapshot",
    "ensure_class_type",
    "ensure_exercise",
    "find_class_type",
    "find_exercise",
    "partition_exercises",
    "plan_reconciliation",
    "read_snapshot",
    "reconcile",
    "ReconcileOptions",
    "Reconciler",
    "remove_class_type",
    "remove_exercise",
    "remove_owner_routines",
    "RunState",
]
