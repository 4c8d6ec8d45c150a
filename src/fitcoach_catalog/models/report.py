"""Reconciliation run report."""

from dataclasses import dataclass, field

from .catalog import EntityKind


@dataclass
class EntityCounts:
    """Rows created, kept and removed for one entity kind."""

    created: int = 0
    kept: int = 0
    removed: int = 0

    @property
    def changed(self) -> bool:
        return self.created > 0 or self.removed > 0


@dataclass
class ReconciliationReport:
    """Counts per action type per entity kind for one reconciliation run."""

    owner_id: str
    counts: dict[EntityKind, EntityCounts] = field(
        default_factory=lambda: {kind: EntityCounts() for kind in EntityKind}
    )
    dry_run: bool = False

    def __getitem__(self, kind: EntityKind) -> EntityCounts:
        return self.counts[kind]

    @property
    def class_types(self) -> EntityCounts:
        return self.counts[EntityKind.CLASS_TYPE]

    @property
    def exercises(self) -> EntityCounts:
        return self.counts[EntityKind.EXERCISE]

    @property
    def has_changes(self) -> bool:
        return any(c.changed for c in self.counts.values())

    def add_removed(self, removed: dict[EntityKind, int]) -> None:
        """Fold cascade delete counts into the report."""
        for kind, count in removed.items():
            self.counts[kind].removed += count

    def to_dict(self) -> dict:
        return {
            "owner_id": self.owner_id,
            "dry_run": self.dry_run,
            "counts": {
                kind.value: {
                    "created": c.created,
                    "kept": c.kept,
                    "removed": c.removed,
                }
                for kind, c in self.counts.items()
            },
        }
