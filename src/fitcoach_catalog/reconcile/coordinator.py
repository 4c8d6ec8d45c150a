"""Transaction coordinator: plan and apply a reconciliation run atomically."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from ..data.canonical_loader import validate_canonical_spec
from ..db.repositories import ClassTypeRepository, ExerciseRepository
from ..db.store import CatalogStore
from ..errors import NotFoundError, ValidationError
from ..models.canonical import CanonicalSpec
from ..models.catalog import fold_name
from ..models.plan import ReconciliationPlan
from ..models.report import ReconciliationReport
from .cascade import remove_class_type, remove_exercise
from .matcher import ensure_class_type, ensure_exercise
from .planner import plan_reconciliation
from .snapshot import read_snapshot

logger = logging.getLogger(__name__)


class RunState(str, Enum):
    """Lifecycle of one reconciliation run."""

    IDLE = "idle"
    PLANNING = "planning"
    EXECUTING = "executing"
    COMMITTED = "committed"
    ROLLED_BACK = "rolled_back"


@dataclass
class ReconcileOptions:
    """Options for a reconciliation run.

    Attributes:
        keep_list: Class-type names to retain; all other class types of the
            owner are removed with their dependents. ``None`` disables the
            removal pass.
        dry_run: Plan and execute inside the transaction, then roll back.
    """

    keep_list: Iterable[str] | None = None
    dry_run: bool = False


class _DryRunComplete(Exception):
    """Raised inside the transaction to discard a dry run."""


class Reconciler:
    """One reconciliation run for one owner.

    A run moves IDLE -> PLANNING -> EXECUTING and ends COMMITTED or
    ROLLED_BACK. Instances are single-use.
    """

    def __init__(
        self,
        store: CatalogStore,
        owner_id: str,
        spec: CanonicalSpec,
        options: ReconcileOptions | None = None,
    ):
        self.store = store
        self.owner_id = owner_id
        self.spec = spec
        self.options = options or ReconcileOptions()
        self.state = RunState.IDLE
        self.plan: ReconciliationPlan | None = None

    async def run(self) -> ReconciliationReport:
        """Plan and apply the run in a single transaction.

        Raises:
            ValidationError: spec or owner invalid; raised before any store call
            StoreConnectionError, ConstraintViolation, NotFoundError: the run
                was rolled back
        """
        if self.state is not RunState.IDLE:
            raise RuntimeError(f"Reconciliation already {self.state.value}")
        if not self.owner_id:
            raise ValidationError("Owner id must not be empty")
        validate_canonical_spec(self.spec)

        report = ReconciliationReport(owner_id=self.owner_id, dry_run=self.options.dry_run)
        logger.info("Starting reconciliation for owner %s", self.owner_id)
        try:
            async with self.store.transaction():
                self.state = RunState.PLANNING
                snapshot = await read_snapshot(self.store, self.owner_id)
                keep_list = self.options.keep_list
                self.plan = plan_reconciliation(
                    snapshot, self.spec, set(keep_list) if keep_list is not None else None
                )

                self.state = RunState.EXECUTING
                await self._execute(self.plan, report)

                if self.options.dry_run:
                    raise _DryRunComplete()
        except _DryRunComplete:
            self.state = RunState.ROLLED_BACK
            logger.info("Dry run for owner %s rolled back", self.owner_id)
            return report
        except BaseException as e:
            self.state = RunState.ROLLED_BACK
            logger.error("Reconciliation for owner %s rolled back: %s", self.owner_id, e)
            raise

        self.state = RunState.COMMITTED
        logger.info("Reconciliation for owner %s committed: %s", self.owner_id, report.to_dict())
        return report

    async def _execute(self, plan: ReconciliationPlan, report: ReconciliationReport) -> None:
        """Apply planned actions in dependency order."""
        class_type_ids = {keep.spec.key: keep.class_type.id for keep in plan.class_type_keeps}

        for action in plan.class_type_creates:
            class_type, created = await ensure_class_type(self.store, self.owner_id, action.spec)
            class_type_ids[action.spec.key] = class_type.id
            if created:
                report.class_types.created += 1
            else:
                report.class_types.kept += 1

        await self._verify_keeps(plan, report)

        for action in plan.exercise_removes:
            result = await remove_exercise(self.store, action.exercise.id)
            report.add_removed(result.removed)

        for action in plan.class_type_removes:
            logger.info(
                "Removing class type %r (%s): %s",
                action.class_type.name,
                action.class_type.id,
                action.reason.value,
            )
            result = await remove_class_type(self.store, action.class_type.id)
            report.add_removed(result.removed)

        for action in plan.exercise_creates:
            class_type_id = class_type_ids[fold_name(action.class_type_name)]
            _, created = await ensure_exercise(
                self.store, self.owner_id, class_type_id, action.spec
            )
            if created:
                report.exercises.created += 1
            else:
                report.exercises.kept += 1

    async def _verify_keeps(self, plan: ReconciliationPlan, report: ReconciliationReport) -> None:
        """Fail the run if a row planned for keeping has vanished."""
        class_types = ClassTypeRepository(self.store)
        for keep in plan.class_type_keeps:
            if await class_types.get(keep.class_type.id) is None:
                raise NotFoundError("Kept class type no longer exists", keep.class_type.id)
            report.class_types.kept += 1

        exercises = ExerciseRepository(self.store)
        for keep in plan.exercise_keeps:
            if not await exercises.exists(keep.exercise.id):
                raise NotFoundError("Kept exercise no longer exists", keep.exercise.id)
            report.exercises.kept += 1


async def reconcile(
    store: CatalogStore,
    owner_id: str,
    spec: CanonicalSpec,
    options: ReconcileOptions | None = None,
) -> ReconciliationReport:
    """Bring the owner's catalog into conformance with ``spec``.

    Returns:
        Report of rows created, kept and removed per entity kind
    """
    return await Reconciler(store, owner_id, spec, options).run()
