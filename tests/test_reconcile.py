"""End-to-end tests for reconciliation runs."""

import sqlite3

import pytest

from fitcoach_catalog import reconcile
from fitcoach_catalog.data import default_canonical_spec
from fitcoach_catalog.db import ExerciseRepository
from fitcoach_catalog.errors import (
    ConstraintViolation,
    NotFoundError,
    StoreConnectionError,
    ValidationError,
)
from fitcoach_catalog.models import CanonicalSpec, ClassType, EntityKind
from fitcoach_catalog.reconcile import ReconcileOptions, Reconciler, RunState, read_snapshot
from fitcoach_catalog.reconcile import coordinator

from conftest import OWNER, OTHER_OWNER, YOGA_EXERCISES, class_type_spec

SPINNING_EXERCISES = [
    "Seated Flat Road",
    "Standing Climb",
    "Seated Climb",
    "Jumps (Seated to Standing)",
    "Sprints",
]


async def exercise_names(store, class_type_name: str) -> list[str]:
    snapshot = await read_snapshot(store, OWNER)
    (class_type,) = snapshot.find_class_types(class_type_name)
    return [ex.name for ex in snapshot.exercises_for(class_type.id)]


class TestScenarios:
    """Tests for the reference reconciliation scenarios."""

    @pytest.mark.asyncio
    async def test_empty_catalog_gets_canonical_class_type(self, store, yoga_spec):
        """Test reconciling an empty catalog creates the class type and its exercises."""
        report = await reconcile(store, OWNER, CanonicalSpec([yoga_spec]))

        snapshot = await read_snapshot(store, OWNER)
        assert [ct.name for ct in snapshot.class_types] == ["Yoga"]
        assert sorted(await exercise_names(store, "Yoga")) == sorted(YOGA_EXERCISES)
        assert report.class_types.created == 1
        assert report.exercises.created == 5
        assert report.class_types.removed == 0
        assert report.exercises.removed == 0

    @pytest.mark.asyncio
    async def test_duplicate_class_type_removed_with_dependents(self, seed):
        """Test a case-variant duplicate is removed together with its rows."""
        keeper = await seed.class_type("Spinning", minutes=0)
        duplicate = await seed.class_type("SPINNING", minutes=5)
        for i, name in enumerate(SPINNING_EXERCISES):
            await seed.exercise(keeper, name, minutes=i)
        dup_exercises = [
            await seed.exercise(duplicate, name, minutes=10 + i)
            for i, name in enumerate(SPINNING_EXERCISES[:3])
        ]
        routine = await seed.routine(duplicate, dup_exercises)
        await seed.event(duplicate, routine)
        await seed.program(duplicate, enrollments=1)

        spec = CanonicalSpec([class_type_spec("Spinning", SPINNING_EXERCISES)])
        report = await reconcile(seed.store, OWNER, spec)

        snapshot = await read_snapshot(seed.store, OWNER)
        assert [ct.id for ct in snapshot.class_types] == [keeper.id]
        for table in ["exercises", "routines", "calendar_events", "programs"]:
            assert await seed.count(table, "class_type_id", duplicate.id) == 0, table
        assert await seed.count("routine_exercises") == 0
        assert await seed.count("program_enrollments") == 0
        assert report.class_types.removed == 1
        assert report.class_types.kept == 1
        assert report.exercises.removed == 3
        assert report.exercises.kept == 5
        assert report[EntityKind.ROUTINE].removed == 1
        assert report[EntityKind.CALENDAR_EVENT].removed == 1
        assert report[EntityKind.PROGRAM].removed == 1

    @pytest.mark.asyncio
    async def test_keep_list_trims_to_listed_class_types(self, seed):
        """Test a keep list of five names leaves only those five."""
        spec = default_canonical_spec()
        await reconcile(seed.store, OWNER, spec)

        crossfit = await seed.class_type("CrossFit", minutes=100)
        boxing = await seed.class_type("Boxing", minutes=101)
        await seed.class_type("Barre", minutes=102)
        box_jump = await seed.exercise(crossfit, "Box Jump")
        wall_ball = await seed.exercise(crossfit, "Wall Ball", minutes=1)
        await seed.exercise(boxing, "Jab")
        routine = await seed.routine(crossfit, [box_jump, wall_ball])
        await seed.event(crossfit, routine)
        await seed.program(crossfit, enrollments=1)
        assert len((await read_snapshot(seed.store, OWNER)).class_types) == 8

        report = await reconcile(
            seed.store, OWNER, spec, ReconcileOptions(keep_list=set(spec.names))
        )

        snapshot = await read_snapshot(seed.store, OWNER)
        assert sorted(ct.name for ct in snapshot.class_types) == sorted(spec.names)
        assert report.class_types.removed == 3
        assert report.class_types.kept == 5
        assert report.exercises.removed == 3
        assert report[EntityKind.ROUTINE_EXERCISE].removed == 2
        assert report[EntityKind.ROUTINE].removed == 1
        assert report[EntityKind.CALENDAR_EVENT].removed == 1
        assert report[EntityKind.PROGRAM].removed == 1
        assert report[EntityKind.PROGRAM_ENROLLMENT].removed == 1


class TestProperties:
    """Tests for idempotence, convergence and minimal churn."""

    async def _messy_catalog(self, seed):
        yoga = await seed.class_type("Yoga", minutes=0)
        for i, name in enumerate(YOGA_EXERCISES[:3] + ["Cobra", "Lotus", "Crow", "Boat"]):
            await seed.exercise(yoga, name, minutes=i)
        hiit = await seed.class_type("hiit", minutes=1)
        await seed.exercise(hiit, "Burpees")
        await seed.class_type("Zumba", minutes=2)
        zumba_copy = await seed.class_type("ZUMBA", minutes=3)
        await seed.exercise(zumba_copy, "Cha-Cha-Cha")
        await seed.class_type("CrossFit", minutes=4)

    @pytest.mark.asyncio
    async def test_second_run_changes_nothing(self, seed):
        """Test reconciling twice leaves nothing to do on the second run."""
        await self._messy_catalog(seed)
        spec = default_canonical_spec()

        first = await reconcile(seed.store, OWNER, spec)
        before = await seed.dump()
        second = await reconcile(seed.store, OWNER, spec)

        assert first.has_changes
        assert not second.has_changes
        assert await seed.dump() == before

    @pytest.mark.asyncio
    async def test_every_canonical_class_type_converges(self, seed):
        """Test each canonical class type ends with its canonical exercise count."""
        await self._messy_catalog(seed)
        spec = default_canonical_spec()

        await reconcile(seed.store, OWNER, spec)

        snapshot = await read_snapshot(seed.store, OWNER)
        for ct_spec in spec:
            matches = snapshot.find_class_types(ct_spec.name)
            assert len(matches) == 1, ct_spec.name
            assert len(snapshot.exercises_for(matches[0].id)) == len(ct_spec.exercises)
        # Not canonical and no keep list: left alone
        assert snapshot.find_class_types("CrossFit")

    @pytest.mark.asyncio
    async def test_ten_exercises_five_matching(self, seed, yoga_spec):
        """Test only the five non-matching exercises are removed."""
        yoga = await seed.class_type("Yoga")
        names = ["Extra 1", "Extra 2"] + YOGA_EXERCISES + ["Extra 3", "Extra 4", "Extra 5"]
        for i, name in enumerate(names):
            await seed.exercise(yoga, name, minutes=i)

        report = await reconcile(seed.store, OWNER, CanonicalSpec([yoga_spec]))

        assert sorted(await exercise_names(seed.store, "Yoga")) == sorted(YOGA_EXERCISES)
        assert report.exercises.removed == 5
        assert report.exercises.kept == 5
        assert report.exercises.created == 0

    @pytest.mark.asyncio
    async def test_promoted_rows_keep_identity(self, seed, yoga_spec):
        """Test drifted exercise rows stand in for unmatched canonical names."""
        yoga = await seed.class_type("Yoga")
        names = YOGA_EXERCISES[:3] + ["Cobra", "Lotus", "Crow"]
        rows = [await seed.exercise(yoga, name, minutes=i) for i, name in enumerate(names)]

        report = await reconcile(seed.store, OWNER, CanonicalSpec([yoga_spec]))

        snapshot = await read_snapshot(seed.store, OWNER)
        kept_ids = [ex.id for ex in snapshot.exercises_for(yoga.id)]
        assert kept_ids == [row.id for row in rows[:5]]
        assert report.exercises.removed == 1
        assert report.exercises.created == 0

    @pytest.mark.asyncio
    async def test_other_owner_untouched(self, seed, yoga_spec):
        """Test a run never reads or writes another owner's rows."""
        other = await seed.class_type("Yoga", owner=OTHER_OWNER)
        await seed.class_type("Yoga", minutes=1, owner=OTHER_OWNER)
        await seed.exercise(other, "Cobra", owner=OTHER_OWNER)

        await reconcile(seed.store, OWNER, CanonicalSpec([yoga_spec]), ReconcileOptions(keep_list=[]))

        assert await seed.count("class_types", "created_by_user_id", OTHER_OWNER) == 2
        assert await seed.count("exercises", "created_by_user_id", OTHER_OWNER) == 1


class TestAtomicity:
    """Tests for rollback on failure."""

    @pytest.mark.asyncio
    async def test_failure_on_third_delete_rolls_back(self, seed, yoga_spec, monkeypatch):
        """Test an injected failure leaves the catalog exactly as before."""
        yoga = await seed.class_type("Yoga")
        for i, name in enumerate(YOGA_EXERCISES + [f"Extra {n}" for n in range(5)]):
            await seed.exercise(yoga, name, minutes=i)
        spec = CanonicalSpec([yoga_spec, class_type_spec("HIIT", ["Burpees"])])
        before = await seed.dump()

        original_delete = ExerciseRepository.delete
        calls = []

        async def failing_delete(self, exercise_id):
            calls.append(exercise_id)
            if len(calls) == 3:
                raise ConstraintViolation("Injected failure", exercise_id)
            return await original_delete(self, exercise_id)

        monkeypatch.setattr(ExerciseRepository, "delete", failing_delete)
        reconciler = Reconciler(seed.store, OWNER, spec)

        with pytest.raises(ConstraintViolation) as exc_info:
            await reconciler.run()

        assert exc_info.value.entity_key == calls[2]
        assert reconciler.state == RunState.ROLLED_BACK
        assert not seed.store.in_transaction
        assert await seed.dump() == before

    @pytest.mark.asyncio
    async def test_locked_commit_rolls_back(self, seed, yoga_spec, temp_db_path):
        """Test a run whose COMMIT is blocked leaves nothing behind and can be retried."""
        await seed.store.execute("PRAGMA busy_timeout = 50")
        reader = sqlite3.connect(temp_db_path, isolation_level=None)
        reconciler = Reconciler(seed.store, OWNER, CanonicalSpec([yoga_spec]))
        try:
            reader.execute("BEGIN")
            reader.execute("SELECT * FROM exercises").fetchall()

            with pytest.raises(StoreConnectionError):
                await reconciler.run()
        finally:
            reader.close()

        assert reconciler.state == RunState.ROLLED_BACK
        assert await seed.count("exercises") == 0

        report = await reconcile(seed.store, OWNER, CanonicalSpec([yoga_spec]))

        assert report.exercises.created == 5
        assert await seed.count("exercises") == 5

    @pytest.mark.asyncio
    async def test_vanished_keep_raises_not_found(self, seed, yoga_spec, monkeypatch):
        """Test a planned keep whose row is gone aborts the run."""
        real_read_snapshot = coordinator.read_snapshot

        async def stale_snapshot(store, owner_id):
            snapshot = await real_read_snapshot(store, owner_id)
            snapshot.class_types.insert(0, ClassType(id="ghost", name="Yoga", created_by_user_id=owner_id))
            return snapshot

        await seed.class_type("Pilates")
        monkeypatch.setattr(coordinator, "read_snapshot", stale_snapshot)
        before = await seed.dump()
        reconciler = Reconciler(seed.store, OWNER, CanonicalSpec([yoga_spec]))

        with pytest.raises(NotFoundError) as exc_info:
            await reconciler.run()

        assert exc_info.value.entity_key == "ghost"
        assert reconciler.state == RunState.ROLLED_BACK
        assert await seed.dump() == before


class TestReconciler:
    """Tests for run lifecycle and validation."""

    @pytest.mark.asyncio
    async def test_states_on_success(self, store, yoga_spec):
        """Test a successful run ends committed with its plan recorded."""
        reconciler = Reconciler(store, OWNER, CanonicalSpec([yoga_spec]))
        assert reconciler.state == RunState.IDLE

        await reconciler.run()

        assert reconciler.state == RunState.COMMITTED
        assert len(reconciler.plan.class_type_creates) == 1

    @pytest.mark.asyncio
    async def test_single_use(self, store, yoga_spec):
        """Test a finished run cannot be started again."""
        reconciler = Reconciler(store, OWNER, CanonicalSpec([yoga_spec]))
        await reconciler.run()

        with pytest.raises(RuntimeError):
            await reconciler.run()

    @pytest.mark.asyncio
    async def test_dry_run_rolls_back(self, seed, yoga_spec):
        """Test a dry run reports changes without keeping them."""
        reconciler = Reconciler(
            seed.store, OWNER, CanonicalSpec([yoga_spec]), ReconcileOptions(dry_run=True)
        )

        report = await reconciler.run()

        assert report.dry_run
        assert report.class_types.created == 1
        assert report.exercises.created == 5
        assert reconciler.state == RunState.ROLLED_BACK
        assert await seed.count("class_types") == 0
        assert await seed.count("exercises") == 0

    @pytest.mark.asyncio
    async def test_invalid_spec_fails_before_store(self, store):
        """Test validation errors surface without touching the store."""
        await store.close()
        spec = CanonicalSpec([class_type_spec("Yoga", ["Tree Pose", "TREE POSE"])])

        with pytest.raises(ValidationError):
            await reconcile(store, OWNER, spec)

    @pytest.mark.asyncio
    async def test_empty_owner(self, store, yoga_spec):
        """Test an empty owner id is rejected."""
        await store.close()

        with pytest.raises(ValidationError):
            await reconcile(store, "", CanonicalSpec([yoga_spec]))

    @pytest.mark.asyncio
    async def test_report_to_dict(self, store, yoga_spec):
        """Test the report serializes every entity kind."""
        report = await reconcile(store, OWNER, CanonicalSpec([yoga_spec]))
        data = report.to_dict()

        assert data["owner_id"] == OWNER
        assert set(data["counts"]) == {kind.value for kind in EntityKind}
        assert data["counts"]["exercises"] == {"created": 5, "kept": 0, "removed": 0}
