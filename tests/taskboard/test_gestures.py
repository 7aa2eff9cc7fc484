import pytest

from kanban_board.taskboard import (
    DragDecision,
    DragOutcome,
    DragResult,
    InvalidInputError,
    MutationApplier,
    TaskDraft,
    TaskStatus,
    TaskStore,
    interpret,
    reconcile,
)


class RecordingStore:
    def __init__(self) -> None:
        self.calls: list[tuple[str, TaskStatus]] = []

    def update_task_status(self, task_id: str, status: TaskStatus) -> None:
        self.calls.append((task_id, status))


def test_interpret_cancelled_without_destination() -> None:
    result = DragResult("task-1", TaskStatus.PENDING, 0)

    decision = interpret(result)

    assert decision == DragDecision(DragOutcome.CANCELLED, "task-1")
    assert not decision.mutates


@pytest.mark.parametrize("source", list(TaskStatus))
@pytest.mark.parametrize("index", [0, 3])
def test_interpret_cancelled_regardless_of_source(source: TaskStatus, index: int) -> None:
    decision = interpret(DragResult("task-1", source, index, None, index))

    assert decision.outcome is DragOutcome.CANCELLED


def test_interpret_same_position_is_no_op() -> None:
    result = DragResult("task-1", TaskStatus.IN_PROGRESS, 2, TaskStatus.IN_PROGRESS, 2)

    assert interpret(result).outcome is DragOutcome.NO_OP


def test_interpret_same_column_other_index_is_reorder() -> None:
    result = DragResult("task-1", TaskStatus.PENDING, 0, TaskStatus.PENDING, 2)

    decision = interpret(result)

    assert decision.outcome is DragOutcome.REORDER
    assert decision.target_status is None
    assert not decision.mutates


def test_interpret_other_column_is_status_change() -> None:
    result = DragResult("task-1", TaskStatus.PENDING, 0, TaskStatus.COMPLETED, 5)

    decision = interpret(result)

    assert decision.outcome is DragOutcome.STATUS_CHANGE
    assert decision.target_status is TaskStatus.COMPLETED
    assert decision.mutates


def test_rebased_replaces_source_only() -> None:
    result = DragResult("task-1", TaskStatus.PENDING, 0, TaskStatus.IN_PROGRESS, 1)

    rebased = result.rebased(TaskStatus.IN_PROGRESS, 1)

    assert rebased.source_status is TaskStatus.IN_PROGRESS
    assert rebased.source_index == 1
    assert rebased.destination_status is TaskStatus.IN_PROGRESS
    assert interpret(rebased).outcome is DragOutcome.NO_OP


def test_drag_result_from_dict() -> None:
    result = DragResult.from_dict(
        {
            "task_id": "task-1",
            "source": {"status": "pending", "index": 0},
            "destination": {"status": "in_progress", "index": "1"},
        }
    )

    assert result == DragResult("task-1", TaskStatus.PENDING, 0, TaskStatus.IN_PROGRESS, 1)


def test_drag_result_from_dict_without_destination() -> None:
    result = DragResult.from_dict(
        {"task_id": "task-1", "source": {"status": "completed", "index": 4}, "destination": None}
    )

    assert result.destination_status is None
    assert result.destination_index is None


@pytest.mark.parametrize(
    "payload",
    [
        {"source": {"status": "pending", "index": 0}},
        {"task_id": "task-1", "source": {"status": "archived", "index": 0}},
        {"task_id": "task-1", "source": {"status": "pending", "index": "first"}},
        {
            "task_id": "task-1",
            "source": {"status": "pending", "index": 0},
            "destination": {"status": "done", "index": 0},
        },
    ],
)
def test_drag_result_from_dict_rejects_malformed_payloads(payload) -> None:
    with pytest.raises(InvalidInputError):
        DragResult.from_dict(payload)


def test_applier_only_applies_status_changes() -> None:
    store = RecordingStore()
    applier = MutationApplier(store)

    assert not applier.apply(DragDecision(DragOutcome.CANCELLED, "task-1"))
    assert not applier.apply(DragDecision(DragOutcome.NO_OP, "task-1"))
    assert not applier.apply(DragDecision(DragOutcome.REORDER, "task-1"))
    assert applier.apply(
        DragDecision(DragOutcome.STATUS_CHANGE, "task-1", TaskStatus.COMPLETED)
    )

    assert store.calls == [("task-1", TaskStatus.COMPLETED)]


def test_applier_changes_only_the_moved_task() -> None:
    store = TaskStore()
    moved = store.add_task(TaskDraft("Moved"))
    other = store.add_task(TaskDraft("Other"))
    before = {task["id"]: task for task in store.get_summary()["tasks"]}

    MutationApplier(store).apply(
        DragDecision(DragOutcome.STATUS_CHANGE, moved.id, TaskStatus.IN_PROGRESS)
    )

    after = {task["id"]: task for task in store.get_summary()["tasks"]}
    assert after[other.id] == before[other.id]
    assert after[moved.id] == {**before[moved.id], "status": "in_progress"}


def test_reconcile_already_applied_move_is_no_op() -> None:
    result = DragResult("task-1", TaskStatus.PENDING, 0, TaskStatus.IN_PROGRESS, 1)

    decision = reconcile(result, TaskStatus.IN_PROGRESS, 0)

    assert decision == DragDecision(DragOutcome.NO_OP, "task-1")


def test_reconcile_moves_from_current_column() -> None:
    result = DragResult("task-1", TaskStatus.PENDING, 0, TaskStatus.COMPLETED, 0)

    decision = reconcile(result, TaskStatus.IN_PROGRESS, 2)

    assert decision.outcome is DragOutcome.STATUS_CHANGE
    assert decision.target_status is TaskStatus.COMPLETED


def test_reconcile_same_column_gesture_compares_current_index() -> None:
    result = DragResult("task-1", TaskStatus.PENDING, 0, TaskStatus.PENDING, 1)

    assert reconcile(result, TaskStatus.PENDING, 1).outcome is DragOutcome.NO_OP
    assert reconcile(result, TaskStatus.PENDING, 0).outcome is DragOutcome.REORDER


def test_reconcile_keeps_cancelled() -> None:
    result = DragResult("task-1", TaskStatus.PENDING, 0)

    assert reconcile(result, TaskStatus.PENDING, 0).outcome is DragOutcome.CANCELLED
