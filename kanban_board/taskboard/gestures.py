"""Drag-and-drop gesture interpretation.

A gesture ends in one of four outcomes:

- ``CANCELLED``: dropped outside every column.
- ``NO_OP``: dropped back where it started.
- ``REORDER``: moved within its own column. Columns have no stored order,
  so this is accepted but changes nothing.
- ``STATUS_CHANGE``: dropped on another column; the task takes that
  column's status.

``interpret`` and ``reconcile`` only classify. ``MutationApplier`` is the part
that touches the store.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from loguru import logger

from .errors import InvalidInputError
from .manager import TaskStatus, TaskStore


class DragOutcome(str, Enum):
    """Classification of one gesture."""

    CANCELLED = "cancelled"
    NO_OP = "no_op"
    REORDER = "reorder"
    STATUS_CHANGE = "status_change"


@dataclass(frozen=True)
class DragResult:
    """Where a dragged task started and where it was released."""

    task_id: str
    source_status: TaskStatus
    source_index: int
    destination_status: TaskStatus | None = None
    destination_index: int | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DragResult:
        """
        Parse a gesture payload sent by the rendering layer.

        Expected shape::

            {
                "task_id": "task-1a2b3c4d",
                "source": {"status": "pending", "index": 0},
                "destination": {"status": "in_progress", "index": 1},
            }

        ``destination`` may be missing or ``None`` for a drop outside the
        board.
        """
        try:
            task_id = str(data["task_id"])
            source = data["source"]
            source_status = TaskStatus.parse(source["status"])
            source_index = int(source["index"])
            destination = data.get("destination")
            if destination is None:
                return cls(task_id, source_status, source_index)
            return cls(
                task_id,
                source_status,
                source_index,
                TaskStatus.parse(destination["status"]),
                int(destination["index"]),
            )
        except InvalidInputError:
            raise
        except (KeyError, TypeError, ValueError) as exc:
            raise InvalidInputError(f"Malformed drag result: {data!r}") from exc

    def rebased(self, status: TaskStatus, index: int) -> DragResult:
        """Copy of this gesture with its source moved to ``(status, index)``."""
        return replace(self, source_status=status, source_index=index)


@dataclass(frozen=True)
class DragDecision:
    """What a gesture asks the store to do."""

    outcome: DragOutcome
    task_id: str
    target_status: TaskStatus | None = None

    @property
    def mutates(self) -> bool:
        return self.outcome is DragOutcome.STATUS_CHANGE


def interpret(result: DragResult) -> DragDecision:
    """Classify a gesture without looking at or changing any stored state."""
    if result.destination_status is None:
        decision = DragDecision(DragOutcome.CANCELLED, result.task_id)
    elif result.destination_status != result.source_status:
        decision = DragDecision(
            DragOutcome.STATUS_CHANGE,
            result.task_id,
            target_status=result.destination_status,
        )
    elif result.destination_index == result.source_index:
        decision = DragDecision(DragOutcome.NO_OP, result.task_id)
    else:
        decision = DragDecision(DragOutcome.REORDER, result.task_id)

    logger.debug(f"Gesture on {result.task_id} classified as {decision.outcome.value}")
    return decision


def reconcile(result: DragResult, status: TaskStatus, index: int) -> DragDecision:
    """
    Classify a gesture against where the task actually is now.

    Args:
        result: The gesture as the rendering layer reported it
        status: Column the task is currently in
        index: Position of the task in that column

    A cross-column gesture whose target column the task already occupies was
    computed from an outdated render; it has already taken effect and is a
    no-op. Any other gesture has its source moved to ``(status, index)``
    before being classified.
    """
    if (
        result.destination_status is not None
        and result.destination_status != result.source_status
        and result.destination_status == status
    ):
        logger.debug(f"Gesture on {result.task_id} already applied, ignoring")
        return DragDecision(DragOutcome.NO_OP, result.task_id)
    return interpret(result.rebased(status, index))


class MutationApplier:
    """Applies status-change decisions to a store."""

    def __init__(self, store: TaskStore) -> None:
        self._store = store

    def apply(self, decision: DragDecision) -> bool:
        """Apply a decision, returning True if the store was asked to change."""
        if not decision.mutates:
            return False
        self._store.update_task_status(decision.task_id, decision.target_status)
        return True
