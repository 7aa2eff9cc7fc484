"""Kanban board: store, columns, gestures and creation wired together."""

from __future__ import annotations

import threading
from collections.abc import Mapping
from typing import Any

from loguru import logger

from .creation import TaskCreationFlow, TaskForm
from .errors import TaskNotFoundError
from .gestures import DragDecision, DragResult, MutationApplier, interpret, reconcile
from .manager import TaskStatus, TaskStore
from .projection import ColumnProjection, Columns


class KanbanBoard:
    """
    Entry point for the rendering layer.

    Gestures are handled one at a time. Each gesture is checked against the
    store as it is when the gesture is processed: its source is replaced by
    the task's current column and position before it is classified, so a
    gesture computed from an outdated render cannot move a task twice.
    A subscriber may react to a move by sending another gesture; it is
    handled once the current mutation has been applied.
    """

    def __init__(self, store: TaskStore | None = None) -> None:
        self.store = store if store is not None else TaskStore()
        self.projection = ColumnProjection(self.store)
        self._applier = MutationApplier(self.store)
        self._creation = TaskCreationFlow(self.store)
        self._gesture_lock = threading.RLock()

    @property
    def columns(self) -> Columns:
        return self.projection.columns

    def handle_drag_end(self, result: DragResult | Mapping[str, Any]) -> DragDecision:
        """
        Process one finished drag gesture.

        Args:
            result: The gesture, or its payload as sent by the rendering layer

        Returns:
            The decision taken for the gesture

        Raises:
            TaskNotFoundError: If the dragged task is not on the board; the
                gesture is discarded and nothing changes
        """
        if not isinstance(result, DragResult):
            result = DragResult.from_dict(result)

        with self._gesture_lock:
            if result.destination_status is None:
                return interpret(result)

            if self.store.get_task(result.task_id) is None:
                logger.warning(f"Discarded gesture for unknown task {result.task_id}")
                raise TaskNotFoundError(result.task_id)

            status, index = self.projection.index_of(result.task_id)
            decision = reconcile(result, status, index)
            self._applier.apply(decision)
            return decision

    def open_task_form(self, status: TaskStatus | str = TaskStatus.PENDING) -> TaskForm:
        """Open a creation form for the column whose add button was pressed."""
        return self._creation.open(status)

    def summary(self) -> dict[str, Any]:
        return self.store.get_summary()
