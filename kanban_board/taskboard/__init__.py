"""Kanban task board: task store, column projection and gesture handling."""

from .board import KanbanBoard
from .creation import TaskCreationFlow, TaskForm
from .errors import InvalidInputError, TaskBoardError, TaskNotFoundError
from .gestures import (
    DragDecision,
    DragOutcome,
    DragResult,
    MutationApplier,
    interpret,
    reconcile,
)
from .manager import Task, TaskDraft, TaskPriority, TaskStatus, TaskStore
from .projection import ColumnProjection, project_columns

__all__ = [
    "ColumnProjection",
    "DragDecision",
    "DragOutcome",
    "DragResult",
    "InvalidInputError",
    "KanbanBoard",
    "MutationApplier",
    "Task",
    "TaskBoardError",
    "TaskCreationFlow",
    "TaskDraft",
    "TaskForm",
    "TaskNotFoundError",
    "TaskPriority",
    "TaskStatus",
    "TaskStore",
    "interpret",
    "project_columns",
    "reconcile",
]
