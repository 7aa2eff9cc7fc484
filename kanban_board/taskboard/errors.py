"""Exceptions raised by the task board."""

from __future__ import annotations


class TaskBoardError(Exception):
    """Base class for task board errors."""


class TaskNotFoundError(TaskBoardError, KeyError):
    """Raised when a task id does not exist in the store."""

    def __init__(self, task_id: str) -> None:
        super().__init__(task_id)
        self.task_id = task_id

    def __str__(self) -> str:
        return f"Task '{self.task_id}' not found"


class InvalidInputError(TaskBoardError, ValueError):
    """Raised when task or gesture input is rejected."""
