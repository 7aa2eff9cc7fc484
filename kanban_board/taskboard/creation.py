"""Task creation form flow."""

from __future__ import annotations

from .manager import Task, TaskDraft, TaskStatus, TaskStore


class TaskForm:
    """
    A single open creation form.

    The form remembers which column it was opened from; a submitted task
    starts in that column. A rejected submission leaves the form open so the
    caller can correct the input and submit again.
    """

    def __init__(self, store: TaskStore, status: TaskStatus) -> None:
        self._store = store
        self.status = status
        self._open = True

    @property
    def is_open(self) -> bool:
        return self._open

    def submit(self, draft: TaskDraft) -> Task:
        """Create the task and close the form."""
        if not self._open:
            raise RuntimeError("Task form is not open")
        task = self._store.add_task(draft, self.status)
        self._open = False
        return task

    def cancel(self) -> None:
        """Close the form without creating anything."""
        self._open = False


class TaskCreationFlow:
    """Opens creation forms against a store."""

    def __init__(self, store: TaskStore) -> None:
        self._store = store

    def open(self, status: TaskStatus | str = TaskStatus.PENDING) -> TaskForm:
        """Open a form whose task will start in ``status``."""
        return TaskForm(self._store, TaskStatus.parse(status))
