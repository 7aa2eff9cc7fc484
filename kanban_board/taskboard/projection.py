"""Column projection: the tasks of each status column, derived from the store."""

from __future__ import annotations

from collections.abc import Iterable

from .errors import TaskNotFoundError
from .manager import Task, TaskStatus, TaskStore

Columns = dict[TaskStatus, list[Task]]


def project_columns(tasks: Iterable[Task]) -> Columns:
    """Split tasks into one list per status, keeping their relative order."""
    columns: Columns = {status: [] for status in TaskStatus}
    for task in tasks:
        columns[task.status].append(task)
    return columns


class ColumnProjection:
    """
    Read-only view of the board columns.

    Every read rebuilds the columns from a fresh store snapshot, so the view
    can never lag behind a mutation, whichever subscriber happens to read it.
    """

    def __init__(self, store: TaskStore) -> None:
        self._store = store

    @property
    def columns(self) -> Columns:
        return project_columns(self._store.get_all_tasks())

    def tasks_in(self, status: TaskStatus | str) -> list[Task]:
        return self.columns[TaskStatus.parse(status)]

    def index_of(self, task_id: str) -> tuple[TaskStatus, int]:
        """Locate a task as (column, position within the column)."""
        for status, tasks in self.columns.items():
            for index, task in enumerate(tasks):
                if task.id == task_id:
                    return status, index
        raise TaskNotFoundError(task_id)
