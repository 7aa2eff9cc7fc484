"""Core task management for the kanban board."""

from __future__ import annotations

import threading
import uuid
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any

from loguru import logger

from .errors import InvalidInputError, TaskNotFoundError

Subscriber = Callable[[], None]


class TaskStatus(str, Enum):
    """Status of a task. Each value is one board column."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, value: TaskStatus | str) -> TaskStatus:
        """Coerce a raw bucket id into a status, rejecting unknown values."""
        try:
            return cls(value)
        except ValueError as exc:
            valid = ", ".join(status.value for status in cls)
            raise InvalidInputError(
                f"Unknown status '{value}'. Valid statuses: {valid}."
            ) from exc


class TaskPriority(str, Enum):
    """Display priority of a task."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def _generate_id() -> str:
    return f"task-{uuid.uuid4().hex[:8]}"


def _parse_due_date(value: Any) -> date | None:
    if value is None or value == "":
        return None
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value))
    except ValueError as exc:
        raise InvalidInputError(f"Invalid due date '{value}'") from exc


@dataclass
class TaskDraft:
    """Field values collected for a task that does not exist yet."""

    title: str
    description: str = ""
    priority: TaskPriority = TaskPriority.MEDIUM
    due_date: date | None = None
    created_by: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TaskDraft:
        """Build a draft from raw form values (strings for enums and dates)."""
        raw_priority = data.get("priority") or TaskPriority.MEDIUM
        try:
            priority = TaskPriority(raw_priority)
        except ValueError as exc:
            raise InvalidInputError(f"Unknown priority '{raw_priority}'") from exc

        return cls(
            title=str(data.get("title") or ""),
            description=str(data.get("description") or ""),
            priority=priority,
            due_date=_parse_due_date(data.get("due_date")),
            created_by=data.get("created_by"),
        )


@dataclass
class Task:
    """Represents a single task on the board."""

    id: str
    title: str
    description: str = ""
    status: TaskStatus = TaskStatus.PENDING
    priority: TaskPriority = TaskPriority.MEDIUM
    due_date: date | None = None
    created_by: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert task to dictionary for serialization."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "status": self.status.value,
            "priority": self.priority.value,
            "due_date": self.due_date.isoformat() if self.due_date else None,
            "created_by": self.created_by,
        }


class TaskStore:
    """
    Thread-safe store holding every task on the board.

    Tasks are kept in insertion order; that order is the only ordering a
    column has. Status changes go through ``update_task_status`` so that
    subscribers see every accepted mutation.
    """

    def __init__(self) -> None:
        """Initialize an empty store."""
        self._tasks: dict[str, Task] = {}
        self._task_lock = threading.Lock()
        self._subscribers: list[Subscriber] = []
        self._subscriber_lock = threading.Lock()

    def add_task(
        self,
        draft: TaskDraft,
        status: TaskStatus | str = TaskStatus.PENDING,
    ) -> Task:
        """
        Add a new task to the board.

        Args:
            draft: Field values for the new task
            status: Column the task starts in

        Returns:
            The created Task object

        Raises:
            InvalidInputError: If the title is empty or the status unknown
        """
        initial_status = TaskStatus.parse(status)
        if not draft.title or not draft.title.strip():
            logger.warning("Rejected task creation: empty title")
            raise InvalidInputError("Task title must not be empty")

        with self._task_lock:
            task_id = _generate_id()
            while task_id in self._tasks:
                task_id = _generate_id()
            task = Task(
                id=task_id,
                title=draft.title,
                description=draft.description,
                status=initial_status,
                priority=draft.priority,
                due_date=draft.due_date,
                created_by=draft.created_by,
            )
            self._tasks[task_id] = task

        logger.info(f"Created task {task.id} '{task.title}' in {initial_status.value}")
        self._notify_subscribers()
        return task

    def update_task_status(self, task_id: str, status: TaskStatus | str) -> None:
        """
        Move a task to another column.

        Setting the status a task already has is accepted and changes nothing.

        Raises:
            TaskNotFoundError: If no task has this id
        """
        new_status = TaskStatus.parse(status)
        with self._task_lock:
            task = self._tasks.get(task_id)
            if task is None:
                raise TaskNotFoundError(task_id)
            previous = task.status
            task.status = new_status

        if previous == new_status:
            return
        logger.info(f"Task {task_id} moved {previous.value} -> {new_status.value}")
        self._notify_subscribers()

    def tasks_by_status(self, status: TaskStatus | str) -> list[Task]:
        """Get the tasks of one column in insertion order."""
        wanted = TaskStatus.parse(status)
        with self._task_lock:
            return [task for task in self._tasks.values() if task.status == wanted]

    def clear_all(self) -> None:
        """Clear all tasks from the board."""
        with self._task_lock:
            self._tasks.clear()
        self._notify_subscribers()

    def get_task(self, task_id: str) -> Task | None:
        """Get a specific task by ID."""
        with self._task_lock:
            return self._tasks.get(task_id)

    def get_all_tasks(self) -> list[Task]:
        """Get all tasks in insertion order."""
        with self._task_lock:
            return list(self._tasks.values())

    def get_summary(self) -> dict[str, Any]:
        """Get summary statistics of all tasks."""
        with self._task_lock:
            total = len(self._tasks)
            by_status = {status.value: 0 for status in TaskStatus}
            for task in self._tasks.values():
                by_status[task.status.value] += 1

            return {
                "total": total,
                "by_status": by_status,
                "tasks": [task.to_dict() for task in self._tasks.values()],
            }

    def subscribe(self, callback: Subscriber) -> None:
        """
        Subscribe to task updates.

        Args:
            callback: Function to call after every accepted mutation
        """
        with self._subscriber_lock:
            self._subscribers.append(callback)

    def unsubscribe(self, callback: Subscriber) -> None:
        """
        Unsubscribe from task updates.

        Args:
            callback: Function to remove from subscribers
        """
        with self._subscriber_lock:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

    def _notify_subscribers(self) -> None:
        """Notify all subscribers of task updates.

        Runs outside the task lock so callbacks may read the store.
        """
        with self._subscriber_lock:
            subscribers = self._subscribers.copy()

        for callback in subscribers:
            try:
                callback()
            except Exception:
                logger.exception(f"Task board subscriber {callback!r} failed")
