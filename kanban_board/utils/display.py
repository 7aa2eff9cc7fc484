"""Console rendering of the board columns with Rich."""

from __future__ import annotations

from itertools import zip_longest

from rich.console import Console
from rich.table import Table
from rich.text import Text

from kanban_board.taskboard import Task, TaskPriority, TaskStatus
from kanban_board.taskboard.projection import Columns

COLUMN_TITLES: dict[TaskStatus, str] = {
    TaskStatus.PENDING: "To Do",
    TaskStatus.IN_PROGRESS: "In Progress",
    TaskStatus.COMPLETED: "Completed",
}

PRIORITY_STYLES: dict[TaskPriority, str] = {
    TaskPriority.LOW: "green",
    TaskPriority.MEDIUM: "yellow",
    TaskPriority.HIGH: "bold red",
}


def render_task(task: Task) -> Text:
    """Render one card: title, then priority and due date on a second line."""
    card = Text(task.title, style="bold")
    card.append("\n")
    card.append(task.priority.value, style=PRIORITY_STYLES[task.priority])
    if task.due_date is not None:
        card.append(f"  due {task.due_date.isoformat()}", style="dim")
    return card


def render_board(columns: Columns, console: Console | None = None) -> Table:
    """
    Build a table with one column per status.

    Args:
        columns: Column projection to render
        console: If given, the table is also printed to it

    Returns:
        The Rich table
    """
    table = Table(title="Kanban Board", show_lines=True, expand=True)
    for status in TaskStatus:
        count = len(columns.get(status, []))
        table.add_column(f"{COLUMN_TITLES[status]} ({count})", ratio=1)

    ordered = [columns.get(status, []) for status in TaskStatus]
    for row in zip_longest(*ordered):
        table.add_row(*(render_task(task) if task else Text("") for task in row))

    if console is not None:
        console.print(table)
    return table
