"""Scripted walk-through of the board: creation, drops, reorders and moves."""

from datetime import date, timedelta

from loguru import logger
from rich.console import Console

from kanban_board.taskboard import (
    DragResult,
    InvalidInputError,
    KanbanBoard,
    TaskDraft,
    TaskPriority,
    TaskStatus,
)
from kanban_board.utils.display import render_board
from kanban_board.utils.logging import setup_logger


def main():
    """Run the walk-through and render the board after each step."""
    setup_logger(level="DEBUG", use_rich=True)
    console = Console()
    board = KanbanBoard()

    # Re-render whenever the store changes, like a UI would
    board.store.subscribe(lambda: render_board(board.columns, console))

    today = date.today()
    form = board.open_task_form()
    try:
        form.submit(TaskDraft(""))
    except InvalidInputError as exc:
        logger.warning(f"Form rejected: {exc}")
    review = form.submit(
        TaskDraft("Review pull request", priority=TaskPriority.HIGH, due_date=today)
    )

    board.open_task_form(TaskStatus.IN_PROGRESS).submit(
        TaskDraft.from_dict({"title": "Update docs", "due_date": str(today + timedelta(days=3))})
    )
    board.open_task_form().submit(TaskDraft("Plan sprint", priority=TaskPriority.LOW))
    board.open_task_form().cancel()

    logger.info("Dropping a card outside the board")
    board.handle_drag_end(DragResult(review.id, TaskStatus.PENDING, 0))

    logger.info("Reordering inside 'To Do'")
    board.handle_drag_end(DragResult(review.id, TaskStatus.PENDING, 0, TaskStatus.PENDING, 1))

    logger.info("Moving the review through the board")
    board.handle_drag_end(
        {
            "task_id": review.id,
            "source": {"status": "pending", "index": 0},
            "destination": {"status": "in_progress", "index": 0},
        }
    )
    board.handle_drag_end(
        DragResult(review.id, TaskStatus.IN_PROGRESS, 1, TaskStatus.COMPLETED, 0)
    )

    logger.success(f"Final summary: {board.summary()['by_status']}")


if __name__ == "__main__":
    main()
