import argparse
from pathlib import Path

from loguru import logger
from rich.console import Console

from kanban_board.taskboard import DragResult, KanbanBoard, TaskDraft, TaskStatus
from kanban_board.utils.display import render_board
from kanban_board.utils.logging import setup_logger


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments for the board demo."""
    parser = argparse.ArgumentParser(description="Render a sample kanban board")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g., INFO, DEBUG)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write logs to this file",
    )
    parser.add_argument(
        "--plain-logs",
        action="store_true",
        help="Use plain colorized log lines instead of the Rich handler",
    )
    parser.add_argument(
        "--no-demo-gestures",
        action="store_true",
        help="Only render the seeded board, without replaying gestures",
    )
    return parser.parse_args()


def main():
    args = parse_args()
    setup_logger(level=args.log_level, log_file=args.log_file, use_rich=not args.plain_logs)
    console = Console()

    board = KanbanBoard()
    first = board.store.add_task(TaskDraft("Write project brief"))
    board.store.add_task(TaskDraft("Collect requirements"))
    board.store.add_task(TaskDraft("Design data model"), TaskStatus.IN_PROGRESS)
    render_board(board.columns, console)

    if not args.no_demo_gestures:
        gesture = DragResult(first.id, TaskStatus.PENDING, 0, TaskStatus.IN_PROGRESS, 1)
        for _ in range(2):
            decision = board.handle_drag_end(gesture)
            logger.info(f"Gesture outcome: {decision.outcome.value}")
        render_board(board.columns, console)

    logger.info(f"Board summary: {board.summary()['by_status']}")


if __name__ == "__main__":
    main()
