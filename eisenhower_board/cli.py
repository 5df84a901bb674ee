"""Sort a task list into the Eisenhower matrix from the command line."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from eisenhower_board.adapters import csv_adapter, json_adapter, text_adapter
from eisenhower_board.schema import BUCKET_LABELS, resolve_label
from eisenhower_board.session import BoardSession
from eisenhower_board.summary import summarize

logger = logging.getLogger(__name__)


def _load_text(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse(str(path))
    if suffix == ".json":
        return json_adapter.parse(str(path))
    return text_adapter.parse(str(path))


def _parse_move(value: str) -> tuple[str, str]:
    task_id, sep, quadrant = value.partition("=")
    if not sep or not task_id.strip():
        raise ValueError(f"Invalid move '{value}', expected ID=QUADRANT")
    return task_id.strip(), resolve_label(quadrant)


def _report(session: BoardSession) -> dict:
    state = session.state
    return {
        "tasks": [{"id": task.id, "content": task.content} for task in state.tasks],
        "buckets": {label: [task.id for task in state.buckets[label]] for label in BUCKET_LABELS},
        "stats": summarize(state.buckets),
        "summary": session.summary,
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Organize tasks with the Eisenhower matrix")
    parser.add_argument("--tasks", required=True, help="Path to a .txt/.csv/.json task list, or '-' for stdin")
    parser.add_argument(
        "--move",
        action="append",
        default=[],
        metavar="ID=QUADRANT",
        help="Move a task; QUADRANT is do/decide/delegate/delete, q1..q4 or a full label",
    )
    parser.add_argument("--json", action="store_true", help="Print the board as JSON instead of the summary")
    parser.add_argument("--copy", action="store_true", help="Copy the summary to the system clipboard")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    session = BoardSession()
    try:
        session.submit(_load_text(args.tasks))
        for value in args.move:
            task_id, label = _parse_move(value)
            if not session.drop(task_id, label):
                logger.warning("No task with id %s; move ignored", task_id)
    except (ValueError, OSError) as exc:
        parser.error(str(exc))

    if args.json:
        print(json.dumps(_report(session), indent=2))
    else:
        print(session.summary)

    if args.copy:
        if session.copy():
            print("Organized tasks copied to clipboard!", file=sys.stderr)
        else:
            print("Failed to copy to clipboard.", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
