"""Task registry and bucket assignment commands.

Every command takes a ``BoardState`` and returns a new one; states are never
mutated in place.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Union

from eisenhower_board.schema import BUCKET_LABELS, DEFAULT_BUCKET, BoardState, Task

logger = logging.getLogger(__name__)

TaskId = Union[int, str]


def new_board() -> BoardState:
    """Return an empty board with all four buckets present."""

    return BoardState()


def _freeze(buckets: Mapping[str, Iterable[Task]]) -> Mapping[str, tuple[Task, ...]]:
    return MappingProxyType({label: tuple(buckets[label]) for label in BUCKET_LABELS})


def _trim(text: str) -> str:
    """Trim whitespace and byte-order marks from both ends, as JavaScript's ``trim`` does."""

    previous = None
    while previous != text:
        previous, text = text, text.strip().strip("\ufeff")
    return text


def parse_tasks(raw_text: str, start: int = 0) -> tuple[Task, ...]:
    """Split newline-delimited text into tasks numbered from ``start + 1``."""

    lines = [line for line in map(_trim, raw_text.split("\n")) if line]
    return tuple(Task(id=start + index + 1, content=line) for index, line in enumerate(lines))


def place_default(state: BoardState, tasks: Iterable[Task]) -> BoardState:
    """Append tasks to the default bucket."""

    buckets = dict(state.buckets)
    buckets[DEFAULT_BUCKET] = buckets[DEFAULT_BUCKET] + tuple(tasks)
    return BoardState(tasks=state.tasks, buckets=_freeze(buckets))


def add_tasks(state: BoardState, raw_text: str) -> tuple[BoardState, tuple[Task, ...]]:
    """Bulk-add tasks from multi-line text and drop them into the default bucket."""

    # ids are len(registry) + offset, unique only while tasks are never removed
    created = parse_tasks(raw_text, start=len(state.tasks))
    if not created:
        return state, ()

    grown = BoardState(tasks=state.tasks + created, buckets=state.buckets)
    logger.debug("Added %d task(s), registry size %d", len(created), len(grown.tasks))
    return place_default(grown, created), created


def find_task(state: BoardState, task_id: TaskId) -> Optional[Task]:
    """Look a task up by id; drag payloads arrive as strings, so compare text forms."""

    wanted = str(task_id)
    for task in state.tasks:
        if str(task.id) == wanted:
            return task
    return None


def bucket_of(state: BoardState, task_id: TaskId) -> Optional[str]:
    task = find_task(state, task_id)
    if task is None:
        return None
    for label in BUCKET_LABELS:
        if any(t.id == task.id for t in state.buckets[label]):
            return label
    return None


def move_task(state: BoardState, task_id: TaskId, destination: str) -> tuple[BoardState, bool]:
    """Move a task to the end of ``destination``.

    Unknown ids are a silent no-op and return ``(state, False)``. A task moved
    onto its own bucket is re-appended at the end.
    """

    if destination not in BUCKET_LABELS:
        raise ValueError(f"Unknown bucket '{destination}'")

    task = find_task(state, task_id)
    if task is None:
        logger.debug("Ignoring move of unknown task id %r", task_id)
        return state, False

    buckets = {label: [t for t in state.buckets[label] if t.id != task.id] for label in BUCKET_LABELS}
    buckets[destination].append(task)
    return BoardState(tasks=state.tasks, buckets=_freeze(buckets)), True
