"""Single-user board session that keeps the summary in sync with the state."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable

from eisenhower_board.board import TaskId, add_tasks, move_task, new_board
from eisenhower_board.clipboard import ClipboardWriter, copy_text, system_clipboard
from eisenhower_board.schema import BoardState, Task
from eisenhower_board.summary import render

logger = logging.getLogger(__name__)

Listener = Callable[[BoardState, str], None]


class BoardSession:
    """Holds the current board state and its rendered summary.

    Presentation layers forward gestures (bulk submit, drop, copy) here and
    may subscribe to be told about every state change.
    """

    def __init__(self, state: BoardState | None = None):
        self.state = state if state is not None else new_board()
        self.summary = render(self.state.buckets)
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _commit(self, state: BoardState) -> None:
        self.state = state
        self.summary = render(state.buckets)
        for listener in list(self._listeners):
            listener(self.state, self.summary)

    def submit(self, raw_text: str) -> tuple[Task, ...]:
        """Bulk-add tasks from a multi-line string."""

        state, created = add_tasks(self.state, raw_text)
        self._commit(state)
        logger.info("Submitted %d new task(s)", len(created))
        return created

    def drop(self, task_id: TaskId, destination: str) -> bool:
        """Place a task into ``destination``; unknown ids are ignored."""

        state, moved = move_task(self.state, task_id, destination)
        self._commit(state)
        return moved

    def reset(self) -> None:
        self._commit(new_board())

    def copy(self, writer: ClipboardWriter = system_clipboard) -> bool:
        return asyncio.run(copy_text(self.summary, writer))
