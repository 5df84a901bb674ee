"""Plain-text rendering of the bucket assignment."""

from __future__ import annotations

from typing import Mapping, Sequence

from eisenhower_board.schema import BUCKET_LABELS, Task


def render(buckets: Mapping[str, Sequence[Task]]) -> str:
    """Render every bucket as ``"<label>:\\n<one task per line>"``, blocks separated by a blank line."""

    blocks = []
    for label in BUCKET_LABELS:
        body = "\n".join(task.content for task in buckets.get(label, ()))
        blocks.append(f"{label}:\n{body}")
    return "\n\n".join(blocks)


def summarize(buckets: Mapping[str, Sequence[Task]]) -> dict:
    """Count tasks per bucket."""

    counts = {label: len(buckets.get(label, ())) for label in BUCKET_LABELS}
    return {"counts": counts, "total_tasks": sum(counts.values())}
