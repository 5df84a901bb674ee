"""JSON adapter for bulk task entry."""

from __future__ import annotations

import json

_CONTENT_KEYS = ("content", "task")


def _parse_item(item, index: int) -> str:
    if isinstance(item, str):
        return item
    if isinstance(item, dict):
        for key in _CONTENT_KEYS:
            if isinstance(item.get(key), str):
                return item[key]
        raise ValueError(f"Item {index}: missing required field 'content'")
    raise ValueError(f"Item {index}: expected a string or an object")


def parse(file_path: str) -> str:
    """Parse a JSON list of tasks into newline-delimited text."""

    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)

    if not isinstance(payload, list):
        raise ValueError("JSON payload must be a list of tasks")

    return "\n".join(_parse_item(item, i).replace("\n", " ") for i, item in enumerate(payload, start=1))
