"""CSV adapter for bulk task entry."""

from __future__ import annotations

import csv

_CONTENT_FIELDS = ("task", "content")


def _pick_field(fieldnames: list[str]) -> str:
    lowered = {name.strip().lower(): name for name in fieldnames}
    for candidate in _CONTENT_FIELDS:
        if candidate in lowered:
            return lowered[candidate]
    return fieldnames[0]


def parse(file_path: str) -> str:
    """Read one task per row and return them as newline-delimited text."""

    with open(file_path, newline="", encoding="utf-8-sig") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            return ""

        column = _pick_field(list(reader.fieldnames))
        lines: list[str] = []
        for row_number, row in enumerate(reader, start=2):
            value = row.get(column)
            if value is None:
                raise ValueError(f"Row {row_number}: missing '{column}' value")
            lines.append(value.replace("\n", " "))
        return "\n".join(lines)
