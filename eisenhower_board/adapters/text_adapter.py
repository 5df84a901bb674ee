"""Plain-text adapter: one task per line."""

from __future__ import annotations


def parse(file_path: str) -> str:
    with open(file_path, encoding="utf-8-sig") as handle:
        return handle.read()
