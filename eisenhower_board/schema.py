"""Core data schema for the Eisenhower board."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class Task:
    """A single task card; immutable after creation."""

    id: int
    content: str


@dataclass(frozen=True)
class Quadrant:
    """Matrix quadrant metadata shown above each bucket."""

    label: str
    action: str
    hint: str


QUADRANTS: tuple[Quadrant, ...] = (
    Quadrant("Important & Urgent", "DO", "Do these tasks immediately."),
    Quadrant("Important & Not Urgent", "DECIDE", "Schedule a time to do these tasks."),
    Quadrant("Unimportant & Urgent", "DELEGATE", "Delegate these tasks to someone else."),
    Quadrant("Unimportant & Not Urgent", "DELETE", "Eliminate these tasks if possible."),
)

BUCKET_LABELS: tuple[str, ...] = tuple(q.label for q in QUADRANTS)
DEFAULT_BUCKET = "Unimportant & Not Urgent"

_ALIASES = {}
for _index, _quadrant in enumerate(QUADRANTS, start=1):
    _ALIASES[_quadrant.label.lower()] = _quadrant.label
    _ALIASES[_quadrant.action.lower()] = _quadrant.label
    _ALIASES[f"q{_index}"] = _quadrant.label


def resolve_label(name: str) -> str:
    """Map a label, action name (do/decide/...) or q1..q4 onto a bucket label."""

    key = str(name).strip().lower()
    if key not in _ALIASES:
        raise ValueError(f"Unknown quadrant '{name}'")
    return _ALIASES[key]


def quadrant_for(label: str) -> Quadrant:
    for quadrant in QUADRANTS:
        if quadrant.label == label:
            return quadrant
    raise ValueError(f"Unknown quadrant '{label}'")


def _empty_buckets() -> Mapping[str, tuple[Task, ...]]:
    return MappingProxyType({label: () for label in BUCKET_LABELS})


@dataclass(frozen=True)
class BoardState:
    """Session state: every task ever created plus its current bucket placement."""

    tasks: tuple[Task, ...] = ()
    buckets: Mapping[str, tuple[Task, ...]] = field(default_factory=_empty_buckets)
