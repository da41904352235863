"""Simple list records returned by directory searches, with lookup helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass(frozen=True)
class ListEntry:
    """One list item: a numeric type tag and its text data."""

    type: int
    data: str


def get_string(entries: Iterable[ListEntry], sep: str) -> str:
    """Join the data of every entry, each followed by ``sep``."""
    return "".join(entry.data + sep for entry in entries)


def find_value(entries: Sequence[ListEntry], pos: int) -> str:
    """Return the data of the entry at ``pos``."""
    return entries[pos].data


def find_pos(entries: Iterable[ListEntry], value: str) -> int:
    """Return the index of the first entry whose data equals ``value``, or -1."""
    return next(
        (index for index, entry in enumerate(entries) if entry.data == value),
        -1,
    )