"""Helpers for application/x-www-form-urlencoded request bodies."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any
from urllib.parse import urlencode


def format_key(parts: Sequence[str]) -> str:
    """Join key parts into the bracketed form key the API expects.

    ``["owner", "address", "city"]`` becomes ``owner[address][city]``.
    """
    if not parts:
        return ""
    head, *tail = parts
    return head + "".join(f"[{part}]" for part in tail)


def format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class FormValues:
    """Ordered multi-valued form body."""

    def __init__(self) -> None:
        self._pairs: list[tuple[str, str]] = []

    def add(self, key: str, value: Any) -> None:
        """Append a key/value pair."""
        self._pairs.append((key, format_value(value)))

    def get(self, key: str) -> list[str]:
        """Return every value recorded for ``key``."""
        return [value for name, value in self._pairs if name == key]

    def to_list(self) -> list[tuple[str, str]]:
        return list(self._pairs)

    def to_dict(self) -> dict[str, str]:
        """Return the pairs as a dict; later duplicates win."""
        return dict(self._pairs)

    def encode(self) -> str:
        """Return the url-encoded request body."""
        return urlencode(self._pairs)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __bool__(self) -> bool:
        return bool(self._pairs)
