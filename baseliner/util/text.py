"""Text utility helpers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def iter_lines(value: str) -> Iterator[tuple[int, str]]:
    """Yield ``(offset, line)`` pairs, splitting on ``\\n`` and ``\\r\\n``."""
    offset = 0
    for raw in value.split("\n"):
        line = raw[:-1] if raw.endswith("\r") else raw
        yield offset, line
        offset += len(raw) + 1


def normalize_names(values: Iterable[object] | None) -> list[str]:
    """Trim and lower-case names, dropping blanks and duplicates."""
    if not values:
        return []
    output: list[str] = []
    seen: set[str] = set()
    for value in values:
        name = str(value or "").strip().lower()
        if not name or name in seen:
            continue
        seen.add(name)
        output.append(name)
    return output


def ellipsize(value: str, width: int) -> str:
    """Shorten long strings while preserving suffix visibility."""
    if width <= 0:
        return ""
    if len(value) <= width:
        return value
    if width <= 1:
        return "…"
    return f"{value[: width - 1]}…"
