"""Access to the source and compiled text buffers."""

from __future__ import annotations

from collections.abc import Callable

SourceProducer = Callable[[], str]


def resolve_source(source: str | SourceProducer) -> str:
    """Return the source text, calling ``source`` if it is a producer."""
    return source() if callable(source) else source


def line_at(buffer: str, line: int | None) -> str | None:
    """Return the 1-based ``line`` of ``buffer``, or ``None`` when out of range."""
    if line is None or line < 1:
        return None
    lines = buffer.split("\n")
    if line > len(lines):
        return None
    return lines[line - 1].rstrip("\r")
