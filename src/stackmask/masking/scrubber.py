"""Removal of the engine's own frames and of interactive-session headers."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from stackmask.grammar import parse_frame, parse_header_location

# Frames from files under the stackmask package are hidden from users.
INTERNAL_PATHS: tuple[str, ...] = (str(Path(__file__).resolve().parent.parent),)


def is_internal_path(path: str | None, internal_paths: Iterable[str] = INTERNAL_PATHS) -> bool:
    if not path:
        return False
    for internal in internal_paths:
        if path == internal or path.startswith(internal.rstrip(os.sep) + os.sep):
            return True
    return False


def scrub_stack(text: str, internal_paths: Iterable[str] = INTERNAL_PATHS) -> str:
    """Drop every frame line that points into one of ``internal_paths``."""
    internal_paths = tuple(internal_paths)
    kept = []
    for line in text.split("\n"):
        location = parse_frame(line)
        if location is not None and is_internal_path(location.file_path, internal_paths):
            continue
        kept.append(line)
    return "\n".join(kept)


def is_repl_path(path: str | None, marker: str) -> bool:
    return path is not None and path == marker


def drop_repl_header(lines: list[str], marker: str) -> bool:
    """Remove a leading ``<marker>:<line>`` header in place.

    Returns True when a line was removed.
    """
    if not lines:
        return False
    location = parse_header_location(lines[0])
    if location is None or not is_repl_path(location.file_path, marker):
        return False
    del lines[0]
    return True
