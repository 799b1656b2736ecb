"""Relocation of a column from a generated line onto the original line."""

from __future__ import annotations

DEFAULT_MAX_CLIP = 6
DEFAULT_MIN_CLIP = 2


def recover_column(
    generated_line: str,
    column: int,
    original_line: str,
    max_clip: int = DEFAULT_MAX_CLIP,
    min_clip: int = DEFAULT_MIN_CLIP,
) -> int | None:
    """Find where the code at ``column`` of the generated line sits in the original.

    Clips of the generated line starting at ``column`` are matched against
    the original line, longest first. Clips are cut short at the end of the
    generated line. Each clip is looked up at or before ``column``, nearest
    first. Returns ``None`` when no clip matches.
    """
    if column < 0 or column >= len(generated_line):
        return None

    tried: set[str] = set()
    for length in range(max_clip, min_clip - 1, -1):
        clip = generated_line[column : column + length]
        if clip in tried:
            continue
        tried.add(clip)
        index = original_line.rfind(clip, 0, column + len(clip))
        if index > -1:
            return index
    return None
