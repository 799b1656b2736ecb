"""Masking of runtime failure diagnostics.

Runtime diagnostics point at the compiled text. The context line is swapped
for the original source line and the column indicator is moved with
:func:`~stackmask.masking.column.recover_column`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from stackmask.grammar import (
    has_line_number,
    indicator,
    is_indicator,
    parse_frame,
    parse_header_location,
    replace_trailing_column,
)
from stackmask.masking.buffers import line_at
from stackmask.masking.column import recover_column
from stackmask.masking.scrubber import INTERNAL_PATHS, drop_repl_header, scrub_stack
from stackmask.models.failure import MaskIssue
from stackmask.settings import Settings, get_settings

logger = logging.getLogger("stackmask.masking")

# Decorated layout: header, code line, indicator, blank, message, first frame
_CODE_INDEX = 1
_INDICATOR_INDEX = 2
_FIRST_FRAME_INDEX = 5


def mask_stack(
    text: str,
    source: str,
    compiled: str | None = None,
    *,
    settings: Settings | None = None,
    internal_paths: Iterable[str] = INTERNAL_PATHS,
) -> str:
    """Point a runtime diagnostic at ``source`` instead of ``compiled``.

    When the header carries no ``path:line`` and ``compiled`` is given, the
    context block is first synthesised from the first frame. Text without a
    usable location is returned scrubbed but otherwise unchanged.
    """
    settings = settings or get_settings()
    lines = scrub_stack(text, internal_paths).split("\n")

    if compiled is not None and not has_line_number(lines[0]):
        _fill_stack_lines(lines, compiled)

    _mask_stack_lines(lines, source, settings)
    drop_repl_header(lines, settings.repl_marker)
    return "\n".join(lines)


def _fill_stack_lines(lines: list[str], compiled: str) -> None:
    """Prepend ``path:line``, the compiled line and an indicator from the first frame."""
    location = parse_frame(lines[1]) if len(lines) > 1 else None
    if location is None or not location.file_path:
        logger.debug("%s: no frame location to fill the header from", MaskIssue.GRAMMAR_MISMATCH)
        return

    code = line_at(compiled, location.line)
    if code is None:
        logger.debug(
            "%s: compiled text has no line %d", MaskIssue.GRAMMAR_MISMATCH, location.line
        )
        return

    # Frame columns are 1-based.
    lines[0:0] = [location.header, code, indicator(location.column - 1), ""]


def _mask_stack_lines(lines: list[str], source: str, settings: Settings) -> None:
    location = parse_header_location(lines[0])
    if location is None or len(lines) <= _CODE_INDEX:
        logger.debug("%s: header has no location", MaskIssue.GRAMMAR_MISMATCH)
        return

    source_line = line_at(source, location.line)
    if source_line is None:
        logger.debug("%s: source has no line %d", MaskIssue.GRAMMAR_MISMATCH, location.line)
        return

    generated_line = lines[_CODE_INDEX]
    lines[_CODE_INDEX] = source_line

    if len(lines) > _INDICATOR_INDEX and is_indicator(lines[_INDICATOR_INDEX]):
        column = lines[_INDICATOR_INDEX].index("^")
        new_column = recover_column(
            generated_line,
            column,
            source_line,
            max_clip=settings.max_clip_length,
            min_clip=settings.min_clip_length,
        )
        if new_column is None:
            logger.debug(
                "%s: no match for column %d of %r", MaskIssue.RECOVERY_MISS, column, generated_line
            )
            del lines[_INDICATOR_INDEX]
        elif new_column < column:
            lines[_INDICATOR_INDEX] = indicator(new_column)
            if len(lines) > _FIRST_FRAME_INDEX and parse_frame(lines[_FIRST_FRAME_INDEX]):
                lines[_FIRST_FRAME_INDEX] = replace_trailing_column(
                    lines[_FIRST_FRAME_INDEX], new_column + 1
                )
