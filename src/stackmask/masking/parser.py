"""Masking of parse failure diagnostics.

Parse failures happen before any transformation, so their columns already
refer to the original source and no column recovery is needed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from stackmask.grammar import indicator, parse_parse_header
from stackmask.masking.buffers import line_at
from stackmask.masking.scrubber import INTERNAL_PATHS, is_repl_path, scrub_stack
from stackmask.models.failure import MaskIssue
from stackmask.settings import Settings, get_settings

logger = logging.getLogger("stackmask.masking")


def mask_parser_stack(
    text: str,
    source: str,
    *,
    settings: Settings | None = None,
    internal_paths: Iterable[str] = INTERNAL_PATHS,
) -> str:
    """Expand a one-line parse failure header into a context block.

    ``SyntaxError: <desc> (<line>:<column>) while processing file: <path>``
    becomes ``<path>:<line>``, the source line, the indicator, a blank line
    and ``SyntaxError: <desc>``. Unrecognised headers are left as they are.
    """
    settings = settings or get_settings()
    lines = scrub_stack(text, internal_paths).split("\n")

    header = parse_parse_header(lines[0])
    if header is None:
        logger.debug("%s: not a parse failure header: %r", MaskIssue.GRAMMAR_MISMATCH, lines[0])
        return "\n".join(lines)

    replacement: list[str] = []
    if header.file_path is not None and not is_repl_path(header.file_path, settings.repl_marker):
        replacement.append(f"{header.file_path}:{header.line}")

    source_line = line_at(source, header.line)
    if source_line is None:
        logger.debug("%s: source has no line %s", MaskIssue.GRAMMAR_MISMATCH, header.line)
        replacement.append(header.description or lines[0])
    else:
        replacement.extend(
            [source_line, indicator(header.column or 0), "", header.description or lines[0]]
        )

    lines[0:1] = replacement
    return "\n".join(lines)
