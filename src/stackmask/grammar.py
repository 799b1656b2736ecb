"""Line grammar for diagnostic text: frame lines, parse headers, masked headers."""

from __future__ import annotations

import re
from collections.abc import Iterable
from traceback import FrameSummary

from stackmask.models.location import Location, ParseHeader

# "    at <description> (<path>:<line>:<column>)" or "    at <path>:<line>:<column>"
_FRAME_RE = re.compile(
    r"^\s+at (?:(?P<description>.*?) \()?(?P<path>.*?):(?P<line>\d+):(?P<column>\d+)\)?$"
)

# "<Kind>: <description> (<line>:<column>)[ while processing file: <path>]"
_PARSE_HEADER_RE = re.compile(
    r"^(?P<description>.+?: .+?) \((?P<line>\d+):(?P<column>\d+)\)(?:.*?: (?P<path>.+))?$"
)

# "<path>:<line>", the header of decorated text. A ": " never occurs in the path,
# which keeps "<Kind>: <message>" headers from matching.
_HEADER_LOCATION_RE = re.compile(r"^(?P<path>(?:(?!: ).)+):(?P<line>\d+)$")

_TRAILING_NUMBER_RE = re.compile(r"\d+(?=\)|$)")

_INDICATOR_RE = re.compile(r"^ *\^$")


def parse_frame(line: str) -> Location | None:
    """Extract the location of a frame line, or ``None`` if it is not one."""
    match = _FRAME_RE.match(line)
    if match is None:
        return None
    line_num = int(match["line"])
    if line_num < 1:
        return None
    return Location(
        file_path=match["path"] or None,
        line=line_num,
        column=int(match["column"]),
    )


def parse_parse_header(line: str) -> ParseHeader | None:
    """Split a one-line parse-failure message into its parts."""
    match = _PARSE_HEADER_RE.match(line)
    if match is None:
        return None
    return ParseHeader(
        description=match["description"],
        line=int(match["line"]),
        column=int(match["column"]),
        file_path=match["path"],
    )


def parse_header_location(line: str) -> Location | None:
    """Read the ``<path>:<line>`` header of decorated text.

    The header carries no column, so the location's column is 0.
    """
    match = _HEADER_LOCATION_RE.match(line)
    if match is None or int(match["line"]) < 1:
        return None
    return Location(file_path=match["path"], line=int(match["line"]))


def has_line_number(line: str) -> bool:
    return parse_header_location(line) is not None


def is_indicator(line: str) -> bool:
    """True for a column indicator line: optional spaces then a caret."""
    return _INDICATOR_RE.match(line) is not None


def indicator(column: int) -> str:
    return " " * max(column, 0) + "^"


def replace_trailing_column(line: str, column: int) -> str:
    """Rewrite the column number that closes a frame line."""
    return _TRAILING_NUMBER_RE.sub(str(column), line, count=1)


def failure_header(error: BaseException) -> str:
    """First line of the raw diagnostic text of ``error``.

    A ``SyntaxError`` that knows its line is written in the one-line parse
    failure form, with ``offset - 1`` as the column.
    """
    name = type(error).__name__
    if isinstance(error, SyntaxError) and error.lineno is not None:
        column = max((error.offset or 1) - 1, 0)
        header = f"{name}: {error.msg} ({error.lineno}:{column})"
        if error.filename:
            header += f" while processing file: {error.filename}"
        return header

    message = str(error)
    return f"{name}: {message}" if message else name


def format_frames(frames: Iterable[FrameSummary]) -> list[str]:
    """Render frames, given oldest first, as frame lines newest first."""
    lines: list[str] = []
    for frame in reversed(list(frames)):
        location = f"{frame.filename}:{frame.lineno}:{(frame.colno or 0) + 1}"
        if frame.name == "<module>":
            lines.append(f"    at {location}")
        else:
            lines.append(f"    at {frame.name} ({location})")
    return lines
