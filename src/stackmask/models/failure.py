"""Failure kinds and the masking issue taxonomy."""

from __future__ import annotations

from enum import StrEnum


class FailureKind(StrEnum):
    PARSE = "parse"
    RUNTIME = "runtime"


class MaskIssue(StrEnum):
    """Non-fatal problems absorbed while masking a diagnostic."""

    GRAMMAR_MISMATCH = "grammar_mismatch"
    RECOVERY_MISS = "recovery_miss"
    CAPABILITY_UNAVAILABLE = "capability_unavailable"


def failure_kind(error: BaseException) -> FailureKind:
    """Classify a failure as a parse or runtime failure.

    An explicit ``kind`` attribute wins; otherwise ``SyntaxError`` and its
    subclasses are parse failures.
    """
    kind = getattr(error, "kind", None)
    if isinstance(kind, FailureKind):
        return kind
    if isinstance(error, SyntaxError):
        return FailureKind.PARSE
    return FailureKind.RUNTIME
