"""Pydantic models and enums shared by the masking engine."""

from stackmask.models.failure import FailureKind, MaskIssue, failure_kind
from stackmask.models.location import Location, ParseHeader

__all__ = [
    "FailureKind",
    "Location",
    "MaskIssue",
    "ParseHeader",
    "failure_kind",
]
