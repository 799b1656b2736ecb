"""Location models parsed out of diagnostic text."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Location(BaseModel):
    """Points to a line/column inside a file named by a diagnostic frame."""

    file_path: str | None = None
    line: int = Field(ge=1)
    column: int = Field(default=0, ge=0)

    def __str__(self) -> str:
        return f"{self.file_path}:{self.line}:{self.column}"

    @property
    def header(self) -> str:
        """The ``path:line`` form used as the first line of masked text."""
        return f"{self.file_path}:{self.line}"


class ParseHeader(BaseModel):
    """Pieces of a one-line parse-failure message.

    ``description`` keeps the ``<Kind>: `` prefix so it can be restated as-is.
    """

    description: str | None = None
    line: int | None = None
    column: int | None = None
    file_path: str | None = None
