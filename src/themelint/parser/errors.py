"""Parser error types."""

from __future__ import annotations


class ParseError(Exception):
    """Raised when Sass source cannot be split into statements and blocks."""

    def __init__(
        self,
        message: str,
        file: str | None = None,
        line: int | None = None,
        column: int | None = None,
    ):
        self.file = file
        self.line = line
        self.column = column
        super().__init__(message)

    @property
    def location(self) -> str:
        parts = [self.file or "<input>"]
        if self.line is not None:
            parts.append(str(self.line))
            if self.column is not None:
                parts.append(str(self.column))
        return ":".join(parts)
