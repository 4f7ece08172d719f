"""Error hierarchy for minimalcss."""

from __future__ import annotations


class MinimalCSSError(Exception):
    """Base error for all minimalcss errors."""


class StyleParseError(MinimalCSSError):
    """Raised when stylesheet source cannot be parsed into a rule tree."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)

    def __str__(self) -> str:
        message = super().__str__()
        if self.line is None:
            return message
        return f"{message} (line {self.line}, column {self.column})"


class SelectorSyntaxError(MinimalCSSError):
    """Raised when the selector engine rejects a selector segment.

    Attributes:
        selector: The full selector the segment came from.
        segment: The reduced segment that was actually queried.
    """

    def __init__(self, message: str, *, selector: str = "", segment: str = "") -> None:
        self.selector = selector
        self.segment = segment
        super().__init__(message)
