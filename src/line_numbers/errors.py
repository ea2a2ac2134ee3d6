from __future__ import annotations

from dataclasses import dataclass

from .spans import LineNumber


class LineIndexError(ValueError):
    """Base class for invalid queries against a line index."""


@dataclass(slots=True)
class OffsetOutOfBounds(LineIndexError):
    offset: int
    bound: int

    def __str__(self) -> str:
        return f"offset {self.offset} is out of bounds (valid offsets: 0..={self.bound})"


@dataclass(slots=True)
class InvalidRegion(LineIndexError):
    start: int
    end: int

    def __str__(self) -> str:
        return f"invalid region: start {self.start} is after end {self.end}"


@dataclass(slots=True)
class LineOutOfBounds(LineIndexError):
    line: LineNumber
    max_line: LineNumber

    def __str__(self) -> str:
        return f"line {self.line.display()} is out of bounds (last line is {self.max_line.display()})"


@dataclass(slots=True)
class InvariantViolation(AssertionError):
    """No line contains an in-bounds offset. This is a bug in the index."""

    offset: int

    def __str__(self) -> str:
        return f"no line contains offset {self.offset}; line positions are not contiguous"
