from __future__ import annotations

from .errors import InvalidRegion, InvariantViolation, LineIndexError, LineOutOfBounds, OffsetOutOfBounds
from .index import LineIndex
from .spans import LineNumber, SingleLineSpan

__all__ = [
    "InvalidRegion",
    "InvariantViolation",
    "LineIndex",
    "LineIndexError",
    "LineNumber",
    "LineOutOfBounds",
    "OffsetOutOfBounds",
    "SingleLineSpan",
]
