from __future__ import annotations

from dataclasses import dataclass


_MAX_LINE = 2**32


@dataclass(frozen=True, slots=True, order=True)
class LineNumber:
    """A zero-indexed line number.

    Kept distinct from ``int`` so a line can't be mixed up with a byte offset
    or a column. Use ``display()`` for messages and ``as_index()`` to index
    into your own list of lines.
    """

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value < _MAX_LINE:
            raise ValueError(f"line number out of range: {self.value}")

    def display(self) -> str:
        return str(self.value + 1)

    def as_index(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"LineNumber({self.display()}, zero-indexed: {self.value})"


@dataclass(frozen=True, slots=True, order=True)
class SingleLineSpan:
    """Columns [start_col, end_col] on a single line.

    Columns are byte offsets from the start of the line, all zero-indexed.
    """

    line: LineNumber
    start_col: int
    end_col: int

    def __post_init__(self) -> None:
        if not 0 <= self.start_col <= self.end_col:
            raise ValueError(f"invalid span columns: {self.start_col}..{self.end_col}")

    @property
    def width(self) -> int:
        return self.end_col - self.start_col

    def format(self) -> str:
        return f"{self.line.display()}:{self.start_col + 1}"
