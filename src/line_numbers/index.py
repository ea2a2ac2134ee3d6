from __future__ import annotations

import logging
from dataclasses import dataclass

from .errors import InvalidRegion, InvariantViolation, LineOutOfBounds, OffsetOutOfBounds
from .spans import LineNumber, SingleLineSpan


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LineIndex:
    """Converts absolute byte offsets into line-relative positions.

    ``positions`` holds one ``(start, end)`` pair per line, where ``end`` is
    the offset of the line's newline (or the end of the buffer for the last
    line). Pairs are contiguous and ascending when built with ``from_text``;
    lookups rely on that.

    Only ``\\n`` ends a line. A ``\\r`` before it is counted as line content.
    """

    positions: tuple[tuple[int, int], ...]

    @classmethod
    def from_text(cls, text: str | bytes) -> LineIndex:
        data = text.encode("utf-8") if isinstance(text, str) else bytes(text)

        line_start = 0
        positions: list[tuple[int, int]] = []
        for line in data.split(b"\n"):
            line_end = line_start + len(line)
            positions.append((line_start, line_end))
            line_start = line_end + 1

        logger.debug("indexed %d lines over %d bytes", len(positions), len(data))
        return cls(positions=tuple(positions))

    def __len__(self) -> int:
        return len(self.positions)

    @property
    def max_offset(self) -> int:
        return self.positions[-1][1]

    def max_line(self) -> LineNumber:
        return LineNumber(len(self.positions) - 1)

    def line_bounds(self, line: LineNumber) -> tuple[int, int]:
        if line.as_index() >= len(self.positions):
            raise LineOutOfBounds(line=line, max_line=self.max_line())
        return self.positions[line.as_index()]

    def line_of(self, offset: int) -> LineNumber:
        if not 0 <= offset <= self.max_offset:
            raise OffsetOutOfBounds(offset=offset, bound=self.max_offset)

        lo, hi = 0, len(self.positions)
        while lo < hi:
            mid = (lo + hi) // 2
            line_start, line_end = self.positions[mid]
            if line_end < offset:
                lo = mid + 1
            elif line_start > offset:
                hi = mid
            else:
                return LineNumber(mid)

        raise InvariantViolation(offset=offset)

    def from_offset(self, offset: int) -> tuple[LineNumber, int]:
        """Return the line containing ``offset`` and the column within it."""
        line = self.line_of(offset)
        line_start, _ = self.positions[line.as_index()]
        return line, offset - line_start

    def from_region(self, region_start: int, region_end: int) -> list[SingleLineSpan]:
        """Split ``[region_start, region_end]`` into one span per line.

        Joining the text under each span with ``\\n`` gives back the region.
        """
        if region_start > region_end:
            raise InvalidRegion(start=region_start, end=region_end)

        first = self.line_of(region_start)
        last = self.line_of(region_end)

        spans: list[SingleLineSpan] = []
        for idx in range(first.as_index(), last.as_index() + 1):
            line_start, line_end = self.positions[idx]
            spans.append(
                SingleLineSpan(
                    line=LineNumber(idx),
                    start_col=region_start - line_start if line_start <= region_start else 0,
                    end_col=min(region_end, line_end) - line_start,
                )
            )
        return spans

    def from_region_relative_to(
        self,
        anchor: SingleLineSpan,
        region_start: int,
        region_end: int,
    ) -> list[SingleLineSpan]:
        """Like ``from_region``, but in the coordinates of an enclosing buffer.

        This index was built over a snippet that starts at ``anchor`` in the
        enclosing buffer. The snippet's first line shares a physical line with
        whatever precedes it, so its columns are shifted by
        ``anchor.start_col``; later lines start after a newline and keep their
        columns.
        """
        spans: list[SingleLineSpan] = []
        for span in self.from_region(region_start, region_end):
            inner = span.line.as_index()
            if inner == 0:
                spans.append(
                    SingleLineSpan(
                        line=anchor.line,
                        start_col=anchor.start_col + span.start_col,
                        end_col=anchor.start_col + span.end_col,
                    )
                )
            else:
                spans.append(
                    SingleLineSpan(
                        line=LineNumber(anchor.line.as_index() + inner),
                        start_col=span.start_col,
                        end_col=span.end_col,
                    )
                )
        return spans
