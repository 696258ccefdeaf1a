"""Source locations: byte spans and line/column lookup."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass


@dataclass(frozen=True)
class Span:
    """A half-open range of zero-based byte offsets."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError("Span end must be >= start")

    @classmethod
    def point(cls, position):
        """A zero-length span at ``position``."""
        return cls(position, position)

    @classmethod
    def empty(cls):
        """A zero-length span at offset 0."""
        return cls(0, 0)

    def __len__(self) -> int:
        return self.end - self.start

    def is_empty(self) -> bool:
        return self.start == self.end

    def contains(self, offset) -> bool:
        return self.start <= offset < self.end

    def extend(self, other: Span) -> Span:
        """The smallest span covering both this span and ``other``."""
        return Span(min(self.start, other.start), max(self.end, other.end))

    def as_range(self) -> range:
        return range(self.start, self.end)

    @staticmethod
    def merge(span1: Span, span2: Span) -> Span:
        return span1.extend(span2)

    def __str__(self) -> str:
        return f"{self.start}..{self.end}"


@dataclass(frozen=True)
class LineMap:
    """Maps byte offsets to 1-based line and column numbers."""

    _line_starts: tuple
    _source_len: int

    @classmethod
    def from_source(cls, source: str) -> LineMap:
        data = source.encode("utf-8")
        starts = [0]
        starts.extend(i + 1 for i, byte in enumerate(data) if byte == 0x0A)
        return cls(tuple(starts), len(data))

    def line_col(self, byte_offset) -> tuple:
        """Return the 1-based (line, column) of a byte offset, clamped to the source."""
        offset = max(0, min(byte_offset, self._source_len))
        index = bisect_right(self._line_starts, offset) - 1
        return index + 1, offset - self._line_starts[index] + 1

    def line_count(self) -> int:
        return len(self._line_starts)

    def line_start(self, line):
        """Byte offset where the 1-based ``line`` starts, or None past the end."""
        index = max(line - 1, 0)
        if index < len(self._line_starts):
            return self._line_starts[index]
        return None

    def source_len(self) -> int:
        return self._source_len