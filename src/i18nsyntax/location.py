"""Source location records and line/column lookup.

Every message AST node and every diagnostic carries a SourceLocation whose
offsets are 0-based character indices into the message string. Lines are
always 1-based. Columns are 1-based for message locations and 0-based for
host-source locations; LineIndex is configured with the base it serves.

Line Ending Support:
    LF, CRLF, CR, U+2028 and U+2029 all terminate a line. CRLF counts as a
    single line break.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from i18nsyntax.constants import LINE_ENDING_PATTERN

__all__ = ["LineIndex", "Position", "SourceLocation"]


@dataclass(frozen=True, slots=True)
class Position:
    """A point in source text.

    Attributes:
        line: Line number (1-indexed)
        column: Column number (base depends on the producing LineIndex)
        offset: Character offset (0-indexed)
    """

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Start/end pair of positions.

    Example:
        Message: "hi {name}"
        Named node location: start.offset=3, end.offset=9
    """

    start: Position
    end: Position

    def __post_init__(self) -> None:
        """Validate location invariants."""
        if self.end.offset < self.start.offset:
            msg = (
                f"SourceLocation end ({self.end.offset}) must be >= "
                f"start ({self.start.offset})"
            )
            raise ValueError(msg)


class LineIndex:
    """Precomputed line starts for O(log n) offset to line/column lookups.

    Builds the line start table in a single pass, then answers lookups
    using binary search. One index is built per parsed message.

    Example:
        >>> index = LineIndex("line1\\nline2")
        >>> index.line_col(0)
        (1, 1)
        >>> index.line_col(8)
        (2, 3)
        >>> LineIndex("line1\\nline2", column_base=0).line_col(8)
        (2, 2)

    Thread Safety:
        Thread-safe. Internal state is only set during __init__.
    """

    __slots__ = ("_column_base", "_starts", "_text_len")

    def __init__(self, text: str, *, column_base: int = 1) -> None:
        """Build line start table from text.

        Args:
            text: Text to index
            column_base: Column number of the first character of a line
        """
        starts = [0]
        for match in LINE_ENDING_PATTERN.finditer(text):
            starts.append(match.end())
        self._starts: tuple[int, ...] = tuple(starts)
        self._text_len = len(text)
        self._column_base = column_base

    @property
    def line_count(self) -> int:
        """Number of lines (a trailing line break opens an empty last line)."""
        return len(self._starts)

    def line_col(self, offset: int) -> tuple[int, int]:
        """Get line and column for offset using binary search.

        Offsets outside the text are clamped to [0, len(text)].
        """
        if offset < 0:
            offset = 0
        elif offset > self._text_len:
            offset = self._text_len

        # Index of largest line start <= offset
        left, right = 0, len(self._starts) - 1
        while left < right:
            mid = (left + right + 1) // 2
            if self._starts[mid] <= offset:
                left = mid
            else:
                right = mid - 1

        return (left + 1, offset - self._starts[left] + self._column_base)

    def position(self, offset: int) -> Position:
        """Get full Position record for offset."""
        line, column = self.line_col(offset)
        return Position(line=line, column=column, offset=offset)

    def location(self, start: int, end: int) -> SourceLocation:
        """Get SourceLocation spanning [start, end)."""
        return SourceLocation(start=self.position(start), end=self.position(end))

    def offset_of(self, line: int, column: int) -> int:
        """Inverse of line_col: character offset of a line/column pair.

        Lines beyond the table are clamped to the last line; the result is
        clamped to the text length.
        """
        line_index = min(max(line, 1), len(self._starts)) - 1
        offset = self._starts[line_index] + column - self._column_base
        return min(max(offset, 0), self._text_len)
