"""Location fixer for content extracted from a host file.

When locale messages live inside a container (an ``<i18n>`` block of a
single-file component, say), the block content is parsed on its own and
the resulting node locations refer to that content. The content handed to
the parser ("cooked") may also differ from the raw container text
("original") after unescaping. LocationFixer rewrites node locations back
into the host file.

Columns follow the host editor convention: lines 1-based, columns 0-based.

Python 3.13+. Zero external dependencies.
"""

import logging
from bisect import bisect_right
from dataclasses import dataclass
from difflib import SequenceMatcher
from typing import Protocol

from i18nsyntax.diagnostics import IndexMapError
from i18nsyntax.location import LineIndex, Position, SourceLocation

__all__ = ["DiffSegment", "IndexMap", "LocatedNode", "LocationFixer"]

logger = logging.getLogger(__name__)


class LocatedNode(Protocol):
    """Host-parser node with writable range and location."""

    range: tuple[int, int]
    loc: SourceLocation


@dataclass(frozen=True, slots=True)
class DiffSegment:
    """Corresponding [start, end) ranges in original and cooked text."""

    org: tuple[int, int]
    new: tuple[int, int]


class IndexMap:
    """Piecewise map from cooked-text indices to original-text indices.

    Built from a character diff of the two strings. Each run of equal
    characters becomes one segment; each run of changes between two equal
    runs becomes one segment pairing the deleted and inserted lengths.
    Segments that map a range onto itself are not stored: lookups that
    find no segment fall back to the identity.

    Example:
        >>> index_map = IndexMap("a&amp;b", "a&b")
        >>> [index_map.remap_index(i) for i in range(3)]
        [0, 1, 6]
    """

    __slots__ = ("_batch_new", "_batch_org", "_new_index", "_org_index", "_segments", "_starts")

    def __init__(self, original: str, cooked: str) -> None:
        self._segments: list[DiffSegment] = []
        self._starts: list[int] = []
        self._org_index = 0
        self._new_index = 0
        self._batch_org = 0
        self._batch_new = 0

        matcher = SequenceMatcher(None, original, cooked, autojunk=False)
        for tag, i1, i2, j1, j2 in matcher.get_opcodes():
            match tag:
                case "equal":
                    self._apply_equal(i2 - i1)
                case "delete":
                    self._batch_org += i2 - i1
                case "insert":
                    self._batch_new += j2 - j1
                case "replace":
                    self._batch_org += i2 - i1
                    self._batch_new += j2 - j1
                case _:
                    msg = f'Unexpected diff operation "{tag}"'
                    raise IndexMapError(msg)
        self._flush()

    @property
    def segments(self) -> tuple[DiffSegment, ...]:
        """Stored segments in cooked-text order."""
        return tuple(self._segments)

    def _apply_equal(self, length: int) -> None:
        self._flush()
        self._add(length, length)

    def _flush(self) -> None:
        if self._batch_org or self._batch_new:
            self._add(self._batch_org, self._batch_new)
            self._batch_org = 0
            self._batch_new = 0

    def _add(self, org_length: int, new_length: int) -> None:
        org = (self._org_index, self._org_index + org_length)
        new = (self._new_index, self._new_index + new_length)
        self._org_index, self._new_index = org[1], new[1]
        if org == new:
            return
        self._segments.append(DiffSegment(org=org, new=new))
        self._starts.append(new[0])

    def remap_index(self, index: int) -> int:
        """Map a cooked-text index to the original text.

        Indices inside a changed run map to the matching position of the
        original run, clamped to its last character.
        """
        position = bisect_right(self._starts, index) - 1
        if position >= 0:
            segment = self._segments[position]
            if segment.new[0] <= index < segment.new[1]:
                return min(segment.org[0] + index - segment.new[0], segment.org[1] - 1)
        return index


class LocationFixer:
    """Rewrites node locations from container content to the host file.

    Args:
        source_text: Full host file text
        container_offset: Offset of the container content in the host file
        original: Raw container text as it appears in the host file
        cooked: Text that was actually parsed

    Example:
        >>> host = "<i18n>\\n{}</i18n>"
        >>> fixer = LocationFixer(host, 6, "\\n{}", "\\n{}")
        >>> fixer.remap_index(1)
        7
    """

    __slots__ = ("_container_offset", "_index_map", "_lines", "_offset_position")

    def __init__(
        self, source_text: str, container_offset: int, original: str, cooked: str
    ) -> None:
        self._lines = LineIndex(source_text, column_base=0)
        self._container_offset = container_offset
        self._offset_position = self._lines.position(container_offset)
        self._index_map: IndexMap | None
        if original == cooked:
            self._index_map = None
            logger.debug("Container text unchanged; shifting locations by %d", container_offset)
        else:
            self._index_map = IndexMap(original, cooked)
            logger.debug(
                "Container text rewritten; remapping through %d segment(s)",
                len(self._index_map.segments),
            )

    def remap_index(self, index: int) -> int:
        """Map a cooked-text index to a host-file offset."""
        if self._index_map is None:
            return index + self._container_offset
        return self._index_map.remap_index(index) + self._container_offset

    def fix_position(self, line: int, column: int, index: int) -> Position:
        """Host-file position of a cooked-text line/column/index triple."""
        if self._index_map is None:
            shift = self._offset_position
            fixed_line = line + shift.line - 1
            fixed_column = column + shift.column if line == 1 else column
            offset = self._lines.offset_of(fixed_line, fixed_column)
            return Position(line=fixed_line, column=fixed_column, offset=offset)
        return self._lines.position(self.remap_index(index))

    def fix_locations(self, node: LocatedNode) -> None:
        """Rewrite node.loc and node.range in place."""
        start = self.fix_position(node.loc.start.line, node.loc.start.column, node.range[0])
        end = self.fix_position(node.loc.end.line, node.loc.end.column, node.range[1])
        node.loc = SourceLocation(start=start, end=end)
        node.range = (start.offset, end.offset)
