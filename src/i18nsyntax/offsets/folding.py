"""YAML line folding for offset mapping.

In flow and plain YAML scalars a run of blanks and line breaks decodes to:

- itself, when the run holds no line break (each blank is one character)
- a single space, when the run holds exactly one line break
- one newline per additional break, when the run holds two or more

Trailing blanks before the first break and the indentation after the last
break belong to the fold and decode to nothing on their own.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

__all__ = ["BLANKS_AND_BREAKS", "FoldedBreak", "fold_line_break"]

BLANKS_AND_BREAKS: frozenset[str] = frozenset({" ", "\t", "\r", "\n"})


@dataclass(frozen=True, slots=True)
class FoldedBreak:
    """A run of blanks and line breaks in a raw YAML scalar.

    Attributes:
        start: Raw offset of the first character of the run
        end: Raw offset just past the run (next non-blank content)
        breaks: Raw offsets just past each line break in the run
    """

    start: int
    end: int
    breaks: tuple[int, ...]

    @property
    def newlines(self) -> int:
        """Number of line breaks in the run."""
        return len(self.breaks)

    @property
    def decoded_length(self) -> int:
        """Number of characters the run decodes to."""
        match self.newlines:
            case 0:
                return self.end - self.start
            case 1:
                return 1
            case count:
                return count - 1

    def consume(self, remaining: int) -> tuple[int, int]:
        """Advance through the run with a decoded-character budget.

        Args:
            remaining: Decoded characters still to skip (> 0)

        Returns:
            (raw offset reached, budget left)
        """
        if not self.breaks:
            step = min(self.end - self.start, remaining)
            return self.start + step, remaining - step
        decoded = self.decoded_length
        if decoded <= remaining:
            return self.end, remaining - decoded
        # Lands between preserved newlines: the first break decodes to
        # nothing, so the n-th kept newline starts after break n.
        return self.breaks[remaining], 0


def fold_line_break(raw: str, index: int) -> FoldedBreak:
    """Scan the blank/break run starting at index.

    CRLF counts as one line break.

    Example:
        >>> fold = fold_line_break("a  \\n   b", 1)
        >>> (fold.end, fold.breaks, fold.decoded_length)
        (7, (4,), 1)
    """
    length = len(raw)
    position = index
    breaks: list[int] = []
    while position < length:
        char = raw[position]
        if char == "\r":
            position += 2 if raw.startswith("\n", position + 1) else 1
            breaks.append(position)
        elif char == "\n":
            position += 1
            breaks.append(position)
        elif char in (" ", "\t"):
            position += 1
        else:
            break
    return FoldedBreak(start=index, end=position, breaks=tuple(breaks))
