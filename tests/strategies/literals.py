"""Hypothesis strategies for encoded host literals.

Each strategy builds a literal body from pieces whose decoded and raw forms
are known, so tests can compare codec output against the piece boundaries
instead of re-deriving the decoding rules.

Pieces never fold into each other: fold pieces are never adjacent and no
piece starts or ends with a blank unless it is a fold piece.

Events emitted:
- lit_escapes: Escape piece count bucket (none|some|many)
- lit_folds: Whether a YAML literal contains a fold (true|false)
"""

from __future__ import annotations

import string
from dataclasses import dataclass

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

# (decoded UTF-16 length, raw text, kind)
type Piece = tuple[int, str, str]

SAFE_CHARS = string.ascii_letters + string.digits + ".,!?-{}@|%"

JSON_ESCAPES: tuple[Piece, ...] = (
    (1, "\\n", "escape"),
    (1, "\\t", "escape"),
    (1, '\\"', "escape"),
    (1, "\\\\", "escape"),
    (1, "\\x41", "escape"),
    (1, "\\u00e9", "escape"),
    (2, "\\u{1F600}", "escape"),
    (1, "\\u{41}", "escape"),
    (0, "\\\n", "escape"),
    (0, "\\\r\n", "escape"),
)

YAML_DOUBLE_ESCAPES: tuple[Piece, ...] = (
    (1, "\\n", "escape"),
    (1, "\\t", "escape"),
    (1, '\\"', "escape"),
    (1, "\\x41", "escape"),
    (1, "\\u00e9", "escape"),
    (2, "\\U0001F600", "escape"),
    (0, "\\\n", "escape"),
    (0, "\\\n    ", "escape"),
)

YAML_SINGLE_ESCAPES: tuple[Piece, ...] = ((1, "''", "escape"),)

# Each fold decodes to one character: a space or a single kept newline
YAML_FOLDS: tuple[Piece, ...] = (
    (1, "\n", "fold"),
    (1, "\n  ", "fold"),
    (1, "  \n", "fold"),
    (1, "\r\n\t", "fold"),
    (1, "\n\n", "fold"),
    (1, " \n  \n ", "fold"),
)


@dataclass(frozen=True, slots=True)
class EncodedLiteral:
    """Literal body plus its (decoded, raw) piece boundaries."""

    raw: str
    boundaries: tuple[tuple[int, int], ...]

    @property
    def decoded_length(self) -> int:
        return self.boundaries[-1][0]

    def expected_raw_offset(self, offset: int) -> int:
        """Raw end of the shortest piece prefix that decodes to >= offset."""
        for decoded, raw in self.boundaries:
            if decoded >= offset:
                return raw
        return len(self.raw)


def _assemble(pieces: list[Piece]) -> EncodedLiteral:
    boundaries = [(0, 0)]
    decoded = 0
    raw_parts: list[str] = []
    previous_kind = ""
    for length, raw, kind in pieces:
        if kind == "fold" and previous_kind == "fold":
            continue
        decoded += length
        raw_parts.append(raw)
        boundaries.append((decoded, boundaries[-1][1] + len(raw)))
        previous_kind = kind

    escapes = sum(1 for piece in pieces if piece[2] == "escape")
    event(f"lit_escapes={'none' if escapes == 0 else 'some' if escapes < 5 else 'many'}")
    return EncodedLiteral(raw="".join(raw_parts), boundaries=tuple(boundaries))


def _plain_pieces() -> st.SearchStrategy[Piece]:
    return st.sampled_from(SAFE_CHARS).map(lambda char: (1, char, "plain"))


@composite
def json_literals(draw: st.DrawFn) -> EncodedLiteral:
    """JSON string bodies with single-character, hex and unicode escapes."""
    pieces = draw(
        st.lists(st.one_of(_plain_pieces(), st.sampled_from(JSON_ESCAPES)), max_size=30)
    )
    return _assemble(pieces)


@composite
def yaml_double_quoted_literals(draw: st.DrawFn) -> EncodedLiteral:
    """Double-quoted YAML bodies with escapes and folds."""
    pieces = draw(
        st.lists(
            st.one_of(
                _plain_pieces(),
                st.sampled_from(YAML_DOUBLE_ESCAPES),
                st.sampled_from(YAML_FOLDS),
            ),
            max_size=30,
        )
    )
    event(f"lit_folds={any(piece[2] == 'fold' for piece in pieces)}")
    return _assemble(pieces)


@composite
def yaml_single_quoted_literals(draw: st.DrawFn) -> EncodedLiteral:
    """Single-quoted YAML bodies with doubled quotes and folds."""
    pieces = draw(
        st.lists(
            st.one_of(
                _plain_pieces(),
                st.sampled_from(YAML_SINGLE_ESCAPES),
                st.sampled_from(YAML_FOLDS),
            ),
            max_size=30,
        )
    )
    event(f"lit_folds={any(piece[2] == 'fold' for piece in pieces)}")
    return _assemble(pieces)


@composite
def yaml_plain_literals(draw: st.DrawFn) -> EncodedLiteral:
    """Plain YAML bodies with folds."""
    pieces = draw(
        st.lists(st.one_of(_plain_pieces(), st.sampled_from(YAML_FOLDS)), max_size=30)
    )
    event(f"lit_folds={any(piece[2] == 'fold' for piece in pieces)}")
    return _assemble(pieces)
