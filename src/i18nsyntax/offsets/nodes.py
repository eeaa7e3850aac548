"""Host literal node shapes understood by the report-index resolver.

Host parsers (JSON, JSON5, YAML, JavaScript) are outside this package. An
adapter converts the host node that holds a message into one of these
records: the raw literal text exactly as it appears in the host source and
its [start, end) range in that source.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from i18nsyntax.enums import ScalarStyle

__all__ = ["HostLiteral", "JSONStringLiteral", "JSONTemplateLiteral", "YAMLScalar"]


@dataclass(frozen=True, slots=True)
class JSONStringLiteral:
    """Quoted JSON/JSON5/JavaScript string literal.

    Attributes:
        raw: Literal text including the quotes
        range: [start, end) offsets of the literal in the host source
        value: Decoded string value
    """

    raw: str
    range: tuple[int, int]
    value: str = ""


@dataclass(frozen=True, slots=True)
class JSONTemplateLiteral:
    """JavaScript template literal.

    Only template literals without ``${...}`` expressions have a single
    contiguous decoded value.

    Attributes:
        raw: Literal text including the backticks
        range: [start, end) offsets of the literal in the host source
        expressions: Embedded expressions, in source order
    """

    raw: str
    range: tuple[int, int]
    expressions: tuple[object, ...] = ()


@dataclass(frozen=True, slots=True)
class YAMLScalar:
    """YAML scalar node.

    Attributes:
        raw: Scalar text including quotes (or block indicator) if any
        range: [start, end) offsets of the scalar in the host source
        style: Presentation style of the scalar
    """

    raw: str
    range: tuple[int, int]
    style: ScalarStyle = ScalarStyle.PLAIN

    @classmethod
    def from_source(cls, source: str, start: int, end: int, style: ScalarStyle) -> YAMLScalar:
        """Build a scalar record by slicing the host source."""
        return cls(raw=source[start:end], range=(start, end), style=style)


type HostLiteral = JSONStringLiteral | JSONTemplateLiteral | YAMLScalar
