"""Enumerations for i18nsyntax type-safe constants.

NodeType uses IntEnum so tags compare equal to the numeric node types of the
external message compiler. ScalarStyle uses StrEnum (Python 3.11+) so members
are the same strings YAML host parsers report.

Python 3.13+.
"""

from enum import IntEnum, StrEnum


class NodeType(IntEnum):
    """Closed set of message AST node tags.

    Numbering matches the external message compiler so that trees produced
    by either dialect share one discriminant.
    """

    RESOURCE = 0
    """Root node: exactly one per parse"""

    PLURAL = 1
    """Plural form: car | cars"""

    MESSAGE = 2
    """Single message (or plural case)"""

    TEXT = 3
    """Literal run of characters"""

    NAMED = 4
    """Named placeholder: {name} or %{name}"""

    LIST = 5
    """List placeholder: {0}"""

    LINKED = 6
    """Linked message: @:key, @.modifier:key"""

    LINKED_KEY = 7
    """Key part of a linked message"""

    LINKED_MODIFIER = 8
    """Modifier part of a linked message"""

    LITERAL = 9
    """Literal placeholder: {'text'} (modern grammar only)"""


class ScalarStyle(StrEnum):
    """Quoting style of a YAML scalar.

    StrEnum provides automatic string conversion: str(ScalarStyle.PLAIN) == "plain"
    """

    PLAIN = "plain"
    """Unquoted: key: hello world"""

    SINGLE_QUOTED = "single-quoted"
    """key: 'it''s'"""

    DOUBLE_QUOTED = "double-quoted"
    """key: "caf\\u00e9\""""

    FOLDED = "folded"
    """Block scalar: key: >"""

    LITERAL = "literal"
    """Block scalar: key: |"""


__all__ = [
    "NodeType",
    "ScalarStyle",
]
