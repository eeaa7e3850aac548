"""Message AST (Abstract Syntax Tree) node definitions.

Node shapes shared by the legacy (v8) parser and trees produced by the
modern (v9) grammar. Each class carries a NodeType tag and a type guard
as a static method (eliminates circular imports).

Offsets in every location are 0-based character indices into the message
string, never into the containing file.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import ClassVar, TypeIs

from i18nsyntax.enums import NodeType
from i18nsyntax.location import SourceLocation

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Structure
    "Resource",
    "Plural",
    "Message",
    # Message elements
    "Text",
    "Named",
    "List",
    "Literal",
    "Linked",
    "LinkedKey",
    "LinkedModifier",
    # Type aliases
    "MessageElement",
    "ASTNode",
]


class _Located:
    """Offset accessors shared by every node class."""

    __slots__ = ()

    loc: SourceLocation

    @property
    def start(self) -> int:
        """Start offset (inclusive) in the message string."""
        return self.loc.start.offset

    @property
    def end(self) -> int:
        """End offset (exclusive) in the message string."""
        return self.loc.end.offset


# ============================================================================
# STRUCTURE
# ============================================================================


@dataclass(frozen=True, slots=True)
class Resource(_Located):
    """Root AST node; exactly one per parse."""

    type: ClassVar[NodeType] = NodeType.RESOURCE

    body: "Message | Plural"
    loc: SourceLocation

    @staticmethod
    def guard(node: object) -> TypeIs["Resource"]:
        """Type guard for Resource."""
        return isinstance(node, Resource)


@dataclass(frozen=True, slots=True)
class Plural(_Located):
    """Plural form: cases separated by top-level | bars.

    Example:
        no apples | one apple | {count} apples  → 3 cases
    """

    type: ClassVar[NodeType] = NodeType.PLURAL

    cases: tuple["Message", ...]
    loc: SourceLocation

    @staticmethod
    def guard(node: object) -> TypeIs["Plural"]:
        """Type guard for Plural."""
        return isinstance(node, Plural)


@dataclass(frozen=True, slots=True)
class Message(_Located):
    """Message (or a single plural case): items in scan order."""

    type: ClassVar[NodeType] = NodeType.MESSAGE

    items: tuple["MessageElement", ...]
    loc: SourceLocation

    @staticmethod
    def guard(node: object) -> TypeIs["Message"]:
        """Type guard for Message."""
        return isinstance(node, Message)


# ============================================================================
# MESSAGE ELEMENTS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Text(_Located):
    """Literal run of characters."""

    type: ClassVar[NodeType] = NodeType.TEXT

    value: str
    loc: SourceLocation

    @staticmethod
    def guard(node: object) -> TypeIs["Text"]:
        """Type guard for Text."""
        return isinstance(node, Text)


@dataclass(frozen=True, slots=True)
class Named(_Located):
    """Named placeholder: {name} or the deprecated modulo form %{name}.

    The location of a modulo placeholder starts at the brace, not at the
    percent sign, so both dialects agree on node offsets.

    Attributes:
        key: Trimmed placeholder key (may be an invalid identifier)
        modulo: True for %{name}; None when the dialect has no modulo concept
    """

    type: ClassVar[NodeType] = NodeType.NAMED

    key: str
    loc: SourceLocation
    modulo: bool | None = None

    @staticmethod
    def guard(node: object) -> TypeIs["Named"]:
        """Type guard for Named."""
        return isinstance(node, Named)


@dataclass(frozen=True, slots=True)
class List(_Located):
    """List placeholder: {0}. Negative indices are flagged but kept."""

    type: ClassVar[NodeType] = NodeType.LIST

    index: int
    loc: SourceLocation

    @staticmethod
    def guard(node: object) -> TypeIs["List"]:
        """Type guard for List."""
        return isinstance(node, List)


@dataclass(frozen=True, slots=True)
class Literal(_Located):
    """Literal placeholder: {'text'}. Only the modern grammar produces it."""

    type: ClassVar[NodeType] = NodeType.LITERAL

    value: str
    loc: SourceLocation

    @staticmethod
    def guard(node: object) -> TypeIs["Literal"]:
        """Type guard for Literal."""
        return isinstance(node, Literal)


@dataclass(frozen=True, slots=True)
class LinkedKey(_Located):
    """Key of a linked message. Empty value is always paired with a diagnostic."""

    type: ClassVar[NodeType] = NodeType.LINKED_KEY

    value: str
    loc: SourceLocation

    @staticmethod
    def guard(node: object) -> TypeIs["LinkedKey"]:
        """Type guard for LinkedKey."""
        return isinstance(node, LinkedKey)


@dataclass(frozen=True, slots=True)
class LinkedModifier(_Located):
    """Modifier of a linked message. Empty value is always paired with a diagnostic."""

    type: ClassVar[NodeType] = NodeType.LINKED_MODIFIER

    value: str
    loc: SourceLocation

    @staticmethod
    def guard(node: object) -> TypeIs["LinkedModifier"]:
        """Type guard for LinkedModifier."""
        return isinstance(node, LinkedModifier)


@dataclass(frozen=True, slots=True)
class Linked(_Located):
    """Linked message.

    Examples:
        @:key
        @.upper:key
        @:(messages.hello)
    """

    type: ClassVar[NodeType] = NodeType.LINKED

    key: LinkedKey
    loc: SourceLocation
    modifier: LinkedModifier | None = None

    @staticmethod
    def guard(node: object) -> TypeIs["Linked"]:
        """Type guard for Linked."""
        return isinstance(node, Linked)


# ============================================================================
# TYPE ALIASES
# ============================================================================

type MessageElement = Text | Named | List | Linked | Literal

type ASTNode = (
    Resource
    | Plural
    | Message
    | Text
    | Named
    | List
    | Literal
    | Linked
    | LinkedKey
    | LinkedModifier
)
