"""Message syntax package.

Provides the legacy (v8) parser, AST definitions, traversal and the modulo
post-pass for modern (v9) grammar trees. Separate from offsets so rule
logic can work on messages without any host-source knowledge.

Python 3.13+.
"""

from .ast import (
    ASTNode,
    Linked,
    LinkedKey,
    LinkedModifier,
    List,
    Literal,
    Message,
    MessageElement,
    Named,
    Plural,
    Resource,
    Text,
)
from .modulo import post_process_modulo
from .parser import LegacyMessageParser, ParseResult
from .traverser import ASTVisitor, iter_nodes, traverse_node

__all__ = [
    "ASTNode",
    "ASTVisitor",
    "LegacyMessageParser",
    "Linked",
    "LinkedKey",
    "LinkedModifier",
    "List",
    "Literal",
    "Message",
    "MessageElement",
    "Named",
    "ParseResult",
    "Plural",
    "Resource",
    "Text",
    "iter_nodes",
    "parse",
    "post_process_modulo",
    "traverse_node",
]


def parse(message: str) -> ParseResult:
    """Parse a legacy (v8) message into AST and diagnostics.

    Convenience function for LegacyMessageParser().parse().

    Args:
        message: Decoded message string

    Returns:
        ParseResult with the Resource AST and a tuple of CompileErrors

    Example:
        >>> from i18nsyntax.syntax import parse
        >>> ast, errors = parse("Hello {name}!")
        >>> ast.body.items[1].key
        'name'
    """
    return LegacyMessageParser().parse(message)
