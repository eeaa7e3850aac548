"""Modulo placeholder post-pass for modern (v9) grammar trees.

The modern grammar has no modulo concept: ``%{name}`` parses as a Text node
ending in ``%`` followed by a Named node. This pass moves the ``%`` out of
the text and marks the placeholder ``modulo=True``, so both dialects yield
equivalent trees for modulo detection.

Trees are immutable; the pass returns a new Resource and leaves the input
untouched.

Python 3.13+.
"""

from dataclasses import replace

from i18nsyntax.location import Position

from .ast import Message, MessageElement, Named, Plural, Resource, Text

__all__ = ["post_process_modulo"]


def post_process_modulo(ast: Resource, source: str) -> Resource:
    """Mark modulo placeholders in a tree parsed without modulo support.

    Args:
        ast: Tree whose Named nodes carry no modulo flag
        source: The message string the tree was parsed from

    Returns:
        New Resource with ``%{name}`` placeholders marked ``modulo=True``
        and the ``%`` removed from the preceding Text node

    Example:
        >>> from i18nsyntax.syntax import LegacyMessageParser
        >>> source = "%{count} items"
        >>> ast = LegacyMessageParser(modulo_syntax=False).parse(source).ast
        >>> post_process_modulo(ast, source).body.items[0].modulo
        True
    """
    match ast.body:
        case Plural(cases=cases):
            body: Message | Plural = replace(
                ast.body, cases=tuple(_process_message(case, source) for case in cases)
            )
        case Message() as message:
            body = _process_message(message, source)
    return replace(ast, body=body)


def _process_message(message: Message, source: str) -> Message:
    items = _mark_modulo(list(message.items), source)
    if len(items) == len(message.items) and all(
        new is old for new, old in zip(items, message.items, strict=True)
    ):
        return message
    return replace(message, items=tuple(items))


def _mark_modulo(nodes: list[MessageElement], source: str) -> list[MessageElement]:
    # Right to left so deleting an emptied Text does not shift pending indices
    index = len(nodes) - 1
    while index >= 1:
        node = nodes[index]
        prev = nodes[index - 1]
        if (
            isinstance(node, Named)
            and node.start > 0
            and source[node.start - 1] == "%"
            and isinstance(prev, Text)
            and prev.value.endswith("%")
        ):
            nodes[index] = replace(node, modulo=True)
            end = prev.loc.end
            if end.offset - 1 == prev.start:
                del nodes[index - 1]
                index -= 1
            else:
                shrunk = Position(line=end.line, column=end.column - 1, offset=end.offset - 1)
                nodes[index - 1] = replace(
                    prev, value=prev.value[:-1], loc=replace(prev.loc, end=shrunk)
                )
        index -= 1
    return nodes
