"""Legacy (v8) message parser implementation.

This module provides the LegacyMessageParser class that scans vue-i18n v8
message strings into AST structures defined in :mod:`i18nsyntax.syntax.ast`.

Architecture:
    A single scan loop searches the message for the next control token
    (``{``, ``%{``, ``@.``, ``@:`` or ``|``) starting at an integer cursor.
    A ``|`` bar is then widened over its surrounding whitespace by a direct
    character scan. Text before a token becomes a
    :class:`~i18nsyntax.syntax.ast.Text` node; the token is dispatched to a
    grammar rule in :mod:`~i18nsyntax.syntax.parser.rules`.

Robustness:
    The parser never raises on message content. Every problem becomes a
    :class:`~i18nsyntax.diagnostics.CompileError` co-returned with a
    best-effort AST in a :class:`ParseResult`.

See Also:
    - :mod:`i18nsyntax.syntax.ast` - All AST node type definitions
    - :mod:`i18nsyntax.syntax.parser.rules` - Placeholder and linked message rules
    - :mod:`i18nsyntax.syntax.modulo` - Modulo post-pass for modern-grammar trees
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from i18nsyntax.constants import CONTROL_TOKEN_PATTERN, LEGACY_CONTROL_TOKEN_PATTERN
from i18nsyntax.diagnostics import CompileError, MessageSyntaxError
from i18nsyntax.location import LineIndex
from i18nsyntax.syntax.ast import (
    Message,
    MessageElement,
    Plural,
    Resource,
    Text,
)
from i18nsyntax.syntax.parser.rules import ScanContext, parse_linked, parse_placeholder

__all__ = ["LegacyMessageParser", "ParseResult"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ParseResult:
    """AST plus diagnostics returned by a parse.

    Unpacks like a pair:

        >>> ast, errors = LegacyMessageParser().parse("Hello {name}")
        >>> errors
        ()
    """

    ast: Resource
    errors: tuple[CompileError, ...]

    def __iter__(self) -> Iterator[Resource | tuple[CompileError, ...]]:
        yield self.ast
        yield self.errors

    @property
    def is_valid(self) -> bool:
        """True when the message produced no diagnostics."""
        return not self.errors

    def raise_for_errors(self) -> None:
        """Raise MessageSyntaxError for the first diagnostic, if any."""
        if self.errors:
            raise MessageSyntaxError(self.errors[0])


class LegacyMessageParser:
    """vue-i18n v8 message parser.

    Attributes:
        modulo_syntax: Recognise ``%{name}`` as a modulo placeholder. When
            False, ``%`` stays in the preceding text, which is the tree shape
            the modern grammar produces.

    Thread Safety:
        Stateless between calls; one instance may be shared freely.
    """

    __slots__ = ("_modulo_syntax",)

    def __init__(self, *, modulo_syntax: bool = True) -> None:
        """Initialize parser.

        Args:
            modulo_syntax: Recognise ``%{`` as an opening token (default: True)
        """
        self._modulo_syntax = modulo_syntax

    @property
    def modulo_syntax(self) -> bool:
        """Whether ``%{`` is recognised as an opening token."""
        return self._modulo_syntax

    def parse(self, message: str) -> ParseResult:
        """Parse a message string into a Resource AST.

        Args:
            message: Decoded message string

        Returns:
            ParseResult whose ast body is a Message, or a Plural when the
            message has top-level ``|`` separators

        Example:
            >>> result = LegacyMessageParser().parse("car | cars")
            >>> len(result.ast.body.cases)
            2
        """
        pattern = CONTROL_TOKEN_PATTERN if self._modulo_syntax else LEGACY_CONTROL_TOKEN_PATTERN
        length = len(message)
        ctx = ScanContext(source=message, lines=LineIndex(message))

        cases: list[Message] = []
        items: list[MessageElement] = []
        message_start = 0

        while ctx.pos < length:
            match = pattern.search(message, ctx.pos)
            if match is None:
                break
            token = match.group()
            token_start, token_end = match.span()
            text_start = ctx.pos

            if token == "|":
                token_start, token_end = _widen_bar(message, text_start, token_start, token_end)
                _append_text(items, ctx, text_start, token_start)
                # Close the current case; the next one starts after the bar
                cases.append(
                    Message(items=tuple(items), loc=ctx.location(message_start, token_start))
                )
                items = []
                message_start = token_end
                ctx.pos = token_end
                continue

            if token[0] == "@":
                _append_text(items, ctx, text_start, token_start)
                ctx.pos = token_end
                items.append(parse_linked(ctx))
                continue

            modulo = token == "%{"
            node = parse_placeholder(ctx, token_end, modulo=modulo)
            # Without a placeholder node the percent sign is plain text
            text_end = token_start + 1 if modulo and node is None else token_start
            _append_text(items, ctx, text_start, text_end)
            if node is not None:
                items.append(node)

        _append_text(items, ctx, ctx.pos, length)

        last = Message(items=tuple(items), loc=ctx.location(message_start, length))
        body: Message | Plural
        if cases:
            body = Plural(cases=(*cases, last), loc=ctx.location(0, length))
        else:
            body = last

        logger.debug(
            "Parsed message (%d chars, %d case(s)) with %d diagnostic(s)",
            length,
            len(cases) + 1,
            len(ctx.errors),
        )
        return ParseResult(
            ast=Resource(body=body, loc=ctx.location(0, length)),
            errors=tuple(ctx.errors),
        )


def _append_text(items: list[MessageElement], ctx: ScanContext, start: int, end: int) -> None:
    if start < end:
        items.append(Text(value=ctx.source[start:end], loc=ctx.location(start, end)))


def _widen_bar(message: str, floor: int, start: int, end: int) -> tuple[int, int]:
    """Extend a plural bar over surrounding whitespace.

    Leading whitespace is taken back to floor at most, so text already
    consumed is never reclaimed.
    """
    while start > floor and message[start - 1].isspace():
        start -= 1
    length = len(message)
    while end < length and message[end].isspace():
        end += 1
    return start, end
