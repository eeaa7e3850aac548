"""Grammar rules for the legacy (v8) message parser.

This module provides the rules dispatched by the scan loop in core.py:
- Placeholder parsing ({name}, %{name}, {0})
- Linked message parsing (@:key, @.modifier:key, @:(key))

Rules read and advance a shared ScanContext. The context holds a single
integer cursor over the immutable message string; no rule slices the
remaining input.
"""

import sys
from collections.abc import Callable
from dataclasses import dataclass, field

from i18nsyntax.constants import (
    LINKED_KEY_PATTERN,
    LINKED_MODIFIER_PATTERN,
    LIST_INDEX_PATTERN,
    PLACEHOLDER_KEY_PATTERN,
)
from i18nsyntax.diagnostics import CompileError, ErrorTemplate
from i18nsyntax.location import LineIndex, SourceLocation
from i18nsyntax.syntax.ast import (
    Linked,
    LinkedKey,
    LinkedModifier,
    List,
    Named,
)

__all__ = ["ScanContext", "parse_linked", "parse_placeholder"]

type _Template = Callable[[LineIndex, int], CompileError]


@dataclass(slots=True)
class ScanContext:
    """Explicit state for one parse call.

    Attributes:
        source: Message being parsed (never modified)
        lines: Line start table for the message
        pos: Current scan offset
        errors: Diagnostics collected so far, in emission order
    """

    source: str
    lines: LineIndex
    pos: int = 0
    errors: list[CompileError] = field(default_factory=list)

    def location(self, start: int, end: int) -> SourceLocation:
        """Location record for [start, end) in the message."""
        return self.lines.location(start, end)

    def report(self, template: _Template, offset: int) -> None:
        """Record a diagnostic built from an ErrorTemplate factory."""
        self.errors.append(template(self.lines, offset))


# =============================================================================
# Placeholders
# =============================================================================


def parse_placeholder(
    ctx: ScanContext, token_end: int, *, modulo: bool
) -> Named | List | None:
    """Parse a placeholder whose opening token ends at token_end.

    Examples:
        {name}    -> Named(key="name")
        %{count}  -> Named(key="count", modulo=True)
        {0}       -> List(index=0)
        { }       -> None, "Empty placeholder"

    An unterminated placeholder takes the rest of the message as its key.
    The returned node starts at the opening brace; for the modulo form the
    percent sign is left outside the node.

    Args:
        ctx: Scan context; ctx.pos is moved past the closing brace
        token_end: Offset just after "{" or "%{"
        modulo: True when the opening token was "%{"

    Returns:
        Named or List node, or None for an empty placeholder
    """
    source = ctx.source
    close = source.find("}", token_end)
    if close == -1:
        ctx.report(ErrorTemplate.unterminated_closing_brace, token_end)
        raw_key = source[token_end:]
    else:
        raw_key = source[token_end:close]

    # Offset of the closing brace (or of end of input when unterminated)
    key_end = token_end + len(raw_key)
    node_end = min(key_end + 1, len(source))
    ctx.pos = node_end

    key = raw_key.strip()
    if not key:
        ctx.report(ErrorTemplate.empty_placeholder, key_end)
        return None

    if raw_key != key:
        ctx.report(ErrorTemplate.placeholder_key_spacing, token_end)

    loc = ctx.location(token_end - 1, node_end)
    if LIST_INDEX_PATTERN.fullmatch(key):
        negative = key.startswith("-") and key.strip("-0") != ""
        if negative:
            ctx.report(ErrorTemplate.negative_list_index, token_end)
        return List(index=_list_index(key, negative=negative), loc=loc)

    if not PLACEHOLDER_KEY_PATTERN.fullmatch(key):
        ctx.report(ErrorTemplate.unexpected_placeholder_key, token_end)
    return Named(key=key, loc=loc, modulo=True if modulo else None)


def _list_index(key: str, *, negative: bool) -> int:
    """Integer value of a list index, clamped when it is too long to convert."""
    try:
        return int(key)
    except ValueError:
        # More digits than the interpreter converts (sys.get_int_max_str_digits)
        return -sys.maxsize if negative else sys.maxsize


# =============================================================================
# Linked messages
# =============================================================================


def parse_linked(ctx: ScanContext) -> Linked:
    """Parse a linked message; ctx.pos is just past "@." or "@:".

    Examples:
        @:key              -> Linked(key="key")
        @.upper:key        -> Linked(key="key", modifier="upper")
        @:(messages.hello) -> Linked(key="messages.hello")
        @.upper text       -> Linked(key="", modifier="upper"), "Expected linked key value"

    Args:
        ctx: Scan context; ctx.pos is moved past the linked message

    Returns:
        Linked node (always; problems become diagnostics)
    """
    source = ctx.source
    start = ctx.pos - 2
    modifier: LinkedModifier | None = None

    if source[ctx.pos - 1] == ".":
        # Modifier location includes the dot
        match = LINKED_MODIFIER_PATTERN.match(source, ctx.pos)
        modifier_end = match.end() if match else ctx.pos
        modifier = LinkedModifier(
            value=source[ctx.pos : modifier_end],
            loc=ctx.location(ctx.pos - 1, modifier_end),
        )
        if not modifier.value:
            ctx.report(ErrorTemplate.empty_linked_modifier, ctx.pos - 1)
        ctx.pos = modifier_end

        if not source.startswith(":", ctx.pos):
            ctx.report(ErrorTemplate.empty_linked_key, ctx.pos)
            key = LinkedKey(value="", loc=ctx.location(ctx.pos, ctx.pos))
            return Linked(key=key, loc=ctx.location(start, ctx.pos), modifier=modifier)
        ctx.pos += 1

    paren = source.startswith("(", ctx.pos)
    if paren:
        ctx.pos += 1

    match = LINKED_KEY_PATTERN.match(source, ctx.pos)
    key_end = match.end() if match else ctx.pos
    key = LinkedKey(value=source[ctx.pos : key_end], loc=ctx.location(ctx.pos, key_end))
    if not key.value:
        ctx.report(ErrorTemplate.empty_linked_key, ctx.pos)
    ctx.pos = key_end

    if paren:
        if source.startswith(")", ctx.pos):
            ctx.pos += 1
        else:
            ctx.report(ErrorTemplate.unterminated_closing_paren, ctx.pos)

    return Linked(key=key, loc=ctx.location(start, ctx.pos), modifier=modifier)
