"""Shared constants for i18nsyntax.

This module provides centralized patterns and configuration constants used
across the syntax and offsets packages. Placing them here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Scanner patterns: control tokens recognised by the legacy message parser
- Validation patterns: placeholder keys, list indices, linked keys/modifiers
- Line endings: line terminators recognised for line/column bookkeeping
- Diagnostics: the domain tag stamped on every parser diagnostic

Python 3.13+. Zero external dependencies.
"""

import re

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Scanner patterns
    "CONTROL_TOKEN_PATTERN",
    "LEGACY_CONTROL_TOKEN_PATTERN",
    # Validation patterns
    "PLACEHOLDER_KEY_PATTERN",
    "LIST_INDEX_PATTERN",
    "LINKED_MODIFIER_PATTERN",
    "LINKED_KEY_PATTERN",
    # Line endings
    "LINE_ENDING_PATTERN",
    "LINE_TERMINATORS",
    # Diagnostics
    "DIAGNOSTIC_DOMAIN",
]

# ============================================================================
# SCANNER PATTERNS
# ============================================================================
#
# The legacy scanner searches the remaining input for the next control token.
# Alternatives are tried left to right at each position, so `%{` must precede
# `{`. The parser widens a plural bar over the whitespace around it.
#
#   %{      modulo placeholder        "%{count} items"
#   {       placeholder               "{name}" / "{0}"
#   @. @:   linked message            "@:key" / "@.upper:key"
#   |       plural case separator     "car | cars"
#
# ============================================================================

CONTROL_TOKEN_PATTERN: re.Pattern[str] = re.compile(r"%\{|\{|@[.:]|\|")

# Token set without modulo detection; `%` stays in the surrounding text,
# which is the shape produced by the modern grammar.
LEGACY_CONTROL_TOKEN_PATTERN: re.Pattern[str] = re.compile(r"\{|@[.:]|\|")

# ============================================================================
# VALIDATION PATTERNS
# ============================================================================

# Named placeholder keys: {name}, {user_name}, {$price}
PLACEHOLDER_KEY_PATTERN: re.Pattern[str] = re.compile(r"[a-zA-Z][a-zA-Z0-9_$]*", re.ASCII)

# List placeholder indices: {0}, {12}, {-1} (negative is flagged, still parsed)
LIST_INDEX_PATTERN: re.Pattern[str] = re.compile(r"-?\d+", re.ASCII)

# Linked modifiers: @.upper:key, @.capitalize:key
LINKED_MODIFIER_PATTERN: re.Pattern[str] = re.compile(r"[a-z]*")

# Linked keys: @:messages.hello, @:(some-key), @:a_b
LINKED_KEY_PATTERN: re.Pattern[str] = re.compile(r"[\w\-_|.]*", re.ASCII)

# ============================================================================
# LINE ENDINGS
# ============================================================================

# CRLF must be tried first so it counts as a single line break.
LINE_ENDING_PATTERN: re.Pattern[str] = re.compile("\r\n|[\r\n\u2028\u2029]")

LINE_TERMINATORS: frozenset[str] = frozenset({"\r", "\n", "\u2028", "\u2029"})

# ============================================================================
# DIAGNOSTICS
# ============================================================================

# Domain tag carried by every CompileError produced in this package.
DIAGNOSTIC_DOMAIN: str = "parser"
