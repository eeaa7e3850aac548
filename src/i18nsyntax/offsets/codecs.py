"""Decoded-offset to raw-offset codecs for host string literals.

Each codec walks the raw characters of a literal (quotes already stripped)
while counting decoded characters, and returns the raw offset at which the
given decoded offset lands. Decoded characters are counted in UTF-16 code
units, so an escape naming a code point above U+FFFF counts as two.

Codecs never raise on malformed input: they scan what is there and clamp
the result to the raw length. For any codec ``f`` and raw text ``raw``:

- ``f(raw, 0) == 0``
- ``0 <= f(raw, k) <= len(raw)``
- ``f(raw, k)`` is non-decreasing in ``k``

Python 3.13+. Zero external dependencies.
"""

import re

from i18nsyntax.constants import LINE_TERMINATORS

from .folding import BLANKS_AND_BREAKS, fold_line_break

__all__ = [
    "get_json_string_offset",
    "get_yaml_double_quoted_string_offset",
    "get_yaml_plain_string_offset",
    "get_yaml_single_quoted_string_offset",
]

_OCTAL_DIGITS: frozenset[str] = frozenset("01234567")
_BRACED_HEX_PATTERN = re.compile(r"\{([0-9a-fA-F]+)\}")
_HEX_PATTERN = re.compile(r"[0-9a-fA-F]+")


def _extra_units(code_point: int) -> int:
    """UTF-16 code units beyond the first for a code point."""
    return (code_point.bit_length() - 1) // 16 if code_point > 0xFFFF else 0


def _hex_value(digits: str) -> int:
    return int(digits, 16) if _HEX_PATTERN.fullmatch(digits) else 0


def _skip_octal(raw: str, index: int, value: int) -> int:
    """Consume up to two more octal digits while the value stays <= 0xFF."""
    for _ in range(2):
        if index >= len(raw) or raw[index] not in _OCTAL_DIGITS:
            break
        candidate = value * 8 + int(raw[index])
        if candidate > 0xFF:
            break
        value = candidate
        index += 1
    return index


def _skip_line_break(raw: str, index: int) -> int:
    """Skip the remainder of a CRLF pair whose CR sits at index - 1."""
    if raw[index - 1] == "\r" and raw.startswith("\n", index):
        return index + 1
    return index


# =============================================================================
# JSON / JSON5 / JavaScript strings
# =============================================================================


def get_json_string_offset(raw: str, offset: int) -> int:
    """Map a decoded offset to a raw offset in a JSON-family string literal.

    Escapes handled: ``\\xHH``, ``\\uHHHH``, ``\\u{H...}``, octal ``\\0``
    to ``\\377``, line continuations (backslash + line terminator, zero
    decoded characters) and single-character escapes.

    Args:
        raw: Literal text between the quotes
        offset: Decoded character offset

    Returns:
        Raw character offset, clamped to len(raw)

    Example:
        >>> get_json_string_offset("a\\\\nb", 2)
        3
    """
    length = len(raw)
    index = 0
    remaining = offset
    while remaining > 0 and index < length:
        char = raw[index]
        index += 1
        remaining -= 1
        if char != "\\" or index >= length:
            continue

        escape = raw[index]
        index += 1
        if escape == "x":
            index += 2
        elif escape == "u":
            braced = _BRACED_HEX_PATTERN.match(raw, index)
            if braced is None:
                index += 4
            else:
                index = braced.end()
                remaining -= _extra_units(int(braced.group(1), 16))
        elif escape in _OCTAL_DIGITS:
            index = _skip_octal(raw, index, int(escape))
        elif escape in LINE_TERMINATORS:
            index = _skip_line_break(raw, index)
            remaining += 1
    return min(index, length)


# =============================================================================
# YAML flow and plain scalars
# =============================================================================


def get_yaml_single_quoted_string_offset(raw: str, offset: int) -> int:
    """Map a decoded offset to a raw offset in a single-quoted YAML scalar.

    ``''`` decodes to one quote. Line breaks fold as in plain scalars. An
    offset that lands on a doubled quote is reported after it.

    Example:
        >>> get_yaml_single_quoted_string_offset("it''s", 2)
        4
    """
    length = len(raw)
    index = 0
    remaining = offset
    while remaining > 0 and index < length:
        if raw[index] in BLANKS_AND_BREAKS:
            index, remaining = fold_line_break(raw, index).consume(remaining)
            continue
        index += 2 if raw.startswith("''", index) else 1
        remaining -= 1
    if offset > 0 and raw.startswith("''", index):
        index += 2
    return min(index, length)


def get_yaml_double_quoted_string_offset(raw: str, offset: int) -> int:
    """Map a decoded offset to a raw offset in a double-quoted YAML scalar.

    Escapes handled: ``\\xHH``, ``\\uHHHH``, ``\\UHHHHHHHH``, escaped line
    breaks (zero decoded characters, next line's indentation skipped) and
    single-character escapes. Unescaped line breaks fold.

    Example:
        >>> get_yaml_double_quoted_string_offset("\\\\x41b", 1)
        4
    """
    length = len(raw)
    index = 0
    remaining = offset
    while remaining > 0 and index < length:
        char = raw[index]
        if char in BLANKS_AND_BREAKS:
            index, remaining = fold_line_break(raw, index).consume(remaining)
            continue
        index += 1
        remaining -= 1
        if char != "\\" or index >= length:
            continue

        escape = raw[index]
        index += 1
        if escape in ("\r", "\n"):
            index = _skip_line_break(raw, index)
            while index < length and raw[index] in (" ", "\t"):
                index += 1
            remaining += 1
        elif escape == "x":
            index += 2
        elif escape == "u":
            index += 4
        elif escape == "U":
            remaining -= _extra_units(_hex_value(raw[index : index + 8]))
            index += 8
    return min(index, length)


def get_yaml_plain_string_offset(raw: str, offset: int) -> int:
    """Map a decoded offset to a raw offset in a plain YAML scalar.

    Plain scalars have no escapes; only line folding changes offsets.

    Example:
        >>> get_yaml_plain_string_offset("a\\n  b", 2)
        4
    """
    length = len(raw)
    index = 0
    remaining = offset
    while remaining > 0 and index < length:
        if raw[index] in BLANKS_AND_BREAKS:
            index, remaining = fold_line_break(raw, index).consume(remaining)
            continue
        index += 1
        remaining -= 1
    return min(index, length)
