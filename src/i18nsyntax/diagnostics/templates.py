"""Error message templates.

Centralized diagnostic templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from i18nsyntax.location import LineIndex, SourceLocation

from .codes import CompileError, CompileErrorCode


def _at(index: LineIndex, offset: int) -> SourceLocation:
    return index.location(offset, offset)


class ErrorTemplate:
    """Centralized compile error templates.

    All parser diagnostics are created here. Each template takes the
    LineIndex of the message being parsed and the offending offset, and
    returns a zero-width CompileError at that offset.
    """

    @staticmethod
    def unterminated_closing_brace(index: LineIndex, offset: int) -> CompileError:
        """Placeholder opened with { but no } follows.

        Args:
            index: Line index of the message
            offset: Offset just after the opening brace

        Returns:
            CompileError for UNTERMINATED_CLOSING_BRACE
        """
        return CompileError(
            message="Unterminated closing brace",
            location=_at(index, offset),
            code=CompileErrorCode.UNTERMINATED_CLOSING_BRACE,
        )

    @staticmethod
    def empty_placeholder(index: LineIndex, offset: int) -> CompileError:
        """Placeholder with a blank key: { }.

        Args:
            index: Line index of the message
            offset: Offset of the closing brace

        Returns:
            CompileError for EMPTY_PLACEHOLDER
        """
        return CompileError(
            message="Empty placeholder",
            location=_at(index, offset),
            code=CompileErrorCode.EMPTY_PLACEHOLDER,
        )

    @staticmethod
    def placeholder_key_spacing(index: LineIndex, offset: int) -> CompileError:
        """Whitespace around the placeholder key: { name }."""
        return CompileError(
            message="Unexpected space before or after the placeholder key",
            location=_at(index, offset),
        )

    @staticmethod
    def unexpected_placeholder_key(index: LineIndex, offset: int) -> CompileError:
        """Named key that is not an identifier: {foo.bar}."""
        return CompileError(
            message="Unexpected placeholder key",
            location=_at(index, offset),
        )

    @staticmethod
    def negative_list_index(index: LineIndex, offset: int) -> CompileError:
        """List placeholder with a negative index: {-1}."""
        return CompileError(
            message="Unexpected minus placeholder index",
            location=_at(index, offset),
        )

    @staticmethod
    def empty_linked_modifier(index: LineIndex, offset: int) -> CompileError:
        """Linked message with "@." but no modifier name."""
        return CompileError(
            message="Expected linked modifier value",
            location=_at(index, offset),
        )

    @staticmethod
    def empty_linked_key(index: LineIndex, offset: int) -> CompileError:
        """Linked message with no key: "@:" or "@.upper" without ":"."""
        return CompileError(
            message="Expected linked key value",
            location=_at(index, offset),
        )

    @staticmethod
    def unterminated_closing_paren(index: LineIndex, offset: int) -> CompileError:
        """Parenthesized linked key without ")": @:(foo."""
        return CompileError(
            message="Unterminated closing paren",
            location=_at(index, offset),
        )
