"""Exception hierarchy for callers that prefer exceptions to diagnostics.

The parser and offset mappers never raise for bad input; these exceptions
exist for opt-in strictness (ParseResult.raise_for_errors) and for broken
internal invariants.

Python 3.13+. Zero external dependencies.
"""

from .codes import CompileError


class I18nSyntaxError(Exception):
    """Base exception for all i18nsyntax errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | CompileError) -> None:
        """Initialize I18nSyntaxError.

        Args:
            message: Error message string OR CompileError object
        """
        if isinstance(message, CompileError):
            self.diagnostic: CompileError | None = message
            position = message.location.start
            super().__init__(f"{position.line}:{position.column}: {message.message}")
        else:
            self.diagnostic = None
            super().__init__(message)


class MessageSyntaxError(I18nSyntaxError):
    """Message string contains invalid syntax.

    Raised only on request, via ParseResult.raise_for_errors().
    """


class IndexMapError(I18nSyntaxError):
    """Diff engine produced an operation the index map cannot apply."""
