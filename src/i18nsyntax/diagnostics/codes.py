"""Diagnostic codes and data structures.

Defines compile error codes and the CompileError record returned by the
message parser. Diagnostics are data: they are co-returned with a
best-effort AST and never raised by the parser itself.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import IntEnum

from i18nsyntax.constants import DIAGNOSTIC_DOMAIN
from i18nsyntax.location import SourceLocation

__all__ = [
    "CompileError",
    "CompileErrorCode",
]


class CompileErrorCode(IntEnum):
    """Error codes shared with the external message compiler.

    Only a few legacy-grammar problems have a dedicated code; everything
    else is reported as UNEXPECTED_LEXICAL_ANALYSIS.
    """

    UNTERMINATED_CLOSING_BRACE = 6
    EMPTY_PLACEHOLDER = 7
    UNEXPECTED_LEXICAL_ANALYSIS = 11


@dataclass(frozen=True, slots=True)
class CompileError:
    """Non-fatal message syntax diagnostic.

    Attributes:
        message: Human-readable error description
        location: Zero-width location at the offending offset
        code: Compile error code
        domain: Always "parser" for diagnostics from this package

    Example:
        CompileError(
            message="Empty placeholder",
            location=SourceLocation(start=Position(1, 7, 6), end=Position(1, 7, 6)),
            code=CompileErrorCode.EMPTY_PLACEHOLDER,
        )
    """

    message: str
    location: SourceLocation
    code: CompileErrorCode = CompileErrorCode.UNEXPECTED_LEXICAL_ANALYSIS
    domain: str = DIAGNOSTIC_DOMAIN

    @property
    def offset(self) -> int:
        """Character offset of the diagnostic in the message string."""
        return self.location.start.offset

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message
