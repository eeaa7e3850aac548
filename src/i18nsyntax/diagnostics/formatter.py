"""Diagnostic formatting service.

Centralizes compile error output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import CompileError

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Compile error formatting service.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate messages to prevent leaking long message content
        color: Enable ANSI color codes (for terminal output)
        max_content_length: Maximum content length when sanitizing

    Example:
        >>> from i18nsyntax import parse_message
        >>> _, errors = parse_message("hello { }")
        >>> print(DiagnosticFormatter().format(errors[0]))
        error[EMPTY_PLACEHOLDER]: Empty placeholder
          --> line 1, column 9

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(errors[0]))
        EMPTY_PLACEHOLDER: Empty placeholder
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(self, error: CompileError) -> str:
        """Format a single compile error."""
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(error)
            case OutputFormat.SIMPLE:
                return self._format_simple(error)
            case OutputFormat.JSON:
                return self._format_json(error)

    def format_all(self, errors: Iterable[CompileError]) -> str:
        """Format multiple compile errors separated by blank lines."""
        return "\n\n".join(self.format(e) for e in errors)

    def _format_rust(self, error: CompileError) -> str:
        severity_str = "\033[1;31merror\033[0m" if self.color else "error"
        message = self._maybe_sanitize(error.message)
        start = error.location.start
        return (
            f"{severity_str}[{error.code.name}]: {message}\n"
            f"  --> line {start.line}, column {start.column}"
        )

    def _format_simple(self, error: CompileError) -> str:
        message = self._maybe_sanitize(error.message)
        return f"{error.code.name}: {message}"

    def _format_json(self, error: CompileError) -> str:
        start = error.location.start
        data: dict[str, str | int] = {
            "code": error.code.name,
            "code_value": error.code.value,
            "message": self._maybe_sanitize(error.message),
            "domain": error.domain,
            "line": start.line,
            "column": start.column,
            "offset": start.offset,
        }
        return json.dumps(data, ensure_ascii=False)

    def _maybe_sanitize(self, text: str) -> str:
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
