"""Tests for compile errors, templates, exceptions and formatting."""

from __future__ import annotations

import json
from collections.abc import Callable

import pytest
from hypothesis import event, given

from i18nsyntax.diagnostics import (
    CompileError,
    CompileErrorCode,
    DiagnosticFormatter,
    ErrorTemplate,
    I18nSyntaxError,
    IndexMapError,
    MessageSyntaxError,
    OutputFormat,
)
from i18nsyntax.location import LineIndex
from i18nsyntax.syntax import parse
from tests.strategies.messages import legacy_messages


class TestErrorTemplate:
    """Diagnostic factories."""

    @pytest.mark.parametrize(
        ("factory", "message", "code"),
        [
            (
                ErrorTemplate.unterminated_closing_brace,
                "Unterminated closing brace",
                CompileErrorCode.UNTERMINATED_CLOSING_BRACE,
            ),
            (
                ErrorTemplate.empty_placeholder,
                "Empty placeholder",
                CompileErrorCode.EMPTY_PLACEHOLDER,
            ),
            (
                ErrorTemplate.placeholder_key_spacing,
                "Unexpected space before or after the placeholder key",
                CompileErrorCode.UNEXPECTED_LEXICAL_ANALYSIS,
            ),
            (
                ErrorTemplate.unexpected_placeholder_key,
                "Unexpected placeholder key",
                CompileErrorCode.UNEXPECTED_LEXICAL_ANALYSIS,
            ),
            (
                ErrorTemplate.negative_list_index,
                "Unexpected minus placeholder index",
                CompileErrorCode.UNEXPECTED_LEXICAL_ANALYSIS,
            ),
            (
                ErrorTemplate.empty_linked_modifier,
                "Expected linked modifier value",
                CompileErrorCode.UNEXPECTED_LEXICAL_ANALYSIS,
            ),
            (
                ErrorTemplate.empty_linked_key,
                "Expected linked key value",
                CompileErrorCode.UNEXPECTED_LEXICAL_ANALYSIS,
            ),
            (
                ErrorTemplate.unterminated_closing_paren,
                "Unterminated closing paren",
                CompileErrorCode.UNEXPECTED_LEXICAL_ANALYSIS,
            ),
        ],
    )
    def test_template(
        self,
        factory: Callable[[LineIndex, int], CompileError],
        message: str,
        code: CompileErrorCode,
    ) -> None:
        """Each factory yields a zero-width error with its message and code."""
        error = factory(LineIndex("ab\ncd"), 4)

        assert error.message == message
        assert error.code == code
        assert error.domain == "parser"
        assert error.offset == 4
        assert error.location.start == error.location.end
        assert (error.location.start.line, error.location.start.column) == (2, 2)

    def test_str_is_message(self) -> None:
        """str(CompileError) is the bare message."""
        error = ErrorTemplate.empty_placeholder(LineIndex("{}"), 1)
        assert str(error) == "Empty placeholder"

    @given(source=legacy_messages())
    def test_parser_codes_are_known(self, source: str) -> None:
        """Every emitted diagnostic carries a known code and domain."""
        errors = parse(source).errors
        event(f"error_count={min(len(errors), 4)}")
        for error in errors:
            assert isinstance(error.code, CompileErrorCode)
            assert error.domain == "parser"


class TestExceptions:
    """Opt-in exception hierarchy."""

    def test_hierarchy(self) -> None:
        """Both concrete errors derive from the base class."""
        assert issubclass(MessageSyntaxError, I18nSyntaxError)
        assert issubclass(IndexMapError, I18nSyntaxError)

    def test_plain_message(self) -> None:
        """A string message has no diagnostic attached."""
        error = IndexMapError("boom")
        assert str(error) == "boom"
        assert error.diagnostic is None

    def test_from_compile_error(self) -> None:
        """A CompileError becomes 'line:column: message'."""
        diagnostic = parse("x\n{}").errors[0]
        error = MessageSyntaxError(diagnostic)

        assert error.diagnostic is diagnostic
        assert str(error) == "2:2: Empty placeholder"


class TestDiagnosticFormatter:
    """Output formats."""

    @staticmethod
    def _error() -> CompileError:
        return parse("hello { }").errors[0]

    def test_rust_format(self) -> None:
        """Rust style shows code, message and position."""
        assert DiagnosticFormatter().format(self._error()) == (
            "error[EMPTY_PLACEHOLDER]: Empty placeholder\n  --> line 1, column 9"
        )

    def test_rust_format_with_color(self) -> None:
        """Color wraps the severity in ANSI codes."""
        output = DiagnosticFormatter(color=True).format(self._error())
        assert output.startswith("\033[1;31merror\033[0m[EMPTY_PLACEHOLDER]")

    def test_simple_format(self) -> None:
        """Simple style is a single line."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        assert formatter.format(self._error()) == "EMPTY_PLACEHOLDER: Empty placeholder"

    def test_json_format(self) -> None:
        """JSON style carries every field."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(self._error()))

        assert data == {
            "code": "EMPTY_PLACEHOLDER",
            "code_value": 7,
            "message": "Empty placeholder",
            "domain": "parser",
            "line": 1,
            "column": 9,
            "offset": 8,
        }

    def test_sanitize_truncates(self) -> None:
        """Sanitizing truncates long messages."""
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=5
        )
        assert formatter.format(self._error()) == "EMPTY_PLACEHOLDER: Empty..."

    def test_format_all(self) -> None:
        """Multiple errors are separated by blank lines."""
        errors = parse("{ foo").errors
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)

        assert formatter.format_all(errors) == (
            "UNTERMINATED_CLOSING_BRACE: Unterminated closing brace\n\n"
            "UNEXPECTED_LEXICAL_ANALYSIS: "
            "Unexpected space before or after the placeholder key"
        )

    def test_format_all_empty(self) -> None:
        """No errors format to an empty string."""
        assert DiagnosticFormatter().format_all(()) == ""
