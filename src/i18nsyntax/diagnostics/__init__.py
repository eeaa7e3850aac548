"""Diagnostic system for message syntax errors.

Provides compile error records, codes, message templates, an opt-in
exception hierarchy and output formatting.

Python 3.13+. Zero external dependencies.
"""

from .codes import CompileError, CompileErrorCode
from .errors import I18nSyntaxError, IndexMapError, MessageSyntaxError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "CompileError",
    "CompileErrorCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "I18nSyntaxError",
    "IndexMapError",
    "MessageSyntaxError",
    "OutputFormat",
]
