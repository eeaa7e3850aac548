"""i18nsyntax - vue-i18n message syntax parsing and source mapping.

Parses legacy (v8) vue-i18n message strings into a located AST with
diagnostics, normalizes modern (v9) trees for modulo detection, and maps
message offsets back into the JSON, YAML or JavaScript literals that hold
them.

Public API:
    parse_message - Parse a legacy message to (AST, diagnostics)
    post_process_modulo - Mark %{name} placeholders on modern-grammar trees
    traverse_node - Pre-order walk of a message AST
    get_report_index - Map a message offset to a host-source offset
    LocationFixer - Map container-content locations to the host file

Exceptions:
    I18nSyntaxError - Base exception class
    MessageSyntaxError - Raised by ParseResult.raise_for_errors()
    IndexMapError - Unexpected diff operation while building an index map

Submodules:
    i18nsyntax.syntax - Parser, AST node types, traversal
    i18nsyntax.offsets - Literal codecs, report-index resolver, location fixer
    i18nsyntax.diagnostics - Compile errors, codes, formatting
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import (
    CompileError,
    CompileErrorCode,
    I18nSyntaxError,
    IndexMapError,
    MessageSyntaxError,
)
from .offsets import (
    LocationFixer,
    get_json_string_offset,
    get_report_index,
    get_yaml_double_quoted_string_offset,
    get_yaml_plain_string_offset,
    get_yaml_single_quoted_string_offset,
)
from .syntax import ParseResult, post_process_modulo, traverse_node
from .syntax import parse as parse_message

# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("i18nsyntax")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CompileError",
    "CompileErrorCode",
    "I18nSyntaxError",
    "IndexMapError",
    "LocationFixer",
    "MessageSyntaxError",
    "ParseResult",
    "__version__",
    "get_json_string_offset",
    "get_report_index",
    "get_yaml_double_quoted_string_offset",
    "get_yaml_plain_string_offset",
    "get_yaml_single_quoted_string_offset",
    "parse_message",
    "post_process_modulo",
    "traverse_node",
]
