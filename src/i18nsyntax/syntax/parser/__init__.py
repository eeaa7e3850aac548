"""Legacy (v8) message parser module.

Module Organization:
- core.py: LegacyMessageParser scan loop and ParseResult
- rules.py: Placeholder and linked message rules, ScanContext

Public API:
    LegacyMessageParser: Main parser class
    ParseResult: AST plus diagnostics
    ScanContext: Per-call scan state (advanced usage)
"""

from i18nsyntax.syntax.parser.core import LegacyMessageParser, ParseResult
from i18nsyntax.syntax.parser.rules import ScanContext

__all__ = ["LegacyMessageParser", "ParseResult", "ScanContext"]
