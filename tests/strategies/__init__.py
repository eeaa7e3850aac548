"""Hypothesis strategies for i18nsyntax property-based testing.

Strategies are organized by domain:

- messages: legacy (v8) message sources, with and without modulo syntax
- literals: encoded host literals paired with their decoded boundaries

Usage:
    from tests.strategies import legacy_messages, json_literals
    from tests.strategies.literals import EncodedLiteral

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - legacy_messages
    - json_literals, yaml_double_quoted_literals
    - yaml_single_quoted_literals, yaml_plain_literals
"""

from .literals import (
    EncodedLiteral,
    json_literals,
    yaml_double_quoted_literals,
    yaml_plain_literals,
    yaml_single_quoted_literals,
)
from .messages import legacy_messages, modulo_messages, plain_texts

__all__ = [
    "EncodedLiteral",
    "json_literals",
    "legacy_messages",
    "modulo_messages",
    "plain_texts",
    "yaml_double_quoted_literals",
    "yaml_plain_literals",
    "yaml_single_quoted_literals",
]
