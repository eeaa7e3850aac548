"""Locale Linting Example - Reporting Message Errors in Host Files.

Demonstrates the flow a locale-file linter follows:

1. Decode a message from its host literal (JSON or YAML)
2. Parse the decoded message and collect diagnostics
3. Map each diagnostic offset back to the raw host source
4. Walk the AST to inspect placeholders and linked messages

Host parsing here is deliberately minimal: JSON values are located with
json.JSONDecoder.raw_decode, YAML values are given by hand.

Python 3.13+.
"""

from __future__ import annotations

import json
import re


def example_1_json_report() -> None:
    """Report parse errors at their position in a JSON file."""
    from i18nsyntax import get_report_index, parse_message
    from i18nsyntax.diagnostics import DiagnosticFormatter, OutputFormat
    from i18nsyntax.location import LineIndex
    from i18nsyntax.offsets import JSONStringLiteral

    print("=" * 60)
    print("Example 1: JSON Locale File")
    print("=" * 60)

    host = (
        "{\n"
        '  "greeting": "Hello {name}!",\n'
        '  "broken": "Caf\\u00e9 { name}",\n'
        '  "empty": "Tab\\there: {}"\n'
        "}\n"
    )

    decoder = json.JSONDecoder()
    host_lines = LineIndex(host)
    formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)

    for match in re.finditer(r'"(\w+)":\s*', host):
        start = match.end()
        value, end = decoder.raw_decode(host, start)
        literal = JSONStringLiteral(raw=host[start:end], range=(start, end), value=value)

        _ast, errors = parse_message(value)
        if not errors:
            print(f"  {match.group(1)}: ok")
            continue

        for error in errors:
            index = get_report_index(literal, error.offset)
            if index is None:
                continue
            line, column = host_lines.line_col(index)
            print(f"  {match.group(1)} ({line}:{column}): {formatter.format(error)}")

    print()


def example_2_yaml_report() -> None:
    """Report parse errors inside folded YAML scalars."""
    from i18nsyntax import get_report_index, parse_message
    from i18nsyntax.enums import ScalarStyle
    from i18nsyntax.offsets import YAMLScalar

    print("=" * 60)
    print("Example 2: YAML Locale File")
    print("=" * 60)

    host = "farewell: 'Bye ''now'',\n  {who'\n"
    start = host.index("'")
    end = host.rindex("'") + 1
    scalar = YAMLScalar.from_source(host, start, end, ScalarStyle.SINGLE_QUOTED)
    value = "Bye 'now', {who"

    for error in parse_message(value).errors:
        index = get_report_index(scalar, error.offset)
        print(f"  {error.message} at host offset {index} -> {host[index:index + 4]!r}")

    print()


def example_3_placeholder_inventory() -> None:
    """Collect placeholder keys and linked message keys."""
    from i18nsyntax import parse_message
    from i18nsyntax.syntax import ASTVisitor, Linked, List, Named

    print("=" * 60)
    print("Example 3: Placeholder Inventory")
    print("=" * 60)

    class Inventory(ASTVisitor):
        def __init__(self) -> None:
            self.named: list[str] = []
            self.indexes: list[int] = []
            self.linked: list[str] = []

        def visit_Named(self, node: Named) -> None:
            prefix = "%" if node.modulo else ""
            self.named.append(prefix + node.key)

        def visit_List(self, node: List) -> None:
            self.indexes.append(node.index)

        def visit_Linked(self, node: Linked) -> None:
            self.linked.append(node.key.value)
            self.generic_visit(node)

    inventory = Inventory()
    inventory.visit(parse_message("{0} apple | %{count} apples, see @.lower:fruit.name").ast)

    print(f"  Named placeholders: {inventory.named}")
    print(f"  List placeholders:  {inventory.indexes}")
    print(f"  Linked messages:    {inventory.linked}")
    print()


def main() -> None:
    """Run all linting examples."""
    print()
    print("i18nsyntax Locale Linting Examples")
    print()

    example_1_json_report()
    example_2_yaml_report()
    example_3_placeholder_inventory()

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
