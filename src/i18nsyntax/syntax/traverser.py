"""Pre-order traversal of message ASTs.

Two equivalent entry points:
- traverse_node(): callback walker used by rule logic
- ASTVisitor: class-dispatch visitor following the stdlib ast.NodeVisitor
  naming convention (visit_Named, visit_Linked, ...)

Both descend Resource → body, Plural → cases, Message → items and
Linked → modifier (if present) → key. Leaf nodes have no children.

Python 3.13+.
"""

from collections.abc import Callable, Iterator
from typing import ClassVar

from .ast import (
    ASTNode,
    Linked,
    Message,
    Plural,
    Resource,
)

__all__ = ["ASTVisitor", "iter_children", "iter_nodes", "traverse_node"]


def iter_children(node: ASTNode) -> Iterator[ASTNode]:
    """Yield the direct children of node in traversal order."""
    match node:
        case Resource(body=body):
            yield body
        case Plural(cases=cases):
            yield from cases
        case Message(items=items):
            yield from items
        case Linked(key=key, modifier=modifier):
            if modifier is not None:
                yield modifier
            yield key
        case _:
            return


def traverse_node(node: ASTNode | None, visit: Callable[[ASTNode], object]) -> None:
    """Call visit on node and every descendant, pre-order.

    No-op when node is None.

    Example:
        >>> from i18nsyntax.syntax import Named, parse
        >>> names = []
        >>> traverse_node(parse("{a} and {b}").ast,
        ...               lambda n: names.append(n.key) if Named.guard(n) else None)
        >>> names
        ['a', 'b']
    """
    if node is None:
        return
    visit(node)
    for child in iter_children(node):
        traverse_node(child, visit)


def iter_nodes(node: ASTNode | None) -> Iterator[ASTNode]:
    """Generator form of traverse_node (same pre-order)."""
    if node is None:
        return
    yield node
    for child in iter_children(node):
        yield from iter_nodes(child)


class ASTVisitor:
    """Base visitor for traversing message ASTs.

    generic_visit() automatically traverses all child nodes. Override
    visit_NodeType methods to add behavior; call generic_visit() from an
    override to keep descending.

    Dispatch table is built once per class definition via __init_subclass__.

    Example:
        >>> from i18nsyntax.syntax import Named, parse
        >>> class CountPlaceholders(ASTVisitor):
        ...     def __init__(self) -> None:
        ...         self.count = 0
        ...
        ...     def visit_Named(self, node: Named) -> None:
        ...         self.count += 1
        ...
        >>> visitor = CountPlaceholders()
        >>> visitor.visit(parse("{a} {b} | {c}").ast)
        >>> visitor.count
        3
    """

    _class_visit_methods: ClassVar[dict[str, str]] = {}

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Build class-level dispatch table when subclass is defined."""
        super().__init_subclass__(**kwargs)
        cls._class_visit_methods = {}
        for name in dir(cls):
            if name.startswith("visit_"):
                cls._class_visit_methods[name[6:]] = name

    def visit(self, node: ASTNode) -> None:
        """Dispatch to visit_<NodeClass> or generic_visit."""
        method_name = self._class_visit_methods.get(type(node).__name__)
        if method_name is None:
            self.generic_visit(node)
        else:
            getattr(self, method_name)(node)

    def generic_visit(self, node: ASTNode) -> None:
        """Visit every child of node in traversal order."""
        for child in iter_children(node):
            self.visit(child)
