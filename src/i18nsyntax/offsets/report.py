"""Report-index resolver: message offset to host-source offset.

Dispatches on the shape of the host literal that holds a message and maps
an offset in the decoded message to an absolute offset in the host source.
Shapes whose decoded text is not a contiguous image of the raw text
(template literals with expressions, block scalars) are not supported and
resolve to None.

Python 3.13+. Zero external dependencies.
"""

import logging
from collections.abc import Callable
from functools import partial

from i18nsyntax.enums import ScalarStyle

from .codecs import (
    get_json_string_offset,
    get_yaml_double_quoted_string_offset,
    get_yaml_plain_string_offset,
    get_yaml_single_quoted_string_offset,
)
from .nodes import HostLiteral, JSONStringLiteral, JSONTemplateLiteral, YAMLScalar

__all__ = ["get_report_index", "report_offset_getter"]

logger = logging.getLogger(__name__)


def get_report_index(node: HostLiteral | object, offset: int) -> int | None:
    """Map a decoded message offset to a host-source offset.

    Args:
        node: Host literal record holding the message
        offset: Offset in the decoded message

    Returns:
        Absolute host-source offset, or None for unsupported node shapes

    Example:
        >>> get_report_index(JSONStringLiteral(raw='"a\\\\nb"', range=(10, 16)), 2)
        14
    """
    match node:
        case JSONStringLiteral(raw=raw, range=(start, _)):
            return start + 1 + get_json_string_offset(raw[1:-1], offset)
        case JSONTemplateLiteral(raw=raw, range=(start, _), expressions=()):
            return start + 1 + get_json_string_offset(raw[1:-1], offset)
        case YAMLScalar(raw=raw, range=(start, _), style=ScalarStyle.SINGLE_QUOTED):
            return start + 1 + get_yaml_single_quoted_string_offset(raw[1:-1], offset)
        case YAMLScalar(raw=raw, range=(start, _), style=ScalarStyle.DOUBLE_QUOTED):
            return start + 1 + get_yaml_double_quoted_string_offset(raw[1:-1], offset)
        case YAMLScalar(raw=raw, range=(start, _), style=ScalarStyle.PLAIN):
            return start + get_yaml_plain_string_offset(raw, offset)

    logger.debug("No report index for %s", type(node).__name__)
    return None


def report_offset_getter(node: HostLiteral) -> Callable[[int], int | None]:
    """Bind get_report_index to one host literal.

    Rules that report several diagnostics inside one message can map each
    diagnostic offset through the returned callable.
    """
    return partial(get_report_index, node)
