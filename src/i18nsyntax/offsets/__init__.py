"""Host-source offset mapping.

Module Organization:
- codecs.py: Decoded-offset to raw-offset codecs per literal dialect
- folding.py: YAML line folding shared by the YAML codecs
- nodes.py: Host literal records (JSON strings, template literals, YAML scalars)
- report.py: Report-index resolver dispatching on the literal shape
- location_fixer.py: Remapping of locations from container content to the host file
"""

from .codecs import (
    get_json_string_offset,
    get_yaml_double_quoted_string_offset,
    get_yaml_plain_string_offset,
    get_yaml_single_quoted_string_offset,
)
from .folding import FoldedBreak, fold_line_break
from .location_fixer import DiffSegment, IndexMap, LocatedNode, LocationFixer
from .nodes import HostLiteral, JSONStringLiteral, JSONTemplateLiteral, YAMLScalar
from .report import get_report_index, report_offset_getter

__all__ = [
    "DiffSegment",
    "FoldedBreak",
    "HostLiteral",
    "IndexMap",
    "JSONStringLiteral",
    "JSONTemplateLiteral",
    "LocatedNode",
    "LocationFixer",
    "YAMLScalar",
    "fold_line_break",
    "get_json_string_offset",
    "get_report_index",
    "get_yaml_double_quoted_string_offset",
    "get_yaml_plain_string_offset",
    "get_yaml_single_quoted_string_offset",
    "report_offset_getter",
]
