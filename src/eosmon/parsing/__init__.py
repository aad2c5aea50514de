"""
Parsers for the output of the eos administration tool.

- monitoring: tokenizer for ``-m`` monitoring-format lines
- projectors: static field tables for nodes, spaces, groups and filesystems
- versions: ``eos version`` and the JSON node report
- namespace: ``ns stat -a -m`` row classification
"""

from .monitoring import format_line, split_lines, split_tokens, tokenize
from .namespace import (
    RowKind,
    classify_row,
    parse_namespace,
    project_namespace,
    project_namespace_activity,
)
from .projectors import (
    parse_filesystems,
    parse_groups,
    parse_nodes,
    parse_records,
    parse_spaces,
    project_filesystem,
    project_group,
    project_node,
    project_space,
)
from .versions import (
    decode_node_report,
    parse_mgm_version,
    parse_uptime,
    parse_versions,
    project_version,
    split_hostport,
)

__all__ = [
    # Tokenizer
    "format_line",
    "split_lines",
    "split_tokens",
    "tokenize",
    # Monitoring-format projectors
    "parse_filesystems",
    "parse_groups",
    "parse_nodes",
    "parse_records",
    "parse_spaces",
    "project_filesystem",
    "project_group",
    "project_node",
    "project_space",
    # Versions
    "decode_node_report",
    "parse_mgm_version",
    "parse_uptime",
    "parse_versions",
    "project_version",
    "split_hostport",
    # Namespace
    "RowKind",
    "classify_row",
    "parse_namespace",
    "project_namespace",
    "project_namespace_activity",
]
