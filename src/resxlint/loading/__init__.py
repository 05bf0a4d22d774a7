"""Resource file loading.

Reads .resx containers and groups base files with their translations.

Python 3.13+.
"""

from .groups import ResourceGroup, discover_groups, expand_paths, split_culture
from .resx import ReadResult, parse_resx, read_resx

__all__ = [
    "ReadResult",
    "ResourceGroup",
    "discover_groups",
    "expand_paths",
    "parse_resx",
    "read_resx",
    "split_culture",
]
