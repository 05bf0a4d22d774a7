"""Resource syntax package.

Comment declaration grammar and composite-format placeholder scanner.
Both are pure functions of their input text.

Python 3.13+.
"""

from .comment import parse_comment, parse_parameter
from .cursor import Cursor, ParseResult
from .placeholders import PlaceholderMap, ScanError, ScanResult, scan_placeholders

__all__ = [
    "Cursor",
    "ParseResult",
    "PlaceholderMap",
    "ScanError",
    "ScanResult",
    "parse_comment",
    "parse_parameter",
    "scan_placeholders",
]
