"""ISO 8601 parsing and formatting.

Examples:
    >>> from eonix.format import parse_iso8601, format_iso8601
    >>> format_iso8601(parse_iso8601("2024-01-15T14:30:45+01:00"))
    '2024-01-15T13:30:45.000Z'
"""

from __future__ import annotations

from eonix.format.iso8601 import format_iso8601, parse_iso8601

__all__ = [
    "parse_iso8601",
    "format_iso8601",
]
