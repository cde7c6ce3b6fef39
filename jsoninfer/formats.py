"""String format detection.

Classifies a string into one of the JSON Schema formats the inferrer emits:
date-time, email, uuid, uri, ipv4 and ipv6. Detection order matters for
ambiguous strings; the first matching pattern wins.
"""

import re
from typing import Iterable, Optional

_OCTET = r'(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)'

# Compiled once; all patterns are applied with fullmatch
_DATETIME_PATTERN = re.compile(
    r'[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}(?:\.[0-9]{3})?(?:Z|[+-][0-9]{2}:[0-9]{2})')
_EMAIL_PATTERN = re.compile(r'[^\s@]+@[^\s@]+\.[^\s@]+')
_UUID_PATTERN = re.compile(
    r'[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}', re.IGNORECASE)
_URI_PATTERN = re.compile(r'https?://.+', re.DOTALL)
_IPV4_PATTERN = re.compile(rf'(?:{_OCTET}\.){{3}}{_OCTET}')
_IPV6_PATTERN = re.compile(r'(?:[0-9a-fA-F]{1,4}:){7}[0-9a-fA-F]{1,4}')

# (format name, pattern) in priority order
STRING_FORMATS = (
    ("date-time", _DATETIME_PATTERN),
    ("email", _EMAIL_PATTERN),
    ("uuid", _UUID_PATTERN),
    ("uri", _URI_PATTERN),
    ("ipv4", _IPV4_PATTERN),
    ("ipv6", _IPV6_PATTERN),
)


def detect_format(value: str) -> Optional[str]:
    """Detects the format of a string value.

    Args:
        value: String value to analyze

    Returns:
        The format name, or None if the string matches no known format
    """
    for format_name, pattern in STRING_FORMATS:
        if pattern.fullmatch(value):
            return format_name
    return None


def merge_formats(formats: Iterable[Optional[str]]) -> Optional[str]:
    """Reduces the format outcomes observed at one position to a single format.

    A format is only returned when every observed outcome agrees on it. A
    ``None`` outcome (a string without a recognizable format) counts as a
    distinct member, so it vetoes any format.
    """
    distinct = set(formats)
    if len(distinct) == 1:
        return next(iter(distinct))
    return None
