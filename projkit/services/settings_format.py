"""Line-oriented ``key=value`` settings format.

Only the ``verbose`` key is recognised. Lines without ``=``, unknown keys and
values that do not start with a base-10 integer are ignored.
"""
from __future__ import annotations

import logging
import re
from typing import Optional

SETTINGS_FILENAME = "settings.toml"
DEFAULT_VERBOSITY = 1
VERBOSE_KEY = "verbose"

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

# Leading digits only: "3abc" reads as 3, " 3" is rejected.
_INTEGER_PAT = re.compile(r"-?[0-9]+")

logger = logging.getLogger(__name__)


def parse_int_prefix(value: str) -> Optional[int]:
    """Return the integer at the start of ``value``, or None if absent or outside 32-bit range."""
    match = _INTEGER_PAT.match(value)
    if match is None:
        return None
    number = int(match.group())
    if not INT_MIN <= number <= INT_MAX:
        return None
    return number


def parse_verbosity(text: str) -> Optional[int]:
    """Return the verbosity from the last valid ``verbose=N`` line, or None."""
    verbosity: Optional[int] = None
    for lineno, line in enumerate(text.split("\n"), start=1):
        key, sep, value = line.partition("=")
        if not sep or key != VERBOSE_KEY:
            continue
        number = parse_int_prefix(value)
        if number is None:
            logger.debug("Ignoring malformed verbose value", extra={"line": lineno})
            continue
        verbosity = number
    return verbosity


def format_settings(verbosity: int) -> str:
    return f"{VERBOSE_KEY}={verbosity}"


__all__ = [
    "SETTINGS_FILENAME",
    "DEFAULT_VERBOSITY",
    "VERBOSE_KEY",
    "parse_int_prefix",
    "parse_verbosity",
    "format_settings",
]
