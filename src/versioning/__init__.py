"""Check token parsing and per-range latest version selection."""

from .buckets import select_latest
from .errors import InvalidRangeError, MissingFieldError, ParseError, VersionsSourceError
from .models import VersionCheck, lookup_key
from .parser import parse_check
from .ranges import ANY_VERSION, VersionRange, parse_range

__all__ = [
    "ANY_VERSION",
    "InvalidRangeError",
    "MissingFieldError",
    "ParseError",
    "VersionCheck",
    "VersionRange",
    "VersionsSourceError",
    "lookup_key",
    "parse_check",
    "parse_range",
    "select_latest",
]
