"""Compact identifiers for tracing and correlating events in a process.

- :mod:`kiters.request_id`: fast, thread-safe, counter based request ids.
- :mod:`kiters.eid`: prefixed external ids backed by random UUIDs.
- :mod:`kiters.timestamp`: UTC timestamps formatted as ``YYYY-MM-DDTHH:MM:SSZ``.
"""

__version__ = "0.1.0"

from kiters.eid import ExternalId
from kiters.exceptions import InvalidWidthError, KitersError
from kiters.request_id import (
    ALPHABET,
    RequestIdGenerator,
    WideRequestIdGenerator,
    Width,
    as_str,
    encode,
    mix,
)
from kiters.timestamp import get_utc_timestamp

__all__ = [
    "ALPHABET",
    "ExternalId",
    "InvalidWidthError",
    "KitersError",
    "RequestIdGenerator",
    "WideRequestIdGenerator",
    "Width",
    "as_str",
    "encode",
    "get_utc_timestamp",
    "mix",
]
