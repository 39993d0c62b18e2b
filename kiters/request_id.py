"""Fast request ids: a sequential counter mapped onto a URL-safe alphabet.

Each id character carries 6 bits of the counter, least significant group
first, so ``1`` encodes to ``BAAAAA`` and ``64`` to ``ABAAAA``.

- Narrow ids are 6 characters and keep the low 36 bits (~68 billion ids).
- Wide ids are 11 characters and keep all 64 bits. The last character only
  carries bits 60..63; the two bits above bit 63 are always zero, so it is
  always one of ``A``..``P``.

Generators own their counter. Build one explicitly and pass it to whoever
needs ids::

    generator = RequestIdGenerator()
    generator.next_id_string()  # "BAAAAA"
    generator.next_id_string()  # "CAAAAA"
"""

from __future__ import annotations

import logging
import threading
from enum import IntEnum

from kiters.exceptions import InvalidWidthError

logger = logging.getLogger(__name__)

# URL-safe alphabet (64 characters = 6 bits per character)
ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"
_ALPHABET_BYTES = ALPHABET.encode("ascii")

BITS_PER_CHAR = 6
_CHAR_MASK = 0x3F
MASK_64 = 0xFFFF_FFFF_FFFF_FFFF

# splitmix64 constants
_GOLDEN_GAMMA = 0x9E3779B97F4A7C15
_MIX_MUL_1 = 0xBF58476D1CE4E5B9
_MIX_MUL_2 = 0x94D049BB133111EB


class Width(IntEnum):
    """Number of characters in an encoded id."""

    NARROW = 6
    WIDE = 11


_SHIFTS = {
    width: tuple(range(0, width * BITS_PER_CHAR, BITS_PER_CHAR)) for width in Width
}


def validate_width(width) -> Width:
    """Return ``width`` as a :class:`Width` or raise :class:`InvalidWidthError`."""
    if isinstance(width, bool):
        raise InvalidWidthError(width)
    if isinstance(width, str):
        try:
            width = int(width)
        except ValueError:
            raise InvalidWidthError(width) from None
    try:
        return Width(width)
    except (TypeError, ValueError):
        raise InvalidWidthError(width) from None


def encode(value: int, width: Width = Width.NARROW) -> bytes:
    """Encode the 64-bit reduction of ``value`` into ``width`` alphabet bytes."""
    if width.__class__ is not Width:
        width = validate_width(width)
    shifts = _SHIFTS[width]

    value &= MASK_64
    return bytes(_ALPHABET_BYTES[(value >> shift) & _CHAR_MASK] for shift in shifts)


def mix(value: int) -> int:
    """splitmix64 finalizer: scrambles sequential values, bijective on 64 bits.

    Deterministic and stateless. Not a cryptographic hash.
    """
    z = (value + _GOLDEN_GAMMA) & MASK_64
    z = ((z ^ (z >> 30)) * _MIX_MUL_1) & MASK_64
    z = ((z ^ (z >> 27)) * _MIX_MUL_2) & MASK_64
    return z ^ (z >> 31)


def encode_request_id(n: int) -> bytes:
    return encode(n, Width.NARROW)


def encode_request_id_wide(n: int) -> bytes:
    return encode(n, Width.WIDE)


def encode_request_id_mixed(n: int) -> bytes:
    """Encode with mixing for random-looking output (still deterministic)."""
    return encode(mix(n), Width.NARROW)


def encode_request_id_mixed_wide(n: int) -> bytes:
    return encode(mix(n), Width.WIDE)


def as_str(request_id: bytes) -> str:
    """View encoded id bytes as text. Alphabet bytes are all ASCII."""
    return request_id.decode("ascii")


class RequestIdGenerator:
    """Thread-safe request id generator.

    The counter starts at 0 and the first id handed out encodes 1. After
    ``2**64 - 1`` the counter wraps to 0 and ids repeat.
    """

    def __init__(self, width: Width = Width.NARROW, mixed: bool = False):
        self._width = validate_width(width)
        self._mixed = bool(mixed)
        self._counter = 0
        self._lock = threading.Lock()
        logger.debug(
            "Created request id generator (width=%d, mixed=%s)",
            self._width,
            self._mixed,
        )

    @classmethod
    def new_mixed(cls, width: Width = Width.NARROW) -> RequestIdGenerator:
        """Create a generator with mixing enabled (random-looking output)."""
        return cls(width=width, mixed=True)

    @property
    def width(self) -> Width:
        return self._width

    @property
    def mixed(self) -> bool:
        return self._mixed

    def next_value(self) -> int:
        """Advance the counter by one and return the new value."""
        with self._lock:
            self._counter = (self._counter + 1) & MASK_64
            return self._counter

    def next_id(self) -> bytes:
        """Generate the next request id."""
        value = self.next_value()
        if self._mixed:
            value = mix(value)
        return encode(value, self._width)

    def next_id_string(self) -> str:
        """Generate the next request id as a string."""
        return as_str(self.next_id())

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(width={self._width.name}, mixed={self._mixed})"
        )


class WideRequestIdGenerator(RequestIdGenerator):
    """Generator producing 11-character ids that keep every counter bit."""

    def __init__(self, mixed: bool = False):
        super().__init__(width=Width.WIDE, mixed=mixed)

    @classmethod
    def new_mixed(cls, width: Width = Width.WIDE) -> WideRequestIdGenerator:
        if validate_width(width) is not Width.WIDE:
            raise InvalidWidthError(width)
        return cls(mixed=True)
