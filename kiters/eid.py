"""External ids: a readable prefix plus random UUID bytes, e.g. ``aid-2k9x...``."""

from __future__ import annotations

import string
import uuid as _uuid

from pydantic import BaseModel, ConfigDict, Field, field_validator

BASE36_ALPHABET = string.digits + string.ascii_lowercase
_BASE = len(BASE36_ALPHABET)
UUID_BYTES = 16


def base36_encode(data: bytes) -> str:
    """Big-endian base36 of ``data``; each leading zero byte becomes a ``0``."""
    zeros = len(data) - len(data.lstrip(b"\x00"))
    num = int.from_bytes(data, "big")
    chars: list[str] = []
    while num:
        num, idx = divmod(num, _BASE)
        chars.append(BASE36_ALPHABET[idx])
    return "0" * zeros + "".join(reversed(chars))


class ExternalId(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    prefix: str
    bytes_: bytes = Field(alias="bytes", description="Raw UUID bytes.")

    @field_validator("bytes_")
    @classmethod
    def check_length(cls, value: bytes) -> bytes:
        if len(value) != UUID_BYTES:
            raise ValueError(f"expected {UUID_BYTES} bytes, got {len(value)}")
        return value

    @classmethod
    def new(cls, prefix: str) -> ExternalId:
        """Generate a new external id with the given prefix."""
        return cls(prefix=prefix, bytes_=_uuid.uuid4().bytes)

    def to_string(self) -> str:
        return f"{self.prefix}-{base36_encode(self.bytes_)}"

    def uuid(self) -> _uuid.UUID:
        return _uuid.UUID(bytes=self.bytes_)

    def __str__(self) -> str:
        return self.to_string()
