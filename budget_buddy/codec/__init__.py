"""Codec package: in-memory <-> persisted transactions."""

from budget_buddy.codec.transactions import (
    CodecError,
    decode,
    decode_type,
    encode,
)

__all__ = ["CodecError", "decode", "decode_type", "encode"]
