"""Binary codec for control group 201.

This module provides decoding and encoding of control payloads, plus the
length-prefixed string primitives shared by the variable-length subtypes.
"""

from __future__ import annotations

from .decoder import decode
from .encoder import encode
from .stream import ByteReader, ByteWriter
from .strings import field_size, read_string, string_to_bytes, write_string

__all__ = [
    "encode",
    "decode",
    "ByteReader",
    "ByteWriter",
    "read_string",
    "string_to_bytes",
    "write_string",
    "field_size",
]
