"""Control payload encoder.

This module provides the encode() function that writes a control value back to
its binary form, discriminant first.
"""

from __future__ import annotations

import logging
from typing import BinaryIO

from ..exceptions import EncodeError
from ..header import HeaderLike
from ..models import (
    Capitalize,
    DecodedControl,
    Definite,
    Downcase,
    Gender,
    Indefinite,
    Info,
    LongVowel,
    Pluralize,
)
from . import subtypes
from .stream import ByteWriter

logger = logging.getLogger(__name__)


def encode(value: DecodedControl, header: HeaderLike, sink: BinaryIO | None = None) -> bytes:
    """Encode a control value, discriminant included.

    Length fields are recomputed from the value's contents, so decoding and
    re-encoding a non-canonical payload (such as a UTF-8 string with a trailing
    NUL) yields the canonical form.

    Args:
        value: Control value or LongVowel result to encode
        header: Supplies byte order and text encoding
        sink: Optional binary stream the encoded bytes are also written to

    Returns:
        Encoded bytes

    Raises:
        EncodeError: If a field cannot be encoded or the sink write fails

    Examples:
        ```python
        from msbtcontrol import Definite, Header, encode

        data = encode(Definite(), Header())
        # data == b"\\x00\\x01\\x00\\x00"
        ```
    """
    kind = getattr(value, "kind", None)
    if not isinstance(kind, int):
        raise EncodeError(f"unsupported control type {type(value).__name__}")

    writer = ByteWriter()

    try:
        writer.write_u16(kind, header.endianness)
    except ValueError as e:
        raise EncodeError(f"could not write marker for subtype {kind}: {e}") from e

    try:
        _write_payload(value, header, writer)
    except (EncodeError, ValueError) as e:
        raise EncodeError(f"could not write subtype {kind}: {e}") from e

    data = writer.to_bytes()

    if sink is not None:
        _write_to_sink(sink, data, kind)

    logger.debug("Encoded control kind %d (%s), %d bytes", kind, type(value).__name__, len(data))
    return data


def _write_payload(value: DecodedControl, header: HeaderLike, writer: ByteWriter) -> None:
    """Write the payload that follows the discriminant.

    Raises:
        EncodeError: If the value is not a control type
    """
    if isinstance(value, Info):
        subtypes.write_info(value, header, writer)
    elif isinstance(value, Definite):
        subtypes.write_definite(value, header, writer)
    elif isinstance(value, Indefinite):
        subtypes.write_indefinite(value, header, writer)
    elif isinstance(value, Capitalize):
        subtypes.write_capitalize(value, header, writer)
    elif isinstance(value, Downcase):
        subtypes.write_downcase(value, header, writer)
    elif isinstance(value, Gender):
        subtypes.write_gender(value, header, writer)
    elif isinstance(value, Pluralize):
        subtypes.write_pluralize(value, header, writer)
    elif isinstance(value, LongVowel):
        subtypes.write_long_vowel(value, header, writer)
    else:
        raise EncodeError(f"unsupported control type {type(value).__name__}")


def _write_to_sink(sink: BinaryIO, data: bytes, kind: int) -> None:
    """Write all of data to sink, retrying after partial writes.

    Raises:
        EncodeError: If the sink raises or stops accepting bytes
    """
    remaining = data
    while remaining:
        try:
            written = sink.write(remaining)
        except (OSError, TypeError) as e:
            raise EncodeError(f"could not write subtype {kind} to sink: {e}") from e

        if not written:
            raise EncodeError(
                f"could not write subtype {kind} to sink: short write, "
                f"{len(data) - len(remaining)} of {len(data)} bytes written"
            )
        remaining = remaining[written:]
