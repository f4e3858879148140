"""Control payload decoder.

This module provides the decode() function that turns the raw bytes of a
control (discriminant first) into a typed control value.
"""

from __future__ import annotations

import logging

from ..exceptions import (
    DecodeError,
    LengthMismatchError,
    TruncatedDataError,
    UnknownControlKindError,
)
from ..header import HeaderLike
from ..models import LONG_VOWEL_KINDS, DecodedControl
from . import subtypes
from .stream import ByteReader

logger = logging.getLogger(__name__)

_SUBTYPE_NAMES = {
    0: "Info",
    1: "Definite",
    2: "Indefinite",
    3: "Capitalize",
    4: "Downcase",
    5: "Gender",
    6: "Pluralize",
    7: "LongVowel",
    8: "LongVowel",
}

# Kinds 5-8 are also described as a "Localisation" family elsewhere. Every kind
# in that range is already assigned below, so there is no separate Localisation
# path. Which layout 5 and 6 should use there is unresolved upstream.


def decode(header: HeaderLike, data: bytes) -> tuple[int, DecodedControl]:
    """Decode one control from the start of data.

    The first two bytes are the control kind, read in the header's byte order.
    Kinds 0-6 produce a member of the Control union; kinds 7 and 8 produce a
    LongVowel result. Bytes after the end of the control are ignored.

    Args:
        header: Supplies byte order and text encoding
        data: Buffer starting at the control's discriminant

    Returns:
        Tuple of (bytes_consumed, value). bytes_consumed counts the payload
        after the discriminant, so the control spans ``2 + bytes_consumed``
        bytes of data.

    Raises:
        UnknownControlKindError: If the kind is not 0-8
        LengthMismatchError: If a declared length disagrees with the content
        MalformedTextError: If a string field is not valid text
        TruncatedDataError: If data ends before the control does

    Examples:
        ```python
        from msbtcontrol import Endianness, Header, TextEncoding, decode

        header = Header(Endianness.BIG, TextEncoding.UTF8)
        consumed, control = decode(header, bytes.fromhex("0000 0004 00010203"))
        # consumed == 6
        # control == Info(gender=0, definite=1, indefinite=2, plural=3)
        ```
    """
    reader = ByteReader(data)

    try:
        kind = reader.read_u16(header.endianness)
    except IndexError as e:
        raise TruncatedDataError(f"could not read control kind: {e}") from e

    start = reader.position()

    try:
        value = _parse_payload(header, reader, kind)
    except UnknownControlKindError:
        raise
    except LengthMismatchError as e:
        raise LengthMismatchError(
            f"could not parse {_SUBTYPE_NAMES[kind]} (kind {kind}): {e}", e.declared, e.expected
        ) from e
    except DecodeError as e:
        raise type(e)(f"could not parse {_SUBTYPE_NAMES[kind]} (kind {kind}): {e}") from e

    consumed = reader.position() - start
    logger.debug(
        "Decoded control kind %d (%s), %d payload bytes", kind, type(value).__name__, consumed
    )
    return consumed, value


def _parse_payload(header: HeaderLike, reader: ByteReader, kind: int) -> DecodedControl:
    """Read the payload that follows the discriminant.

    Raises:
        UnknownControlKindError: If the kind is not 0-8
    """
    value: DecodedControl

    if kind == 0:
        value = subtypes.parse_info(header, reader)
    elif kind == 1:
        value = subtypes.parse_definite(header, reader)
    elif kind == 2:
        value = subtypes.parse_indefinite(header, reader)
    elif kind == 3:
        value = subtypes.parse_capitalize(header, reader)
    elif kind == 4:
        value = subtypes.parse_downcase(header, reader)
    elif kind == 5:
        value = subtypes.parse_gender(header, reader)
    elif kind == 6:
        value = subtypes.parse_pluralize(header, reader)
    elif kind in LONG_VOWEL_KINDS:
        value = subtypes.parse_long_vowel(header, reader, kind)
    else:
        raise UnknownControlKindError(kind)

    return value
