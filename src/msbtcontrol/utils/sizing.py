"""Control size calculation utilities.

This module provides functions to calculate the encoded size and the declared
length field of a control without actually encoding it.
"""

from __future__ import annotations

from ..codec.strings import string_to_bytes
from ..header import HeaderLike
from ..models import DecodedControl, LongVowel, Pluralize

DISCRIMINANT_SIZE = 2


def declared_length(value: DecodedControl, header: HeaderLike) -> int | None:
    """Return the length field encode() would write for a control.

    Args:
        value: Control value or LongVowel result
        header: Supplies the text encoding for string fields

    Returns:
        The declared length, or None for subtypes without a length field
        (Capitalize, Downcase)

    Raises:
        EncodeError: If a string field cannot be encoded

    Example:
        >>> declared_length(Pluralize(one="cat", more="cats", many="cats"),
        ...                 Header(Endianness.BIG, TextEncoding.UTF8))
        14
    """
    if not value.has_length_field:
        return None

    if isinstance(value, Pluralize):
        return sum(
            string_to_bytes(header, text, name)[0]
            for name, text in (("one", value.one), ("more", value.more), ("many", value.many))
        )

    if isinstance(value, LongVowel):
        return sum(
            header.encoding.prefix_width + len(string_to_bytes(header, option)[1])
            for option in value.options
        )

    return value.declared_length


def encoded_size(value: DecodedControl, header: HeaderLike) -> int:
    """Calculate the number of bytes encode() would produce.

    The size includes the 2-byte discriminant.

    Args:
        value: Control value or LongVowel result
        header: Supplies the text encoding for string fields

    Returns:
        Size in bytes

    Raises:
        EncodeError: If a string field cannot be encoded
    """
    if not value.has_length_field:
        return DISCRIMINANT_SIZE

    if isinstance(value, Pluralize):
        texts = (value.one, value.more, value.many)
    elif isinstance(value, LongVowel):
        texts = tuple(value.options)
    else:
        length = value.declared_length or 0
        return DISCRIMINANT_SIZE + 2 + length

    prefix_width = header.encoding.prefix_width
    payload = sum(prefix_width + len(string_to_bytes(header, text)[1]) for text in texts)
    return DISCRIMINANT_SIZE + 2 + payload
