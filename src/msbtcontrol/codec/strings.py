"""Length-prefixed string fields.

Variable-length control subtypes (Pluralize, LongVowel) store text as a length
prefix followed by the raw string bytes. The prefix is a u16 in header byte
order for UTF-16 files and a single byte for UTF-8 files; it counts payload
bytes only.

Every string also has a *field size*, the amount it contributes to the
enclosing control's declared total length. A non-empty string contributes its
payload plus its prefix; an empty string contributes nothing.
"""

from __future__ import annotations

from ..exceptions import EncodeError, MalformedTextError, TruncatedDataError
from ..header import Endianness, HeaderLike, TextEncoding
from .stream import ByteReader, ByteWriter


def _utf16_codec(endianness: Endianness) -> str:
    return "utf-16-be" if endianness is Endianness.BIG else "utf-16-le"


def field_size(header: HeaderLike, payload_length: int) -> int:
    """Return the field size of a string whose payload is payload_length bytes.

    Known inconsistency: some readers of this format add 2 on read even for
    UTF-8 strings, while UTF-8 writers add 1. Totals built that way never match
    for non-empty UTF-8 fields, so both sides here use the real prefix width.

    Args:
        header: Supplies the text encoding (and so the prefix width)
        payload_length: Raw string byte count, excluding the prefix

    Returns:
        0 for an empty payload, otherwise payload_length plus the prefix width
    """
    if payload_length == 0:
        return 0
    return payload_length + header.encoding.prefix_width


def read_string(header: HeaderLike, reader: ByteReader, field: str = "string") -> tuple[int, str]:
    """Read one length-prefixed string.

    For UTF-8 a single trailing NUL byte is dropped before decoding; embedded
    NULs and any further trailing NULs are kept.

    Args:
        header: Supplies byte order and text encoding
        reader: Cursor positioned at the length prefix
        field: Field name used in error messages

    Returns:
        Tuple of (field_size, text)

    Raises:
        TruncatedDataError: If the prefix or the string bytes run past the buffer
        MalformedTextError: If the bytes are not valid text

    Example:
        >>> header = Header(Endianness.BIG, TextEncoding.UTF8)
        >>> read_string(header, ByteReader(b"\\x03cat"))
        (4, 'cat')
    """
    try:
        if header.encoding is TextEncoding.UTF16:
            str_len = reader.read_u16(header.endianness)
        else:
            str_len = reader.read_u8()
    except IndexError as e:
        raise TruncatedDataError(f"could not read str_len of {field}: {e}") from e

    if str_len == 0:
        return 0, ""

    try:
        str_bytes = reader.read_bytes(str_len)
    except IndexError as e:
        raise TruncatedDataError(f"could not read string bytes of {field}: {e}") from e

    if header.encoding is TextEncoding.UTF16:
        try:
            text = str_bytes.decode(_utf16_codec(header.endianness))
        except UnicodeDecodeError as e:
            raise MalformedTextError(f"could not parse utf-16 string in {field}: {e}") from e
    else:
        if str_bytes.endswith(b"\x00"):
            str_bytes = str_bytes[:-1]
        try:
            text = str_bytes.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedTextError(f"could not parse utf-8 string in {field}: {e}") from e

    return field_size(header, str_len), text


def string_to_bytes(header: HeaderLike, text: str, field: str = "string") -> tuple[int, bytes]:
    """Encode text as a string payload, without its length prefix.

    For UTF-8 any trailing NUL characters are stripped first.

    Args:
        header: Supplies byte order and text encoding
        text: Text to encode
        field: Field name used in error messages

    Returns:
        Tuple of (field_size, payload)

    Raises:
        EncodeError: If the text cannot be encoded or is too long for its prefix
    """
    try:
        if header.encoding is TextEncoding.UTF16:
            payload = text.encode(_utf16_codec(header.endianness))
        else:
            payload = text.rstrip("\x00").encode("utf-8")
    except UnicodeEncodeError as e:
        raise EncodeError(f"could not encode {field}: {e}") from e

    max_length = 0xFFFF if header.encoding is TextEncoding.UTF16 else 0xFF
    if len(payload) > max_length:
        raise EncodeError(
            f"{field} is {len(payload)} bytes, more than the {max_length} "
            f"a length prefix can hold"
        )

    return field_size(header, len(payload)), payload


def write_string(header: HeaderLike, writer: ByteWriter, payload: bytes) -> None:
    """Write a length prefix followed by an encoded string payload.

    Args:
        header: Supplies byte order and text encoding
        writer: Destination buffer
        payload: Bytes produced by string_to_bytes()
    """
    if header.encoding is TextEncoding.UTF16:
        writer.write_u16(len(payload), header.endianness)
    else:
        writer.write_u8(len(payload))
    writer.write_bytes(payload)
