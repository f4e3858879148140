"""Payload codecs for each control subtype.

Each ``parse_*`` function reads a payload from a ByteReader positioned just
after the discriminant; each ``write_*`` function writes the payload that
follows the discriminant. Length fields are always recomputed on write, never
carried over from a decoded value.
"""

from __future__ import annotations

from ..exceptions import EncodeError, LengthMismatchError, TruncatedDataError
from ..header import HeaderLike
from ..models import (
    Capitalize,
    Definite,
    Downcase,
    Gender,
    Indefinite,
    Info,
    LongVowel,
    Pluralize,
)
from .stream import ByteReader, ByteWriter
from .strings import read_string, string_to_bytes, write_string


def _read_len(header: HeaderLike, reader: ByteReader, name: str) -> int:
    try:
        return reader.read_u16(header.endianness)
    except IndexError as e:
        raise TruncatedDataError(f"could not read len of {name}: {e}") from e


def _read_bytes(reader: ByteReader, num_bytes: int, name: str) -> bytes:
    try:
        return reader.read_bytes(num_bytes)
    except IndexError as e:
        raise TruncatedDataError(f"could not read {name} fields: {e}") from e


def _check_declared(name: str, declared: int, expected: int) -> None:
    if declared != expected:
        raise LengthMismatchError(
            f"{name} not length {expected} (declared {declared})", declared, expected
        )


def parse_info(header: HeaderLike, reader: ByteReader) -> Info:
    length = _read_len(header, reader, "Info")
    _check_declared("Info", length, 4)

    gender, definite, indefinite, plural = _read_bytes(reader, 4, "Info")
    return Info(gender=gender, definite=definite, indefinite=indefinite, plural=plural)


def write_info(control: Info, header: HeaderLike, writer: ByteWriter) -> None:
    writer.write_u16(4, header.endianness)
    writer.write_u8(control.gender)
    writer.write_u8(control.definite)
    writer.write_u8(control.indefinite)
    writer.write_u8(control.plural)


def parse_definite(header: HeaderLike, reader: ByteReader) -> Definite:
    _check_declared("Definite", _read_len(header, reader, "Definite"), 0)
    return Definite()


def write_definite(control: Definite, header: HeaderLike, writer: ByteWriter) -> None:
    writer.write_u16(0, header.endianness)


def parse_indefinite(header: HeaderLike, reader: ByteReader) -> Indefinite:
    _check_declared("Indefinite", _read_len(header, reader, "Indefinite"), 0)
    return Indefinite()


def write_indefinite(control: Indefinite, header: HeaderLike, writer: ByteWriter) -> None:
    writer.write_u16(0, header.endianness)


# Capitalize and Downcase have no length field at all, unlike Definite.


def parse_capitalize(header: HeaderLike, reader: ByteReader) -> Capitalize:
    return Capitalize()


def write_capitalize(control: Capitalize, header: HeaderLike, writer: ByteWriter) -> None:
    pass


def parse_downcase(header: HeaderLike, reader: ByteReader) -> Downcase:
    return Downcase()


def write_downcase(control: Downcase, header: HeaderLike, writer: ByteWriter) -> None:
    pass


def parse_gender(header: HeaderLike, reader: ByteReader) -> Gender:
    _check_declared("Gender", _read_len(header, reader, "Gender"), 1)
    (gender,) = _read_bytes(reader, 1, "Gender")
    return Gender(gender=gender)


def write_gender(control: Gender, header: HeaderLike, writer: ByteWriter) -> None:
    writer.write_u16(1, header.endianness)
    writer.write_u8(control.gender)


def parse_pluralize(header: HeaderLike, reader: ByteReader) -> Pluralize:
    """Read a Pluralize payload and check its declared total.

    The declared total must equal the sum of the field sizes of the three
    strings (see strings.field_size).

    Raises:
        LengthMismatchError: If the field sizes don't add up to the total
    """
    length = _read_len(header, reader, "Pluralize")

    one_size, one = read_string(header, reader, "one")
    more_size, more = read_string(header, reader, "more")
    many_size, many = read_string(header, reader, "many")

    total = one_size + more_size + many_size
    if total != length:
        raise LengthMismatchError(
            f"Pluralize fields don't total param size: declared {length}, fields total {total}",
            length,
            total,
        )

    return Pluralize(one=one, more=more, many=many)


def write_pluralize(control: Pluralize, header: HeaderLike, writer: ByteWriter) -> None:
    encoded = [
        string_to_bytes(header, control.one, "one"),
        string_to_bytes(header, control.more, "more"),
        string_to_bytes(header, control.many, "many"),
    ]

    length = sum(size for size, _ in encoded)
    if length > 0xFFFF:
        raise EncodeError(f"Pluralize fields total {length} bytes, more than a u16 can hold")

    writer.write_u16(length, header.endianness)
    for _, payload in encoded:
        write_string(header, writer, payload)


def parse_long_vowel(header: HeaderLike, reader: ByteReader, variant_kind: int) -> LongVowel:
    """Read LongVowel options until exactly the declared total is consumed.

    The total counts every byte of option data, prefixes included, so an empty
    option still occupies its prefix.

    Raises:
        LengthMismatchError: If the last option runs past the declared total
    """
    length = _read_len(header, reader, "LongVowel")
    start = reader.position()

    options: list[str] = []
    while reader.position() - start < length:
        _, option = read_string(header, reader, f"option {len(options)}")
        options.append(option)

    consumed = reader.position() - start
    if consumed != length:
        raise LengthMismatchError(
            f"LongVowel options don't total param size: declared {length}, "
            f"options total {consumed}",
            length,
            consumed,
        )

    return LongVowel(variant_kind=variant_kind, options=tuple(options))


def write_long_vowel(control: LongVowel, header: HeaderLike, writer: ByteWriter) -> None:
    payloads = [
        string_to_bytes(header, option, f"option {i}")[1]
        for i, option in enumerate(control.options)
    ]

    prefix_width = header.encoding.prefix_width
    length = sum(prefix_width + len(payload) for payload in payloads)
    if length > 0xFFFF:
        raise EncodeError(f"LongVowel options total {length} bytes, more than a u16 can hold")

    writer.write_u16(length, header.endianness)
    for payload in payloads:
        write_string(header, writer, payload)
