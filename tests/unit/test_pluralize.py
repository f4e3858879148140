"""Unit tests for the Pluralize subtype (kind 6)."""

from __future__ import annotations

import pytest

from msbtcontrol import (
    EncodeError,
    Header,
    LengthMismatchError,
    MalformedTextError,
    Pluralize,
    TruncatedDataError,
    decode,
    encode,
)

CATS_UTF8 = b"\x00\x06" + b"\x00\x0e" + b"\x03cat" + b"\x04cats" + b"\x04cats"


class TestPluralizeUtf8:
    """Test Pluralize in UTF-8 files."""

    def test_encode(self, be_utf8: Header) -> None:
        """Test declared length is the sum of payloads plus 1-byte prefixes."""
        data = encode(Pluralize(one="cat", more="cats", many="cats"), be_utf8)

        # (3 + 1) + (4 + 1) + (4 + 1) = 14
        assert data == CATS_UTF8

    def test_decode(self, be_utf8: Header) -> None:
        """Test decoding reproduces the three strings."""
        consumed, control = decode(be_utf8, CATS_UTF8)

        assert consumed == len(CATS_UTF8) - 2
        assert control == Pluralize(one="cat", more="cats", many="cats")

    @pytest.mark.parametrize("declared", [13, 15])
    def test_declared_off_by_one(self, be_utf8: Header, declared: int) -> None:
        """Test any change to the declared total fails decode."""
        data = CATS_UTF8[:2] + declared.to_bytes(2, "big") + CATS_UTF8[4:]

        with pytest.raises(LengthMismatchError, match="fields don't total param size"):
            decode(be_utf8, data)

    def test_trailing_nul_canonicalised(self, be_utf8: Header) -> None:
        """Test a NUL-terminated field decodes and re-encodes without the NUL."""
        data = b"\x00\x06" + b"\x00\x0f" + b"\x04cat\x00" + b"\x04cats" + b"\x04cats"
        _, control = decode(be_utf8, data)

        assert control == Pluralize(one="cat", more="cats", many="cats")
        assert encode(control, be_utf8) == CATS_UTF8

    def test_invalid_text(self, be_utf8: Header) -> None:
        """Test error on invalid UTF-8 in a field."""
        data = b"\x00\x06" + b"\x00\x06" + b"\x01a" + b"\x01\xff" + b"\x01c"

        with pytest.raises(MalformedTextError, match="more"):
            decode(be_utf8, data)

    def test_truncated(self, be_utf8: Header) -> None:
        """Test error when the last field is cut short."""
        with pytest.raises(TruncatedDataError, match="many"):
            decode(be_utf8, CATS_UTF8[:-2])

    def test_errors_name_the_subtype(self, be_utf8: Header) -> None:
        """Test decode errors name the subtype and kind as well as the field."""
        data = b"\x00\x06" + b"\x00\x06" + b"\x01a" + b"\x01\xff" + b"\x01c"

        with pytest.raises(MalformedTextError) as exc_info:
            decode(be_utf8, data)

        message = str(exc_info.value)
        assert message.startswith("could not parse Pluralize (kind 6): ")
        assert "in more" in message
        assert isinstance(exc_info.value.__cause__, MalformedTextError)

    def test_length_error_keeps_lengths(self, be_utf8: Header) -> None:
        """Test the rebuilt length error still carries declared and actual totals."""
        data = CATS_UTF8[:2] + b"\x00\x0f" + CATS_UTF8[4:]

        with pytest.raises(LengthMismatchError, match=r"Pluralize \(kind 6\)") as exc_info:
            decode(be_utf8, data)

        assert exc_info.value.declared == 15
        assert exc_info.value.expected == 14


class TestPluralizeUtf16:
    """Test Pluralize in UTF-16 files."""

    def test_roundtrip(self, le_utf16: Header) -> None:
        """Test a little-endian UTF-16 round trip."""
        control = Pluralize(one="Maus", more="Mäuse", many="Mäuse")
        data = encode(control, le_utf16)

        # Declared total: (8 + 2) + (10 + 2) + (10 + 2)
        assert data[2:4] == (34).to_bytes(2, "little")
        assert decode(le_utf16, data) == (len(data) - 2, control)

    def test_empty_field_contributes_zero(self, be_utf16: Header) -> None:
        """Test an empty field adds 0 to the total, not its 2-byte prefix."""
        data = (
            b"\x00\x06"
            + b"\x00\x08"  # 0 + (2 + 2) + (2 + 2)
            + b"\x00\x00"
            + b"\x00\x02\x00a"
            + b"\x00\x02\x00b"
        )
        consumed, control = decode(be_utf16, data)

        assert consumed == 12
        assert control == Pluralize(one="", more="a", many="b")
        assert encode(control, be_utf16) == data

    def test_empty_field_counted_as_prefix_fails(self, be_utf16: Header) -> None:
        """Test a total that counts the empty field's prefix is rejected."""
        data = b"\x00\x06" + b"\x00\x0a" + b"\x00\x00" + b"\x00\x02\x00a" + b"\x00\x02\x00b"

        with pytest.raises(LengthMismatchError):
            decode(be_utf16, data)

    def test_all_empty(self, any_header: Header) -> None:
        """Test three empty fields declare a total of 0."""
        control = Pluralize(one="", more="", many="")
        data = encode(control, any_header)

        assert data[2:4] == b"\x00\x00"
        assert decode(any_header, data)[1] == control

    def test_total_too_large(self, be_utf16: Header) -> None:
        """Test error when the declared total cannot fit in a u16."""
        text = "x" * 20000
        control = Pluralize(one=text, more=text, many=text)

        with pytest.raises(EncodeError, match="could not write subtype 6"):
            encode(control, be_utf16)
