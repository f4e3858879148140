"""Unit tests for size calculation utilities."""

from __future__ import annotations

from msbtcontrol import (
    Capitalize,
    Definite,
    Downcase,
    Gender,
    Header,
    Indefinite,
    Info,
    LongVowel,
    Pluralize,
    declared_length,
    encode,
    encoded_size,
)


class TestDeclaredLength:
    """Test declared length calculation."""

    def test_fixed_subtypes(self, be_utf8: Header) -> None:
        """Test fixed subtypes report their constant length."""
        assert declared_length(Info(gender=0, definite=0, indefinite=0, plural=0), be_utf8) == 4
        assert declared_length(Definite(), be_utf8) == 0
        assert declared_length(Indefinite(), be_utf8) == 0
        assert declared_length(Gender(gender=0), be_utf8) == 1

    def test_no_length_field(self, be_utf8: Header) -> None:
        """Test Capitalize and Downcase have no length field."""
        assert declared_length(Capitalize(), be_utf8) is None
        assert declared_length(Downcase(), be_utf8) is None

    def test_pluralize(self, be_utf8: Header, be_utf16: Header) -> None:
        """Test Pluralize totals depend on the encoding."""
        control = Pluralize(one="cat", more="cats", many="cats")

        assert declared_length(control, be_utf8) == 14
        assert declared_length(control, be_utf16) == 8 + 10 + 10

    def test_long_vowel(self, be_utf16: Header) -> None:
        """Test LongVowel totals count every prefix."""
        assert declared_length(LongVowel(variant_kind=7, options=["a", ""]), be_utf16) == 4 + 2


class TestEncodedSize:
    """Test encoded size matches encode()."""

    def test_matches_encode(self, any_header: Header) -> None:
        """Test encoded_size agrees with the encoder for every subtype."""
        values = [
            Info(gender=1, definite=2, indefinite=3, plural=4),
            Definite(),
            Indefinite(),
            Capitalize(),
            Downcase(),
            Gender(gender=2),
            Pluralize(one="", more="cats", many="Mäuse"),
            LongVowel(variant_kind=7, options=["a", "", "an"]),
            LongVowel(variant_kind=8),
        ]

        for value in values:
            assert encoded_size(value, any_header) == len(encode(value, any_header))
