"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from msbtcontrol import Endianness, Header, TextEncoding


@pytest.fixture
def be_utf8() -> Header:
    """Big-endian UTF-8 header."""
    return Header(Endianness.BIG, TextEncoding.UTF8)


@pytest.fixture
def be_utf16() -> Header:
    """Big-endian UTF-16 header (Wii U message files)."""
    return Header(Endianness.BIG, TextEncoding.UTF16)


@pytest.fixture
def le_utf16() -> Header:
    """Little-endian UTF-16 header (Switch message files)."""
    return Header(Endianness.LITTLE, TextEncoding.UTF16)


@pytest.fixture(
    params=[
        (Endianness.BIG, TextEncoding.UTF8),
        (Endianness.LITTLE, TextEncoding.UTF8),
        (Endianness.BIG, TextEncoding.UTF16),
        (Endianness.LITTLE, TextEncoding.UTF16),
    ],
    ids=["be-utf8", "le-utf8", "be-utf16", "le-utf16"],
)
def any_header(request: pytest.FixtureRequest) -> Header:
    """Every byte order and encoding combination."""
    endianness, encoding = request.param
    return Header(endianness, encoding)
