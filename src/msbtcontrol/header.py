"""File-level header context for control codecs.

Every decode and encode call needs to know the byte order and the text
encoding of the message file the control lives in. In an MSBT file these come
from the file header; this module provides a small value type carrying just
those two settings.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Protocol


class Endianness(enum.Enum):
    """Byte order of multi-byte integers and UTF-16 code units."""

    BIG = "big"
    LITTLE = "little"

    @classmethod
    def from_bom(cls, bom: bytes) -> Endianness:
        """Map an MSBT byte-order mark to an Endianness.

        Args:
            bom: The two BOM bytes from the file header

        Returns:
            BIG for ``FE FF``, LITTLE for ``FF FE``

        Raises:
            ValueError: If the bytes are not a byte-order mark

        Example:
            >>> Endianness.from_bom(b"\\xfe\\xff")
            <Endianness.BIG: 'big'>
        """
        if bom == b"\xfe\xff":
            return cls.BIG
        if bom == b"\xff\xfe":
            return cls.LITTLE
        raise ValueError(f"Invalid byte-order mark: {bom!r}")

    @property
    def struct_prefix(self) -> str:
        """Format prefix for the struct module."""
        return ">" if self is Endianness.BIG else "<"


class TextEncoding(enum.Enum):
    """Text encoding of message strings.

    UTF-16 is the wide encoding (2-byte code units); UTF-8 is the byte encoding.
    """

    UTF8 = 0
    UTF16 = 1

    @classmethod
    def from_byte(cls, value: int) -> TextEncoding:
        """Map the MSBT header's encoding byte to a TextEncoding."""
        try:
            return cls(value)
        except ValueError as err:
            raise ValueError(f"Invalid encoding byte: {value}") from err

    @property
    def prefix_width(self) -> int:
        """Width in bytes of a string length prefix."""
        return 2 if self is TextEncoding.UTF16 else 1


class HeaderLike(Protocol):
    """Anything exposing the byte order and text encoding of a message file."""

    @property
    def endianness(self) -> Endianness: ...

    @property
    def encoding(self) -> TextEncoding: ...


@dataclass(frozen=True)
class Header:
    """Byte order and text encoding for a decode or encode call.

    Attributes:
        endianness: Byte order for the discriminant, length fields and
            UTF-16 code units (default big-endian, as on Wii U).
        encoding: Text encoding of string fields (default UTF-16).

    Examples:
        ```python
        from msbtcontrol import Endianness, Header, TextEncoding

        # Wii U message file
        header = Header(Endianness.BIG, TextEncoding.UTF16)

        # Switch message file
        header = Header(Endianness.LITTLE, TextEncoding.UTF16)
        ```
    """

    endianness: Endianness = Endianness.BIG
    encoding: TextEncoding = TextEncoding.UTF16

    def __post_init__(self) -> None:
        """Validate header settings."""
        if not isinstance(self.endianness, Endianness):
            raise ValueError(f"endianness must be an Endianness, got {self.endianness!r}")

        if not isinstance(self.encoding, TextEncoding):
            raise ValueError(f"encoding must be a TextEncoding, got {self.encoding!r}")
