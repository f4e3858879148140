"""msbtcontrol: Control code codec for MSBT message files

Decodes and encodes the formatting control codes (control group 201) embedded
in the text of binary localized-text (MSBT) messages. A control code tells the
text renderer how to adapt wording at runtime: gender, number, article,
capitalization or locale-specific option variants.

Key Features:
- Pydantic-based, immutable control values
- Byte-exact decoding with length-consistency checks
- Canonical re-encoding (length fields recomputed from content)
- UTF-16 and UTF-8 message files in either byte order

Quick Start:
    >>> from msbtcontrol import Endianness, Header, Info, TextEncoding, decode, encode
    >>>
    >>> header = Header(Endianness.BIG, TextEncoding.UTF16)
    >>> data = encode(Info(gender=0, definite=1, indefinite=2, plural=3), header)
    >>> consumed, control = decode(header, data)
"""

from __future__ import annotations

from .codec import decode, encode, read_string, string_to_bytes
from .exceptions import (
    DecodeError,
    EncodeError,
    LengthMismatchError,
    MalformedTextError,
    MsbtControlError,
    TruncatedDataError,
    UnknownControlKindError,
)
from .header import Endianness, Header, HeaderLike, TextEncoding
from .models import (
    Capitalize,
    Control,
    DecodedControl,
    Definite,
    Downcase,
    Gender,
    Indefinite,
    Info,
    LongVowel,
    Pluralize,
)
from .serialization import control_from_json, control_to_json, dump_control, load_control
from .utils import declared_length, encoded_size

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "decode",
    # String primitives
    "read_string",
    "string_to_bytes",
    # Header
    "Header",
    "HeaderLike",
    "Endianness",
    "TextEncoding",
    # Control values
    "Control",
    "DecodedControl",
    "Info",
    "Definite",
    "Indefinite",
    "Capitalize",
    "Downcase",
    "Gender",
    "Pluralize",
    "LongVowel",
    # Exceptions
    "MsbtControlError",
    "DecodeError",
    "EncodeError",
    "LengthMismatchError",
    "UnknownControlKindError",
    "MalformedTextError",
    "TruncatedDataError",
    # Serialization
    "dump_control",
    "load_control",
    "control_to_json",
    "control_from_json",
    # Sizing
    "encoded_size",
    "declared_length",
    # Version
    "__version__",
]
