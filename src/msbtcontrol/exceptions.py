"""Exception hierarchy for msbtcontrol.

All exceptions inherit from MsbtControlError so callers can catch any
control-code failure with a single except clause.
"""

from __future__ import annotations


class MsbtControlError(Exception):
    """Base exception for all msbtcontrol errors."""

    pass


class DecodeError(MsbtControlError):
    """Raised when a control payload cannot be decoded.

    Examples:
        - Declared length disagrees with the subtype layout
        - Unknown control kind
        - Ill-formed UTF-16 or UTF-8 text
        - Payload ends before the control does
    """

    pass


class LengthMismatchError(DecodeError):
    """Raised when a declared length field disagrees with the content."""

    def __init__(self, message: str, declared: int, expected: int) -> None:
        super().__init__(message)
        self.declared = declared
        self.expected = expected


class UnknownControlKindError(DecodeError):
    """Raised when the discriminant names no known control subtype."""

    def __init__(self, kind: int) -> None:
        super().__init__(f"unknown control kind: {kind}")
        self.kind = kind


class MalformedTextError(DecodeError):
    """Raised when string bytes are not valid text in the header encoding."""

    pass


class TruncatedDataError(DecodeError):
    """Raised when a read runs past the end of the buffer."""

    pass


class EncodeError(MsbtControlError):
    """Raised when a control value cannot be encoded.

    Examples:
        - String too long for its length prefix
        - Text not representable in the header encoding
        - Locale variant kind outside the LongVowel range
        - The output sink failed to accept the bytes
    """

    pass
