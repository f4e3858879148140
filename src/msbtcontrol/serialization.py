"""Plain-data conversion of control values.

Decoded controls are often stored in human-editable documents (JSON, YAML)
alongside the message text they belong to. These helpers convert a control to
plain Python data and back; the ``kind`` field (or ``variant_kind`` for
LongVowel) selects the variant when loading.
"""

from __future__ import annotations

from typing import Any

from pydantic import TypeAdapter, ValidationError

from .exceptions import DecodeError
from .models import DecodedControl

_ADAPTER: TypeAdapter[DecodedControl] = TypeAdapter(DecodedControl)


def dump_control(value: DecodedControl) -> dict[str, Any]:
    """Convert a control value to a plain dict.

    Example:
        >>> dump_control(Info(gender=0, definite=1, indefinite=2, plural=3))
        {'kind': 0, 'gender': 0, 'definite': 1, 'indefinite': 2, 'plural': 3}
    """
    return value.model_dump()


def load_control(data: dict[str, Any]) -> DecodedControl:
    """Build a control value from a plain dict.

    Raises:
        DecodeError: If the data matches no control layout
    """
    try:
        return _ADAPTER.validate_python(data)
    except ValidationError as e:
        raise DecodeError(f"Invalid control data: {e}") from e


def control_to_json(value: DecodedControl) -> str:
    """Convert a control value to a JSON string."""
    return value.model_dump_json()


def control_from_json(text: str | bytes) -> DecodedControl:
    """Build a control value from a JSON string.

    Raises:
        DecodeError: If the JSON matches no control layout
    """
    try:
        return _ADAPTER.validate_json(text)
    except ValidationError as e:
        raise DecodeError(f"Invalid control JSON: {e}") from e
