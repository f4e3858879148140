"""Field helpers for control payloads."""

from __future__ import annotations

from typing import Any, cast

from pydantic import Field
from pydantic.fields import FieldInfo


def ByteField(**kwargs: Any) -> FieldInfo:
    """Create a single-byte (u8) field.

    This is a convenience wrapper around Pydantic's Field() bounding the value
    to 0-255, the range of one raw payload byte.

    Args:
        **kwargs: Additional Field() arguments (description, default, etc.)

    Returns:
        Pydantic FieldInfo suitable for use as a field default/metadata.

    Example:
        >>> class Info(ControlModel):
        ...     gender: int = ByteField()
    """
    return cast(FieldInfo, Field(ge=0, le=0xFF, **kwargs))
