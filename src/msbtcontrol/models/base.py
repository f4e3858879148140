"""Base model shared by every control value.

Control values are immutable once constructed: decoding builds a fresh value
and encoding recomputes every length field from its contents.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict


class ControlModel(BaseModel):
    """Base class for all control values.

    Subclasses declare a ``kind`` literal (the 16-bit discriminant written
    before the payload) and their payload fields.

    Attributes:
        declared_length: Fixed value of the subtype's length field, or None
            when the subtype has no fixed length (variable-length subtypes)
            or no length field at all (see ``has_length_field``).
        has_length_field: Whether the payload starts with a u16 length field.
    """

    model_config = ConfigDict(
        # Values never change after decode
        frozen=True,
        # Forbid extra fields not defined in the layout
        extra="forbid",
        # Validate defaults so kind literals are checked
        validate_default=True,
    )

    declared_length: ClassVar[int | None] = None
    has_length_field: ClassVar[bool] = True
