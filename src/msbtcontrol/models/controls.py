"""Control value types for control group 201.

Each subtype is a frozen Pydantic model tagged with its ``kind`` literal, the
16-bit discriminant that precedes its payload on the wire. ``Control`` is the
closed union of all subtypes that the dispatcher returns directly. LongVowel is
reported as a sibling result type: it carries its own ``variant_kind`` and is
not a member of ``Control``.
"""

from __future__ import annotations

from typing import Annotated, ClassVar, Literal, Union

from pydantic import Field

from .base import ControlModel
from .fields import ByteField


class Info(ControlModel):
    """Grammatical indices of the noun a message is about (kind 0).

    Payload: ``[len=4:u16][gender:u8][definite:u8][indefinite:u8][plural:u8]``
    """

    kind: Literal[0] = 0
    gender: int = ByteField()
    definite: int = ByteField()
    indefinite: int = ByteField()
    plural: int = ByteField()

    declared_length: ClassVar[int | None] = 4


class Definite(ControlModel):
    """Select the definite article (kind 1). Payload: ``[len=0:u16]``."""

    kind: Literal[1] = 1

    declared_length: ClassVar[int | None] = 0


class Indefinite(ControlModel):
    """Select the indefinite article (kind 2). Payload: ``[len=0:u16]``."""

    kind: Literal[2] = 2

    declared_length: ClassVar[int | None] = 0


class Capitalize(ControlModel):
    """Capitalize the following word (kind 3). No payload, no length field."""

    kind: Literal[3] = 3

    has_length_field: ClassVar[bool] = False


class Downcase(ControlModel):
    """Lowercase the following word (kind 4). No payload, no length field."""

    kind: Literal[4] = 4

    has_length_field: ClassVar[bool] = False


class Gender(ControlModel):
    """Gender selector (kind 5). Payload: ``[len=1:u16][gender:u8]``."""

    kind: Literal[5] = 5
    gender: int = ByteField()

    declared_length: ClassVar[int | None] = 1


class Pluralize(ControlModel):
    """Surface forms for singular, few and many counts (kind 6).

    Payload: ``[total:u16]`` followed by three length-prefixed strings in the
    order one, more, many.
    """

    kind: Literal[6] = 6
    one: str
    more: str
    many: str


class LongVowel(ControlModel):
    """Locale-dependent option strings (kinds 7 and 8).

    Used by the renderer to pick a surface form by target-locale rules, such as
    choosing an article before a vowel-initial word.

    Payload: ``[total:u16]`` followed by length-prefixed strings until exactly
    ``total`` bytes have been read.
    """

    variant_kind: Literal[7, 8]
    options: tuple[str, ...] = ()

    @property
    def kind(self) -> int:
        """Discriminant written before the payload."""
        return self.variant_kind


Control = Annotated[
    Info | Definite | Indefinite | Capitalize | Downcase | Gender | Pluralize,
    Field(discriminator="kind"),
]

DecodedControl = Union[Control, LongVowel]

LONG_VOWEL_KINDS = (7, 8)
