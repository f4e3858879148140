"""Pydantic control value types for msbtcontrol."""

from __future__ import annotations

from .base import ControlModel
from .controls import (
    LONG_VOWEL_KINDS,
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
from .fields import ByteField

__all__ = [
    "ControlModel",
    "ByteField",
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
    "LONG_VOWEL_KINDS",
]
