"""Utility functions for msbtcontrol."""

from __future__ import annotations

from .sizing import declared_length, encoded_size

__all__ = [
    "encoded_size",
    "declared_length",
]
