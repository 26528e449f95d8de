"""Shared infrastructure for the adventure prompt toolchain."""

from __future__ import annotations

from .text import (
    StringCaretPair,
    is_valid_input_character,
    is_valid_string,
    sterilize_input,
    validate_string,
)

__all__ = [
    "StringCaretPair",
    "is_valid_input_character",
    "is_valid_string",
    "sterilize_input",
    "validate_string",
]
