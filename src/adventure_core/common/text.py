"""Player-typable text helpers shared by the world model and the prompt."""
from __future__ import annotations

from dataclasses import dataclass

_PUNCTUATION = frozenset("'-")


@dataclass(frozen=True)
class StringCaretPair:
    text: str
    caret: int


def is_valid_input_character(char: str) -> bool:
    """Return True for characters a player may type: ASCII letters, digits, space, ' and -."""

    if char == " " or char in _PUNCTUATION:
        return True
    return char.isascii() and char.isalnum()


def is_valid_string(text: str) -> bool:
    """Return True when ``text`` could have been typed at the prompt.

    Leading spaces and runs of spaces are rejected along with any character
    outside the typable set.
    """

    last_was_space = True
    for char in text:
        is_space = char.isspace()
        if is_space and last_was_space:
            return False
        if not is_valid_input_character(char):
            return False
        last_was_space = is_space
    return True


def validate_string(text: str) -> str:
    if not is_valid_string(text):
        raise ValueError(f'String "{text}" is not player-typable!')
    return text


def sterilize_input(text: str, caret: int) -> StringCaretPair:
    """Strip untypable characters and repeated whitespace, shifting the caret.

    A single trailing space survives so callers can tell that the player has
    started a new word.
    """

    original = max(0, min(caret, len(text)))
    shifted = original
    buffer: list[str] = []
    last_was_space = True

    for index, char in enumerate(text):
        is_space = char.isspace()
        keep = is_valid_input_character(" " if is_space else char) and not (
            is_space and last_was_space
        )
        if keep:
            buffer.append(" " if is_space else char)
            last_was_space = is_space
        elif index < original:
            shifted -= 1

    sterile = "".join(buffer)
    if not sterile.strip():
        return StringCaretPair("", 0)
    return StringCaretPair(sterile, min(shifted, len(sterile)))
