from __future__ import annotations

from adventure_core.common.text import StringCaretPair

NEW_WORD = " "


def working_indices(sterile: StringCaretPair) -> tuple[int, int]:
    """Return ``[start, end)`` of the word under the caret.

    A trailing space with the caret at the very end means the player has
    started a new word, which is reported as the span of that space.
    """

    text = sterile.text
    caret = max(0, min(sterile.caret, len(text)))

    if text.endswith(" ") and caret == len(text):
        return len(text) - 1, len(text)

    start = caret
    while start > 0 and not text[start - 1].isspace():
        start -= 1

    end = caret
    while end < len(text) and not text[end].isspace():
        end += 1

    return start, end


def working_word(sterile: StringCaretPair, indices: tuple[int, int]) -> str:
    """Return the word being typed, ``" "`` for a new word, or ``""`` for blank input."""

    text = sterile.text
    if not text.strip():
        return ""
    if text.endswith(" ") and sterile.caret == len(text):
        return NEW_WORD

    start, end = indices
    return text[max(start, 0) : min(end, len(text))]


def relevant_part(sterile: StringCaretPair, indices: tuple[int, int]) -> str:
    """Return the fully typed words that precede the word under the caret."""

    return sterile.text[: indices[0]].strip()
