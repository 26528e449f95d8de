"""Failures raised while building a prompt context."""

from __future__ import annotations


class ContextError(Exception):
    """The input so far cannot be understood; show no suggestions this keystroke."""


class NoVocabularyMatch(ContextError):
    def __init__(self, remainder: str) -> None:
        super().__init__(f'No vocabulary match found for "{remainder}"')
        self.remainder = remainder


class WordBoundaryViolation(ContextError):
    def __init__(self, matched: str, remainder: str) -> None:
        super().__init__(
            f'Failed to match whole word after "{matched}". Remainder: "{remainder}"'
        )
        self.matched = matched
        self.remainder = remainder


class IncorrectPartOfSpeech(ContextError):
    def __init__(self, position: int) -> None:
        expected = "a verb" if position == 0 else "a noun, adjective or preposition"
        super().__init__(f"Incorrect part of speech at word {position}: expected {expected}")
        self.position = position


class NoConsistentNoun(ContextError):
    def __init__(self, group_index: int) -> None:
        super().__init__(f"No noun with full streak for group {group_index}")
        self.group_index = group_index


class FatalContextError(Exception):
    """Something that can never happen did; a catalog or algorithm defect."""


class AmbiguousPreposition(FatalContextError):
    def __init__(self, spelling: str) -> None:
        super().__init__(f'We have multiple matches for preposition "{spelling}"!')
        self.spelling = spelling
