"""Vocabulary words and the two kinds of entity they can name."""
from __future__ import annotations

import functools
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, Sequence, runtime_checkable

from adventure_core.common.text import validate_string


class PartOfSpeech(str, Enum):
    VERB = "verb"
    PREPOSITION = "preposition"
    NOUN = "noun"
    ADJECTIVE = "adjective"


@runtime_checkable
class Referable(Protocol):
    """Anything the player can name with vocabulary words."""

    ref_id: int

    def gather_vocabulary(self) -> list["VocabularyWord"]:
        """Return one word per spelling variant."""
        ...


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class VocabularyWord:
    """A spelling bound to the entity it names.

    Words sort longest spelling first, then case-insensitively, then by the
    referent's identity, which is the order the matcher scans them in.
    """

    spelling: str
    referent: "Verb | Noun" = field(repr=False)
    part_of_speech: PartOfSpeech
    suggestion: str | None = None

    @property
    def suggestion_text(self) -> str:
        return self.suggestion or self.spelling

    @property
    def key(self) -> str:
        return self.spelling.lower()

    @property
    def is_noun_word(self) -> bool:
        return self.part_of_speech in (PartOfSpeech.NOUN, PartOfSpeech.ADJECTIVE)

    @property
    def profile_key(self) -> int | None:
        # Weak link to the owning NounProfile, resolved through the catalog.
        return self.referent.ref_id if self.is_noun_word else None

    @property
    def sort_key(self) -> tuple[int, str, int]:
        return (-len(self.spelling), self.key, self.referent.ref_id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VocabularyWord):
            return NotImplemented
        return (
            self.key == other.key
            and self.referent.ref_id == other.referent.ref_id
            and self.part_of_speech == other.part_of_speech
        )

    def __lt__(self, other: "VocabularyWord") -> bool:
        if not isinstance(other, VocabularyWord):
            return NotImplemented
        return (self.sort_key, self.part_of_speech.value) < (
            other.sort_key,
            other.part_of_speech.value,
        )

    def __hash__(self) -> int:
        return hash((self.key, self.referent.ref_id, self.part_of_speech))

    def __str__(self) -> str:
        return self.spelling


def _lowered(values: Sequence[str]) -> tuple[str, ...]:
    return tuple(validate_string(value).lower() for value in values if value)


class Verb:
    """An action the player takes, with its synonyms and object prepositions."""

    def __init__(
        self,
        spelling: str,
        *,
        ref_id: int,
        synonyms: Sequence[str] = (),
        shortcut: str = "",
        prepositions: Sequence[str] = (),
    ) -> None:
        if not spelling or not spelling.strip():
            raise ValueError("A verb spelling cannot be blank!")
        self.ref_id = ref_id
        self.spelling = validate_string(spelling).lower()
        self.synonyms = _lowered(synonyms)
        self.shortcut = validate_string(shortcut).lower() if shortcut else ""
        self.prepositions = _lowered(prepositions)

    @property
    def is_transitive(self) -> bool:
        return bool(self.prepositions)

    def gather_vocabulary(self) -> list[VocabularyWord]:
        words = [VocabularyWord(self.spelling, self, PartOfSpeech.VERB)]
        for synonym in self.synonyms:
            words.append(VocabularyWord(synonym, self, PartOfSpeech.VERB))
        if self.shortcut:
            words.append(
                VocabularyWord(
                    self.shortcut,
                    self,
                    PartOfSpeech.VERB,
                    suggestion=f"{self.shortcut} ({self.spelling})",
                )
            )
        for preposition in self.prepositions:
            words.append(VocabularyWord(preposition, self, PartOfSpeech.PREPOSITION))
        return words

    def __repr__(self) -> str:
        return f"Verb({self.spelling!r}, ref_id={self.ref_id})"


class Noun:
    """A thing in the world, named by one or more nouns and described by adjectives."""

    def __init__(
        self,
        names: str,
        *adjectives: str,
        ref_id: int,
    ) -> None:
        if not names or not names.strip():
            raise ValueError("A noun name cannot be blank!")
        parts = names.split()
        self.ref_id = ref_id
        self.primary_name = validate_string(parts[0])
        self.alternative_names = tuple(validate_string(name) for name in parts[1:])
        self.adjectives = tuple(
            validate_string(adjective) for adjective in adjectives if adjective.strip()
        )

    @property
    def names(self) -> tuple[str, ...]:
        return (self.primary_name, *self.alternative_names)

    def gather_vocabulary(self) -> list[VocabularyWord]:
        words = [VocabularyWord(name, self, PartOfSpeech.NOUN) for name in self.names]
        words.extend(
            VocabularyWord(adjective, self, PartOfSpeech.ADJECTIVE)
            for adjective in self.adjectives
        )
        return words

    def describe(self) -> str:
        return " ".join((*self.adjectives, self.primary_name))

    def __repr__(self) -> str:
        return f"Noun({self.describe()!r}, ref_id={self.ref_id})"
