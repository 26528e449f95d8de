from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from adventure_core.world.vocabulary import Noun, PartOfSpeech, VocabularyWord
from adventure_core.world.world import World

from .profiles import NounProfile


@dataclass(frozen=True)
class VocabularyCatalog:
    """The vocabulary one pass reads from, with a noun profile per noun."""

    words: Tuple[VocabularyWord, ...]
    profiles: Dict[int, NounProfile]

    @classmethod
    def from_words(cls, words: Iterable[VocabularyWord]) -> "VocabularyCatalog":
        ordered = tuple(sorted(set(words)))

        by_noun: Dict[int, List[VocabularyWord]] = {}
        nouns: Dict[int, Noun] = {}
        for word in ordered:
            if word.profile_key is None:
                continue
            by_noun.setdefault(word.profile_key, []).append(word)
            nouns[word.profile_key] = word.referent  # type: ignore[assignment]

        profiles = {
            key: NounProfile.from_words(nouns[key], noun_words)
            for key, noun_words in by_noun.items()
        }
        return cls(words=ordered, profiles=profiles)

    @classmethod
    def from_world(cls, world: World) -> "VocabularyCatalog":
        return cls.from_words(world.load_relevant_vocabulary())

    def profile_for(self, word: VocabularyWord) -> Optional[NounProfile]:
        if word.profile_key is None:
            return None
        return self.profiles.get(word.profile_key)

    def verb_words(self) -> List[VocabularyWord]:
        return [
            word for word in self.words if word.part_of_speech is PartOfSpeech.VERB
        ]

    def noun_starters(self) -> List[VocabularyWord]:
        """Words that can open a new noun phrase: any name or adjective."""

        starters: List[VocabularyWord] = []
        for profile in sorted(self.profiles.values()):
            starters.extend(profile.words)
        return sorted(starters)
