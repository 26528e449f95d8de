from __future__ import annotations

import itertools
import logging
from typing import Iterable, Sequence

from .vocabulary import Noun, Verb, VocabularyWord

logger = logging.getLogger(__name__)


class World:
    """Every verb and noun the player can refer to.

    The world hands the prompt an ordered vocabulary; it decides nothing about
    how that vocabulary is interpreted.
    """

    def __init__(self, title: str = "", author: str = "") -> None:
        self.title = title
        self.author = author
        self.verbs: list[Verb] = []
        self.nouns: list[Noun] = []
        self._ids = itertools.count(1)

    def add_verb(
        self,
        spelling: str,
        *,
        synonyms: Sequence[str] = (),
        shortcut: str = "",
        prepositions: Sequence[str] = (),
    ) -> Verb:
        verb = Verb(
            spelling,
            ref_id=next(self._ids),
            synonyms=synonyms,
            shortcut=shortcut,
            prepositions=prepositions,
        )
        self.verbs.append(verb)
        return verb

    def add_noun(self, names: str, *adjectives: str) -> Noun:
        noun = Noun(names, *adjectives, ref_id=next(self._ids))
        self.nouns.append(noun)
        return noun

    def load_relevant_vocabulary(self) -> list[VocabularyWord]:
        """Return de-duplicated vocabulary, longest spelling first.

        Every registered entity is considered relevant; narrowing to what the
        player can currently reach belongs to the caller.
        """

        words = set(_gather(self.verbs))
        words.update(_gather(self.nouns))
        ordered = sorted(words)
        logger.debug(
            "Loaded %d vocabulary words for %d verbs and %d nouns",
            len(ordered),
            len(self.verbs),
            len(self.nouns),
        )
        return ordered


def _gather(entities: Iterable[Verb | Noun]) -> Iterable[VocabularyWord]:
    for entity in entities:
        yield from entity.gather_vocabulary()
