from __future__ import annotations

import logging
from typing import Sequence

from adventure_core.world.vocabulary import PartOfSpeech, VocabularyWord

from .errors import IncorrectPartOfSpeech
from .tokenization import AmbiguityGroup

LOGGER = logging.getLogger(__name__)


def gate_parts_of_speech(groups: Sequence[AmbiguityGroup]) -> list[AmbiguityGroup]:
    """Keep verbs in the first group and everything but verbs afterwards.

    Commands are "verb, optional preposition, noun phrase", so a group left
    empty by the filter means the input cannot be a command.
    """

    gated: list[AmbiguityGroup] = []
    for position, group in enumerate(groups):
        kept = [word for word in group if _fits_position(word, position)]
        if not kept:
            raise IncorrectPartOfSpeech(position)
        gated.append(kept)

    LOGGER.debug("Part-of-speech gate kept %d groups", len(gated))
    return gated


def _fits_position(word: VocabularyWord, position: int) -> bool:
    is_verb = word.part_of_speech is PartOfSpeech.VERB
    return is_verb if position == 0 else not is_verb
