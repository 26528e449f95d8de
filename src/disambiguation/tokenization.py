from __future__ import annotations

import logging
from typing import Sequence

from adventure_core.world.vocabulary import VocabularyWord

from .errors import NoVocabularyMatch, WordBoundaryViolation

LOGGER = logging.getLogger(__name__)

AmbiguityGroup = list[VocabularyWord]


def match_vocabulary(
    relevant_part: str, vocabulary: Sequence[VocabularyWord]
) -> list[AmbiguityGroup]:
    """Split ``relevant_part`` into groups of equally-good vocabulary matches.

    ``vocabulary`` must be ordered longest spelling first. At each position
    only the longest matching spelling length is kept, and every word of that
    length which matches joins the group, so one position can name several
    entities at once.
    """

    groups: list[AmbiguityGroup] = []
    remainder = relevant_part.strip()

    while remainder:
        group = _longest_matches(remainder, vocabulary)
        if not group:
            raise NoVocabularyMatch(remainder)

        matched_length = len(group[0].spelling)
        matched = remainder[:matched_length]
        remainder = remainder[matched_length:]

        # A match has to end on a word boundary, otherwise the player typed a
        # longer word that merely starts like a known one.
        if remainder and remainder[0] != " ":
            raise WordBoundaryViolation(matched, remainder)

        groups.append(group)
        remainder = remainder.strip()

    LOGGER.debug(
        "Matched %r into %d groups: %s",
        relevant_part,
        len(groups),
        [[word.spelling for word in group] for group in groups],
    )
    return groups


def _longest_matches(
    remainder: str, vocabulary: Sequence[VocabularyWord]
) -> AmbiguityGroup:
    lowered = remainder.lower()
    matches: AmbiguityGroup = []
    match_length: int | None = None

    for word in vocabulary:
        length = len(word.spelling)
        if length > len(remainder):
            continue
        if match_length is not None and length < match_length:
            # Shorter words are always worse matches than the one we have.
            break
        if lowered.startswith(word.key):
            matches.append(word)
            match_length = length

    return matches
