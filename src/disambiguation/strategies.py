from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Sequence

from adventure_core.world.vocabulary import VocabularyWord

from .catalog import VocabularyCatalog
from .scoring import score_suggestion
from .weaving import ContextGroup, GroupKind

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Suggestion:
    text: str
    display: str
    score: float
    word: VocabularyWord


# ---------------------------
# Candidate collection
# ---------------------------

def collect_candidates(
    groups: Sequence[ContextGroup],
    catalog: VocabularyCatalog,
    *,
    fresh_word: bool = True,
) -> List[VocabularyWord]:
    """Pick the words worth offering after the context in ``groups``.

    - only the verb group so far: every verb spelling when starting a fresh
      word, or when nothing at all has been typed yet
    - an unfinished noun phrase: whatever its surviving nouns still leave unsaid
    - anything else: any word that can open a new noun phrase
    """

    if not groups or (len(groups) == 1 and (fresh_word or not groups[0].words)):
        return _unique(catalog.verb_words())

    last = groups[-1]
    if last.kind is GroupKind.NOUN_PHRASE:
        incomplete = last.incomplete_clusters
        if incomplete:
            words: List[VocabularyWord] = []
            for cluster in incomplete:
                words.extend(cluster.unmentioned_words())
            return _unique(sorted(words))

    return _unique(catalog.noun_starters())


def _unique(words: Iterable[VocabularyWord]) -> List[VocabularyWord]:
    seen: set[str] = set()
    unique: List[VocabularyWord] = []
    for word in words:
        if word.key in seen:
            continue
        seen.add(word.key)
        unique.append(word)
    return unique


# ---------------------------
# Ranking
# ---------------------------

def rank_fresh_word(candidates: Sequence[VocabularyWord]) -> List[Suggestion]:
    """Score candidates when no letters are typed yet.

    Every candidate gets the same base score plus a small bias that grows
    with its position, so later candidates outlast earlier ones when the list
    is trimmed.
    """

    return [
        Suggestion(
            text=word.spelling,
            display=word.suggestion_text,
            score=1.0 + index / 1000.0,
            word=word,
        )
        for index, word in enumerate(candidates)
    ]


def rank_partial_word(
    candidates: Sequence[VocabularyWord], typed: str
) -> List[Suggestion]:
    """Score candidates against the fragment typed so far, dropping non-matches."""

    ranked: List[Suggestion] = []
    for word in candidates:
        score = score_suggestion(typed, word.spelling)
        if score > 0.0:
            ranked.append(
                Suggestion(
                    text=word.spelling,
                    display=word.suggestion_text,
                    score=score,
                    word=word,
                )
            )
    return ranked


def select_top_k(suggestions: Sequence[Suggestion], k: int = 5) -> List[Suggestion]:
    """Keep the ``k`` highest-scoring suggestions in ascending score order.

    The sort is stable and trimming drops from the low end, so among equal
    scores the earlier candidate goes first. The best suggestion is last,
    which is the order the prompt lists them in.
    """

    try:
        top_k = int(k)
    except (TypeError, ValueError):
        top_k = 0
    if top_k <= 0 or not suggestions:
        return []

    ordered = sorted(suggestions, key=lambda suggestion: suggestion.score)
    while len(ordered) > top_k:
        ordered.pop(0)

    LOGGER.debug(
        "Selected %d of %d suggestions", len(ordered), len(suggestions)
    )
    return ordered
