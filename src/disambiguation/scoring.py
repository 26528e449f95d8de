"""Fuzzy scoring of suggestion candidates against the word being typed."""

from __future__ import annotations

import math
from dataclasses import dataclass

SHIFT_PENALTY = 100.0


@dataclass(frozen=True)
class OffsetScore:
    offset: int
    char_matches: int
    score: float


def score_at_offset(typed: str, candidate: str, offset: int) -> OffsetScore:
    """Score ``typed`` laid over ``candidate`` starting at ``offset``.

    Matching characters count for the candidate; the offset is penalized
    quadratically and the leftover length linearly, so prefix matches and
    near-complete words come first. An exact match scores ``math.inf``.
    """

    typed = typed.lower()
    candidate = candidate.lower()
    length_diff = len(candidate) - len(typed)
    fragment = candidate[offset : offset + len(typed)]

    char_matches = sum(1 for a, b in zip(typed, fragment) if a == b)
    if char_matches == 0:
        return OffsetScore(offset=offset, char_matches=0, score=0.0)

    shift_penalty = (offset * offset * SHIFT_PENALTY) / (length_diff + 1)
    denominator = shift_penalty + length_diff
    if denominator <= 0:
        return OffsetScore(offset=offset, char_matches=char_matches, score=math.inf)
    return OffsetScore(
        offset=offset, char_matches=char_matches, score=char_matches / denominator
    )


def score_suggestion(typed: str, candidate: str) -> float:
    """Return the best score of ``typed`` over every offset of ``candidate``.

    Candidates shorter than what was typed score 0.0, as does any candidate
    sharing no aligned character with it.
    """

    if not typed or len(typed) > len(candidate):
        return 0.0

    best = 0.0
    for offset in range(len(candidate) - len(typed) + 1):
        scored = score_at_offset(typed, candidate, offset)
        if scored.score > best:
            best = scored.score
    return best
