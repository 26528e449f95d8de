from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from adventure_core.common.config import DEFAULT_MAX_SUGGESTION_COUNT
from adventure_core.common.text import StringCaretPair, sterilize_input
from adventure_core.world.vocabulary import VocabularyWord

from .catalog import VocabularyCatalog
from .gating import gate_parts_of_speech
from .prompt import NEW_WORD, relevant_part, working_indices, working_word
from .strategies import (
    Suggestion,
    collect_candidates,
    rank_fresh_word,
    rank_partial_word,
    select_top_k,
)
from .tokenization import match_vocabulary
from .weaving import ContextGroup, GroupKind, weave

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class PromptContext:
    """What the player's fully typed words could mean, plus suggestions for the next one."""

    groups: Tuple[ContextGroup, ...]
    suggestions: Tuple[Suggestion, ...]
    relevant_part: str = ""
    working_word: str = ""

    @property
    def verb_group(self) -> ContextGroup:
        return self.groups[0]

    @property
    def verbs(self) -> Tuple[VocabularyWord, ...]:
        return self.verb_group.words

    @property
    def last_group(self) -> ContextGroup:
        return self.groups[-1]

    @property
    def is_fresh_word(self) -> bool:
        return self.working_word in ("", NEW_WORD)

    def noun_phrases(self) -> Tuple[ContextGroup, ...]:
        return tuple(g for g in self.groups if g.kind is GroupKind.NOUN_PHRASE)

    def __str__(self) -> str:
        lines = [str(group) for group in self.groups]
        lines.append(
            "suggestions: " + ", ".join(s.display for s in self.suggestions)
        )
        return "\n".join(lines)


def create_context(
    text: str,
    caret: Optional[int],
    catalog: VocabularyCatalog,
    *,
    max_suggestions: int = DEFAULT_MAX_SUGGESTION_COUNT,
) -> PromptContext:
    """Disambiguate ``text`` up to the word under ``caret`` and rank suggestions.

    The word holding the caret is cleaved off: only fully typed words are
    matched, and the word in progress is what the suggestions complete.
    ``caret`` defaults to the end of the text.

    Raises a :class:`~disambiguation.errors.ContextError` subclass when the
    typed words make no sense yet, or
    :class:`~disambiguation.errors.AmbiguousPreposition` on a catalog defect.
    """

    sterile = sterilize_input(text, len(text) if caret is None else caret)
    return create_context_from_sterile(sterile, catalog, max_suggestions=max_suggestions)


def create_context_from_sterile(
    sterile: StringCaretPair,
    catalog: VocabularyCatalog,
    *,
    max_suggestions: int = DEFAULT_MAX_SUGGESTION_COUNT,
) -> PromptContext:
    indices = working_indices(sterile)
    typed = working_word(sterile, indices)
    relevant = relevant_part(sterile, indices) if typed else ""

    groups = match_vocabulary(relevant, catalog.words)
    groups = gate_parts_of_speech(groups)
    woven = weave(groups, catalog)

    fresh_word = typed in ("", NEW_WORD)
    candidates = collect_candidates(woven, catalog, fresh_word=fresh_word)
    if fresh_word:
        ranked = rank_fresh_word(candidates)
    else:
        ranked = rank_partial_word(candidates, typed)
    suggestions = select_top_k(ranked, max_suggestions)

    LOGGER.debug(
        "Context for %r (working word %r): %d groups, %d suggestions",
        sterile.text,
        typed,
        len(woven),
        len(suggestions),
    )
    return PromptContext(
        groups=tuple(woven),
        suggestions=tuple(suggestions),
        relevant_part=relevant,
        working_word=typed,
    )
