"""Incremental disambiguation of partially typed adventure commands."""

from .catalog import VocabularyCatalog
from .context import PromptContext, create_context
from .errors import (
    AmbiguousPreposition,
    ContextError,
    FatalContextError,
    IncorrectPartOfSpeech,
    NoConsistentNoun,
    NoVocabularyMatch,
    WordBoundaryViolation,
)
from .scoring import score_suggestion
from .service import SuggestionResult, SuggestionService
from .strategies import Suggestion, select_top_k

__all__ = [
    "AmbiguousPreposition",
    "ContextError",
    "FatalContextError",
    "IncorrectPartOfSpeech",
    "NoConsistentNoun",
    "NoVocabularyMatch",
    "PromptContext",
    "Suggestion",
    "SuggestionResult",
    "SuggestionService",
    "VocabularyCatalog",
    "WordBoundaryViolation",
    "create_context",
    "score_suggestion",
    "select_top_k",
]
