"""Entities the player can refer to, and the world that owns them."""

from .vocabulary import Noun, PartOfSpeech, Referable, Verb, VocabularyWord
from .world import World
from .world_loader import load_world

__all__ = [
    "Noun",
    "PartOfSpeech",
    "Referable",
    "Verb",
    "VocabularyWord",
    "World",
    "load_world",
]
