import json
import logging
import unicodedata
from pathlib import Path
from typing import List, Union

from pydantic import BaseModel, Field, ValidationError, field_validator

from adventure_core.common.text import is_valid_string

from .world import World

# Module-level logger
logger = logging.getLogger(__name__)


def _normalize(value: str) -> str:
    return unicodedata.normalize("NFKC", value.strip())


def _check_typable(value: str) -> str:
    if value and not is_valid_string(value):
        raise ValueError(f'"{value}" is not player-typable')
    return value


class VerbSpec(BaseModel):
    spelling: str
    synonyms: List[str] = Field(default_factory=list)
    shortcut: str = ""
    prepositions: List[str] = Field(default_factory=list)

    @field_validator("spelling", "shortcut", mode="before")
    def normalize_word(cls, v: str) -> str:
        return _check_typable(_normalize(v or "").lower())

    @field_validator("synonyms", "prepositions", mode="before")
    def normalize_words(cls, v: List[str] | None) -> List[str]:
        if v is None:
            return []
        cleaned: List[str] = []
        for item in v:
            word = _check_typable(_normalize(item or "").lower())
            if word and word not in cleaned:
                cleaned.append(word)
        return cleaned

    @field_validator("spelling", mode="after")
    def check_spelling(cls, v: str) -> str:
        if not v:
            raise ValueError("verb spelling cannot be blank")
        return v


class NounSpec(BaseModel):
    names: str
    adjectives: List[str] = Field(default_factory=list)

    @field_validator("names", mode="before")
    def normalize_names(cls, v: str) -> str:
        names = " ".join(_normalize(v or "").split())
        if not names:
            raise ValueError("noun names cannot be blank")
        return _check_typable(names)

    @field_validator("adjectives", mode="before")
    def normalize_adjectives(cls, v: List[str] | None) -> List[str]:
        if v is None:
            return []
        return [_check_typable(_normalize(a)) for a in v if a and a.strip()]


class WorldSpec(BaseModel):
    title: str = ""
    author: str = ""
    verbs: List[VerbSpec] = Field(default_factory=list)
    nouns: List[NounSpec] = Field(default_factory=list)


def build_world(spec: WorldSpec) -> World:
    world = World(title=spec.title, author=spec.author)
    for verb in spec.verbs:
        world.add_verb(
            verb.spelling,
            synonyms=verb.synonyms,
            shortcut=verb.shortcut,
            prepositions=verb.prepositions,
        )
    for noun in spec.nouns:
        world.add_noun(noun.names, *noun.adjectives)
    return world


def load_world(json_path: Union[str, Path]) -> World:
    """
    Load a world definition JSON into a populated World.
    - Verbs carry synonyms, an optional shortcut and object prepositions.
    - Nouns carry a space-separated names string (primary name first) and adjectives.
    - Every spelling must be typable at the prompt.
    """
    path = Path(json_path)
    with open(path, "rb") as f:
        raw = json.loads(f.read())

    if not isinstance(raw, dict):
        logger.error("Unsupported JSON root type: %s", type(raw))
        raise ValueError(f"World file {path} must contain a JSON object")

    try:
        spec = WorldSpec.model_validate(raw)
    except ValidationError as exc:
        raise ValueError(f"Invalid world definition in {path}: {exc}") from exc

    logger.info(
        "Loading world %r with %d verbs and %d nouns",
        spec.title,
        len(spec.verbs),
        len(spec.nouns),
    )
    return build_world(spec)
