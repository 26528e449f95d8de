"""Track how consistently each noun is described across the player's input.

Given
    1. a pale red sandy plastic bucket
    2. a blue clean plastic bucket
    3. a red candy
    4. a small pale red plastic bucket
and the input "pale red plastic", the positions resolve to

    0: PALE    -> bucket 1, bucket 4
    1: RED     -> bucket 1, candy, bucket 4
    2: PLASTIC -> bucket 1, bucket 2, bucket 4

Every noun got hits, but only buckets 1 and 4 were named at *every*
position. Those unbroken streaks are what the weaver keeps, so suggestions
only ever complete a noun the player could still mean.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from adventure_core.world.vocabulary import Noun, PartOfSpeech, VocabularyWord


@dataclass(frozen=True, eq=False)
class NounProfile:
    """Every word that describes one noun, and which of them are actual nouns."""

    noun: Noun
    words: Tuple[VocabularyWord, ...]
    actual_nouns: frozenset[str]

    @classmethod
    def from_words(cls, noun: Noun, words: Iterable[VocabularyWord]) -> "NounProfile":
        ordered = tuple(sorted(words))
        actual = frozenset(
            word.key for word in ordered if word.part_of_speech is PartOfSpeech.NOUN
        )
        return cls(noun=noun, words=ordered, actual_nouns=actual)

    @property
    def key(self) -> int:
        return self.noun.ref_id

    def is_actual_noun(self, word: VocabularyWord) -> bool:
        return word.key in self.actual_nouns

    def __lt__(self, other: "NounProfile") -> bool:
        return self.key < other.key

    def __repr__(self) -> str:
        return f"NounProfile({self.noun.describe()!r}, key={self.key})"


@dataclass(eq=False)
class NounProfileCluster:
    """One noun profile inside one noun phrase of the current input."""

    profile: NounProfile
    cluster_index: int
    marks: List[bool] = field(default_factory=list)
    mentioned: Dict[str, VocabularyWord] = field(default_factory=dict)
    unmentioned: Dict[str, VocabularyWord] = field(default_factory=dict)
    is_complete: bool = False

    def __post_init__(self) -> None:
        if not self.unmentioned and not self.mentioned:
            for word in self.profile.words:
                self.unmentioned.setdefault(word.key, word)

    def is_relevant_to(self, word: VocabularyWord) -> bool:
        return word.key in self.unmentioned or word.key in self.mentioned

    def mark_as_mentioned(self, word: VocabularyWord, streak_index: int) -> None:
        own_word = self.unmentioned.pop(word.key, None)
        if word.key not in self.mentioned:
            self.mentioned[word.key] = own_word or word
        self._set_mark(streak_index, True)

    def mark_as_missed(self, streak_index: int) -> None:
        self._set_mark(streak_index, False)

    def _set_mark(self, streak_index: int, latest: bool) -> None:
        while len(self.marks) <= streak_index:
            self.marks.append(False)
        self.marks[streak_index] = latest

    def has_cluster_streak(self) -> bool:
        return all(self.marks)

    def unmentioned_words(self) -> List[VocabularyWord]:
        return sorted(self.unmentioned.values())

    def __str__(self) -> str:
        marks = "".join("X" if mark else "." for mark in self.marks)
        mentioned = ", ".join(
            word.spelling for word in sorted(self.mentioned.values())
        )
        return f"{marks} | {mentioned}"


class ClusterLedger:
    """Owns the clusters created during one disambiguation pass.

    Profiles are shared across passes, so per-pass marks live here instead of
    on the profile.
    """

    def __init__(self) -> None:
        self._clusters: Dict[Tuple[int, int], NounProfileCluster] = {}

    def cluster_for(self, profile: NounProfile, cluster_index: int) -> NounProfileCluster:
        key = (profile.key, cluster_index)
        cluster = self._clusters.get(key)
        if cluster is None:
            cluster = NounProfileCluster(profile=profile, cluster_index=cluster_index)
            self._clusters[key] = cluster
        return cluster

    def mark_as_mentioned(
        self,
        profile: NounProfile,
        word: VocabularyWord,
        cluster_index: int,
        streak_index: int,
    ) -> NounProfileCluster:
        cluster = self.cluster_for(profile, cluster_index)
        cluster.mark_as_mentioned(word, streak_index)
        return cluster

    def mark_as_missed(
        self, profile: NounProfile, cluster_index: int, streak_index: int
    ) -> NounProfileCluster:
        cluster = self.cluster_for(profile, cluster_index)
        cluster.mark_as_missed(streak_index)
        return cluster

    def __len__(self) -> int:
        return len(self._clusters)
