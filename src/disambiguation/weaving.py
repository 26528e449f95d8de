from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence, Tuple, Union

from adventure_core.world.vocabulary import VocabularyWord

from .catalog import VocabularyCatalog
from .errors import AmbiguousPreposition, NoConsistentNoun
from .profiles import ClusterLedger, NounProfile, NounProfileCluster
from .tokenization import AmbiguityGroup

LOGGER = logging.getLogger(__name__)

GroupItem = Union[VocabularyWord, NounProfileCluster]


class GroupKind(str, Enum):
    VERB = "verb"
    PREPOSITION = "preposition"
    NOUN_PHRASE = "noun_phrase"


@dataclass(frozen=True)
class ContextGroup:
    kind: GroupKind
    words: Tuple[VocabularyWord, ...] = ()
    clusters: Tuple[NounProfileCluster, ...] = ()

    @property
    def incomplete_clusters(self) -> Tuple[NounProfileCluster, ...]:
        return tuple(cluster for cluster in self.clusters if not cluster.is_complete)

    def __str__(self) -> str:
        if self.kind is GroupKind.NOUN_PHRASE:
            body = "; ".join(
                f"{cluster.profile.noun.describe()} [{cluster}]"
                for cluster in self.clusters
            )
        else:
            body = ", ".join(word.spelling for word in self.words)
        return f"{self.kind.value}: {body}"


class ContextSequenceWeaver:
    """Turn gated ambiguity groups into verb, preposition and noun-phrase groups.

    English puts adjectives before the noun, so an actual noun ends the
    current noun phrase; prepositions end it as well.
    """

    def __init__(self, catalog: VocabularyCatalog) -> None:
        self.catalog = catalog
        self.ledger = ClusterLedger()
        self.cluster_index = 0
        self.streak_index = 0
        self.profiles_in_cluster: List[NounProfile] = []
        self._sequence: List[List[GroupItem]] = []

    def weave(self, groups: Sequence[AmbiguityGroup]) -> List[ContextGroup]:
        if not groups:
            return [ContextGroup(GroupKind.VERB)]

        self._sequence = [list(groups[0]), []]
        for group in groups[1:]:
            if any(not word.is_noun_word for word in group):
                self._handle_preposition(group)
            else:
                self._handle_nouns(group)

        return self._finish()

    def _open_group(self) -> None:
        if self._sequence[-1]:
            self._sequence.append([])

    def _break_cluster(self) -> None:
        self.cluster_index += 1
        self.streak_index = 0
        self.profiles_in_cluster.clear()
        self._open_group()

    def _handle_preposition(self, group: AmbiguityGroup) -> None:
        self._break_cluster()
        slot = self._sequence[-1]
        for word in group:
            if word.is_noun_word:
                continue
            if slot:
                raise AmbiguousPreposition(word.spelling)
            slot.append(word)
        self._open_group()

    def _handle_nouns(self, group: AmbiguityGroup) -> None:
        actual_noun_found = False
        current = self._sequence[-1]

        for word in group:
            profile = self.catalog.profile_for(word)
            if profile is not None and profile not in self.profiles_in_cluster:
                self.profiles_in_cluster.append(profile)

            for tracked in self.profiles_in_cluster:
                cluster = self.ledger.cluster_for(tracked, self.cluster_index)
                if not any(item is cluster for item in current):
                    current.append(cluster)

                if cluster.is_relevant_to(word):
                    cluster.mark_as_mentioned(word, self.streak_index)
                else:
                    cluster.mark_as_missed(self.streak_index)

                if tracked.is_actual_noun(word):
                    cluster.is_complete = True
                    actual_noun_found = True

        self.streak_index += 1
        if actual_noun_found:
            self._break_cluster()

    def _finish(self) -> List[ContextGroup]:
        while len(self._sequence) > 1 and not self._sequence[-1]:
            self._sequence.pop()

        woven = [ContextGroup(GroupKind.VERB, words=tuple(self._sequence[0]))]
        for group_index, items in enumerate(self._sequence[1:], start=1):
            if items and isinstance(items[0], VocabularyWord):
                woven.append(
                    ContextGroup(GroupKind.PREPOSITION, words=tuple(items))  # type: ignore[arg-type]
                )
                continue

            surviving = tuple(
                item
                for item in items
                if isinstance(item, NounProfileCluster) and item.has_cluster_streak()
            )
            pruned = len(items) - len(surviving)
            if pruned:
                LOGGER.debug("Pruned %d broken streaks from group %d", pruned, group_index)
            if not surviving:
                raise NoConsistentNoun(group_index)
            woven.append(ContextGroup(GroupKind.NOUN_PHRASE, clusters=surviving))

        return woven


def weave(groups: Sequence[AmbiguityGroup], catalog: VocabularyCatalog) -> List[ContextGroup]:
    """Build context groups from gated ambiguity groups using a fresh ledger."""

    return ContextSequenceWeaver(catalog).weave(groups)
