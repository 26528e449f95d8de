from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from adventure_core.world.world import World
from disambiguation.catalog import VocabularyCatalog


def build_test_world() -> World:
    """The bucket and candy world used to try out the prompt."""

    world = World(title="Test Game", author="Joseph Cramsey")
    world.add_verb("examine", synonyms=["look at", "inspect"], shortcut="x")
    world.add_verb("take")
    world.add_noun("bucket", "pale", "red", "sandy", "plastic")
    world.add_noun("bucket", "blue", "clean", "plastic")
    world.add_noun("candy", "red")
    world.add_noun("bucket", "small", "pale", "red", "plastic")
    return world


@pytest.fixture()
def test_world() -> World:
    return build_test_world()


@pytest.fixture()
def catalog(test_world: World) -> VocabularyCatalog:
    return VocabularyCatalog.from_world(test_world)
