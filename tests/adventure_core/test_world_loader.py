import json

import pytest

from adventure_core.common.config import get_config_paths
from adventure_core.world.world_loader import load_world


def _write(tmp_path, payload):
    path = tmp_path / "world.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_packaged_world_loads():
    world = load_world(get_config_paths()["test_world"])

    assert world.title == "Test Game"
    assert [verb.spelling for verb in world.verbs] == ["examine", "take"]
    assert world.verbs[0].synonyms == ("look at", "inspect")
    assert world.verbs[0].shortcut == "x"
    assert [noun.describe() for noun in world.nouns] == [
        "pale red sandy plastic bucket",
        "blue clean plastic bucket",
        "red candy",
        "small pale red plastic bucket",
    ]


def test_verb_words_are_normalized(tmp_path):
    path = _write(
        tmp_path,
        {
            "verbs": [
                {"spelling": " Throw ", "synonyms": ["Toss", "toss", ""], "prepositions": ["AT"]}
            ],
            "nouns": [{"names": "ball   orb", "adjectives": ["red", " "]}],
        },
    )
    world = load_world(path)

    verb = world.verbs[0]
    assert verb.spelling == "throw"
    assert verb.synonyms == ("toss",)
    assert verb.prepositions == ("at",)
    assert world.nouns[0].names == ("ball", "orb")
    assert world.nouns[0].adjectives == ("red",)


def test_non_object_root_is_rejected(tmp_path):
    path = _write(tmp_path, ["examine"])
    with pytest.raises(ValueError, match="JSON object"):
        load_world(path)


@pytest.mark.parametrize(
    "payload",
    [
        {"verbs": [{"spelling": ""}]},
        {"verbs": [{"spelling": "take!"}]},
        {"nouns": [{"names": "   "}]},
    ],
)
def test_invalid_definitions_raise_value_error(tmp_path, payload):
    with pytest.raises(ValueError, match="Invalid world definition"):
        load_world(_write(tmp_path, payload))


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_world(tmp_path / "missing.json")
