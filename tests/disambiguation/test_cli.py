import argparse
import json

import pytest

from adventure_core.common.config import MAX_SUGGESTIONS_ENV, WORLD_PATH_ENV
from disambiguation import cli


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    monkeypatch.delenv(WORLD_PATH_ENV, raising=False)
    monkeypatch.delenv(MAX_SUGGESTIONS_ENV, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(cli, "find_dotenv", lambda usecwd=True: "")


def test_parser_requires_a_command():
    parser = cli.build_parser()
    with pytest.raises(SystemExit):
        parser.parse_args([])


def test_parser_defaults():
    args = cli.build_parser().parse_args(["suggest", "examine "])
    assert args.handler is cli._run_suggest
    assert args.caret is None
    assert args.format == "text"
    assert not args.verbose


def test_suggest_prints_text_report(capsys):
    exit_code = cli.main(["suggest", "examine pale red "])

    out = capsys.readouterr().out.splitlines()
    assert exit_code == 0
    assert out[0] == "> examine pale red "
    assert out[1:] == ["  - plastic", "  - bucket", "  - sandy", "  - small"]


def test_suggest_json_output(capsys):
    exit_code = cli.main(["suggest", "qq", "--format", "json"])
    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["ok"]
    assert payload["suggestions"] == []

    exit_code = cli.main(["suggest", "x", "--format", "json", "--max-suggestions", "1"])
    payload = json.loads(capsys.readouterr().out)
    assert payload["suggestions"] == [
        {"text": "x", "display": "x (examine)", "score": "inf"}
    ]


def test_inspect_shows_groups(capsys):
    exit_code = cli.main(["inspect", "take plastic bucket ", "--format", "json"])

    payload = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert payload["working_word"] == " "
    assert payload["groups"][0] == {"kind": "verb", "words": ["take"]}
    clusters = payload["groups"][1]["clusters"]
    assert [c["ref_id"] for c in clusters] == [3, 4, 6]
    assert all(c["complete"] for c in clusters)
    assert clusters[0]["marks"] == "XX"


def test_inspect_text_report(capsys):
    cli.main(["inspect", "examine pale "])
    out = capsys.readouterr().out
    assert "  verb: examine" in out
    assert "    #3 pale red sandy plastic bucket [X] open" in out


def test_unknown_word_exits_with_one(capsys):
    exit_code = cli.main(["suggest", "xyz "])
    out = capsys.readouterr().out
    assert exit_code == 1
    assert "(no suggestions:" in out


def test_fatal_error_exits_with_two(tmp_path, capsys):
    world_file = tmp_path / "world.json"
    world_file.write_text(
        json.dumps(
            {
                "verbs": [
                    {"spelling": "look", "prepositions": ["at"]},
                    {"spelling": "throw", "prepositions": ["at"]},
                ],
                "nouns": [{"names": "wall"}],
            }
        ),
        encoding="utf-8",
    )
    assert cli.main(["suggest", "look at ", "--world", str(world_file)]) == 2


def test_bad_world_reports_error(tmp_path, capsys):
    world_file = tmp_path / "broken.json"
    world_file.write_text("[]", encoding="utf-8")

    exit_code = cli.main(["suggest", "take", "--world", str(world_file)])

    assert exit_code == 2
    assert "Could not load world" in capsys.readouterr().err


def test_invalid_max_suggestions(capsys):
    exit_code = cli._run_suggest(
        argparse.Namespace(
            text="take",
            caret=None,
            world=None,
            max_suggestions=0,
            format="text",
            pretty=False,
        )
    )
    assert exit_code == 2
    assert "--max-suggestions" in capsys.readouterr().err


def test_world_comes_from_environment(monkeypatch, tmp_path, capsys):
    world_file = tmp_path / "lamp.json"
    world_file.write_text(
        json.dumps(
            {
                "verbs": [{"spelling": "light"}],
                "nouns": [{"names": "lamp", "adjectives": ["brass"]}],
            }
        ),
        encoding="utf-8",
    )
    monkeypatch.setenv(WORLD_PATH_ENV, str(world_file))

    assert cli.main(["suggest", "light brass "]) == 0
    assert "  - lamp" in capsys.readouterr().out


def test_vocabulary_lists_words(capsys):
    assert cli.main(["vocabulary"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "examine\tverb\t#1"
    assert "red\tadjective\t#6" in lines
    assert lines[-1] == "x\tverb\t#1"
