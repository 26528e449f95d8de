import pytest

from disambiguation.errors import NoVocabularyMatch, WordBoundaryViolation
from disambiguation.tokenization import match_vocabulary


def _spellings(groups):
    return [[(word.spelling, word.referent.ref_id) for word in group] for group in groups]


def test_empty_input_has_no_groups(catalog):
    assert match_vocabulary("", catalog.words) == []
    assert match_vocabulary("   ", catalog.words) == []


def test_every_entity_sharing_a_spelling_joins_the_group(catalog):
    groups = match_vocabulary("examine pale red", catalog.words)
    assert _spellings(groups) == [
        [("examine", 1)],
        [("pale", 3), ("pale", 6)],
        [("red", 3), ("red", 5), ("red", 6)],
    ]


def test_multi_word_spellings_win_over_shorter_matches(catalog):
    groups = match_vocabulary("look at candy", catalog.words)
    assert _spellings(groups) == [[("look at", 1)], [("candy", 5)]]


def test_matching_ignores_case(catalog):
    groups = match_vocabulary("TAKE Red", catalog.words)
    assert groups[0][0].spelling == "take"
    assert len(groups[1]) == 3


def test_unknown_word_raises(catalog):
    with pytest.raises(NoVocabularyMatch) as excinfo:
        match_vocabulary("qqq", catalog.words)
    assert excinfo.value.remainder == "qqq"


def test_partial_word_match_raises_boundary_violation(catalog):
    with pytest.raises(WordBoundaryViolation) as excinfo:
        match_vocabulary("examined", catalog.words)
    assert excinfo.value.matched == "examine"
    assert excinfo.value.remainder == "d"


def test_word_starting_with_a_shortcut_raises_boundary_violation(catalog):
    with pytest.raises(WordBoundaryViolation) as excinfo:
        match_vocabulary("xyz", catalog.words)
    assert excinfo.value.matched == "x"
    assert excinfo.value.remainder == "yz"
