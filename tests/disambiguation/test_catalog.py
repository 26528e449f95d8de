from adventure_core.world.vocabulary import PartOfSpeech
from disambiguation.catalog import VocabularyCatalog


def test_catalog_builds_one_profile_per_noun(catalog, test_world):
    assert sorted(catalog.profiles) == [3, 4, 5, 6]
    assert catalog.profiles[5].noun is test_world.nouns[2]


def test_verb_words_in_matcher_order(catalog):
    assert [w.spelling for w in catalog.verb_words()] == [
        "examine",
        "inspect",
        "look at",
        "take",
        "x",
    ]


def test_noun_starters_are_names_and_adjectives(catalog):
    starters = catalog.noun_starters()
    assert all(
        word.part_of_speech in (PartOfSpeech.NOUN, PartOfSpeech.ADJECTIVE)
        for word in starters
    )
    assert starters[0].spelling == "plastic"
    assert starters[-1].spelling == "red"


def test_profile_for_ignores_verbs(catalog):
    verb_word = catalog.verb_words()[0]
    noun_word = catalog.noun_starters()[0]
    assert catalog.profile_for(verb_word) is None
    assert catalog.profile_for(noun_word).key == noun_word.referent.ref_id


def test_from_words_deduplicates(test_world):
    words = test_world.load_relevant_vocabulary()
    catalog = VocabularyCatalog.from_words(words + words)
    assert len(catalog.words) == len(words)
