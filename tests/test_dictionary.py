import io

import pytest
from wordament.dictionary import (
    add_d, add_ing, add_regular_noun, add_regular_verb, add_s, grab, load_trie,
)
from wordament.trie import Trie


def test_grab_splits_on_non_letters():
    trie = Trie()
    count = grab(trie, io.StringIO("cat\ndog, bird's\n\nFish"))
    assert count == 5
    for w in ["cat", "dog", "bird", "s", "fish"]:
        assert w in trie


def test_grab_min_length():
    trie = Trie()
    count = grab(trie, io.StringIO("a an ant ants"), min_length=3)
    assert count == 2
    assert "ant" in trie
    assert "ants" in trie
    assert "an" not in trie


def test_grab_non_ascii_letters_separate_words():
    trie = Trie()
    grab(trie, io.StringIO("naïve"))
    assert "na" in trie
    assert "ve" in trie
    assert len(trie) == 2


def test_grab_word_across_chunk_boundary():
    trie = Trie()
    text = "x" * 65535 + "yz\ncat"
    grab(trie, io.StringIO(text))
    assert "x" * 65535 + "yz" in trie
    assert "cat" in trie
    assert len(trie) == 2


def test_load_trie(tmp_path):
    dict_file = tmp_path / "dict.txt"
    dict_file.write_text("CAT\ncats\nat\nDog\n", encoding="utf-8")
    trie = load_trie(str(dict_file), min_length=3)
    assert "cat" in trie
    assert "cats" in trie
    assert "dog" in trie
    assert "at" not in trie
    assert len(trie) == 3


def test_load_trie_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_trie(str(tmp_path / "missing.txt"))


@pytest.mark.parametrize("word, expected", [
    ("cat", "cats"),
    ("cliff", "cliffs"),
    ("leaf", "leaves"),
    ("bus", "buses"),
    ("box", "boxes"),
    ("church", "churches"),
    ("dish", "dishes"),
    ("city", "cities"),
    ("boy", "boys"),
])
def test_add_s(word, expected):
    assert add_s(word) == expected


@pytest.mark.parametrize("word, expected", [
    ("click", "clicking"),
    ("stuff", "stuffing"),
    ("coat", "coating"),
    ("cut", "cutting"),
    ("crave", "craving"),
    ("shoe", "shoeing"),
    ("play", "playing"),
    ("go", "going"),
])
def test_add_ing(word, expected):
    assert add_ing(word) == expected


@pytest.mark.parametrize("word, expected", [
    ("click", "clicked"),
    ("coat", "coated"),
    ("stop", "stopped"),
    ("transfer", "transferred"),
    ("continue", "continued"),
    ("carry", "carried"),
    ("play", "played"),
])
def test_add_d(word, expected):
    assert add_d(word) == expected


def test_inflection_needs_two_letters():
    for fn in (add_s, add_ing, add_d):
        with pytest.raises(ValueError):
            fn("a")


def test_inflection_lowercases():
    assert add_s("Fox") == "foxes"


def test_add_regular_noun():
    trie = Trie()
    add_regular_noun(trie, "fox")
    assert "fox" in trie
    assert "foxes" in trie
    assert len(trie) == 2


def test_add_regular_verb():
    trie = Trie()
    add_regular_verb(trie, "jump")
    for w in ["jump", "jumps", "jumping", "jumped"]:
        assert w in trie
    assert len(trie) == 4


def test_rejected_word_leaves_trie_untouched():
    trie = Trie()
    with pytest.raises(ValueError):
        add_regular_noun(trie, "a")
    with pytest.raises(ValueError):
        add_regular_verb(trie, "b")
    assert len(trie) == 0
    assert "a" not in trie
    assert "b" not in trie
