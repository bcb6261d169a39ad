"""Filling a Trie from word lists, plus rough English inflection rules."""
from __future__ import annotations

import logging
from typing import TextIO

from wordament.trie import Trie

logger = logging.getLogger("wordament")

VOWELS = frozenset("aeiou")
NEVER_DOUBLED = frozenset("wxy")


def _is_letter(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def grab(trie: Trie, stream: TextIO, min_length: int = 1) -> int:
    """Insert every run of letters read from `stream` into `trie`.

    Anything that is not an ASCII letter separates words, so plain word-per-line
    lists work as well as free text. Returns the number of words inserted.
    """
    count = 0
    word: list[str] = []
    while True:
        chunk = stream.read(65536)
        if not chunk:
            break
        for ch in chunk:
            if _is_letter(ch):
                word.append(ch)
            elif word:
                if len(word) >= min_length:
                    trie.insert("".join(word))
                    count += 1
                word = []
    if word and len(word) >= min_length:
        trie.insert("".join(word))
        count += 1
    return count


def load_trie(path: str, min_length: int = 3) -> Trie:
    trie = Trie()
    with open(path, "r", encoding="utf-8") as f:
        count = grab(trie, f, min_length)
    logger.info("Loaded %d words (%d distinct) from %s", count, len(trie), path)
    return trie


def _check(word: str) -> str:
    if len(word) < 2:
        raise ValueError(f"Need at least two letters to inflect {word!r}")
    return word.lower()


def _ends_cvc(word: str) -> bool:
    """consonant-vowel-consonant ending whose last letter may be doubled (cut, stop)."""
    if len(word) < 3:
        return False
    a, b, c = word[-3:]
    return a not in VOWELS and b in VOWELS and c not in VOWELS and c not in NEVER_DOUBLED


def add_s(word: str) -> str:
    word = _check(word)
    if word.endswith("ff"):
        return word + "s"
    if word.endswith("f"):
        return word[:-1] + "ves"    # leaf -> leaves
    if word.endswith(("s", "x", "z", "ch", "sh")):
        return word + "es"
    if word.endswith("y") and word[-2] not in VOWELS:
        return word[:-1] + "ies"    # city -> cities
    return word + "s"


def add_ing(word: str) -> str:
    word = _check(word)
    if word.endswith("e") and word[-2] not in VOWELS:
        return word[:-1] + "ing"    # crave -> craving
    if _ends_cvc(word):
        return word + word[-1] + "ing"  # cut -> cutting
    return word + "ing"


def add_d(word: str) -> str:
    word = _check(word)
    if word.endswith("e"):
        return word + "d"
    if word.endswith("y") and word[-2] not in VOWELS:
        return word[:-1] + "ied"    # carry -> carried
    if _ends_cvc(word):
        return word + word[-1] + "ed"   # stop -> stopped
    return word + "ed"


def add_regular_noun(trie: Trie, word: str):
    forms = [word, add_s(word)]
    for form in forms:
        trie.insert(form)


def add_regular_verb(trie: Trie, word: str):
    # Inflect before inserting so a rejected word leaves the trie untouched
    forms = [word, add_s(word), add_ing(word), add_d(word)]
    for form in forms:
        trie.insert(form)
