"""Shared fixtures: a small in-memory dictionary and the packaged lexical sets."""
import sys
from pathlib import Path

import pytest

# tests/ -> repo root -> backend/
BACKEND_DIR = Path(__file__).resolve().parents[1] / "backend"
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

from languages.ukrainian import DictionaryWordTagger, LexicalSets, TaggedWord, UkrainianTagger  # noqa: E402


DICTIONARY = {
    # particles
    "роби": [("робити", "verb:impr:s:2")],
    "він": [("він", "noun:m:v_naz:&pron:pers:3")],
    "зелений": [("зелений", "adj:m:v_naz"), ("зелений", "adj:m:v_zna")],
    "бо": [("бо", "conj:subord")],
    "то": [("то", "conj:coord"), ("то", "adv")],
    # numerals
    "сто": [("сто", "numr:p:v_naz"), ("сто", "numr:p:v_zna")],
    "два": [("два", "numr:m:v_naz"), ("два", "numr:m:v_zna")],
    "рік": [("рік", "noun:m:v_naz"), ("рік", "noun:m:v_zna")],
    "го": [("го", "excl")],
    "річному": [("річний", "adj:m:v_dav"), ("річний", "adj:m:v_mis")],
    # по- adverbs
    "по": [("по", "prep:rv_zna:rv_mis")],
    "українському": [("український", "adj:m:v_mis"), ("український", "adj:n:v_mis")],
    "український": [("український", "adj:m:v_naz")],
    "новий": [("новий", "adj:m:v_naz"), ("новий", "adj:m:v_zna")],
    "батькові": [("батько", "noun:m:v_dav:anim")],
    # dash prefixes, пів-, city/avenue
    "чемпіон": [("чемпіон", "noun:m:v_naz:anim")],
    "президент": [("президент", "noun:m:v_naz:anim:xp1")],
    "Європи": [("Європа", "noun:f:v_rod:prop:geo")],
    "Бейкер": [("Бейкер", "noun:m:v_naz:prop:lname:anim")],
    "стріт": [("стріт", "noun:f:nv:prop")],
    # agreement
    "ледь": [("ледь", "adv")],
    "підприємство": [("підприємство", "noun:n:v_naz"), ("підприємство", "noun:n:v_zna")],
    "банкрут": [("банкрут", "noun:m:v_naz:anim")],
    "сонях": [("сонях", "noun:m:v_naz")],
    "красень": [("красень", "noun:m:v_naz:anim")],
    "місяця": [("місяць", "noun:m:v_rod")],
    "князя": [("князь", "noun:m:v_rod:anim"), ("князь", "noun:m:v_zna:anim")],
    "годину": [("година", "noun:f:v_zna")],
    "максимум": [("максимум", "noun:m:v_naz")],
    "Буш": [("Буш", "noun:m:v_naz:prop:lname:anim")],
    "молодший": [("молодий", "adj:m:v_naz:compr"), ("молодий", "adj:m:v_zna:ranim:compr")],
    # о- adjectives
    "блакитний": [("блакитний", "adj:m:v_naz"), ("блакитний", "adj:m:v_zna")],
}


class RecordingSink:
    """Debug sink that keeps everything in memory."""

    def __init__(self):
        self.unknown: list[str] = []
        self.tagged: list[list] = []

    def append_unknown(self, word):
        self.unknown.append(word)

    def append_tagged(self, tokens):
        self.tagged.append(list(tokens))


@pytest.fixture
def word_tagger():
    return DictionaryWordTagger({
        form: [TaggedWord(lemma=lemma, tag=tag) for lemma, tag in entries]
        for form, entries in DICTIONARY.items()
    })


@pytest.fixture(scope="session")
def lexicon():
    return LexicalSets.load()


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def tagger(word_tagger, lexicon, sink):
    return UkrainianTagger(word_tagger, lexicon, sink)
