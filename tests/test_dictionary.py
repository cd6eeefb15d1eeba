from types import SimpleNamespace

import pytest

from core.errors import AppErrorException, ErrorCode
from languages.ukrainian.dictionary import (
    DictionaryWordTagger,
    PymorphyWordTagger,
    grammemes_to_tag,
    lookup_tokens,
)
from languages.ukrainian.tags import TaggedWord


class FakeAnalyzer:
    """Stands in for pymorphy3.MorphAnalyzer."""

    def __init__(self, parses):
        self._parses = parses

    def word_is_known(self, word):
        return word in self._parses

    def parse(self, word):
        return [
            SimpleNamespace(tag=SimpleNamespace(POS=pos, grammemes=frozenset(grammemes)), normal_form=lemma)
            for pos, grammemes, lemma in self._parses.get(word, [])
        ]


@pytest.mark.parametrize("pos, grammemes, word, expected", [
    ("NOUN", {"NOUN", "anim", "masc", "sing", "nomn"}, "чемпіон", "noun:m:v_naz:anim"),
    ("NOUN", {"NOUN", "inan", "femn", "plur", "gent"}, "книг", "noun:p:v_rod"),
    ("ADJF", {"ADJF", "neut", "sing", "loct"}, "новому", "adj:n:v_mis"),
    ("PRTF", {"PRTF", "masc", "sing", "accs"}, "зроблений", "adjp:m:v_zna"),
    ("NUMR", {"NUMR", "plur", "nomn"}, "сто", "numr:p:v_naz"),
    ("NPRO", {"NPRO", "masc", "sing", "nomn"}, "він", "noun:m:v_naz:&pron"),
    ("VERB", {"VERB", "impr", "sing"}, "роби", "verb:impr"),
    ("VERB", {"VERB", "futr", "sing"}, "зробиться", "verb:rev:futr"),
    ("INFN", {"INFN", "perf"}, "зробити", "verb:inf"),
    ("ADVB", {"ADVB"}, "швидко", "adv"),
    ("NOUN", {"NOUN", "masc", "Fixd", "Sgtm"}, "кенгуру", "noun:m:nv:np"),
    ("NOUN", {"NOUN", "femn", "sing", "datv", "Slng", "Infr"}, "тьолці", "noun:f:v_dav:slang"),
])
def test_grammemes_to_tag(pos, grammemes, word, expected):
    assert grammemes_to_tag(pos, grammemes, word) == expected


def test_unsupported_pos():
    assert grammemes_to_tag("PNCT", {"PNCT"}) is None
    assert grammemes_to_tag(None, set()) is None


def test_pymorphy_tagger_skips_unknown_words():
    tagger = PymorphyWordTagger(FakeAnalyzer({
        "банк": [
            ("NOUN", {"NOUN", "inan", "masc", "sing", "nomn"}, "банк"),
            ("NOUN", {"NOUN", "inan", "masc", "sing", "accs"}, "банк"),
            ("PNCT", {"PNCT"}, "банк"),
        ],
    }))
    assert tagger.tag("банк") == [
        TaggedWord(lemma="банк", tag="noun:m:v_naz"),
        TaggedWord(lemma="банк", tag="noun:m:v_zna"),
    ]
    assert tagger.tag("бнак") == []


def test_from_lines_skips_malformed():
    tagger = DictionaryWordTagger.from_lines([
        "# form\tlemma\ttag\n",
        "банк\tбанк\tnoun:m:v_naz\n",
        "банк\tбанк\tnoun:m:v_zna\n",
        "\n",
        "зламаний рядок\n",
    ])
    assert len(tagger) == 1
    assert [w.tag for w in tagger.tag("банк")] == ["noun:m:v_naz", "noun:m:v_zna"]


def test_from_file(tmp_path):
    path = tmp_path / "dict.tsv"
    path.write_text("сто\tсто\tnumr:p:v_naz\n", encoding="utf-8")
    assert DictionaryWordTagger.from_file(path).tag("сто") == [TaggedWord(lemma="сто", tag="numr:p:v_naz")]


def test_from_missing_file(tmp_path):
    with pytest.raises(AppErrorException) as exc_info:
        DictionaryWordTagger.from_file(tmp_path / "missing.tsv")
    assert exc_info.value.error.code is ErrorCode.E6001_FILE_NOT_FOUND


def test_lookup_skips_unparseable_tags():
    tagger = DictionaryWordTagger({
        "банк": [TaggedWord("банк", "noun:m:v_naz"), TaggedWord("банк", "???"), TaggedWord("банк", "noun:m:prop")],
    })
    assert [t.pos_tag for t in lookup_tokens(tagger, "банк")] == ["noun:m:v_naz"]
