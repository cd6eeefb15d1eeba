import pytest


@pytest.mark.parametrize("word", ["5", "12,5%", "25°С", "XIV", "10-20"])
def test_numbers_get_a_single_token(tagger, word):
    tokens = tagger.additional_tags(word)
    assert [(t.token, t.pos_tag, t.lemma) for t in tokens] == [(word, "number", word)]


def test_date_gets_a_single_token(tagger):
    tokens = tagger.additional_tags("24.08.1991")
    assert [(t.token, t.pos_tag, t.lemma) for t in tokens] == [("24.08.1991", "date", "24.08.1991")]


@pytest.mark.parametrize("word", ["слово", "", "-слово", "слово-", "а-б-в"])
def test_no_additional_tags(tagger, word):
    assert tagger.additional_tags(word) is None


def test_compound_is_logged_as_tagged(tagger, sink):
    tokens = tagger.additional_tags("екс-чемпіон")
    assert sink.tagged == [tokens]
    assert sink.unknown == []


def test_unresolved_compound_is_logged_as_unknown(tagger, sink):
    assert tagger.additional_tags("місяця-князя") is None
    assert sink.tagged == []
    assert sink.unknown[-1] == "місяця-князя"


def test_numbers_bypass_the_debug_sink(tagger, sink):
    tagger.additional_tags("5")
    assert sink.tagged == [] and sink.unknown == []


def test_analyze_prefers_dictionary(tagger):
    tokens = tagger.analyze("чемпіон")
    assert [(t.pos_tag, t.lemma) for t in tokens] == [("noun:m:v_naz:anim", "чемпіон")]


def test_analyze_falls_back_to_synthesis(tagger):
    tokens = tagger.analyze("екс-чемпіон")
    assert [(t.pos_tag, t.lemma) for t in tokens] == [("noun:m:v_naz:anim", "екс-чемпіон")]
    assert tagger.analyze("невідоме") == []


def test_tagger_without_sink(word_tagger, lexicon):
    from languages.ukrainian import UkrainianTagger

    tagger = UkrainianTagger(word_tagger, lexicon)
    assert tagger.additional_tags("місяця-князя") is None
    assert tagger.additional_tags("сто-два")
