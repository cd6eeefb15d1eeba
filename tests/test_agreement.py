from languages.ukrainian.agreement import AgreementResolver, agree_nouns, agree_numerals
from languages.ukrainian.tags import AnalyzedToken, parse_tag


def tag(text):
    return parse_tag(text).unwrap()


def tokens(word, *entries):
    return [AnalyzedToken(word, tag(t), lemma) for lemma, t in entries]


def test_agree_nouns_same_case():
    left, right = tag("noun:m:v_rod"), tag("noun:f:v_rod")
    assert agree_nouns(left, right, False) == left


def test_agree_nouns_not_declined_left_takes_right():
    left, right = tag("noun:m:v_naz"), tag("noun:m:v_naz:prop")
    assert agree_nouns(left, right, True) == right


def test_agree_nouns_rejects_number_animacy_case():
    assert agree_nouns(tag("noun:p:v_naz"), tag("noun:m:v_naz"), False) is None
    assert agree_nouns(tag("noun:m:v_naz:anim"), tag("noun:m:v_naz"), False) is None
    assert agree_nouns(tag("noun:m:v_naz"), tag("noun:m:v_rod"), False) is None


def test_agree_numerals_needs_differing_number():
    assert agree_numerals(tag("numr:p:v_rod"), tag("numr:f:v_rod")) == tag("numr:p:v_rod")
    assert agree_numerals(tag("numr:m:v_rod"), tag("numr:f:v_rod")) is None
    assert agree_numerals(tag("numr:p:v_rod"), tag("numr:f:v_dav")) is None


def test_identical_tags_repeat(lexicon):
    result = AgreementResolver(lexicon).resolve(
        "один-однісінький", "однісінький",
        tokens("один", ("один", "adj:m:v_naz")),
        tokens("однісінький", ("однісінький", "adj:m:v_naz")),
    )
    assert [(t.pos_tag, t.lemma) for t in result.tokens] == [("adj:m:v_naz", "один-однісінький")]


def test_not_declined_survives_only_on_both_sides(lexicon):
    resolver = AgreementResolver(lexicon)
    both = resolver.resolve("ха-ха", "ха", tokens("ха", ("ха", "excl:nv")), tokens("ха", ("ха", "excl:nv")))
    one = resolver.resolve("ха-ха", "ха", tokens("ха", ("ха", "excl:nv")), tokens("ха", ("ха", "excl")))
    assert [t.pos_tag for t in both.tokens] == ["excl:nv"]
    assert [t.pos_tag for t in one.tokens] == ["excl"]


def test_qualifiers_come_from_left(lexicon):
    result = AgreementResolver(lexicon).resolve(
        "мамо-рідна", "рідна",
        tokens("мамо", ("мама", "noun:f:v_kly:anim:slang")),
        tokens("рідна", ("рідний", "adj:f:v_kly:rare")),
    )
    assert [t.pos_tag for t in result.tokens] == ["noun:f:v_kly:anim:slang"]


def test_sotni_dvi(lexicon):
    result = AgreementResolver(lexicon).resolve(
        "сотні-дві", "дві",
        tokens("сотні", ("сотня", "noun:p:v_naz"), ("сотня", "noun:f:v_rod")),
        tokens("дві", ("два", "numr:f:v_naz")),
    )
    assert [(t.pos_tag, t.lemma) for t in result.tokens] == [("noun:p:v_naz", "сотня-два")]


def test_master_noun_decides_animacy(lexicon):
    result = AgreementResolver(lexicon).resolve(
        "компанія-банкрут", "банкрут",
        tokens("компанія", ("компанія", "noun:f:v_naz")),
        tokens("банкрут", ("банкрут", "noun:m:v_naz:anim")),
    )
    assert [t.pos_tag for t in result.tokens] == ["noun:f:v_naz"]
    assert result.animacy_mismatch is None


def test_master_accusative_pairs_with_genitive_when_animate(lexicon):
    resolver = AgreementResolver(lexicon)
    agreed = resolver.resolve_animacy(
        tag("noun:m:v_zna:anim"), tag("noun:m:v_rod"), "банк", "фонд", False, False
    )
    assert agreed == tag("noun:m:v_zna:anim")


def test_animacy_mismatch_without_lists_is_reported(lexicon):
    result = AgreementResolver(lexicon).resolve(
        "місяця-князя", "князя",
        tokens("місяця", ("місяць", "noun:m:v_rod")),
        tokens("князя", ("князь", "noun:m:v_rod:anim")),
    )
    assert result.tokens == []
    assert result.animacy_mismatch == "inanim-anim"


def test_regular_result_hides_animacy_fallback(lexicon):
    result = AgreementResolver(lexicon).resolve(
        "сонях-красень", "красень",
        tokens("сонях", ("сонях", "noun:m:v_naz")),
        tokens("красень", ("красень", "noun:m:v_naz:anim"), ("красень", "noun:m:v_naz")),
    )
    # the inanimate reading agrees directly; the slave fallback is not used
    assert [t.pos_tag for t in result.tokens] == ["noun:m:v_naz"]
