"""Ukrainian tag mappings for pymorphy3 (OpenCorpora-style grammemes)."""

# Part of speech mappings (pymorphy3 POS -> tagset category)
POS_MAP = {
    "NOUN": "noun",
    "NPRO": "noun",
    "ADJF": "adj",
    "ADJS": "adj",
    "COMP": "adj",
    "PRTF": "adjp",
    "PRTS": "adjp",
    "NUMR": "numr",
    "VERB": "verb",
    "INFN": "verb",
    "GRND": "advp",
    "ADVB": "adv",
    "PRED": "predic",
    "INTJ": "excl",
    "PRCL": "part",
    "CONJ": "conj",
    "PREP": "prep",
}

# Case mappings
CASE_MAP = {
    "nomn": "v_naz",
    "gent": "v_rod",
    "datv": "v_dav",
    "accs": "v_zna",
    "ablt": "v_oru",
    "loct": "v_mis",
    "voct": "v_kly",
}

# Gender mappings; plural number overrides gender in the tagset
GENDER_MAP = {"masc": "m", "femn": "f", "neut": "n"}
PLURAL_GRAMMEME = "plur"

# Verb form features, emitted right after the category in this order
VERB_FEATURE_MAP = {
    "impr": "impr",
    "futr": "futr",
    "past": "past",
    "pres": "pres",
    "INFN": "inf",
}

REFLEXIVE_SUFFIXES = ("ся", "сь")

# Flag grammemes
ANIMATE_GRAMMEME = "anim"
FIXED_GRAMMEME = "Fixd"
QUALIFIER_MAP = {
    "Infr": "slang",
    "Slng": "slang",
    "Erro": "bad",
    "Dist": "bad",
    "Arch": "rare",
    "Sgtm": "np",
    "Pltm": "ns",
}
PRONOUN_POS = "NPRO"
