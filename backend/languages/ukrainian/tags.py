"""Ukrainian POS tag model.

Tags travel through the dictionary as colon-delimited strings such as
``noun:m:v_naz:anim`` or ``adj:p:v_rod:compb:rare``. They are parsed into a
structured ``Tag`` at the boundary; every agreement rule works on the fields.

Serialization writes category, gender and case first, then the remaining
segments in the order they were parsed. Flags and qualifiers set after parsing
are appended in the order ``anim``, ``nv``, ``compb``, qualifiers. A
not-declined tag with a gender and no case carries ``nv`` in the case slot.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from core.errors import AppError, Ok, Result, invalid_format


class PosCategory(str, Enum):
    """Part-of-speech categories of the tagset."""
    NOUN = "noun"
    ADJECTIVE = "adj"
    ADJ_PARTICIPLE = "adjp"
    NUMERAL = "numr"
    VERB = "verb"
    ADVERB = "adv"
    ADV_PARTICIPLE = "advp"
    INTERJECTION = "excl"
    PARTICLE = "part"
    PREDICATIVE = "predic"
    PARENTHETICAL = "insert"
    CONJUNCTION = "conj"
    PREPOSITION = "prep"
    NUMBER = "number"
    DATE = "date"


class Gender(str, Enum):
    MASCULINE = "m"
    FEMININE = "f"
    NEUTER = "n"
    PLURAL = "p"

    @property
    def is_plural(self) -> bool:
        return self is Gender.PLURAL

    @property
    def number_code(self) -> str:
        """'p' for plural, 's' for any singular gender."""
        return "p" if self is Gender.PLURAL else "s"


class Case(str, Enum):
    NOMINATIVE = "v_naz"
    GENITIVE = "v_rod"
    DATIVE = "v_dav"
    ACCUSATIVE = "v_zna"
    INSTRUMENTAL = "v_oru"
    LOCATIVE = "v_mis"
    VOCATIVE = "v_kly"

    @property
    def label(self) -> str:
        return CASE_LABELS[self]


CASE_LABELS = {
    Case.NOMINATIVE: "називний",
    Case.GENITIVE: "родовий",
    Case.DATIVE: "давальний",
    Case.ACCUSATIVE: "знахідний",
    Case.INSTRUMENTAL: "орудний",
    Case.LOCATIVE: "місцевий",
    Case.VOCATIVE: "кличний",
}


class Qualifier(str, Enum):
    INFORMAL_VARIANT = "v-u"
    SINGULAR_ONLY = "np"
    PLURAL_ONLY = "ns"
    NONSTANDARD = "bad"
    SLANG = "slang"
    RARE = "rare"


NOT_DECLINED = "nv"
COMPARATIVE_BASE = "compb"
ANIMATE = "anim"

_CATEGORIES = {c.value: c for c in PosCategory}
_GENDERS = {g.value: g for g in Gender}
_CASES = {c.value: c for c in Case}
_QUALIFIERS = {q.value: q for q in Qualifier}
_QUALIFIER_ORDER = list(Qualifier)
_MARKERS = frozenset([ANIMATE, NOT_DECLINED, COMPARATIVE_BASE, *_QUALIFIERS])

# Categories whose tags carry (gender, case) agreement signatures
_SIGNATURE_FAMILIES = (PosCategory.NOUN, PosCategory.ADJECTIVE, PosCategory.NUMERAL)


@dataclass(frozen=True, slots=True)
class Tag:
    """Structured POS tag.

    ``layout`` holds the segments after gender and case as they were parsed.
    It only drives serialization and takes no part in equality.
    """
    category: PosCategory
    gender: Gender | None = None
    case: Case | None = None
    features: tuple[str, ...] = ()
    animate: bool = False
    not_declined: bool = False
    comparative_base: bool = False
    qualifiers: frozenset[Qualifier] = field(default_factory=frozenset)
    layout: tuple[str, ...] = field(default=(), compare=False)

    def is_a(self, *categories: PosCategory) -> bool:
        """Tagset family check: ``adj`` covers ``adjp``, ``adv`` covers ``advp``."""
        return any(self.category.value.startswith(c.value) for c in categories)

    @property
    def is_plural(self) -> bool:
        return self.gender is not None and self.gender.is_plural

    @property
    def is_pronoun(self) -> bool:
        return any("pron" in f for f in self.features)

    @property
    def is_case_bearing_noun(self) -> bool:
        return self.category is PosCategory.NOUN and self.gender is not None and self.case is not None

    @property
    def signature(self) -> tuple[Gender, Case] | None:
        """(gender, case) for nouns, adjectives and numerals; None otherwise."""
        if self.gender is None or self.case is None or not self.is_a(*_SIGNATURE_FAMILIES):
            return None
        return self.gender, self.case

    @property
    def number_code(self) -> str | None:
        if self.signature is None:
            return None
        return self.gender.number_code

    @property
    def verb_form(self) -> str | None:
        """First verb feature after an optional reflexive ``rev`` marker."""
        if self.category is not PosCategory.VERB:
            return None
        features = self.features[1:] if self.features[:1] == ("rev",) else self.features
        return features[0] if features else None

    def normalized(self) -> Tag:
        """Copy without not-declined, comparative-base and qualifier flags."""
        return replace(self, not_declined=False, comparative_base=False, qualifiers=frozenset())

    def with_case(self, case: Case) -> Tag:
        return replace(self, case=case)

    def with_animacy(self, animate: bool) -> Tag:
        return replace(self, animate=animate)

    def with_trailing_flags(self, not_declined: bool, qualifiers: frozenset[Qualifier]) -> Tag:
        """Set ``nv`` and qualifiers, moving them behind every other segment."""
        kept = tuple(s for s in self.layout if s != NOT_DECLINED and s not in _QUALIFIERS)
        moved = tuple(s for s in self.layout if s in _QUALIFIERS)
        return replace(
            self,
            not_declined=not_declined,
            qualifiers=qualifiers,
            layout=kept + (NOT_DECLINED,) + moved,
        )

    def _markers(self) -> list[str]:
        markers = []
        if self.animate:
            markers.append(ANIMATE)
        if self.not_declined:
            markers.append(NOT_DECLINED)
        if self.comparative_base:
            markers.append(COMPARATIVE_BASE)
        markers.extend(q.value for q in _QUALIFIER_ORDER if q in self.qualifiers)
        return markers

    def __str__(self) -> str:
        parts = [self.category.value]
        markers = self._markers()
        if self.gender is not None:
            parts.append(self.gender.value)
            if self.case is not None:
                parts.append(self.case.value)
            elif self.not_declined:
                parts.append(NOT_DECLINED)
                markers.remove(NOT_DECLINED)

        if not self.layout:
            parts.extend(self.features)
            parts.extend(markers)
            return ":".join(parts)

        for segment in self.layout:
            if segment not in _MARKERS:
                parts.append(segment)
            elif segment in markers:
                parts.append(segment)
                markers.remove(segment)
        parts.extend(markers)
        return ":".join(parts)


def parse_tag(text: str) -> Result[Tag, AppError]:
    """Parse a colon-delimited tag string."""
    segments = text.split(":") if text else []
    if not segments or segments[0] not in _CATEGORIES:
        return invalid_format("tag", "known category prefix", text, origin="tags")

    category = _CATEGORIES[segments[0]]
    rest = segments[1:]
    gender = case = None
    if rest and rest[0] in _GENDERS:
        gender = _GENDERS[rest[0]]
        rest = rest[1:]
        if rest and rest[0] in _CASES:
            case = _CASES[rest[0]]
            rest = rest[1:]

    features: list[str] = []
    qualifiers: set[Qualifier] = set()
    flags = {ANIMATE: False, NOT_DECLINED: False, COMPARATIVE_BASE: False}
    for segment in rest:
        if segment in flags:
            if flags[segment]:
                return invalid_format("tag", f"single '{segment}' flag", text, origin="tags")
            flags[segment] = True
        elif segment in _QUALIFIERS:
            qualifiers.add(_QUALIFIERS[segment])
        elif segment:
            features.append(segment)

    if gender is not None and case is None and not flags[NOT_DECLINED]:
        return invalid_format("tag", "gender together with case", text, origin="tags")

    return Ok(Tag(
        category=category,
        gender=gender,
        case=case,
        features=tuple(features),
        animate=flags[ANIMATE],
        not_declined=flags[NOT_DECLINED],
        comparative_base=flags[COMPARATIVE_BASE],
        qualifiers=frozenset(qualifiers),
        layout=tuple(segment for segment in rest if segment),
    ))


@dataclass(frozen=True, slots=True)
class AnalyzedToken:
    """A surface word with one candidate tag and lemma."""
    token: str
    tag: Tag
    lemma: str

    @property
    def pos_tag(self) -> str:
        return str(self.tag)


@dataclass(frozen=True, slots=True)
class TaggedWord:
    """Raw dictionary entry for one surface form."""
    lemma: str
    tag: str
