"""Tag synthesis for hyphenated compounds.

A compound ``left-right`` is resolved by an ordered chain of strategies.
Each strategy either declines (returns None, the next one runs) or claims
the word: its token list is the final answer, and an empty claim means the
compound gets no tag at all. The order of ``CompoundSynthesizer.strategies``
is part of the contract.
"""
from dataclasses import dataclass, field, replace
from functools import cached_property
from typing import Callable

from core.logging import tagger_logger
from .agreement import AgreementResolver
from .debug import CompoundDebugSink
from .dictionary import WordTagger, lookup_tokens
from .lexicon import LexicalSets
from .shapes import is_number, split_compound
from .tags import AnalyzedToken, Case, Gender, PosCategory, Tag

log = tagger_logger()

PO_PREFIX = "по"
PO_ADJ_SHORT_SUFFIX = "ськи"
PO_LOCATIVE_SUFFIX = "ому"
PO_NOMINATIVE_SUFFIX = "ський"
HALF_PREFIX = "пів-"
ORDINAL_LEMMA_SUFFIX = "-й"

ADVERB_TAG = Tag(PosCategory.ADVERB)


@dataclass(slots=True)
class CompoundParts:
    """One compound under resolution, with lazily fetched component tags."""
    word: str
    left: str
    right: str
    word_tagger: WordTagger
    _left_tokens: list[AnalyzedToken] | None = field(default=None, repr=False)
    _right_tokens: list[AnalyzedToken] | None = field(default=None, repr=False)

    @property
    def is_po(self) -> bool:
        return self.left.lower() == PO_PREFIX

    @property
    def right_lookup_word(self) -> str:
        # по-українськи -> український
        if self.is_po and self.right.endswith(PO_ADJ_SHORT_SUFFIX):
            return self.right + "й"
        return self.right

    @property
    def left_tokens(self) -> list[AnalyzedToken]:
        if self._left_tokens is None:
            tokens = lookup_tokens(self.word_tagger, self.left)
            lower = self.left.lower()
            if lower != self.left:
                tokens += lookup_tokens(self.word_tagger, lower)
            self._left_tokens = tokens
        return self._left_tokens

    @property
    def right_tokens(self) -> list[AnalyzedToken]:
        if self._right_tokens is None:
            self._right_tokens = lookup_tokens(self.word_tagger, self.right_lookup_word)
        return self._right_tokens


Strategy = Callable[[CompoundParts], list[AnalyzedToken] | None]


class CompoundSynthesizer:
    """Priority-ordered compound tag strategies over left/right dictionary tags."""

    def __init__(
        self,
        word_tagger: WordTagger,
        lexicon: LexicalSets,
        debug_sink: CompoundDebugSink | None = None,
    ):
        self._word_tagger = word_tagger
        self._lexicon = lexicon
        self._debug_sink = debug_sink
        self._agreement = AgreementResolver(lexicon)

    @cached_property
    def strategies(self) -> tuple[tuple[str, Strategy], ...]:
        return (
            ("right_particle", self._match_right_particle),
            ("right_lookup", self._require_right_tokens),
            ("po_adverb", self._match_po_adverb),
            ("numeral_left", self._match_numeral_left),
            ("dash_prefix", self._match_dash_prefix),
            ("half_proper_noun", self._match_half_proper_noun),
            ("city_avenue", self._match_city_avenue),
            ("agreement", self._match_agreement),
            ("o_adjective", self._match_o_adjective),
        )

    def synthesize(self, word: str) -> list[AnalyzedToken] | None:
        """Candidate tags for a hyphenated word, or None when nothing applies."""
        split = split_compound(word)
        if split is None:
            return None

        parts = CompoundParts(word, split[0], split[1], self._word_tagger)
        for name, strategy in self.strategies:
            tokens = strategy(parts)
            if tokens is None:
                continue
            if not tokens:
                log.debug("compound_rejected", word=word, strategy=name)
                return None
            log.debug("compound_tagged", word=word, strategy=name, count=len(tokens))
            return tokens

        log.debug("compound_unresolved", word=word)
        self._report_unknown(word)
        return None

    def _report_unknown(self, entry: str) -> None:
        if self._debug_sink is not None:
            self._debug_sink.append_unknown(entry)

    # -- strategies -----------------------------------------------------------

    def _match_right_particle(self, parts: CompoundParts) -> list[AnalyzedToken] | None:
        # роби-бо, він-то, зробив-таки
        pattern = self._lexicon.right_particles.get(parts.right)
        if pattern is None:
            return None
        return [
            AnalyzedToken(parts.word, t.tag, t.lemma)
            for t in parts.left_tokens
            if pattern.matches(t.tag)
        ]

    def _require_right_tokens(self, parts: CompoundParts) -> list[AnalyzedToken] | None:
        return None if parts.right_tokens else []

    def _match_po_adverb(self, parts: CompoundParts) -> list[AnalyzedToken] | None:
        # по-українському, по-український
        if not parts.is_po:
            return None
        right = parts.right_lookup_word
        if right.endswith(PO_LOCATIVE_SUFFIX):
            case = Case.LOCATIVE
        elif right.endswith(PO_NOMINATIVE_SUFFIX):
            case = Case.NOMINATIVE
        else:
            return []

        for t in parts.right_tokens:
            if (
                t.tag.category is PosCategory.ADJECTIVE
                and t.tag.gender is Gender.MASCULINE
                and t.tag.case is case
            ):
                return [AnalyzedToken(parts.word, ADVERB_TAG, parts.word)]
        return []

    def _match_numeral_left(self, parts: CompoundParts) -> list[AnalyzedToken] | None:
        if not is_number(parts.left):
            return None

        # 101-го
        endings = self._lexicon.ordinal_endings.get(parts.right)
        if endings is not None:
            lemma = parts.left + ORDINAL_LEMMA_SUFFIX
            return [
                AnalyzedToken(parts.word, Tag(PosCategory.ADJECTIVE, gender, case), lemma)
                for gender, case in endings
            ]

        # 100-річному
        return [
            AnalyzedToken(parts.word, t.tag, f"{parts.left}-{t.lemma}")
            for t in parts.right_tokens
            if t.tag.is_a(PosCategory.ADJECTIVE)
        ]

    def _match_dash_prefix(self, parts: CompoundParts) -> list[AnalyzedToken] | None:
        # екс-чемпіон, віце-прем'єр
        if not self._lexicon.is_dash_prefix(parts.left):
            return None
        return [
            AnalyzedToken(parts.word, t.tag, f"{parts.left}-{t.lemma}")
            for t in parts.right_tokens
            if t.tag.is_a(PosCategory.NOUN)
        ]

    def _match_half_proper_noun(self, parts: CompoundParts) -> list[AnalyzedToken] | None:
        # пів-Європи
        word = parts.word
        if not (word.startswith(HALF_PREFIX) and word[len(HALF_PREFIX)].isupper()):
            return None

        tokens = []
        for t in parts.right_tokens:
            tag = t.tag
            if tag.category is PosCategory.NOUN and not tag.is_plural and tag.case is Case.GENITIVE:
                tokens.extend(
                    AnalyzedToken(word, tag.with_case(case), word)
                    for case in Case
                    if case is not Case.VOCATIVE
                )
        return tokens

    def _match_city_avenue(self, parts: CompoundParts) -> list[AnalyzedToken] | None:
        # Нью-Йорк-сіті is out of reach (two hyphens); Джерсі-сіті, Бейкер-стріт
        if not (parts.left[:1].isupper() and parts.right in self._lexicon.city_avenue):
            return None
        return [
            AnalyzedToken(parts.word, replace(t.tag, case=None, not_declined=True), parts.word)
            for t in parts.left_tokens
            if t.tag.category is PosCategory.NOUN
            and t.tag.gender is not None
            and t.tag.case is Case.NOMINATIVE
        ]

    def _match_agreement(self, parts: CompoundParts) -> list[AnalyzedToken] | None:
        if not parts.left_tokens:
            return None
        result = self._agreement.resolve(parts.word, parts.right, parts.left_tokens, parts.right_tokens)
        if result.animacy_mismatch is not None:
            log.debug("compound_animacy_mismatch", word=parts.word, mismatch=result.animacy_mismatch)
            self._report_unknown(f"{parts.word} {result.animacy_mismatch}")
        return result.tokens or None

    def _match_o_adjective(self, parts: CompoundParts) -> list[AnalyzedToken] | None:
        # жовто-блакитний
        if not parts.left.endswith("о"):
            return None
        return [
            AnalyzedToken(parts.word, t.tag, f"{parts.left}-{t.lemma}")
            for t in parts.right_tokens
            if t.tag.is_a(PosCategory.ADJECTIVE)
        ]
