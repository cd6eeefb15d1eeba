"""Grammatical agreement between the two parts of a hyphenated compound.

Given the candidate tags of the left and right parts, every pair is checked
against a small set of rules (case, gender, number, animacy). Successful
pairs yield a tag for the whole compound with a hyphen-joined lemma:
``Буш-молодший``, ``рік-два``, ``сотні-дві``, ``підприємство-банкрут``.
"""
from dataclasses import dataclass
from typing import Sequence

from .lexicon import MIN_MAX_WORDS, LexicalSets
from .tags import AnalyzedToken, Case, Gender, PosCategory, Tag

# Categories where identical left and right tags simply repeat: один-однісінький
_REPEATABLE = (
    PosCategory.NUMERAL,
    PosCategory.ADVERB,
    PosCategory.ADJECTIVE,
    PosCategory.INTERJECTION,
    PosCategory.VERB,
)

_MNP = (Gender.MASCULINE, Gender.NEUTER, Gender.PLURAL)


def agree_nouns(left: Tag, right: Tag, left_not_declined: bool) -> Tag | None:
    """Core noun+noun rule: same plurality, animacy and case.

    A not-declined left noun takes the right noun's case marking.
    """
    if left.is_plural != right.is_plural or left.animate != right.animate:
        return None
    if not (left.is_case_bearing_noun and right.is_case_bearing_noun):
        return None
    if left.case is not right.case:
        return None
    return right if left_not_declined else left


def agree_numerals(left: Tag, right: Tag) -> Tag | None:
    """Numeric rule: one side plural, the other singular, same case (сотні-дві)."""
    if left.signature is None or right.signature is None:
        return None
    if left.is_plural == right.is_plural:
        return None
    return left if left.case is right.case else None


def _is_mnp(tag: Tag, case: Case) -> bool:
    return tag.gender in _MNP and tag.case is case


def _compound_token(
    word: str, tag: Tag, lemma: str, not_declined: bool, qualifiers: frozenset
) -> AnalyzedToken:
    # nv survives only when both parts carry it; qualifiers come from the left part
    return AnalyzedToken(word, tag.with_trailing_flags(not_declined, qualifiers), lemma)


@dataclass(frozen=True, slots=True)
class AgreementResult:
    """Tokens produced for a compound and the unresolved animacy mismatch, if any."""
    tokens: list[AnalyzedToken]
    animacy_mismatch: str | None = None


class AgreementResolver:
    """Cross-product agreement check over left and right candidate tags."""

    __slots__ = ("_lexicon",)

    def __init__(self, lexicon: LexicalSets):
        self._lexicon = lexicon

    def resolve(
        self,
        word: str,
        right_word: str,
        left_tokens: Sequence[AnalyzedToken],
        right_tokens: Sequence[AnalyzedToken],
    ) -> AgreementResult:
        tokens: list[AnalyzedToken] = []
        animacy_tokens: list[AnalyzedToken] = []
        mismatch: str | None = None

        for left_token in left_tokens:
            left = left_token.tag.normalized()
            left_nv = left_token.tag.not_declined
            qualifiers = left_token.tag.qualifiers

            for right_token in right_tokens:
                right = right_token.tag.normalized()
                right_nv = right_token.tag.not_declined
                lemma = f"{left_token.lemma}-{right_token.lemma}"
                both_nv = left_nv and right_nv

                if left == right and left.is_a(*_REPEATABLE):
                    tokens.append(_compound_token(word, left, lemma, both_nv, qualifiers))

                elif left.is_a(PosCategory.NOUN) and right.is_a(PosCategory.NOUN):
                    agreed = agree_nouns(left, right, left_nv)

                    if (
                        agreed is None
                        and right.gender is Gender.MASCULINE
                        and right.case is Case.NOMINATIVE
                        and right_word in MIN_MAX_WORDS
                    ):
                        agreed = left

                    if agreed is None and left.animate != right.animate:
                        agreed = self.resolve_animacy(
                            left, right, left_token.lemma, right_token.lemma, left_nv, right_nv
                        )
                        if agreed is None:
                            mismatch = "anim-inanim" if left.animate else "inanim-anim"
                        else:
                            animacy_tokens.append(_compound_token(word, agreed, lemma, both_nv, qualifiers))
                        continue

                    if agreed is not None:
                        tokens.append(_compound_token(word, agreed, lemma, both_nv, qualifiers))

                elif left.is_a(PosCategory.NUMERAL) and right.is_a(PosCategory.NUMERAL):
                    agreed = agree_numerals(left, right)
                    if agreed is not None:
                        tokens.append(_compound_token(word, agreed, lemma, both_nv, qualifiers))

                elif left.is_a(PosCategory.NOUN) and right.is_a(PosCategory.NUMERAL):
                    if left.signature is not None and left.signature == right.signature:
                        tokens.append(_compound_token(word, left, lemma, both_nv, qualifiers))
                    else:
                        # сотні (:p:) - дві (:f:)
                        agreed = agree_numerals(left, right)
                        if agreed is not None:
                            tokens.append(_compound_token(word, agreed, lemma, both_nv, qualifiers))

                elif left.is_a(PosCategory.NOUN) and right.is_a(PosCategory.ADJECTIVE):
                    if left.signature is not None and left.signature == right.signature:
                        tokens.append(_compound_token(word, left, lemma, both_nv, qualifiers))

        if not tokens:
            tokens = animacy_tokens

        return AgreementResult(tokens, mismatch if not tokens else None)

    def resolve_animacy(
        self,
        left: Tag,
        right: Tag,
        left_lemma: str,
        right_lemma: str,
        left_nv: bool,
        right_nv: bool,
    ) -> Tag | None:
        """Noun+noun animacy mismatch fallback, first applicable branch wins."""
        declined = not left_nv and not right_nv

        # підприємство-банкрут
        if left_lemma in self._lexicon.left_masters:
            right = right.with_animacy(left.animate)
            agreed = agree_nouns(left, right, left_nv)
            if agreed is None and declined and _is_mnp(left, Case.ACCUSATIVE):
                paired_case = Case.GENITIVE if left.animate else Case.NOMINATIVE
                if _is_mnp(right, paired_case):
                    agreed = left
            return agreed

        # сонях-красень
        if right_lemma in self._lexicon.slaves:
            right = right.with_animacy(False)
            agreed = agree_nouns(left, right, False)
            if (
                agreed is None
                and declined
                and not left.animate
                and _is_mnp(left, Case.ACCUSATIVE)
                and _is_mnp(right, Case.NOMINATIVE)
                and left.number_code == right.number_code
            ):
                agreed = left
            return agreed

        # красень-сонях
        if left_lemma in self._lexicon.slaves:
            left = left.with_animacy(False)
            agreed = agree_nouns(right, left, False)
            if (
                agreed is None
                and declined
                and not right.animate
                and _is_mnp(right, Case.ACCUSATIVE)
                and _is_mnp(left, Case.NOMINATIVE)
                and left.number_code == right.number_code
            ):
                agreed = right
            return agreed

        # рослин-людожерів, місяця-князя
        return None
