"""Tagging API

Exposes additional (synthesized) tags for numerals, dates and hyphenated
compounds, plus the full analysis of a word.
"""
from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from core.logging import api_logger
from languages import get_module
from languages.ukrainian import AnalyzedToken, UkrainianTagger

router = APIRouter()
log = api_logger()


class TokenResponse(BaseModel):
    token: str
    tag: str
    lemma: str
    category: str
    gender: str | None = None
    case: str | None = None
    case_label: str | None = None
    animate: bool = False
    not_declined: bool = False

    @classmethod
    def from_token(cls, token: AnalyzedToken) -> "TokenResponse":
        tag = token.tag
        return cls(
            token=token.token,
            tag=token.pos_tag,
            lemma=token.lemma,
            category=tag.category.value,
            gender=tag.gender.value if tag.gender else None,
            case=tag.case.value if tag.case else None,
            case_label=tag.case.label if tag.case else None,
            animate=tag.animate,
            not_declined=tag.not_declined,
        )


class WordTagsResponse(BaseModel):
    word: str
    resolved: bool
    tokens: list[TokenResponse]


class BatchRequest(BaseModel):
    words: list[str] = Field(..., min_length=1, max_length=1000)


class CaseResponse(BaseModel):
    id: str
    label: str


def get_tagger() -> UkrainianTagger:
    return get_module("uk").get_tagger()


def _word_tags(word: str, tokens: list[AnalyzedToken] | None) -> WordTagsResponse:
    return WordTagsResponse(
        word=word,
        resolved=bool(tokens),
        tokens=[TokenResponse.from_token(t) for t in tokens or []],
    )


@router.get("/additional/{word}", response_model=WordTagsResponse)
async def additional_tags(word: str, tagger: UkrainianTagger = Depends(get_tagger)):
    """Synthesized tags only (numeral, date, compound)."""
    return _word_tags(word, tagger.additional_tags(word))


@router.get("/analyze/{word}", response_model=WordTagsResponse)
async def analyze_word(word: str, tagger: UkrainianTagger = Depends(get_tagger)):
    """Dictionary analyses, falling back to synthesized tags."""
    return _word_tags(word, tagger.analyze(word))


@router.post("/batch", response_model=list[WordTagsResponse])
async def batch_additional_tags(request: BatchRequest, tagger: UkrainianTagger = Depends(get_tagger)):
    """Synthesized tags for many words at once."""
    results = [_word_tags(w, tagger.additional_tags(w)) for w in request.words]
    log.info(
        "batch_tagged",
        words=len(request.words),
        resolved=sum(1 for r in results if r.resolved),
    )
    return results


@router.get("/cases", response_model=list[CaseResponse])
async def list_cases():
    """Grammatical cases with their Ukrainian names."""
    return get_module("uk").get_cases()
