"""Dictionary lookups for compound parts.

The tagger only needs ``tag(word) -> list[TaggedWord]``. Two adapters are
provided: a plain in-memory dictionary (optionally loaded from a
``form<TAB>lemma<TAB>tag`` file) and a pymorphy3 analyzer whose OpenCorpora
grammemes are converted to this tagset.
"""
from collections import defaultdict
from pathlib import Path
from typing import Any, Iterable, Mapping, Protocol

from core.errors import Err, Ok, file_not_found, file_read_failed, raise_error
from core.logging import lexicon_logger, tagger_logger
from .maps import (
    ANIMATE_GRAMMEME,
    CASE_MAP,
    FIXED_GRAMMEME,
    GENDER_MAP,
    PLURAL_GRAMMEME,
    POS_MAP,
    PRONOUN_POS,
    QUALIFIER_MAP,
    REFLEXIVE_SUFFIXES,
    VERB_FEATURE_MAP,
)
from .tags import AnalyzedToken, TaggedWord, parse_tag

log = tagger_logger()


class WordTagger(Protocol):
    """Dictionary lookup for a single surface form."""
    def tag(self, word: str) -> list[TaggedWord]: ...


def lookup_tokens(word_tagger: WordTagger, word: str) -> list[AnalyzedToken]:
    """Dictionary entries of ``word`` as analyzed tokens; unparseable tags are skipped."""
    tokens = []
    for tagged in word_tagger.tag(word):
        match parse_tag(tagged.tag):
            case Ok(tag):
                tokens.append(AnalyzedToken(word, tag, tagged.lemma))
            case Err(error):
                log.debug("tag_unparseable", word=word, tag=tagged.tag, reason=error.message)
    return tokens


class DictionaryWordTagger:
    """Exact-form dictionary held in memory."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, Iterable[TaggedWord]] | None = None):
        self._entries: dict[str, tuple[TaggedWord, ...]] = {
            form: tuple(words) for form, words in (entries or {}).items()
        }

    def tag(self, word: str) -> list[TaggedWord]:
        return list(self._entries.get(word, ()))

    def __len__(self) -> int:
        return len(self._entries)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "DictionaryWordTagger":
        """Parse ``form<TAB>lemma<TAB>tag`` lines; blank lines and ``#`` comments are skipped."""
        entries: dict[str, list[TaggedWord]] = defaultdict(list)
        for line_no, line in enumerate(lines, 1):
            line = line.rstrip("\n")
            if not line.strip() or line.startswith("#"):
                continue
            parts = line.split("\t")
            if len(parts) != 3:
                log.warning("dictionary_line_skipped", line_no=line_no, line=line[:80])
                continue
            form, lemma, tag = parts
            entries[form].append(TaggedWord(lemma=lemma, tag=tag))
        return cls(entries)

    @classmethod
    def from_file(cls, path: Path | str) -> "DictionaryWordTagger":
        path = Path(path)
        if not path.is_file():
            raise_error(file_not_found(path, origin="dictionary").error)
        try:
            with path.open(encoding="utf-8") as f:
                tagger = cls.from_lines(f)
        except (OSError, UnicodeDecodeError) as e:
            raise_error(file_read_failed(path, e, origin="dictionary").error)
        lexicon_logger().info("dictionary_loaded", path=str(path), forms=len(tagger))
        return tagger


def grammemes_to_tag(pos: str | None, grammemes: Iterable[str], word: str = "") -> str | None:
    """Convert a pymorphy3 analysis to a tag string; None for unsupported POS."""
    category = POS_MAP.get(pos or "")
    if category is None:
        return None
    grammemes = set(grammemes)
    parts = [category]

    if PLURAL_GRAMMEME in grammemes:
        gender = "p"
    else:
        gender = next((v for k, v in GENDER_MAP.items() if k in grammemes), None)
    case = next((v for k, v in CASE_MAP.items() if k in grammemes), None)
    if gender is not None and case is not None:
        parts += [gender, case]
    elif gender is not None and FIXED_GRAMMEME in grammemes:
        parts.append(gender)

    if category == "verb":
        if word.endswith(REFLEXIVE_SUFFIXES):
            parts.append("rev")
        parts += [v for k, v in VERB_FEATURE_MAP.items() if k in grammemes]
    if pos == PRONOUN_POS:
        parts.append("&pron")

    if ANIMATE_GRAMMEME in grammemes:
        parts.append("anim")
    if FIXED_GRAMMEME in grammemes and gender is not None:
        parts.append("nv")
    for grammeme, qualifier in QUALIFIER_MAP.items():
        if grammeme in grammemes and qualifier not in parts:
            parts.append(qualifier)
    return ":".join(parts)


class PymorphyWordTagger:
    """pymorphy3-backed lookup restricted to dictionary words (no guessing)."""

    __slots__ = ("_morph",)

    def __init__(self, analyzer: Any = None, lang: str = "uk"):
        if analyzer is None:
            import pymorphy3

            analyzer = pymorphy3.MorphAnalyzer(lang=lang)
            lexicon_logger().info("pymorphy_loaded", lang=lang)
        self._morph = analyzer

    def tag(self, word: str) -> list[TaggedWord]:
        if not self._morph.word_is_known(word):
            return []

        result = []
        for p in self._morph.parse(word):
            tag = grammemes_to_tag(p.tag.POS, p.tag.grammemes, word)
            if tag is not None:
                result.append(TaggedWord(lemma=p.normal_form, tag=tag))
        return result
