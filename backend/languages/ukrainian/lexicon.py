"""Lexical sets used by compound synthesis.

Word lists are read once from UTF-8 resources (one entry per line) and frozen
into a ``LexicalSets`` instance that the tagger receives at construction.
"""
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from core.errors import AppError, Ok, Result, file_not_found, file_read_failed, raise_result
from core.logging import lexicon_logger
from .tags import Case, Gender, PosCategory, Tag

log = lexicon_logger()

DATA_DIR = Path(__file__).parent / "data"

DASH_PREFIXES_FILE = "dash_prefixes.txt"
LEFT_MASTERS_FILE = "dash_left_master.txt"
SLAVES_FILE = "dash_slaves.txt"


@dataclass(frozen=True, slots=True)
class LeftTagPattern:
    """Which left-part tags a fixed right particle attaches to."""
    categories: frozenset[PosCategory] = frozenset()
    verb_forms: frozenset[str] = frozenset()
    pronouns: bool = False

    def matches(self, tag: Tag) -> bool:
        if self.pronouns and tag.is_pronoun:
            return True
        if tag.is_a(*self.categories):
            return True
        return tag.verb_form in self.verb_forms


RIGHT_PARTICLES: Mapping[str, LeftTagPattern] = MappingProxyType({
    # роби-бо, ти-бо, тому-бо
    "бо": LeftTagPattern(
        categories=frozenset({
            PosCategory.NOUN, PosCategory.ADVERB, PosCategory.INTERJECTION,
            PosCategory.PARTICLE, PosCategory.PREDICATIVE,
        }),
        verb_forms=frozenset({"impr"}),
        pronouns=True,
    ),
    # іди-но, ану-но
    "но": LeftTagPattern(
        categories=frozenset({PosCategory.INTERJECTION}),
        verb_forms=frozenset({"impr", "futr"}),
    ),
    # це-от, тут-от
    "от": LeftTagPattern(
        categories=frozenset({PosCategory.ADVERB, PosCategory.PARTICLE}),
        pronouns=True,
    ),
    # він-то, тоді-то
    "то": LeftTagPattern(
        categories=frozenset({
            PosCategory.NOUN, PosCategory.ADVERB, PosCategory.PARTICLE, PosCategory.CONJUNCTION,
        }),
        pronouns=True,
    ),
    # зробив-таки, все-таки
    "таки": LeftTagPattern(
        categories=frozenset({
            PosCategory.NOUN, PosCategory.PARTICLE, PosCategory.PREDICATIVE, PosCategory.PARENTHETICAL,
        }),
        verb_forms=frozenset({"futr", "past", "pres"}),
        pronouns=True,
    ),
})

# 101-го, 5-ті: ending -> (gender, case) the numeral takes as an ordinal adjective
ORDINAL_ENDINGS: Mapping[str, tuple[tuple[Gender, Case], ...]] = MappingProxyType({
    "й": ((Gender.MASCULINE, Case.NOMINATIVE), (Gender.MASCULINE, Case.ACCUSATIVE)),
    "го": (
        (Gender.MASCULINE, Case.GENITIVE),
        (Gender.MASCULINE, Case.ACCUSATIVE),
        (Gender.NEUTER, Case.GENITIVE),
    ),
    # TODO: the gender/case set for -му depends on the numeral's last digit
    "му": (
        (Gender.MASCULINE, Case.DATIVE),
        (Gender.MASCULINE, Case.LOCATIVE),
        (Gender.NEUTER, Case.DATIVE),
        (Gender.NEUTER, Case.LOCATIVE),
        (Gender.FEMININE, Case.ACCUSATIVE),
    ),
    "те": ((Gender.NEUTER, Case.NOMINATIVE), (Gender.NEUTER, Case.ACCUSATIVE)),
    "ті": ((Gender.PLURAL, Case.NOMINATIVE), (Gender.PLURAL, Case.ACCUSATIVE)),
})

CITY_AVENUE_WORDS = frozenset({"сіті", "авеню", "стріт", "штрассе"})

# максимум/мінімум agree with any preceding noun: рік-максимум
MIN_MAX_WORDS = frozenset({"максимум", "мінімум"})


def read_lines(path: Path) -> Result[frozenset[str], AppError]:
    """Read a word list; blank lines and ``#`` comments are skipped."""
    if not path.is_file():
        return file_not_found(path, origin="lexicon")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        return file_read_failed(path, e, origin="lexicon")

    words = (line.strip() for line in text.splitlines())
    return Ok(frozenset(w for w in words if w and not w.startswith("#")))


def load_lines(path: Path) -> frozenset[str]:
    """Startup variant of ``read_lines``: a missing or unreadable resource is fatal."""
    result = read_lines(path)
    raise_result(result)
    words = result.unwrap()
    log.debug("lexicon_loaded", path=str(path), size=len(words))
    return words


@dataclass(frozen=True, slots=True)
class LexicalSets:
    """Immutable lexical configuration injected into the tagger."""
    dash_prefixes: frozenset[str] = frozenset()
    left_masters: frozenset[str] = frozenset()
    slaves: frozenset[str] = frozenset()
    city_avenue: frozenset[str] = CITY_AVENUE_WORDS
    right_particles: Mapping[str, LeftTagPattern] = field(default_factory=lambda: RIGHT_PARTICLES)
    ordinal_endings: Mapping[str, tuple[tuple[Gender, Case], ...]] = field(
        default_factory=lambda: ORDINAL_ENDINGS
    )

    @classmethod
    def load(cls, directory: Path | str | None = None) -> "LexicalSets":
        """Load the three word lists from ``directory`` (packaged data by default)."""
        base = Path(directory) if directory is not None else DATA_DIR
        lexicon = cls(
            dash_prefixes=load_lines(base / DASH_PREFIXES_FILE),
            left_masters=load_lines(base / LEFT_MASTERS_FILE),
            slaves=load_lines(base / SLAVES_FILE),
        )
        log.info(
            "lexical_sets_loaded",
            directory=str(base),
            dash_prefixes=len(lexicon.dash_prefixes),
            left_masters=len(lexicon.left_masters),
            slaves=len(lexicon.slaves),
        )
        return lexicon

    def is_dash_prefix(self, word: str) -> bool:
        return word in self.dash_prefixes or word.lower() in self.dash_prefixes
