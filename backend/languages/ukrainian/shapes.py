"""Word shape classification: numerals, dates, hyphenated compounds."""
import re
from enum import Enum

# Decimal form: sign, currency, digits, comma fraction, range, percent/degree.
# Roman form: a deliberately short pattern covering ordinals up to XCIX.
NUMBER_REGEX = re.compile(
    r"[+-]?[€₴$]?[0-9]+(,[0-9]+)?([-–—][0-9]+(,[0-9]+)?)?(%|°С?)?"
    r"|(XC|XL|L?X{0,3})(IX|IV|V?I{0,3})"
)
DATE_REGEX = re.compile(r"[0-9]{2}\.[0-9]{2}\.[0-9]{4}")


class WordShape(Enum):
    NUMBER = "number"
    DATE = "date"
    COMPOUND = "compound"
    PLAIN = "plain"


def is_number(word: str) -> bool:
    return bool(word) and NUMBER_REGEX.fullmatch(word) is not None


def is_date(word: str) -> bool:
    return DATE_REGEX.fullmatch(word) is not None


def classify_word(word: str) -> WordShape:
    """Route a word: numeral and date literals win over the hyphen check."""
    if is_number(word):
        return WordShape.NUMBER
    if is_date(word):
        return WordShape.DATE
    if "-" in word:
        return WordShape.COMPOUND
    return WordShape.PLAIN


def split_compound(word: str) -> tuple[str, str] | None:
    """Split at the single inner hyphen; None for zero, several or edge hyphens."""
    dash_idx = word.rfind("-")
    if dash_idx <= 0 or dash_idx == len(word) - 1:
        return None
    if word.find("-") != dash_idx:
        return None
    return word[:dash_idx], word[dash_idx + 1:]
