"""Ukrainian tagger: dictionary lookup plus synthesized tags.

``additional_tags`` is what the surrounding pipeline calls for words the
dictionary cannot resolve on its own: numerals, dates and hyphenated
compounds. It is a pure function of the word, the lexical sets and the
dictionary; the only side effect is the optional debug sink.
"""
from core.logging import tagger_logger
from .compounds import CompoundSynthesizer
from .debug import CompoundDebugSink
from .dictionary import WordTagger, lookup_tokens
from .lexicon import LexicalSets
from .shapes import WordShape, classify_word
from .tags import AnalyzedToken, PosCategory, Tag

log = tagger_logger()

NUMBER_TAG = Tag(PosCategory.NUMBER)
DATE_TAG = Tag(PosCategory.DATE)


class UkrainianTagger:
    """Entry point for extra tag candidates beyond direct dictionary lookup."""

    __slots__ = ("_word_tagger", "_lexicon", "_debug_sink", "_compounds")

    def __init__(
        self,
        word_tagger: WordTagger,
        lexicon: LexicalSets | None = None,
        debug_sink: CompoundDebugSink | None = None,
    ):
        self._word_tagger = word_tagger
        self._lexicon = lexicon if lexicon is not None else LexicalSets.load()
        self._debug_sink = debug_sink
        self._compounds = CompoundSynthesizer(word_tagger, self._lexicon, debug_sink)

    @property
    def lexicon(self) -> LexicalSets:
        return self._lexicon

    @property
    def compounds(self) -> CompoundSynthesizer:
        return self._compounds

    def additional_tags(self, word: str) -> list[AnalyzedToken] | None:
        """Synthesized candidates for ``word``, or None when there are none."""
        match classify_word(word):
            case WordShape.NUMBER:
                return [AnalyzedToken(word, NUMBER_TAG, word)]
            case WordShape.DATE:
                return [AnalyzedToken(word, DATE_TAG, word)]
            case WordShape.COMPOUND:
                tokens = self._compounds.synthesize(word)
                if tokens and self._debug_sink is not None:
                    self._debug_sink.append_tagged(tokens)
                return tokens
            case _:
                return None

    def analyze(self, word: str) -> list[AnalyzedToken]:
        """Dictionary analyses when present, otherwise the synthesized ones."""
        tokens = lookup_tokens(self._word_tagger, word)
        if tokens:
            return tokens
        additional = self.additional_tags(word) or []
        log.debug("word_guessed", word=word, count=len(additional))
        return additional
