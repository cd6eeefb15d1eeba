"""Ukrainian tagging: tag model, lexical sets, compound synthesis."""
from .module import UkrainianModule, build_tagger, build_word_tagger
from .tagger import UkrainianTagger
from .lexicon import LexicalSets
from .dictionary import DictionaryWordTagger, PymorphyWordTagger, WordTagger
from .debug import CompoundDebugSink, FileDebugSink
from .tags import AnalyzedToken, Case, Gender, PosCategory, Qualifier, Tag, TaggedWord, parse_tag

__all__ = [
    "UkrainianModule",
    "UkrainianTagger",
    "build_tagger",
    "build_word_tagger",
    "LexicalSets",
    "DictionaryWordTagger",
    "PymorphyWordTagger",
    "WordTagger",
    "CompoundDebugSink",
    "FileDebugSink",
    "AnalyzedToken",
    "Case",
    "Gender",
    "PosCategory",
    "Qualifier",
    "Tag",
    "TaggedWord",
    "parse_tag",
]
