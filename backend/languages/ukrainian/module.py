"""Ukrainian language module implementation."""
from core.config import Settings, get_settings
from core.logging import tagger_logger
from languages.base import LanguageModule
from .debug import CompoundDebugSink, FileDebugSink
from .dictionary import DictionaryWordTagger, PymorphyWordTagger, WordTagger
from .lexicon import LexicalSets
from .tagger import UkrainianTagger
from .tags import Case

log = tagger_logger()


def build_word_tagger(settings: Settings) -> WordTagger:
    """Dictionary backend selected by configuration."""
    if settings.DICTIONARY_BACKEND == "file":
        if not settings.DICTIONARY_PATH:
            raise ValueError("DICTIONARY_PATH is required when DICTIONARY_BACKEND is 'file'")
        return DictionaryWordTagger.from_file(settings.DICTIONARY_PATH)
    return PymorphyWordTagger()


def build_tagger(settings: Settings) -> UkrainianTagger:
    """Assemble the tagger: lexical sets first, so a broken resource fails startup."""
    lexicon = LexicalSets.load(settings.LEXICON_DIR)
    debug_sink: CompoundDebugSink | None = None
    if settings.DEBUG_COMPOUNDS:
        debug_sink = FileDebugSink(settings.DEBUG_COMPOUNDS_DIR)
    tagger = UkrainianTagger(build_word_tagger(settings), lexicon, debug_sink)
    log.info(
        "tagger_ready",
        dictionary=settings.DICTIONARY_BACKEND,
        debug_compounds=settings.DEBUG_COMPOUNDS,
    )
    return tagger


class UkrainianModule(LanguageModule):
    """Ukrainian language module with compound tag synthesis."""

    __slots__ = ("_tagger",)

    def __init__(self):
        self._tagger: UkrainianTagger | None = None

    @property
    def code(self) -> str:
        return "uk"

    @property
    def name(self) -> str:
        return "Ukrainian"

    @property
    def native_name(self) -> str:
        return "Українська"

    def get_tagger(self) -> UkrainianTagger:
        """Get the tagger (lazy-loaded from settings)."""
        if self._tagger is None:
            self._tagger = build_tagger(get_settings())
        return self._tagger

    def set_tagger(self, tagger: UkrainianTagger) -> None:
        """Replace the tagger, e.g. with one built on substitute lexical data."""
        self._tagger = tagger

    def get_cases(self) -> list[dict]:
        return [{"id": c.value, "label": c.label} for c in Case]
