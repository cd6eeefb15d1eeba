"""Compound debug logs.

When enabled, every compound the tagger fails to resolve is appended to
``compounds-unknown.txt`` and every synthesized result to
``compounds-tagged.txt``. Both files are recreated when the sink is opened.
"""
import threading
from contextlib import ExitStack
from pathlib import Path
from typing import Protocol, Sequence, TextIO

from core.errors import file_write_failed, raise_error
from core.logging import tagger_logger
from .tags import AnalyzedToken

log = tagger_logger()

UNKNOWN_FILE = "compounds-unknown.txt"
TAGGED_FILE = "compounds-tagged.txt"


class CompoundDebugSink(Protocol):
    """Receiver of unresolved words and synthesized compound tags."""
    def append_unknown(self, word: str) -> None: ...
    def append_tagged(self, tokens: Sequence[AnalyzedToken]) -> None: ...


def format_tagged(tokens: Sequence[AnalyzedToken]) -> str:
    """One line per call: ``word lemma tag|tag, lemma2 tag;  word2 ...``."""
    out: list[str] = []
    prev_token = ""
    prev_lemma = ""
    for token in tokens:
        first_tag = False
        if token.token != prev_token:
            if prev_token:
                out.append(";  ")
                prev_lemma = ""
            out.append(f"{token.token} ")
            prev_token = token.token
            first_tag = True

        if token.lemma != prev_lemma:
            if prev_lemma:
                out.append(", ")
            out.append(token.lemma)
            prev_lemma = token.lemma
            first_tag = True

        out.append((" " if first_tag else "|") + token.pos_tag)
    return "".join(out)


class FileDebugSink:
    """Append-only text files; writes are serialized and flushed per line."""

    def __init__(self, directory: Path | str = "."):
        base = Path(directory)
        self._lock = threading.Lock()
        self.unknown_path = base / UNKNOWN_FILE
        self.tagged_path = base / TAGGED_FILE
        with ExitStack() as stack:
            self._unknown = stack.enter_context(self._open(self.unknown_path))
            self._tagged = stack.enter_context(self._open(self.tagged_path))
            stack.pop_all()
        log.info("compound_debug_enabled", unknown=str(self.unknown_path), tagged=str(self.tagged_path))

    @staticmethod
    def _open(path: Path) -> TextIO:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            return path.open("w", encoding="utf-8")
        except OSError as e:
            raise_error(file_write_failed(path, e, origin="debug_sink").error)

    def _write_line(self, stream: TextIO, path: Path, line: str) -> None:
        with self._lock:
            try:
                stream.write(line + "\n")
                stream.flush()
            except (OSError, ValueError) as e:
                raise_error(file_write_failed(path, e, origin="debug_sink").error)

    def append_unknown(self, word: str) -> None:
        self._write_line(self._unknown, self.unknown_path, word)

    def append_tagged(self, tokens: Sequence[AnalyzedToken]) -> None:
        if not tokens:
            return
        self._write_line(self._tagged, self.tagged_path, format_tagged(tokens))

    def close(self) -> None:
        with self._lock:
            self._unknown.close()
            self._tagged.close()

    def __enter__(self) -> "FileDebugSink":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
