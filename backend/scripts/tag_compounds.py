#!/usr/bin/env python3
"""Tag hyphenated words, numerals and dates from text files.

Reads whitespace-separated words from the given files (stdin when none) and
prints one ``word<TAB>tag<TAB>lemma`` line per synthesized reading.

Run with: python3 -m scripts.tag_compounds [files...] [--debug-dir DIR]
"""
import argparse
import sys
from pathlib import Path
from typing import Iterable, Iterator, TextIO

from core.config import get_settings
from core.errors import AppErrorException
from core.logging import LoggerRegistry, bind_context, clear_context, configure_logging
from languages.ukrainian import UkrainianTagger, build_tagger

log = LoggerRegistry.get("cli")


def iter_words(streams: Iterable[TextIO]) -> Iterator[str]:
    for stream in streams:
        for line in stream:
            yield from line.split()


def tag_words(tagger: UkrainianTagger, words: Iterable[str], out: TextIO, *, show_unknown: bool = False) -> tuple[int, int]:
    """Write readings for each word; returns (words seen, words resolved)."""
    seen = resolved = 0
    for word in words:
        seen += 1
        tokens = tagger.additional_tags(word)
        if not tokens:
            if show_unknown:
                out.write(f"{word}\t-\t-\n")
            continue
        resolved += 1
        for token in tokens:
            out.write(f"{token.token}\t{token.pos_tag}\t{token.lemma}\n")
    return seen, resolved


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Infer morphological tags for Ukrainian compounds",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python3 -m scripts.tag_compounds words.txt                 # Tag a word list
  echo "віце-прем'єр" | python3 -m scripts.tag_compounds     # Tag from stdin
  python3 -m scripts.tag_compounds words.txt --debug-dir out # Also write debug logs
        """
    )
    parser.add_argument("files", nargs="*", type=Path, help="Input files (default: stdin)")
    parser.add_argument("--debug-dir", type=Path, help="Write compounds-unknown.txt / compounds-tagged.txt here")
    parser.add_argument("--dictionary", type=Path, help="Tab-separated form/lemma/tag dictionary instead of pymorphy3")
    parser.add_argument("--lexicon-dir", type=Path, help="Directory with dash prefix / master / slave lists")
    parser.add_argument("--show-unknown", action="store_true", help="Print unresolved words with '-' placeholders")
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL")

    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(level=args.log_level or settings.LOG_LEVEL, json_logs=settings.LOG_JSON)

    overrides: dict = {}
    if args.debug_dir:
        overrides.update(DEBUG_COMPOUNDS=True, DEBUG_COMPOUNDS_DIR=str(args.debug_dir))
    if args.dictionary:
        overrides.update(DICTIONARY_BACKEND="file", DICTIONARY_PATH=str(args.dictionary))
    if args.lexicon_dir:
        overrides.update(LEXICON_DIR=str(args.lexicon_dir))
    if overrides:
        settings = settings.model_copy(update=overrides)

    try:
        tagger = build_tagger(settings)
    except AppErrorException as e:
        print(f"Error: {e.error.message}", file=sys.stderr)
        return 1

    totals = [0, 0]
    if not args.files:
        bind_context(source="stdin")
        totals = list(tag_words(tagger, iter_words([sys.stdin]), sys.stdout, show_unknown=args.show_unknown))
    else:
        for path in args.files:
            bind_context(source=str(path))
            try:
                with path.open(encoding="utf-8") as stream:
                    seen, resolved = tag_words(tagger, iter_words([stream]), sys.stdout, show_unknown=args.show_unknown)
            except OSError as e:
                log.error("input_unreadable", path=str(path), error=str(e))
                clear_context()
                return 1
            totals[0] += seen
            totals[1] += resolved
            clear_context()

    log.info("tagging_complete", words=totals[0], resolved=totals[1])
    return 0


if __name__ == "__main__":
    sys.exit(main())
