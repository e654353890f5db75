"""
Command-line driver for WordFinder.

Usage:
    wordfinder [--row ROW ...] [words ...]

Examples:
    wordfinder
    wordfinder --row hello --row world hello world notfound
    wordfinder --set MAX_RESULTS=3 --no-grid chill cold wind

With no --row options the built-in demo matrix is searched; with no words the
demo word stream is used.
"""
import argparse
import logging
import sys
from dataclasses import replace

from wordfinder.errors import WordFinderError
from wordfinder.finder import WordFinder
from wordfinder.metrics import StageTimer
from wordfinder.render import format_results, render_grid
from wordfinder.settings import log_level_value, settings, update_settings

logger = logging.getLogger("wordfinder")

DEMO_MATRIX = [
    "dabcccmobiholas",
    "orgwiocareadios",
    "gchilloeqeperro",
    "zpqnsdtopehoaax",
    "xuvdogredoagggd",
]

DEMO_WORDS = ["chill", "cold", "wind", "dog", "red", "car"]


def _parse_assignments(pairs: list[str]) -> dict[str, str]:
    values = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {pair!r}")
        values[key.strip()] = value.strip()
    return values


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordfinder",
        description="Find the most repeated words of a word stream in a character matrix",
    )
    parser.add_argument("words", nargs="*", help="Word stream to search for (default: demo words)")
    parser.add_argument("--row", action="append", dest="rows", metavar="ROW",
                        help="Matrix row; repeat once per row (default: demo matrix)")
    parser.add_argument("--max-results", type=int, default=None,
                        help=f"Number of ranked words to print (default: {settings.MAX_RESULTS})")
    parser.add_argument("--no-grid", action="store_true", help="Do not print the matrix")
    parser.add_argument("--set", action="append", default=[], metavar="KEY=VALUE",
                        help="Override an editable setting, e.g. --set SHOW_GRID=false")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    try:
        overrides = _parse_assignments(args.set)
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    if args.max_results is not None:
        overrides["MAX_RESULTS"] = args.max_results
    if args.no_grid:
        overrides["SHOW_GRID"] = False
    if args.verbose:
        overrides["DEBUG"] = True

    # Per-run copy; the process-wide settings are left untouched
    cfg = replace(settings)
    errors = update_settings(cfg, **overrides)
    if errors:
        for name, message in errors.items():
            print(f"Error: setting {name}: {message}", file=sys.stderr)
        return 2

    try:
        level = logging.DEBUG if cfg.DEBUG else log_level_value(cfg.LOG_LEVEL)
    except ValueError as e:
        # LOG_LEVEL from the environment is not checked by update_settings
        print(f"Error: setting LOG_LEVEL: {e}", file=sys.stderr)
        return 2
    logging.basicConfig(level=level, format=cfg.LOG_FORMAT)

    matrix = args.rows if args.rows else DEMO_MATRIX
    words = args.words if args.words else DEMO_WORDS
    logger.debug("Matrix rows=%d, word stream size=%d", len(matrix), len(words))

    timer = StageTimer()
    try:
        with timer.stage("construct"):
            finder = WordFinder(matrix)
        with timer.stage("search"):
            results = finder.find_with_counts(words, cfg.MAX_RESULTS)
    except WordFinderError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if cfg.SHOW_GRID:
        print("Matrix:")
        print(render_grid(finder))
        print()

    print("Word Stream:")
    print(", ".join(words))
    print()
    if cfg.MAX_RESULTS > 0:
        print(f"Results (Top {cfg.MAX_RESULTS} most repeated words found):")
    else:
        print("Results (all words found, most repeated first):")
    print(format_results(results))

    logger.info("Found %d words in %dx%d matrix (%.2fms)",
                len(results), finder.rows, finder.cols, timer.total_ms)
    return 0


if __name__ == "__main__":
    sys.exit(main())
