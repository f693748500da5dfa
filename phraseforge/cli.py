#!/usr/bin/env python3
# phraseforge/cli.py
"""
PhraseForge command line.

Usage:
    phraseforge                      # One passphrase
    phraseforge --count 5            # Five passphrases, one per line
    phraseforge -f 50000             # Only very common words
    phraseforge --redownload         # Force re-download of WordNet data
    phraseforge --variant lexical    # 'quick-fox-jumps-swiftly' style, no corpus
"""

import argparse
import random
import sys
from pathlib import Path
from typing import List, Optional, TextIO

import structlog
from dependency_injector import providers

from phraseforge import __version__
from phraseforge.core.domain.exceptions import DomainError
from phraseforge.core.domain.models import EmptyPoolPolicy, Variant
from phraseforge.shared.config import Settings, settings as default_settings
from phraseforge.shared.container import Container
from phraseforge.shared.logging_config import configure_logging

logger = structlog.get_logger()


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid positive integer: '{value}'")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid non-negative integer: '{value}'")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative, got {number}")
    return number


def build_parser(defaults: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="phraseforge",
        description="Generates memorable passphrases using WordNet word lists.",
    )
    parser.add_argument(
        "-c", "--count",
        type=_positive_int,
        default=1,
        help="Number of passphrases to generate (default: 1)",
    )
    parser.add_argument(
        "-f", "--min-frequency",
        type=_non_negative_int,
        default=defaults.MIN_FREQUENCY,
        help=f"Minimum word frequency to include (default: {defaults.MIN_FREQUENCY})",
    )
    parser.add_argument(
        "-r", "--redownload",
        action="store_true",
        help="Force re-download of WordNet data and rebuild the word lists",
    )
    parser.add_argument(
        "--variant",
        choices=[v.value for v in Variant],
        default=defaults.VARIANT.value,
        help="'frequency': N-adjective-noun-verb-adverb from common words; "
             "'lexical': adjective-noun-verb-adverb from the whole dictionary",
    )
    parser.add_argument(
        "--on-empty",
        choices=[p.value for p in EmptyPoolPolicy],
        default=defaults.ON_EMPTY.value,
        help="What to do when no word clears --min-frequency (default: blank)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the random generator for reproducible output",
    )
    parser.add_argument(
        "--secure",
        action="store_true",
        help="Draw words from the operating system's entropy source",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help=f"Storage directory for word lists (default: {defaults.data_dir})",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help=f"Log level (default: {defaults.LOG_LEVEL})",
    )
    parser.add_argument(
        "-V", "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def settings_from_args(args: argparse.Namespace, defaults: Settings) -> Settings:
    """Returns a per-run copy of the settings with the flag values applied."""
    update = {
        "MIN_FREQUENCY": args.min_frequency,
        "VARIANT": Variant(args.variant),
        "ON_EMPTY": EmptyPoolPolicy(args.on_empty),
    }
    if args.data_dir is not None:
        update["DATA_DIR"] = args.data_dir
    if args.log_level:
        update["LOG_LEVEL"] = args.log_level
    return defaults.model_copy(update=update)


def make_rng(seed: Optional[int], secure: bool) -> random.Random:
    if secure:
        if seed is not None:
            logger.warning("seed_ignored", reason="--secure draws from OS entropy")
        return random.SystemRandom()
    return random.Random(seed)


def run(args: argparse.Namespace, run_settings: Settings, out: TextIO, container: Optional[Container] = None) -> None:
    container = container or Container()
    container.settings.override(providers.Object(run_settings))

    logger.debug(
        "run_started",
        data_dir=str(run_settings.data_dir),
        variant=run_settings.VARIANT.value,
        count=args.count,
        redownload=args.redownload,
    )

    # Always shown: a first build downloads several megabytes.
    if args.redownload or not container.word_list_repository().exists():
        print(
            f"phraseforge: building word lists in {run_settings.data_dir} "
            "(downloads dictionary data when missing)...",
            file=sys.stderr,
        )

    word_lists = container.load_word_lists_use_case().execute(
        run_settings.VARIANT, force=args.redownload
    )
    generator = container.generate_passphrase_use_case(
        word_lists=word_lists,
        rng=make_rng(args.seed, args.secure),
    )
    for passphrase in generator.generate_many(args.count):
        out.write(passphrase + "\n")


def main(argv: Optional[List[str]] = None, container: Optional[Container] = None) -> int:
    defaults = default_settings
    args = build_parser(defaults).parse_args(argv)
    run_settings = settings_from_args(args, defaults)
    configure_logging(run_settings)

    try:
        run(args, run_settings, sys.stdout, container=container)
    except DomainError as e:
        logger.debug("run_failed", error_type=type(e).__name__, error=e.message)
        print(f"phraseforge: error: {e.message}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
