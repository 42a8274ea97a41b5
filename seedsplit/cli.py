"""
seed-split CLI — split a seed phrase into mnemonic shares and back.

Commands:
  seed-split random [--long]         - Print a fresh 12 (or 24) word seed phrase
  seed-split split -t T -n N         - Prompt for a seed phrase, print N share lines
  seed-split combine T               - Prompt for T share lines, print the seed phrase

Phrases are read with hidden input (getpass) so they do not echo to the terminal.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

from seedsplit.errors import InsufficientShares, SeedSplitError


def _configure_logging(level: str, verbose: int) -> None:
    if verbose >= 2:
        level = "DEBUG"
    elif verbose == 1:
        level = "INFO"
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )


def _fail(e: SeedSplitError) -> None:
    print(f"Error: {type(e).__name__}: {e}", file=sys.stderr)
    sys.exit(1)


def cmd_random(args: argparse.Namespace, config: dict[str, Any]) -> None:
    """Print a fresh random seed phrase."""
    from seedsplit.phrase import random_phrase

    print(random_phrase(
        long=args.long,
        language=config["language"],
        checksum=config["checksum"],
    ))


def cmd_split(args: argparse.Namespace, config: dict[str, Any]) -> None:
    """Prompt for a seed phrase and print share lines."""
    import getpass

    from seedsplit.phrase import split_phrase

    phrase = getpass.getpass("Seed phrase: ")
    lines = split_phrase(
        phrase,
        args.threshold,
        args.count,
        language=config["language"],
        checksum=config["checksum"],
    )

    for line in lines:
        print(line)


def cmd_combine(args: argparse.Namespace, config: dict[str, Any]) -> None:
    """Prompt for share lines and print the recovered seed phrase."""
    import getpass

    from seedsplit.phrase import combine_phrases

    if args.threshold < 2:
        _fail(InsufficientShares(args.threshold))

    lines = [
        getpass.getpass(f"Share {i}/{args.threshold}: ")
        for i in range(1, args.threshold + 1)
    ]
    phrase = combine_phrases(
        lines,
        language=config["language"],
        checksum=config["checksum"],
    )

    print(phrase)


def build_parser() -> argparse.ArgumentParser:
    from seedsplit import __version__

    parser = argparse.ArgumentParser(
        prog="seed-split",
        description="Split a seed phrase into multiple shares.",
    )
    parser.add_argument("--version", action="version", version=f"seed-split {__version__}")
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="Log progress to stderr (-vv for debug)",
    )
    parser.add_argument("--config", help="Path to config.toml (or set SEEDSPLIT_CONFIG)")
    parser.add_argument("--language", help="Wordlist language (default: english)")
    sub = parser.add_subparsers(dest="command")

    # random
    p_random = sub.add_parser("random", help="Generate a random seed phrase")
    p_random.add_argument(
        "--long", action="store_true", help="24 words instead of 12",
    )

    # split
    p_split = sub.add_parser("split", help="Split a seed phrase into multiple shares")
    p_split.add_argument(
        "-t", "--threshold", type=int, required=True,
        help="The number of shares needed to recreate the seed",
    )
    p_split.add_argument(
        "-n", "--count", type=int, required=True, help="The total number of shares",
    )

    # combine
    p_combine = sub.add_parser("combine", help="Combine multiple shares into a seed phrase")
    p_combine.add_argument("threshold", type=int, help="The number of shares being combined")

    return parser


def main(argv: list[str] | None = None) -> None:
    from seedsplit.config import load_config

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        print("seed-split — Shamir's Secret Sharing for seed phrases")
        print()
        print("Usage:")
        print("  seed-split random [--long]")
        print("  seed-split split -t 2 -n 3")
        print("  seed-split combine 2")
        print()
        print("Run 'seed-split <command> --help' for details on any command.")
        sys.exit(0)

    try:
        config = load_config(args.config)
    except SeedSplitError as e:
        _fail(e)
    if args.language:
        config["language"] = args.language

    _configure_logging(config["log_level"], args.verbose)

    commands = {
        "random": cmd_random,
        "split": cmd_split,
        "combine": cmd_combine,
    }

    try:
        commands[args.command](args, config)
    except SeedSplitError as e:
        _fail(e)


if __name__ == "__main__":
    main()
