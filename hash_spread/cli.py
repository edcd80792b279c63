"""
Command line interface for hash-spread.

Usage::

    hash-spread words.txt
    hash-spread -m 31 -m 33 --buckets 31 --buckets 199 words.txt
    cat words.txt | hash-spread --json -

Exit codes: 0 on success, 1 when the corpus cannot be read or analysed,
2 on usage errors.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional, Sequence, TextIO

from hash_spread import __version__
from hash_spread.algorithms.buckets import bucketize_words
from hash_spread.algorithms.collision import DEFAULT_MULTIPLIERS, collision_rate_list
from hash_spread.core.errors import HashSpreadError
from hash_spread.corpus import load_words, read_words
from hash_spread.report import format_buckets, format_rate_table

EXIT_OK = 0
EXIT_FAILURE = 1

_log = logging.getLogger("hash_spread")


def _configure_logging(verbosity: int) -> None:
    """Set up the ``hash_spread`` logger: 0 WARNING, 1 INFO, 2+ DEBUG."""
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    _log.setLevel(level)
    # Replace the handler so it writes to the current sys.stderr
    for old in list(_log.handlers):
        _log.removeHandler(old)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)-5.5s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    _log.addHandler(handler)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hash-spread",
        description="Compare multipliers of the polynomial string hash on a word list.",
    )
    parser.add_argument(
        "corpus",
        nargs="?",
        default="-",
        help="word list with one word per line, or - for stdin (default)",
    )
    parser.add_argument(
        "-m",
        "--multiplier",
        dest="multipliers",
        type=int,
        action="append",
        metavar="M",
        help="multiplier for the collision table (repeatable, "
        f"default: {' '.join(str(m) for m in DEFAULT_MULTIPLIERS)})",
    )
    parser.add_argument(
        "--buckets",
        type=int,
        action="append",
        default=[],
        metavar="M",
        help="print the bucket distribution for multiplier M (repeatable)",
    )
    parser.add_argument("--json", action="store_true", help="emit JSON output")
    parser.add_argument(
        "--encoding", default="utf-8", help="encoding of the word list file"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="increase log verbosity (-v info, -vv debug)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(args: argparse.Namespace, stdin: TextIO, stdout: TextIO) -> int:
    """Execute a parsed command line, writing results to ``stdout``."""
    if args.corpus == "-":
        words = read_words(stdin)
        _log.info("read %d distinct words from stdin", len(words))
    else:
        words = load_words(args.corpus, encoding=args.encoding)

    multipliers: List[int] = (
        args.multipliers if args.multipliers is not None else list(DEFAULT_MULTIPLIERS)
    )
    rates = collision_rate_list(words, multipliers)
    histograms = [(m, bucketize_words(words, m)) for m in args.buckets]

    if args.json:
        document = {
            "words": len(words),
            "rates": [rate.to_dict() for rate in rates],
            "buckets": {str(m): stats.to_dict() for m, stats in histograms},
        }
        stdout.write(json.dumps(document, indent=2) + "\n")
        return EXIT_OK

    stdout.write(format_rate_table(rates) + "\n")
    for multiplier, stats in histograms:
        stdout.write(f"\nbuckets for multiplier {multiplier}:\n")
        stdout.write(format_buckets(stats) + "\n")
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run the hash-spread CLI.

    Args:
        argv: Command line arguments; None means ``sys.argv[1:]``.

    Returns:
        The process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        return run(args, sys.stdin, sys.stdout)
    except OSError as exc:
        _log.error("cannot read %s: %s", args.corpus, exc)
        return EXIT_FAILURE
    except UnicodeDecodeError as exc:
        _log.error("cannot decode %s: %s", args.corpus, exc)
        return EXIT_FAILURE
    except HashSpreadError as exc:
        _log.error("%s", exc)
        return EXIT_FAILURE
