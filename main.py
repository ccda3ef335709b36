# main.py

"""
Entry point for the random-streams-options project.

Typical usage:

    # Show the default stream options
    python main.py

    # Validate options from a JSON file and show the resolved result
    python main.py --options stream_options.json

    # Attach a seeded NumPy PRNG (prng / seed / state options)
    python main.py --options stream_options.json --seed 42

    # Also write logs to logs/random_streams.log
    python main.py --options stream_options.json --log-file

Exit status:
    0  options are valid
    1  the options file could not be read, decoded as UTF-8, or parsed as JSON
    2  the options failed validation

This script wires together:
    - config (defaults, logging settings),
    - utils.rng (seeded NumPy Generator -> prng/seed/state options),
    - streams.options.resolve_options (defaults + validation).
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

from config import LOG_FILENAME, LOG_LEVEL, LOGS_DIR
from core_types import UNSET, OptionsTypeError, safe_repr
from streams.options import resolve_options
from utils.logging_utils import configure_root_logger, get_logger
from utils.rng import make_rng, prng_options


logger = get_logger(__name__)


def _nonnegative_int(text: str) -> int:
    """
    argparse type for seeds: NumPy only accepts seeds >= 0.
    """
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"seed must be a nonnegative integer, got {value}")
    return value


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Validate random stream options")

    parser.add_argument(
        "--options",
        type=Path,
        default=None,
        help="Path to a JSON file holding a single options object.",
    )

    parser.add_argument(
        "--seed",
        type=_nonnegative_int,
        default=None,
        help="If provided, seed a NumPy Generator and pass it as prng/seed/state.",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log at DEBUG level.",
    )

    parser.add_argument(
        "--log-file",
        action="store_true",
        help=f"Also write logs to {LOGS_DIR / LOG_FILENAME}.",
    )

    return parser.parse_args(argv)


def _load_options(path: Optional[Path]) -> Any:
    """
    Read the options object from JSON, or UNSET when no file is given.
    """
    if path is None:
        return UNSET
    return json.loads(path.read_text(encoding="utf-8"))


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    configure_root_logger(
        level=logging.DEBUG if args.verbose else LOG_LEVEL,
        log_to_file=args.log_file,
    )

    try:
        options = _load_options(args.options)
    except (OSError, ValueError) as exc:
        # ValueError covers JSONDecodeError and UnicodeDecodeError
        print(f"error: cannot read options from {args.options}: {exc}", file=sys.stderr)
        return 1

    if args.seed is not None:
        # Only a mapping can carry the PRNG options; anything else is left
        # for the validator to reject.
        if options is UNSET:
            options = {}
        if isinstance(options, dict):
            options.update(prng_options(make_rng(args.seed), seed=args.seed))

    try:
        opts = resolve_options(options)
    except OptionsTypeError as err:
        print(f"error: {err}", file=sys.stderr)
        return 2

    logger.info("Options are valid (%d resolved).", len(opts))
    for name, value in opts.items():
        print(f"{name} = {safe_repr(value)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
