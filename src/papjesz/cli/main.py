"""CLI entrypoint for papjesz."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

import shtab

from papjesz import __version__
from papjesz.config import PapjeszConfig, load_config
from papjesz.constants.branding import BRAND_NAME, CLI_DESCRIPTION
from papjesz.constants.cli import COMPLETION_SHELLS, EXIT_CONFIG_ERROR, EXIT_INPUT_ERROR, EXIT_OK
from papjesz.constants.mascots import VALID_MASCOT_PRESETS
from papjesz.exceptions import ConfigError, PapjeszError
from papjesz.render import render
from papjesz.sources import load_corpus, load_mascot, resolve_message
from papjesz.types import MascotFile, MascotSource

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog=BRAND_NAME,
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("message", nargs="?", default=None, help="Message to put in the speech bubble")

    mascot = parser.add_mutually_exclusive_group()
    mascot.add_argument(
        "-m",
        "--mascot",
        choices=sorted(VALID_MASCOT_PRESETS),
        default=None,
        help="Bundled mascot preset (default: ascii)",
    )
    mascot.add_argument(
        "-f",
        "--mascot-file",
        type=Path,
        default=None,
        help="Read the mascot from a file instead of a bundled preset",
    ).complete = shtab.FILE  # type: ignore[attr-defined]

    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="Explicit config file (default: ./papjesz.yaml when present)",
    ).complete = shtab.FILE  # type: ignore[attr-defined]
    parser.add_argument("-s", "--seed", type=int, default=None, help="Seed for random corpus excerpts")
    parser.add_argument(
        "--completions",
        choices=COMPLETION_SHELLS,
        default=None,
        help="Print a shell completion script and exit",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log diagnostics to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(message)s",
    )

    if args.completions is not None:
        print(shtab.complete(parser, shell=args.completions))
        return EXIT_OK

    try:
        config = load_config(Path.cwd(), args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    logger.debug("Resolved config: %s", config)

    try:
        corpus = load_corpus(config.corpus_file)
        mascot = load_mascot(_mascot_source(args, config))
        message = resolve_message(
            args.message,
            sys.stdin,
            corpus,
            random.Random(args.seed),
            mean=config.excerpt_mean_lines,
            stddev=config.excerpt_stddev_lines,
        )
    except PapjeszError as exc:
        print(f"Input error: {exc}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    print(render(message, mascot))
    return EXIT_OK


def _mascot_source(args: argparse.Namespace, config: PapjeszConfig) -> MascotSource:
    """CLI mascot flags take precedence over the config file."""
    if args.mascot_file is not None:
        return MascotFile(args.mascot_file)
    if args.mascot is not None:
        return args.mascot
    return config.mascot_source


if __name__ == "__main__":
    raise SystemExit(main())
