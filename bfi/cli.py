#!/usr/bin/env python3
"""
bfi — run Brainfuck programs

Usage:
    bfi program.bf                 run a source file
    bfi -e ',[.,]' < input.txt     run source given on the command line
    bfi                            interactive session (also: bfi --repl)

Settings can also come from the environment: BF_EOF_POLICY, BF_STEP_LIMIT,
BF_TAPE_SIZE. Flags take precedence.

Exit status: 0 on normal halt, 1 on an unmatched bracket, pointer underflow,
unreadable file or bad setting, 3 when the step limit stopped the program.
"""

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .config import EofPolicy, InterpreterConfig
from .errors import BrainfuckError, ConfigError
from .interpreter import BrainfuckInterpreter
from .repl import Repl

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_STEP_LIMIT = 3


def configure_logging(verbosity: int):
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("bfi").setLevel(level)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="bfi",
        description="Brainfuck interpreter with an unbounded 8-bit tape",
    )
    parser.add_argument("source", nargs="?", help="Brainfuck source file")
    parser.add_argument("-e", "--execute", metavar="CODE",
                        help="Run CODE instead of reading a source file")
    parser.add_argument("--repl", action="store_true",
                        help="Start an interactive session")
    parser.add_argument("--eof", choices=[p.value for p in EofPolicy], default=None,
                        help="Value ',' stores at end of input (default: zero)")
    parser.add_argument("--step-limit", type=int, default=None,
                        help="Stop after this many instructions")
    parser.add_argument("--tape-size", type=int, default=None,
                        help="Initial number of tape cells (the tape still grows)")
    parser.add_argument("--verbose", "-v", action="count", default=0,
                        help="Log to stderr (-v info, -vv debug)")
    parser.add_argument("--version", action="version", version=f"bfi {__version__}")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.source is not None and args.execute is not None:
        parser.error("give either a source file or -e CODE, not both")

    try:
        config = InterpreterConfig.from_env().with_overrides(
            eof_policy=args.eof,
            step_limit=args.step_limit,
            tape_size=args.tape_size,
        )
    except ConfigError as e:
        print(f"bfi: {e}", file=sys.stderr)
        return EXIT_ERROR

    if args.repl or (args.source is None and args.execute is None):
        try:
            repl = Repl(config)
        except BrainfuckError as e:
            print(f"bfi: {e}", file=sys.stderr)
            return EXIT_ERROR
        repl.start()
        return EXIT_OK

    if args.execute is not None:
        source = args.execute
    else:
        try:
            source = Path(args.source).read_bytes()
        except OSError as e:
            print(f"bfi: cannot read {args.source}: {e.strerror}", file=sys.stderr)
            return EXIT_ERROR
        logger.info(f"Loaded {args.source} ({len(source)} bytes)")

    stdin = getattr(sys.stdin, "buffer", sys.stdin)
    stdout = getattr(sys.stdout, "buffer", sys.stdout)
    interpreter = BrainfuckInterpreter(config)
    try:
        interpreter.run(source, stdin, output=stdout)
    except BrainfuckError as e:
        print(f"bfi: {e}", file=sys.stderr)
        return EXIT_ERROR

    if interpreter.hit_step_limit:
        print(f"bfi: step limit of {config.step_limit} reached", file=sys.stderr)
        return EXIT_STEP_LIMIT
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
