from __future__ import annotations

import argparse
import textwrap
from dataclasses import dataclass, field
from importlib.metadata import PackageNotFoundError, version

from hsfmt.core import Config, Mode
from hsfmt.defaults import (
    DEFAULT_CHECK_IDEMPOTENCY,
    DEFAULT_DEBUG,
    DEFAULT_MODE,
    DEFAULT_TOLERATE_CPP,
    DEFAULT_UNSAFE,
    DEFAULT_VERBOSE,
    ENGINE_EXECUTABLE_ENV,
    EXIT_NOT_FORMATTED,
    EXIT_UNSUPPORTED_STDIN,
    SOURCE_SUFFIX,
    STDIN_TOKEN,
)


@dataclass(slots=True)
class Context:
    mode: Mode = Mode(DEFAULT_MODE)
    paths: list[str] = field(default_factory=list)
    ghc_opts: list[str] = field(default_factory=list)
    unsafe: bool = DEFAULT_UNSAFE
    debug: bool = DEFAULT_DEBUG
    tolerate_cpp: bool = DEFAULT_TOLERATE_CPP
    check_idempotency: bool = DEFAULT_CHECK_IDEMPOTENCY
    ormolu: str | None = None
    verbose: bool = DEFAULT_VERBOSE


def _mode_arg(token: str) -> Mode:
    try:
        return Mode.parse(token)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _program_version() -> str:
    try:
        return version("hsfmt")
    except PackageNotFoundError:
        return "unknown"


def parse_common_args(argv: list[str] | None = None) -> Context:
    epilog = textwrap.dedent(
        f"""
        INPUTS
        With no FILE, or when FILE is '{STDIN_TOKEN}', source is read from standard input.
        In inplace mode a directory is searched recursively for '*{SOURCE_SUFFIX}' files; the other modes take paths as given.

        EXIT STATUS
        0 on success, {EXIT_NOT_FORMATTED} when check mode finds a file that is not formatted,
        {EXIT_UNSUPPORTED_STDIN} when inplace or check mode is used with standard input,
        and the formatter's own status when it fails.
        """
    )

    parser = argparse.ArgumentParser(
        prog="hsfmt",
        description="Formats Haskell source files with Ormolu",
        add_help=True,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=epilog,
    )

    parser.add_argument(
        "paths",
        type=str,
        nargs="*",
        metavar="FILE",
        help="Haskell source files to format or stdin (default).",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {_program_version()}",
        help="Print version of the program.",
    )
    parser.add_argument(
        "-m",
        "--mode",
        type=_mode_arg,
        metavar="MODE",
        default=Mode(DEFAULT_MODE),
        help="Mode of operation: 'stdout' (default), 'inplace', or 'check'.",
    )

    # Everything in this group is handed to the formatter untouched.
    engine = parser.add_argument_group("formatter options")
    engine.add_argument(
        "-o",
        "--ghc-opt",
        type=str,
        dest="ghc_opts",
        metavar="OPT",
        action="append",
        default=[],
        help="GHC option to enable, e.g. a language extension; attach it as in --ghc-opt=-XCPP (repeatable).",
    )
    engine.add_argument(
        "-u",
        "--unsafe",
        action="store_true",
        help="Do formatting faster but without automatic detection of defects.",
        default=DEFAULT_UNSAFE,
    )
    engine.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Output information useful for debugging.",
        default=DEFAULT_DEBUG,
    )
    engine.add_argument(
        "-p",
        "--tolerate-cpp",
        action="store_true",
        help="Do not fail if CPP pragma is present.",
        default=DEFAULT_TOLERATE_CPP,
    )
    engine.add_argument(
        "-c",
        "--check-idempotency",
        action="store_true",
        help="Fail if formatting is not idempotent.",
        default=DEFAULT_CHECK_IDEMPOTENCY,
    )

    parser.add_argument(
        "--ormolu",
        type=str,
        metavar="PATH",
        default=None,
        help=f"Formatter executable. Defaults to ${ENGINE_EXECUTABLE_ENV}, then 'ormolu' on PATH.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log input resolution and dispatch decisions to stderr.",
        default=DEFAULT_VERBOSE,
    )

    args = parser.parse_args(argv)
    return Context(
        mode=args.mode,
        paths=list(args.paths),
        ghc_opts=list(args.ghc_opts or []),
        unsafe=bool(args.unsafe),
        debug=bool(args.debug),
        tolerate_cpp=bool(args.tolerate_cpp),
        check_idempotency=bool(args.check_idempotency),
        ormolu=args.ormolu,
        verbose=bool(args.verbose),
    )


def derive_config(ctx: Context) -> Config:
    return Config(
        ghc_opts=tuple(ctx.ghc_opts),
        unsafe=ctx.unsafe,
        debug=ctx.debug,
        tolerate_cpp=ctx.tolerate_cpp,
        check_idempotency=ctx.check_idempotency,
    )
