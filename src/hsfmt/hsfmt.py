from __future__ import annotations

import logging
import sys
from typing import assert_never

from .adapters.filesystem import FileSystemSource
from .adapters.ormolu import OrmoluEngine
from .cli_common import Context, derive_config, parse_common_args
from .core import (
    Engine,
    Formatted,
    MismatchDetected,
    Reader,
    SourceAdapter,
    StderrWriter,
    StdinReader,
    StdoutWriter,
    UnsupportedStdinMode,
    Writer,
)
from .defaults import EXIT_NOT_FORMATTED, EXIT_SUCCESS, EXIT_UNSUPPORTED_STDIN
from .dispatch import format_one
from .errors import FormatError
from .filters import resolve_inputs

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)


def main(
    *,
    argv: list[str] | None = None,
    writer: Writer | None = None,
    err_writer: Writer | None = None,
    reader: Reader | None = None,
    engine: Engine | None = None,
    source: SourceAdapter | None = None,
) -> int:
    """
    Run the formatter over the inputs named by `argv` and return the exit status.

    Inputs are processed in order and the first check mismatch, unsupported stdin
    request or formatter failure stops the run with its own status.
    """
    if argv is None:
        argv = sys.argv[1:]
    ctx: Context = parse_common_args(argv)
    _configure_logging(ctx.verbose)

    config = derive_config(ctx)
    out_writer = writer or StdoutWriter()
    error_writer = err_writer or StderrWriter()
    in_reader = reader or StdinReader()
    fs_source = source or FileSystemSource()
    fmt_engine = engine or OrmoluEngine([ctx.ormolu] if ctx.ormolu else None)

    try:
        inputs = resolve_inputs(ctx.mode, ctx.paths, source=fs_source)
        logger.debug("mode=%s inputs=%r", ctx.mode.value, inputs)
        for input_ in inputs:
            outcome = format_one(
                ctx.mode,
                config,
                input_,
                engine=fmt_engine,
                source=fs_source,
                stdin=in_reader,
                stdout=out_writer,
                stderr=error_writer,
            )
            if isinstance(outcome, Formatted):
                continue
            elif isinstance(outcome, MismatchDetected):
                return EXIT_NOT_FORMATTED
            elif isinstance(outcome, UnsupportedStdinMode):
                return EXIT_UNSUPPORTED_STDIN
            else:
                assert_never(outcome)
    except FormatError as e:
        error_writer.write(f"{e}\n")
        return e.exit_code
    return EXIT_SUCCESS


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
