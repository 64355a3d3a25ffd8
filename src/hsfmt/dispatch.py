from __future__ import annotations

import logging

from .core import (
    STDIN,
    Config,
    Engine,
    Formatted,
    Input,
    MismatchDetected,
    Mode,
    Outcome,
    Reader,
    SourceAdapter,
    UnsupportedStdinMode,
    Writer,
)
from .defaults import UNSUPPORTED_STDIN_MESSAGE

logger = logging.getLogger(__name__)


def format_one(
    mode: Mode,
    config: Config,
    input_: Input,
    *,
    engine: Engine,
    source: SourceAdapter,
    stdin: Reader,
    stdout: Writer,
    stderr: Writer,
) -> Outcome:
    """
    Format a single input and realize the result according to `mode`.

    Engine failures (FormatError) are not caught here; they travel up to main.
    """
    if input_ is STDIN:
        result = engine.format_text(config, stdin.read())
        if mode is Mode.STDOUT:
            stdout.write(result)
            return Formatted(result)
        stderr.write(UNSUPPORTED_STDIN_MESSAGE + "\n")
        return UnsupportedStdinMode(mode)

    result = engine.format_file(config, input_)
    if mode is Mode.STDOUT:
        stdout.write(result)
    elif mode is Mode.INPLACE:
        logger.debug("rewriting %s", input_)
        source.write_text(input_, result)
    elif mode is Mode.CHECK:
        # Re-read what is on disk now, not what the engine was given.
        if source.read_text(input_) != result:
            logger.debug("%s is not formatted", input_)
            return MismatchDetected(input_)
    return Formatted(result)
