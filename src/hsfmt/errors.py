from __future__ import annotations

from .defaults import EXIT_FAILURE, RESERVED_EXIT_CODES


class FormatError(Exception):
    """
    The formatting engine failed on an input.

    Carries everything the top-level boundary needs to report it: a human-readable
    message, the offending path (None for stdin) and the process exit code.
    """

    def __init__(self, message: str, *, path: str | None = None, exit_code: int = EXIT_FAILURE) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        # Codes with a dedicated meaning, and signal deaths, map to the generic failure.
        if exit_code in RESERVED_EXIT_CODES or not 0 < exit_code < 256:
            exit_code = EXIT_FAILURE
        self.exit_code = exit_code

    def __str__(self) -> str:
        if self.path is None or self.path in self.message:
            return self.message
        return f"{self.path}: {self.message}"


class EngineNotFoundError(FormatError):
    """The formatter executable could not be started."""
