from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, Protocol

from .defaults import (
    DEFAULT_CHECK_IDEMPOTENCY,
    DEFAULT_DEBUG,
    DEFAULT_GHC_OPTS,
    DEFAULT_TOLERATE_CPP,
    DEFAULT_UNSAFE,
    MODE_CHECK,
    MODE_INPLACE,
    MODE_STDOUT,
    STDIN_TOKEN,
)
from .errors import FormatError


class Mode(Enum):
    STDOUT = MODE_STDOUT
    INPLACE = MODE_INPLACE
    CHECK = MODE_CHECK

    @classmethod
    def parse(cls, token: str) -> Mode:
        for mode in cls:
            if mode.value == token:
                return mode
        msg = f"unknown mode: {token}"
        raise ValueError(msg)


class StandardInput(Enum):
    """Sentinel input meaning "read the source from standard input"."""

    STDIN = STDIN_TOKEN

    def __repr__(self) -> str:
        return "STDIN"


STDIN = StandardInput.STDIN

Input = str | StandardInput


@dataclass(frozen=True)
class Config:
    """
    Options forwarded verbatim to the formatting engine.

    Nothing in the orchestration layer looks inside; only engine adapters do.
    """

    ghc_opts: tuple[str, ...] = DEFAULT_GHC_OPTS
    unsafe: bool = DEFAULT_UNSAFE
    debug: bool = DEFAULT_DEBUG
    tolerate_cpp: bool = DEFAULT_TOLERATE_CPP
    check_idempotency: bool = DEFAULT_CHECK_IDEMPOTENCY


# region ---[ Outcomes ]---


@dataclass(frozen=True)
class Formatted:
    text: str


@dataclass(frozen=True)
class MismatchDetected:
    path: str


@dataclass(frozen=True)
class UnsupportedStdinMode:
    mode: Mode


Outcome = Formatted | MismatchDetected | UnsupportedStdinMode

# endregion ---[ Outcomes ]---


class NodeKind(Enum):
    DIRECTORY = auto()
    FILE = auto()
    OTHER = auto()


@dataclass(frozen=True)
class Entry:
    path: str
    name: str
    kind: NodeKind


class Writer(Protocol):
    def write(self, text: str) -> None: ...


class Reader(Protocol):
    def read(self) -> str: ...


class SourceAdapter(Protocol):
    def classify(self, path: str) -> NodeKind: ...
    def list_dir(self, dir_path: str) -> Iterable[Entry]: ...
    def read_text(self, file_path: str) -> str: ...
    def write_text(self, file_path: str, text: str) -> None: ...


class Engine(Protocol):
    def format_text(self, config: Config, text: str) -> str: ...
    def format_file(self, config: Config, path: str) -> str: ...


class StdoutWriter(Writer):
    def write(self, text: str) -> None:
        # Always UTF-8, whatever the locale says, mirroring StdinReader.
        sys.stdout.flush()
        sys.stdout.buffer.write(text.encode("utf-8"))
        sys.stdout.buffer.flush()


class StderrWriter(Writer):
    def write(self, text: str) -> None:
        sys.stderr.write(text)
        sys.stderr.flush()


class StdinReader(Reader):
    def read(self) -> str:
        # Bypass newline translation so the engine sees the exact bytes.
        try:
            return sys.stdin.buffer.read().decode("utf-8")
        except UnicodeDecodeError as e:
            raise FormatError(f"cannot decode standard input: {e}") from e


class StringWriter(Writer):
    """
    Collects written text into an internal buffer for tests and callers.

    Provides a lightweight Writer implementation that accumulates text and
    exposes it via the `text()` accessor.
    """

    def __init__(self) -> None:
        self._parts: list[str] = []

    def write(self, text: str) -> None:  # Writer protocol
        self._parts.append(text)

    def text(self) -> str:
        return "".join(self._parts)
