from __future__ import annotations

from pathlib import Path

from hsfmt.core import STDIN, Config, Input
from hsfmt.errors import FormatError

FORMATTED = "module X where\n\nx :: Int\nx = 1\n"
UNFORMATTED = "module X where   \n\nx :: Int\nx = 1  \n"


def write_text_file(path: Path, content: str) -> None:
    """Create parents and write UTF-8 text to a file path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def read_text_file(path: Path) -> str:
    """Read UTF-8 text without newline translation."""
    with path.open("r", encoding="utf-8", newline="") as f:
        return f.read()


class FakeEngine:
    """Stands in for Ormolu: strips trailing whitespace and fails on 'parse error'."""

    def __init__(self) -> None:
        self.calls: list[tuple[Config, Input]] = []

    def format_text(self, config: Config, text: str) -> str:
        self.calls.append((config, STDIN))
        return self._format(text, path=None)

    def format_file(self, config: Config, path: str) -> str:
        self.calls.append((config, path))
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            raise FormatError(str(e), path=path) from e
        return self._format(text, path=path)

    @property
    def called_inputs(self) -> list[Input]:
        return [input_ for _config, input_ in self.calls]

    def _format(self, text: str, *, path: str | None) -> str:
        if "parse error" in text:
            raise FormatError("1:1: parse error on input", path=path, exit_code=3)
        return "".join(line.rstrip() + "\n" for line in text.splitlines())
