from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest
from utils import FORMATTED, UNFORMATTED, FakeEngine, write_text_file


@pytest.fixture
def engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture
def hs_tree(tmp_path: Path) -> Iterator[Path]:
    """Create a small source tree with Haskell and non-Haskell files.

    srcdir/
      x.hs              unformatted
      y.txt             not Haskell, unformatted
      sub/z.hs          unformatted
      sub/notes.md      not Haskell
      sub/deep/Ok.hs    already formatted
    """
    srcdir = tmp_path / "srcdir"
    write_text_file(srcdir / "x.hs", UNFORMATTED)
    write_text_file(srcdir / "y.txt", "trailing   \n")
    write_text_file(srcdir / "sub" / "z.hs", UNFORMATTED)
    write_text_file(srcdir / "sub" / "notes.md", "# notes  \n")
    write_text_file(srcdir / "sub" / "deep" / "Ok.hs", FORMATTED)
    yield srcdir
