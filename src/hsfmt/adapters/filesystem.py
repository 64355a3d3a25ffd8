from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

from ..core import Entry, NodeKind, SourceAdapter
from ..errors import FormatError


class FileSystemSource(SourceAdapter):
    def __init__(self, root_cwd: Path | None = None) -> None:
        self._cwd = Path.cwd() if root_cwd is None else Path(root_cwd)

    def _resolve(self, path: str) -> Path:
        return self._cwd / path

    def classify(self, path: str) -> NodeKind:
        # Follows symlinks: a linked directory named on the command line is expanded.
        p = self._resolve(path)
        if p.is_dir():
            return NodeKind.DIRECTORY
        if p.is_file():
            return NodeKind.FILE
        return NodeKind.OTHER

    def list_dir(self, dir_path: str) -> Iterable[Entry]:
        entries: list[Entry] = []
        with os.scandir(self._resolve(dir_path)) as it:
            for e in it:
                # Linked directories are not descended into; linked files are files.
                if e.is_dir(follow_symlinks=False):
                    kind = NodeKind.DIRECTORY
                elif e.is_file():
                    kind = NodeKind.FILE
                else:
                    kind = NodeKind.OTHER
                entries.append(
                    Entry(
                        path=os.path.join(dir_path, e.name),
                        name=e.name,
                        kind=kind,
                    )
                )
        return entries

    def read_text(self, file_path: str) -> str:
        try:
            with self._resolve(file_path).open("r", encoding="utf-8", newline="") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise FormatError(f"cannot read file: {e}", path=file_path) from e

    def write_text(self, file_path: str, text: str) -> None:
        try:
            with self._resolve(file_path).open("w", encoding="utf-8", newline="") as f:
                f.write(text)
        except OSError as e:
            raise FormatError(f"cannot write file: {e}", path=file_path) from e
