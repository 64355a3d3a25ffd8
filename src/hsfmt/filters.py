from __future__ import annotations

import logging
from typing import Iterator

from typeguard import typechecked

from .adapters.filesystem import FileSystemSource
from .core import STDIN, Input, Mode, NodeKind, SourceAdapter
from .defaults import SOURCE_SUFFIX, STDIN_TOKEN
from .types import TSuffix

logger = logging.getLogger(__name__)


@typechecked
def is_source_file(name: str, suffix: TSuffix = SOURCE_SUFFIX) -> bool:
    """
    >>> is_source_file("Foo.hs")
    True
    >>> is_source_file("hs")
    False
    """
    return name.endswith(suffix)


def list_files_recursive(source: SourceAdapter, dir_path: str) -> Iterator[str]:
    """Yield every file under `dir_path`, depth-first, files before subdirectories."""
    try:
        entries = list(source.list_dir(dir_path))
    except OSError as e:
        logger.debug("skipping unreadable directory %s: %s", dir_path, e)
        return
    dirs = sorted((e for e in entries if e.kind is NodeKind.DIRECTORY), key=lambda e: e.name.casefold())
    files = sorted((e for e in entries if e.kind is NodeKind.FILE), key=lambda e: e.name.casefold())
    for entry in files:
        yield entry.path
    for entry in dirs:
        yield from list_files_recursive(source, entry.path)


@typechecked
def expand_path(source: SourceAdapter, path: str, suffix: TSuffix = SOURCE_SUFFIX) -> list[str]:
    """
    Concrete files to format for a single path argument.

    Directories contribute their source files, recursively. A regular file is
    kept whatever its name. Anything else (missing, special) contributes nothing.
    """
    kind = source.classify(path)
    if kind is NodeKind.DIRECTORY:
        found = [p for p in list_files_recursive(source, path) if is_source_file(p, suffix)]
        logger.debug("expanded directory %s into %d file(s)", path, len(found))
        return found
    if kind is NodeKind.FILE:
        return [path]
    logger.debug("ignoring %s: neither a directory nor a regular file", path)
    return []


@typechecked
def resolve_inputs(
    mode: Mode,
    raw_paths: list[str],
    *,
    source: SourceAdapter | None = None,
    suffix: TSuffix = SOURCE_SUFFIX,
) -> list[Input]:
    """
    Turn positional arguments into the ordered inputs to dispatch.

    No arguments, or a lone '-', means standard input in every mode. Only in-place
    mode expands directories; stdout and check modes take the arguments verbatim.
    """
    if not raw_paths or raw_paths == [STDIN_TOKEN]:
        return [STDIN]
    if mode is not Mode.INPLACE:
        return list(raw_paths)
    source = source or FileSystemSource()
    inputs: list[Input] = []
    for path in raw_paths:
        inputs.extend(expand_path(source, path, suffix))
    return inputs
