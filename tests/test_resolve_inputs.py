from __future__ import annotations

import os
from pathlib import Path

import pytest
from utils import write_text_file

from hsfmt.adapters.filesystem import FileSystemSource
from hsfmt.core import STDIN, Mode
from hsfmt.filters import expand_path, is_source_file, resolve_inputs


@pytest.mark.parametrize("mode", list(Mode))
@pytest.mark.parametrize("raw", [[], ["-"]])
def test_no_paths_or_dash_means_stdin(mode: Mode, raw: list[str]):
    assert resolve_inputs(mode, raw) == [STDIN]


@pytest.mark.parametrize("mode", [Mode.STDOUT, Mode.CHECK])
def test_stdout_and_check_take_paths_verbatim(mode: Mode, hs_tree: Path):
    raw = [str(hs_tree), "missing.hs", str(hs_tree / "y.txt"), "-"]
    assert resolve_inputs(mode, raw) == raw


def test_dash_among_other_paths_is_a_path(hs_tree: Path):
    assert resolve_inputs(Mode.CHECK, ["-", "a.hs"]) == ["-", "a.hs"]


def test_inplace_expands_directory_recursively(hs_tree: Path):
    inputs = resolve_inputs(Mode.INPLACE, [str(hs_tree)])
    assert inputs == [
        os.path.join(str(hs_tree), "x.hs"),
        os.path.join(str(hs_tree), "sub", "z.hs"),
        os.path.join(str(hs_tree), "sub", "deep", "Ok.hs"),
    ]


def test_inplace_relative_directory_gives_relative_inputs(hs_tree: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.chdir(hs_tree.parent)
    inputs = resolve_inputs(Mode.INPLACE, ["srcdir"])
    assert inputs == [
        os.path.join("srcdir", "x.hs"),
        os.path.join("srcdir", "sub", "z.hs"),
        os.path.join("srcdir", "sub", "deep", "Ok.hs"),
    ]


def test_inplace_keeps_regular_files_whatever_their_suffix(hs_tree: Path):
    txt = str(hs_tree / "y.txt")
    assert resolve_inputs(Mode.INPLACE, [txt]) == [txt]


def test_inplace_silently_drops_missing_paths(hs_tree: Path):
    x = str(hs_tree / "x.hs")
    assert resolve_inputs(Mode.INPLACE, [str(hs_tree / "nope"), x]) == [x]


def test_inplace_concatenates_in_argument_order(hs_tree: Path):
    z = str(hs_tree / "sub" / "z.hs")
    inputs = resolve_inputs(Mode.INPLACE, [z, str(hs_tree / "sub" / "deep")])
    assert inputs == [z, os.path.join(str(hs_tree / "sub" / "deep"), "Ok.hs")]


def test_inplace_directory_without_sources_contributes_nothing(tmp_path: Path):
    write_text_file(tmp_path / "docs" / "README.md", "hi\n")
    assert resolve_inputs(Mode.INPLACE, [str(tmp_path / "docs")]) == []


def test_expansion_orders_files_before_subdirectories_case_insensitively(tmp_path: Path):
    for rel in ["b.hs", "A.hs", "a_dir/inner.hs", "C.hs", "B_dir/inner.hs"]:
        write_text_file(tmp_path / rel, "x = 1\n")
    found = expand_path(FileSystemSource(), str(tmp_path))
    assert [os.path.relpath(p, tmp_path) for p in found] == [
        "A.hs",
        "b.hs",
        "C.hs",
        os.path.join("a_dir", "inner.hs"),
        os.path.join("B_dir", "inner.hs"),
    ]


def test_unreadable_subdirectory_is_skipped(hs_tree: Path):
    blocked = os.path.join(str(hs_tree), "sub")

    class _Blocked(FileSystemSource):
        def list_dir(self, dir_path: str):
            if dir_path == blocked:
                raise PermissionError(13, "Permission denied", dir_path)
            return super().list_dir(dir_path)

    inputs = resolve_inputs(Mode.INPLACE, [str(hs_tree)], source=_Blocked())
    assert inputs == [os.path.join(str(hs_tree), "x.hs")]


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
def test_linked_directories_inside_tree_are_not_followed(hs_tree: Path, tmp_path: Path):
    write_text_file(tmp_path / "elsewhere" / "Far.hs", "x = 1\n")
    os.symlink(tmp_path / "elsewhere", hs_tree / "link")
    inputs = resolve_inputs(Mode.INPLACE, [str(hs_tree)])
    assert not any("Far.hs" in p for p in inputs)


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
def test_linked_directory_named_on_command_line_is_expanded(tmp_path: Path):
    write_text_file(tmp_path / "real" / "M.hs", "x = 1\n")
    os.symlink(tmp_path / "real", tmp_path / "alias")
    inputs = resolve_inputs(Mode.INPLACE, [str(tmp_path / "alias")])
    assert inputs == [os.path.join(str(tmp_path / "alias"), "M.hs")]


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="fifos unavailable")
def test_special_files_contribute_nothing(tmp_path: Path):
    fifo = tmp_path / "pipe.hs"
    os.mkfifo(fifo)
    assert resolve_inputs(Mode.INPLACE, [str(fifo)]) == []
    assert resolve_inputs(Mode.INPLACE, [str(tmp_path)]) == []


@pytest.mark.parametrize(
    "name, expected",
    [("Foo.hs", True), ("dir/Main.hs", True), ("hs", False), ("Foo.lhs", False), ("Foo.hsc", False), ("Foo.HS", False)],
)
def test_is_source_file(name: str, expected: bool):
    assert is_source_file(name) is expected
