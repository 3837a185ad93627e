"""Unit tests for the DirectoryWalker class."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from dirbundle.exclusion_rules import ExclusionRules
from dirbundle.types import EntryKind
from dirbundle.walker.directory_walker import DirectoryWalker, relative_path_of


@pytest.fixture
def temp_directory(tmp_path):
    # Create a temporary directory structure
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "main.py").write_text("print('main')\n")
    (tmp_path / "src" / "utils").mkdir()
    (tmp_path / "src" / "utils" / "helpers.py").write_text("def helper(): pass\n")
    (tmp_path / "node_modules").mkdir()
    (tmp_path / "node_modules" / "pkg").mkdir()
    (tmp_path / "node_modules" / "pkg" / "index.js").write_text("module.exports = {}\n")
    (tmp_path / "app.log").write_text("log\n")
    (tmp_path / "README.md").write_text("# Readme\n")
    return tmp_path


def relative_paths(entries):
    return [entry.relative_path for entry in entries]


def test_walker_requires_existing_root(tmp_path):
    with pytest.raises(FileNotFoundError):
        DirectoryWalker(tmp_path / "missing")


def test_walker_requires_directory_root(tmp_path):
    file_path = tmp_path / "file.txt"
    file_path.write_text("x")
    with pytest.raises(NotADirectoryError):
        DirectoryWalker(file_path)


def test_iterate_entries_preorder_sorted(temp_directory):
    walker = DirectoryWalker(temp_directory)

    assert relative_paths(walker.iterate_entries()) == [
        "README.md",
        "app.log",
        "node_modules",
        "node_modules/pkg",
        "node_modules/pkg/index.js",
        "src",
        "src/main.py",
        "src/utils",
        "src/utils/helpers.py",
    ]


def test_entry_kinds_and_paths(temp_directory):
    walker = DirectoryWalker(temp_directory)
    entries = {entry.relative_path: entry for entry in walker.iterate_entries()}

    assert entries["src"].kind is EntryKind.DIRECTORY
    assert entries["src/main.py"].kind is EntryKind.FILE
    assert entries["src/main.py"].path == temp_directory / "src" / "main.py"


def test_iterate_files_only_yields_files(temp_directory):
    walker = DirectoryWalker(temp_directory)

    assert relative_paths(walker.iterate_files()) == [
        "README.md",
        "app.log",
        "node_modules/pkg/index.js",
        "src/main.py",
        "src/utils/helpers.py",
    ]


def test_excluded_directory_is_not_descended(temp_directory):
    rules = ExclusionRules(exclude_dirs=["node_modules"])
    walker = DirectoryWalker(temp_directory, rules)

    with patch("dirbundle.walker.directory_walker.os.scandir", wraps=os.scandir) as scandir:
        paths = relative_paths(walker.iterate_entries())

    assert not any(p.startswith("node_modules") for p in paths)
    scanned = {Path(call.args[0]) for call in scandir.call_args_list}
    assert temp_directory / "node_modules" not in scanned
    assert temp_directory / "src" in scanned


def test_nested_directory_with_excluded_name_is_walked(temp_directory):
    (temp_directory / "src" / "node_modules").mkdir()
    (temp_directory / "src" / "node_modules" / "dep.js").write_text("dep\n")
    rules = ExclusionRules(exclude_dirs=["node_modules"])

    files = relative_paths(DirectoryWalker(temp_directory, rules).iterate_files())

    assert "src/node_modules/dep.js" in files


def test_nested_directory_path_is_pruned(temp_directory):
    rules = ExclusionRules(exclude_dirs=["src/utils"])
    entries = relative_paths(DirectoryWalker(temp_directory, rules).iterate_entries())

    assert "src/utils" not in entries
    assert "src/utils/helpers.py" not in entries
    assert "src/main.py" in entries


def test_file_rules_applied(temp_directory):
    rules = ExclusionRules(exclude_files=["README.md"], exclude_patterns=["*.log"])
    files = relative_paths(DirectoryWalker(temp_directory, rules).iterate_files())

    assert "README.md" not in files
    assert "app.log" not in files
    assert "src/main.py" in files


def test_unlistable_directory_is_skipped_silently(temp_directory):
    real_scandir = os.scandir

    def failing_scandir(path):
        if Path(path) == temp_directory / "src":
            raise PermissionError("Permission denied")
        return real_scandir(path)

    with patch("dirbundle.walker.directory_walker.os.scandir", side_effect=failing_scandir):
        entries = relative_paths(DirectoryWalker(temp_directory).iterate_entries())

    # The directory itself is still listed but its contents are not
    assert "src" in entries
    assert "src/main.py" not in entries
    assert "README.md" in entries


def test_symlinks_are_not_followed(temp_directory):
    try:
        os.symlink(temp_directory / "src", temp_directory / "src_link")
        os.symlink(temp_directory / "README.md", temp_directory / "readme_link")
    except (OSError, NotImplementedError):
        pytest.skip("Symlinks not supported on this platform")

    walker = DirectoryWalker(temp_directory)
    entries = {entry.relative_path: entry for entry in walker.iterate_entries()}

    assert entries["src_link"].kind is EntryKind.SYMLINK
    assert entries["readme_link"].kind is EntryKind.SYMLINK
    assert not any(p.startswith("src_link/") for p in entries)
    assert "readme_link" not in relative_paths(walker.iterate_files())


def test_relative_root_path(temp_directory, monkeypatch):
    monkeypatch.chdir(temp_directory)
    files = relative_paths(DirectoryWalker(".").iterate_files())
    assert "src/main.py" in files


def test_relative_path_of():
    assert relative_path_of("/project/src/main.py", "/project") == "src/main.py"
    assert relative_path_of(Path("/project/a.txt"), Path("/project")) == "a.txt"


def test_relative_path_of_falls_back_to_full_path():
    assert relative_path_of("/elsewhere/main.py", "/project") == "/elsewhere/main.py"


def test_walk_order_is_deterministic(temp_directory):
    walker = DirectoryWalker(temp_directory)
    assert relative_paths(walker.iterate_entries()) == relative_paths(walker.iterate_entries())
