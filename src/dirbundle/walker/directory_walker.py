"""Depth-first directory traversal with configurable exclusion rules.

This module provides the DirectoryWalker class, which enumerates every node under a
root directory in a deterministic order and consults an ExclusionRules predicate for
each one. Excluded directories are pruned: neither they nor anything beneath them is
yielded.
"""

import os
from pathlib import Path, PurePath
from typing import Iterator, Optional

from dirbundle.exclusion_rules import ExclusionRules
from dirbundle.types import EntryKind, PathType
from dirbundle.walker.traversal_entry import TraversalEntry


def relative_path_of(path: PathType, root: PathType) -> str:
    """Strip the root prefix from a path.

    Falls back to the full path when the path does not lie under the root.

    Args:
        path: The path to convert.
        root: The walk root.

    Returns:
        The relative path with ``/`` separators, or the full path as a fallback.

    Example:
        >>> relative_path_of("/project/src/main.py", "/project")
        'src/main.py'
        >>> relative_path_of("/elsewhere/main.py", "/project")
        '/elsewhere/main.py'
    """
    try:
        return PurePath(path).relative_to(root).as_posix()
    except ValueError:
        return PurePath(path).as_posix()


class DirectoryWalker:
    """Enumerates the entries of a directory tree, honoring exclusion rules.

    Entries are produced in pre-order depth-first order with the children of each
    directory sorted by name, so the order is fixed for a given filesystem state. The
    root itself is not yielded.

    Symbolic links are never followed: they are yielded with kind SYMLINK (subject to
    the file exclusion rules) and their targets are not visited.

    Traversal is best-effort. A directory that cannot be listed, or an entry whose type
    cannot be determined, is skipped silently and the walk continues.

    Attributes:
        root_path (Path): The directory being walked.
        exclusion_rules (Optional[ExclusionRules]): Rules for skipping entries.

    Example:
        >>> walker = DirectoryWalker("src")  # doctest: +SKIP
        >>> for entry in walker.iterate_files():  # doctest: +SKIP
        ...     print(entry.relative_path)
        main.py
        utils/helpers.py
    """

    def __init__(self, root_path: PathType, exclusion_rules: Optional[ExclusionRules] = None) -> None:
        """Initialize a DirectoryWalker.

        Args:
            root_path: Directory to walk. Can be any path-like object.
            exclusion_rules: Rules for skipping entries. Defaults to None (nothing skipped).

        Raises:
            FileNotFoundError: If the root path doesn't exist.
            NotADirectoryError: If the root path isn't a directory.
        """
        self.root_path = Path(root_path)
        if not self.root_path.exists():
            raise FileNotFoundError(f"Root path does not exist: {self.root_path}")
        if not self.root_path.is_dir():
            raise NotADirectoryError(f"Root path is not a directory: {self.root_path}")
        self.exclusion_rules = exclusion_rules

    def iterate_entries(self) -> Iterator[TraversalEntry]:
        """Yield every non-excluded entry under the root.

        Yields:
            TraversalEntry for each directory, file, symlink or other node that is not
            excluded, parents before their children.
        """
        yield from self._walk(self.root_path)

    def iterate_files(self) -> Iterator[TraversalEntry]:
        """Yield only the regular files among iterate_entries()."""
        for entry in self.iterate_entries():
            if entry.is_file:
                yield entry

    def _walk(self, directory: Path) -> Iterator[TraversalEntry]:
        try:
            with os.scandir(directory) as it:
                children = sorted(it, key=lambda d: d.name)
        except OSError:
            return

        for child in children:
            try:
                kind = _entry_kind(child)
            except OSError:
                continue

            path = directory / child.name
            entry = TraversalEntry(path, relative_path_of(path, self.root_path), kind)
            if self.exclusion_rules is not None and self.exclusion_rules.should_skip(entry):
                continue

            yield entry
            if kind is EntryKind.DIRECTORY:
                yield from self._walk(path)


def _entry_kind(dir_entry: "os.DirEntry[str]") -> EntryKind:
    if dir_entry.is_symlink():
        return EntryKind.SYMLINK
    if dir_entry.is_dir(follow_symlinks=False):
        return EntryKind.DIRECTORY
    if dir_entry.is_file(follow_symlinks=False):
        return EntryKind.FILE
    return EntryKind.OTHER
