"""Exclusion rules combining directory, file and pattern filters.

This module provides the ExclusionRules class, the single predicate consulted for
every traversal entry. Three independent filters are combined with OR semantics,
and directories and files are checked differently:

- A directory is excluded only when its relative path exactly equals an entry of
  ``exclude_dirs``. Excluded directories are pruned by the walker.
- A file is excluded when its relative path starts with ``"<dir>/"`` for any entry
  of ``exclude_dirs``, exactly equals an entry of ``exclude_files``, or matches any
  of ``exclude_patterns``.

The prefix check on files is applied independently of directory pruning, so a file
can be excluded by a ``exclude_dirs`` entry other than the one naming its parent.
"""

import re
from typing import List, Sequence

from pathspec import PathSpec

from dirbundle.config import Config
from dirbundle.exceptions import InvalidPatternError
from dirbundle.glob_pattern import GlobPattern, GlobPatternError
from dirbundle.types import EntryKind
from dirbundle.walker.traversal_entry import TraversalEntry


class ExclusionRules:
    """Read-only skip predicate built once from a Config.

    Patterns are globs (see dirbundle.glob_pattern) matched against the whole relative
    path, with ``/`` separators. ``*`` matches across ``/``, so ``*.log`` excludes
    ``logs/app.log`` and ``src/*.py`` excludes ``src/pkg/main.py``. A pattern without
    wildcards matches only the identical path.

    Attributes:
        exclude_dirs (tuple): Directory relative paths, matched exactly.
        exclude_files (tuple): File relative paths, matched exactly.
        spec (PathSpec): Compiled matcher for all configured patterns.

    Example:
        >>> rules = ExclusionRules(["node_modules"], ["secret.txt"], ["*.log"])
        >>> rules.exclude_directory("node_modules")
        True
        >>> rules.exclude_directory("src/node_modules")
        False
        >>> rules.exclude_file("node_modules/pkg/index.js")
        True
        >>> rules.exclude_file("logs/app.log")
        True
        >>> rules.exclude_file("src/index.js")
        False
    """

    def __init__(
        self,
        exclude_dirs: Sequence[str] = (),
        exclude_files: Sequence[str] = (),
        exclude_patterns: Sequence[str] = (),
    ) -> None:
        """Compile the exclusion rules.

        Args:
            exclude_dirs: Directory relative paths excluded by exact match.
            exclude_files: File relative paths excluded by exact match.
            exclude_patterns: Glob patterns excluding matching files.

        Raises:
            InvalidPatternError: If any pattern fails to compile. The error names the
                first offending pattern.
        """
        self.exclude_dirs = tuple(exclude_dirs)
        self.exclude_files = tuple(exclude_files)
        self._dir_prefixes = tuple(f"{d}/" for d in self.exclude_dirs)

        patterns: List[GlobPattern] = []
        for pattern in exclude_patterns:
            try:
                patterns.append(GlobPattern(pattern))
            except (GlobPatternError, re.error) as e:
                raise InvalidPatternError(pattern, str(e)) from e
        self.spec = PathSpec(patterns)

    @classmethod
    def from_config(cls, config: Config) -> "ExclusionRules":
        """Build the predicate from a loaded Config.

        Raises:
            InvalidPatternError: If any configured pattern fails to compile.
        """
        return cls(config.exclude_dirs, config.exclude_files, config.exclude_patterns)

    def exclude_directory(self, relative_path: str) -> bool:
        """Check whether a directory is excluded (exact match against exclude_dirs)."""
        return relative_path in self.exclude_dirs

    def exclude_file(self, relative_path: str) -> bool:
        """Check whether a non-directory entry is excluded.

        Args:
            relative_path: Path relative to the walk root, with ``/`` separators.

        Returns:
            True if the path lies under an excluded directory, equals an excluded
            file, or matches any exclusion pattern.
        """
        return (
            relative_path.startswith(self._dir_prefixes)
            or relative_path in self.exclude_files
            or self.spec.match_file(relative_path)
        )

    def should_skip(self, entry: TraversalEntry) -> bool:
        """Decide whether a traversal entry is skipped.

        Directories are checked with exclude_directory(); every other kind of entry
        is checked with exclude_file().
        """
        if entry.kind is EntryKind.DIRECTORY:
            return self.exclude_directory(entry.relative_path)
        return self.exclude_file(entry.relative_path)
