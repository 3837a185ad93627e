"""Traversal entry value type."""

from dataclasses import dataclass
from pathlib import Path

from dirbundle.types import EntryKind


@dataclass(frozen=True)
class TraversalEntry:
    """A filesystem node visited during a walk.

    Attributes:
        path: Path to the node (the walk root joined with the node's relative path).
        relative_path: Path relative to the walk root, with ``/`` separators.
        kind: What kind of node this is.

    Example:
        >>> entry = TraversalEntry(Path("/project/src/main.py"), "src/main.py", EntryKind.FILE)
        >>> entry.is_file
        True
        >>> entry.name
        'main.py'
    """

    path: Path
    relative_path: str
    kind: EntryKind

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def is_file(self) -> bool:
        return self.kind is EntryKind.FILE
