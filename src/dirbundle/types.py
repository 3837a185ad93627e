from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class EntryKind(Enum):
    """Enumeration of entry kinds encountered during traversal.

    Only directories are descended into and only regular files are bundled;
    symlinks and other node types are reported but never followed or read.

    Attributes:
        FILE: Regular file
        DIRECTORY: Directory
        SYMLINK: Symbolic link (never followed)
        OTHER: Any other node type (FIFO, socket, device)
    """

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"
