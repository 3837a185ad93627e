"""Output stream for bundle artifacts.

This module provides a writing interface that owns the output file for the duration
of a run and guarantees it is flushed and closed on exit, whether the run succeeds or
aborts.
"""

import os
import types
from pathlib import Path
from typing import Optional, TextIO, Type

from dirbundle.types import PathType


class BundleWriter:
    """Exclusive writer for a bundle artifact.

    The file is created (or truncated) on construction and written as UTF-8 with no
    newline translation, so the artifact is byte-identical across platforms.

    Attributes:
        path: Path of the output artifact.

    Example:
        >>> with BundleWriter("bundle.txt") as writer:  # doctest: +SKIP
        ...     writer.write("--- START FILE: a.txt ---\\n")
    """

    def __init__(self, path: PathType):
        """Open the output artifact for writing.

        Args:
            path: Path of the artifact to create.

        Raises:
            TypeError: If path is not a str or PathLike.
            OSError: If the artifact cannot be created.
        """
        if not isinstance(path, (str, os.PathLike)):
            raise TypeError(f"Expected str or PathLike, got {type(path).__name__}")

        self.path = Path(path)
        self._closed = False
        self._file_obj: TextIO = self.path.open("w", encoding="utf-8", newline="")

    @property
    def closed(self) -> bool:
        return self._closed

    def write(self, data: str) -> None:
        """Append data to the artifact.

        Args:
            data: String data to write.

        Raises:
            OSError: If an I/O error occurs during writing.
            ValueError: If attempting to write to a closed writer.
        """
        if self._closed:
            raise ValueError("Cannot write to closed BundleWriter")
        self._file_obj.write(data)

    def close(self) -> None:
        """Flush and close the artifact.

        The writer is marked as closed even if the underlying close fails.
        """
        if self._closed:
            return

        try:
            self._file_obj.close()
        finally:
            self._closed = True

    def __enter__(self) -> "BundleWriter":
        """Enter the context manager.

        Returns:
            self: The BundleWriter instance for use in the with block.
        """
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        """Exit the context manager and close the artifact.

        If closing fails while an exception is already propagating from the with block,
        the original exception takes priority.
        """
        try:
            self.close()
        except OSError:
            if exc_type is None:
                raise
