"""Per-file bundling with best-effort error handling.

This module turns the files produced by a DirectoryWalker into delimited sections of
a bundle artifact. Each file is written as::

    --- START FILE: <relative-path> ---
    <content, one "\\n" per line>
    --- END FILE ---
    <blank line>

Failures are reported per file as FileResult values instead of exceptions, so one
unreadable file never stops the run.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, Iterator, List, Optional

from dirbundle.io.bundle_writer import BundleWriter
from dirbundle.io.line_reader import read_normalized_text
from dirbundle.types import PathType
from dirbundle.walker.directory_walker import DirectoryWalker
from dirbundle.walker.traversal_entry import TraversalEntry

END_MARKER = "--- END FILE ---\n\n"


def format_start_marker(relative_path: str) -> str:
    """Return the start marker line for a file.

    Filename bytes that are not valid UTF-8 are shown as U+FFFD, so the marker can
    always be written to the UTF-8 artifact.

    Example:
        >>> format_start_marker("src/main.py")
        '--- START FILE: src/main.py ---\\n'
    """
    label = os.fsencode(relative_path).decode("utf-8", "replace")
    return f"--- START FILE: {label} ---\n"


@dataclass(frozen=True)
class FileResult:
    """Outcome of bundling a single file.

    Attributes:
        path: Path to the file.
        relative_path: Path relative to the walk root, as written in the markers.
        error: The error that prevented the file from being bundled, if any.
    """

    path: Path
    relative_path: str
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class BundleReport:
    """Summary of a bundling run.

    Attributes:
        output_path: Path of the artifact that was written.
        results: One FileResult per file the run attempted, in traversal order.
    """

    output_path: Path
    results: List[FileResult] = field(default_factory=list)

    @property
    def written(self) -> List[FileResult]:
        return [r for r in self.results if r.ok]

    @property
    def failures(self) -> List[FileResult]:
        return [r for r in self.results if not r.ok]


class Bundler:
    """Writes the files of a walked directory into a bundle artifact.

    Files are processed in the walker's order. Each file is read completely before its
    section is written, so a file that cannot be opened or decoded leaves no trace in
    the artifact. A write failure part way through a section is not rolled back and may
    leave a start marker without its end marker.

    Attributes:
        walker (DirectoryWalker): Source of the files to bundle.

    Example:
        >>> walker = DirectoryWalker("src")  # doctest: +SKIP
        >>> with BundleWriter("bundle.txt") as writer:  # doctest: +SKIP
        ...     report = Bundler(walker).bundle(writer)
        >>> [r.relative_path for r in report.failures]  # doctest: +SKIP
        ['data/image.png']
    """

    def __init__(
        self,
        walker: DirectoryWalker,
        excluded_paths: Iterable[PathType] = (),
        encoding: str = "utf-8",
    ) -> None:
        """Initialize the Bundler.

        Args:
            walker: Walker producing the files to bundle.
            excluded_paths: Files that are never bundled even when the walker yields
                them, such as the output artifact itself. Compared after resolving.
            encoding: Encoding used to read files. Defaults to "utf-8".
        """
        self.walker = walker
        self.encoding = encoding
        self._excluded_paths = frozenset(Path(p).resolve() for p in excluded_paths)

    def iterate_results(self, writer: BundleWriter) -> Iterator[FileResult]:
        """Bundle each file in turn, yielding its result as soon as it is written.

        Args:
            writer: Destination for the bundle sections.

        Yields:
            FileResult for every file attempted.
        """
        for entry in self.walker.iterate_files():
            if self._excluded_paths and entry.path.resolve() in self._excluded_paths:
                continue
            yield self._process_file(entry, writer)

    def bundle(
        self, writer: BundleWriter, on_failure: Optional[Callable[[FileResult], None]] = None
    ) -> BundleReport:
        """Bundle every file and collect the results.

        Args:
            writer: Destination for the bundle sections.
            on_failure: Called with each failed FileResult as soon as it occurs.

        Returns:
            BundleReport listing every attempted file.
        """
        report = BundleReport(writer.path)
        for result in self.iterate_results(writer):
            report.results.append(result)
            if not result.ok and on_failure is not None:
                on_failure(result)
        return report

    def _process_file(self, entry: TraversalEntry, writer: BundleWriter) -> FileResult:
        try:
            content = read_normalized_text(entry.path, encoding=self.encoding)
            writer.write(format_start_marker(entry.relative_path))
            writer.write(content)
            writer.write(END_MARKER)
        except (OSError, UnicodeError) as e:
            return FileResult(entry.path, entry.relative_path, error=e)
        return FileResult(entry.path, entry.relative_path)
