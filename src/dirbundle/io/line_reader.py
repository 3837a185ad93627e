"""Tools for line-oriented file reading with newline normalization."""

from typing import Iterator, TextIO

from dirbundle.types import PathType


class LineReader:
    """Iterator-based line reader that strips line terminators.

    Lines are split on ``\\n`` only. The trailing ``\\n`` and a single ``\\r``
    immediately before it are removed, so both LF and CRLF terminated lines come out
    bare. A lone ``\\r`` elsewhere in a line is kept as content.

    Args:
        file_obj: An opened text file object to read from. It must have been opened
            with ``newline="\\n"`` so that no newline translation happens before the
            reader sees the data. Decoding errors surface from the underlying file.

    Example:
        >>> import io
        >>> list(LineReader(io.StringIO("one\\r\\ntwo\\nthree", newline="\\n")))
        ['one', 'two', 'three']
    """

    def __init__(self, file_obj: TextIO) -> None:
        self._file: TextIO = file_obj

    def __iter__(self) -> Iterator[str]:
        """Return self as iterator."""
        return self

    def __next__(self) -> str:
        """Get the next line without its terminator.

        Raises:
            StopIteration: When the end of the file is reached.
            UnicodeError: If the file content cannot be decoded.
        """
        line: str = self._file.readline()
        if not line:
            raise StopIteration

        if line.endswith("\n"):
            line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
        return line


def read_normalized_text(path: PathType, encoding: str = "utf-8") -> str:
    """Read a text file and rebuild it with every line terminated by a single ``\\n``.

    The whole file is read before anything is returned, so a decoding failure part way
    through yields no partial content.

    Args:
        path: Path to the file.
        encoding: Encoding used to decode the file. Decoding is strict.

    Returns:
        The normalized content. An empty file yields an empty string.

    Raises:
        OSError: If the file cannot be opened or read.
        UnicodeDecodeError: If the file is not valid text in the given encoding.
    """
    with open(path, "r", encoding=encoding, errors="strict", newline="\n") as f:
        return "".join(f"{line}\n" for line in LineReader(f))
