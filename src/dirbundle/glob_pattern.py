"""Glob patterns for pathspec.

This module implements a pathspec pattern type that matches whole relative paths with
shell-style globs rather than .gitignore rules. The dialect:

- ``*`` and ``?`` match any characters, including ``/``
- ``**/`` at the start of a path component matches zero or more leading directories,
  so ``**/x`` matches both ``x`` and ``a/b/x``
- ``[abc]``, ``[a-z]``, ``[!abc]`` and ``[^abc]`` are character classes
- ``{a,b}`` matches either alternative (groups cannot be nested)
- ``\\`` escapes the next character
- every other character, including ``#`` and ``!``, is literal

A pattern must match the entire path: ``build`` matches the file ``build`` but not
``build/x.txt``.
"""

import re
from typing import List, Tuple

from pathspec.pattern import RegexPattern


class GlobPatternError(ValueError):
    """Raised when a glob pattern has invalid syntax."""

    pass


class GlobPattern(RegexPattern):
    """A pathspec pattern compiled from a glob.

    Example:
        >>> from pathspec import PathSpec
        >>> spec = PathSpec([GlobPattern("*.{log,tmp}"), GlobPattern("src/*.py")])
        >>> spec.match_file("logs/a.tmp")
        True
        >>> spec.match_file("src/pkg/main.py")
        True
        >>> spec.match_file("main.py")
        False
    """

    __slots__ = ()

    @classmethod
    def pattern_to_regex(cls, pattern: str) -> Tuple[str, bool]:
        """Convert a glob into a regular expression.

        Args:
            pattern: The glob to convert.

        Returns:
            The uncompiled regular expression and ``True`` (every glob is an inclusion
            pattern in pathspec's terms).

        Raises:
            GlobPatternError: If the glob has invalid syntax.
        """
        return glob_to_regex(pattern), True


def glob_to_regex(pattern: str) -> str:
    """Translate a glob into an anchored regular expression.

    Raises:
        GlobPatternError: For a dangling escape, an unclosed character class, an
            inverted range, or unbalanced or nested ``{}`` groups.

    Example:
        >>> glob_to_regex("*.log")
        '(?s)^.*\\\\.log\\\\Z'
    """
    out: List[str] = []
    in_group = False
    i, n = 0, len(pattern)

    while i < n:
        c = pattern[i]
        if c == "\\":
            if i + 1 == n:
                raise GlobPatternError("dangling '\\'")
            out.append(re.escape(pattern[i + 1]))
            i += 2
        elif c == "*":
            start = i
            while i < n and pattern[i] == "*":
                i += 1
            at_component_start = start == 0 or pattern[start - 1] == "/"
            if i - start >= 2 and at_component_start and i < n and pattern[i] == "/":
                out.append("(?:.*/)?")
                i += 1
            else:
                out.append(".*")
        elif c == "?":
            out.append(".")
            i += 1
        elif c == "[":
            regex, i = _translate_class(pattern, i)
            out.append(regex)
        elif c == "{":
            if in_group:
                raise GlobPatternError("nested alternate groups are not allowed")
            in_group = True
            out.append("(?:")
            i += 1
        elif c == "}":
            if not in_group:
                raise GlobPatternError("unopened alternate group")
            in_group = False
            out.append(")")
            i += 1
        elif c == "," and in_group:
            out.append("|")
            i += 1
        else:
            out.append(re.escape(c))
            i += 1

    if in_group:
        raise GlobPatternError("unclosed alternate group")

    return "(?s)^" + "".join(out) + "\\Z"


def _translate_class(pattern: str, start: int) -> Tuple[str, int]:
    """Translate the character class opening at ``start``.

    Returns the regex for the class and the index just past its closing ``]``.
    """
    i = start + 1
    n = len(pattern)
    negate = i < n and pattern[i] in "!^"
    if negate:
        i += 1

    members: List[str] = []
    first = True
    while i < n and (first or pattern[i] != "]"):
        first = False
        low = pattern[i]
        if i + 2 < n and pattern[i + 1] == "-" and pattern[i + 2] != "]":
            high = pattern[i + 2]
            if low > high:
                raise GlobPatternError(f"invalid range {low}-{high}")
            members.append(f"{re.escape(low)}-{re.escape(high)}")
            i += 3
        else:
            members.append(re.escape(low))
            i += 1

    if i >= n:
        raise GlobPatternError("unclosed character class")

    return "[" + ("^" if negate else "") + "".join(members) + "]", i + 1
