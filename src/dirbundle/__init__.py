"""Directory bundling utilities.

This package provides tools for concatenating the text files of a directory
tree into a single delimited bundle, filtered by exclusion rules loaded from
a YAML configuration file.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("dirbundle")
except PackageNotFoundError:
    __version__ = "unknown"
