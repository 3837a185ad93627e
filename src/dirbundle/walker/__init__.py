"""Directory traversal with exclusion-based pruning.

This package provides the TraversalEntry value type and the DirectoryWalker that
enumerates the entries of a directory tree in a deterministic order, pruning
excluded directories.
"""
