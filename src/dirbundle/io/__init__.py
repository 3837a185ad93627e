"""Input and output helpers for reading source files and writing bundles."""
