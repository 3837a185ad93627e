"""Command-line argument parsing for dirbundle.

This module defines the command-line interface for dirbundle,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path

from dirbundle import __version__
from dirbundle.config import DEFAULT_CONFIG_NAME
from dirbundle.dirbundle import DEFAULT_OUTPUT_NAME


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with dirbundle's options.
    """
    description = """
    dirbundle: concatenate the text files of a directory tree into a single bundle.

    Every file that is not excluded is written to the output between a start marker
    carrying its path relative to the input directory and an end marker:

      --- START FILE: src/main.py ---
      <file content>
      --- END FILE ---

    Exclusions are read from a YAML configuration file with three optional lists:

      exclude_dirs:      directory relative paths (exact match; contents excluded too)
      exclude_files:     file relative paths (exact match)
      exclude_patterns:  glob patterns matched against whole file relative paths

    If the configuration file does not exist, nothing is excluded.
    """

    epilog = f"""
    Examples:
      # Bundle the current directory into {DEFAULT_OUTPUT_NAME} using ./{DEFAULT_CONFIG_NAME}
      dirbundle

      # Bundle a project with explicit output and configuration paths
      dirbundle /path/to/project bundle.txt /path/to/config.yaml

      # Display version information and exit
      dirbundle -V
      dirbundle --version
    """

    parser = argparse.ArgumentParser(
        prog="dirbundle",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # Version information
    parser.add_argument(
        "-V", "--version", action="version", version=f"dirbundle {__version__}", help="Show the version and exit"
    )

    parser.add_argument(
        "directory",
        type=Path,
        nargs="?",
        default=Path("."),
        help="The directory to bundle. Paths in the output are relative to it (default: current directory).",
    )
    parser.add_argument(
        "output",
        type=Path,
        nargs="?",
        default=Path(DEFAULT_OUTPUT_NAME),
        help=f"Path of the bundle to write (default: {DEFAULT_OUTPUT_NAME}).",
    )
    parser.add_argument(
        "config",
        type=Path,
        nargs="?",
        default=Path(DEFAULT_CONFIG_NAME),
        help=f"Path of the YAML configuration file (default: {DEFAULT_CONFIG_NAME}).",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.output.exists() and args.output.is_dir():
        raise ValueError(f"Output path is a directory: {args.output}")
