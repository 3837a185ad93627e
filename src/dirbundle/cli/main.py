"""Command-line interface for dirbundle.

This module provides the command-line entry point. It parses arguments, runs the
bundling pipeline and maps failures to messages and exit codes.

Output Channels:
    - stdout: informational notices (missing configuration file, bundle location)
    - stderr: per-file warnings and fatal errors

Exit Codes:
    0: Bundle written (individual files may still have failed with a warning)
    1: Fatal error (invalid directory, bad configuration, unwritable output)
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)

Example:
    # Bundle the current directory using ./config.yaml into ./bundle.txt
    $ dirbundle

    # Explicit directory, output and configuration
    $ dirbundle /path/to/project bundle.txt config.yaml
"""

import sys

from dirbundle.bundler import FileResult
from dirbundle.cli.argparser import create_parser, validate_args
from dirbundle.dirbundle import create_bundle


def report_failure(result: FileResult) -> None:
    """Print a warning for a file that could not be bundled."""
    print(f"Warning: Failed to process {result.path}: {result.error}", file=sys.stderr)


def main() -> None:
    """Main entry point for the dirbundle command-line interface.

    Exit codes:
        0: Successful completion
        1: Fatal error during execution
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
    """
    parser = create_parser()
    # argparse calls sys.exit(2) for argument errors or sys.exit(0) for --version
    args = parser.parse_args()

    try:
        validate_args(args)
        create_bundle(args.directory, args.output, args.config, on_failure=report_failure)
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    print(f"Bundle created at: {args.output}")


if __name__ == "__main__":
    main()
