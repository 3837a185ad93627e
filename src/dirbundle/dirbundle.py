"""Directory bundling pipeline.

This module wires the pieces together: the configuration is loaded, compiled into
exclusion rules, and used to walk the root directory while the surviving files are
written to the output artifact. Every fatal condition is detected before the output
artifact is created.
"""

from pathlib import Path
from typing import Callable, Optional

from dirbundle.bundler import BundleReport, Bundler, FileResult
from dirbundle.config import DEFAULT_CONFIG_NAME, Config, load_config
from dirbundle.exclusion_rules import ExclusionRules
from dirbundle.io.bundle_writer import BundleWriter
from dirbundle.types import PathType
from dirbundle.walker.directory_walker import DirectoryWalker

DEFAULT_OUTPUT_NAME = "bundle.txt"


class DirBundle:
    """A configured bundling run over one directory.

    Construction performs all validation that can abort the run: the root is checked,
    the configuration is loaded and the exclusion patterns are compiled. Nothing is
    written until write() is called.

    Attributes:
        directory (Path): Directory being bundled.
        config (Config): The loaded configuration.
        exclusion_rules (ExclusionRules): Rules compiled from the configuration.

    Example:
        >>> bundle = DirBundle("project", config_path="project/config.yaml")  # doctest: +SKIP
        >>> report = bundle.write("bundle.txt")  # doctest: +SKIP
        >>> len(report.written)  # doctest: +SKIP
        12
    """

    def __init__(
        self,
        directory: PathType,
        *,
        config_path: PathType = DEFAULT_CONFIG_NAME,
        config: Optional[Config] = None,
    ) -> None:
        """Validate the root and prepare the exclusion rules.

        Args:
            directory: Directory to bundle.
            config_path: YAML configuration file. A missing file means no exclusions.
                Ignored when config is given.
            config: A Config to use directly instead of loading one.

        Raises:
            FileNotFoundError: If the directory doesn't exist.
            NotADirectoryError: If the directory isn't a directory.
            ConfigError: If the configuration cannot be read, parsed or compiled.
        """
        self.directory = Path(directory)
        if not self.directory.exists():
            raise FileNotFoundError(f"Input path must be an existing directory: {self.directory}")
        if not self.directory.is_dir():
            raise NotADirectoryError(f"Input path must be an existing directory: {self.directory}")

        if config is None:
            config = load_config(config_path)
        self.config = config
        self.exclusion_rules = ExclusionRules.from_config(config)
        self._walker = DirectoryWalker(self.directory, self.exclusion_rules)

    def write(
        self, output_path: PathType, on_failure: Optional[Callable[[FileResult], None]] = None
    ) -> BundleReport:
        """Write the bundle artifact.

        The output artifact itself is never bundled, even when it lies inside the
        directory being walked.

        Args:
            output_path: Path of the artifact to create.
            on_failure: Called with each file that could not be bundled.

        Returns:
            BundleReport describing every attempted file.

        Raises:
            OSError: If the output artifact cannot be created.
        """
        with BundleWriter(output_path) as writer:
            bundler = Bundler(self._walker, excluded_paths=[output_path])
            return bundler.bundle(writer, on_failure=on_failure)


def create_bundle(
    directory: PathType,
    output_path: PathType = DEFAULT_OUTPUT_NAME,
    config_path: PathType = DEFAULT_CONFIG_NAME,
    on_failure: Optional[Callable[[FileResult], None]] = None,
) -> BundleReport:
    """Bundle a directory in one call.

    Args:
        directory: Directory to bundle.
        output_path: Path of the artifact to create.
        config_path: YAML configuration file.
        on_failure: Called with each file that could not be bundled.

    Returns:
        BundleReport describing every attempted file.

    Raises:
        FileNotFoundError: If the directory doesn't exist.
        NotADirectoryError: If the directory isn't a directory.
        ConfigError: If the configuration cannot be read, parsed or compiled.
        OSError: If the output artifact cannot be created.
    """
    return DirBundle(directory, config_path=config_path).write(output_path, on_failure=on_failure)
