"""Configuration loading for dirbundle.

The configuration is a YAML mapping with three optional list-valued keys:

.. code-block:: yaml

    exclude_dirs:        # directory relative paths, exact match
      - node_modules
      - .git
    exclude_files:       # file relative paths, exact match
      - secrets.env
    exclude_patterns:    # glob patterns matched against whole relative paths
      - "*.log"

The camelCase spellings ``excludeDirs``, ``excludeFiles`` and ``excludePatterns``
are accepted as aliases. A missing configuration file yields empty lists; a present
but malformed one is a fatal error.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from dirbundle.exceptions import ConfigParseError, ConfigReadError
from dirbundle.types import PathType

DEFAULT_CONFIG_NAME = "config.yaml"

# Canonical key followed by its accepted alias
_LIST_KEYS = (
    ("exclude_dirs", "excludeDirs"),
    ("exclude_files", "excludeFiles"),
    ("exclude_patterns", "excludePatterns"),
)


@dataclass(frozen=True)
class Config:
    """The three exclusion lists that drive a bundling run.

    Attributes:
        exclude_dirs: Directory relative paths excluded by exact match. Files are
            additionally excluded when their relative path starts with ``"<dir>/"``.
        exclude_files: File relative paths excluded by exact match.
        exclude_patterns: Glob patterns matched against whole file relative paths.

    Example:
        >>> Config()
        Config(exclude_dirs=(), exclude_files=(), exclude_patterns=())
        >>> Config.from_mapping({"excludePatterns": ["*.log"]}).exclude_patterns
        ('*.log',)
    """

    exclude_dirs: Tuple[str, ...] = ()
    exclude_files: Tuple[str, ...] = ()
    exclude_patterns: Tuple[str, ...] = ()

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]], source: Optional[str] = None) -> "Config":
        """Build a Config from a deserialized YAML document.

        Args:
            data: The document. ``None`` (an empty file) yields the default Config.
            source: Path of the file the document came from, used in error messages.

        Returns:
            The parsed Config.

        Raises:
            ConfigParseError: If the document is not a mapping, or if a list key holds
                anything other than a list of strings.
        """
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ConfigParseError(source, f"top level must be a mapping, got {type(data).__name__}")

        values: Dict[str, Tuple[str, ...]] = {}
        for key, alias in _LIST_KEYS:
            if key in data:
                raw, name = data[key], key
            else:
                raw, name = data.get(alias), alias
            values[key] = _parse_string_list(raw, name, source)

        return cls(**values)


def _parse_string_list(raw: Any, name: str, source: Optional[str]) -> Tuple[str, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise ConfigParseError(source, f"{name} must be a list of strings, got {type(raw).__name__}")
    for index, item in enumerate(raw):
        if not isinstance(item, str):
            raise ConfigParseError(source, f"{name}[{index}] must be a string, got {type(item).__name__}")
    return tuple(raw)


def load_config(config_path: PathType) -> Config:
    """Load the exclusion configuration from a YAML file.

    When the file does not exist a notice is printed to stdout and the default
    (all-empty) Config is returned. Any problem with a file that does exist is fatal.

    Args:
        config_path: Path to the configuration file.

    Returns:
        The loaded Config.

    Raises:
        ConfigReadError: If the file exists but cannot be read as UTF-8 text.
        ConfigParseError: If the file is not valid YAML or has the wrong structure.

    Example:
        >>> load_config("/nonexistent/config.yaml")
        No config file found at /nonexistent/config.yaml, using defaults.
        Config(exclude_dirs=(), exclude_files=(), exclude_patterns=())
    """
    path = Path(config_path)
    if not path.exists():
        print(f"No config file found at {path}, using defaults.")
        return Config()

    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigReadError(str(path), e) from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigParseError(str(path), str(e)) from e

    return Config.from_mapping(data, source=str(path))
