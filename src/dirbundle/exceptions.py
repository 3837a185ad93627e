from typing import Optional


class ConfigError(Exception):
    """
    Base class for fatal configuration problems.

    Any ConfigError aborts the run before the directory is traversed and before the
    output artifact is created. The CLI reports it on stderr and exits with status 1.
    """

    pass


class ConfigReadError(ConfigError):
    """
    Exception raised when an existing configuration file cannot be read.

    Attributes:
        path (str): Path to the configuration file.
        cause (Exception): The underlying I/O or decoding error.

    Example:
        >>> error = ConfigReadError("config.yaml", PermissionError("Permission denied"))
        >>> str(error)
        'Failed to read config file config.yaml: Permission denied'
    """

    def __init__(self, path: str, cause: Exception) -> None:
        """
        Initialize the exception with the offending path and underlying cause.

        Args:
            path (str): Path to the configuration file.
            cause (Exception): The error raised while reading it.
        """
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to read config file {path}: {cause}")


class ConfigParseError(ConfigError):
    """
    Exception raised when a configuration file has invalid syntax or structure.

    Attributes:
        path (Optional[str]): Path to the configuration file, if known.
        detail (str): Description of what was wrong.

    Example:
        >>> error = ConfigParseError("config.yaml", "exclude_dirs must be a list of strings")
        >>> str(error)
        'Failed to parse config file config.yaml: exclude_dirs must be a list of strings'
        >>> str(ConfigParseError(None, "top level must be a mapping"))
        'Failed to parse config: top level must be a mapping'
    """

    def __init__(self, path: Optional[str], detail: str) -> None:
        self.path = path
        self.detail = detail
        if path is None:
            super().__init__(f"Failed to parse config: {detail}")
        else:
            super().__init__(f"Failed to parse config file {path}: {detail}")


class InvalidPatternError(ConfigError):
    """
    Exception raised when a configured exclusion pattern cannot be compiled.

    Attributes:
        pattern (str): The pattern that failed to compile.
        detail (str): Message from the pattern compiler.

    Example:
        >>> error = InvalidPatternError("foo\\\\", "trailing backslash")
        >>> error.pattern
        'foo\\\\'
        >>> str(error)
        'Invalid glob pattern: foo\\\\ (trailing backslash)'
    """

    def __init__(self, pattern: str, detail: str) -> None:
        self.pattern = pattern
        self.detail = detail
        super().__init__(f"Invalid glob pattern: {pattern} ({detail})")
