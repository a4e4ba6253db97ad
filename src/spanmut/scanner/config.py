from typing import List
from spanmut.exceptions import ConfigError

# Files with this many lines or more are too large to mutate
DEFAULT_MAX_LINES = 500


def validate_ignore_patterns(patterns: List[str]) -> None:
    """
    Validate gitignore-style ignore patterns.

    Raises:
        ConfigError: If patterns are invalid or malformed.
    """
    if not isinstance(patterns, list):
        raise ConfigError("Ignore patterns must be a list of strings")

    for pattern in patterns:
        if not isinstance(pattern, str):
            raise ConfigError(f"Invalid ignore pattern: {pattern} (must be a string)")
        if not pattern.strip():
            raise ConfigError("Ignore patterns cannot be empty or whitespace-only")


def validate_extensions(extensions: List[str]) -> None:
    """
    Validate file extension filters.

    Args:
        extensions: List of file extensions (e.g., ['.rs'])

    Raises:
        ConfigError: If extensions are invalid.
    """
    if not extensions:
        raise ConfigError("At least one file extension is required")

    for ext in extensions:
        if not isinstance(ext, str):
            raise ConfigError(f"Invalid extension: {ext} (must be a string)")
        if not ext.startswith('.'):
            raise ConfigError(f"Extension '{ext}' must start with a dot (e.g., '.rs')")
        if len(ext) < 2:
            raise ConfigError(f"Extension '{ext}' is too short (minimum: 2 characters)")


def validate_max_lines(max_lines: int) -> None:
    """
    Raises:
        ConfigError: If max_lines is not a positive integer.
    """
    if not isinstance(max_lines, int) or isinstance(max_lines, bool):
        raise ConfigError(f"max_lines must be an integer, got {type(max_lines).__name__}")
    if max_lines <= 0:
        raise ConfigError(f"max_lines must be positive, got {max_lines}")
