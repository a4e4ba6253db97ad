"""
Mutation run configuration.

All numeric defaults can be overridden through SPANMUT_* environment
variables.

Environment Variables:
    SPANMUT_LANGUAGE: Grammar to parse with (default: rust)
    SPANMUT_MAX_LINES: Files with this many lines or more are skipped (default: 500)
    SPANMUT_STALL_LIMIT: Draws without any accepted mutant before giving up (default: 100)
    SPANMUT_SEED: Seed for the random generator (default: unseeded)
"""

import os
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import Any, Dict, List, Optional

from spanmut.exceptions import ConfigError, InvalidModeError, MutationCountError
from spanmut.parser.config import validate_language
from spanmut.scanner.config import DEFAULT_MAX_LINES, validate_ignore_patterns, validate_max_lines

DEFAULT_LANGUAGE = "rust"
DEFAULT_STALL_LIMIT = 100


class MutationMode(IntEnum):
    DELETE_ONLY = 0
    SELF_SPLICE = 1
    SPLICE = 2
    SPLICE_RANDOM_KIND = 3

    @property
    def uses_shared_corpus(self) -> bool:
        return self in (MutationMode.SPLICE, MutationMode.SPLICE_RANDOM_KIND)

    @property
    def label(self) -> str:
        return MODE_LABELS[self]


MODE_LABELS = {
    MutationMode.DELETE_ONLY: "deletion only",
    MutationMode.SELF_SPLICE: "self splice",
    MutationMode.SPLICE: "all-file splice",
    MutationMode.SPLICE_RANDOM_KIND: "all-file splice with random kind",
}


def validate_mode(mode: Any) -> MutationMode:
    """
    Convert a raw selector into a MutationMode.

    Raises:
        InvalidModeError: If the selector is not 0, 1, 2 or 3.
    """
    if isinstance(mode, bool):
        raise InvalidModeError(mode)
    try:
        return MutationMode(mode)
    except ValueError as e:
        raise InvalidModeError(mode) from e


def validate_count(mode: MutationMode, count: int) -> int:
    """
    Raises:
        MutationCountError: If count is negative, or zero for a shared-corpus mode.
    """
    if not isinstance(count, int) or isinstance(count, bool):
        raise MutationCountError(count, f"Mutation count must be an integer, got {type(count).__name__}")
    if count < 0:
        raise MutationCountError(count, f"Mutation count must not be negative, got {count}")
    if count == 0 and mode.uses_shared_corpus:
        raise MutationCountError(
            count,
            f"Mode {int(mode)} ({mode.label}) needs a positive mutation count; "
            "generating every splice could produce too many files.",
        )
    return count


def _env_int(key: str, default: Optional[int]) -> Optional[int]:
    """Read integer from environment variable."""
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


@dataclass
class MutationSettings:
    """
    Everything a mutation run needs to know.
    """

    input_dir: Path
    output_dir: Path = field(default_factory=Path.cwd)
    mode: int = MutationMode.DELETE_ONLY
    count: int = 0
    language: str = field(default_factory=lambda: os.getenv("SPANMUT_LANGUAGE", DEFAULT_LANGUAGE))
    max_lines: int = field(default_factory=lambda: _env_int("SPANMUT_MAX_LINES", DEFAULT_MAX_LINES))
    stall_limit: int = field(default_factory=lambda: _env_int("SPANMUT_STALL_LIMIT", DEFAULT_STALL_LIMIT))
    seed: Optional[int] = field(default_factory=lambda: _env_int("SPANMUT_SEED", None))
    ignore_patterns: List[str] = field(default_factory=list)

    def validate(self) -> "MutationSettings":
        """
        Check every setting before any file is touched.

        Returns:
            self, with ``mode`` normalised to a MutationMode.

        Raises:
            ConfigError: (or a subclass) on the first invalid setting.
        """
        self.mode = validate_mode(self.mode)
        validate_count(self.mode, self.count)
        validate_language(self.language)
        validate_max_lines(self.max_lines)
        if self.stall_limit is None or self.stall_limit < 0:
            raise ConfigError(f"stall_limit must be zero or positive, got {self.stall_limit}")
        if self.ignore_patterns:
            validate_ignore_patterns(self.ignore_patterns)
        self.input_dir = Path(self.input_dir)
        self.output_dir = Path(self.output_dir)
        if not self.input_dir.is_dir():
            raise ConfigError(f"Input directory '{self.input_dir}' does not exist or is not a directory")
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Export configuration as dictionary (for JSON output)."""
        return {
            "input_dir": str(self.input_dir),
            "output_dir": str(self.output_dir),
            "mode": int(self.mode),
            "count": self.count,
            "language": self.language,
            "max_lines": self.max_lines,
            "stall_limit": self.stall_limit,
            "seed": self.seed,
            "ignore_patterns": list(self.ignore_patterns),
        }
