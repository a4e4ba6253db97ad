import os
from pathlib import Path
from typing import Iterator, List, Optional, Sequence

import pathspec

from spanmut.exceptions import SourceReadError
from spanmut.logging_config import logger
from .config import validate_extensions, validate_ignore_patterns


def iter_source_files(
    directory: Path,
    extensions: Sequence[str],
    ignore_patterns: Optional[List[str]] = None,
) -> Iterator[Path]:
    """
    Walk ``directory`` and yield every file whose suffix is in ``extensions``.

    Directories and files are visited in sorted order so that a seeded run
    touches files in the same sequence on every platform.

    Args:
        directory: The root directory to start from.
        extensions: File extensions to include (e.g., ['.rs']).
        ignore_patterns: Optional gitignore-style patterns to exclude.
    """
    validate_extensions(list(extensions))
    allowed_extensions = set(extensions)

    spec = None
    if ignore_patterns:
        validate_ignore_patterns(ignore_patterns)
        spec = pathspec.PathSpec.from_lines("gitwildmatch", ignore_patterns)
        logger.debug(f"Initialized scanner with {len(ignore_patterns)} ignore patterns.")

    for root, dirs, files in os.walk(directory):
        root_path = Path(root)

        # Prune ignored directories in place so os.walk never descends into them.
        kept = []
        for d in sorted(dirs):
            rel_dir = (root_path / d).relative_to(directory)
            if spec is not None and spec.match_file(f"{rel_dir.as_posix()}/"):
                logger.debug(f"Ignoring directory '{rel_dir}' due to ignore rules.")
            else:
                kept.append(d)
        dirs[:] = kept

        for file_name in sorted(files):
            file_path = root_path / file_name
            if file_path.suffix not in allowed_extensions:
                continue

            relative_path = file_path.relative_to(directory)
            if spec is not None and spec.match_file(relative_path.as_posix()):
                logger.debug(f"Ignoring '{relative_path}' due to ignore rules")
                continue

            yield file_path


def read_source(file_path: Path) -> str:
    """
    Read a source file as UTF-8 text. Line endings are kept as they are
    on disk so byte offsets match the file.

    Raises:
        SourceReadError: If the file cannot be read or is not valid UTF-8.
    """
    try:
        return Path(file_path).read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(str(file_path), str(e)) from e


def count_lines(text: str) -> int:
    return len(text.splitlines())


def is_within_line_limit(text: str, max_lines: int) -> bool:
    """A file is eligible only if it has strictly fewer than ``max_lines`` lines."""
    return count_lines(text) < max_lines
