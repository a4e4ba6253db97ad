from pathlib import Path
from typing import List, Sequence

from spanmut.exceptions import OutputWriteError
from spanmut.logging_config import logger
from spanmut.schemas import Mutant


def mutant_file_name(source_name: str, index: int) -> str:
    """
    Name of the ``index``-th (1-based) mutant of ``source_name``.

    The original file name keeps its extension, and the extension is
    repeated so the mutant is still recognised as the same language:
    ``lib.rs`` -> ``mut_lib.rs_3.rs``.
    """
    if index < 1:
        raise ValueError(f"Mutant index is 1-based, got {index}")
    suffix = Path(source_name).suffix
    return f"mut_{source_name}_{index}{suffix}"


def ensure_output_dir(output_dir: Path) -> Path:
    """
    Create ``output_dir`` (and parents) if it does not exist yet.

    Raises:
        OutputWriteError: If the directory cannot be created.
    """
    output_dir = Path(output_dir)
    if not output_dir.exists():
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputWriteError(str(output_dir), str(e)) from e
        logger.info(f"Created output directory: {output_dir}")
    return output_dir


def write_mutants(output_dir: Path, source_path: Path, mutants: Sequence[Mutant]) -> List[Path]:
    """
    Write each mutant of ``source_path`` into ``output_dir``.

    Mutants are numbered by their position in ``mutants`` starting at 1.
    Existing files with the same name are overwritten.

    Raises:
        OutputWriteError: If a mutant cannot be written.
    """
    if not mutants:
        return []

    output_dir = ensure_output_dir(output_dir)
    source_name = Path(source_path).name
    written: List[Path] = []

    for position, mutant in enumerate(mutants, start=1):
        target = output_dir / mutant_file_name(source_name, position)
        try:
            target.write_bytes(mutant.text.encode("utf-8"))
        except OSError as e:
            raise OutputWriteError(str(target), str(e)) from e
        written.append(target)

    logger.debug(f"Wrote {len(written)} mutants of '{source_name}' to '{output_dir}'")
    return written
