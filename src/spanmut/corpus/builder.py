from pathlib import Path
from typing import List, Optional

from spanmut.logging_config import logger
from spanmut.parser import extensions_for, harvest
from spanmut.scanner import is_within_line_limit, iter_source_files, read_source
from spanmut.scanner.config import DEFAULT_MAX_LINES, validate_max_lines
from spanmut.tracing import trace
from .store import Corpus


@trace
def build_corpus(
    directory: Path,
    language: str = "rust",
    max_lines: int = DEFAULT_MAX_LINES,
    ignore_patterns: Optional[List[str]] = None,
) -> Corpus:
    """
    Aggregate span text across every eligible file under ``directory``.

    Files with ``max_lines`` lines or more are skipped entirely. Each file
    is harvested against its own buffer, so offsets never leak between files.

    Raises:
        SourceReadError: If an eligible file cannot be read.
        ParserError: If an eligible file cannot be parsed.
    """
    validate_max_lines(max_lines)
    directory = Path(directory)
    logger.info(f"Building {language} corpus from '{directory}'")

    corpus = Corpus()
    files_used = 0
    for file_path in iter_source_files(directory, extensions_for(language), ignore_patterns):
        content = read_source(file_path)
        if not is_within_line_limit(content, max_lines):
            logger.debug(f"Skipping '{file_path}' for corpus: {max_lines} lines or more")
            continue

        harvested = harvest(content, language=language, path=str(file_path))
        added = corpus.add_source(harvested)
        files_used += 1
        logger.debug(f"Added {added} new snippets from '{file_path}'")

    logger.info(
        f"Corpus built from {files_used} files: {len(corpus)} kinds, {corpus.snippet_count()} snippets"
    )
    return corpus
