"""
Mutation driver: walks the input directory and dispatches each file to a strategy.

Shared-corpus modes run in two passes. Pass 1 builds the corpus from every
eligible file, pass 2 mutates each file against the finished corpus, so
every file sees the same candidates.
"""
import random
import time
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from rich.progress import track

from spanmut.corpus import Corpus, build_corpus
from spanmut.logging_config import logger
from spanmut.parser import extensions_for, harvest
from spanmut.scanner import is_within_line_limit, iter_source_files, read_source
from spanmut.schemas import FileReport, HarvestedSource, Mutant, RunSummary
from spanmut.tracing import trace
from .config import DEFAULT_STALL_LIMIT, MutationMode, MutationSettings
from .strategies import mutate_delete_only, mutate_self_splice, mutate_splice, mutate_splice_random_kind
from .writer import ensure_output_dir, write_mutants

MutantCallback = Callable[[Path, Mutant], None]


def mutate_source(
    harvested: HarvestedSource,
    mode: MutationMode,
    count: int,
    rng: random.Random,
    corpus: Optional[Corpus] = None,
    stall_limit: int = DEFAULT_STALL_LIMIT,
) -> List[Mutant]:
    """
    Run the strategy selected by ``mode`` on one harvested source.

    Shared-corpus modes require ``corpus``.
    """
    if mode == MutationMode.DELETE_ONLY:
        return mutate_delete_only(harvested, count, rng)
    if mode == MutationMode.SELF_SPLICE:
        return mutate_self_splice(harvested, count, rng, stall_limit)

    if corpus is None:
        raise ValueError(f"Mode {int(mode)} ({mode.label}) needs a shared corpus")
    if mode == MutationMode.SPLICE:
        return mutate_splice(harvested, corpus, count, rng, stall_limit)
    return mutate_splice_random_kind(harvested, corpus, count, rng, stall_limit)


def _iterate(paths: List[Path], description: str, progress: bool) -> Iterable[Path]:
    if progress and paths:
        return track(paths, description=description)
    return paths


@trace
def run_mutation(
    settings: MutationSettings,
    rng: Optional[random.Random] = None,
    progress: bool = False,
    on_mutant: Optional[MutantCallback] = None,
) -> RunSummary:
    """
    Mutate every eligible file under ``settings.input_dir``.

    Args:
        settings: Run configuration; validated before any file is read.
        rng: Random generator to draw from. Defaults to one seeded with ``settings.seed``.
        progress: Show a progress bar over the files.
        on_mutant: Called with (source path, mutant) for each accepted mutant.

    Raises:
        ConfigError: On an invalid mode, count, language or directory.
        SourceReadError, ParserError, OutputWriteError: On the first I/O or parse failure.
    """
    settings.validate()
    mode = MutationMode(settings.mode)
    if rng is None:
        rng = random.Random(settings.seed)

    start_time = time.time()
    logger.info(
        f"Mutating '{settings.input_dir}' in mode {int(mode)} ({mode.label}), "
        f"count={settings.count or 'all'}, language={settings.language}"
    )
    ensure_output_dir(settings.output_dir)

    files = list(iter_source_files(settings.input_dir, extensions_for(settings.language), settings.ignore_patterns))

    corpus = None
    if mode.uses_shared_corpus:
        corpus = build_corpus(
            settings.input_dir,
            language=settings.language,
            max_lines=settings.max_lines,
            ignore_patterns=settings.ignore_patterns,
        )

    summary = RunSummary(
        mode=int(mode),
        count=settings.count,
        language=settings.language,
        output_dir=str(settings.output_dir),
        corpus_kinds=len(corpus) if corpus is not None else 0,
        corpus_snippets=corpus.snippet_count() if corpus is not None else 0,
    )

    for file_path in _iterate(files, "Mutating", progress):
        summary.files.append(_mutate_file(file_path, settings, mode, rng, corpus, on_mutant))

    summary.duration = time.time() - start_time
    logger.info(
        f"Generated {summary.total_mutants} mutants from {summary.processed_files} files "
        f"in {summary.duration:.2f}s"
    )
    return summary


def _mutate_file(
    file_path: Path,
    settings: MutationSettings,
    mode: MutationMode,
    rng: random.Random,
    corpus: Optional[Corpus],
    on_mutant: Optional[MutantCallback],
) -> FileReport:
    logger.info(f"filename : {file_path.name}")
    content = read_source(file_path)
    if not is_within_line_limit(content, settings.max_lines):
        logger.debug(f"Skipping '{file_path}': {settings.max_lines} lines or more")
        return FileReport(path=str(file_path), skipped=True, skip_reason=f"{settings.max_lines} lines or more")

    harvested = harvest(content, language=settings.language, path=str(file_path))
    mutants = mutate_source(harvested, mode, settings.count, rng, corpus, settings.stall_limit)

    if on_mutant is not None:
        for mutant in mutants:
            on_mutant(file_path, mutant)

    written = write_mutants(settings.output_dir, file_path, mutants)
    logger.info(f"Number of generated files of {file_path.name}: {len(mutants)}")
    return FileReport(
        path=str(file_path),
        span_count=len(harvested.spans),
        mutant_count=len(mutants),
        written=[str(p) for p in written],
    )
