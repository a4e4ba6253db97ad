import json
import typer
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from spanmut import __version__
from spanmut.corpus import build_corpus
from spanmut.exceptions import ConfigError, SpanmutError
from spanmut.logging_config import logger, setup_logging
from spanmut.mutation import MutationSettings, run_mutation
from spanmut.mutation.config import DEFAULT_LANGUAGE
from spanmut.parser import harvest_file
from spanmut.scanner.config import DEFAULT_MAX_LINES

app = typer.Typer(help="Syntax-aware source mutator for fuzzing corpora.")
console = Console()


@app.callback()
def global_options(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every mutation at DEBUG level"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress console logging"),
):
    """
    spanmut: delete or splice CST spans to build mutated source corpora.
    """
    if quiet:
        setup_logging(suppress_console=True, force=True)
    elif verbose:
        setup_logging(level="DEBUG", force=True)


def _fail(error: Exception, json_output: bool) -> None:
    exit_code = 2 if isinstance(error, ConfigError) else 1
    if json_output:
        payload = {"status": "error", "error": type(error).__name__, "message": str(error)}
        typer.echo(json.dumps(payload, separators=(",", ":")))
    else:
        console.print(f"[red]Error:[/red] {escape(str(error))}", highlight=False)
    raise typer.Exit(code=exit_code)


@app.command()
def mutate(
    input_dir: Path = typer.Option(..., "--input-dir", "-i", help="Directory of seed source files"),
    output_dir: Optional[Path] = typer.Option(
        None, "--output-dir", "-o", help="Where mutants are written. Defaults to the current directory."
    ),
    mode: int = typer.Option(
        ...,
        "--mode",
        "-m",
        help="0: deletion only, 1: self splice, 2: all-file splice, 3: all-file splice with random kind",
    ),
    count: int = typer.Option(
        0, "--count", "-c", help="Mutants per seed file. 0 generates every mutation (modes 0 and 1 only)."
    ),
    language: str = typer.Option(DEFAULT_LANGUAGE, "--language", "-l", help="Grammar to parse with"),
    max_lines: int = typer.Option(DEFAULT_MAX_LINES, "--max-lines", help="Skip files with this many lines or more"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for reproducible runs"),
    ignore: Optional[List[str]] = typer.Option(None, "--ignore", help="Gitignore-style pattern to skip (repeatable)"),
    no_progress: bool = typer.Option(False, "--no-progress", help="Hide the progress bar"),
    json_output: bool = typer.Option(False, "--json", help="Print the run summary as JSON"),
):
    """
    Generate mutated variants of every seed file in INPUT_DIR.
    """
    if output_dir is None:
        output_dir = Path.cwd()
        if not json_output:
            console.print(f"No output directory provided, using current directory: {output_dir}", markup=False, highlight=False)

    settings = MutationSettings(
        input_dir=input_dir,
        output_dir=output_dir,
        mode=mode,
        count=count,
        language=language,
        max_lines=max_lines,
        ignore_patterns=list(ignore or []),
    )
    if seed is not None:
        settings.seed = seed

    def report(source: Path, mutant) -> None:
        if not json_output:
            typer.echo(mutant.describe())

    try:
        summary = run_mutation(
            settings,
            progress=not (no_progress or json_output),
            on_mutant=report,
        )
    except SpanmutError as e:
        logger.error(str(e))
        _fail(e, json_output)

    if json_output:
        typer.echo(json.dumps(summary.to_dict(), separators=(",", ":")))
        return

    for file_report in summary.files:
        name = Path(file_report.path).name
        if file_report.skipped:
            typer.echo(f"Skipped {name}: {file_report.skip_reason}")
        else:
            typer.echo(f"Number of generated files of {name}: {file_report.mutant_count}")
    typer.echo(f"Total: {summary.total_mutants} mutants from {summary.processed_files} files")


@app.command()
def harvest(
    file: Path = typer.Argument(..., help="Source file to harvest", exists=True, dir_okay=False),
    language: Optional[str] = typer.Option(None, "--language", "-l", help="Grammar (default: from extension)"),
    json_output: bool = typer.Option(False, "--json", help="Output spans as JSON"),
):
    """
    List the spans a file would be mutated at.
    """
    try:
        harvested = harvest_file(file, language=language)
    except SpanmutError as e:
        _fail(e, json_output)

    if json_output:
        payload = [
            dict(span.model_dump(), text=harvested.text_of(span))
            for span in harvested.spans
        ]
        typer.echo(json.dumps(payload, separators=(",", ":")))
        return

    table = Table(title=f"Spans of {file.name}")
    table.add_column("#", justify="right")
    table.add_column("Location")
    table.add_column("Kind", style="cyan")
    table.add_column("Text")
    for position, span in enumerate(harvested.spans, start=1):
        text = harvested.text_of(span).replace("\n", "\\n")
        if len(text) > 60:
            text = text[:57] + "..."
        table.add_row(str(position), span.location(), Text(span.kind), Text(text))
    console.print(table, markup=False)
    typer.echo(f"{len(harvested.spans)} spans")


@app.command()
def corpus(
    directory: Path = typer.Argument(..., help="Directory to build the corpus from", exists=True, file_okay=False),
    language: str = typer.Option(DEFAULT_LANGUAGE, "--language", "-l", help="Grammar to parse with"),
    max_lines: int = typer.Option(DEFAULT_MAX_LINES, "--max-lines", help="Skip files with this many lines or more"),
    json_output: bool = typer.Option(False, "--json", help="Output the full corpus as JSON"),
):
    """
    Show how many distinct snippets each node kind contributes.
    """
    try:
        built = build_corpus(directory, language=language, max_lines=max_lines)
    except SpanmutError as e:
        _fail(e, json_output)

    if json_output:
        typer.echo(json.dumps(built.to_dict(), separators=(",", ":")))
        return

    table = Table(title=f"Corpus of {directory}")
    table.add_column("Kind", style="cyan")
    table.add_column("Snippets", justify="right")
    for kind in sorted(built, key=lambda k: len(built.candidates(k)), reverse=True):
        table.add_row(Text(kind), str(len(built.candidates(kind)) - 1))
    console.print(table, markup=False)
    typer.echo(f"{len(built)} kinds, {built.snippet_count()} snippets")


@app.command()
def version():
    """
    Prints the current version of spanmut.
    """
    typer.echo(f"spanmut v{__version__}")


if __name__ == "__main__":
    app()
