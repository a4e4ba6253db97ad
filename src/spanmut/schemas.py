from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional, Tuple, Any

from spanmut.exceptions import SpanOwnershipError

Point = Tuple[int, int]


def format_point(point: Point) -> str:
    return f"({point[0]}, {point[1]})"


class SpanRecord(BaseModel):
    """
    A single CST node harvested from one source buffer.

    Offsets are byte offsets into the UTF-8 encoding of the buffer the
    record was harvested from. Points are (row, column) pairs used only
    for diagnostics.
    """
    model_config = ConfigDict(frozen=True)

    kind: str
    start_byte: int
    end_byte: int
    start_point: Point
    end_point: Point

    @property
    def length(self) -> int:
        return self.end_byte - self.start_byte

    def location(self) -> str:
        return f"{format_point(self.start_point)}-{format_point(self.end_point)}"


class HarvestedSource(BaseModel):
    """
    A source buffer together with the spans harvested from it.

    Spans only make sense against the buffer that produced them, so all
    slicing and substitution goes through this pair.
    """
    model_config = ConfigDict(frozen=True)

    source: bytes
    spans: List[SpanRecord] = Field(default_factory=list)
    path: Optional[str] = None
    language: str = "rust"

    @property
    def text(self) -> str:
        return self.source.decode("utf-8")

    def _check(self, span: SpanRecord) -> None:
        if not 0 <= span.start_byte <= span.end_byte <= len(self.source):
            raise SpanOwnershipError(
                f"Span {span.kind} [{span.start_byte}, {span.end_byte}) does not fit "
                f"source {self.path or '<memory>'} ({len(self.source)} bytes)"
            )

    def text_of(self, span: SpanRecord) -> str:
        """Return the exact original text covered by ``span``."""
        self._check(span)
        return self.source[span.start_byte:span.end_byte].decode("utf-8")

    def substitute(self, span: SpanRecord, replacement: str) -> str:
        """Replace the text covered by ``span`` and leave every other byte untouched."""
        self._check(span)
        mutated = self.source[:span.start_byte] + replacement.encode("utf-8") + self.source[span.end_byte:]
        return mutated.decode("utf-8")


class Mutant(BaseModel):
    """
    One accepted mutation of a source file.
    """
    index: int
    span: SpanRecord
    original: str
    replacement: str
    replacement_kind: str
    text: str

    def describe(self) -> str:
        """Diagnostic line: ``[index] start-end kind: original -> replacement``."""
        line = f"[{self.index}] {self.span.location()} {self.span.kind}: {self.original} -> {self.replacement}"
        if self.replacement_kind != self.span.kind:
            line += f" (from {self.replacement_kind})"
        return line


class FileReport(BaseModel):
    """
    Outcome of the mutation pass for one source file.
    """
    path: str
    span_count: int = 0
    mutant_count: int = 0
    written: List[str] = Field(default_factory=list)
    skipped: bool = False
    skip_reason: Optional[str] = None


class RunSummary(BaseModel):
    """
    Summary of a whole mutation run.
    """
    mode: int
    count: int
    language: str
    output_dir: str
    files: List[FileReport] = Field(default_factory=list)
    corpus_kinds: int = 0
    corpus_snippets: int = 0
    duration: float = 0.0

    @property
    def total_mutants(self) -> int:
        return sum(f.mutant_count for f in self.files)

    @property
    def processed_files(self) -> int:
        return sum(1 for f in self.files if not f.skipped)

    def to_dict(self) -> Dict[str, Any]:
        payload = self.model_dump()
        payload["total_mutants"] = self.total_mutants
        payload["processed_files"] = self.processed_files
        return payload
