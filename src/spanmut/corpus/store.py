"""
Corpus: deduplicated replacement snippets grouped by node kind.
"""
from typing import Dict, Iterable, Iterator, List, Mapping, Set

from spanmut.schemas import HarvestedSource


class Corpus:
    """
    Mapping of node kind to the distinct snippets observed for that kind.

    Every kind's candidate list starts with the empty string, the implicit
    deletion candidate. Insertion order is kept so that exhaustive passes
    and seeded draws are reproducible.
    """

    def __init__(self):
        self._candidates: Dict[str, List[str]] = {}
        self._seen: Dict[str, Set[str]] = {}

    @classmethod
    def from_source(cls, harvested: HarvestedSource) -> "Corpus":
        """Build the per-file corpus of a single harvested source."""
        corpus = cls()
        corpus.add_source(harvested)
        return corpus

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Iterable[str]]) -> "Corpus":
        """Build a corpus from plain ``{kind: [snippet, ...]}`` data."""
        corpus = cls()
        for kind, snippets in mapping.items():
            corpus._ensure_kind(kind)
            for snippet in snippets:
                corpus.add(kind, snippet)
        return corpus

    def _ensure_kind(self, kind: str) -> None:
        if kind not in self._candidates:
            self._candidates[kind] = [""]
            self._seen[kind] = {""}

    def add(self, kind: str, snippet: str) -> bool:
        """
        Add ``snippet`` under ``kind`` unless an identical one is present.

        Returns:
            True if the snippet was new.
        """
        self._ensure_kind(kind)
        if snippet in self._seen[kind]:
            return False
        self._seen[kind].add(snippet)
        self._candidates[kind].append(snippet)
        return True

    def add_source(self, harvested: HarvestedSource) -> int:
        """Add the text of every span of ``harvested``. Returns the number of new snippets."""
        added = 0
        for span in harvested.spans:
            if self.add(span.kind, harvested.text_of(span)):
                added += 1
        return added

    def candidates(self, kind: str) -> List[str]:
        return self._candidates.get(kind, [])

    def kinds(self) -> List[str]:
        return list(self._candidates.keys())

    def snippet_count(self) -> int:
        """Number of non-empty snippets across all kinds."""
        return sum(len(c) - 1 for c in self._candidates.values())

    def to_dict(self) -> Dict[str, List[str]]:
        return {kind: list(snippets) for kind, snippets in self._candidates.items()}

    def __contains__(self, kind: object) -> bool:
        return kind in self._candidates

    def __iter__(self) -> Iterator[str]:
        return iter(self._candidates)

    def __len__(self) -> int:
        return len(self._candidates)

    def __repr__(self) -> str:
        return f"Corpus(kinds={len(self)}, snippets={self.snippet_count()})"
