"""
Mutation strategies.

Each strategy takes a HarvestedSource (a buffer and the spans harvested
from it), draws from an explicitly passed ``random.Random`` and returns
the accepted mutants in the order they were produced.

Bounded random strategies draw with replacement until ``count`` mutants
are accepted. If more than ``stall_limit`` draws pass without a single
accepted mutant, the pass gives up and returns nothing.
"""
import random
from typing import Callable, List, Optional, Tuple

from spanmut.corpus import Corpus
from spanmut.exceptions import MutationCountError
from spanmut.logging_config import logger
from spanmut.schemas import HarvestedSource, Mutant, SpanRecord
from .config import DEFAULT_STALL_LIMIT

# A draw returns (replacement, replacement_kind), or None when nothing could be drawn.
Draw = Callable[[SpanRecord], Optional[Tuple[str, str]]]


def _check_count(count: int, allow_all: bool) -> None:
    if count < 0:
        raise MutationCountError(count, f"Mutation count must not be negative, got {count}")
    if count == 0 and not allow_all:
        raise MutationCountError(
            count, "Stopped because there might be too many mutated files: splice modes need a positive count."
        )


def _is_eligible(candidate: str, original: str) -> bool:
    return candidate != "" and candidate != original


def _make_mutant(
    harvested: HarvestedSource,
    index: int,
    span: SpanRecord,
    replacement: str,
    replacement_kind: Optional[str] = None,
) -> Mutant:
    mutant = Mutant(
        index=index,
        span=span,
        original=harvested.text_of(span),
        replacement=replacement,
        replacement_kind=replacement_kind or span.kind,
        text=harvested.substitute(span, replacement),
    )
    logger.debug(mutant.describe())
    return mutant


def mutate_delete_only(
    harvested: HarvestedSource,
    count: int,
    rng: random.Random,
) -> List[Mutant]:
    """
    Delete one span per mutant.

    With ``count == 0`` every span is deleted once, in harvest order.
    Otherwise ``count`` distinct spans are sampled (or all of them, if
    there are fewer). Zero-length spans are skipped since deleting them
    changes nothing.
    """
    _check_count(count, allow_all=True)
    spans = [span for span in harvested.spans if span.length > 0]

    if count:
        spans = rng.sample(spans, min(count, len(spans)))

    return [_make_mutant(harvested, index, span, "") for index, span in enumerate(spans, start=1)]


def _draw_until(
    harvested: HarvestedSource,
    count: int,
    rng: random.Random,
    draw: Draw,
    stall_limit: int,
) -> List[Mutant]:
    mutants: List[Mutant] = []
    if not harvested.spans:
        return mutants

    attempts = 0
    while len(mutants) < count:
        attempts += 1
        if attempts > stall_limit and not mutants:
            logger.debug(
                f"No mutation accepted after {stall_limit} draws for {harvested.path or '<memory>'}; giving up"
            )
            break

        span = rng.choice(harvested.spans)
        drawn = draw(span)
        if drawn is None:
            continue
        replacement, replacement_kind = drawn
        if not _is_eligible(replacement, harvested.text_of(span)):
            continue
        mutants.append(_make_mutant(harvested, len(mutants) + 1, span, replacement, replacement_kind))

    return mutants


def _has_same_kind_candidate(harvested: HarvestedSource, corpus: Corpus) -> bool:
    for span in harvested.spans:
        original = harvested.text_of(span)
        if any(_is_eligible(c, original) for c in corpus.candidates(span.kind)):
            return True
    return False


def _has_any_kind_candidate(harvested: HarvestedSource, corpus: Corpus) -> bool:
    snippets = {c for kind in corpus for c in corpus.candidates(kind) if c}
    if not snippets:
        return False
    # A span can only be blocked by a single snippet: its own text.
    return len(snippets) > 1 or any(harvested.text_of(span) not in snippets for span in harvested.spans)


def mutate_self_splice(
    harvested: HarvestedSource,
    count: int,
    rng: random.Random,
    stall_limit: int = DEFAULT_STALL_LIMIT,
) -> List[Mutant]:
    """
    Replace spans with other snippets of the same kind taken from the same file.

    With ``count == 0`` every span is paired once with every distinct
    same-kind snippet other than its own text. Otherwise spans and
    snippets are drawn at random until ``count`` mutants are accepted.
    """
    _check_count(count, allow_all=True)
    corpus = Corpus.from_source(harvested)

    if count == 0:
        mutants: List[Mutant] = []
        for span in harvested.spans:
            original = harvested.text_of(span)
            for candidate in corpus.candidates(span.kind):
                if _is_eligible(candidate, original):
                    mutants.append(_make_mutant(harvested, len(mutants) + 1, span, candidate))
        return mutants

    if not _has_same_kind_candidate(harvested, corpus):
        return []

    def draw(span: SpanRecord) -> Optional[Tuple[str, str]]:
        return rng.choice(corpus.candidates(span.kind)), span.kind

    return _draw_until(harvested, count, rng, draw, stall_limit)


def mutate_splice(
    harvested: HarvestedSource,
    corpus: Corpus,
    count: int,
    rng: random.Random,
    stall_limit: int = DEFAULT_STALL_LIMIT,
) -> List[Mutant]:
    """
    Replace spans with same-kind snippets from a corpus built across many files.

    Raises:
        MutationCountError: If ``count`` is zero; there is no exhaustive mode.
    """
    _check_count(count, allow_all=False)
    if not _has_same_kind_candidate(harvested, corpus):
        return []

    def draw(span: SpanRecord) -> Optional[Tuple[str, str]]:
        candidates = corpus.candidates(span.kind)
        if not candidates:
            return None
        return rng.choice(candidates), span.kind

    return _draw_until(harvested, count, rng, draw, stall_limit)


def mutate_splice_random_kind(
    harvested: HarvestedSource,
    corpus: Corpus,
    count: int,
    rng: random.Random,
    stall_limit: int = DEFAULT_STALL_LIMIT,
) -> List[Mutant]:
    """
    Replace spans with snippets of a randomly drawn kind, independent of
    the span's own kind.

    Raises:
        MutationCountError: If ``count`` is zero; there is no exhaustive mode.
    """
    _check_count(count, allow_all=False)
    kinds = corpus.kinds()
    if not kinds or not _has_any_kind_candidate(harvested, corpus):
        return []

    def draw(span: SpanRecord) -> Optional[Tuple[str, str]]:
        kind = rng.choice(kinds)
        candidates = corpus.candidates(kind)
        if not candidates:
            return None
        return rng.choice(candidates), kind

    return _draw_until(harvested, count, rng, draw, stall_limit)
