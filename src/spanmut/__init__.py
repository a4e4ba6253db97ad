"""
spanmut - syntax-aware source mutator

Harvests CST spans with tree-sitter and produces deleted or spliced
variants of source files for fuzzing corpora.
"""

__version__ = "0.1.0"

from spanmut.corpus import Corpus, build_corpus
from spanmut.parser import harvest, harvest_file
from spanmut.mutation import MutationMode, MutationSettings, run_mutation
from spanmut.schemas import HarvestedSource, Mutant, SpanRecord

__all__ = [
    "__version__",
    "Corpus",
    "build_corpus",
    "harvest",
    "harvest_file",
    "MutationMode",
    "MutationSettings",
    "run_mutation",
    "HarvestedSource",
    "Mutant",
    "SpanRecord",
]
