"""
Mutation package: strategies, the per-directory driver and the mutant writer.
"""

from .config import MutationMode, MutationSettings, validate_count, validate_mode
from .strategies import (
    mutate_delete_only,
    mutate_self_splice,
    mutate_splice,
    mutate_splice_random_kind,
)
from .driver import mutate_source, run_mutation
from .writer import mutant_file_name, write_mutants

__all__ = [
    "MutationMode",
    "MutationSettings",
    "validate_count",
    "validate_mode",
    "mutate_delete_only",
    "mutate_self_splice",
    "mutate_splice",
    "mutate_splice_random_kind",
    "mutate_source",
    "run_mutation",
    "mutant_file_name",
    "write_mutants",
]
