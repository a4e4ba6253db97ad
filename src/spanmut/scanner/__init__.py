"""
This facade exposes the public API for the scanner module.
Other parts of the application should only import from here,
not from internal modules.
"""
from .facade import count_lines, is_within_line_limit, iter_source_files, read_source

__all__ = ["count_lines", "is_within_line_limit", "iter_source_files", "read_source"]
