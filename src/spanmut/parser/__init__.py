"""
This facade exposes the public API for the parser module.
"""
from .config import EXCLUDED_KINDS, SUPPORTED_LANGUAGES, extensions_for
from .harvester import harvest, harvest_file

__all__ = ["harvest", "harvest_file", "EXCLUDED_KINDS", "SUPPORTED_LANGUAGES", "extensions_for"]
