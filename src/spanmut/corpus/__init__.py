"""
This facade exposes the public API for the corpus module.
"""
from .store import Corpus
from .builder import build_corpus

__all__ = ["Corpus", "build_corpus"]
