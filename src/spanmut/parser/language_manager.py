import importlib
from typing import Dict

from tree_sitter import Language, Parser

from spanmut.exceptions import GrammarNotFoundError
from spanmut.logging_config import logger
from spanmut.parser.config import GRAMMAR_MODULES, validate_language

# Global caches for loaded languages and parsers to avoid repeated loading
_language_cache: Dict[str, Language] = {}
_parser_cache: Dict[str, Parser] = {}


def get_language(language_name: str) -> Language:
    """
    Loads a tree-sitter language from its grammar wheel.

    Caches the loaded language object for efficiency.

    Raises:
        UnsupportedLanguageError: If no grammar is registered for the language.
        GrammarNotFoundError: If the grammar wheel is not installed.
    """
    validate_language(language_name)

    if language_name in _language_cache:
        return _language_cache[language_name]

    module_name, attribute, package = GRAMMAR_MODULES[language_name]
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        logger.error(f"Grammar module '{module_name}' is not installed. Error: {e}")
        raise GrammarNotFoundError(language_name, f"pip install {package}") from e

    lang = Language(getattr(module, attribute)())
    _language_cache[language_name] = lang
    logger.debug(f"Successfully loaded language '{language_name}'")
    return lang


def get_parser(language_name: str) -> Parser:
    """Return a cached parser configured for ``language_name``."""
    if language_name in _parser_cache:
        return _parser_cache[language_name]

    parser = Parser()
    parser.language = get_language(language_name)
    _parser_cache[language_name] = parser
    return parser
