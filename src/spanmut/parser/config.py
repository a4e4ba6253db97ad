from typing import Dict, FrozenSet, Tuple

from spanmut.exceptions import UnsupportedLanguageError

# Mapping of file extensions to language names used in this module
SUPPORTED_LANGUAGES = {
    ".rs": "rust",
    ".py": "python",
    ".js": "javascript",
    ".ts": "typescript",
    ".go": "go",
}

# Grammar wheel for each language: (import name, attribute returning the language, pip name)
GRAMMAR_MODULES: Dict[str, Tuple[str, str, str]] = {
    "rust": ("tree_sitter_rust", "language", "tree-sitter-rust"),
    "python": ("tree_sitter_python", "language", "tree-sitter-python"),
    "javascript": ("tree_sitter_javascript", "language", "tree-sitter-javascript"),
    "typescript": ("tree_sitter_typescript", "language_typescript", "tree-sitter-typescript"),
    "go": ("tree_sitter_go", "language", "tree-sitter-go"),
}

# Node kinds that are walked through but never recorded: comments and
# single-character structural tokens carry no mutation value of their own.
EXCLUDED_KINDS: FrozenSet[str] = frozenset({
    "block_comment",
    "line_comment",
    "comment",
    "{", "}",
    "(", ")",
    "<", ">",
    "[", "]",
    "=",
    "//", "/*", "*/",
})


def validate_language(language: str) -> str:
    """
    Validate that a language has a registered grammar.

    Raises:
        UnsupportedLanguageError: If the language is not supported.
    """
    if language not in GRAMMAR_MODULES:
        supported = ", ".join(GRAMMAR_MODULES.keys())
        raise UnsupportedLanguageError(
            f"Language '{language}' is not supported. Supported languages: {supported}"
        )
    return language


def validate_extension(extension: str) -> str:
    """
    Validate a file extension and return its language.

    Args:
        extension: File extension (e.g., '.rs', '.py')

    Raises:
        UnsupportedLanguageError: If the extension is not supported.
    """
    if extension not in SUPPORTED_LANGUAGES:
        supported = ", ".join(SUPPORTED_LANGUAGES.keys())
        raise UnsupportedLanguageError(
            f"File extension '{extension}' is not supported. Supported extensions: {supported}"
        )

    return SUPPORTED_LANGUAGES[extension]


def extensions_for(language: str) -> Tuple[str, ...]:
    """Return every file extension mapped to ``language``."""
    validate_language(language)
    return tuple(ext for ext, lang in SUPPORTED_LANGUAGES.items() if lang == language)
