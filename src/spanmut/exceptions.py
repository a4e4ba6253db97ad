# Custom exceptions for spanmut

class SpanmutError(Exception):
    """Base exception for all application-specific errors."""
    pass

class ConfigError(SpanmutError):
    """Raised for configuration-related problems."""
    pass

class InvalidModeError(ConfigError):
    """Raised when the mutation mode selector is not one of the known modes."""
    def __init__(self, mode):
        self.mode = mode
        super().__init__(
            f"No such mutation mode: {mode!r}. "
            "Use 0 (delete-only), 1 (self splice), 2 (cross-file splice) or 3 (cross-file random-kind splice)."
        )

class MutationCountError(ConfigError):
    """Raised when a strategy is given a mutation count it cannot honour."""
    def __init__(self, count: int, message: str):
        self.count = count
        super().__init__(message)

class UnsupportedLanguageError(ConfigError):
    """Raised when no grammar is registered for a language or extension."""
    pass

class GrammarNotFoundError(SpanmutError):
    """Raised when a required tree-sitter grammar is not installed."""
    def __init__(self, language: str, install_command: str):
        self.language = language
        self.install_command = install_command
        super().__init__(f"Grammar for '{language}' not found. Install it with: {install_command}")

class ParserError(SpanmutError):
    """Raised when a file cannot be parsed by tree-sitter."""
    def __init__(self, file_path: str, message: str):
        self.file_path = file_path
        self.message = message
        super().__init__(f"Failed to parse {file_path}: {message}")

class SourceReadError(SpanmutError):
    """Raised when a source file cannot be read or decoded."""
    def __init__(self, file_path: str, message: str):
        self.file_path = file_path
        self.message = message
        super().__init__(f"Failed to read {file_path}: {message}")

class OutputWriteError(SpanmutError):
    """Raised when a mutant cannot be written to the output directory."""
    def __init__(self, file_path: str, message: str):
        self.file_path = file_path
        self.message = message
        super().__init__(f"Failed to write {file_path}: {message}")

class SpanOwnershipError(SpanmutError):
    """Raised when a span is applied to a source buffer it was not harvested from."""
    pass
