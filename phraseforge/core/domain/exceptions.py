# phraseforge/core/domain/exceptions.py
class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

# --- Acquisition Errors ---

class NetworkError(DomainError):
    """Raised when a remote source cannot be downloaded (transport failure or HTTP error status)."""
    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Download of '{url}' failed: {reason}")

class ExtractionError(DomainError):
    """Raised when the dictionary archive cannot be unpacked or yields no index files."""
    def __init__(self, archive: str, reason: str):
        self.archive = archive
        self.reason = reason
        super().__init__(f"Extraction of '{archive}' failed: {reason}")

# --- Storage Errors ---

class StorageError(DomainError):
    """Raised when a file or directory in the storage directory cannot be created, read, written or removed."""
    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Storage failure at '{path}': {reason}")

class WordListMissingError(StorageError):
    """Raised when a derived word list cannot be opened for loading."""
    def __init__(self, path: str):
        super().__init__(path, "word list is missing; run with --redownload to rebuild it")

# --- Generation Errors ---

class EmptyCandidatePoolError(DomainError):
    """Raised when no entry of a part of speech clears the frequency threshold."""
    def __init__(self, part_of_speech: str, min_frequency: int):
        self.part_of_speech = part_of_speech
        self.min_frequency = min_frequency
        super().__init__(
            f"No {part_of_speech} has a frequency above {min_frequency}; "
            f"lower --min-frequency."
        )
