from __future__ import annotations


class WordExplorerError(Exception):
    """Base error. ``message`` is safe to show to the user as-is."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(WordExplorerError):
    pass


class NotFoundError(WordExplorerError):
    def __init__(self, word: str):
        super().__init__(
            f'Sorry, we couldn\'t find the word "{word}". Please check the spelling and try again.'
        )
        self.word = word


class TransportError(WordExplorerError):
    def __init__(self, message: str = "Failed to fetch word data. Please try again later."):
        super().__init__(message)


class MalformedResponseError(WordExplorerError):
    def __init__(self, word: str, reason: str = ""):
        super().__init__(
            f'The dictionary returned an unexpected response for "{word}". Please try again later.'
        )
        self.word = word
        self.reason = reason


class EmptyStateError(WordExplorerError):
    pass


class StorageError(WordExplorerError):
    """Persistence failed. Logged by the caller, never shown to the user."""
