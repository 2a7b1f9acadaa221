from typing import Optional


class HotTopicError(Exception):
    """Base class of the hot topic finder errors."""


class InvalidRecord(HotTopicError, ValueError):
    """A video record is missing a field, has a malformed value or a negative count."""

    def __init__(self, message: str, index: Optional[int] = None):
        if index is not None:
            message = f"Invalid video record at index {index}: {message}"
        super().__init__(message)
        self.index = index


class EmptyResult(HotTopicError):
    """No (video, topic) pair was found in the input."""
