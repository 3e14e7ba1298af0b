"""Domain errors raised by tracker operations."""


class TrackerError(Exception):
    """Base error for tracker operations."""


class UnknownFieldError(TrackerError):
    """Raised when a field name is neither a requirement nor a form field."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Unknown field: {field}")
        self.field = field


class EntryNotFoundError(TrackerError):
    """Raised when an entry index is outside the food list."""

    def __init__(self, index: int) -> None:
        super().__init__(f"No entry at index {index}")
        self.index = index
