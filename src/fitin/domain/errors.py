"""Domain errors."""


class ValidationError(Exception):
    """Raised when user-supplied details fail a field check."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message
