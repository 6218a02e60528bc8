"""
Error types raised by the rental repository and the operations built on it.

The HTTP layer maps them to status codes: NotFoundError -> 404,
InvalidArgumentError -> 400, StorageError -> 500.
"""


class RentalServiceError(Exception):
    """Base class for every error raised by the rental service."""

    default_message = "Error: rental service failure"

    def __init__(self, message: str = None) -> None:
        self.message = message or self.default_message
        # the message as first raised, before any operation context was added
        self.detail = self.message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def wrap(self, context: str) -> "RentalServiceError":
        """Return an error of the same type whose message is prefixed with `context`."""
        wrapped = type(self)(f"{context}: {self.message}")
        wrapped.detail = self.detail
        return wrapped


class NotFoundError(RentalServiceError):
    """Raised when a lookup by id yields no row."""

    default_message = "not found"


class InvalidArgumentError(RentalServiceError):
    """Raised when a filter value (e.g. an unsortable field) is rejected."""

    default_message = "invalid argument"


class StorageError(RentalServiceError):
    """Raised when the underlying store fails to connect, execute or return rows."""

    default_message = "storage failure"


class ScanError(StorageError):
    """Raised when a result row does not match the expected column schema."""

    default_message = "scanning rental row failed"
