from djbooking.domain.entities.field_error import FieldError


class FieldValidationError(ValueError):
    """Raised when one or more fields fail their validation rule."""

    def __init__(self, errors: tuple[FieldError, ...] | list[FieldError]) -> None:
        self.errors = tuple(errors)
        super().__init__("; ".join(f"{e.field}: {e.message}" for e in self.errors) or "Validation failed")


class TransportError(RuntimeError):
    """Raised when a booking submission cannot reach the server or the server fails."""
    pass


class NotificationError(RuntimeError):
    """Raised when an email provider rejects or fails to accept a message."""
    pass


class DraftStorageError(RuntimeError):
    """Raised by draft stores when the draft cannot be written."""
    pass
