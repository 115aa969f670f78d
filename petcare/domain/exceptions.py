"""Domain-specific exceptions."""


class DomainError(Exception):
    """Base exception for domain errors."""

    pass


class ValidationError(DomainError):
    """Raised when a plan request cannot be normalized."""

    def __init__(self, message: str, field: str):
        super().__init__(message)
        self.field = field


class MissingFieldError(ValidationError):
    """Raised when a required field is absent or blank."""

    pass


class InvalidRangeError(ValidationError):
    """Raised when a numeric field is not finite or out of range."""

    pass
