"""Custom application-wide exceptions."""


class ApplicationError(Exception):
    """Base class for application-specific errors."""

    def __init__(
        self, message: str = "An application error occurred", original_exception: Exception | None = None
    ) -> None:
        super().__init__(message)
        self.original_exception = original_exception
        self.message = message

    def __str__(self) -> str:
        if self.original_exception:
            return f"{self.message} (Original error: {self.original_exception})"
        return self.message


class ValidationError(ApplicationError):
    """Raised when user input fails a required-field or required-line-item rule."""

    def __init__(self, message: str = "Validation failed", field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class NotFoundError(ApplicationError):
    """Raised when a referenced catalog identifier or coupon code does not exist."""

    def __init__(self, message: str = "Resource not found", identifier: str | None = None) -> None:
        super().__init__(message)
        self.identifier = identifier


class CapabilityError(ApplicationError):
    """Exception raised when an external device capability (e.g. the barcode scanner) fails."""

    def __init__(self, message: str = "Capability unavailable", original_exception: Exception | None = None) -> None:
        super().__init__(message, original_exception)
        self.message = f"Capability Error: {message}"
