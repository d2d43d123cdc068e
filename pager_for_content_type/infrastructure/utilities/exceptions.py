"""
Custom exceptions for the pager settings service
"""

from pager_for_content_type.infrastructure.utilities.constants import ErrorCodes


class PagerSettingsError(Exception):
    """Base exception for the pager settings service"""

    def __init__(self, message: str, user_message: str = None, error_code: str = None):
        super().__init__(message)
        self.user_message = user_message or "An error occurred. Please try again."
        self.error_code = error_code or ErrorCodes.GENERAL_ERROR


class ValidationError(PagerSettingsError):
    """Submitted settings failed validation; nothing was written"""

    def __init__(self, errors: dict[str, str]):
        summary = "; ".join(f"{field}: {message}" for field, message in errors.items())
        super().__init__(
            f"Invalid pager settings: {summary}",
            "Please correct the highlighted fields.",
            ErrorCodes.VALIDATION_ERROR,
        )
        self.errors = dict(errors)

    @property
    def fields(self) -> list[str]:
        """Offending field names, in the order they were found"""
        return list(self.errors)


class StoreUnavailableError(PagerSettingsError):
    """The configuration store could not be read or written"""

    def __init__(self, message: str, operation: str = None):
        super().__init__(
            message,
            "Sorry, the settings could not be saved right now. Please try again later.",
            ErrorCodes.STORE_UNAVAILABLE,
        )
        self.operation = operation
