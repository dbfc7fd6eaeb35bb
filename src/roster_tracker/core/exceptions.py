class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a member or attendance record does not exist."""


class AuthenticationError(DomainError):
    """Raised when the access code is rejected."""


class CsvFormatError(ValidationError):
    """Raised when an uploaded file cannot be read as a member CSV."""


class ImportRejectedError(ValidationError):
    """Raised when an import has row errors; nothing was written."""

    def __init__(self, message: str, issues):
        super().__init__(message)
        self.issues = list(issues)
