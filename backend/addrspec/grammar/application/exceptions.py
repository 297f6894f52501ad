"""Application-layer exceptions for use case error handling.

These exceptions represent rejected input at the use case boundary. They keep
the specific grammar violation so callers can decide whether to prompt for
re-entry, reject, or log.
"""

from addrspec.grammar.domain.errors import Error


class ApplicationError(Exception):
    """Base class for all application-layer exceptions."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class InvalidEmailError(ApplicationError):
    """Raised when an email address fails validation."""

    def __init__(self, email: str, kind: Error) -> None:
        super().__init__(
            message=f"Invalid email address: {email} ({kind.message})",
            code="INVALID_EMAIL"
        )
        self.email = email
        self.kind = kind
