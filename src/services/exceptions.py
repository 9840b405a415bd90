"""Domain exceptions raised by the service layer.

None of these know about HTTP. ``src.api.errors`` maps them to responses.
"""


class ServiceError(Exception):
    """Base class for expected, caller-facing service failures."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(ServiceError):
    """Raised when input is missing or malformed."""


class Unauthorized(ServiceError):
    """Raised when a request carries no usable credentials."""

    def __init__(self, message: str = "Not authenticated") -> None:
        super().__init__(message)


class InvalidToken(Unauthorized):
    """Raised when a token has a bad signature, a malformed payload or has expired."""

    def __init__(self, message: str = "Invalid authentication credentials") -> None:
        super().__init__(message)


class InvalidCredentials(ServiceError):
    """Raised on signin when the email is unknown or the password does not match.

    Both causes share a single message so callers cannot probe for accounts.
    """

    def __init__(self) -> None:
        super().__init__("Incorrect email or password")


class EmailTaken(ServiceError):
    """Raised when an email address is already registered to another user."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__("Email already registered")


class NotFound(ServiceError):
    """Raised when a resource does not exist or is not owned by the caller."""

    def __init__(self, resource: str) -> None:
        self.resource = resource
        super().__init__(f"{resource} not found")
