"""
Error taxonomy for the RecipeShare client.

Facades and the HTTP adapter raise these exceptions; controllers catch them at
their boundary and turn them into display state. Only AuthError has a global
side effect (session teardown and a login redirect), which the adapter applies
before raising.
"""

from typing import Optional

NETWORK_ERROR_MESSAGE = "Network error occurred. Please check your connection."


class RecipeShareError(Exception):
    """Base class for every error raised by the client layer."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(RecipeShareError):
    """
    Client-side form check failed.

    Raised before any request is made: required fields, positive integers,
    non-blank list entries, non-empty ingredient sets.
    """


class ClientError(RecipeShareError):
    """Base class for failures of a backend call."""


class NetworkError(ClientError):
    """No response was received (connection refused, DNS failure, timeout)."""

    def __init__(self, message: str = NETWORK_ERROR_MESSAGE) -> None:
        super().__init__(message)


class AuthError(ClientError):
    """The backend rejected the credentials (HTTP 401)."""

    def __init__(self, message: str = "Your session has expired. Please log in again.") -> None:
        super().__init__(message)


class ServerError(ClientError):
    """
    The backend answered with a non-2xx status other than 401.

    Attributes:
        status: HTTP status code
        server_message: The `message` field of the error body, if the server sent one
    """

    def __init__(self, status: int, server_message: Optional[str] = None) -> None:
        self.status = status
        self.server_message = server_message
        super().__init__(server_message or f"Request failed with status code {status}")


class ShapeError(ClientError):
    """A response arrived but did not have the expected fields."""


def describe_error(error: Exception, fallback: str) -> str:
    """
    Pick the user-facing message for an error caught at a controller boundary.

    Server-provided messages are shown verbatim; network, auth, shape and
    validation errors carry their own message. Anything else (including server
    errors without a message) gets the caller's fallback text.

    Args:
        error: The caught exception
        fallback: Context-specific text such as "Failed to load recipes"

    Returns:
        Message suitable for display
    """
    if isinstance(error, ServerError):
        return error.server_message or fallback
    if isinstance(error, RecipeShareError):
        return error.message
    return fallback
