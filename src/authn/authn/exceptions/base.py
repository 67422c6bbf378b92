# ABOUTME: Exception classes for the authn token library
# ABOUTME: Provides structured error handling with context and error codes

from typing import Dict, Any


class AuthnException(Exception):
    """Base exception class for the authn library.

    Provides structured error handling with optional error codes and contextual
    details. All custom exceptions raised by the library inherit from this class
    so collaborators can catch a single type at the trust boundary.

    Attributes:
        message: Human-readable error message
        code: Optional error code for programmatic handling
        details: Optional dictionary containing contextual information
    """

    def __init__(self, message: str, code: str | None = None, details: Dict[str, Any] | None = None):
        """Initialize AuthnException with message, optional code and details.

        Args:
            message: Human-readable error message
            code: Optional error code for programmatic handling
            details: Optional dictionary containing contextual information
        """
        self.message = message
        self.code = code
        self.details = details.copy() if details else {}
        super().__init__(self.message)


class TokenFormatException(AuthnException):
    """Base class for errors raised while detecting or parsing a token.

    Every subclass aborts the current parse attempt. Retrying (for example by
    fetching a fresh token) is left to the caller that owns the HTTP exchange
    with the authentication service.
    """

    pass


class MalformedTokenError(TokenFormatException):
    """Exception raised when the token bytes are not a JSON object.

    Used when the top-level structure cannot be decoded at all, such as:
    - Truncated or corrupted bytes
    - Valid JSON that is not an object
    - Object values that are not strings
    """

    pass


class UnrecognizedTokenFormatError(TokenFormatException):
    """Exception raised when a JSON object matches no known token key set."""

    pass


class TokenFieldError(TokenFormatException):
    """Exception raised when a required token field is missing or malformed.

    Used for field-level decode failures, such as:
    - Payload that is not valid base64
    - Payload that is not a JSON object
    - Missing or non-numeric 'iat' / 'exp' claims
    - Timestamps that do not match the expected layout

    Should include the offending field name in details.
    """

    pass


class TokenSemanticError(TokenFormatException):
    """Exception raised when decoded token fields contradict each other.

    Currently raised when a token's issue time is after its expiry time.
    """

    pass


class TokenStateError(AuthnException):
    """Base class for token lifecycle misuse."""

    pass


class TokenNotParsedError(TokenStateError):
    """Exception raised when a token is used before a successful parse."""

    pass


class TokenAlreadyParsedError(TokenStateError):
    """Exception raised when parse is called twice on the same token."""

    pass
