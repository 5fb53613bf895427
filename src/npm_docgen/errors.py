from __future__ import annotations

from enum import Enum

from litellm.exceptions import AuthenticationError, NotFoundError, RateLimitError


class ErrorClass(str, Enum):
    RATE_LIMIT = "rate_limit"
    AUTH = "auth"
    NOT_FOUND = "not_found"
    UNKNOWN = "unknown"


_RATE_LIMIT_PATTERNS = (
    "429",
    "rate limit",
    "too many requests",
    "resource_exhausted",
    "quota",
)
_AUTH_PATTERNS = (
    "401",
    "403",
    "api key",
    "api_key",
    "permission_denied",
    "unauthenticated",
)
_NOT_FOUND_PATTERNS = (
    "404",
    "not found",
    "not_found",
)


def classify_generation_error(exc: BaseException) -> ErrorClass:
    if isinstance(exc, RateLimitError):
        return ErrorClass.RATE_LIMIT
    if isinstance(exc, AuthenticationError):
        return ErrorClass.AUTH
    if isinstance(exc, NotFoundError):
        return ErrorClass.NOT_FOUND
    msg = str(exc).lower()
    if any(token in msg for token in _RATE_LIMIT_PATTERNS):
        return ErrorClass.RATE_LIMIT
    if any(token in msg for token in _AUTH_PATTERNS):
        return ErrorClass.AUTH
    if any(token in msg for token in _NOT_FOUND_PATTERNS):
        return ErrorClass.NOT_FOUND
    return ErrorClass.UNKNOWN


class GenerationError(Exception):
    """Raised when the Gemini request fails for any reason."""

    def __init__(self, message: str, error_class: ErrorClass = ErrorClass.UNKNOWN) -> None:
        super().__init__(message)
        self.error_class = error_class
