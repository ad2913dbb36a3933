"""
Error taxonomy for the SightGuide client.

API errors come in three kinds only:
- InvalidURLError: path + base endpoint do not form a valid URL
- RequestFailedError: transport failure or missing response body
- ParsingFailedError: body could not be encoded or decoded
"""

from core.constants import ApiErrorKind


class ApiError(Exception):
    """Base class for errors surfaced by the request gateway."""

    kind: ApiErrorKind

    def __init__(self, message: str, path: str = ""):
        super().__init__(message)
        self.message = message
        self.path = path


class InvalidURLError(ApiError):
    kind = ApiErrorKind.INVALID_URL


class RequestFailedError(ApiError):
    kind = ApiErrorKind.REQUEST_FAILED


class ParsingFailedError(ApiError):
    kind = ApiErrorKind.PARSING_FAILED


class AudioPlaybackError(Exception):
    """Raised by audio players when a file cannot be played."""


class MissingDependencyError(Exception):
    """Raised when a required system executable is not available."""


__all__ = [
    "ApiError",
    "InvalidURLError",
    "RequestFailedError",
    "ParsingFailedError",
    "AudioPlaybackError",
    "MissingDependencyError",
]
