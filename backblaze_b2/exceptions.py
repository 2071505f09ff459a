"""
Backblaze B2 exception hierarchy.

All exceptions inherit from B2Error for easy catching.
"""

from typing import Any

ERROR_PREFIX = "Received error from B2: "


class B2Error(Exception):
    """Base exception for all backblaze_b2 errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UnauthorizedError(B2Error):
    """Operation attempted before a successful authorize()."""

    def __init__(
        self, message: str = "Please authorize before performing requests to Backblaze B2 API"
    ) -> None:
        super().__init__(message)


class InvalidOptionsError(B2Error):
    """Arguments rejected locally, before any request was sent."""


class InvalidResponseError(B2Error):
    """API returned a body that is not valid JSON."""

    def __init__(
        self,
        message: str = "B2 API returned not valid JSON response",
        *,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class B2APIError(B2Error):
    """API request failed with an error code not mapped to a narrower type."""

    def __init__(
        self, message: str, *, code: str | None = None, status_code: int | None = None
    ) -> None:
        super().__init__(message)
        self.code = code
        self.status_code = status_code


class BadJsonError(B2APIError):
    """Request body or parameters were rejected as malformed (bad_json)."""


class BadValueError(B2APIError):
    """A parameter value is out of range or otherwise invalid (bad_value)."""


class BucketAlreadyExistsError(B2APIError):
    """Bucket name is already taken (duplicate_bucket_name)."""


class NotFoundError(B2APIError):
    """Bucket or file not found (not_found)."""


class FileNotPresentError(B2APIError):
    """File version does not exist (file_not_present)."""


class BucketNotEmptyError(B2APIError):
    """Bucket still holds files and cannot be deleted (cannot_delete_non_empty_bucket)."""


ERROR_CODES: dict[str, type[B2APIError]] = {
    "bad_json": BadJsonError,
    "bad_value": BadValueError,
    "duplicate_bucket_name": BucketAlreadyExistsError,
    "not_found": NotFoundError,
    "file_not_present": FileNotPresentError,
    "cannot_delete_non_empty_bucket": BucketNotEmptyError,
}


def error_from_response(data: Any, status_code: int | None = None) -> B2APIError:
    """
    Build the typed exception for a decoded B2 error body.

    Unknown or missing codes fall back to B2APIError, so every error body
    produces an exception.

    Args:
        data: Decoded JSON error body, normally ``{"code": ..., "message": ...}``.
        status_code: HTTP status of the response.

    Returns:
        Exception instance ready to be raised.
    """
    if not isinstance(data, dict):
        data = {}
    code = data.get("code")
    message = data.get("message", "Unknown error")

    error_class = ERROR_CODES.get(code, B2APIError) if isinstance(code, str) else B2APIError
    return error_class(f"{ERROR_PREFIX}{message}", code=code, status_code=status_code)
