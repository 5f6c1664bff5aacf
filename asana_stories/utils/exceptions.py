"""Custom exceptions for the Asana stories client."""

from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Dict, Any, List, Optional, Type


class AsanaException(Exception):
    """Base custom exception class.

    Attributes:
        message: The error message
        status_code: HTTP status code, if the error came from a response
        headers: Optional HTTP response headers
    """

    def __init__(
        self,
        message: Dict[str, Any],
        status_code: Optional[int] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> None:
        """Initialize the custom exception.

        Args:
            message: The error message as a dictionary
            status_code: HTTP status code
            headers: Optional HTTP headers
        """
        self.message = message
        self.status_code = status_code
        self.headers = headers
        super().__init__(self.message)


class MissingTokenError(AsanaException):
    """Raised when a client is built without an access token."""

    def __init__(self) -> None:
        super().__init__(
            {"error": "No Asana access token configured; set ASANA_TOKEN."}
        )


class EmptyResponseError(AsanaException):
    """Raised when a successful response carries no resource."""

    def __init__(self, detail: str, status_code: Optional[int] = None) -> None:
        super().__init__({"error": detail}, status_code=status_code)


class AsanaAPIError(AsanaException):
    """Error body returned by the Asana API.

    Attributes:
        errors: The decoded ``errors`` list, each with ``message`` and
            optionally ``help`` and ``phrase``
    """

    def __init__(
        self,
        status_code: int,
        errors: List[Dict[str, Any]],
        headers: Optional[Dict[str, str]] = None
    ) -> None:
        self.errors = errors
        super().__init__(
            {"errors": errors}, status_code=status_code, headers=headers
        )

    def __str__(self) -> str:
        messages = "; ".join(
            error.get("message", "") for error in self.errors if error.get("message")
        )
        return f"{self.status_code} {type(self).__name__}: {messages or 'no message'}"

    @property
    def phrases(self) -> List[str]:
        """Phrases Asana attaches to 500 errors, for support requests."""
        return [error["phrase"] for error in self.errors if error.get("phrase")]


class InvalidRequestError(AsanaAPIError):
    pass


class NoAuthorizationError(AsanaAPIError):
    pass


class PremiumOnlyError(AsanaAPIError):
    pass


class ForbiddenError(AsanaAPIError):
    pass


class NotFoundError(AsanaAPIError):
    pass


class RateLimitEnforcedError(AsanaAPIError):
    """429 response. ``retry_after`` holds the server's hint in seconds."""

    def __init__(
        self,
        status_code: int,
        errors: List[Dict[str, Any]],
        headers: Optional[Dict[str, str]] = None
    ) -> None:
        super().__init__(status_code, errors, headers)
        self.retry_after = self._parse_retry_after((headers or {}).get("Retry-After"))

    @staticmethod
    def _parse_retry_after(header_value: Optional[str]) -> Optional[float]:
        """Parse a Retry-After header given either in seconds or as an HTTP-date."""
        if not header_value:
            return None
        try:
            return float(header_value)
        except ValueError:
            pass
        try:
            retry_at = parsedate_to_datetime(header_value)
        except (TypeError, ValueError):
            return None
        if retry_at.tzinfo is None:
            retry_at = retry_at.replace(tzinfo=timezone.utc)
        return max(0.0, (retry_at - datetime.now(timezone.utc)).total_seconds())


class ServerError(AsanaAPIError):
    pass


STATUS_ERRORS: Dict[int, Type[AsanaAPIError]] = {
    400: InvalidRequestError,
    401: NoAuthorizationError,
    402: PremiumOnlyError,
    403: ForbiddenError,
    404: NotFoundError,
    429: RateLimitEnforcedError,
}


def error_for_status(
    status_code: int,
    errors: List[Dict[str, Any]],
    headers: Optional[Dict[str, str]] = None,
) -> AsanaAPIError:
    """Build the exception matching an HTTP status code.

    Args:
        status_code: Response status code (4xx or 5xx)
        errors: The ``errors`` list from the response body
        headers: Response headers

    Returns:
        The exception instance to raise
    """
    if status_code >= 500:
        return ServerError(status_code, errors, headers)
    error_cls = STATUS_ERRORS.get(status_code, AsanaAPIError)
    return error_cls(status_code, errors, headers)
