"""Error taxonomy for the Gorgias SDK.

Every failure raised by the SDK is a :class:`GorgiasError`. Each concrete class
pins its :class:`ErrorCode` in the ``code`` class attribute, so callers can
either catch by type or dispatch on ``error.code``.
"""

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from enum import Enum
from typing import Any, ClassVar, Mapping, Optional

from httpx import Headers

from .._utils.constants import HEADER_REQUEST_ID, HEADER_RETRY_AFTER


class ErrorCode(str, Enum):
    API_ERROR = "API_ERROR"
    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"
    NOT_FOUND = "NOT_FOUND"
    RATE_LIMITED = "RATE_LIMITED"
    API_VALIDATION_ERROR = "API_VALIDATION_ERROR"
    NETWORK_ERROR = "NETWORK_ERROR"
    TIMEOUT = "TIMEOUT"
    VALIDATION_ERROR = "VALIDATION_ERROR"


@dataclass(frozen=True)
class RequestContext:
    """The request that failed. Never carries credentials or payloads."""

    method: str
    path: str


class GorgiasError(Exception):
    """Base class for all errors raised by the SDK."""

    code: ClassVar[ErrorCode]

    def __init__(self, message: str, trace_id: Optional[str] = None) -> None:
        self.message = message
        self.trace_id = trace_id
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(message)


def extract_error_message(value: Any) -> Optional[str]:
    """Turn one of the heterogeneous error shapes the API returns into a string.

    Args:
        value: A string, a nested error object, a list, or anything else found
            in an error body.

    Returns:
        The message, or None when the value carries nothing usable.

    Examples:
        >>> extract_error_message({"detail": "Rate limit exceeded"})
        'Rate limit exceeded'
        >>> extract_error_message({"code": 1})
        '{"code":1}'
    """
    if isinstance(value, str):
        return value or None
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Mapping):
        for key in ("message", "detail"):
            candidate = value.get(key)
            if isinstance(candidate, str) and candidate:
                return candidate
        return json.dumps(value, separators=(",", ":"), default=str)
    if isinstance(value, (list, tuple)):
        return json.dumps(value, separators=(",", ":"), default=str)
    return None


def parse_retry_after_ms(value: Optional[str]) -> Optional[int]:
    """Parse a Retry-After header value into milliseconds.

    Accepts delay-seconds and HTTP-dates (RFC 7231). Returns None when the
    header is missing or unparsable.
    """
    if not value:
        return None

    try:
        return max(int(float(value.strip()) * 1000), 0)
    except (ValueError, OverflowError):
        pass

    try:
        retry_date = parsedate_to_datetime(value)
        delta = (retry_date - datetime.now(retry_date.tzinfo)).total_seconds()
        return max(int(delta * 1000), 0)
    except (ValueError, TypeError):
        return None


class GorgiasAPIError(GorgiasError):
    """The API answered with an unsuccessful status code."""

    code = ErrorCode.API_ERROR

    def __init__(
        self,
        message: str,
        status_code: int,
        request_context: RequestContext,
        *,
        error_code: Optional[str] = None,
        request_id: Optional[str] = None,
        trace_id: Optional[str] = None,
    ) -> None:
        super().__init__(message, trace_id)
        self.status_code = status_code
        self.request_context = request_context
        self.error_code = error_code
        self.request_id = request_id

    def __str__(self) -> str:
        return (
            f"{self.message} (status={self.status_code}, "
            f"{self.request_context.method} {self.request_context.path})"
        )

    @classmethod
    def from_response(
        cls,
        status_code: int,
        body: Any,
        request_context: RequestContext,
        headers: Optional[Mapping[str, str]] = None,
        trace_id: Optional[str] = None,
    ) -> "GorgiasAPIError":
        """Classify an unsuccessful response into the matching error type.

        Args:
            status_code: HTTP status of the response.
            body: The decoded JSON body, or None if it was empty or not JSON.
            request_context: Method and path of the failed request.
            headers: Response headers, looked up case-insensitively.
            trace_id: Trace id sent with the request, if any.

        Returns:
            GorgiasAPIError: An instance of the subclass matching ``status_code``.
        """
        payload: Mapping[str, Any] = body if isinstance(body, Mapping) else {}
        response_headers = Headers(headers or {})

        message = (
            extract_error_message(payload.get("error"))
            or extract_error_message(payload.get("message"))
            or f"HTTP {status_code} error"
        )
        options: dict[str, Any] = {
            "error_code": payload.get("error_code"),
            "request_id": response_headers.get(HEADER_REQUEST_ID),
            "trace_id": trace_id,
        }

        if status_code in (401, 403):
            return AuthenticationError(message, status_code, request_context, **options)
        if status_code == 404:
            return NotFoundError(message, request_context, **options)
        if status_code == 429:
            return RateLimitError(
                message,
                request_context,
                retry_after_ms=parse_retry_after_ms(
                    response_headers.get(HEADER_RETRY_AFTER)
                ),
                **options,
            )
        if status_code == 422:
            field_errors = payload.get("errors")
            return ValidationAPIError(
                message,
                request_context,
                field_errors=field_errors if isinstance(field_errors, list) else None,
                **options,
            )
        return GorgiasAPIError(message, status_code, request_context, **options)


class AuthenticationError(GorgiasAPIError):
    """Credentials were rejected (401) or lack permission (403)."""

    code = ErrorCode.AUTHENTICATION_FAILED


class NotFoundError(GorgiasAPIError):
    code = ErrorCode.NOT_FOUND

    def __init__(
        self, message: str, request_context: RequestContext, **kwargs: Any
    ) -> None:
        super().__init__(message, 404, request_context, **kwargs)


class RateLimitError(GorgiasAPIError):
    """Too many requests. ``retry_after_ms`` holds the server hint, if any."""

    code = ErrorCode.RATE_LIMITED

    def __init__(
        self,
        message: str,
        request_context: RequestContext,
        retry_after_ms: Optional[int] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, 429, request_context, **kwargs)
        self.retry_after_ms = retry_after_ms


class ValidationAPIError(GorgiasAPIError):
    """The API rejected the payload (422)."""

    code = ErrorCode.API_VALIDATION_ERROR

    def __init__(
        self,
        message: str,
        request_context: RequestContext,
        field_errors: Optional[list[dict[str, Any]]] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, 422, request_context, **kwargs)
        self.field_errors = field_errors


class NetworkError(GorgiasError):
    """Connection failure, DNS error or cancellation by the caller."""

    code = ErrorCode.NETWORK_ERROR

    def __init__(
        self,
        message: str,
        cause: Optional[BaseException] = None,
        trace_id: Optional[str] = None,
    ) -> None:
        super().__init__(message, trace_id)
        self.cause = cause


class RequestTimeoutError(GorgiasError):
    code = ErrorCode.TIMEOUT

    def __init__(self, timeout_ms: float, trace_id: Optional[str] = None) -> None:
        super().__init__(f"Request timed out after {timeout_ms:g}ms", trace_id)
        self.timeout_ms = timeout_ms


class ValidationError(GorgiasError, ValueError):
    """Input rejected locally, before any request was sent."""

    code = ErrorCode.VALIDATION_ERROR

    def __init__(self, field: str, constraint: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.constraint = constraint
