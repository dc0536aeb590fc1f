from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Literal, Mapping, Optional, Union

from ._cancellation import CancellationToken

if TYPE_CHECKING:
    from .._config import RetryConfig

HttpMethod = Literal["GET", "POST", "PUT", "DELETE", "PATCH"]
QueryValue = Union[str, int, float, bool, None]


@dataclass(frozen=True)
class RequestSpec:
    """Everything needed to perform a single HTTP attempt.

    ``path`` is relative to the API base URL; a leading slash is allowed and
    does not escape the base path. Query parameters set to None are dropped.
    """

    method: HttpMethod
    path: str
    params: Mapping[str, QueryValue] = field(default_factory=dict)
    json: Any = None
    headers: Mapping[str, str] = field(default_factory=dict)
    timeout_ms: Optional[float] = None
    cancel_token: Optional[CancellationToken] = None
    trace_id: Optional[str] = None


@dataclass(frozen=True)
class RequestOptions:
    """Per-call overrides accepted by every service method.

    Attributes:
        timeout_ms: Timeout of each attempt. Defaults to the client setting.
        cancel_token: Cancels the call when triggered.
        retry: ``False`` disables retries, a ``RetryConfig`` or a mapping of
            its fields is merged over the client's retry policy.
        trace_id: Sent in the trace header and attached to raised errors.
    """

    timeout_ms: Optional[float] = None
    cancel_token: Optional[CancellationToken] = None
    retry: Union["RetryConfig", Mapping[str, Any], Literal[False], None] = None
    trace_id: Optional[str] = None
