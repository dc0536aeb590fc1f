from ._cancellation import CancellationToken, LinkedCancellationToken
from ._request_spec import HttpMethod, QueryValue, RequestOptions, RequestSpec

__all__ = [
    "CancellationToken",
    "LinkedCancellationToken",
    "HttpMethod",
    "QueryValue",
    "RequestOptions",
    "RequestSpec",
]
