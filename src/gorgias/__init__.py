from ._config import Config, RetryConfig
from ._gorgias import Gorgias
from ._utils import CancellationToken, LinkedCancellationToken, RequestOptions
from ._utils._pagination import (
    collect_all,
    collect_all_async,
    paginate,
    paginate_async,
)
from ._version import __version__
from .models import (
    AuthenticationError,
    ErrorCode,
    GorgiasAPIError,
    GorgiasError,
    NetworkError,
    NotFoundError,
    Page,
    RateLimitError,
    RequestTimeoutError,
    ValidationAPIError,
    ValidationError,
)

__all__ = [
    "Gorgias",
    "Config",
    "RetryConfig",
    "RequestOptions",
    "CancellationToken",
    "LinkedCancellationToken",
    "Page",
    "paginate",
    "paginate_async",
    "collect_all",
    "collect_all_async",
    "ErrorCode",
    "GorgiasError",
    "GorgiasAPIError",
    "AuthenticationError",
    "NotFoundError",
    "RateLimitError",
    "ValidationAPIError",
    "NetworkError",
    "RequestTimeoutError",
    "ValidationError",
    "__version__",
]
