import asyncio
import time
from dataclasses import dataclass
from functools import partial
from typing import Any, Literal, Mapping, Optional, Union

from httpx import (
    URL,
    AsyncClient,
    Client,
    Headers,
    Request,
    Response,
    TimeoutException,
    TransportError,
)

from .._config import Config, RetryConfig
from .._utils import CancellationToken, QueryValue, RequestSpec
from .._utils._logs import logger as sdk_logger
from .._utils._retry import Logger, with_retry, with_retry_async
from .._utils._ssl_context import get_httpx_client_kwargs
from .._utils.constants import (
    HEADER_ACCEPT,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    HEADER_USER_AGENT,
    JSON_CONTENT_TYPE,
    USER_AGENT,
)
from .._version import __version__
from ..models.errors import (
    GorgiasAPIError,
    GorgiasError,
    NetworkError,
    RequestContext,
    RequestTimeoutError,
)

RetryOverride = Union[RetryConfig, Mapping[str, Any], Literal[False], None]


@dataclass(frozen=True)
class HttpResponse:
    status_code: int
    data: Any
    headers: Headers


def _format_param(value: QueryValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_url(
    base_url: Union[URL, str],
    path: str,
    params: Optional[Mapping[str, QueryValue]] = None,
) -> URL:
    """Resolve ``path`` against ``base_url`` and append the query string.

    ``base_url`` must end with a slash. Leading slashes on ``path`` are ignored,
    so ``"tickets"`` and ``"/tickets"`` resolve to the same URL and neither
    drops the base path. Parameters set to None are omitted.
    """
    url = URL(str(base_url)).join(path.lstrip("/"))
    if params:
        query = {
            key: _format_param(value)
            for key, value in params.items()
            if value is not None
        }
        if query:
            url = url.copy_merge_params(query)
    return url


class HttpClient:
    """Authenticated JSON transport shared by all services.

    Each call to :meth:`request` (or :meth:`request_async`) performs one or
    more sequential attempts. An attempt either yields an :class:`HttpResponse`
    or raises a :class:`~gorgias.models.errors.GorgiasError`; failed attempts
    are retried according to the effective :class:`RetryConfig`.

    The httpx clients can be injected, which is how tests and custom transports
    plug in. Clients passed in are not closed by :meth:`close`.
    """

    def __init__(
        self,
        config: Config,
        *,
        client: Optional[Client] = None,
        async_client: Optional[AsyncClient] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        self._config = config
        self._logger = logger or sdk_logger
        self._base_url = URL(config.api_base_url)

        client_kwargs = (
            get_httpx_client_kwargs(config.timeout_ms)
            if client is None or async_client is None
            else {}
        )
        self._owns_client = client is None
        self._owns_async_client = async_client is None
        self._client = client or Client(**client_kwargs)
        self._client_async = async_client or AsyncClient(**client_kwargs)

    @property
    def config(self) -> Config:
        return self._config

    @property
    def base_url(self) -> URL:
        return self._base_url

    @property
    def default_headers(self) -> dict[str, str]:
        return {
            HEADER_CONTENT_TYPE: JSON_CONTENT_TYPE,
            HEADER_ACCEPT: JSON_CONTENT_TYPE,
            HEADER_AUTHORIZATION: self._config.auth_header,
            HEADER_USER_AGENT: f"{USER_AGENT}/{__version__}",
        }

    def request(self, spec: RequestSpec, *, retry: RetryOverride = None) -> HttpResponse:
        """Send ``spec``, retrying transient failures.

        Args:
            spec: The request to perform.
            retry: ``False`` performs a single attempt. A ``RetryConfig`` or a
                mapping of its fields is merged over the client's policy.

        Returns:
            HttpResponse: ``data`` is None for 204 and empty responses.

        Raises:
            GorgiasError: The error of the last attempt, unwrapped.
        """
        retry_config = self._effective_retry_config(retry)
        if retry_config is None:
            return self._send(spec)

        return with_retry(
            lambda: self._send(spec), retry_config, self._logger, spec.trace_id
        )

    async def request_async(
        self, spec: RequestSpec, *, retry: RetryOverride = None
    ) -> HttpResponse:
        """Async version of :meth:`request`.

        Attempts can be aborted mid-flight through ``spec.cancel_token``.
        """
        retry_config = self._effective_retry_config(retry)
        if retry_config is None:
            return await self._send_async(spec)

        return await with_retry_async(
            partial(self._send_async, spec), retry_config, self._logger, spec.trace_id
        )

    def _effective_retry_config(self, override: RetryOverride) -> Optional[RetryConfig]:
        if override is False:
            return None
        return self._config.retry.merge(override)

    def _timeout_ms(self, spec: RequestSpec) -> float:
        return spec.timeout_ms if spec.timeout_ms is not None else self._config.timeout_ms

    def _build_request(
        self, client: Union[Client, AsyncClient], spec: RequestSpec, timeout_ms: float
    ) -> Request:
        headers = self.default_headers
        if spec.trace_id:
            headers[self._config.trace_id_header] = spec.trace_id
        headers.update(spec.headers)

        url = build_url(self._base_url, spec.path, spec.params)
        self._logger.debug(f"Request: {spec.method} {url}")

        return client.build_request(
            spec.method,
            url,
            headers=headers,
            json=spec.json,
            timeout=timeout_ms / 1000,
        )

    def _send(self, spec: RequestSpec) -> HttpResponse:
        timeout_ms = self._timeout_ms(spec)
        try:
            self._raise_if_cancelled(spec)
            request = self._build_request(self._client, spec, timeout_ms)
            started = time.monotonic()
            response = self._client.send(request)
            self._raise_if_cancelled(spec)
            # httpx timeouts are per I/O phase and custom transports may ignore them
            if (time.monotonic() - started) * 1000 > timeout_ms:
                response.close()
                raise RequestTimeoutError(timeout_ms, spec.trace_id)
            return self._handle_response(response, spec)
        except GorgiasError:
            raise
        except Exception as e:
            raise self._wrap_error(e, spec, timeout_ms) from e

    async def _send_async(self, spec: RequestSpec) -> HttpResponse:
        timeout_ms = self._timeout_ms(spec)
        loop = asyncio.get_running_loop()
        timeout_token = CancellationToken()
        timer = loop.call_later(timeout_ms / 1000, timeout_token.cancel)

        try:
            with CancellationToken.any_of(spec.cancel_token, timeout_token) as signal:
                self._raise_if_cancelled(spec)
                request = self._build_request(self._client_async, spec, timeout_ms)
                task = asyncio.ensure_future(self._client_async.send(request))
                signal.add_callback(lambda: loop.call_soon_threadsafe(task.cancel))

                try:
                    response = await task
                except asyncio.CancelledError:
                    if not signal.cancelled:
                        raise
                    self._raise_if_cancelled(spec)
                    raise RequestTimeoutError(timeout_ms, spec.trace_id) from None

                return self._handle_response(response, spec)
        except GorgiasError:
            raise
        except Exception as e:
            raise self._wrap_error(e, spec, timeout_ms) from e
        finally:
            timer.cancel()

    @staticmethod
    def _raise_if_cancelled(spec: RequestSpec) -> None:
        if spec.cancel_token is not None and spec.cancel_token.cancelled:
            raise NetworkError("Request cancelled", trace_id=spec.trace_id)

    def _handle_response(self, response: Response, spec: RequestSpec) -> HttpResponse:
        if not response.is_success:
            raise GorgiasAPIError.from_response(
                response.status_code,
                self._parse_error_body(response),
                RequestContext(method=spec.method, path=spec.path),
                response.headers,
                spec.trace_id,
            )

        if (
            response.status_code == 204
            or response.headers.get("content-length") == "0"
            or not response.content
        ):
            return HttpResponse(response.status_code, None, response.headers)

        return HttpResponse(response.status_code, response.json(), response.headers)

    @staticmethod
    def _parse_error_body(response: Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return None

    def _wrap_error(
        self, error: Exception, spec: RequestSpec, timeout_ms: float
    ) -> GorgiasError:
        if isinstance(error, TimeoutException):
            return RequestTimeoutError(timeout_ms, spec.trace_id)
        message = str(error) or type(error).__name__
        if isinstance(error, TransportError):
            self._logger.debug(f"Connection failure: {spec.method} {spec.path}: {message}")
            return NetworkError(message, error, spec.trace_id)
        return NetworkError(message or "Unknown error", error, spec.trace_id)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    async def aclose(self) -> None:
        if self._owns_async_client:
            await self._client_async.aclose()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
