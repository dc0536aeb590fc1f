from typing import Any, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .._utils import HttpMethod, QueryValue, RequestOptions, RequestSpec
from .._utils._validation import validate_id
from ..models.errors import NetworkError
from ._http_client import HttpClient

Payload = Union[BaseModel, Mapping[str, Any]]
M = TypeVar("M", bound=BaseModel)


class BaseService:
    """Common plumbing for the resource services.

    Services describe each endpoint with a ``_*_spec`` builder shared by the sync
    and async variants of a method, then send it through the shared
    :class:`HttpClient`.
    """

    def __init__(self, http: HttpClient) -> None:
        self._http = http

    def request(self, spec: RequestSpec, options: Optional[RequestOptions] = None) -> Any:
        """Send ``spec`` and return the decoded JSON body (None when empty)."""
        retry = options.retry if options is not None else None
        return self._http.request(spec, retry=retry).data

    async def request_async(
        self, spec: RequestSpec, options: Optional[RequestOptions] = None
    ) -> Any:
        retry = options.retry if options is not None else None
        return (await self._http.request_async(spec, retry=retry)).data

    @staticmethod
    def _spec(
        method: HttpMethod,
        path: str,
        *,
        params: Optional[Mapping[str, QueryValue]] = None,
        json: Any = None,
        options: Optional[RequestOptions] = None,
    ) -> RequestSpec:
        options = options or RequestOptions()
        return RequestSpec(
            method=method,
            path=path,
            params=dict(params or {}),
            json=json,
            timeout_ms=options.timeout_ms,
            cancel_token=options.cancel_token,
            trace_id=options.trace_id,
        )

    @staticmethod
    def _validate_resource_id(value: Any, resource_name: str) -> None:
        validate_id(value, f"{resource_name}_id")

    @staticmethod
    def _payload(data: Payload) -> dict[str, Any]:
        if isinstance(data, BaseModel):
            return data.model_dump(mode="json", by_alias=True, exclude_none=True)
        return dict(data)

    @staticmethod
    def _parse(model: Type[M], data: Any) -> M:
        """Validate a response body into ``model``.

        Missing or malformed bodies are reported as :class:`NetworkError`, the
        same kind used for unparsable responses.
        """
        name = getattr(model, "__name__", "response")
        if data is None:
            raise NetworkError(f"Empty response body, expected {name}")
        try:
            return model.model_validate(data)
        except PydanticValidationError as e:
            raise NetworkError(f"Unexpected {name} response body: {e}", e) from e
