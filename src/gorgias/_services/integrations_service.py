from typing import AsyncIterator, Iterator, Optional

from .._utils import RequestOptions, RequestSpec
from .._utils._pagination import paginate, paginate_async
from .._utils.constants import DEFAULT_PAGE_SIZE
from ..models import Integration, Page
from ._base_service import BaseService


class IntegrationsService(BaseService):
    """Read-only access to the integrations connected to the account."""

    def list(
        self,
        *,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
        options: Optional[RequestOptions] = None,
    ) -> Page[Integration]:
        spec = self._list_spec(limit, cursor, options)
        return self._parse(Page[Integration], self.request(spec, options))

    async def list_async(
        self,
        *,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
        options: Optional[RequestOptions] = None,
    ) -> Page[Integration]:
        spec = self._list_spec(limit, cursor, options)
        return self._parse(Page[Integration], await self.request_async(spec, options))

    def list_all(
        self,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        options: Optional[RequestOptions] = None,
    ) -> Iterator[Integration]:
        return paginate(
            lambda cursor, limit: self.list(cursor=cursor, limit=limit, options=options),
            page_size,
            options.cancel_token if options else None,
        )

    def list_all_async(
        self,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        options: Optional[RequestOptions] = None,
    ) -> AsyncIterator[Integration]:
        return paginate_async(
            lambda cursor, limit: self.list_async(
                cursor=cursor, limit=limit, options=options
            ),
            page_size,
            options.cancel_token if options else None,
        )

    def retrieve(
        self, integration_id: int, *, options: Optional[RequestOptions] = None
    ) -> Integration:
        spec = self._retrieve_spec(integration_id, options)
        return self._parse(Integration, self.request(spec, options))

    async def retrieve_async(
        self, integration_id: int, *, options: Optional[RequestOptions] = None
    ) -> Integration:
        spec = self._retrieve_spec(integration_id, options)
        return self._parse(Integration, await self.request_async(spec, options))

    def _list_spec(
        self,
        limit: Optional[int],
        cursor: Optional[str],
        options: Optional[RequestOptions],
    ) -> RequestSpec:
        return self._spec(
            "GET",
            "integrations",
            params={"limit": limit, "cursor": cursor},
            options=options,
        )

    def _retrieve_spec(
        self, integration_id: int, options: Optional[RequestOptions]
    ) -> RequestSpec:
        self._validate_resource_id(integration_id, "integration")
        return self._spec("GET", f"integrations/{integration_id}", options=options)
