from typing import AsyncIterator, Iterator, Optional

from .._utils import RequestOptions, RequestSpec
from .._utils._pagination import paginate, paginate_async
from .._utils.constants import DEFAULT_PAGE_SIZE
from ..models import Event, Page
from ._base_service import BaseService


class EventsService(BaseService):
    """Read-only access to the audit events of the account.

    Events record changes to tickets, customers and other objects. They can be
    filtered by the object they concern, by event type or by the user who
    caused them.
    """

    def list(
        self,
        *,
        object_type: Optional[str] = None,
        object_id: Optional[int] = None,
        type: Optional[str] = None,
        user_id: Optional[int] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
        options: Optional[RequestOptions] = None,
    ) -> Page[Event]:
        """List one page of events.

        Args:
            object_type: Only events about this kind of object, e.g. ``Ticket``.
            object_id: Only events about the object with this id.
            type: Only events of this type, e.g. ``ticket-created``.
            user_id: Only events caused by this user.
            limit: Page size.
            cursor: Cursor of the page to fetch.
            options: Per-call overrides.

        Returns:
            Page[Event]: The requested page.

        Examples:
            ```python
            from gorgias import Gorgias

            client = Gorgias()

            page = client.events.list(object_type="Ticket", object_id=1234)
            ```
        """
        spec = self._list_spec(
            object_type, object_id, type, user_id, limit, cursor, options
        )
        return self._parse(Page[Event], self.request(spec, options))

    async def list_async(
        self,
        *,
        object_type: Optional[str] = None,
        object_id: Optional[int] = None,
        type: Optional[str] = None,
        user_id: Optional[int] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
        options: Optional[RequestOptions] = None,
    ) -> Page[Event]:
        spec = self._list_spec(
            object_type, object_id, type, user_id, limit, cursor, options
        )
        return self._parse(Page[Event], await self.request_async(spec, options))

    def list_all(
        self,
        *,
        object_type: Optional[str] = None,
        object_id: Optional[int] = None,
        type: Optional[str] = None,
        user_id: Optional[int] = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        options: Optional[RequestOptions] = None,
    ) -> Iterator[Event]:
        return paginate(
            lambda cursor, limit: self.list(
                object_type=object_type,
                object_id=object_id,
                type=type,
                user_id=user_id,
                cursor=cursor,
                limit=limit,
                options=options,
            ),
            page_size,
            options.cancel_token if options else None,
        )

    def list_all_async(
        self,
        *,
        object_type: Optional[str] = None,
        object_id: Optional[int] = None,
        type: Optional[str] = None,
        user_id: Optional[int] = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        options: Optional[RequestOptions] = None,
    ) -> AsyncIterator[Event]:
        return paginate_async(
            lambda cursor, limit: self.list_async(
                object_type=object_type,
                object_id=object_id,
                type=type,
                user_id=user_id,
                cursor=cursor,
                limit=limit,
                options=options,
            ),
            page_size,
            options.cancel_token if options else None,
        )

    def retrieve(self, event_id: int, *, options: Optional[RequestOptions] = None) -> Event:
        spec = self._retrieve_spec(event_id, options)
        return self._parse(Event, self.request(spec, options))

    async def retrieve_async(
        self, event_id: int, *, options: Optional[RequestOptions] = None
    ) -> Event:
        spec = self._retrieve_spec(event_id, options)
        return self._parse(Event, await self.request_async(spec, options))

    def _list_spec(
        self,
        object_type: Optional[str],
        object_id: Optional[int],
        type: Optional[str],
        user_id: Optional[int],
        limit: Optional[int],
        cursor: Optional[str],
        options: Optional[RequestOptions],
    ) -> RequestSpec:
        return self._spec(
            "GET",
            "events",
            params={
                "object_type": object_type,
                "object_id": object_id,
                "type": type,
                "user_id": user_id,
                "limit": limit,
                "cursor": cursor,
            },
            options=options,
        )

    def _retrieve_spec(
        self, event_id: int, options: Optional[RequestOptions]
    ) -> RequestSpec:
        self._validate_resource_id(event_id, "event")
        return self._spec("GET", f"events/{event_id}", options=options)
