from typing import AsyncIterator, Iterator, List, Optional

from .._utils import RequestOptions, RequestSpec
from .._utils._pagination import paginate, paginate_async
from .._utils._validation import validate_non_empty_list
from .._utils.constants import DEFAULT_PAGE_SIZE
from ..models import Page, Tag, Ticket
from ._base_service import BaseService, Payload


class TicketsService(BaseService):
    """Service for managing Gorgias tickets and their tags."""

    def list(
        self,
        *,
        customer_id: Optional[int] = None,
        assignee_user_id: Optional[int] = None,
        status: Optional[str] = None,
        channel: Optional[str] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
        order_by: Optional[str] = None,
        options: Optional[RequestOptions] = None,
    ) -> Page[Ticket]:
        """List one page of tickets.

        Args:
            customer_id: Only tickets of this customer.
            assignee_user_id: Only tickets assigned to this user.
            status: Only tickets with this status (``open``, ``closed``, ...).
            channel: Only tickets from this channel (``email``, ``chat``, ...).
            limit: Page size.
            cursor: Cursor returned in ``meta.next_cursor`` of the previous page.
            order_by: Sort expression, e.g. ``created_datetime:desc``.
            options: Per-call timeout, cancellation, retry and trace overrides.

        Returns:
            Page[Ticket]: The page, with the cursor of the next one in ``meta``.

        Examples:
            ```python
            from gorgias import Gorgias

            client = Gorgias()

            page = client.tickets.list(status="open", limit=30)
            ```
        """
        spec = self._list_spec(
            customer_id=customer_id,
            assignee_user_id=assignee_user_id,
            status=status,
            channel=channel,
            limit=limit,
            cursor=cursor,
            order_by=order_by,
            options=options,
        )
        return self._parse(Page[Ticket], self.request(spec, options))

    async def list_async(
        self,
        *,
        customer_id: Optional[int] = None,
        assignee_user_id: Optional[int] = None,
        status: Optional[str] = None,
        channel: Optional[str] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
        order_by: Optional[str] = None,
        options: Optional[RequestOptions] = None,
    ) -> Page[Ticket]:
        """Asynchronously list one page of tickets."""
        spec = self._list_spec(
            customer_id=customer_id,
            assignee_user_id=assignee_user_id,
            status=status,
            channel=channel,
            limit=limit,
            cursor=cursor,
            order_by=order_by,
            options=options,
        )
        return self._parse(Page[Ticket], await self.request_async(spec, options))

    def list_all(
        self,
        *,
        customer_id: Optional[int] = None,
        assignee_user_id: Optional[int] = None,
        status: Optional[str] = None,
        channel: Optional[str] = None,
        order_by: Optional[str] = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        options: Optional[RequestOptions] = None,
    ) -> Iterator[Ticket]:
        """Iterate over all matching tickets, fetching pages as needed.

        ``options.cancel_token`` also stops the iteration between pages.

        Examples:
            ```python
            for ticket in client.tickets.list_all(status="open"):
                print(ticket.id, ticket.subject)
            ```
        """
        return paginate(
            lambda cursor, limit: self.list(
                customer_id=customer_id,
                assignee_user_id=assignee_user_id,
                status=status,
                channel=channel,
                order_by=order_by,
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
        customer_id: Optional[int] = None,
        assignee_user_id: Optional[int] = None,
        status: Optional[str] = None,
        channel: Optional[str] = None,
        order_by: Optional[str] = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        options: Optional[RequestOptions] = None,
    ) -> AsyncIterator[Ticket]:
        """Async version of :meth:`list_all`, for use with ``async for``."""
        return paginate_async(
            lambda cursor, limit: self.list_async(
                customer_id=customer_id,
                assignee_user_id=assignee_user_id,
                status=status,
                channel=channel,
                order_by=order_by,
                cursor=cursor,
                limit=limit,
                options=options,
            ),
            page_size,
            options.cancel_token if options else None,
        )

    def retrieve(
        self, ticket_id: int, *, options: Optional[RequestOptions] = None
    ) -> Ticket:
        """Retrieve a ticket by id.

        Raises:
            ValidationError: If ``ticket_id`` is not a positive integer.
            NotFoundError: If the ticket does not exist.
        """
        spec = self._retrieve_spec(ticket_id, options)
        return self._parse(Ticket, self.request(spec, options))

    async def retrieve_async(
        self, ticket_id: int, *, options: Optional[RequestOptions] = None
    ) -> Ticket:
        spec = self._retrieve_spec(ticket_id, options)
        return self._parse(Ticket, await self.request_async(spec, options))

    def create(
        self, data: Payload, *, options: Optional[RequestOptions] = None
    ) -> Ticket:
        """Create a ticket.

        Args:
            data: A :class:`TicketCreate` or an equivalent mapping.
            options: Per-call overrides.

        Returns:
            Ticket: The created ticket.
        """
        spec = self._spec(
            "POST", "tickets", json=self._payload(data), options=options
        )
        return self._parse(Ticket, self.request(spec, options))

    async def create_async(
        self, data: Payload, *, options: Optional[RequestOptions] = None
    ) -> Ticket:
        spec = self._spec(
            "POST", "tickets", json=self._payload(data), options=options
        )
        return self._parse(Ticket, await self.request_async(spec, options))

    def update(
        self,
        ticket_id: int,
        data: Payload,
        *,
        options: Optional[RequestOptions] = None,
    ) -> Ticket:
        spec = self._update_spec(ticket_id, data, options)
        return self._parse(Ticket, self.request(spec, options))

    async def update_async(
        self,
        ticket_id: int,
        data: Payload,
        *,
        options: Optional[RequestOptions] = None,
    ) -> Ticket:
        spec = self._update_spec(ticket_id, data, options)
        return self._parse(Ticket, await self.request_async(spec, options))

    def delete(self, ticket_id: int, *, options: Optional[RequestOptions] = None) -> None:
        self.request(self._delete_spec(ticket_id, options), options)

    async def delete_async(
        self, ticket_id: int, *, options: Optional[RequestOptions] = None
    ) -> None:
        await self.request_async(self._delete_spec(ticket_id, options), options)

    def add_tags(
        self,
        ticket_id: int,
        tags: List[str],
        *,
        options: Optional[RequestOptions] = None,
    ) -> None:
        """Add tags to a ticket, keeping the ones it already has.

        Raises:
            ValidationError: If ``tags`` is empty.
        """
        self.request(self._tags_spec("POST", ticket_id, tags, options), options)

    async def add_tags_async(
        self,
        ticket_id: int,
        tags: List[str],
        *,
        options: Optional[RequestOptions] = None,
    ) -> None:
        await self.request_async(self._tags_spec("POST", ticket_id, tags, options), options)

    def remove_tags(
        self,
        ticket_id: int,
        tags: List[str],
        *,
        options: Optional[RequestOptions] = None,
    ) -> None:
        """Remove the given tags from a ticket.

        Raises:
            ValidationError: If ``tags`` is empty.
        """
        self.request(self._tags_spec("DELETE", ticket_id, tags, options), options)

    async def remove_tags_async(
        self,
        ticket_id: int,
        tags: List[str],
        *,
        options: Optional[RequestOptions] = None,
    ) -> None:
        await self.request_async(
            self._tags_spec("DELETE", ticket_id, tags, options), options
        )

    def set_tags(
        self,
        ticket_id: int,
        tags: List[str],
        *,
        options: Optional[RequestOptions] = None,
    ) -> None:
        """Replace all tags of a ticket. An empty list clears them."""
        self.request(self._tags_spec("PUT", ticket_id, tags, options), options)

    async def set_tags_async(
        self,
        ticket_id: int,
        tags: List[str],
        *,
        options: Optional[RequestOptions] = None,
    ) -> None:
        spec = self._tags_spec("PUT", ticket_id, tags, options)
        await self.request_async(spec, options)

    def list_tags(
        self, ticket_id: int, *, options: Optional[RequestOptions] = None
    ) -> List[Tag]:
        spec = self._list_tags_spec(ticket_id, options)
        data = self.request(spec, options)
        return [self._parse(Tag, tag) for tag in self._tag_items(data)]

    async def list_tags_async(
        self, ticket_id: int, *, options: Optional[RequestOptions] = None
    ) -> List[Tag]:
        spec = self._list_tags_spec(ticket_id, options)
        data = await self.request_async(spec, options)
        return [self._parse(Tag, tag) for tag in self._tag_items(data)]

    def _list_spec(
        self,
        *,
        customer_id: Optional[int],
        assignee_user_id: Optional[int],
        status: Optional[str],
        channel: Optional[str],
        limit: Optional[int],
        cursor: Optional[str],
        order_by: Optional[str],
        options: Optional[RequestOptions],
    ) -> RequestSpec:
        return self._spec(
            "GET",
            "tickets",
            params={
                "customer_id": customer_id,
                "assignee_user_id": assignee_user_id,
                "status": status,
                "channel": channel,
                "limit": limit,
                "cursor": cursor,
                "order_by": order_by,
            },
            options=options,
        )

    def _retrieve_spec(
        self, ticket_id: int, options: Optional[RequestOptions]
    ) -> RequestSpec:
        self._validate_resource_id(ticket_id, "ticket")
        return self._spec("GET", f"tickets/{ticket_id}", options=options)

    def _update_spec(
        self, ticket_id: int, data: Payload, options: Optional[RequestOptions]
    ) -> RequestSpec:
        self._validate_resource_id(ticket_id, "ticket")
        return self._spec(
            "PUT",
            f"tickets/{ticket_id}",
            json=self._payload(data),
            options=options,
        )

    def _delete_spec(
        self, ticket_id: int, options: Optional[RequestOptions]
    ) -> RequestSpec:
        self._validate_resource_id(ticket_id, "ticket")
        return self._spec("DELETE", f"tickets/{ticket_id}", options=options)

    def _tags_spec(
        self,
        method: str,
        ticket_id: int,
        tags: List[str],
        options: Optional[RequestOptions],
    ) -> RequestSpec:
        self._validate_resource_id(ticket_id, "ticket")
        if method != "PUT":
            validate_non_empty_list(tags, "tags")
        return self._spec(
            method,  # type: ignore[arg-type]
            f"tickets/{ticket_id}/tags",
            json={"tags": list(tags)},
            options=options,
        )

    def _list_tags_spec(
        self, ticket_id: int, options: Optional[RequestOptions]
    ) -> RequestSpec:
        self._validate_resource_id(ticket_id, "ticket")
        return self._spec("GET", f"tickets/{ticket_id}/tags", options=options)

    @staticmethod
    def _tag_items(data: object) -> list:
        # the endpoint answers with either a bare list or a list envelope
        if isinstance(data, dict):
            return data.get("data", [])
        return data or []
