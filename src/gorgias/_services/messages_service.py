from typing import AsyncIterator, Iterator, Optional

from .._utils import RequestOptions, RequestSpec
from .._utils._pagination import paginate, paginate_async
from .._utils.constants import DEFAULT_PAGE_SIZE
from ..models import Page, TicketMessage
from ._base_service import BaseService, Payload


class MessagesService(BaseService):
    """Service for the messages posted on tickets.

    Messages are listed either for one ticket (``tickets/{id}/messages``) or
    across the whole account (``messages``). New messages are always created
    on a ticket.
    """

    def list_for_ticket(
        self,
        ticket_id: int,
        *,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
        options: Optional[RequestOptions] = None,
    ) -> Page[TicketMessage]:
        """List one page of the messages of a ticket.

        Args:
            ticket_id: Id of the ticket.
            limit: Page size.
            cursor: Cursor of the page to fetch.
            options: Per-call overrides.

        Returns:
            Page[TicketMessage]: The requested page, oldest messages first.

        Examples:
            ```python
            from gorgias import Gorgias

            client = Gorgias()

            for message in client.messages.list_for_ticket(1234).data:
                print(message.body_text)
            ```
        """
        spec = self._list_for_ticket_spec(ticket_id, limit, cursor, options)
        return self._parse(Page[TicketMessage], self.request(spec, options))

    async def list_for_ticket_async(
        self,
        ticket_id: int,
        *,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
        options: Optional[RequestOptions] = None,
    ) -> Page[TicketMessage]:
        spec = self._list_for_ticket_spec(ticket_id, limit, cursor, options)
        return self._parse(Page[TicketMessage], await self.request_async(spec, options))

    def list_all_for_ticket(
        self,
        ticket_id: int,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        options: Optional[RequestOptions] = None,
    ) -> Iterator[TicketMessage]:
        """Iterate over all the messages of a ticket.

        ``ticket_id`` is validated when this method is called, not on the
        first iteration.
        """
        self._validate_resource_id(ticket_id, "ticket")
        return paginate(
            lambda cursor, limit: self.list_for_ticket(
                ticket_id, cursor=cursor, limit=limit, options=options
            ),
            page_size,
            options.cancel_token if options else None,
        )

    def list_all_for_ticket_async(
        self,
        ticket_id: int,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        options: Optional[RequestOptions] = None,
    ) -> AsyncIterator[TicketMessage]:
        self._validate_resource_id(ticket_id, "ticket")
        return paginate_async(
            lambda cursor, limit: self.list_for_ticket_async(
                ticket_id, cursor=cursor, limit=limit, options=options
            ),
            page_size,
            options.cancel_token if options else None,
        )

    def list(
        self,
        *,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
        options: Optional[RequestOptions] = None,
    ) -> Page[TicketMessage]:
        """List one page of messages across all tickets."""
        spec = self._list_spec(limit, cursor, options)
        return self._parse(Page[TicketMessage], self.request(spec, options))

    async def list_async(
        self,
        *,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
        options: Optional[RequestOptions] = None,
    ) -> Page[TicketMessage]:
        spec = self._list_spec(limit, cursor, options)
        return self._parse(Page[TicketMessage], await self.request_async(spec, options))

    def list_all(
        self,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        options: Optional[RequestOptions] = None,
    ) -> Iterator[TicketMessage]:
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
    ) -> AsyncIterator[TicketMessage]:
        return paginate_async(
            lambda cursor, limit: self.list_async(
                cursor=cursor, limit=limit, options=options
            ),
            page_size,
            options.cancel_token if options else None,
        )

    def retrieve(
        self, message_id: int, *, options: Optional[RequestOptions] = None
    ) -> TicketMessage:
        spec = self._retrieve_spec(message_id, options)
        return self._parse(TicketMessage, self.request(spec, options))

    async def retrieve_async(
        self, message_id: int, *, options: Optional[RequestOptions] = None
    ) -> TicketMessage:
        spec = self._retrieve_spec(message_id, options)
        return self._parse(TicketMessage, await self.request_async(spec, options))

    def create(
        self,
        ticket_id: int,
        data: Payload,
        *,
        options: Optional[RequestOptions] = None,
    ) -> TicketMessage:
        """Post a new message on a ticket.

        Args:
            ticket_id: Id of the ticket the message belongs to.
            data: A :class:`TicketMessageCreate` or an equivalent mapping.
            options: Per-call overrides.

        Returns:
            TicketMessage: The created message.

        Examples:
            ```python
            from gorgias.models import TicketMessageCreate

            client.messages.create(
                1234,
                TicketMessageCreate(
                    channel="email",
                    via="api",
                    from_agent=True,
                    body_text="Your order has shipped.",
                ),
            )
            ```
        """
        spec = self._create_spec(ticket_id, data, options)
        return self._parse(TicketMessage, self.request(spec, options))

    async def create_async(
        self,
        ticket_id: int,
        data: Payload,
        *,
        options: Optional[RequestOptions] = None,
    ) -> TicketMessage:
        spec = self._create_spec(ticket_id, data, options)
        return self._parse(TicketMessage, await self.request_async(spec, options))

    def update(
        self,
        message_id: int,
        data: Payload,
        *,
        options: Optional[RequestOptions] = None,
    ) -> TicketMessage:
        spec = self._update_spec(message_id, data, options)
        return self._parse(TicketMessage, self.request(spec, options))

    async def update_async(
        self,
        message_id: int,
        data: Payload,
        *,
        options: Optional[RequestOptions] = None,
    ) -> TicketMessage:
        spec = self._update_spec(message_id, data, options)
        return self._parse(TicketMessage, await self.request_async(spec, options))

    def delete(
        self, message_id: int, *, options: Optional[RequestOptions] = None
    ) -> None:
        self.request(self._delete_spec(message_id, options), options)

    async def delete_async(
        self, message_id: int, *, options: Optional[RequestOptions] = None
    ) -> None:
        await self.request_async(self._delete_spec(message_id, options), options)

    def _list_for_ticket_spec(
        self,
        ticket_id: int,
        limit: Optional[int],
        cursor: Optional[str],
        options: Optional[RequestOptions],
    ) -> RequestSpec:
        self._validate_resource_id(ticket_id, "ticket")
        return self._spec(
            "GET",
            f"tickets/{ticket_id}/messages",
            params={"limit": limit, "cursor": cursor},
            options=options,
        )

    def _list_spec(
        self,
        limit: Optional[int],
        cursor: Optional[str],
        options: Optional[RequestOptions],
    ) -> RequestSpec:
        return self._spec(
            "GET", "messages", params={"limit": limit, "cursor": cursor}, options=options
        )

    def _retrieve_spec(
        self, message_id: int, options: Optional[RequestOptions]
    ) -> RequestSpec:
        self._validate_resource_id(message_id, "message")
        return self._spec("GET", f"messages/{message_id}", options=options)

    def _create_spec(
        self, ticket_id: int, data: Payload, options: Optional[RequestOptions]
    ) -> RequestSpec:
        self._validate_resource_id(ticket_id, "ticket")
        return self._spec(
            "POST",
            f"tickets/{ticket_id}/messages",
            json=self._payload(data),
            options=options,
        )

    def _update_spec(
        self, message_id: int, data: Payload, options: Optional[RequestOptions]
    ) -> RequestSpec:
        self._validate_resource_id(message_id, "message")
        return self._spec(
            "PUT", f"messages/{message_id}", json=self._payload(data), options=options
        )

    def _delete_spec(
        self, message_id: int, options: Optional[RequestOptions]
    ) -> RequestSpec:
        self._validate_resource_id(message_id, "message")
        return self._spec("DELETE", f"messages/{message_id}", options=options)
