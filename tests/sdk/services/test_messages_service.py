import json

import pytest
from pytest_httpx import HTTPXMock

from gorgias._services import HttpClient, MessagesService
from gorgias.models import TicketMessage, TicketMessageCreate
from gorgias.models.errors import ValidationError


@pytest.fixture
def service(http_client: HttpClient) -> MessagesService:
    return MessagesService(http_client)


def message_json(message_id: int, ticket_id: int = 10) -> dict:
    return {
        "id": message_id,
        "ticket_id": ticket_id,
        "channel": "email",
        "body_text": f"Message {message_id}",
        "source": {
            "type": "email",
            "from": {"address": "jane@example.com"},
            "to": [{"address": "support@acme.com"}],
        },
    }


class TestMessagesService:
    class TestForTicket:
        def test_list_for_ticket(
            self, httpx_mock: HTTPXMock, service: MessagesService, base_url: str
        ) -> None:
            httpx_mock.add_response(
                url=f"{base_url}tickets/10/messages?limit=5",
                json={"data": [message_json(1)], "meta": {"next_cursor": None}},
            )

            page = service.list_for_ticket(10, limit=5)

            message = page.data[0]
            assert isinstance(message, TicketMessage)
            assert message.source is not None
            assert message.source.from_ is not None
            assert message.source.from_.address == "jane@example.com"

        def test_list_all_for_ticket(
            self, httpx_mock: HTTPXMock, service: MessagesService, base_url: str
        ) -> None:
            httpx_mock.add_response(
                url=f"{base_url}tickets/10/messages?limit=100",
                json={"data": [message_json(1)], "meta": {"next_cursor": "m2"}},
            )
            httpx_mock.add_response(
                url=f"{base_url}tickets/10/messages?limit=100&cursor=m2",
                json={"data": [message_json(2)], "meta": {"next_cursor": None}},
            )

            ids = [m.id for m in service.list_all_for_ticket(10)]

            assert ids == [1, 2]

        def test_list_all_for_ticket_validates_eagerly(
            self, service: MessagesService
        ) -> None:
            with pytest.raises(ValidationError) as exc_info:
                service.list_all_for_ticket(0)

            assert exc_info.value.field == "ticket_id"

        def test_create_on_ticket(
            self, httpx_mock: HTTPXMock, service: MessagesService, base_url: str
        ) -> None:
            httpx_mock.add_response(
                method="POST",
                url=f"{base_url}tickets/10/messages",
                status_code=201,
                json=message_json(3),
            )

            message = service.create(
                10,
                TicketMessageCreate(
                    channel="email", via="api", from_agent=True, body_text="Shipped!"
                ),
            )

            assert message.id == 3
            sent_request = httpx_mock.get_request()
            assert sent_request is not None
            assert json.loads(sent_request.read()) == {
                "channel": "email",
                "via": "api",
                "from_agent": True,
                "body_text": "Shipped!",
            }

        def test_create_invalid_ticket(self, service: MessagesService) -> None:
            with pytest.raises(ValidationError) as exc_info:
                service.create(-1, {"body_text": "x"})

            assert exc_info.value.field == "ticket_id"

    class TestAccountWide:
        def test_list(
            self, httpx_mock: HTTPXMock, service: MessagesService, base_url: str
        ) -> None:
            httpx_mock.add_response(
                url=f"{base_url}messages?cursor=abc",
                json={"data": [message_json(4)], "meta": {}},
            )

            page = service.list(cursor="abc")

            assert page.data[0].id == 4

        def test_retrieve_update_delete(
            self, httpx_mock: HTTPXMock, service: MessagesService, base_url: str
        ) -> None:
            httpx_mock.add_response(
                method="GET", url=f"{base_url}messages/4", json=message_json(4)
            )
            httpx_mock.add_response(
                method="PUT", url=f"{base_url}messages/4", json=message_json(4)
            )
            httpx_mock.add_response(
                method="DELETE", url=f"{base_url}messages/4", status_code=204
            )

            assert service.retrieve(4).id == 4
            assert service.update(4, {"body_text": "edited"}).id == 4
            service.delete(4)

            methods = [r.method for r in httpx_mock.get_requests()]
            assert methods == ["GET", "PUT", "DELETE"]

        def test_invalid_message_id(self, service: MessagesService) -> None:
            with pytest.raises(ValidationError) as exc_info:
                service.retrieve(0)

            assert exc_info.value.field == "message_id"

        @pytest.mark.asyncio
        async def test_list_all_async(
            self, httpx_mock: HTTPXMock, service: MessagesService, base_url: str
        ) -> None:
            httpx_mock.add_response(
                url=f"{base_url}messages?limit=100",
                json={"data": [message_json(5), message_json(6)], "meta": {}},
            )

            ids = [m.id async for m in service.list_all_async()]

            assert ids == [5, 6]
            await service._http.aclose()
