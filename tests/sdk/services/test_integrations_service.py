import pytest
from pytest_httpx import HTTPXMock

from gorgias._services import HttpClient, IntegrationsService
from gorgias.models import Integration
from gorgias.models.errors import ValidationError


@pytest.fixture
def service(http_client: HttpClient) -> IntegrationsService:
    return IntegrationsService(http_client)


class TestIntegrationsService:
    def test_list(
        self, httpx_mock: HTTPXMock, service: IntegrationsService, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}integrations",
            json={
                "data": [
                    {
                        "id": 1,
                        "name": "Order status",
                        "type": "http",
                        "http": {"url": "https://hooks.acme.com/orders"},
                    }
                ],
                "meta": {"next_cursor": None},
            },
        )

        page = service.list()

        integration = page.data[0]
        assert isinstance(integration, Integration)
        assert integration.http is not None
        assert integration.http.url == "https://hooks.acme.com/orders"

    def test_list_all(
        self, httpx_mock: HTTPXMock, service: IntegrationsService, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}integrations?limit=10",
            json={"data": [{"id": 1}], "meta": {"next_cursor": "i2"}},
        )
        httpx_mock.add_response(
            url=f"{base_url}integrations?limit=10&cursor=i2",
            json={"data": [{"id": 2}], "meta": {"next_cursor": None}},
        )

        assert [i.id for i in service.list_all(page_size=10)] == [1, 2]

    def test_retrieve(
        self, httpx_mock: HTTPXMock, service: IntegrationsService, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}integrations/5", json={"id": 5, "type": "shopify"}
        )

        assert service.retrieve(5).type == "shopify"

    def test_invalid_id(self, service: IntegrationsService) -> None:
        with pytest.raises(ValidationError) as exc_info:
            service.retrieve(2.5)  # type: ignore[arg-type]

        assert exc_info.value.field == "integration_id"
        assert exc_info.value.constraint == "integer"

    @pytest.mark.asyncio
    async def test_list_async(
        self, httpx_mock: HTTPXMock, service: IntegrationsService, base_url: str
    ) -> None:
        httpx_mock.add_response(url=f"{base_url}integrations", json={"data": []})

        page = await service.list_async()

        assert page.data == []
        await service._http.aclose()
