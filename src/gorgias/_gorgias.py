from logging import getLogger
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from dotenv import load_dotenv
from httpx import AsyncClient, Client

from ._config import Config, RetryConfig
from ._services import (
    CustomersService,
    EventsService,
    HttpClient,
    IntegrationsService,
    MessagesService,
    TicketsService,
    UsersService,
)
from ._utils._auth import resolve_config
from ._utils._retry import Logger
from ._utils.constants import DOTENV_FILE


class Gorgias:
    """Client for the Gorgias helpdesk REST API.

    Settings not passed explicitly are read from the environment
    (``GORGIAS_SUBDOMAIN``, ``GORGIAS_EMAIL``, ``GORGIAS_API_KEY`` and
    ``GORGIAS_BASE_URL``), after loading a ``.env`` file if one is present.

    Examples:
        ```python
        from gorgias import Gorgias

        with Gorgias(subdomain="acme", email="ops@acme.com", api_key="...") as client:
            ticket = client.tickets.retrieve(1234)
            for message in client.messages.list_all_for_ticket(ticket.id):
                print(message.body_text)
        ```
    """

    def __init__(
        self,
        *,
        subdomain: Optional[str] = None,
        email: Optional[str] = None,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_ms: Optional[float] = None,
        retry: Union[RetryConfig, Mapping[str, Any], None] = None,
        trace_id_header: Optional[str] = None,
        http_client: Optional[Client] = None,
        async_http_client: Optional[AsyncClient] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        load_dotenv(Path.cwd() / DOTENV_FILE)
        credentials = resolve_config(subdomain, email, api_key, base_url)

        config_kwargs: dict[str, Any] = {
            "subdomain": credentials.subdomain,
            "email": credentials.email,
            "api_key": credentials.api_key,
            "base_url": credentials.base_url,
            "retry": RetryConfig().merge(retry),
        }
        resolved_timeout = timeout_ms if timeout_ms is not None else credentials.timeout_ms
        if resolved_timeout is not None:
            config_kwargs["timeout_ms"] = resolved_timeout
        if trace_id_header:
            config_kwargs["trace_id_header"] = trace_id_header
        self._config = Config.model_validate(config_kwargs)

        log = logger or getLogger("gorgias")
        log.debug(f"Gorgias client for {self._config.api_base_url}")

        self._http = HttpClient(
            self._config,
            client=http_client,
            async_client=async_http_client,
            logger=logger,
        )
        self._customers = CustomersService(self._http)
        self._tickets = TicketsService(self._http)
        self._messages = MessagesService(self._http)
        self._users = UsersService(self._http)
        self._integrations = IntegrationsService(self._http)
        self._events = EventsService(self._http)

    @property
    def subdomain(self) -> str:
        return self._config.subdomain

    @property
    def email(self) -> str:
        return self._config.email

    @property
    def config(self) -> Config:
        return self._config

    @property
    def http(self) -> HttpClient:
        return self._http

    @property
    def customers(self) -> CustomersService:
        return self._customers

    @property
    def tickets(self) -> TicketsService:
        return self._tickets

    @property
    def messages(self) -> MessagesService:
        return self._messages

    @property
    def users(self) -> UsersService:
        return self._users

    @property
    def integrations(self) -> IntegrationsService:
        return self._integrations

    @property
    def events(self) -> EventsService:
        return self._events

    def close(self) -> None:
        self._http.close()

    async def aclose(self) -> None:
        """Release both the async and the sync connection pools."""
        await self._http.aclose()
        self._http.close()

    def __enter__(self) -> "Gorgias":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    async def __aenter__(self) -> "Gorgias":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
