from ._http_client import HttpClient, HttpResponse, build_url
from .customers_service import CustomersService
from .events_service import EventsService
from .integrations_service import IntegrationsService
from .messages_service import MessagesService
from .tickets_service import TicketsService
from .users_service import UsersService

__all__ = [
    "HttpClient",
    "HttpResponse",
    "build_url",
    "CustomersService",
    "EventsService",
    "IntegrationsService",
    "MessagesService",
    "TicketsService",
    "UsersService",
]
