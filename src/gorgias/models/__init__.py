from .customers import Customer, CustomerChannel, CustomerCreate, CustomerUpdate
from .errors import (
    AuthenticationError,
    ErrorCode,
    GorgiasAPIError,
    GorgiasError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    RequestContext,
    RequestTimeoutError,
    ValidationAPIError,
    ValidationError,
    extract_error_message,
)
from .events import Event
from .integrations import Integration, IntegrationHttp, IntegrationUser
from .messages import (
    Attachment,
    MessageParty,
    MessageSource,
    TicketMessage,
    TicketMessageCreate,
    TicketMessageUpdate,
)
from .paging import Page, PageMeta
from .tickets import (
    Tag,
    Ticket,
    TicketCreate,
    TicketCustomerRef,
    TicketStatus,
    TicketUpdate,
)
from .users import User, UserCreate, UserRole, UserUpdate

__all__ = [
    "Attachment",
    "AuthenticationError",
    "Customer",
    "CustomerChannel",
    "CustomerCreate",
    "CustomerUpdate",
    "ErrorCode",
    "Event",
    "GorgiasAPIError",
    "GorgiasError",
    "Integration",
    "IntegrationHttp",
    "IntegrationUser",
    "MessageParty",
    "MessageSource",
    "NetworkError",
    "NotFoundError",
    "Page",
    "PageMeta",
    "RateLimitError",
    "RequestContext",
    "RequestTimeoutError",
    "Tag",
    "Ticket",
    "TicketCreate",
    "TicketCustomerRef",
    "TicketMessage",
    "TicketMessageCreate",
    "TicketMessageUpdate",
    "TicketStatus",
    "TicketUpdate",
    "User",
    "UserCreate",
    "UserRole",
    "UserUpdate",
    "ValidationAPIError",
    "ValidationError",
    "extract_error_message",
]
