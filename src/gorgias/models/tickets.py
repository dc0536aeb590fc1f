from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .customers import Customer
from .messages import TicketMessage, TicketMessageCreate
from .users import User


class TicketStatus(str, Enum):
    OPEN = "open"
    CLOSED = "closed"
    SNOOZED = "snoozed"
    TRASHED = "trashed"
    SPAM = "spam"


class Tag(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str
    id: Optional[int] = None
    decoration: Optional[Dict[str, Any]] = None


class Ticket(BaseModel):
    """A support ticket."""

    model_config = ConfigDict(extra="allow", use_enum_values=True)

    id: int
    uri: Optional[str] = None
    external_id: Optional[str] = None
    status: Optional[str] = None
    channel: Optional[str] = None
    via: Optional[str] = None
    subject: Optional[str] = None
    language: Optional[str] = None
    spam: Optional[bool] = None
    is_unread: Optional[bool] = None
    from_agent: Optional[bool] = None
    customer: Optional[Customer] = None
    assignee_user: Optional[User] = None
    tags: List[Tag] = Field(default_factory=list)
    messages: List[TicketMessage] = Field(default_factory=list)
    meta: Optional[Dict[str, Any]] = None
    custom_fields: Optional[Dict[str, Any]] = None
    created_datetime: Optional[str] = None
    opened_datetime: Optional[str] = None
    updated_datetime: Optional[str] = None
    closed_datetime: Optional[str] = None
    last_message_datetime: Optional[str] = None
    last_received_message_datetime: Optional[str] = None
    snooze_datetime: Optional[str] = None
    trashed_datetime: Optional[str] = None


class TicketCustomerRef(BaseModel):
    id: Optional[int] = None
    email: Optional[str] = None


class TicketCreate(BaseModel):
    model_config = ConfigDict(extra="allow", use_enum_values=True)

    customer: TicketCustomerRef
    channel: Optional[str] = None
    subject: Optional[str] = None
    external_id: Optional[str] = None
    messages: Optional[List[TicketMessageCreate]] = None
    tags: Optional[List[str]] = None
    assignee_user: Optional[int] = None
    meta: Optional[Dict[str, Any]] = None
    custom_fields: Optional[Dict[str, Any]] = None


class TicketUpdate(BaseModel):
    model_config = ConfigDict(extra="allow", use_enum_values=True)

    subject: Optional[str] = None
    external_id: Optional[str] = None
    status: Optional[TicketStatus] = None
    assignee_user: Optional[int] = None
    meta: Optional[Dict[str, Any]] = None
    custom_fields: Optional[Dict[str, Any]] = None
