from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Attachment(BaseModel):
    model_config = ConfigDict(extra="allow")

    url: str
    name: Optional[str] = None
    content_type: Optional[str] = None
    size: Optional[int] = None


class MessageParty(BaseModel):
    model_config = ConfigDict(extra="allow")

    address: Optional[str] = None
    name: Optional[str] = None
    id: Optional[int] = None


class MessageSource(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    type: Optional[str] = None
    from_: Optional[MessageParty] = Field(default=None, alias="from")
    to: List[MessageParty] = Field(default_factory=list)


class TicketMessage(BaseModel):
    """A message posted on a ticket, by a customer or an agent."""

    model_config = ConfigDict(extra="allow")

    id: int
    ticket_id: Optional[int] = None
    uri: Optional[str] = None
    message_id: Optional[str] = None
    external_id: Optional[str] = None
    channel: Optional[str] = None
    via: Optional[str] = None
    public: Optional[bool] = None
    from_agent: Optional[bool] = None
    subject: Optional[str] = None
    body_text: Optional[str] = None
    body_html: Optional[str] = None
    stripped_text: Optional[str] = None
    source: Optional[MessageSource] = None
    sender: Optional[Dict[str, Any]] = None
    receiver: Optional[Dict[str, Any]] = None
    attachments: Optional[List[Attachment]] = None
    headers: Optional[Dict[str, str]] = None
    meta: Dict[str, Any] = Field(default_factory=dict)
    created_datetime: Optional[str] = None
    sent_datetime: Optional[str] = None
    failed_datetime: Optional[str] = None
    deleted_datetime: Optional[str] = None


class TicketMessageCreate(BaseModel):
    model_config = ConfigDict(extra="allow")

    body_text: Optional[str] = None
    body_html: Optional[str] = None
    channel: Optional[str] = None
    via: Optional[str] = None
    subject: Optional[str] = None
    public: Optional[bool] = None
    from_agent: Optional[bool] = None
    external_id: Optional[str] = None
    sender: Optional[Dict[str, Any]] = None
    receiver: Optional[Dict[str, Any]] = None
    attachments: Optional[List[Attachment]] = None
    headers: Optional[Dict[str, str]] = None
    meta: Optional[Dict[str, Any]] = None


class TicketMessageUpdate(BaseModel):
    model_config = ConfigDict(extra="allow")

    body_text: Optional[str] = None
    body_html: Optional[str] = None
    attachments: Optional[List[Attachment]] = None
    headers: Optional[Dict[str, str]] = None
    meta: Optional[Dict[str, Any]] = None
