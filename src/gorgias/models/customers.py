from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CustomerChannel(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: str
    address: str


class Customer(BaseModel):
    """A customer of the helpdesk account."""

    model_config = ConfigDict(extra="allow")

    id: int
    email: Optional[str] = None
    name: Optional[str] = None
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    external_id: Optional[str] = None
    language: Optional[str] = None
    timezone: Optional[str] = None
    note: Optional[str] = None
    channels: List[CustomerChannel] = Field(default_factory=list)
    integrations: Dict[str, Any] = Field(default_factory=dict)
    created_datetime: Optional[str] = None
    updated_datetime: Optional[str] = None


class CustomerCreate(BaseModel):
    model_config = ConfigDict(extra="allow")

    email: str
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    external_id: Optional[str] = None
    note: Optional[str] = None
    language: Optional[str] = None
    timezone: Optional[str] = None
    channels: Optional[List[CustomerChannel]] = None


class CustomerUpdate(BaseModel):
    model_config = ConfigDict(extra="allow")

    email: Optional[str] = None
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    external_id: Optional[str] = None
    note: Optional[str] = None
    language: Optional[str] = None
    timezone: Optional[str] = None
    channels: Optional[List[CustomerChannel]] = None
