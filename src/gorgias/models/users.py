from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class UserRole(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str


class User(BaseModel):
    """An agent or admin of the helpdesk account."""

    model_config = ConfigDict(extra="allow")

    id: int
    email: Optional[str] = None
    name: Optional[str] = None
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    active: Optional[bool] = None
    bio: Optional[str] = None
    country: Optional[str] = None
    language: Optional[str] = None
    timezone: Optional[str] = None
    external_id: Optional[str] = None
    client_id: Optional[str] = None
    role: Optional[UserRole] = None
    meta: Dict[str, Any] = Field(default_factory=dict)
    created_datetime: Optional[str] = None
    updated_datetime: Optional[str] = None
    deactivated_datetime: Optional[str] = None


class UserCreate(BaseModel):
    model_config = ConfigDict(extra="allow")

    email: str
    firstname: str
    lastname: str
    role: str
    bio: Optional[str] = None
    country: Optional[str] = None
    language: Optional[str] = None
    timezone: Optional[str] = None
    external_id: Optional[str] = None
    meta: Optional[Dict[str, Any]] = None


class UserUpdate(BaseModel):
    model_config = ConfigDict(extra="allow")

    email: Optional[str] = None
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    role: Optional[str] = None
    bio: Optional[str] = None
    country: Optional[str] = None
    language: Optional[str] = None
    timezone: Optional[str] = None
    external_id: Optional[str] = None
    meta: Optional[Dict[str, Any]] = None
    active: Optional[bool] = None
