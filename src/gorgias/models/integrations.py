from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict


class IntegrationHttp(BaseModel):
    model_config = ConfigDict(extra="allow")

    url: str
    headers: Optional[Dict[str, str]] = None


class IntegrationUser(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int
    email: Optional[str] = None
    name: Optional[str] = None


class Integration(BaseModel):
    """A third-party integration configured on the account (HTTP, Shopify, ...)."""

    model_config = ConfigDict(extra="allow")

    id: int
    name: Optional[str] = None
    type: Optional[str] = None
    description: Optional[str] = None
    uri: Optional[str] = None
    http: Optional[IntegrationHttp] = None
    user: Optional[IntegrationUser] = None
    application_id: Optional[str] = None
    managed: Optional[bool] = None
    business_hours_id: Optional[int] = None
    created_datetime: Optional[str] = None
    updated_datetime: Optional[str] = None
    deactivated_datetime: Optional[str] = None
