from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class Event(BaseModel):
    """An entry of the account activity log."""

    model_config = ConfigDict(extra="allow")

    id: int
    type: Optional[str] = None
    context: Optional[str] = None
    object_id: Optional[int] = None
    object_type: Optional[str] = None
    user_id: Optional[int] = None
    uri: Optional[str] = None
    data: Dict[str, Any] = Field(default_factory=dict)
    created_datetime: Optional[str] = None
