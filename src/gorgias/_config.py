import base64
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ._utils.constants import (
    API_HOST_TEMPLATE,
    DEFAULT_TIMEOUT_MS,
    DEFAULT_TRACE_ID_HEADER,
)


class RetryConfig(BaseModel):
    """Retry policy for transient failures.

    Delays are expressed in milliseconds.
    """

    model_config = ConfigDict(frozen=True)

    max_attempts: int = Field(default=3, ge=1)
    base_delay_ms: float = Field(default=1000, ge=0)
    max_delay_ms: float = Field(default=30000, ge=0)
    retryable_statuses: frozenset[int] = frozenset({429, 502, 503, 504})

    def merge(
        self, override: Union["RetryConfig", Mapping[str, Any], None]
    ) -> "RetryConfig":
        """Return a copy with the given fields replaced.

        A ``RetryConfig`` override only contributes the fields that were set
        explicitly when it was built.
        """
        if override is None:
            return self
        if isinstance(override, RetryConfig):
            override = override.model_dump(exclude_unset=True)
        return RetryConfig.model_validate({**self.model_dump(), **override})


class Config(BaseModel):
    subdomain: str
    email: str
    api_key: str = Field(repr=False)
    base_url: Optional[str] = None
    timeout_ms: float = Field(default=DEFAULT_TIMEOUT_MS, gt=0)
    trace_id_header: str = DEFAULT_TRACE_ID_HEADER
    retry: RetryConfig = Field(default_factory=RetryConfig)

    @field_validator("subdomain", mode="before")
    @classmethod
    def strip_subdomain(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @property
    def api_base_url(self) -> str:
        """Base URL of the REST API, always ending with a slash."""
        url = self.base_url or API_HOST_TEMPLATE.format(subdomain=self.subdomain)
        return url if url.endswith("/") else f"{url}/"

    @property
    def auth_header(self) -> str:
        credentials = f"{self.email}:{self.api_key}".encode()
        return f"Basic {base64.b64encode(credentials).decode()}"
