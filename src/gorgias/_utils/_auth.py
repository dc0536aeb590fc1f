from os import environ as env
from typing import NamedTuple, Optional

from ..models.errors import ValidationError
from ._validation import (
    validate_non_empty_string,
    validate_subdomain,
)
from .constants import (
    ENV_API_KEY,
    ENV_BASE_URL,
    ENV_EMAIL,
    ENV_SUBDOMAIN,
    ENV_TIMEOUT_MS,
)


class Credentials(NamedTuple):
    subdomain: str
    email: str
    api_key: str
    base_url: Optional[str]
    timeout_ms: Optional[str]


def _required(value: Optional[str], field: str, env_name: str) -> str:
    if value is None:
        raise ValidationError(
            field, "required", f"{field} is required (pass it or set {env_name})"
        )
    validate_non_empty_string(value, field)
    return value


def resolve_config(
    subdomain: Optional[str] = None,
    email: Optional[str] = None,
    api_key: Optional[str] = None,
    base_url: Optional[str] = None,
) -> Credentials:
    """Resolve connection settings from arguments, then the environment.

    The subdomain is validated before anything else so that a malformed
    account name is reported even when other settings are missing too.

    Raises:
        ValidationError: If a setting is missing or malformed.
    """
    subdomain_value = subdomain or env.get(ENV_SUBDOMAIN)
    validate_subdomain(subdomain_value)

    email_value = _required(email or env.get(ENV_EMAIL), "email", ENV_EMAIL)
    api_key_value = _required(api_key or env.get(ENV_API_KEY), "api_key", ENV_API_KEY)

    return Credentials(
        subdomain=subdomain_value.strip(),  # type: ignore[union-attr]
        email=email_value,
        api_key=api_key_value,
        base_url=base_url or env.get(ENV_BASE_URL) or None,
        timeout_ms=env.get(ENV_TIMEOUT_MS) or None,
    )
