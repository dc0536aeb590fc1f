"""Client-side input checks, run before any request is sent."""

import math
import re
from typing import Any, Sequence

from ..models.errors import ValidationError

_SUBDOMAIN_PATTERN = re.compile(r"^[a-z0-9]([a-z0-9-]{0,61}[a-z0-9])?$", re.IGNORECASE)


def validate_subdomain(subdomain: Any) -> None:
    """Check a Gorgias account subdomain.

    A valid subdomain is 1-63 characters of letters, digits and hyphens, and
    does not start or end with a hyphen.

    Raises:
        ValidationError: With constraint ``required`` or ``format``.
    """
    if not subdomain or not isinstance(subdomain, str):
        raise ValidationError("subdomain", "required", "Subdomain is required")

    trimmed = subdomain.strip()
    if not trimmed:
        raise ValidationError("subdomain", "required", "Subdomain cannot be empty")

    if not _SUBDOMAIN_PATTERN.match(trimmed):
        raise ValidationError(
            "subdomain",
            "format",
            "Subdomain must be alphanumeric with optional hyphens "
            "(not at start/end), 1-63 characters",
        )


def validate_id(value: Any, field_name: str) -> None:
    """Check that ``value`` is a positive integer id."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(
            field_name,
            "type",
            f"{field_name} must be a number, got {type(value).__name__}",
        )
    if isinstance(value, float) and (not math.isfinite(value) or not value.is_integer()):
        raise ValidationError(
            field_name, "integer", f"{field_name} must be an integer, got {value}"
        )
    if value <= 0:
        raise ValidationError(
            field_name,
            "positive",
            f"{field_name} must be a positive integer, got {value}",
        )


def validate_non_empty_string(value: Any, field_name: str) -> None:
    if not isinstance(value, str):
        raise ValidationError(
            field_name,
            "type",
            f"{field_name} must be a string, got {type(value).__name__}",
        )
    if not value.strip():
        raise ValidationError(field_name, "nonEmpty", f"{field_name} cannot be empty")


def validate_non_empty_list(value: Any, field_name: str) -> None:
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise ValidationError(field_name, "type", f"{field_name} must be a list")
    if len(value) == 0:
        raise ValidationError(field_name, "nonEmpty", f"{field_name} cannot be empty")
