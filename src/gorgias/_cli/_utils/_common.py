import functools
import json
from typing import Any, Callable, Dict, TypeVar

import click
from pydantic import BaseModel

from ..._gorgias import Gorgias
from ...models.errors import GorgiasError

F = TypeVar("F", bound=Callable[..., Any])

RESOURCES = ("customers", "tickets", "messages", "users", "integrations", "events")


def get_client(ctx: click.Context) -> Gorgias:
    """Build the client from the options given to the ``gorgias`` group."""
    settings: Dict[str, Any] = ctx.obj or {}
    return Gorgias(**settings)


def to_jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, list):
        return [to_jsonable(item) for item in value]
    return value


def echo_json(value: Any) -> None:
    click.echo(json.dumps(to_jsonable(value), indent=2))


def handle_errors(function: F) -> F:
    """Report SDK errors on stderr with their code and exit with status 1."""

    @functools.wraps(function)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return function(*args, **kwargs)
        except GorgiasError as e:
            click.echo(f"Error [{e.code.value}]: {e}", err=True)
            raise click.exceptions.Exit(1) from e

    return wrapper  # type: ignore[return-value]
