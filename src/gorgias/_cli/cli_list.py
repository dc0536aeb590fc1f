from typing import Optional

import click

from ._utils._common import RESOURCES, echo_json, get_client, handle_errors


@click.command(name="list")
@click.argument("resource", type=click.Choice(RESOURCES))
@click.option(
    "--limit",
    type=click.IntRange(min=1),
    default=None,
    help="Page size (default: API default, or 100 with --all)",
)
@click.option(
    "--all",
    "fetch_all",
    is_flag=True,
    help="Follow cursors and print every item instead of the first page",
)
@click.pass_context
@handle_errors
def list_resources(
    ctx: click.Context, resource: str, limit: Optional[int], fetch_all: bool
) -> None:
    r"""List RESOURCE as JSON.

    \b
    Examples:
        gorgias list tickets
        gorgias list customers --limit 10
        gorgias list events --all
    """
    with get_client(ctx) as client:
        service = getattr(client, resource)
        if fetch_all:
            page_size = limit if limit is not None else 100
            items = list(service.list_all(page_size=page_size))
        else:
            items = service.list(limit=limit).data
        echo_json(items)
