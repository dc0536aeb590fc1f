import click

from ._utils._common import RESOURCES, echo_json, get_client, handle_errors


@click.command(name="get")
@click.argument("resource", type=click.Choice(RESOURCES))
@click.argument("resource_id", metavar="ID", type=int)
@click.pass_context
@handle_errors
def get_resource(ctx: click.Context, resource: str, resource_id: int) -> None:
    """Print one RESOURCE, identified by ID, as JSON."""
    with get_client(ctx) as client:
        echo_json(getattr(client, resource).retrieve(resource_id))
