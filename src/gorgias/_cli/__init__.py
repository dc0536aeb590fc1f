from typing import Optional

import click

from .._utils._logs import setup_logging
from .._version import __version__
from .cli_get import get_resource as get
from .cli_list import list_resources as list_


@click.group()
@click.version_option(__version__, prog_name="gorgias")
@click.option("--subdomain", help="Account subdomain (env: GORGIAS_SUBDOMAIN)")
@click.option("--email", help="API user email (env: GORGIAS_EMAIL)")
@click.option("--api-key", help="API key (env: GORGIAS_API_KEY)")
@click.option("--base-url", help="Override the API base URL (env: GORGIAS_BASE_URL)")
@click.option("--debug", is_flag=True, help="Log every request and retry to stderr")
@click.pass_context
def cli(
    ctx: click.Context,
    subdomain: Optional[str],
    email: Optional[str],
    api_key: Optional[str],
    base_url: Optional[str],
    debug: bool,
) -> None:
    r"""Command line access to the Gorgias helpdesk API.

    Credentials not given as options are read from the environment or from a
    .env file in the current directory.

    \b
    Examples:
        gorgias list tickets --limit 5
        gorgias get customers 42
        gorgias --debug list users --all
    """
    setup_logging(debug)
    ctx.obj = {
        "subdomain": subdomain,
        "email": email,
        "api_key": api_key,
        "base_url": base_url,
    }


cli.add_command(list_)
cli.add_command(get)
