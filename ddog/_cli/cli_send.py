from typing import Optional

import click
import httpx
from dotenv import load_dotenv

from .._datadog import Datadog
from ..models.errors import ApiKeyMissingError
from ..routes import GetMetrics
from ._utils._common import build_route, console, read_body, route_options

load_dotenv(override=True)


@click.command()
@route_options
@click.option("--body", default=None, help="JSON request body.")
@click.option(
    "-f",
    "--file",
    required=False,
    type=click.Path(exists=True, dir_okay=False),
    help="File path for the .json request body",
)
@click.option("--site", default=None, help="Datadog site, e.g. datadoghq.eu.")
@click.option("--debug", is_flag=True, help="Log requests at DEBUG level.")
def send(
    operation: str,
    api_version: str,
    metric_name: Optional[str],
    from_: int,
    host: Optional[str],
    tag_filter: Optional[str],
    headers: list[tuple[str, str]],
    body: Optional[str],
    file: Optional[str],
    site: Optional[str],
    debug: bool,
) -> None:
    """Send an operation to the Datadog API."""
    content = read_body(body, file)

    built = build_route(
        operation,
        api_version,
        headers,
        metric_name=metric_name,
        from_=from_,
        host=host,
        tag_filter=tag_filter,
    )
    if content is not None:
        if isinstance(built, GetMetrics):
            console.error(f"{operation} does not take a request body.")
        try:
            built.with_body(content)
        except ValueError as e:
            console.error(str(e))

    try:
        client = Datadog(site=site, debug=debug).api_client
    except ApiKeyMissingError as e:
        console.error(e.message)

    with console.spinner(f"Sending {operation} ..."):
        try:
            status, response = client.execute(built)
        except httpx.HTTPError as e:
            console.error(f"Request failed: {e}")

    if 200 <= status < 300:
        console.success(f"Status Code: {status}")
    else:
        console.warning(f"Status Code: {status}")
    click.echo(response)
