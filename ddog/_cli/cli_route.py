import json
from typing import Optional

import click

from ._utils._common import build_route, describe_route, route_options


@click.command()
@route_options
def route(
    operation: str,
    api_version: str,
    metric_name: Optional[str],
    from_: int,
    host: Optional[str],
    tag_filter: Optional[str],
    headers: list[tuple[str, str]],
) -> None:
    """Print the request an operation would send."""
    built = build_route(
        operation,
        api_version,
        headers,
        metric_name=metric_name,
        from_=from_,
        host=host,
        tag_filter=tag_filter,
    )
    click.echo(json.dumps(describe_route(built), indent=2))
