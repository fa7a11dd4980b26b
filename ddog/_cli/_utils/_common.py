import json
import os
from typing import Any, Optional, Union

import click

from ...builder import Builder
from ...models.exceptions import UnsupportedApiVersionError
from ...models.version import ApiVersion
from ...routes import Distribution, GetMetrics, Series, Tags
from ._console import CliConsole

console = CliConsole()

OPERATIONS = ("tag-config", "series", "distribution", "metrics")

AnyRoute = Union[Tags, Series, Distribution, GetMetrics]


def _parse_headers(
    ctx: click.Context, param: click.Parameter, values: tuple[str, ...]
) -> list[tuple[str, str]]:
    headers = []
    for value in values:
        name, sep, header_value = value.partition(":")
        if not sep or not name.strip():
            raise click.BadParameter(
                f"Expected 'Name: value', got {value!r}.", ctx=ctx, param=param
            )
        headers.append((name.strip(), header_value.strip()))
    return headers


def route_options(function):
    """Options shared by every command that builds a route."""
    function = click.option(
        "-H",
        "--header",
        "headers",
        multiple=True,
        callback=_parse_headers,
        help="Request header as 'Name: value'. May be repeated.",
    )(function)
    function = click.option(
        "--tag-filter",
        default=None,
        help="Tag expression to filter listed metrics by (metrics only).",
    )(function)
    function = click.option(
        "--host",
        default=None,
        help="Hostname to filter listed metrics by (metrics only).",
    )(function)
    function = click.option(
        "--from",
        "from_",
        type=click.IntRange(min=0),
        default=0,
        show_default=True,
        help="Seconds since the unix epoch to list metrics from (metrics only).",
    )(function)
    function = click.option(
        "--metric-name",
        default=None,
        help="Metric to configure tags for (tag-config only).",
    )(function)
    function = click.option(
        "--v1",
        "api_version",
        flag_value="v1",
        help="Use the v1 API",
    )(function)
    function = click.option(
        "--v2",
        "api_version",
        flag_value="v2",
        default="v2",
        help="Use the v2 API",
    )(function)
    function = click.argument("operation", type=click.Choice(OPERATIONS))(function)
    return function


def build_route(
    operation: str,
    api_version: str,
    headers: list[tuple[str, str]],
    metric_name: Optional[str] = None,
    from_: int = 0,
    host: Optional[str] = None,
    tag_filter: Optional[str] = None,
) -> AnyRoute:
    builder = Builder().with_headers(headers)
    if ApiVersion.parse(api_version) is ApiVersion.V1:
        builder.select_v1()
    else:
        builder.select_v2()

    try:
        if operation == "tag-config":
            if not metric_name:
                console.error("--metric-name is required for tag-config.")
            return builder.create_tag_config(metric_name)
        elif operation == "series":
            return builder.post_series()
        elif operation == "distribution":
            return builder.post_distribution()
        else:
            return builder.get_metrics(from_, host, tag_filter)
    except UnsupportedApiVersionError as e:
        console.error(str(e))


def read_body(body: Optional[str], file: Optional[str]) -> Optional[str]:
    if body and file:
        console.error("Pass either a body or --file, not both.")
    if file:
        _, file_extension = os.path.splitext(file)
        if file_extension != ".json":
            console.error("Input file extension must be '.json'.")
        with open(file) as f:
            return f.read()
    return body


def describe_route(route: AnyRoute) -> dict[str, Any]:
    spec = route.request_spec()
    return {
        "method": spec.method,
        "path": str(spec.endpoint),
        "params": spec.params,
        "headers": [list(pair) for pair in spec.headers],
        "body": json.loads(spec.content) if spec.content is not None else None,
    }
