import importlib.metadata

import click

from .cli_route import route as route  # type: ignore
from .cli_send import send as send  # type: ignore
from .cli_validate import validate as validate  # type: ignore


def _get_safe_version() -> str:
    """Get the version of the ddog package."""
    try:
        version = importlib.metadata.version("ddog")
        return version
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


@click.group()
@click.version_option(
    _get_safe_version(),
    prog_name="ddog",
    message="%(prog)s version %(version)s",
)
def cli() -> None:
    """Build and send Datadog API routes."""


cli.add_command(route)
cli.add_command(send)
cli.add_command(validate)
