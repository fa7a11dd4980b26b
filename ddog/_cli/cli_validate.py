from typing import Optional

import click

from .._utils import validate_json
from ._utils._common import console, read_body


@click.command()
@click.argument("body", required=False)
@click.option(
    "-f",
    "--file",
    required=False,
    type=click.Path(exists=True, dir_okay=False),
    help="File path for the .json body",
)
def validate(body: Optional[str], file: Optional[str]) -> None:
    """Check that a request body is valid JSON."""
    content = read_body(body, file)
    if content is None:
        console.error("Nothing to validate. Pass a body or --file.")

    error = validate_json(content)
    if error is not None:
        console.error(
            f"Invalid JSON at line {error.lineno} column {error.colno}: {error.msg}"
        )
    console.success("Valid JSON body.")
