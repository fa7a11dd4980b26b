from contextlib import contextmanager
from typing import Iterator, NoReturn

import click
from rich.console import Console


class CliConsole:
    """Terminal output for the ddog commands.

    Command results are echoed by the commands themselves; this class covers
    status lines and the spinner, which go to stderr so JSON on stdout stays
    parseable. ``error`` ends the running command with exit code 1.
    """

    def __init__(self) -> None:
        self._stderr = Console(stderr=True)

    def success(self, message: str) -> None:
        click.echo(f"{click.style('✓', fg='green', bold=True)} {message}")

    def warning(self, message: str) -> None:
        click.echo(f"⚠️ {click.style(message, fg='yellow')}")

    def error(self, message: str) -> NoReturn:
        click.echo(f"❌ {click.style(message, fg='red')}", err=True)
        click.get_current_context().exit(1)

    @contextmanager
    def spinner(self, message: str) -> Iterator[None]:
        with self._stderr.status(message, spinner="dots"):
            yield
