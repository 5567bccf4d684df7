import logging

import click
from rich.console import Console
from rich.text import Text

from ... import _conf
from ...result import Failure

__all__ = ["check"]


logger = logging.getLogger(__name__)


def read_password(password: str | None) -> str:
    if password is not None:
        return password

    stdin = click.get_text_stream("stdin")
    if not stdin.isatty():
        logger.debug("reading password from standard input")
        return stdin.readline().rstrip("\r\n")

    return str(click.prompt("Password", hide_input=True))


@click.command()
@click.argument("password", required=False)
@click.pass_context
def check(ctx: click.Context, password: str | None) -> None:
    """
    Check a password against the configured policy.

    Every rule of the policy is evaluated and each violated rule is reported on its
    own line. The command exits with status 1 when at least one rule is violated.

    Examples:

    \b
      # Check a password given as an argument
      $ passcheck check 'Passw0rd!'
    \b
      # Check a password piped from standard input
      $ printf 'Passw0rd!' | passcheck check
    \b
      # Check against a custom policy
      $ passcheck -c policy.yaml check
    """
    if not (settings := ctx.find_object(_conf.Settings)):
        raise RuntimeError("Configuration not found")

    checker = settings.build_checker()
    result = checker.validate(read_password(password))
    console = Console(highlight=False)

    if isinstance(result, Failure):
        console.print(Text("Password rejected:", style="bold red"))
        for msg in result.messages:
            console.print(Text(f"=> {msg}", style="yellow"))
        ctx.exit(1)

    console.print(Text("Password accepted.", style="green"))
