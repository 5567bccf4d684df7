import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from ... import _conf
from ...rule import resolve_message

__all__ = ["rules"]


@click.command()
@click.pass_context
def rules(ctx: click.Context) -> None:
    """List the rules of the configured policy in evaluation order."""
    if not (settings := ctx.find_object(_conf.Settings)):
        raise RuntimeError("Configuration not found")

    table = Table("#", "Kind", "Message", box=None)
    for idx, item in enumerate(settings.rules, start=1):
        table.add_row(str(idx), item.kind, Text(resolve_message(item.to_rule())))

    Console(highlight=False).print(table)
