#!/usr/bin/env python3

import logging
import pathlib

import click
import lazy_object_proxy
import pydantic

from passcheck._cli.commands.check import check
from passcheck._cli.commands.rules import rules
from passcheck._cli.exc import ConfigSyntaxError, ConfigValidationError
from passcheck._conf import Settings
from passcheck.exc import PolicySyntaxError
from passcheck.policy import read_document
from passcheck.util.model import convert_errors, format_errors

ConfigOption = pathlib.Path | None


def validate_config(ctx: click.Context, fn: ConfigOption) -> Settings:
    payload = {}

    if fn is not None:
        try:
            payload = read_document(fn) or {}
        except PolicySyntaxError as ex:
            raise ConfigSyntaxError(ex.message, ctx=ex.ctx) from ex

    if not isinstance(payload, dict):
        raise ConfigValidationError("Input must be a valid mapping")

    if invalid_keys := [key for key in payload if not isinstance(key, str)]:
        raise ConfigValidationError(
            "Field names must be strings, got %s"
            % ", ".join(repr(key) for key in invalid_keys)
        )

    try:
        res = Settings(**payload)
    except pydantic.ValidationError as ex:
        raise ConfigValidationError(format_errors(convert_errors(ex))) from ex

    assert isinstance(res, Settings), "Expected %r, got %r" % (
        Settings.__name__,
        res,
    )
    return res


@click.group()
@click.option("-D", "--debug/--no-debug", default=False, help="Enable debug mode.")
@click.option(
    "-c",
    "--config",
    type=click.Path(
        dir_okay=False,
        exists=True,
        readable=True,
        path_type=pathlib.Path,
    ),
    help="Path to a YAML password policy file.",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, config: ConfigOption) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
    )
    ctx.obj = lazy_object_proxy.Proxy(lambda: validate_config(ctx=ctx, fn=config))


cli.add_command(check)
cli.add_command(rules)

if __name__ == "__main__":
    cli(auto_envvar_prefix="PASSCHECK")
