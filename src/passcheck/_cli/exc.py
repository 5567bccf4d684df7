from dataclasses import dataclass
from typing import TypedDict

import click
from typing_extensions import override

from ..exc import Location


@dataclass(slots=True)
class CLIError(click.ClickException):
    """
    Signals that the command could not run to completion.

    Exit codes used by passcheck: 0 when the password is accepted, 1 when it is
    rejected or the command fails, and 78 (EX_CONFIG) for an unusable policy file.
    """

    message: str
    exit_code: int = 1

    def __post_init__(self) -> None:
        click.ClickException.__init__(self, self.message)


@dataclass(slots=True)
class ConfigError(CLIError):
    exit_code: int = 78


@dataclass(slots=True, kw_only=True)
class ConfigSyntaxError(ConfigError):
    class Context(TypedDict):
        loc: Location

    ctx: Context

    @override
    def format_message(self) -> str:
        loc = self.ctx["loc"]
        if "line" in loc:
            return "Decoding failed for configuration file %r at line %d.\n\n%s" % (
                str(loc["filename"]),
                loc["line"],
                self.message,
            )
        return "Decoding failed for configuration file %r.\n\n%s" % (
            str(loc["filename"]),
            self.message,
        )


@dataclass(slots=True, kw_only=True)
class ConfigValidationError(ConfigError):
    @override
    def format_message(self) -> str:
        return "Invalid configuration input.\n\n%s" % self.message
