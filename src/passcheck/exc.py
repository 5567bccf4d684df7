import pathlib
from dataclasses import dataclass
from typing import NotRequired, TypedDict

from typing_extensions import override

__all__ = (
    "ApplicationError",
    "Location",
    "PasswordRejectedError",
    "PolicyError",
    "PolicySyntaxError",
    "PolicyValidationError",
)


@dataclass(slots=True)
class ApplicationError(Exception):
    class Context(TypedDict): ...

    message: str
    ctx: Context | None

    def format_message(self) -> str:
        return self.message.format(ctx=self.ctx or {})

    @override
    def __str__(self) -> str:
        return self.format_message()


class Location(TypedDict):
    filename: pathlib.Path
    line: NotRequired[int]
    col: NotRequired[int]


@dataclass(slots=True)
class PasswordRejectedError(ApplicationError):
    """
    Raised on request when a password violates one or more rules.

    Validation itself never raises, see
    :meth:`passcheck.result.Failure.raise_for_failure`.
    """

    class Context(TypedDict):
        """
        Attributes:
            violations: The violation messages, in rule configuration order.
        """

        violations: tuple[str, ...]

    ctx: Context

    @property
    def violations(self) -> tuple[str, ...]:
        return self.ctx["violations"]

    @override
    def format_message(self) -> str:
        return self.message.format(
            violations="\n".join("  - %s" % msg for msg in self.violations)
        )


@dataclass(slots=True)
class PolicyError(ApplicationError): ...


@dataclass(slots=True)
class PolicySyntaxError(PolicyError):
    """
    Raised when a policy document cannot be decoded.
    """

    class Context(TypedDict):
        loc: Location

    ctx: Context

    @override
    def format_message(self) -> str:
        loc = self.ctx["loc"]
        if "line" in loc:
            return "Decoding failed for policy file %r at line %d.\n\n%s" % (
                str(loc["filename"]),
                loc["line"],
                self.message,
            )
        return "Decoding failed for policy file %r.\n\n%s" % (
            str(loc["filename"]),
            self.message,
        )


@dataclass(slots=True)
class PolicyValidationError(PolicyError):
    """
    Raised when a decoded policy document does not match the policy schema.
    """

    @override
    def format_message(self) -> str:
        return "Invalid password policy.\n\n%s" % self.message
