from collections.abc import Iterator
from dataclasses import dataclass
from typing import Literal, TypeAlias

from .exc import PasswordRejectedError

__all__ = ("Success", "Failure", "ValidationResult")


@dataclass(frozen=True, slots=True)
class Success:
    """The password satisfies every configured rule."""

    @property
    def ok(self) -> Literal[True]:
        return True

    def __bool__(self) -> bool:
        return True

    def raise_for_failure(self) -> None: ...


@dataclass(frozen=True, slots=True)
class Failure:
    """
    The password violates one or more rules.

    Attributes:
        messages: One human-readable message per violated rule, in the order the
            rules were configured. Never empty.
    """

    messages: tuple[str, ...]

    @property
    def ok(self) -> Literal[False]:
        return False

    def __bool__(self) -> bool:
        return False

    def __len__(self) -> int:
        return len(self.messages)

    def __iter__(self) -> Iterator[str]:
        return iter(self.messages)

    def raise_for_failure(self) -> None:
        raise PasswordRejectedError(
            "Password rejected:\n{violations}",
            ctx=PasswordRejectedError.Context(violations=self.messages),
        )


ValidationResult: TypeAlias = Success | Failure
