import logging

from typing_extensions import Self

from .result import Failure, Success, ValidationResult
from .rule import (
    MinLength,
    RequireDigit,
    RequireSpecialCharacter,
    RequireUpperLowerCase,
    Rule,
    is_violated,
    resolve_message,
)

__all__ = ("Checker", "validate")


logger = logging.getLogger(__name__)


class Checker:
    """
    An ordered collection of password rules.

    Rules are evaluated in the order they were added, and that order is kept in the
    violation messages of a failed validation. Every configuration method appends
    exactly one rule and returns the checker itself, so calls can be chained::

        checker = (
            Checker()
            .with_min_length(8)
            .with_upper_lower_requirement()
            .with_digit_requirement()
            .with_special_char_requirement("Add a symbol such as '!' or '?'.")
        )

        checker.validate("Passw0rd!")  # Success()

    A checker holds no state besides its rules, so once configured it can be shared
    between threads and validated against concurrently.
    """

    __slots__ = ("_rules",)

    def __init__(self) -> None:
        self._rules: list[Rule] = []

    def __repr__(self) -> str:
        return "%s(rules=%r)" % (type(self).__name__, self._rules)

    @property
    def rules(self) -> tuple[Rule, ...]:
        return tuple(self._rules)

    def with_rule(self, rule: Rule) -> Self:
        self._rules.append(rule)
        return self

    def with_min_length(
        self, threshold: int, custom_message: str | None = None
    ) -> Self:
        return self.with_rule(MinLength(threshold, custom_message))

    def with_upper_lower_requirement(self, custom_message: str | None = None) -> Self:
        return self.with_rule(RequireUpperLowerCase(custom_message))

    def with_digit_requirement(self, custom_message: str | None = None) -> Self:
        return self.with_rule(RequireDigit(custom_message))

    def with_special_char_requirement(
        self, custom_message: str | None = None
    ) -> Self:
        return self.with_rule(RequireSpecialCharacter(custom_message))

    def validate(self, password: str) -> ValidationResult:
        """
        Applies every rule to the password.

        All rules are evaluated, even after the first violation, so that a single
        call reports every problem at once.

        Returns:
            :class:`Success` if no rule is violated, otherwise a :class:`Failure`
            holding one message per violated rule.
        """
        rules = tuple(self._rules)
        messages = [
            resolve_message(rule) for rule in rules if is_violated(rule, password)
        ]

        logger.debug(
            "evaluated %d rule(s), %d violation(s) found", len(rules), len(messages)
        )

        if not messages:
            return Success()
        return Failure(tuple(messages))


def validate(checker: Checker, password: str) -> ValidationResult:
    return checker.validate(password)
