from dataclasses import dataclass
from typing import TypeAlias

__all__ = (
    "SPECIAL_CHARACTERS",
    "MinLength",
    "RequireUpperLowerCase",
    "RequireDigit",
    "RequireSpecialCharacter",
    "Rule",
    "default_message",
    "is_violated",
    "resolve_message",
)

SPECIAL_CHARACTERS = "!@#$%^&*()-_=+[]{}\\|;:'\",.<>/?"
_SPECIAL_CHARACTER_SET = frozenset(SPECIAL_CHARACTERS)


@dataclass(frozen=True, slots=True)
class MinLength:
    """
    Attributes:
        threshold: The minimum number of characters. Zero is always satisfied.
        custom_message: Replaces the default violation message when set.
    """

    threshold: int
    custom_message: str | None = None


@dataclass(frozen=True, slots=True)
class RequireUpperLowerCase:
    custom_message: str | None = None


@dataclass(frozen=True, slots=True)
class RequireDigit:
    custom_message: str | None = None


@dataclass(frozen=True, slots=True)
class RequireSpecialCharacter:
    custom_message: str | None = None


Rule: TypeAlias = (
    MinLength | RequireUpperLowerCase | RequireDigit | RequireSpecialCharacter
)


def _is_ascii_upper(ch: str) -> bool:
    return "A" <= ch <= "Z"


def _is_ascii_lower(ch: str) -> bool:
    return "a" <= ch <= "z"


def _is_ascii_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def is_violated(rule: Rule, password: str) -> bool:
    match rule:
        case MinLength(threshold=threshold):
            return len(password) < threshold
        case RequireUpperLowerCase():
            return not (
                any(map(_is_ascii_upper, password))
                and any(map(_is_ascii_lower, password))
            )
        case RequireDigit():
            return not any(map(_is_ascii_digit, password))
        case RequireSpecialCharacter():
            return _SPECIAL_CHARACTER_SET.isdisjoint(password)
    raise TypeError("Expected a password rule, got %r" % (rule,))


def default_message(rule: Rule) -> str:
    match rule:
        case MinLength(threshold=threshold):
            return "Password must be at least %d characters long." % threshold
        case RequireUpperLowerCase():
            return "Password must include both uppercase and lowercase letters."
        case RequireDigit():
            return "Password must include at least one number."
        case RequireSpecialCharacter():
            return "Password must include at least one special character."
    raise TypeError("Expected a password rule, got %r" % (rule,))


def resolve_message(rule: Rule) -> str:
    """Returns the custom message of the rule if one was given, otherwise builds the
    default one."""
    if rule.custom_message is not None:
        return rule.custom_message
    return default_message(rule)
