__all__ = (
    "exc",
    "Checker",
    "validate",
    "Success",
    "Failure",
    "ValidationResult",
    "Rule",
    "MinLength",
    "RequireUpperLowerCase",
    "RequireDigit",
    "RequireSpecialCharacter",
    "SPECIAL_CHARACTERS",
    "PasswordRejectedError",
)
__version__ = "0.1.0"

from . import exc
from .checker import Checker, validate
from .exc import PasswordRejectedError
from .result import Failure, Success, ValidationResult
from .rule import (
    SPECIAL_CHARACTERS,
    MinLength,
    RequireDigit,
    RequireSpecialCharacter,
    RequireUpperLowerCase,
    Rule,
)
