from .policy import (
    DigitDTO,
    MinLengthDTO,
    PasswordPolicyDTO,
    RuleDTO,
    SpecialCharacterDTO,
    UpperLowerCaseDTO,
)

__all__ = (
    "DigitDTO",
    "MinLengthDTO",
    "PasswordPolicyDTO",
    "RuleDTO",
    "SpecialCharacterDTO",
    "UpperLowerCaseDTO",
)
