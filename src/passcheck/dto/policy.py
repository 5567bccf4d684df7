from abc import abstractmethod
from typing import Annotated, Literal, TypeAlias

import annotated_types
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .. import rule
from ..checker import Checker

__all__ = (
    "AbstractRuleDTO",
    "MinLengthDTO",
    "UpperLowerCaseDTO",
    "DigitDTO",
    "SpecialCharacterDTO",
    "RuleDTO",
    "PasswordPolicyDTO",
    "default_rules",
)


class AbstractRuleDTO(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, extra="forbid", frozen=True)

    kind: str
    message: Annotated[str, annotated_types.MinLen(1)] | None = None

    @abstractmethod
    def to_rule(self) -> rule.Rule: ...


class MinLengthDTO(AbstractRuleDTO):
    kind: Literal["minLength"] = "minLength"
    threshold: Annotated[int, annotated_types.Ge(0)]

    def to_rule(self) -> rule.MinLength:
        return rule.MinLength(self.threshold, self.message)


class UpperLowerCaseDTO(AbstractRuleDTO):
    kind: Literal["upperLowerCase"] = "upperLowerCase"

    def to_rule(self) -> rule.RequireUpperLowerCase:
        return rule.RequireUpperLowerCase(self.message)


class DigitDTO(AbstractRuleDTO):
    kind: Literal["digit"] = "digit"

    def to_rule(self) -> rule.RequireDigit:
        return rule.RequireDigit(self.message)


class SpecialCharacterDTO(AbstractRuleDTO):
    kind: Literal["specialCharacter"] = "specialCharacter"

    def to_rule(self) -> rule.RequireSpecialCharacter:
        return rule.RequireSpecialCharacter(self.message)


RuleDTO: TypeAlias = Annotated[
    MinLengthDTO | UpperLowerCaseDTO | DigitDTO | SpecialCharacterDTO,
    Field(discriminator="kind"),
]


def default_rules() -> list[RuleDTO]:
    return [
        MinLengthDTO(threshold=8),
        UpperLowerCaseDTO(),
        DigitDTO(),
        SpecialCharacterDTO(),
    ]


class PasswordPolicyDTO(BaseModel):
    """
    A password policy described as data.

    Example::

        policy = PasswordPolicyDTO.model_validate(
            {
                "rules": [
                    {"kind": "minLength", "threshold": 12},
                    {"kind": "digit", "message": "Add a number."},
                ]
            }
        )
        checker = policy.build_checker()
    """

    model_config = ConfigDict(alias_generator=to_camel, extra="forbid")

    rules: list[RuleDTO] = Field(default_factory=default_rules)

    def build_checker(self) -> Checker:
        checker = Checker()
        for item in self.rules:
            checker.with_rule(item.to_rule())
        return checker
