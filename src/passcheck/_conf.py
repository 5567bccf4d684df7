from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from .checker import Checker
from .dto import PasswordPolicyDTO, RuleDTO
from .dto.policy import default_rules


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        extra="forbid",
        validate_default=False,
        env_prefix="PASSCHECK_",
    )

    rules: list[RuleDTO] = Field(default_factory=default_rules)

    @classmethod
    def settings_customise_sources(
        cls,
        _: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return env_settings, file_secret_settings, init_settings

    def policy(self) -> PasswordPolicyDTO:
        return PasswordPolicyDTO(rules=self.rules)

    def build_checker(self) -> Checker:
        return self.policy().build_checker()
