"""i18n engine configuration settings."""

from typing import Dict, List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class I18nSettings(BaseSettings):
    """Message catalog and template engine settings.

    Environment Variables:
        I18N_MESSAGES_DIR: Directory holding the YAML message files
        I18N_DEFAULT_LANGUAGE: Language probed last when a key is missing
        I18N_FALLBACKS: JSON object mapping a language to its explicit fallback chain
        I18N_MAX_RENDER_DEPTH: Maximum nesting of conditional branch renders
    """

    MESSAGES_DIR: str = Field(default="./locales", alias="I18N_MESSAGES_DIR")
    DEFAULT_LANGUAGE: str = Field(default="en", alias="I18N_DEFAULT_LANGUAGE")
    FALLBACKS: Dict[str, List[str]] = Field(
        default_factory=dict, alias="I18N_FALLBACKS"
    )
    MAX_RENDER_DEPTH: int = Field(default=32, alias="I18N_MAX_RENDER_DEPTH")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("MAX_RENDER_DEPTH")
    @classmethod
    def _positive_depth(cls, value: int) -> int:
        if value < 1:
            raise ValueError("I18N_MAX_RENDER_DEPTH must be at least 1")
        return value


class Settings(BaseSettings):
    """Application settings - main aggregator.

    Environment Variables:
        PREFIX: Environment prefix; empty in production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    i18n: I18nSettings

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        if "i18n" not in kwargs:
            kwargs["i18n"] = I18nSettings()
        super().__init__(**kwargs)


settings = Settings()
