"""Locale catalog configuration settings."""

import json
from typing import Annotated, Any, List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
import structlog

logger = structlog.stdlib.get_logger().bind(component="config")

DUPLICATE_POLICIES = ("warn", "error")


class LocalizationSettings(BaseSettings):
    """Localization catalog settings."""

    DEFAULT_LOCALE: str = Field(default="en", alias="DEFAULT_LOCALE")
    SUPPORTED_LOCALES: Annotated[List[str], NoDecode] = Field(
        default_factory=list,
        alias="SUPPORTED_LOCALES",
        description="Locale tags registered at startup, JSON list or comma-separated",
    )
    DUPLICATE_RESOURCES: str = Field(
        default="warn",
        alias="DUPLICATE_RESOURCES",
        description="Policy for re-declared resource names: 'warn' or 'error'",
    )
    FREEZE_AFTER_SETUP: bool = Field(default=True, alias="FREEZE_AFTER_SETUP")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("SUPPORTED_LOCALES", mode="before")
    @classmethod
    def _parse_locales(cls, v: Any) -> Any:
        """Accept a JSON list or a comma-separated string of locale tags."""
        if v is None:
            return []
        if isinstance(v, str):
            stripped = v.strip()
            if not stripped:
                return []
            if stripped.startswith("["):
                try:
                    return json.loads(stripped)
                except json.JSONDecodeError as e:
                    logger.error("invalid_supported_locales", value=v, error=str(e))
                    raise ValueError(f"SUPPORTED_LOCALES is not valid JSON: {v}") from e
            return [part.strip() for part in stripped.split(",") if part.strip()]
        return v

    @field_validator("DUPLICATE_RESOURCES", mode="after")
    @classmethod
    def _validate_duplicate_policy(cls, v: str) -> str:
        policy = v.lower()
        if policy not in DUPLICATE_POLICIES:
            raise ValueError(
                f"DUPLICATE_RESOURCES must be one of {DUPLICATE_POLICIES}, got {v!r}"
            )
        return policy


class Settings(BaseSettings):
    """Locale catalog configuration settings."""

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    localization: LocalizationSettings

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production."""
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        if "localization" not in kwargs:
            kwargs["localization"] = LocalizationSettings()
        super().__init__(**kwargs)


settings = Settings()
