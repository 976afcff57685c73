"""Configuration management for BotSense
- Handles environment variables and application settings.
"""

from typing import Literal

from pydantic import ConfigDict, model_validator
from pydantic_settings import BaseSettings

FailPolicy = Literal["open", "safe"]


class Settings(BaseSettings):
    """Application settings with env variable support"""

    # Application Config
    DEBUG: bool = True
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Detection Config
    # open: a faulting detector counts as "signal absent"
    # safe: a faulting detector counts as "signal present"
    FAIL_POLICY: FailPolicy = "open"
    STRICT_EMPTY_REGISTRY: bool = False

    # Audit Config
    AUDIT_LOG_ENABLED: bool = True
    AUDIT_LOGGER_NAME: str = "botsense.audit"

    # Development Config
    RELOAD: bool = True
    LOG_LEVEL: str = "info"

    model_config = ConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False
    )

    @model_validator(mode="after")
    def validate_model(self):
        """Post initialization hook using Pydantic v2 model validator"""
        self.LOG_LEVEL = self.LOG_LEVEL.lower()  # pylint: disable=C0103
        if not self.DEBUG:
            self.RELOAD = False  # pylint: disable=C0103
        return self

    @property
    def fail_safe(self) -> bool:
        """Whether faulting detectors should be treated as fired"""
        return self.FAIL_POLICY == "safe"


# Global settings instance
settings = Settings()
