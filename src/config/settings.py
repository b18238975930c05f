from __future__ import annotations
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


DEVELOPMENT = "Development"
CONFIG_DIR_ENV = "CONFIG_DIR"
CONFIG_KEYS_DIR_ENV = "CONFIG_KEYS_DIR"


class HarnessSettings(BaseModel):
    """
    Explicit settings for an ApplicationHarness. Passed in at construction;
    there is no process-wide settings object.

    • environment: hosting environment name exposed to the application
    • app_configuration: configuration file name (looked up under the config
      directory) or an absolute path; optional
    • content_root: base directory for the default config locations
    • config_dir / config_keys_dir: explicit overrides, otherwise taken from
      CONFIG_DIR / CONFIG_KEYS_DIR, otherwise <content_root>/config and
      <content_root>/config-keys
    • follow_redirects: whether the test client follows redirects
    """
    model_config = ConfigDict(frozen=True)

    environment: str = DEVELOPMENT
    app_configuration: Path | None = None
    content_root: Path = Field(default_factory=Path.cwd)
    config_dir: Path | None = None
    config_keys_dir: Path | None = None
    follow_redirects: bool = False

    @field_validator("environment", mode="before")
    @classmethod
    def _default_blank_environment(cls, value: str | None) -> str:
        if value is None or not str(value).strip():
            return DEVELOPMENT
        return value

    def resolve_config_dir(self) -> Path:
        if self.config_dir is not None:
            return self.config_dir

        from_env = os.environ.get(CONFIG_DIR_ENV)
        if from_env:
            return Path(from_env)

        candidate = self.content_root / "config"
        return candidate if candidate.is_dir() else self.content_root

    def resolve_config_keys_dir(self) -> Path:
        if self.config_keys_dir is not None:
            return self.config_keys_dir

        from_env = os.environ.get(CONFIG_KEYS_DIR_ENV)
        if from_env:
            return Path(from_env)

        return self.content_root / "config-keys"

    def resolve_app_configuration(self) -> Path | None:
        if self.app_configuration is None:
            return None
        if self.app_configuration.is_absolute():
            return self.app_configuration
        return self.resolve_config_dir() / self.app_configuration
