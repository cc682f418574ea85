"""Promptbook configuration using Pydantic Settings v2.

Provides a typed, nested configuration model with environment variable
mapping. Prefer nested fields and `PROMPTBOOK_{SECTION}__{FIELD}` env vars.

Usage:
    from promptbook.config.settings import settings
    print(settings.library.directory)
"""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DuplicateUrlPolicy(str, Enum):
    """What a registry does when two sources share a promptbook URL."""

    OVERWRITE = "overwrite"
    REJECT = "reject"


class LoggingConfig(BaseModel):
    """Loguru sink configuration."""

    level: str = Field(default="INFO")
    file: Path | None = Field(default=None)
    rotation: str = Field(default="10 MB")
    retention: str = Field(default="7 days")


class LibraryConfig(BaseModel):
    """Defaults for building promptbook registries."""

    directory: Path = Field(default=Path("./promptbooks"))
    duplicate_policy: DuplicateUrlPolicy = Field(default=DuplicateUrlPolicy.OVERWRITE)
    patterns: list[str] = Field(default_factory=lambda: ["*.ptbk.md", "*.ptbk.json"])


class ExecutorSettings(BaseModel):
    """Partial settings for creating promptbook executors.

    Carried by a registry for the executor layer; the registry itself never
    reads them.
    """

    max_execution_attempts: int = Field(default=3, ge=1, le=10)
    is_verbose: bool = Field(default=False)


class PromptbookSettings(BaseSettings):
    """Top-level settings for the promptbook package."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="PROMPTBOOK_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    library: LibraryConfig = Field(default_factory=LibraryConfig)
    executor: ExecutorSettings = Field(default_factory=ExecutorSettings)


settings = PromptbookSettings()

__all__ = [
    "DuplicateUrlPolicy",
    "ExecutorSettings",
    "LibraryConfig",
    "LoggingConfig",
    "PromptbookSettings",
    "settings",
]
