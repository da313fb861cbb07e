"""Application settings using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

SCM_TYPE_AUTO = "auto"
SCM_TYPE_NONE = "none"


class Settings(BaseSettings):
    """Settings loaded from ``SCM_METADATA_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SCM_METADATA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # General
    skip: bool = False
    log_level: str = "INFO"
    json_logs: bool = False

    # SCM selection: "auto" | "none" | provider name (e.g. "git")
    scm_type: str = SCM_TYPE_AUTO
    directory: str = "."
    connection: str | None = None  # e.g. "scm:git:https://host/org/repo.git"

    # Property naming
    prefix: str = "scm.metadata."
    short_revision_length: int = Field(default=7, ge=0)
    notation: str = "NONE"  # CSV of NONE, ARRAY, PROPERTY
    rename: dict[str, str] = Field(default_factory=dict)

    def type_matches(self, scm_type: str) -> bool:
        return self.scm_type.lower() == scm_type.lower()

    @property
    def is_auto(self) -> bool:
        return self.type_matches(SCM_TYPE_AUTO)

    @property
    def is_disabled(self) -> bool:
        return self.skip or self.type_matches(SCM_TYPE_NONE)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
