from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from wordfilter.filtering.dictionary import DEFAULT_REPLACEMENT

DEFAULT_GRAWLIX_CHARS = ["!", "@", "#", "$", "%", "&", "*"]


class FilterSettings(BaseSettings):
    """Word filter configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"

    replacement_method: str = "stars"
    grawlix_chars: list[str] = Field(default_factory=lambda: list(DEFAULT_GRAWLIX_CHARS))
    default_replacement: str = DEFAULT_REPLACEMENT

    seed_name: str = ""
    seed_dir: Path | None = None

    strip_tags: bool = True
