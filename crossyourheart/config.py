"""Environment and settings (Pydantic Settings)."""

from pathlib import Path
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

# Default data directory: ~/.crossyourheart/
_data_dir = Path.home() / ".crossyourheart"
DEFAULT_LOG_FILE = _data_dir / "tutorial.log"


class Settings(BaseSettings):
    """Tutorial settings loaded from environment and .env."""

    model_config = SettingsConfigDict(
        env_prefix="CYH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Theme colors (#RRGGBB), validated when the Theme is built
    theme_primary: str = "#3F51B5"
    theme_rich_teal: str = "#00707A"
    theme_rich_green: str = "#2E7D32"

    # Overrides the bundled slide images when set
    assets_dir: Optional[Path] = None

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_file: Path = DEFAULT_LOG_FILE


def get_settings() -> Settings:
    """Return application settings (singleton-like)."""
    return Settings()
