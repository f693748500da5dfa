# phraseforge/shared/config.py
import os
import sys
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from phraseforge.core.domain.models import EmptyPoolPolicy, Variant


def default_data_dir(app_name: str = "phraseforge") -> Path:
    """
    Per-user local data directory (qualifier 'com', organization 'tynsol').
    """
    home = Path.home()
    if sys.platform == "win32":
        base = os.environ.get("LOCALAPPDATA") or str(home / "AppData" / "Local")
        return Path(base) / "tynsol" / app_name / "data"
    if sys.platform == "darwin":
        return home / "Library" / "Application Support" / f"com.tynsol.{app_name}"

    xdg = os.environ.get("XDG_DATA_HOME")
    base_dir = Path(xdg) if xdg else home / ".local" / "share"
    return base_dir / app_name


class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Every field can be overridden with a PHRASEFORGE_-prefixed environment variable.
    """

    # --- Application Meta ---
    APP_NAME: str = "phraseforge"

    # --- Logging ---
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "console"  # 'console' or 'json'

    # --- Storage ---
    # None resolves to the platform data directory (see `data_dir`)
    DATA_DIR: Optional[Path] = None

    # --- External Sources ---
    WORDNET_URL: str = "https://wordnetcode.princeton.edu/3.0/WNdb-3.0.tar.gz"
    WORDNET_ARCHIVE: str = "WNdb-3.0.tar.gz"
    FREQUENCY_URL: str = (
        "https://raw.githubusercontent.com/hermitdave/FrequencyWords/"
        "refs/heads/master/content/2018/en/en_full.txt"
    )
    FREQUENCY_FILE: str = "en_full.txt"
    HTTP_TIMEOUT: float = 60.0
    FETCH_ATTEMPTS: int = Field(3, ge=1)
    FETCH_BACKOFF: float = Field(1.0, ge=0)
    KEEP_ARCHIVE: bool = False
    EXTRACT_COMMAND: str = "tar"

    # --- Generation ---
    VARIANT: Variant = Variant.FREQUENCY
    MIN_FREQUENCY: int = Field(10000, ge=0)
    ON_EMPTY: EmptyPoolPolicy = EmptyPoolPolicy.BLANK

    @property
    def data_dir(self) -> Path:
        """Resolved storage directory."""
        if self.DATA_DIR is not None:
            return self.DATA_DIR.expanduser()
        return default_data_dir(self.APP_NAME)

    @property
    def dict_dir(self) -> Path:
        """Where the WordNet archive unpacks its index files."""
        return self.data_dir / "dict"

    model_config = SettingsConfigDict(env_prefix="PHRASEFORGE_", env_file=".env", extra="ignore")

settings = Settings()
