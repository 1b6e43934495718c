"""Workspace configuration loaded from VIEWDECK_* environment variables."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ViewdeckSettings(BaseSettings):
    """Viewdeck workspace settings.

    All fields are read from environment variables with the ``VIEWDECK_``
    prefix.  For example, ``VIEWDECK_LOG_LEVEL=DEBUG`` maps to ``log_level``.
    """

    model_config = SettingsConfigDict(
        env_prefix="VIEWDECK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # -- Logging ---------------------------------------------------------------
    log_level: str = "INFO"
    log_json: bool = False
    """Emit serialized JSON log records on stderr instead of the coloured format."""

    # -- Persistence -----------------------------------------------------------
    store: Literal["local", "memory"] = "local"
    """``local`` keeps settings in a JSON file; ``memory`` forgets them on exit."""

    data_root: str = "./data"
    """Directory holding the settings file."""

    data_prefix: str | None = None
    """Optional namespace directory inserted under ``data_root`` (one per profile)."""

    settings_file: str = "settings.json"

    # -- Workspace defaults ----------------------------------------------------
    default_homepage: str = "https://www.google.com/"
    default_zoom_level: float = Field(default=0.6, gt=0)

    # -- Screen ----------------------------------------------------------------
    screen_width: int = Field(default=1920, gt=0)
    screen_height: int = Field(default=1080, gt=0)
    """Primary display work area, read once when a workspace is created."""

    # -- Helpers ---------------------------------------------------------------

    @property
    def settings_path(self) -> Path:
        base = Path(self.data_root)
        if self.data_prefix:
            base = base / self.data_prefix
        return base / self.settings_file


@lru_cache(maxsize=1)
def _get_settings_cached() -> ViewdeckSettings:
    return ViewdeckSettings()


def get_settings() -> ViewdeckSettings:
    """Return a cached settings instance.

    Reads from environment variables and ``.env`` on first call, then returns
    the same object.  Call ``_get_settings_cached.cache_clear()`` in tests to
    force a re-read after overriding env vars.
    """
    return _get_settings_cached()
