from __future__ import annotations

import logging
from typing import Optional

from seelink.core.database import ConfigError, DatabaseManager, DEFAULT_BASE_URL
from seelink.core.links.display_types import DisplayType, from_string

logger = logging.getLogger(__name__)

THEME_MODES = ("system", "light", "dark")


class AppPreferences:
    """
    Typed access to user preferences stored in the settings database.

    Reads never fail on bad stored data: an unknown display type resolves
    to DIRECT_LINK, a missing base URL to the default endpoint.
    """

    KEY_BASE_URL = "base_url"
    KEY_DEFAULT_LINK_DOMAIN = "default_link_domain"
    KEY_DEFAULT_TEXT_DOMAIN = "default_text_domain"
    KEY_DEFAULT_FILE_DOMAIN = "default_file_domain"
    KEY_THEME_MODE = "theme_mode"
    KEY_FILE_LINK_DISPLAY_TYPE = "file_link_display_type"
    KEY_API_KEY = "api_key"

    def __init__(self, db: DatabaseManager):
        self._db = db

    # ------------------------------------------------------------------
    # Endpoint / domains
    # ------------------------------------------------------------------

    @property
    def base_url(self) -> str:
        return self._db.get_config(self.KEY_BASE_URL) or DEFAULT_BASE_URL

    def set_base_url(self, url: str) -> None:
        self._db.set_config(self.KEY_BASE_URL, url)

    @property
    def default_link_domain(self) -> Optional[str]:
        return self._db.get_config(self.KEY_DEFAULT_LINK_DOMAIN)

    def set_default_link_domain(self, domain: str) -> None:
        self._db.set_config(self.KEY_DEFAULT_LINK_DOMAIN, domain)

    @property
    def default_text_domain(self) -> Optional[str]:
        return self._db.get_config(self.KEY_DEFAULT_TEXT_DOMAIN)

    def set_default_text_domain(self, domain: str) -> None:
        self._db.set_config(self.KEY_DEFAULT_TEXT_DOMAIN, domain)

    @property
    def default_file_domain(self) -> Optional[str]:
        return self._db.get_config(self.KEY_DEFAULT_FILE_DOMAIN)

    def set_default_file_domain(self, domain: str) -> None:
        self._db.set_config(self.KEY_DEFAULT_FILE_DOMAIN, domain)

    # ------------------------------------------------------------------
    # Appearance
    # ------------------------------------------------------------------

    @property
    def theme_mode(self) -> str:
        mode = self._db.get_config(self.KEY_THEME_MODE, "system")
        return mode if mode in THEME_MODES else "system"

    def set_theme_mode(self, mode: str) -> None:
        if mode not in THEME_MODES:
            raise ConfigError(f"Unknown theme mode {mode!r}; expected one of {', '.join(THEME_MODES)}")
        self._db.set_config(self.KEY_THEME_MODE, mode)

    # ------------------------------------------------------------------
    # File link display type
    # ------------------------------------------------------------------

    @property
    def file_link_display_type(self) -> DisplayType:
        stored = self._db.get_config(self.KEY_FILE_LINK_DISPLAY_TYPE)
        display_type = from_string(stored)
        if stored and display_type.identifier != stored:
            logger.debug(f"Unknown stored display type {stored!r}, using {display_type.identifier}")
        return display_type

    def set_file_link_display_type(self, display_type: DisplayType) -> None:
        self._db.set_config(self.KEY_FILE_LINK_DISPLAY_TYPE, display_type.identifier)

    # ------------------------------------------------------------------
    # API key (encrypted at rest)
    # ------------------------------------------------------------------

    def get_api_key(self) -> Optional[str]:
        return self._db.get_config(self.KEY_API_KEY)

    def save_api_key(self, api_key: str) -> None:
        if not api_key.strip():
            raise ConfigError("API key must not be empty")
        self._db.set_config(self.KEY_API_KEY, api_key.strip(), encrypt=True)

    def clear_api_key(self) -> None:
        self._db.delete_config(self.KEY_API_KEY)

    def has_api_key(self) -> bool:
        return self.get_api_key() is not None
