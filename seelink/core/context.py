from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from seelink.core.database import DatabaseManager
from seelink.core.dto.file import FileLinkInputs
from seelink.core.links import DisplayType, render_file
from seelink.core.preferences import AppPreferences

logger = logging.getLogger(__name__)


class AppPaths:
    """
    Centralized on-disk locations.

    Single source of truth for every path the application writes to.
    """

    def __init__(self, base_dir: Optional[Path] = None):
        """
        Args:
            base_dir: Base directory for all data. Defaults to ~/.see-links
        """
        self.base = Path(base_dir) if base_dir else (Path.home() / ".see-links")
        self.base.mkdir(parents=True, exist_ok=True)

    @property
    def database(self) -> Path:
        """Settings database file"""
        return self.base / "settings.db"

    @property
    def logs(self) -> Path:
        """Rotating log files"""
        path = self.base / "logs"
        path.mkdir(parents=True, exist_ok=True)
        return path


class CoreContext:
    """
    Shared Core dependencies (paths + settings database + preferences).

    Use a single instance for the process lifetime.
    """

    def __init__(
        self,
        *,
        base_dir: Optional[Path] = None,
        db: Optional[DatabaseManager] = None,
        encryption_key: Optional[bytes] = None,
    ):
        self.paths = AppPaths(base_dir)
        self.db = db or DatabaseManager(self.paths.database, encryption_key=encryption_key)

        if self.db.conn is None:
            self.db.connect()

        self.preferences = AppPreferences(self.db)
        logger.info(f"Core context ready - data dir: {self.paths.base}")

    def render_for(self, inputs: FileLinkInputs, display_type: Optional[DisplayType] = None) -> str:
        """Render a file link, using the stored preference when no type is given."""
        if display_type is None:
            display_type = self.preferences.file_link_display_type
        return render_file(display_type, inputs)

    def close(self) -> None:
        self.db.close()
