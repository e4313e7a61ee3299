"""
Centralized logging configuration with categorized loggers.

This module provides:
- Named categories for different subsystems
- Per-category log level control
- Persistent levels via the settings database
"""
import logging
from typing import Dict, Optional
from pathlib import Path
from logging.handlers import TimedRotatingFileHandler


# Logger categories for different subsystems
class LoggerCategory:
    """Named categories for application loggers"""
    CORE = "core"                  # Context, preferences
    DATABASE = "database"          # Settings database
    CLI = "cli"                    # Command line front end


# Default log levels for each category
DEFAULT_LOG_LEVELS = {
    LoggerCategory.CORE: logging.INFO,
    LoggerCategory.DATABASE: logging.WARNING,  # Reduce DB noise
    LoggerCategory.CLI: logging.INFO,
}


# Map module names to categories
MODULE_TO_CATEGORY = {
    # Core
    'seelink.core': LoggerCategory.CORE,
    'seelink.core.context': LoggerCategory.CORE,
    'seelink.core.preferences': LoggerCategory.CORE,

    # Database
    'seelink.core.database': LoggerCategory.DATABASE,

    # CLI
    'seelink.cli': LoggerCategory.CLI,
}

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class LoggingManager:
    """Manages application-wide logging configuration"""

    def __init__(self, log_dir: Optional[Path] = None, db_manager=None):
        """
        Initialize logging manager.

        Args:
            log_dir: Directory for log files
            db_manager: Database manager for persistent configuration
        """
        self.log_dir = Path(log_dir) if log_dir else (Path.home() / ".see-links" / "logs")
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.db_manager = db_manager
        self._category_levels: Dict[str, int] = {}
        self._load_levels_from_db()

    def _load_levels_from_db(self):
        """Load log levels from database configuration"""
        if not self.db_manager:
            self._category_levels = DEFAULT_LOG_LEVELS.copy()
            return

        for category, default_level in DEFAULT_LOG_LEVELS.items():
            config_key = f'log_level_{category}'
            level_name = self.db_manager.get_config(config_key, logging.getLevelName(default_level))
            level = logging.getLevelName(str(level_name).upper())
            if isinstance(level, int):
                self._category_levels[category] = level
            else:
                self._category_levels[category] = default_level

    def get_category_level(self, category: str) -> int:
        """Get log level for a category"""
        return self._category_levels.get(category, logging.INFO)

    def set_category_level(self, category: str, level: int):
        """Set log level for a category"""
        self._category_levels[category] = level
        if self.db_manager:
            config_key = f'log_level_{category}'
            self.db_manager.set_config(config_key, logging.getLevelName(level))

        # Update all loggers in this category
        self._apply_category_level(category, level)

    def _apply_category_level(self, category: str, level: int):
        """Apply level to all loggers in a category"""
        for module_name, cat in MODULE_TO_CATEGORY.items():
            if cat == category:
                logging.getLogger(module_name).setLevel(level)

    def setup_logging(
        self,
        root_level: int = logging.INFO,
        console: bool = True,
        console_level: Optional[int] = None,
    ):
        """
        Setup application logging with categories.

        Args:
            root_level: Root logger level (default: INFO)
            console: Also log to stderr
            console_level: Minimum level shown on stderr (default: no filter)
        """
        log_file = self.log_dir / "see_links.log"

        formatter = logging.Formatter(LOG_FORMAT)

        # File handler with rotation
        file_handler = TimedRotatingFileHandler(
            log_file,
            when="midnight",
            interval=1,
            backupCount=7,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)

        root_logger = logging.getLogger()
        root_logger.setLevel(root_level)

        # Remove existing handlers
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)
            handler.close()

        root_logger.addHandler(file_handler)

        if console:
            stream_handler = logging.StreamHandler()
            stream_handler.setFormatter(formatter)
            if console_level is not None:
                stream_handler.setLevel(console_level)
            root_logger.addHandler(stream_handler)

        # Apply category levels
        for category, level in self._category_levels.items():
            self._apply_category_level(category, level)

        # Silence noisy third-party loggers
        logging.getLogger('keyring').setLevel(logging.WARNING)

    def get_all_levels(self) -> Dict[str, int]:
        """Get all category log levels"""
        return self._category_levels.copy()


# Global instance
_logging_manager: Optional[LoggingManager] = None


def get_logging_manager() -> Optional[LoggingManager]:
    """Get the manager created by the last setup_logging() call"""
    return _logging_manager


def setup_logging(db_manager=None, log_dir: Optional[Path] = None, **kwargs) -> LoggingManager:
    """Setup application logging (convenience function)"""
    global _logging_manager
    _logging_manager = LoggingManager(log_dir=log_dir, db_manager=db_manager)
    _logging_manager.setup_logging(**kwargs)
    return _logging_manager
