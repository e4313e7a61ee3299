from seelink.core.context import AppPaths, CoreContext
from seelink.core.database import ConfigError, DatabaseManager
from seelink.core.preferences import AppPreferences

__all__ = [
    "AppPaths",
    "AppPreferences",
    "ConfigError",
    "CoreContext",
    "DatabaseManager",
]
