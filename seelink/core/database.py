"""
Settings storage for SEE Links.
Holds configuration values (plain and encrypted) in a local SQLite file.
"""
import sqlite3
import logging
from pathlib import Path
from typing import Any, Optional, Dict
from cryptography.fernet import Fernet, InvalidToken
import keyring

from seelink import __version__

logger = logging.getLogger(__name__)

KEYRING_SERVICE = "SEELinks"
KEYRING_KEY_NAME = "encryption_key"

DEFAULT_BASE_URL = "https://s.ee/api/v1/"


class ConfigError(RuntimeError):
    """Raised for settings storage and preference errors."""


class DatabaseManager:
    """Manages the SQLite settings database"""

    VERSION = __version__

    def __init__(self, db_path: Optional[Path] = None, *, encryption_key: Optional[bytes] = None):
        """
        Initialize database manager

        Args:
            db_path: Path to SQLite database file. Defaults to ~/.see-links/settings.db
            encryption_key: Fernet key for secret values. Read from (or created in)
                the OS keyring when not given.
        """
        if db_path is None:
            db_path = Path.home() / ".see-links" / "settings.db"

        db_path = Path(db_path)
        db_path.parent.mkdir(parents=True, exist_ok=True)
        self.db_path = db_path
        self.conn: Optional[sqlite3.Connection] = None
        self._encryption_key = encryption_key or self._get_or_create_encryption_key()

    def _get_or_create_encryption_key(self) -> bytes:
        """
        Retrieve or create encryption key from the OS credential store

        Returns:
            Fernet encryption key
        """
        try:
            key_str = keyring.get_password(KEYRING_SERVICE, KEYRING_KEY_NAME)
            if key_str:
                return key_str.encode()
        except Exception as e:
            logger.warning(f"Could not retrieve encryption key: {e}")

        # Generate new key
        key = Fernet.generate_key()
        try:
            keyring.set_password(KEYRING_SERVICE, KEYRING_KEY_NAME, key.decode())
        except Exception as e:
            logger.error(f"Could not store encryption key: {e}")

        return key

    def _encrypt_value(self, value: str) -> str:
        """Encrypt sensitive value"""
        f = Fernet(self._encryption_key)
        return f.encrypt(value.encode()).decode()

    def _decrypt_value(self, encrypted_value: str) -> str:
        """Decrypt sensitive value"""
        f = Fernet(self._encryption_key)
        try:
            return f.decrypt(encrypted_value.encode()).decode()
        except InvalidToken as e:
            raise ConfigError("Stored secret cannot be decrypted with the current key") from e

    def connect(self):
        """Establish database connection"""
        try:
            self.conn = sqlite3.connect(
                self.db_path,
                check_same_thread=False,
                timeout=30.0
            )
            self.conn.row_factory = sqlite3.Row
            self._initialize_schema()
        except sqlite3.DatabaseError as e:
            logger.error(f"Failed to open settings database {self.db_path}: {e}")
            self.close()
            raise ConfigError(f"Settings database {self.db_path} is unusable: {e}") from e
        logger.info(f"Settings database ready: {self.db_path}")

    def _cursor(self) -> sqlite3.Cursor:
        if self.conn is None:
            raise ConfigError("Settings database is not connected")
        return self.conn.cursor()

    def _initialize_schema(self):
        """Create database schema if not exists"""
        cursor = self._cursor()
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS config (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                is_encrypted INTEGER DEFAULT 0,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)
        self.conn.commit()
        self._set_default_config()

    def _set_default_config(self):
        """Set default configuration values"""
        defaults = {
            'app_version': self.VERSION,
            'base_url': DEFAULT_BASE_URL,
            'theme_mode': 'system',
            'file_link_display_type': 'DIRECT_LINK',
        }

        cursor = self._cursor()
        for key, value in defaults.items():
            cursor.execute("""
                INSERT OR IGNORE INTO config (key, value)
                VALUES (?, ?)
            """, (key, value))
        self.conn.commit()

    def get_config(self, key: str, default: Any = None) -> Any:
        """
        Retrieve configuration value

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        cursor = self._cursor()
        cursor.execute("""
            SELECT value, is_encrypted FROM config WHERE key = ?
        """, (key,))

        row = cursor.fetchone()
        if row:
            value = row['value']
            if row['is_encrypted']:
                value = self._decrypt_value(value)
            return value
        return default

    def set_config(self, key: str, value: Any, encrypt: bool = False):
        """
        Set configuration value

        Args:
            key: Configuration key
            value: Configuration value
            encrypt: Whether to encrypt the value
        """
        str_value = str(value)
        if encrypt:
            str_value = self._encrypt_value(str_value)

        cursor = self._cursor()
        cursor.execute("""
            INSERT OR REPLACE INTO config (key, value, is_encrypted, updated_at)
            VALUES (?, ?, ?, CURRENT_TIMESTAMP)
        """, (key, str_value, 1 if encrypt else 0))
        self.conn.commit()

    def delete_config(self, key: str) -> bool:
        """Remove a configuration value. Returns True if a row was deleted."""
        cursor = self._cursor()
        cursor.execute("DELETE FROM config WHERE key = ?", (key,))
        self.conn.commit()
        return cursor.rowcount > 0

    def is_encrypted(self, key: str) -> bool:
        cursor = self._cursor()
        cursor.execute("SELECT is_encrypted FROM config WHERE key = ?", (key,))
        row = cursor.fetchone()
        return bool(row and row['is_encrypted'])

    def get_all_config(self) -> Dict[str, str]:
        """Get all configuration as dictionary (excluding encrypted values)"""
        cursor = self._cursor()
        cursor.execute("""
            SELECT key, value FROM config WHERE is_encrypted = 0 ORDER BY key
        """)
        return {row['key']: row['value'] for row in cursor.fetchall()}

    def list_config_keys(self) -> Dict[str, bool]:
        """All keys mapped to whether their value is encrypted"""
        cursor = self._cursor()
        cursor.execute("SELECT key, is_encrypted FROM config ORDER BY key")
        return {row['key']: bool(row['is_encrypted']) for row in cursor.fetchall()}

    def close(self):
        """Close database connection"""
        if self.conn:
            self.conn.close()
            self.conn = None
