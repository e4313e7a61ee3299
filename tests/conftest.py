import logging
import sys
from pathlib import Path

import pytest
from cryptography.fernet import Fernet

REPO_ROOT = Path(__file__).resolve().parents[1]

if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture(autouse=True)
def memory_keyring(monkeypatch):
    """Keep tests away from the OS credential store."""
    import keyring

    store = {}

    def get_password(service, name):
        return store.get((service, name))

    def set_password(service, name, value):
        store[(service, name)] = value

    monkeypatch.setattr(keyring, "get_password", get_password)
    monkeypatch.setattr(keyring, "set_password", set_password)
    return store


@pytest.fixture(autouse=True)
def restore_root_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    try:
        yield
    finally:
        for handler in list(root.handlers):
            if handler not in handlers:
                root.removeHandler(handler)
                handler.close()
        for handler in handlers:
            if handler not in root.handlers:
                root.addHandler(handler)
        root.setLevel(level)


@pytest.fixture
def fernet_key():
    return Fernet.generate_key()


@pytest.fixture
def db(tmp_path, fernet_key):
    from seelink.core.database import DatabaseManager

    manager = DatabaseManager(tmp_path / "settings.db", encryption_key=fernet_key)
    manager.connect()
    try:
        yield manager
    finally:
        manager.close()


@pytest.fixture
def prefs(db):
    from seelink.core.preferences import AppPreferences

    return AppPreferences(db)
