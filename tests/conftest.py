from __future__ import annotations

import json
from pathlib import Path

import pytest

from dbconn.config_store import ConfigFileStore
from dbconn.repository import ConnectionRepository


@pytest.fixture()
def connections_file(tmp_path: Path) -> Path:
    """
    path of a connections file that does not exist yet.
    tests that need existing content should write it themselves.
    """
    return tmp_path / "config" / "dbConnections.json"


@pytest.fixture()
def store(connections_file: Path) -> ConfigFileStore:
    return ConfigFileStore(connections_file)


@pytest.fixture()
def repo(store: ConfigFileStore) -> ConnectionRepository:
    return ConnectionRepository(store)


@pytest.fixture()
def read_raw(connections_file: Path):
    def _read() -> list:
        return json.loads(connections_file.read_text(encoding="utf-8"))
    return _read
