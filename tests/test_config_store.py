from __future__ import annotations

import json
import os
import stat
from pathlib import Path

import pytest

from dbconn.config_store import ConfigFileStore


def test_read_missing_file_is_empty(store: ConfigFileStore):
    assert store.read() == []


@pytest.mark.parametrize("content", ["", "   \n", "null", '[{"id": "a", "name": '])
def test_read_empty_or_truncated_file_is_empty(connections_file: Path, content: str):
    connections_file.parent.mkdir(parents=True)
    connections_file.write_text(content, encoding="utf-8")

    assert ConfigFileStore(connections_file).read() == []


@pytest.mark.parametrize("content", ["{nope}", "[1] trailing"])
def test_read_malformed_json_raises(connections_file: Path, content: str):
    connections_file.parent.mkdir(parents=True)
    connections_file.write_text(content, encoding="utf-8")

    with pytest.raises(json.JSONDecodeError):
        ConfigFileStore(connections_file).read()


def test_read_directory_propagates_os_error(tmp_path: Path):
    with pytest.raises(OSError):
        ConfigFileStore(tmp_path).read()


def test_write_creates_parent_and_overwrites(store: ConfigFileStore, read_raw):
    store.write([{"id": "a"}, {"id": "b"}])
    store.write([{"id": "c"}])

    assert read_raw() == [{"id": "c"}]
    assert store.read() == [{"id": "c"}]


def test_write_leaves_no_temp_files(store: ConfigFileStore, connections_file: Path):
    store.write([{"id": "a"}])

    assert os.listdir(connections_file.parent) == [connections_file.name]


def test_failed_write_keeps_previous_content(store: ConfigFileStore, read_raw):
    store.write([{"id": "a"}])

    with pytest.raises(TypeError):
        store.write([{"id": object()}])

    assert read_raw() == [{"id": "a"}]


@pytest.mark.parametrize("content", ['{"a": 1}', '"text"', "42"])
def test_read_non_array_document_raises(connections_file: Path, content: str):
    connections_file.parent.mkdir(parents=True)
    connections_file.write_text(content, encoding="utf-8")

    with pytest.raises(ValueError):
        ConfigFileStore(connections_file).read()


def test_read_strips_utf8_bom(connections_file: Path):
    connections_file.parent.mkdir(parents=True)
    connections_file.write_bytes(b"\xef\xbb\xbf")
    assert ConfigFileStore(connections_file).read() == []

    connections_file.write_bytes(b'\xef\xbb\xbf[{"id": "a"}]')
    assert ConfigFileStore(connections_file).read() == [{"id": "a"}]


def test_write_keeps_existing_permissions(store: ConfigFileStore, connections_file: Path):
    store.write([{"id": "a"}])
    os.chmod(connections_file, 0o644)

    store.write([{"id": "b"}])

    assert stat.S_IMODE(connections_file.stat().st_mode) == 0o644


def test_write_new_file_is_private(store: ConfigFileStore, connections_file: Path):
    store.write([{"id": "a"}])

    assert stat.S_IMODE(connections_file.stat().st_mode) == 0o600
