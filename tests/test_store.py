"""Tests for the JSON-file record store."""

import json

from salesboard.data.store import DataStore, MemoryStore
from tests.fakes import CATALOG


def test_missing_file_reads_as_empty(tmp_path) -> None:
    assert DataStore(tmp_path / "database.json").load() == []


def test_empty_file_reads_as_empty(tmp_path) -> None:
    path = tmp_path / "database.json"
    path.write_text("   \n")

    assert DataStore(path).load() == []


def test_corrupt_file_reads_as_empty(tmp_path, capsys) -> None:
    path = tmp_path / "database.json"
    path.write_text("[{\"id\": 1,")

    assert DataStore(path).load() == []
    assert "Corrupt record file" in capsys.readouterr().out


def test_non_array_file_reads_as_empty(tmp_path) -> None:
    path = tmp_path / "database.json"
    path.write_text(json.dumps({"id": 1}))

    assert DataStore(path).load() == []


def test_directory_path_reads_as_empty(tmp_path) -> None:
    assert DataStore(tmp_path).load() == []


def test_save_overwrites_whole_collection(tmp_path) -> None:
    store = DataStore(tmp_path / "nested" / "database.json")

    assert store.save(CATALOG) is True
    assert store.load() == CATALOG

    assert store.save(CATALOG[:2]) is True
    assert store.load() == CATALOG[:2]
    assert not (tmp_path / "nested" / "database.json.tmp").exists()


def test_save_failure_is_reported_not_raised(tmp_path, capsys) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    store = DataStore(blocker / "database.json")

    assert store.save(CATALOG) is False
    assert "Error writing data" in capsys.readouterr().out


def test_each_load_rereads_the_file(tmp_path) -> None:
    path = tmp_path / "database.json"
    store = DataStore(path)
    store.save(CATALOG[:1])
    assert len(store.load()) == 1

    path.write_text(json.dumps(CATALOG))

    assert len(store.load()) == len(CATALOG)


def test_memory_store_returns_copies() -> None:
    store = MemoryStore(CATALOG[:3])
    loaded = store.load()
    loaded.clear()

    assert len(store.load()) == 3
    assert store.save([]) is True
    assert store.load() == []
    assert store.describe() == ":memory:"
