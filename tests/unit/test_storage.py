"""Storage backend tests."""

import pytest

from pagecraft.storage import JSONFileStore, KeyValueStore, MemoryStore, StorageError


@pytest.mark.unit
class TestMemoryStore:
    """Test in-memory slots."""

    def test_missing_slot(self):
        assert MemoryStore().get("nothing") is None

    def test_values_are_copied(self):
        store = MemoryStore()
        value = [{"id": "a"}]
        store.set("slot", value)
        value.append({"id": "b"})

        loaded = store.get("slot")
        loaded.append({"id": "c"})
        assert store.get("slot") == [{"id": "a"}]
        assert store.keys() == ["slot"]
        assert "slot" in store

    def test_protocol(self):
        assert isinstance(MemoryStore(), KeyValueStore)


@pytest.mark.unit
class TestJSONFileStore:
    """Test file-backed slots."""

    def test_round_trip(self, tmp_path):
        store = JSONFileStore(tmp_path / "state")
        store.set("web-editor-components", [{"id": "a", "type": "header", "content": "Chào"}])

        assert (tmp_path / "state" / "web-editor-components.json").exists()
        assert store.get("web-editor-components") == [{"id": "a", "type": "header", "content": "Chào"}]

    def test_missing_slot(self, tmp_path):
        assert JSONFileStore(tmp_path).get("nothing") is None

    def test_overwrite(self, tmp_path):
        store = JSONFileStore(tmp_path)
        store.set("slot", [1])
        store.set("slot", [2])
        assert store.get("slot") == [2]
        assert not list(tmp_path.glob("*.tmp"))

    @pytest.mark.parametrize("key", ["", "../escape", "a/b", ".hidden"])
    def test_invalid_keys(self, tmp_path, key):
        with pytest.raises(StorageError):
            JSONFileStore(tmp_path).set(key, [])

    def test_corrupt_file(self, tmp_path):
        (tmp_path / "slot.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(StorageError):
            JSONFileStore(tmp_path).get("slot")

    def test_protocol(self, tmp_path):
        assert isinstance(JSONFileStore(tmp_path), KeyValueStore)
