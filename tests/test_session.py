"""Tests for session stores and keyword resolution."""

import pytest

from videorepo.session import (
    FileSessionStore,
    MemorySessionStore,
    SessionStoreType,
    create_session_store,
    resolve_keyword,
    session_key,
)


@pytest.fixture
def memory_store():
    with MemorySessionStore() as store:
        yield store


@pytest.fixture
def file_store(tmp_path):
    with FileSessionStore(tmp_path / "session.json") as store:
        yield store


@pytest.fixture(params=["memory", "file"])
def store(request, memory_store, file_store):
    """Parameterized fixture that runs tests against both stores."""
    if request.param == "memory":
        return memory_store
    return file_store


class TestSessionStore:
    """Tests that run against both store implementations."""

    def test_get_missing_key(self, store):
        assert store.get("nothing") is None
        assert "nothing" not in store

    def test_set_and_get(self, store):
        store.set("r1_keyword", "cats")
        assert store.get("r1_keyword") == "cats"
        assert "r1_keyword" in store

    def test_set_replaces_value(self, store):
        store.set("r1_keyword", "cats")
        store.set("r1_keyword", "dogs")
        assert store.get("r1_keyword") == "dogs"

    def test_delete(self, store):
        store.set("r1_keyword", "cats")
        store.delete("r1_keyword")
        assert store.get("r1_keyword") is None

        # Deleting a missing key is a no-op
        store.delete("r1_keyword")


class TestFileSessionStore:

    def test_persists_across_instances(self, tmp_path):
        path = tmp_path / "session.json"
        FileSessionStore(path).set("r1_keyword", "cats")

        reopened = FileSessionStore(path)
        assert reopened.get("r1_keyword") == "cats"

    def test_unreadable_file_starts_empty(self, tmp_path):
        path = tmp_path / "session.json"
        path.write_text("{not json")

        store = FileSessionStore(path)
        assert store.get("r1_keyword") is None

        store.set("r1_keyword", "cats")
        assert FileSessionStore(path).get("r1_keyword") == "cats"

    def test_undecodable_file_starts_empty(self, tmp_path):
        path = tmp_path / "session.json"
        path.write_bytes(b"\xff\xfe\x00garbage")

        store = FileSessionStore(path)
        assert store.get("r1_keyword") is None

    def test_non_string_values_are_dropped(self, tmp_path):
        path = tmp_path / "session.json"
        path.write_text('{"r1_keyword": null, "r2_keyword": 5, "r3_keyword": "cats"}')

        store = FileSessionStore(path)
        assert store.get("r1_keyword") is None
        assert store.get("r2_keyword") is None
        assert store.get("r3_keyword") == "cats"


class TestFactory:

    def test_memory(self):
        assert isinstance(create_session_store(SessionStoreType.MEMORY), MemorySessionStore)

    def test_file(self, tmp_path):
        store = create_session_store(SessionStoreType.FILE, str(tmp_path / "s.json"))
        assert isinstance(store, FileSessionStore)

    def test_file_requires_path(self):
        with pytest.raises(ValueError):
            create_session_store(SessionStoreType.FILE)


class TestResolveKeyword:

    def test_session_key(self):
        assert session_key("r1") == "r1_keyword"

    def test_first_page_uses_given_keyword(self, memory_store):
        assert resolve_keyword(memory_store, "r1", "cats", 1) == "cats"
        assert memory_store.get("r1_keyword") == "cats"

    def test_next_page_reuses_cached_keyword(self, memory_store):
        resolve_keyword(memory_store, "r1", "cats", 1)
        assert resolve_keyword(memory_store, "r1", "", 2) == "cats"

    def test_no_leak_between_instances(self, memory_store):
        resolve_keyword(memory_store, "r1", "cats", 1)
        assert resolve_keyword(memory_store, "r2", "", 2) == ""

    def test_new_keyword_replaces_cached(self, memory_store):
        resolve_keyword(memory_store, "r1", "cats", 1)
        assert resolve_keyword(memory_store, "r1", "dogs", 2) == "dogs"
        assert memory_store.get("r1_keyword") == "dogs"

    def test_first_page_without_keyword_does_not_reuse(self, memory_store):
        """Only requests past the first page continue a previous search."""
        resolve_keyword(memory_store, "r1", "cats", 1)
        assert resolve_keyword(memory_store, "r1", "", 1) == ""
        assert memory_store.get("r1_keyword") == ""

    def test_empty_keyword_is_written_back(self, memory_store):
        assert resolve_keyword(memory_store, "r1", "", 3) == ""
        assert memory_store.get("r1_keyword") == ""

    def test_reuse_is_stable_over_many_pages(self, memory_store):
        resolve_keyword(memory_store, "r1", "cats", 1)
        for page in range(2, 6):
            assert resolve_keyword(memory_store, "r1", "", page) == "cats"
