import threading

import pytest

from task_api.errors import NotFoundError, ValidationError
from task_api.ids import TimestampIdAllocator
from task_api.registry import TaskRegistry, build_registry
from task_api.settings import Settings


class TestCreate:
    def test_create_appends_incomplete_task(self, registry):
        task = registry.create("Buy milk")
        assert task == {"id": 1, "title": "Buy milk", "completed": False}
        assert len(registry) == 1

    @pytest.mark.parametrize("title", [None, ""])
    def test_create_without_title_raises_and_does_not_mutate(self, registry, title):
        with pytest.raises(ValidationError) as exc_info:
            registry.create(title)
        assert exc_info.value.message == "Title is required"
        assert exc_info.value.status_code == 400
        assert len(registry) == 0

    def test_rejected_create_does_not_consume_an_id(self, registry):
        with pytest.raises(ValidationError):
            registry.create("")
        assert registry.create("First")["id"] == 1

    def test_whitespace_title_is_kept_verbatim(self, registry):
        assert registry.create("  ")["title"] == "  "


class TestList:
    def test_list_preserves_creation_order(self, registry):
        for i in range(4):
            registry.create(f"Task {i}")
        assert [t["title"] for t in registry.list()] == [f"Task {i}" for i in range(4)]

    def test_returned_records_are_copies(self, registry):
        created = registry.create("Original")
        created["title"] = "Mutated"
        listed = registry.list()
        listed[0]["completed"] = True
        assert registry.list() == [{"id": created["id"], "title": "Original", "completed": False}]


class TestToggle:
    def test_toggle_twice_round_trips(self, registry):
        tid = registry.create("Flip")["id"]
        assert registry.toggle_completion(tid)["completed"] is True
        assert registry.toggle_completion(tid)["completed"] is False

    def test_toggle_unknown_raises_and_does_not_mutate(self, registry):
        registry.create("Stay")
        before = registry.list()
        with pytest.raises(NotFoundError) as exc_info:
            registry.toggle_completion(999)
        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "Task not found"
        assert registry.list() == before


class TestDelete:
    def test_delete_removes_one(self, registry):
        a = registry.create("a")
        b = registry.create("b")
        assert registry.delete(a["id"]) == 1
        assert registry.list() == [b]

    def test_delete_unknown_is_noop(self, registry):
        registry.create("a")
        assert registry.delete(12345) == 0
        assert len(registry) == 1

    def test_deleted_id_cannot_be_toggled(self, registry):
        tid = registry.create("x")["id"]
        registry.delete(tid)
        with pytest.raises(NotFoundError):
            registry.toggle_completion(tid)
        assert registry.list() == []


class TestConcurrency:
    def test_parallel_creates_get_unique_ids(self, registry):
        def worker():
            for i in range(50):
                registry.create(f"t{i}")

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        ids = [t["id"] for t in registry.list()]
        assert len(ids) == 400
        assert len(set(ids)) == 400


class TestBuildRegistry:
    def test_timestamp_strategy(self):
        reg = build_registry(Settings(id_strategy="timestamp"))
        assert isinstance(reg._allocator, TimestampIdAllocator)

    def test_default_strategy_counts_from_one(self):
        reg = build_registry(Settings())
        assert reg.create("a")["id"] == 1
        assert reg.create("b")["id"] == 2

    def test_registry_with_custom_allocator(self):
        reg = TaskRegistry(TimestampIdAllocator(clock=lambda: 1700000000.0))
        first = reg.create("a")["id"]
        second = reg.create("b")["id"]
        assert first == 1700000000000
        assert second == 1700000000001
