"""
Tests for InMemoryResourceStore.

The store reports misses as None / False and never raises.
"""

import threading

import pytest

from core.storage import InMemoryResourceStore, Record


def test_insert_assigns_sequential_ids(store):
    """Test inserts receive ids 1, 2, ... in order."""
    first = store.insert("A", 1)
    second = store.insert("B", 2)

    assert first == Record(id=1, name="A", price=1)
    assert second == Record(id=2, name="B", price=2)
    assert store.next_id == 3


def test_list_empty(store):
    """Test an empty store lists nothing."""
    assert store.list() == []
    assert store.count() == 0


def test_list_keeps_insertion_order(store):
    """Test listing follows insertion order."""
    for name in ("A", "B", "C"):
        store.insert(name, 1)

    assert [r.name for r in store.list()] == ["A", "B", "C"]


def test_list_returns_a_copy(store):
    """Test mutating a listed sequence does not touch the store."""
    store.insert("A", 1)

    listed = store.list()
    listed.clear()

    assert store.count() == 1


def test_find_by_id_miss_returns_none(store):
    """Test a lookup miss returns None."""
    store.insert("A", 1)

    assert store.find_by_id(2) is None
    assert store.find_by_id(1).name == "A"


def test_replace_keeps_id_and_position(store):
    """Test replace keeps the record's id and position."""
    store.insert("A", 1)
    store.insert("B", 2)
    store.insert("C", 3)

    updated = store.replace(2, "B2", 20)

    assert updated == Record(id=2, name="B2", price=20)
    assert [(r.id, r.name, r.price) for r in store.list()] == [
        (1, "A", 1),
        (2, "B2", 20),
        (3, "C", 3),
    ]


def test_replace_miss_changes_nothing(store):
    """Test replacing an unknown id returns None and changes nothing."""
    store.insert("A", 1)

    assert store.replace(999, "X", 9) is None
    assert store.list() == [Record(id=1, name="A", price=1)]


def test_remove_preserves_order_of_rest(store):
    """Test remove keeps the order of the remaining records."""
    store.insert("A", 1)
    store.insert("B", 2)
    store.insert("C", 3)

    assert store.remove(2) is True
    assert [r.name for r in store.list()] == ["A", "C"]


def test_remove_miss_returns_false(store):
    """Test removing an unknown id returns False."""
    store.insert("A", 1)

    assert store.remove(42) is False
    assert store.count() == 1


def test_ids_are_not_reused_after_remove(store):
    """Test ids of removed records are never handed out again."""
    store.insert("A", 1)
    last = store.insert("B", 2)
    store.remove(last.id)

    again = store.insert("C", 3)

    assert again.id == 3
    assert store.next_id == 4


def test_records_are_immutable(store):
    """Test stored records cannot be mutated by callers."""
    record = store.insert("A", 1)

    with pytest.raises(AttributeError):
        record.name = "changed"

    assert store.find_by_id(1).name == "A"


def test_concurrent_inserts_get_distinct_ids():
    """Test inserts from many threads never share an id."""
    store = InMemoryResourceStore()
    per_thread = 200
    thread_count = 8

    def worker():
        for _ in range(per_thread):
            store.insert("tea", 1)

    threads = [threading.Thread(target=worker) for _ in range(thread_count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    ids = [record.id for record in store.list()]
    assert len(ids) == per_thread * thread_count
    assert len(set(ids)) == len(ids)
    assert store.next_id == per_thread * thread_count + 1
