import threading
import uuid

import pytest

from vslices.db import DoesNotExistError, InMemoryDB, UniquenessViolationError


def _db_with(value):
    db = InMemoryDB()
    key = uuid.uuid4()
    db.create(key, value)
    return db, key


def test_create_then_get_returns_item():
    db, key = _db_with("apple")
    assert db.get_by_id(key) == "apple"


@pytest.mark.parametrize(
    "operation",
    [
        lambda db, key: db.get_by_id(key),
        lambda db, key: db.update(key, lambda v: v),
    ],
    ids=["get", "update"],
)
def test_missing_key_raises(operation):
    with pytest.raises(DoesNotExistError):
        operation(InMemoryDB(), uuid.uuid4())


@pytest.mark.parametrize(
    "error, message",
    [(DoesNotExistError, "does not exist"), (UniquenessViolationError, "uniqueness violation")],
)
def test_error_messages(error, message):
    assert str(error()) == message


def test_create_duplicate_raises_and_keeps_original():
    db, key = _db_with("first")
    with pytest.raises(UniquenessViolationError):
        db.create(key, "second")
    assert db.get_by_id(key) == "first"


def test_list_all_empty():
    assert InMemoryDB().list_all() == []


def test_list_all_contains_every_item():
    db = InMemoryDB()
    items = {uuid.uuid4(): n for n in range(5)}
    for key, value in items.items():
        db.create(key, value)
    assert sorted(db.list_all()) == sorted(items.values())


def test_delete_removes_item():
    db, key = _db_with("x")
    db.delete(key)
    with pytest.raises(DoesNotExistError):
        db.get_by_id(key)


def test_delete_missing_leaves_others():
    db, _ = _db_with("x")
    db.delete(uuid.uuid4())
    assert db.list_all() == ["x"]


def test_update_replaces_value():
    db, key = _db_with(10)
    db.update(key, lambda v: v + 5)
    assert db.get_by_id(key) == 15


def test_update_failure_keeps_old_value():
    db, key = _db_with(10)

    def boom(value):
        raise ValueError("rejected")

    with pytest.raises(ValueError, match="rejected"):
        db.update(key, boom)
    assert db.get_by_id(key) == 10


def test_concurrent_creates_are_all_stored():
    db = InMemoryDB()
    threads, per_thread = 8, 50

    def worker():
        for _ in range(per_thread):
            db.create(uuid.uuid4(), object())

    pool = [threading.Thread(target=worker) for _ in range(threads)]
    for t in pool:
        t.start()
    for t in pool:
        t.join()
    assert len(db.list_all()) == threads * per_thread