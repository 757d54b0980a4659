"""
Tests for the SQL-backed key-value store
"""

import pytest


def test_set_get_and_overwrite(store):
    assert store.get("event:1") is None

    store.set("event:1", {"title": "A"})
    assert store.get("event:1") == {"title": "A"}

    store.set("event:1", {"title": "B"})
    assert store.get("event:1") == {"title": "B"}


def test_delete_missing_key_is_noop(store):
    store.set("k", {"v": 1})
    store.delete("k")
    store.delete("k")
    assert store.get("k") is None


def test_mget_preserves_order_and_reports_missing(store):
    store.mset({"a": 1, "c": 3})
    assert store.mget(["c", "b", "a"]) == [3, None, 1]
    assert store.mget([]) == []


def test_mdel_removes_all_given_keys(store):
    store.mset({"a": 1, "b": 2, "c": 3})
    store.mdel(["a", "b", "missing"])
    assert store.mget(["a", "b", "c"]) == [None, None, 3]


def test_mset_is_all_or_nothing(store):
    store.set("existing", {"v": 1})

    with pytest.raises(Exception):
        store.mset({"first": {"v": 2}, "second": {"v": object()}})

    assert store.get("first") is None
    assert store.get("second") is None
    assert store.get("existing") == {"v": 1}


def test_prefix_scan_is_ordered_and_exact(store):
    store.mset({
        "booking:user:u1:b2": {"id": "b2"},
        "booking:user:u1:b1": {"id": "b1"},
        "booking:user:u10:b3": {"id": "b3"},
        "booking:event:e1:b1": {"id": "b1"},
        "BOOKING:user:u1:b9": {"id": "b9"},
    })

    assert store.get_by_prefix("booking:user:u1:") == [{"id": "b1"}, {"id": "b2"}]
    assert len(store.get_by_prefix("booking:user:")) == 3
    assert store.get_by_prefix("nothing:") == []


def test_prefix_scan_escapes_like_wildcards(store):
    store.mset({
        "user:a_b": {"id": "a_b"},
        "user:axb": {"id": "axb"},
        "user:100%": {"id": "100%"},
        "user:1000": {"id": "1000"},
    })

    assert store.get_by_prefix("user:a_") == [{"id": "a_b"}]
    assert store.get_by_prefix("user:100%") == [{"id": "100%"}]
