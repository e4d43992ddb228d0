from __future__ import annotations

import pytest

from kvconfig.reader import Entry, LookupStatus, StoreClosedError, load_bytes


def test_lookup_truthiness_follows_status():
    store = load_bytes(b"a=1\nflag\n")

    assert store.get(b"a")
    assert store.get(b"a").found
    assert not store.get(b"flag")
    assert not store.get(b"missing")


def test_contains_covers_entries_without_value():
    store = load_bytes(b"a=1\nflag\n")

    assert b"a" in store
    assert "flag" in store
    assert b"missing" not in store
    assert 42 not in store


def test_iteration_yields_entries():
    store = load_bytes(b"a=1\nflag\n")

    assert list(store) == [Entry(b"a", b"1"), Entry(b"flag", None)]


def test_close_releases_store():
    store = load_bytes(b"a=1\n")
    store.close()

    assert store.closed
    assert repr(store) == "<Store closed>"
    with pytest.raises(StoreClosedError):
        store.get(b"a")
    with pytest.raises(StoreClosedError):
        list(store)
    with pytest.raises(StoreClosedError):
        len(store)


def test_second_close_raises():
    store = load_bytes(b"a=1\n")
    store.close()

    with pytest.raises(StoreClosedError, match="closed"):
        store.close()


def test_context_manager_closes_on_exit():
    with load_bytes(b"a=1\n") as store:
        assert store.get(b"a").status is LookupStatus.FOUND

    assert store.closed


def test_context_manager_closes_on_error():
    with pytest.raises(RuntimeError):
        with load_bytes(b"a=1\n") as store:
            raise RuntimeError("boom")

    assert store.closed


def test_context_manager_tolerates_explicit_close():
    with load_bytes(b"a=1\n") as store:
        store.close()

    assert store.closed


def test_repr_reports_size():
    store = load_bytes(b"a=1\nb=2\n")

    assert repr(store) == "<Store entries=2 bytes=8>"
