from __future__ import annotations

import threading
from collections import Counter
from dataclasses import replace
from datetime import date

import pytest

from guestbook.core.models import BookingEntry
from guestbook.core.store import BookingStore


def _entry(name: str = "Alice", arrival: date = date(2024, 1, 10), departure: date = date(2024, 1, 12)) -> BookingEntry:
    return BookingEntry(name=name, arrival_date=arrival, departure_date=departure)


@pytest.fixture
def store() -> BookingStore:
    return BookingStore()


@pytest.fixture
def snapshots(store: BookingStore) -> list:
    received: list = []
    store.subscribe(received.append)
    return received


def test_new_store_is_empty(store: BookingStore) -> None:
    assert store.current_entries() == ()
    assert store.entries == ()
    assert len(store) == 0


def test_add_single_entry() -> None:
    store = BookingStore()
    store.add(BookingEntry("Alice", date(2024, 1, 10), date(2024, 1, 12)))

    assert store.current_entries() == (BookingEntry("Alice", date(2024, 1, 10), date(2024, 1, 12)),)


def test_adds_keep_insertion_order(store: BookingStore) -> None:
    entries = [_entry(name=n) for n in ("Carol", "Alice", "Bob", "Alice")]
    for e in entries:
        store.add(e)

    assert list(store.current_entries()) == entries
    assert len(store) == 4


def test_add_does_not_deduplicate(store: BookingStore) -> None:
    store.add(_entry())
    store.add(_entry())

    assert store.current_entries() == (_entry(), _entry())


def test_delete_unknown_entry_keeps_snapshot_and_notifies_once(store: BookingStore, snapshots: list) -> None:
    store.add(_entry("Alice"))
    before = store.current_entries()

    store.delete(_entry("Nobody"))

    assert store.current_entries() == before
    assert len(snapshots) == 2
    assert snapshots[-1] == before


def test_delete_removes_all_equal_entries(store: BookingStore) -> None:
    store.add(_entry())
    store.add(_entry())

    store.delete(_entry())

    assert store.current_entries() == ()


def test_delete_keeps_relative_order_of_others(store: BookingStore) -> None:
    a, b, c = _entry("A"), _entry("B"), _entry("C")
    for e in (a, b, a, c, a):
        store.add(e)

    store.delete(a)

    assert store.current_entries() == (b, c)


def test_add_a_add_b_delete_a_keeps_b_exactly(store: BookingStore) -> None:
    a = _entry("A", date(2024, 3, 1), date(2024, 3, 5))
    b = _entry("B", date(2024, 4, 1), date(2024, 4, 2))
    store.add(a)
    store.add(b)

    store.delete(a)

    assert store.current_entries() == (b,)
    kept = store.current_entries()[0]
    assert (kept.name, kept.arrival_date, kept.departure_date) == ("B", date(2024, 4, 1), date(2024, 4, 2))


def test_delete_matches_on_every_field(store: BookingStore) -> None:
    a = _entry()
    store.add(a)

    store.delete(replace(a, departure_date=date(2024, 1, 13)))
    assert store.current_entries() == (a,)

    store.delete(replace(a, name="alice"))
    assert store.current_entries() == (a,)


def test_add_then_delete_restores_previous_snapshot(store: BookingStore) -> None:
    store.add(_entry("A"))
    store.add(_entry("B"))
    before = store.current_entries()

    store.add(_entry("C"))
    store.delete(_entry("C"))

    assert store.current_entries() == before


def test_every_mutation_notifies_once_with_new_snapshot(store: BookingStore, snapshots: list) -> None:
    a, b = _entry("A"), _entry("B")

    store.add(a)
    store.add(b)
    store.delete(a)

    assert snapshots == [(a,), (a, b), (b,)]


def test_subscribe_and_reads_do_not_notify(store: BookingStore, snapshots: list) -> None:
    store.current_entries()
    len(store)
    store.subscribe(lambda s: None)

    assert snapshots == []


def test_unsubscribe_stops_notifications(store: BookingStore) -> None:
    received: list = []
    sub = store.subscribe(received.append)

    store.add(_entry("A"))
    sub.unsubscribe()
    sub.unsubscribe()  # second call is a no-op
    store.add(_entry("B"))

    assert received == [(_entry("A"),)]
    assert sub.active is False


def test_unsubscribe_removes_only_that_subscription(store: BookingStore) -> None:
    received: list = []
    first = store.subscribe(received.append)
    store.subscribe(received.append)

    first.unsubscribe()
    store.add(_entry())

    assert received == [(_entry(),)]


def test_observers_called_in_subscription_order(store: BookingStore) -> None:
    calls: list = []
    store.subscribe(lambda s: calls.append("first"))
    store.subscribe(lambda s: calls.append("second"))

    store.add(_entry())

    assert calls == ["first", "second"]


def test_observer_error_propagates_after_mutation(store: BookingStore) -> None:
    def boom(snapshot):
        raise RuntimeError("observer failed")

    store.subscribe(boom)

    with pytest.raises(RuntimeError):
        store.add(_entry())
    assert store.current_entries() == (_entry(),)


def test_observer_may_mutate_store_reentrantly(store: BookingStore) -> None:
    seen: list = []

    def cleanup(snapshot):
        seen.append(snapshot)
        if _entry("tmp") in snapshot:
            store.delete(_entry("tmp"))

    store.subscribe(cleanup)
    store.add(_entry("tmp"))

    assert store.current_entries() == ()
    assert seen == [(_entry("tmp"),), ()]


def test_snapshot_is_not_affected_by_later_mutations(store: BookingStore) -> None:
    store.add(_entry("A"))
    snapshot = store.current_entries()

    store.add(_entry("B"))

    assert snapshot == (_entry("A"),)


def test_concurrent_mutations_deliver_whole_snapshots(store: BookingStore) -> None:
    workers = 8
    rounds = 25
    received: list = []
    store.subscribe(received.append)
    start = threading.Barrier(workers)

    def work(worker: int) -> None:
        start.wait()
        for i in range(rounds):
            entry = _entry(name=f"guest-{worker}-{i}")
            store.add(entry)
            store.delete(entry)

    threads = [threading.Thread(target=work, args=(n,)) for n in range(workers)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=10)
        assert not t.is_alive()

    assert len(received) == 2 * workers * rounds
    previous: tuple = ()
    for snapshot in received:
        added = Counter(snapshot) - Counter(previous)
        removed = Counter(previous) - Counter(snapshot)
        assert sum(added.values()) + sum(removed.values()) == 1
        previous = snapshot
    assert store.current_entries() == ()
