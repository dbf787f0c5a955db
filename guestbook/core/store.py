# guestbook/core/store.py
from __future__ import annotations

import logging
import threading
from typing import Callable, List, Tuple

from .models import BookingEntry

log = logging.getLogger(__name__)

Snapshot = Tuple[BookingEntry, ...]
Observer = Callable[[Snapshot], None]


class Subscription:
    """Handle returned by BookingStore.subscribe()."""

    def __init__(self, store: "BookingStore", observer: Observer):
        self._store = store
        self._observer = observer
        self.active = True

    def unsubscribe(self) -> None:
        if not self.active:
            return
        self.active = False
        self._store._remove_observer(self._observer)


class BookingStore:
    """In-memory list of booking entries shared by all screens of a session.

    Every add/delete replaces the snapshot and notifies each observer exactly
    once, synchronously, with the new snapshot. delete() removes every entry
    equal to the given one, so duplicates go away together.
    """

    def __init__(self):
        self._entries: Snapshot = ()
        self._observers: List[Observer] = []
        self._lock = threading.RLock()

    @property
    def entries(self) -> Snapshot:
        return self._entries

    def current_entries(self) -> Snapshot:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def subscribe(self, observer: Observer) -> Subscription:
        with self._lock:
            self._observers.append(observer)
        return Subscription(self, observer)

    def add(self, entry: BookingEntry) -> None:
        with self._lock:
            self._entries = self._entries + (entry,)
            log.debug("Added booking for %r, %d entries", entry.name, len(self._entries))
            self._notify()

    def delete(self, entry: BookingEntry) -> None:
        with self._lock:
            before = len(self._entries)
            self._entries = tuple(e for e in self._entries if e != entry)
            log.debug("Deleted %d booking(s) for %r, %d entries",
                      before - len(self._entries), entry.name, len(self._entries))
            self._notify()

    def _remove_observer(self, observer: Observer) -> None:
        with self._lock:
            # identity: equal callables may be subscribed more than once
            for i, o in enumerate(self._observers):
                if o is observer:
                    del self._observers[i]
                    return

    def _notify(self) -> None:
        snapshot = self._entries
        # copy so an observer may unsubscribe while we iterate
        for observer in list(self._observers):
            observer(snapshot)
