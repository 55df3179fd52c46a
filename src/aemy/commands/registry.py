"""
Concurrent-safe command registry.

Maps command names to ``(handler, category)`` entries. Writes happen once at
startup; every inbound message performs a lookup, so reads share the lock
and writes take it exclusively.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Dict, Iterator, Sequence

from .base import CommandHandler

DEFAULT_CATEGORY = "Other"


@dataclass(frozen=True, slots=True)
class CommandEntry:
    handler: CommandHandler
    category: str


class ReadWriteLock:
    """Many concurrent readers or a single writer."""

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            # waiting writers go first so startup registration cannot starve
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if not self._readers:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class CommandRegistry:
    """Name -> handler store with category grouping for menus."""

    def __init__(self) -> None:
        self._entries: Dict[str, CommandEntry] = {}
        self._lock = ReadWriteLock()

    def register(
        self, names: Sequence[str], handler: CommandHandler, category: str = ""
    ) -> None:
        """
        Map every name in ``names`` to ``handler``.

        Existing names are overwritten (last write wins). An empty
        ``category`` becomes :data:`DEFAULT_CATEGORY`.

        :raises ValueError: If ``names`` is empty or contains an empty name.
        """
        if isinstance(names, str):
            names = [names]
        names = list(names)
        if not names or not all(names):
            raise ValueError("register expects a non-empty sequence of non-empty names")

        entry = CommandEntry(handler=handler, category=category or DEFAULT_CATEGORY)
        with self._lock.write():
            for name in names:
                self._entries[name] = entry

    def lookup(self, name: str) -> CommandHandler | None:
        """Return the handler registered under exactly ``name`` or ``None``."""

        with self._lock.read():
            entry = self._entries.get(name)
        return entry.handler if entry else None

    def get_entry(self, name: str) -> CommandEntry | None:
        with self._lock.read():
            return self._entries.get(name)

    def all(self) -> Dict[str, CommandEntry]:
        """Return a copy of every registration."""

        with self._lock.read():
            return dict(self._entries)

    def by_category(self) -> Dict[str, Dict[str, CommandEntry]]:
        """Return a snapshot ``{lowercased category: {name: entry}}``."""

        grouped: Dict[str, Dict[str, CommandEntry]] = {}
        with self._lock.read():
            for name, entry in self._entries.items():
                grouped.setdefault(entry.category.lower(), {})[name] = entry
        return grouped

    def __contains__(self, name: object) -> bool:
        with self._lock.read():
            return name in self._entries

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._entries)


__all__ = ["CommandEntry", "CommandRegistry", "DEFAULT_CATEGORY", "ReadWriteLock"]
