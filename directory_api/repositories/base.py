"""Store interface and document shape helpers."""
from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Iterator


def empty_document() -> dict:
    return {"users": []}


def document_defaults(raw: Any) -> dict:
    """Coerce whatever was read into ``{"users": [dict, ...]}``."""
    if not isinstance(raw, dict):
        return empty_document()
    users = raw.get("users")
    if not isinstance(users, list):
        return empty_document()
    raw["users"] = [user for user in users if isinstance(user, dict)]
    return raw


class DocumentStore(ABC):
    """
    Holds the single users document.

    ``load`` never fails (unreadable content is an empty document), ``save``
    raises ``StorageError``. Every read-modify-write cycle must run inside
    ``exclusive()`` so only one writer works on a snapshot at a time.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

    @abstractmethod
    def load(self) -> dict:
        raise NotImplementedError

    @abstractmethod
    def save(self, document: dict) -> None:
        raise NotImplementedError

    def initialize(self) -> None:
        """Create the empty document if the backend has none yet."""

    @contextmanager
    def exclusive(self) -> Iterator[None]:
        with self._lock:
            yield
