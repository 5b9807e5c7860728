"""
JSON-file persistence adapters.

``JSONDocumentStore`` keeps the users document (``{"users": [...]}``) and
``JSONPurchaseLog`` the append-only purchase array. Both write to a temporary
file in the target directory and ``os.replace`` it over the previous content,
so a concurrent reader sees either the old or the new file, never half of one.
"""

from __future__ import annotations

import json
import logging
import os
import stat
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator

from directory_api.domain.errors import StorageError

from .base import DocumentStore, document_defaults, empty_document

logger = logging.getLogger(__name__)

NEW_FILE_MODE = 0o644


def read_json(path: Path, default: Any) -> Any:
    """Parse ``path``; absent or unreadable files yield ``default``."""
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        return default
    except (OSError, ValueError) as exc:
        logger.warning("Could not read %s, using empty content: %s", path, exc)
        return default


def write_json_atomic(path: Path, data: Any) -> None:
    """Serialize ``data`` next to ``path`` and atomically swap it in."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    except OSError as exc:
        logger.error("Could not prepare write of %s: %s", path, exc)
        raise StorageError(f"Could not write {path.name}") from exc
    try:
        # mkstemp creates 0600; keep the mode the target already had.
        mode = stat.S_IMODE(path.stat().st_mode) if path.exists() else NEW_FILE_MODE
        os.chmod(tmp_name, mode)
    except OSError as exc:
        os.close(fd)
        os.unlink(tmp_name)
        logger.error("Could not prepare write of %s: %s", path, exc)
        raise StorageError(f"Could not write {path.name}") from exc
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_name, path)
    except (OSError, TypeError, ValueError) as exc:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        logger.error("Could not write %s: %s", path, exc)
        raise StorageError(f"Could not write {path.name}") from exc


class JSONDocumentStore(DocumentStore):
    """Users document stored as a single JSON file."""

    def __init__(self, path: str | os.PathLike) -> None:
        super().__init__()
        self.path = Path(path)

    def load(self) -> dict:
        return document_defaults(read_json(self.path, empty_document()))

    def save(self, document: dict) -> None:
        write_json_atomic(self.path, document)

    def initialize(self) -> None:
        with self.exclusive():
            if not self.path.exists():
                logger.info("Creating users document at %s", self.path)
                self.save(empty_document())


class JSONPurchaseLog:
    """Append-only JSON array of purchases."""

    def __init__(self, path: str | os.PathLike) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()

    @contextmanager
    def exclusive(self) -> Iterator[None]:
        with self._lock:
            yield

    def load(self) -> list:
        entries = read_json(self.path, [])
        if not isinstance(entries, list):
            logger.warning("Purchase log %s is not an array, starting over", self.path)
            return []
        return entries

    def append(self, entries: list[dict]) -> None:
        with self.exclusive():
            current = self.load()
            current.extend(entries)
            write_json_atomic(self.path, current)
