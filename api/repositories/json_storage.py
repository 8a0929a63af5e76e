"""
JSON-file persistence adapter.

Each collection is one JSON document stored in ``<data_dir>/<name>.json``.
``JsonDocumentStore`` is the only primitive that touches the disk; collections
with per-record identity (gold, animal, crops) use ``RecordCollection`` on top
of it, while the loan datasets read and replace the whole document.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable
import json
import os
import tempfile
import threading

from api.core.logging import get_logger

logger = get_logger(__name__)


class CollectionError(Exception):
    """Base class for collection persistence failures."""

    def __init__(self, collection: str, message: str):
        super().__init__(message)
        self.collection = collection
        self.message = message


class CollectionReadError(CollectionError):
    """File missing or not valid JSON."""


class CollectionWriteError(CollectionError):
    """Document could not be serialized or written."""


class RecordNotFoundError(CollectionError):
    def __init__(self, collection: str, key: Any):
        super().__init__(collection, f"No record {key!r} in {collection}")
        self.key = key


class JsonDocumentStore:
    """Whole-document JSON files, one per collection name."""

    def __init__(self, data_dir: Path | str) -> None:
        self.data_dir = Path(data_dir)
        self._locks: dict[str, threading.RLock] = {}
        self._locks_guard = threading.Lock()

    def path(self, name: str) -> Path:
        return self.data_dir / f"{name}.json"

    def lock(self, name: str) -> threading.RLock:
        """Lock serializing read-modify-write sequences on one collection."""
        with self._locks_guard:
            lock = self._locks.get(name)
            if lock is None:
                lock = self._locks[name] = threading.RLock()
            return lock

    def exists(self, name: str) -> bool:
        return self.path(name).exists()

    def ensure(self, name: str, initial: Any = None) -> bool:
        """Create the document with ``initial`` (default ``[]``) when absent."""
        with self.lock(name):
            if self.exists(name):
                return False
            self.write(name, [] if initial is None else initial)
            return True

    def ensure_all(self, names: Iterable[str]) -> list[str]:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        created = []
        for name in names:
            if self.ensure(name):
                logger.info("Created %s", self.path(name))
                created.append(name)
        return created

    def read(self, name: str) -> Any:
        path = self.path(name)
        try:
            with path.open("r", encoding="utf-8") as f:
                return json.load(f)
        except FileNotFoundError as exc:
            raise CollectionReadError(name, f"{path} does not exist") from exc
        except (OSError, ValueError) as exc:
            raise CollectionReadError(name, f"Could not read {path}: {exc}") from exc

    def write(self, name: str, document: Any) -> None:
        path = self.path(name)
        try:
            payload = json.dumps(document, ensure_ascii=False, indent=2)
        except (TypeError, ValueError) as exc:
            raise CollectionWriteError(name, f"Could not serialize {name}: {exc}") from exc
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{name}.", suffix=".tmp", dir=path.parent)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(payload)
                os.replace(tmp_name, path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as exc:
            raise CollectionWriteError(name, f"Could not write {path}: {exc}") from exc


def _numeric(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class RecordCollection:
    """JSON-array collection whose records are located by ``id_field``."""

    def __init__(self, store: JsonDocumentStore, name: str, id_field: str = "id") -> None:
        self.store = store
        self.name = name
        self.id_field = id_field

    def all(self) -> list:
        records = self.store.read(self.name)
        if not isinstance(records, list):
            raise CollectionReadError(self.name, f"{self.name} does not hold a JSON array")
        return records

    def _load_or_empty(self) -> list:
        if not self.store.exists(self.name):
            return []
        return self.all()

    def next_id(self, records: list) -> int:
        current = 0
        for item in records:
            value = item.get(self.id_field) if isinstance(item, dict) else None
            if _numeric(value) and value > current:
                current = value
        return current + 1

    def _index_of(self, records: list, key: Any) -> int:
        for index, item in enumerate(records):
            value = item.get(self.id_field) if isinstance(item, dict) else None
            if _numeric(value) and value == key:
                return index
        raise RecordNotFoundError(self.name, key)

    def _require_object(self, record: Any) -> None:
        if not isinstance(record, dict):
            raise CollectionWriteError(self.name, f"{self.name} records must be JSON objects, got {type(record).__name__}")

    def create(self, record: dict) -> dict:
        self._require_object(record)
        with self.store.lock(self.name):
            records = self._load_or_empty()
            record[self.id_field] = self.next_id(records)
            records.append(record)
            self.store.write(self.name, records)
        return record

    def replace(self, key: Any, record: dict) -> dict:
        self._require_object(record)
        with self.store.lock(self.name):
            records = self.all()
            index = self._index_of(records, key)
            # Identifying field always follows the key, whatever the body said
            record[self.id_field] = key
            records[index] = record
            self.store.write(self.name, records)
        return record

    def delete(self, key: Any) -> dict:
        with self.store.lock(self.name):
            records = self.all()
            index = self._index_of(records, key)
            removed = records.pop(index)
            self.store.write(self.name, records)
        return removed
