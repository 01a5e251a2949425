"""In-memory registry of shared file records."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator

from sharebox.exceptions import Forbidden, NotFound
from sharebox.models.file_record import FileRecord
from sharebox.services import access_policy

logger = logging.getLogger(__name__)


class FileRegistry:
    """Ordered collection of file records for the lifetime of the process.

    All mutations go through the methods below and run under one lock, so a
    privacy flip or a removal is never observed half-done. Records are not
    persisted; a restart starts with an empty registry.
    """

    def __init__(self, admin_email: str):
        self._admin_email = admin_email
        self._records: list[FileRecord] = []
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __iter__(self) -> Iterator[FileRecord]:
        with self._lock:
            return iter(list(self._records))

    def add(self, record: FileRecord) -> FileRecord:
        with self._lock:
            self._records.append(record)
        return record

    def get(self, storage_key: str) -> FileRecord:
        with self._lock:
            return self._find(storage_key)

    def get_visible(self, storage_key: str, requester: str | None) -> FileRecord:
        """Record for a viewer; private files only for their owner."""
        with self._lock:
            record = self._find(storage_key)
            if not access_policy.can_view(record, requester):
                raise Forbidden("This file is private")
            return record

    def list_visible_to(self, requester: str | None) -> list[FileRecord]:
        with self._lock:
            return [r for r in self._records if access_policy.can_view(r, requester)]

    def toggle_privacy(self, storage_key: str, requester: str | None) -> FileRecord:
        with self._lock:
            record = self._find(storage_key)
            if not access_policy.can_modify(record, requester):
                raise Forbidden("You can only modify your own files")
            record.is_public = not record.is_public
            now_public = record.is_public
        logger.info("File %s is now %s", storage_key, "public" if now_public else "private")
        return record

    def remove(self, storage_key: str, requester: str | None) -> FileRecord:
        with self._lock:
            record = self._find(storage_key)
            if not access_policy.can_modify(record, requester):
                raise Forbidden("You can only delete your own files")
            self._records.remove(record)
        return record

    def clear_all(self, requester: str | None) -> list[FileRecord]:
        if not access_policy.is_admin(requester, self._admin_email):
            logger.warning("Rejected clear-all request from %s", requester)
            raise Forbidden("Only admin can clear all files")

        with self._lock:
            removed = self._records
            self._records = []
        return removed

    def _find(self, storage_key: str) -> FileRecord:
        for record in self._records:
            if record.storage_key == storage_key:
                return record
        raise NotFound(storage_key)
