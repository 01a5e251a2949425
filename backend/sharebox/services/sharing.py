"""File sharing service: binds credentials, registry and upload store."""

from __future__ import annotations

import logging
from pathlib import Path

from sharebox.exceptions import InvalidCredentials, StorageMissing, UnknownOwner
from sharebox.models.file_record import FileRecord
from sharebox.models.user import User
from sharebox.services.credential_store import CredentialStore
from sharebox.services.file_registry import FileRegistry
from sharebox.services.upload_store import UploadStore

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "application/octet-stream"


class SharingService:
    """Request-level operations of the file sharing service.

    The registry is authoritative: once a record is removed the request
    succeeds even if its blob had already disappeared from disk.
    """

    def __init__(
        self,
        credentials: CredentialStore,
        registry: FileRegistry,
        uploads: UploadStore,
    ):
        self.credentials = credentials
        self.registry = registry
        self.uploads = uploads

    # --- Accounts ---

    def signup(self, email: str, password: str) -> User:
        return self.credentials.create(email, password)

    def login(self, email: str, password: str) -> User:
        user = self.credentials.verify(email, password)
        if user is None:
            logger.info("Failed login for %s", email)
            raise InvalidCredentials()
        return user

    # --- Files ---

    def upload(
        self,
        owner: str,
        data: bytes,
        original_name: str,
        mime_type: str | None = None,
    ) -> FileRecord:
        """Store a blob for a registered owner and register it as private."""
        if self.credentials.find_by_email(owner) is None:
            raise UnknownOwner(owner)

        key = self.uploads.store(data, original_name)
        record = FileRecord(
            storage_key=key,
            original_name=original_name,
            owner=owner,
            mime_type=mime_type or DEFAULT_MIME_TYPE,
            size_bytes=len(data),
        )
        self.registry.add(record)
        logger.info("%s uploaded %s as %s (%d bytes)", owner, original_name, key, len(data))
        return record

    def list_files(self, requester: str | None) -> list[FileRecord]:
        return self.registry.list_visible_to(requester)

    def toggle_privacy(self, storage_key: str, requester: str | None) -> FileRecord:
        return self.registry.toggle_privacy(storage_key, requester)

    def delete_file(self, storage_key: str, requester: str | None) -> FileRecord:
        record = self.registry.remove(storage_key, requester)
        self._discard_blob(record)
        logger.info("%s deleted %s", requester, storage_key)
        return record

    def clear_all(self, requester: str | None) -> list[FileRecord]:
        removed = self.registry.clear_all(requester)
        for record in removed:
            self._discard_blob(record)
        logger.info("Admin %s cleared %d files", requester, len(removed))
        return removed

    def open_upload(self, storage_key: str, requester: str | None) -> tuple[FileRecord, Path]:
        """Registered blob the requester may see. Unregistered blobs are never served."""
        record = self.registry.get_visible(storage_key, requester)
        return record, self.uploads.resolve(storage_key)

    def _discard_blob(self, record: FileRecord) -> None:
        try:
            self.uploads.delete(record.storage_key)
        except StorageMissing:
            logger.warning(
                "Blob for %s (owner %s) was already missing from %s",
                record.storage_key, record.owner, self.uploads.root,
            )
