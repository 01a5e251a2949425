"""Physical blob storage for uploaded files."""

from __future__ import annotations

import logging
import secrets
import time
from pathlib import Path, PurePath

from sharebox.exceptions import StorageMissing, StorageWriteError

logger = logging.getLogger(__name__)

MAX_KEY_ATTEMPTS = 5
MAX_EXTENSION_LENGTH = 16


def _extension(original_name: str) -> str:
    """Extension of the client-supplied name, including the dot."""
    suffix = PurePath(original_name.replace("\\", "/")).suffix
    if len(suffix) > MAX_EXTENSION_LENGTH or not suffix[1:].isalnum():
        return ""
    return suffix


def generate_storage_key(original_name: str) -> str:
    """Millisecond timestamp, random suffix, original extension."""
    return f"{int(time.time() * 1000)}-{secrets.token_hex(4)}{_extension(original_name)}"


class UploadStore:
    """Keeps each upload as one file named by its storage key."""

    def __init__(self, upload_dir: str | Path):
        self._root = Path(upload_dir)
        self._root.mkdir(parents=True, exist_ok=True)

    @property
    def root(self) -> Path:
        return self._root

    def store(self, data: bytes, original_name: str) -> str:
        """Write a new blob and return its storage key."""
        for _ in range(MAX_KEY_ATTEMPTS):
            key = generate_storage_key(original_name)
            path = self._root / key
            try:
                with open(path, "xb") as f:
                    f.write(data)
            except FileExistsError:
                logger.debug("Storage key collision on %s, retrying", key)
                continue
            except OSError as e:
                path.unlink(missing_ok=True)
                logger.error("Failed to write upload %s: %s", key, e)
                raise StorageWriteError(f"Failed to store uploaded file: {e}") from e
            logger.debug("Stored %d bytes as %s", len(data), key)
            return key

        raise StorageWriteError("Could not allocate a unique storage key")

    def exists(self, storage_key: str) -> bool:
        path = self._path_for(storage_key)
        return path is not None and path.is_file()

    def resolve(self, storage_key: str) -> Path:
        path = self._path_for(storage_key)
        if path is None or not path.is_file():
            raise StorageMissing(storage_key)
        return path

    def delete(self, storage_key: str) -> None:
        path = self.resolve(storage_key)
        try:
            path.unlink()
        except FileNotFoundError as e:
            raise StorageMissing(storage_key) from e

    def _path_for(self, storage_key: str) -> Path | None:
        """Map a key to a path, rejecting anything that is not a plain file name."""
        if not storage_key or storage_key in (".", ".."):
            return None
        if "/" in storage_key or "\\" in storage_key or "\x00" in storage_key:
            return None
        return self._root / storage_key
