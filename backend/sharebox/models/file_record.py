"""File record: metadata binding an uploaded blob to its owner."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class FileRecord:
    storage_key: str
    original_name: str
    owner: str
    mime_type: str
    is_public: bool = False
    size_bytes: int = 0
    uploaded_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __repr__(self) -> str:
        visibility = "public" if self.is_public else "private"
        return f"<FileRecord(key='{self.storage_key}', owner='{self.owner}', {visibility})>"
