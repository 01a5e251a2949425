"""Ownership and visibility rules for file records.

Pure functions only; the file registry calls these so the rules can be
swapped or tested without touching registry state.
"""

from __future__ import annotations

from sharebox.models.file_record import FileRecord


def can_view(record: FileRecord, requester: str | None) -> bool:
    return record.is_public or record.owner == requester


def can_modify(record: FileRecord, requester: str | None) -> bool:
    return record.owner == requester


def is_admin(email: str | None, admin_email: str) -> bool:
    return email is not None and email == admin_email
