"""Domain records held by the credential store and file registry."""

from sharebox.models.file_record import FileRecord
from sharebox.models.user import User

__all__ = [
    "FileRecord",
    "User",
]
