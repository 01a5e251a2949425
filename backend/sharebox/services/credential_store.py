"""User credential store backed by a single JSON array file."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from sharebox.exceptions import DuplicateEmail
from sharebox.models.user import User

logger = logging.getLogger(__name__)


class CredentialStore:
    """Persists users as one JSON array, rewritten in full on every signup.

    Every lookup re-reads the file, so edits made on disk are picked up
    without a restart. A missing or unreadable file counts as no users.
    """

    def __init__(self, users_file: str | Path):
        self._users_file = Path(users_file)

    @property
    def path(self) -> Path:
        return self._users_file

    def find_by_email(self, email: str) -> User | None:
        for user in self._load():
            if user.email == email:
                return user
        return None

    def create(self, email: str, password: str) -> User:
        users = self._load()
        if any(u.email == email for u in users):
            raise DuplicateEmail(email)

        user = User(email=email, password=password)
        users.append(user)
        self._save(users)
        logger.info("Registered user %s", email)
        return user

    def verify(self, email: str, password: str) -> User | None:
        user = self.find_by_email(email)
        if user is None or user.password != password:
            return None
        return user

    def all(self) -> list[User]:
        return self._load()

    def _load(self) -> list[User]:
        """Read all users from disk."""
        if not self._users_file.exists():
            return []

        try:
            data = json.loads(self._users_file.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning("Failed to read users file %s, treating as empty: %s", self._users_file, e)
            return []

        if not isinstance(data, list):
            logger.warning("Users file %s does not hold a JSON array, treating as empty", self._users_file)
            return []

        users: list[User] = []
        for entry in data:
            try:
                users.append(User.from_dict(entry))
            except (KeyError, TypeError) as e:
                logger.warning("Skipping malformed user entry %r: %s", entry, e)
        return users

    def _save(self, users: list[User]) -> None:
        """Rewrite the whole users file."""
        self._users_file.parent.mkdir(parents=True, exist_ok=True)
        self._users_file.write_text(
            json.dumps([u.to_dict() for u in users], indent=2), encoding="utf-8"
        )
