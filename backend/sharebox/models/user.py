"""User record: one entry of the persisted credential file."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class User:
    email: str
    password: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "User":
        return cls(email=str(data["email"]), password=str(data["password"]))

    def to_dict(self) -> dict[str, str]:
        return asdict(self)

    def __repr__(self) -> str:
        return f"<User(email='{self.email}')>"
