from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any


@dataclass
class User:
    first_name: str
    last_name: str
    email: str
    password_hash: str | None = field(default=None, repr=False)
    id: str | None = field(default=None)
    date: datetime | None = field(default=None)


@dataclass
class UserUpdate:
    """Fields to change on an existing user; None means "leave as is"."""

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    password_hash: str | None = field(default=None, repr=False)

    def as_fields(self) -> dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    def is_empty(self) -> bool:
        return not self.as_fields()
