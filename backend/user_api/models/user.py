"""User ORM — the single persisted entity of the API.

Invariants:
    - id is an autoincrement integer primary key, assigned on insert
    - email is unique across all rows (NULL allowed, never compared equal)
    - password is stored as received and never serialized by the API

Design Decisions:
    - Unique index on email backs the service-level uniqueness check, closing
      the check-then-write race between concurrent requests
    - name/email/password nullable: PUT replaces the whole record, so absent
      fields are written as NULL
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from user_api.db.base import Base


class User(Base):
    """Persisted user record."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    email: Mapped[str | None] = mapped_column(
        String(255), nullable=True, unique=True, index=True,
    )
    password: Mapped[str | None] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, name={self.name!r}, email={self.email!r})"
