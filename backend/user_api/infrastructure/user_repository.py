"""SQL User Repository — async SQLAlchemy implementation of the UserRepository protocol.

Invariants:
    - save() updates the row when user.id exists in the store, otherwise inserts
      with a store-assigned id (a client id never reaches the id sequence)
    - save() commits and returns the refreshed row (id assigned)
    - An IntegrityError at commit is rolled back; it becomes
      DataIntegrityViolationError("Email already used") only when another row
      holds the email, otherwise DatabaseError
    - find_all() returns rows in primary key order
    - find_by_email(None) never matches (no IS NULL lookup)

Design Decisions:
    - session.merge() for the update path, add() for inserts
    - The email holder is re-read after rollback instead of parsing driver
      messages, so the check works the same on SQLite and PostgreSQL
    - delete_by_id issues a bulk DELETE: the service already verified existence
"""

import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from user_api.core.domain_types import UserId
from user_api.core.enforce_email import EMAIL_ALREADY_USED
from user_api.core.errors import DataIntegrityViolationError, DatabaseError
from user_api.models.user import User

logger = logging.getLogger(__name__)


class SqlUserRepository:
    """Record store for users backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_id(self, user_id: UserId) -> User | None:
        return await self.db.get(User, user_id)

    async def find_all(self) -> list[User]:
        result = await self.db.execute(select(User).order_by(User.id))
        return list(result.scalars().all())

    async def find_by_email(self, email: str | None) -> User | None:
        if email is None:
            return None
        result = await self.db.execute(
            select(User).where(User.email == email),
        )
        return result.scalar_one_or_none()

    async def save(self, user: User) -> User:
        if user.id is not None and await self.db.get(User, user.id) is None:
            user.id = None
        if user.id is None:
            self.db.add(user)
            persisted = user
        else:
            persisted = await self.db.merge(user)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            await self._raise_integrity_error(user, e)
        await self.db.refresh(persisted)
        return persisted

    async def _raise_integrity_error(self, user: User, e: IntegrityError) -> None:
        """Email conflict → DataIntegrityViolationError, anything else → DatabaseError."""
        holder = await self.find_by_email(user.email)
        if holder is not None and holder.id != user.id:
            logger.warning(
                f"Unique email constraint rejected user write: {e.orig}",
                extra={"user_id": user.id, "error_code": "DATA_INTEGRITY_VIOLATION"},
            )
            raise DataIntegrityViolationError(EMAIL_ALREADY_USED)
        logger.error(
            f"Integrity error on user write: {e.orig}",
            extra={"user_id": user.id, "error_code": "DATABASE_ERROR"},
        )
        raise DatabaseError("Integrity constraint violated", "commit")

    async def delete_by_id(self, user_id: UserId) -> None:
        await self.db.execute(delete(User).where(User.id == user_id))
        await self.db.commit()
