"""User Service — business rules for the user resource.

Invariants:
    - find_by_id raises ObjectNotFoundError("Object not found") when the id is unknown
    - create and update run the email uniqueness check before any write
    - create never forwards a client-supplied id; the store assigns one
    - delete looks the user up first: unknown ids raise and trigger no delete
    - Stateless: the only dependency is the repository given at construction

Design Decisions:
    - Errors propagate to the API error handlers, never caught here
    - Uniqueness decision lives in core/enforce_email.py (pure); this module only
      fetches the current holder of the email
"""

import logging

from user_api.core.domain_types import UserId
from user_api.core.enforce_email import check_email_available
from user_api.core.errors import (
    DataIntegrityViolationError, ErrorContext, ObjectNotFoundError,
)
from user_api.core.repository_protocols import UserLike, UserRepository
from user_api.models.user import User
from user_api.schemas.user import UserDTO

logger = logging.getLogger(__name__)


class UserService:
    """CRUD use cases over a UserRepository."""

    def __init__(self, repository: UserRepository):
        self.repository = repository

    async def find_by_id(self, user_id: UserId) -> UserLike:
        user = await self.repository.find_by_id(user_id)
        if user is None:
            raise ObjectNotFoundError(
                "Object not found", ErrorContext(user_id=user_id),
            )
        return user

    async def find_all(self) -> list[UserLike]:
        return await self.repository.find_all()

    async def create(self, request: UserDTO) -> UserLike:
        await self._verify_email(request.email, request_id=None)
        user = await self.repository.save(_to_user(request, user_id=None))
        logger.info(f"User {user.id} created", extra={"user_id": user.id})
        return user

    async def update(self, request: UserDTO) -> UserLike:
        """Replace the user at request.id; an unknown id inserts with a store-assigned id."""
        await self._verify_email(request.email, request_id=request.id)
        user = await self.repository.save(_to_user(request, user_id=request.id))
        logger.info(f"User {user.id} updated", extra={"user_id": user.id})
        return user

    async def delete(self, user_id: UserId) -> None:
        await self.find_by_id(user_id)
        await self.repository.delete_by_id(user_id)
        logger.info(f"User {user_id} deleted", extra={"user_id": user_id})

    async def _verify_email(
        self, email: str | None, request_id: UserId | None,
    ) -> None:
        if email is None:
            return
        holder = await self.repository.find_by_email(email)
        try:
            check_email_available(
                holder.id if holder is not None else None, request_id,
            )
        except DataIntegrityViolationError as e:
            logger.warning(
                f"Rejected write for user {request_id}: {e.message}",
                extra={"user_id": request_id, "error_code": e.code},
            )
            raise


def _to_user(request: UserDTO, user_id: int | None) -> User:
    """DTO → domain. Password is carried through; output DTOs drop it."""
    return User(
        id=user_id,
        name=request.name,
        email=request.email,
        password=request.password,
    )
