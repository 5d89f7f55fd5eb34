"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, in-memory fakes need no inheritance
    - Async in Protocol: implementations do IO
"""

from typing import Protocol

from user_api.core.domain_types import UserId


class UserLike(Protocol):
    """Structural contract for User records returned by a repository."""
    id: int | None
    name: str | None
    email: str | None
    password: str | None


class UserRepository(Protocol):
    """Contract for user persistence, implemented by shell."""
    async def find_by_id(self, user_id: UserId) -> UserLike | None: ...
    async def find_all(self) -> list[UserLike]: ...
    async def find_by_email(self, email: str) -> UserLike | None: ...
    async def save(self, user: UserLike) -> UserLike: ...
    async def delete_by_id(self, user_id: UserId) -> None: ...
