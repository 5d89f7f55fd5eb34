"""User Schemas — transfer shape for user input and output.

Invariants:
    - All fields optional on input: PUT replaces the record with whatever is sent
    - password accepted on input, never emitted on output (write-only)
    - Output field allow-list is exactly id, name, email

Design Decisions:
    - Field(exclude=True) on password: model_dump and FastAPI response
      serialization both drop it, no separate response model needed
    - from_attributes: DTOs built straight from ORM rows
"""

from pydantic import BaseModel, ConfigDict, Field

from user_api.core.repository_protocols import UserLike


class UserDTO(BaseModel):
    """External representation of a user."""
    model_config = ConfigDict(from_attributes=True)

    id: int | None = None
    name: str | None = Field(None, max_length=255)
    email: str | None = Field(None, max_length=255)
    password: str | None = Field(None, max_length=255, exclude=True)

    @classmethod
    def from_user(cls, user: UserLike) -> "UserDTO":
        """Domain → DTO."""
        return cls.model_validate(user)

    def with_id(self, user_id: int | None) -> "UserDTO":
        """Copy carrying a different id (path id wins over body id)."""
        return self.model_copy(update={"id": user_id})
