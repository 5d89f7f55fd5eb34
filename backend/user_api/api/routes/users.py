"""User Resource — HTTP mapping for the user CRUD operations.

Invariants:
    - Routes hold no business logic: DTO conversion, service call, status/Location only
    - POST ignores any id in the body; PUT overrides the body id with the path id
    - POST returns 201 with Location: /user/{id} and an empty body
    - DELETE returns 204 with an empty body
    - password never leaves through a response (UserDTO excludes it)

Design Decisions:
    - get_user_service is the single construction point: one SqlUserRepository per
      request session, overridable in tests via app.dependency_overrides
    - Location built with url_for so it tracks the GET route's path
    - Path ids are bounded to BIGINT so oversized ids fail validation (400)
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from user_api.core.domain_types import UserId
from user_api.infrastructure.database import get_db
from user_api.infrastructure.user_repository import SqlUserRepository
from user_api.schemas.user import UserDTO
from user_api.services.user_service import UserService

router = APIRouter(prefix="/user", tags=["user"])

# Signed 64-bit range of the id column
UserIdPath = Annotated[int, Path(ge=-(2**63), le=2**63 - 1)]


async def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    """FastAPI dependency wiring the service to the request's DB session."""
    return UserService(SqlUserRepository(db))


@router.get("/{user_id}", response_model=UserDTO, name="find_user_by_id")
async def find_by_id(
    user_id: UserIdPath, service: UserService = Depends(get_user_service),
):
    """Get one user."""
    user = await service.find_by_id(UserId(user_id))
    return UserDTO.from_user(user)


@router.get("", response_model=list[UserDTO])
async def find_all(service: UserService = Depends(get_user_service)):
    """List every user."""
    return [UserDTO.from_user(u) for u in await service.find_all()]


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
async def create(
    body: UserDTO,
    request: Request,
    service: UserService = Depends(get_user_service),
):
    """Create a user. Callers re-fetch via Location to see the stored state."""
    user = await service.create(body.with_id(None))
    location = request.url_for("find_user_by_id", user_id=user.id).path
    return Response(
        status_code=status.HTTP_201_CREATED, headers={"Location": location},
    )


@router.put("/{user_id}", response_model=UserDTO)
async def update(
    user_id: UserIdPath,
    body: UserDTO,
    service: UserService = Depends(get_user_service),
):
    """Replace a user's fields. Path id wins over any id in the body."""
    user = await service.update(body.with_id(UserId(user_id)))
    return UserDTO.from_user(user)


@router.delete(
    "/{user_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response,
)
async def delete(
    user_id: UserIdPath, service: UserService = Depends(get_user_service),
):
    """Delete a user. Unknown ids surface as 404."""
    await service.delete(UserId(user_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
