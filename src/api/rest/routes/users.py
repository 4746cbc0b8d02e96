"""User API routes."""

from fastapi import APIRouter, Depends, Request, Response, status

from api.dependencies.services import get_user_service
from api.rest.schemas.user import UserCreate, UserResponse
from core.rate_limit import limiter
from domain.services.user_service import UserService

users_router = APIRouter(prefix="/user", tags=["users"])
staff_router = APIRouter(prefix="/staff", tags=["staff"])


@users_router.get(
    "",
    response_model=list[UserResponse],
    summary="List all users",
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def find_all(
    request: Request,
    service: UserService = Depends(get_user_service),
) -> list[UserResponse]:
    users = await service.find_all()
    return [UserResponse.from_entity(user) for user in users]


@users_router.get(
    "/{login}",
    response_model=UserResponse,
    summary="Get a user",
    responses={404: {"description": "User not found"}},
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def find_one(
    request: Request,
    login: str,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    user = await service.find_one(login)
    return UserResponse.from_entity(user)


@users_router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
    responses={
        201: {"description": "User created successfully"},
        409: {"description": "A user with this login already exists"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def create(
    request: Request,
    response: Response,
    body: UserCreate,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Create a user. The email is encrypted before storage."""
    user = await service.create(body.to_entity())
    response.headers["Location"] = f"/api/user/{user.login}"
    return UserResponse.from_entity(user)


@staff_router.get(
    "",
    response_model=list[UserResponse],
    summary="List staff members",
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def find_staff(
    request: Request,
    service: UserService = Depends(get_user_service),
) -> list[UserResponse]:
    users = await service.find_staff()
    return [UserResponse.from_entity(user) for user in users]


@staff_router.get(
    "/{login}",
    response_model=UserResponse,
    summary="Get a staff member",
    responses={404: {"description": "Staff member not found"}},
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def find_one_staff(
    request: Request,
    login: str,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Get a staff member, including staff currently in pause."""
    user = await service.find_one_staff(login)
    return UserResponse.from_entity(user)
