"""Auth API: register, login and current user.

Only short-lived access tokens are issued (no refresh flow).
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from photofeed.api.v1.dependencies import CurrentUser, get_user_repo, get_user_repo_for_write
from photofeed.core.limiter import limit_auth, limit_register
from photofeed.domain.exceptions import AuthenticationException
from photofeed.infrastructure.persistence.repositories import UserRepository
from photofeed.infrastructure.security.jwt import TOKEN_TYPE, create_access_token
from photofeed.schemas.auth import LoginRequest, RegisterRequest, TokenResponse, UserResponse

router = APIRouter()


@router.post("/register", response_model=UserResponse, status_code=201)
@limit_register
async def register(
    request: Request,
    body: RegisterRequest,
    user_repo: Annotated[UserRepository, Depends(get_user_repo_for_write)],
):
    """Register a new user (public endpoint). 400 if username or email is taken."""
    user = await user_repo.create_user(
        email=body.email,
        username=body.username,
        password=body.password,
    )
    return UserResponse.from_result(user)


@router.post("/login", response_model=TokenResponse)
@limit_auth
async def login(
    request: Request,
    body: LoginRequest,
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
):
    """Authenticate with email and password; return an access token."""
    user = await user_repo.authenticate(email=body.email, password=body.password)
    if not user:
        raise AuthenticationException("Invalid credentials")
    token = create_access_token(user.id, user.role)
    return TokenResponse(access_token=token, token_type=TOKEN_TYPE)


@router.get("/me", response_model=UserResponse)
async def get_me(current_user: CurrentUser):
    """Return the currently authenticated user.

    Requires Authorization: Bearer <token>.
    """
    return UserResponse.from_result(current_user)
