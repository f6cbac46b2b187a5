"""
Authentication API routes.
"""

import logging
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from ai_cofounder.models.auth import AuthResponse, UserCreate, UserLogin, Token, UserResponse
from ai_cofounder.services.auth_service import AuthService, get_auth_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/auth", tags=["auth"])
security = HTTPBearer()


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    user_data: UserCreate,
    auth_service: AuthService = Depends(get_auth_service)
):
    """
    Register a new user.

    - **email**: Valid email address (must be unique)
    - **password**: At least 6 characters
    - **first_name**, **last_name**, **university**, **major**: required
    """
    return await auth_service.register_user(user_data)


@router.post("/login", response_model=AuthResponse)
async def login(
    credentials: UserLogin,
    auth_service: AuthService = Depends(get_auth_service)
):
    """
    Login and get an access token.

    - **email**: Registered email address
    - **password**: User's password
    """
    return await auth_service.login(credentials.email, credentials.password)


@router.post("/demo-login", response_model=AuthResponse)
async def demo_login(auth_service: AuthService = Depends(get_auth_service)):
    """Login as the shared demo account."""
    return await auth_service.demo_login()


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    auth_service: AuthService = Depends(get_auth_service)
) -> UserResponse:
    """
    Dependency to get the current authenticated user from JWT token.
    """
    token_data = auth_service.decode_token(credentials.credentials)

    if token_data is None or token_data.user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"}
        )

    user = await auth_service.get_user_by_id(token_data.user_id)

    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
            headers={"WWW-Authenticate": "Bearer"}
        )

    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User account is disabled"
        )

    return UserResponse.model_validate(user)


@router.get("/me", response_model=UserResponse)
async def get_me(current_user: UserResponse = Depends(get_current_user)):
    """
    Get current authenticated user's profile.

    Requires a valid JWT token in the Authorization header.
    """
    return current_user


@router.post("/refresh", response_model=Token)
async def refresh_token(
    current_user: UserResponse = Depends(get_current_user),
    auth_service: AuthService = Depends(get_auth_service)
):
    """
    Refresh the access token.

    Requires a valid JWT token. Returns a new token with a full lifetime.
    """
    access_token = auth_service.create_access_token(
        data={"sub": current_user.id, "email": current_user.email}
    )

    return Token(
        access_token=access_token,
        token_type="bearer",
        expires_in=int(auth_service.token_lifetime.total_seconds())
    )
