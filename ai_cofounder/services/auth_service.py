"""
Authentication service for user registration, login, and JWT handling.
"""

import uuid
import logging
from datetime import datetime, timedelta
from typing import Optional

from fastapi import Depends
from passlib.context import CryptContext
from jose import jwt, JWTError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ai_cofounder.config import get_settings
from ai_cofounder.database import get_db
from ai_cofounder.database.models import User
from ai_cofounder.database.repositories import UserRepository
from ai_cofounder.models.auth import (
    AuthResponse, Token, TokenData, UserCreate, UserResponse
)
from ai_cofounder.core.exceptions import AuthenticationError, ConflictError
from ai_cofounder.core.events import event_bus, Event, EventType

logger = logging.getLogger(__name__)

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# JWT settings
ALGORITHM = "HS256"

DEMO_USER = {
    "first_name": "Demo",
    "last_name": "User",
    "email": "demo@acmcofounder.com",
    "password": "demo123",
    "university": "Demo University",
    "major": "Computer Science",
    "interests": ["Technology", "AI/ML", "Business"],
    "experience": "intermediate",
}


class AuthService:
    """Service for handling authentication operations."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.users = UserRepository(db)
        self.settings = get_settings()

    @property
    def token_lifetime(self) -> timedelta:
        return timedelta(minutes=self.settings.access_token_expire_minutes)

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a password against its hash."""
        return pwd_context.verify(plain_password, hashed_password)

    def get_password_hash(self, password: str) -> str:
        """Hash a password."""
        return pwd_context.hash(password)

    def create_access_token(self, data: dict, expires_delta: Optional[timedelta] = None) -> str:
        """Create a JWT access token."""
        to_encode = data.copy()
        expire = datetime.utcnow() + (expires_delta or self.token_lifetime)
        to_encode.update({"exp": expire})
        return jwt.encode(
            to_encode, self.settings.jwt_secret_key, algorithm=ALGORITHM)

    def decode_token(self, token: str) -> Optional[TokenData]:
        """Decode and validate a JWT token."""
        try:
            payload = jwt.decode(
                token, self.settings.jwt_secret_key, algorithms=[ALGORITHM])
            user_id: str = payload.get("sub")
            email: str = payload.get("email")

            if user_id is None:
                return None

            return TokenData(user_id=user_id, email=email)
        except JWTError as e:
            logger.warning(f"JWT decode error: {e}")
            return None

    def issue_token(self, user: User) -> Token:
        """Token for a user, valid for the configured lifetime."""
        access_token = self.create_access_token(
            data={"sub": user.id, "email": user.email}
        )
        return Token(
            access_token=access_token,
            token_type="bearer",
            expires_in=int(self.token_lifetime.total_seconds())
        )

    async def get_user_by_email(self, email: str) -> Optional[User]:
        return await self.users.get_by_email(email)

    async def get_user_by_id(self, user_id: str) -> Optional[User]:
        return await self.users.get_by_id(user_id)

    async def register_user(self, user_data: UserCreate) -> AuthResponse:
        """Register a new user and log them in."""
        if await self.users.get_by_email(user_data.email):
            raise ConflictError(
                "A user with this email already exists",
                details={"email": user_data.email}
            )

        try:
            user = await self._insert_user(user_data)
        except IntegrityError as e:
            # Lost a race with a concurrent registration of the same email
            await self.db.rollback()
            raise ConflictError(
                "A user with this email already exists",
                details={"email": user_data.email},
                original_error=e
            )

        logger.info(f"New user registered: {user.email}")
        await event_bus.publish(Event(
            type=EventType.USER_REGISTERED,
            data={"user_id": user.id, "email": user.email},
            source="auth_service"
        ))

        return AuthResponse(
            user=UserResponse.model_validate(user),
            token=self.issue_token(user)
        )

    async def _insert_user(self, user_data: UserCreate) -> User:
        return await self.users.create(User(
            id=str(uuid.uuid4()),
            first_name=user_data.first_name,
            last_name=user_data.last_name,
            email=user_data.email.lower(),
            hashed_password=self.get_password_hash(user_data.password),
            university=user_data.university,
            major=user_data.major,
            interests=list(user_data.interests),
            experience=user_data.experience,
            is_active=True,
            created_at=datetime.utcnow(),
            last_login=datetime.utcnow()
        ))

    async def authenticate_user(self, email: str, password: str) -> Optional[User]:
        """Authenticate a user by email and password."""
        user = await self.users.get_by_email(email)

        if not user:
            return None

        if not self.verify_password(password, user.hashed_password):
            return None

        if not user.is_active:
            return None

        return user

    async def login(self, email: str, password: str) -> AuthResponse:
        """Login a user and return their profile with a JWT token."""
        user = await self.authenticate_user(email, password)

        if not user:
            raise AuthenticationError("Invalid email or password")

        await self.users.touch_login(user)
        logger.info(f"User logged in: {user.email}")

        return AuthResponse(
            user=UserResponse.model_validate(user),
            token=self.issue_token(user)
        )

    async def demo_login(self) -> AuthResponse:
        """Log in as the demo account, creating it on first use."""
        user = await self.users.get_by_email(DEMO_USER["email"])

        if user is None:
            try:
                return await self.register_user(UserCreate(**DEMO_USER))
            except ConflictError:
                # Another request created the demo account first
                user = await self.users.get_by_email(DEMO_USER["email"])
                if user is None:
                    raise

        await self.users.touch_login(user)
        return AuthResponse(
            user=UserResponse.model_validate(user),
            token=self.issue_token(user)
        )


# Dependency for getting auth service
async def get_auth_service(
    session: AsyncSession = Depends(get_db)
) -> AuthService:
    """Dependency to get AuthService sharing the request's database session."""
    return AuthService(session)
