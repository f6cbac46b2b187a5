"""
Authentication Pydantic models and schemas.
"""

from pydantic import BaseModel, EmailStr, Field
from typing import Optional, List
from datetime import datetime


class UserCreate(BaseModel):
    """Request model for user registration."""
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6,
                          description="Password must be at least 6 characters")
    university: str = Field(..., min_length=1, max_length=200)
    major: str = Field(..., min_length=1, max_length=200)
    interests: List[str] = Field(default_factory=list)
    experience: str = "beginner"


class UserLogin(BaseModel):
    """Request model for user login."""
    email: EmailStr
    password: str


class Token(BaseModel):
    """JWT token response model."""
    access_token: str
    token_type: str = "bearer"
    expires_in: int = Field(description="Token expiration in seconds")


class TokenData(BaseModel):
    """Token payload data."""
    user_id: Optional[str] = None
    email: Optional[str] = None


class UserResponse(BaseModel):
    """User response model (without password)."""
    id: str
    first_name: str
    last_name: str
    email: str
    university: str
    major: str
    interests: List[str] = Field(default_factory=list)
    experience: str = "beginner"
    is_active: bool = True
    created_at: datetime
    last_login: Optional[datetime] = None

    model_config = {"from_attributes": True}


class AuthResponse(BaseModel):
    """User profile together with a fresh token."""
    user: UserResponse
    token: Token
