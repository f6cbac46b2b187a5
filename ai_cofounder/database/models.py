"""
Database models for accounts, the co-founder directory and business plans.
Uses SQLAlchemy ORM with async support.
"""

from datetime import datetime
from typing import Optional, List
from sqlalchemy import (
    String, Text, DateTime, Integer,
    ForeignKey, JSON, Boolean, Index
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ai_cofounder.database.connection import Base


class User(Base):
    """
    Registered account.
    Owns business plans.
    """
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    first_name: Mapped[str] = mapped_column(String(100))
    last_name: Mapped[str] = mapped_column(String(100))
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    hashed_password: Mapped[str] = mapped_column(String(255))
    university: Mapped[Optional[str]] = mapped_column(
        String(255), nullable=True)
    major: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    interests: Mapped[list] = mapped_column(JSON, default=list)
    experience: Mapped[str] = mapped_column(String(50), default="beginner")
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow)
    last_login: Mapped[Optional[datetime]] = mapped_column(
        DateTime, nullable=True)

    # Relationships
    business_plans: Mapped[List["BusinessPlan"]] = relationship(
        "BusinessPlan", back_populates="user", cascade="all, delete-orphan"
    )


class Cofounder(Base):
    """
    Co-founder directory entry.
    """
    __tablename__ = "cofounders"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    location: Mapped[str] = mapped_column(String(255), default="Remote")
    experience: Mapped[str] = mapped_column(
        String(100), default="Not specified")
    skills: Mapped[list] = mapped_column(JSON, default=list)
    availability: Mapped[str] = mapped_column(String(50), default="Part-time")
    bio: Mapped[str] = mapped_column(Text, default="No bio provided")
    education: Mapped[str] = mapped_column(
        String(255), default="Not specified")
    looking_for: Mapped[str] = mapped_column(
        String(255), default="Open to opportunities")
    previous_startups: Mapped[int] = mapped_column(Integer, default=0)
    image: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow)

    __table_args__ = (
        Index("idx_cofounder_availability", "availability"),
        Index("idx_cofounder_location", "location"),
    )


class BusinessPlan(Base):
    """
    Stored business plan generated for a user.

    Plan sections are JSON documents with camelCase keys, exactly as the
    AI gateway produced them.
    """
    __tablename__ = "business_plans"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="CASCADE")
    )
    idea: Mapped[str] = mapped_column(Text)
    industry: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    stage: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    challenge: Mapped[Optional[str]] = mapped_column(
        String(255), nullable=True)

    problem_statement: Mapped[str] = mapped_column(Text)
    customer_persona: Mapped[dict] = mapped_column(JSON, default=dict)
    lean_canvas: Mapped[dict] = mapped_column(JSON, default=dict)
    pitch_deck_summary: Mapped[dict] = mapped_column(JSON, default=dict)
    market_research: Mapped[dict] = mapped_column(JSON, default=dict)
    validation: Mapped[dict] = mapped_column(JSON, default=dict)

    # Generated on request from the plan workspace
    financial_projections: Mapped[Optional[dict]] = mapped_column(
        JSON, nullable=True)
    market_research_data: Mapped[Optional[dict]] = mapped_column(
        JSON, nullable=True)
    pitch_deck: Mapped[Optional[dict]] = mapped_column(JSON, nullable=True)
    pitch_deck_generated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime, nullable=True)
    share_token: Mapped[Optional[str]] = mapped_column(
        String(64), nullable=True, unique=True, index=True)
    share_permissions: Mapped[Optional[str]] = mapped_column(
        String(20), nullable=True)
    shared_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime, nullable=True)

    source: Mapped[str] = mapped_column(String(20))  # 'provider' or 'mock'
    provider: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    status: Mapped[str] = mapped_column(String(20), default="draft")
    tags: Mapped[list] = mapped_column(JSON, default=list)
    is_public: Mapped[bool] = mapped_column(Boolean, default=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    # Relationship
    user: Mapped["User"] = relationship("User", back_populates="business_plans")

    __table_args__ = (
        Index("idx_plan_user_created", "user_id", "created_at"),
        Index("idx_plan_status", "status"),
    )
