"""
Repository pattern for database operations.
Provides clean interface for CRUD operations on all models.
"""

from typing import List, Optional, Dict, Any, Tuple
from datetime import datetime
from sqlalchemy import select, delete, func
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from ai_cofounder.data.cofounders import PLACEHOLDER_IMAGE, SEED_COFOUNDERS
from ai_cofounder.database.models import BusinessPlan, Cofounder, User
from ai_cofounder.models import CofounderCreate, CofounderProfile

logger = logging.getLogger(__name__)


class CofounderRepository:
    """
    Co-founder directory stored in the database.
    Implements the CofounderDirectory protocol.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_profiles(self) -> List[CofounderProfile]:
        """All profiles ordered by id."""
        result = await self.session.execute(
            select(Cofounder).order_by(Cofounder.id)
        )
        return [CofounderProfile.model_validate(row) for row in result.scalars().all()]

    async def get_profile(self, profile_id: int) -> Optional[CofounderProfile]:
        row = await self.session.get(Cofounder, profile_id)
        if row is None:
            return None
        return CofounderProfile.model_validate(row)

    async def add_profile(self, data: CofounderCreate) -> CofounderProfile:
        """Insert a profile and return it with its new id."""
        values = data.model_dump(exclude={"availability", "image"})
        row = Cofounder(
            **values,
            availability=data.availability.value,
            image=data.image or PLACEHOLDER_IMAGE,
        )
        self.session.add(row)
        await self.session.flush()
        logger.debug(f"Created cofounder: {row.id}")
        return CofounderProfile.model_validate(row)

    async def count(self) -> int:
        result = await self.session.execute(
            select(func.count()).select_from(Cofounder)
        )
        return result.scalar_one()


async def seed_cofounder_directory(session: AsyncSession) -> int:
    """Insert the seed profiles when the directory is empty. Returns rows added."""
    repo = CofounderRepository(session)
    if await repo.count() > 0:
        return 0

    # Ids come from the database so its sequence stays in step
    for profile in SEED_COFOUNDERS:
        session.add(Cofounder(**{k: v for k, v in profile.items() if k != "id"}))
        await session.flush()
    logger.info(f"Seeded co-founder directory with {len(SEED_COFOUNDERS)} profiles")
    return len(SEED_COFOUNDERS)


class BusinessPlanRepository:
    """
    Repository for BusinessPlan CRUD operations.
    Every lookup is scoped to the owning user.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, user_id: str, **values: Any) -> BusinessPlan:
        plan = BusinessPlan(user_id=user_id, **values)
        self.session.add(plan)
        await self.session.flush()
        await self.session.refresh(plan)
        logger.debug(f"Created business plan {plan.id} for user {user_id}")
        return plan

    async def get_for_user(self, plan_id: int, user_id: str) -> Optional[BusinessPlan]:
        stmt = select(BusinessPlan).where(
            BusinessPlan.id == plan_id,
            BusinessPlan.user_id == user_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_for_user(
        self,
        user_id: str,
        status: Optional[str] = None,
        limit: int = 10,
        offset: int = 0
    ) -> Tuple[List[BusinessPlan], int]:
        """Plans of a user, newest first, plus the total before paging."""
        conditions = [BusinessPlan.user_id == user_id]
        if status:
            conditions.append(BusinessPlan.status == status)

        total_result = await self.session.execute(
            select(func.count()).select_from(BusinessPlan).where(*conditions)
        )
        total = total_result.scalar_one()

        stmt = (
            select(BusinessPlan)
            .where(*conditions)
            .order_by(BusinessPlan.created_at.desc(), BusinessPlan.id.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all()), total

    async def all_for_user(self, user_id: str) -> List[BusinessPlan]:
        """Every plan of a user, newest first."""
        stmt = (
            select(BusinessPlan)
            .where(BusinessPlan.user_id == user_id)
            .order_by(BusinessPlan.created_at.desc(), BusinessPlan.id.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_share_token(self, token: str) -> Optional[BusinessPlan]:
        """Plan whose pitch deck was shared under `token`, of any user."""
        result = await self.session.execute(
            select(BusinessPlan).where(BusinessPlan.share_token == token)
        )
        return result.scalar_one_or_none()

    async def update(self, plan: BusinessPlan, values: Dict[str, Any]) -> BusinessPlan:
        for key, value in values.items():
            setattr(plan, key, value)
        plan.updated_at = datetime.utcnow()
        await self.session.flush()
        await self.session.refresh(plan)
        return plan

    async def delete(self, plan_id: int, user_id: str) -> bool:
        stmt = delete(BusinessPlan).where(
            BusinessPlan.id == plan_id,
            BusinessPlan.user_id == user_id
        )
        result = await self.session.execute(stmt)
        return result.rowcount > 0


class UserRepository:
    """
    Repository for User lookups and inserts.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[User]:
        result = await self.session.execute(
            select(User).where(User.email == email.lower())
        )
        return result.scalar_one_or_none()

    async def get_by_id(self, user_id: str) -> Optional[User]:
        return await self.session.get(User, user_id)

    async def create(self, user: User) -> User:
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def touch_login(self, user: User) -> None:
        user.last_login = datetime.utcnow()
        await self.session.flush()
