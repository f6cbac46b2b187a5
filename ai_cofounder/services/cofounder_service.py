"""
Co-founder Service - directory listing, lookup, creation, skill matching and
plan matching.
"""

from typing import List, Optional
import logging

from ai_cofounder.core.protocols import CofounderDirectory
from ai_cofounder.core.exceptions import ResourceNotFoundError
from ai_cofounder.core.events import event_bus, Event, EventType
from ai_cofounder.models import (
    BusinessPlanResponse,
    CofounderCreate,
    CofounderListResponse,
    CofounderProfile,
    MatchResponse,
    PlanMatchResponse,
    PlanSummary,
)
from ai_cofounder.services import matching

logger = logging.getLogger(__name__)


class CofounderService:
    """
    Operations over a co-founder directory.

    The directory is injected: a SQL repository in the application, an
    in-memory one in tests.
    """

    def __init__(self, directory: CofounderDirectory):
        self._directory = directory

    async def list_profiles(
        self,
        location: Optional[str] = None,
        availability: Optional[str] = None,
        experience: Optional[str] = None,
        skills: Optional[List[str]] = None,
        limit: int = 20,
        offset: int = 0
    ) -> CofounderListResponse:
        """Filtered, paginated directory listing."""
        profiles = await self._directory.list_profiles()
        profiles = matching.filter_profiles(
            profiles,
            location=location,
            availability=availability,
            experience=experience
        )
        if skills:
            profiles = matching.filter_by_skills(profiles, skills)

        return CofounderListResponse(
            cofounders=profiles[offset:offset + limit],
            total=len(profiles),
            limit=limit,
            offset=offset
        )

    async def get_profile(self, profile_id: int) -> CofounderProfile:
        profile = await self._directory.get_profile(profile_id)
        if profile is None:
            raise ResourceNotFoundError("Cofounder", str(profile_id))
        return profile

    async def create_profile(self, data: CofounderCreate) -> CofounderProfile:
        profile = await self._directory.add_profile(data)
        logger.info(f"Created cofounder profile {profile.id}: {profile.name}")

        await event_bus.publish(Event(
            type=EventType.PROFILE_CREATED,
            data={"id": profile.id, "name": profile.name},
            source="cofounder_service"
        ))
        return profile

    async def find_matches(
        self,
        required_skills: List[str],
        user_skills: Optional[List[str]] = None,
        idea: Optional[str] = None
    ) -> MatchResponse:
        """
        Profiles covering the required skills, best first.

        When an idea is given, skills suggested by it are returned alongside
        the matches.
        """
        profiles = await self._directory.list_profiles()
        matches = matching.find_matches(profiles, required_skills, user_skills)
        suggestions = matching.suggest_skills(idea) if idea else []

        await event_bus.publish(Event(
            type=EventType.MATCHES_COMPUTED,
            data={"required_skills": list(required_skills), "total_matches": len(matches)},
            source="cofounder_service"
        ))

        return MatchResponse(
            matches=matches,
            total_matches=len(matches),
            skills_suggestions=suggestions
        )

    async def match_plan(self, plan: BusinessPlanResponse) -> PlanMatchResponse:
        """
        Directory profiles ranked for the plan's industry.

        An empty directory yields suggested co-founder types instead.
        """
        profiles = await self._directory.list_profiles()
        matches = matching.match_for_plan(profiles, plan.idea)
        logger.info(f"Matched {len(matches)} co-founders for plan {plan.id}")

        await event_bus.publish(Event(
            type=EventType.MATCHES_COMPUTED,
            data={"plan_id": plan.id, "total_matches": len(matches)},
            source="cofounder_service"
        ))

        return PlanMatchResponse(
            matches=matches,
            total_matches=len(matches),
            business_plan=PlanSummary(id=plan.id, idea=plan.idea)
        )

    def suggest_skills(self, idea: str) -> List[str]:
        return matching.suggest_skills(idea)
