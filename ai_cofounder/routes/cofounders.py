"""
Co-founder directory API routes.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ai_cofounder.database import get_db, CofounderRepository
from ai_cofounder.models import (
    CofounderCreate,
    CofounderListResponse,
    CofounderProfile,
    ErrorResponse,
    MatchRequest,
    MatchResponse,
    PlanMatchResponse,
    PlanReferenceRequest,
    SkillsSuggestionRequest,
    SkillsSuggestionResponse,
)
from ai_cofounder.models.auth import UserResponse
from ai_cofounder.routes.auth import get_current_user
from ai_cofounder.routes.ideas import get_plan_service
from ai_cofounder.services.cofounder_service import CofounderService
from ai_cofounder.services.plan_service import BusinessPlanService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1/cofounders",
    tags=["cofounders"],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}}
)


async def get_cofounder_service(
    session: AsyncSession = Depends(get_db)
) -> CofounderService:
    """Dependency to get CofounderService backed by the database."""
    return CofounderService(CofounderRepository(session))


@router.get("", response_model=CofounderListResponse)
async def list_cofounders(
    location: Optional[str] = Query(None, description="Substring of the location"),
    availability: Optional[str] = Query(None, description="e.g. Full-time"),
    experience: Optional[str] = Query(None, description="entry, mid or senior"),
    skills: Optional[str] = Query(None, description="Comma-separated skills"),
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    service: CofounderService = Depends(get_cofounder_service)
):
    """List directory profiles with optional filters."""
    skill_list = [s.strip() for s in skills.split(",")] if skills else None
    return await service.list_profiles(
        location=location,
        availability=availability,
        experience=experience,
        skills=skill_list,
        limit=limit,
        offset=offset
    )


@router.post("/match", response_model=MatchResponse)
async def match_cofounders(
    request: MatchRequest,
    service: CofounderService = Depends(get_cofounder_service)
):
    """
    Find co-founders covering the required skills.

    - **required_skills**: skills the co-founder should bring
    - **user_skills**: your own skills (informational)
    - **idea**: optional; adds skills suggestions to the response
    """
    return await service.find_matches(
        request.required_skills,
        user_skills=request.user_skills,
        idea=request.idea
    )


@router.post("/match-plan", response_model=PlanMatchResponse)
async def match_plan(
    request: PlanReferenceRequest,
    current_user: UserResponse = Depends(get_current_user),
    plans: BusinessPlanService = Depends(get_plan_service),
    service: CofounderService = Depends(get_cofounder_service)
):
    """
    Rank directory co-founders for one of your business plans.

    Scores combine skills relevant to the plan's industry, experience,
    previous startups and availability.
    """
    plan = await plans.get_plan(current_user.id, request.business_plan_id)
    return await service.match_plan(plan)


@router.post("/suggestions", response_model=SkillsSuggestionResponse)
async def suggest_skills(
    request: SkillsSuggestionRequest,
    service: CofounderService = Depends(get_cofounder_service)
):
    """Skills worth looking for, based on keywords in the idea."""
    return SkillsSuggestionResponse(suggestions=service.suggest_skills(request.idea))


@router.get("/{profile_id}", response_model=CofounderProfile)
async def get_cofounder(
    profile_id: int,
    service: CofounderService = Depends(get_cofounder_service)
):
    return await service.get_profile(profile_id)


@router.post("", response_model=CofounderProfile, status_code=status.HTTP_201_CREATED)
async def create_cofounder(
    data: CofounderCreate,
    service: CofounderService = Depends(get_cofounder_service)
):
    """Add a profile to the directory."""
    return await service.create_profile(data)
