"""
Idea API routes: plan generation and storage, validation content, the
planning calculators and the plan workspace (scenario projections, market
research, pitch decks and the dashboard).
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ai_cofounder.config import Settings, get_settings
from ai_cofounder.data.form_options import CHALLENGES, INDUSTRIES, STAGES
from ai_cofounder.database import get_db
from ai_cofounder.models import (
    AdSimulationRequest,
    AdSimulationResponse,
    BusinessPlanListResponse,
    BusinessPlanResponse,
    BusinessPlanUpdate,
    DashboardResponse,
    ErrorResponse,
    FinancialProjectionRequest,
    FinancialProjectionResponse,
    FormDataResponse,
    GeneratePlanRequest,
    MarketResearchReport,
    PitchDeck,
    PitchDeckRequest,
    PitchDeckSlide,
    PlanReferenceRequest,
    PlanStatus,
    ScenarioProjectionRequest,
    ScenarioProjectionResponse,
    SharedPitchDeckResponse,
    ShareLinkResponse,
    ShareRequest,
    SlideUpdateRequest,
    ValidationContentRequest,
    ValidationContentResult,
)
from ai_cofounder.models.auth import UserResponse
from ai_cofounder.routes.auth import get_current_user
from ai_cofounder.services import projections
from ai_cofounder.services.ai_service import AIService, get_ai_service
from ai_cofounder.services.plan_service import BusinessPlanService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1/ideas",
    tags=["ideas"],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}}
)


async def get_plan_service(
    session: AsyncSession = Depends(get_db),
    ai_service: AIService = Depends(get_ai_service)
) -> BusinessPlanService:
    """Dependency to get BusinessPlanService with database session."""
    return BusinessPlanService(session, ai_service)


@router.post(
    "/generate",
    response_model=BusinessPlanResponse,
    status_code=status.HTTP_201_CREATED
)
async def generate_plan(
    request: GeneratePlanRequest,
    current_user: UserResponse = Depends(get_current_user),
    service: BusinessPlanService = Depends(get_plan_service)
):
    """
    Generate a business plan for an idea and save it.

    The response `source` is `provider` when an AI provider answered and
    `mock` when demonstration content was used.
    """
    return await service.generate_and_save(current_user.id, request)


@router.get("/plans", response_model=BusinessPlanListResponse)
async def list_plans(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    plan_status: Optional[PlanStatus] = Query(None, alias="status"),
    current_user: UserResponse = Depends(get_current_user),
    service: BusinessPlanService = Depends(get_plan_service)
):
    """List your business plans, newest first."""
    return await service.list_plans(
        current_user.id, page=page, limit=limit, status=plan_status
    )


@router.get("/plans/{plan_id}", response_model=BusinessPlanResponse)
async def get_plan(
    plan_id: int,
    current_user: UserResponse = Depends(get_current_user),
    service: BusinessPlanService = Depends(get_plan_service)
):
    return await service.get_plan(current_user.id, plan_id)


@router.put("/plans/{plan_id}", response_model=BusinessPlanResponse)
async def update_plan(
    plan_id: int,
    update: BusinessPlanUpdate,
    current_user: UserResponse = Depends(get_current_user),
    service: BusinessPlanService = Depends(get_plan_service)
):
    """Update the fields given in the body."""
    return await service.update_plan(current_user.id, plan_id, update)


@router.delete("/plans/{plan_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_plan(
    plan_id: int,
    current_user: UserResponse = Depends(get_current_user),
    service: BusinessPlanService = Depends(get_plan_service)
):
    await service.delete_plan(current_user.id, plan_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/validation/{content_type}", response_model=ValidationContentResult)
async def generate_validation_content(
    content_type: str,
    request: ValidationContentRequest,
    ai_service: AIService = Depends(get_ai_service)
):
    """
    Generate validation content for an idea.

    `content_type` is one of `survey`, `landingPage` or `adCopy`.
    """
    return await ai_service.generate_validation_content(request.idea, content_type)


@router.post("/financials", response_model=FinancialProjectionResponse)
async def financial_projections(request: FinancialProjectionRequest):
    """Six-month projection of users, revenue and runway."""
    return projections.project_financials(
        initial_funding=request.initial_funding,
        growth_rate=request.growth_rate,
        monthly_costs=request.monthly_costs,
        revenue_per_user=request.revenue_per_user,
        initial_users=request.initial_users
    )


@router.post("/ad-simulation", response_model=AdSimulationResponse)
async def ad_simulation(request: AdSimulationRequest):
    """Estimated impressions, clicks and leads for an ad budget."""
    return projections.simulate_ad_campaign(
        budget=request.budget,
        keywords=request.keywords,
        platform=request.platform
    )


@router.get("/form-data", response_model=FormDataResponse)
async def form_data():
    """Choices for the idea input form."""
    return FormDataResponse(
        industries=INDUSTRIES,
        stages=STAGES,
        challenges=CHALLENGES
    )


# ============================================================================
# Plan workspace
# ============================================================================

@router.post("/financial-projections", response_model=ScenarioProjectionResponse)
async def plan_financial_projections(
    request: ScenarioProjectionRequest,
    current_user: UserResponse = Depends(get_current_user),
    service: BusinessPlanService = Depends(get_plan_service)
):
    """
    Three-year projection of a stored plan under a scenario.

    - **scenario**: conservative, realistic or optimistic
    - zero inputs use the defaults of the plan's industry

    The result is saved on the plan.
    """
    return await service.project_plan_financials(current_user.id, request)


@router.post("/market-research", response_model=MarketResearchReport)
async def plan_market_research(
    request: PlanReferenceRequest,
    current_user: UserResponse = Depends(get_current_user),
    service: BusinessPlanService = Depends(get_plan_service)
):
    """Market size, competitors, trends and segments for a stored plan."""
    return await service.research_market(current_user.id, request.business_plan_id)


@router.post("/pitch-deck", response_model=PitchDeck)
async def generate_pitch_deck(
    request: PitchDeckRequest,
    current_user: UserResponse = Depends(get_current_user),
    service: BusinessPlanService = Depends(get_plan_service)
):
    """Ten-slide investor deck for a stored plan. Replaces any earlier deck."""
    return await service.generate_pitch_deck(current_user.id, request)


@router.put("/pitch-deck/{plan_id}/slide/{slide_id}", response_model=PitchDeckSlide)
async def update_slide(
    plan_id: int,
    slide_id: str,
    request: SlideUpdateRequest,
    current_user: UserResponse = Depends(get_current_user),
    service: BusinessPlanService = Depends(get_plan_service)
):
    """Merge the given fields into a slide's content."""
    return await service.update_slide(current_user.id, plan_id, slide_id, request.content)


@router.post("/pitch-deck/{plan_id}/share", response_model=ShareLinkResponse)
async def share_pitch_deck(
    plan_id: int,
    request: ShareRequest,
    current_user: UserResponse = Depends(get_current_user),
    service: BusinessPlanService = Depends(get_plan_service),
    settings: Settings = Depends(get_settings)
):
    """Create a share link for the plan's deck, valid for 30 days."""
    return await service.share_pitch_deck(
        current_user.id, plan_id, request.permissions, settings.frontend_url
    )


@router.get(
    "/pitch-deck/shared/{token}",
    response_model=SharedPitchDeckResponse,
    responses={410: {"model": ErrorResponse}}
)
async def get_shared_pitch_deck(
    token: str,
    service: BusinessPlanService = Depends(get_plan_service)
):
    """Deck behind a share link. No login needed."""
    return await service.get_shared_pitch_deck(token)


@router.get("/dashboard", response_model=DashboardResponse)
async def dashboard(
    current_user: UserResponse = Depends(get_current_user),
    service: BusinessPlanService = Depends(get_plan_service)
):
    """Progress across your plans and the next steps for the newest one."""
    return await service.dashboard(current_user.id)
