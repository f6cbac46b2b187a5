"""
Validation toolkit API routes: experiment kits built around generated
validation content.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends

from ai_cofounder.models import (
    ABTestRequest,
    ABTestSuggestionsResponse,
    AdCampaignKitRequest,
    AdCampaignKitResponse,
    ErrorResponse,
    LandingPageKitResponse,
    SurveyKitRequest,
    SurveyKitResponse,
    ValidationContentRequest,
    ValidationType,
)
from ai_cofounder.services import experiments, projections
from ai_cofounder.services.ai_service import AIService, get_ai_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1/validation",
    tags=["validation"],
    responses={400: {"model": ErrorResponse}}
)


@router.post("/survey", response_model=SurveyKitResponse)
async def survey_kit(
    request: SurveyKitRequest,
    ai_service: AIService = Depends(get_ai_service)
):
    """Survey questions for the idea, follow-up questions and free survey tools."""
    result = await ai_service.generate_validation_content(request.idea, ValidationType.SURVEY)
    return experiments.survey_kit(result, request.target_audience)


@router.post("/landing-page", response_model=LandingPageKitResponse)
async def landing_page_kit(
    request: ValidationContentRequest,
    ai_service: AIService = Depends(get_ai_service)
):
    """Landing page copy plus suggested page elements and builders."""
    result = await ai_service.generate_validation_content(
        request.idea, ValidationType.LANDING_PAGE
    )
    return experiments.landing_page_kit(result)


@router.post("/ad-campaign", response_model=AdCampaignKitResponse)
async def ad_campaign_kit(
    request: AdCampaignKitRequest,
    ai_service: AIService = Depends(get_ai_service)
):
    """
    Ad copy with a reach estimate.

    - **budget**: campaign budget in dollars
    - **platform**: google, facebook or instagram
    """
    # Unknown platforms fail before any provider is called
    projections.platform_rates(request.platform)
    result = await ai_service.generate_validation_content(request.idea, ValidationType.AD_COPY)
    return experiments.ad_campaign_kit(result, request.budget, request.platform)


@router.post("/ab-test", response_model=ABTestSuggestionsResponse)
async def ab_test_suggestions(request: ABTestRequest):
    """Headline, call-to-action, pricing and social proof variants to test."""
    return experiments.ab_test_suggestions(request.idea, request.element)


@router.get("/templates", response_model=Dict[str, Dict[str, Any]])
async def validation_templates():
    """Templates for customer interviews, landing page tests and MVP tests."""
    return experiments.VALIDATION_TEMPLATES
