"""
Health and provider status routes.
"""

from fastapi import APIRouter, Depends

from ai_cofounder import __version__
from ai_cofounder.config import get_settings
from ai_cofounder.core.providers import registry
from ai_cofounder.database import db_manager
from ai_cofounder.models import HealthResponse
from ai_cofounder.services.ai_service import AIService, get_ai_service

router = APIRouter(prefix="/api/v1", tags=["system"])


@router.get("/health", response_model=HealthResponse)
async def health_check(ai_service: AIService = Depends(get_ai_service)):
    """
    Service health.

    `providers` tells which AI providers have an API key; without any the
    AI features serve mock content.
    """
    configured = set(ai_service.available_providers())
    return HealthResponse(
        status="healthy" if db_manager.is_initialized else "degraded",
        version=__version__,
        providers={
            name: name in configured
            for name in registry.names()
        }
    )


@router.get("/providers")
async def list_providers(ai_service: AIService = Depends(get_ai_service)):
    """Registered AI providers, the configured ones and the fallback order."""
    settings = get_settings()
    return {
        "registered": registry.names(),
        "configured": ai_service.available_providers(),
        "default": settings.default_llm_provider,
        "fallback_order": settings.parsed_fallback_order(),
        "mock_fallback": True,
    }
