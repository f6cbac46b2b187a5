"""
Services package.
"""

from ai_cofounder.services.ai_service import AIService, get_ai_service
from ai_cofounder.services.cofounder_service import CofounderService
from ai_cofounder.services.plan_service import BusinessPlanService
from ai_cofounder.services.auth_service import AuthService, get_auth_service

__all__ = [
    "AIService",
    "get_ai_service",
    "CofounderService",
    "BusinessPlanService",
    "AuthService",
    "get_auth_service",
]
