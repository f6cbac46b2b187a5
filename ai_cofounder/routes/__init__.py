"""
Routes package.
"""

from ai_cofounder.routes.auth import router as auth_router
from ai_cofounder.routes.cofounders import router as cofounders_router
from ai_cofounder.routes.ideas import router as ideas_router
from ai_cofounder.routes.system import router as system_router
from ai_cofounder.routes.validation import router as validation_router

__all__ = [
    "auth_router",
    "cofounders_router",
    "ideas_router",
    "system_router",
    "validation_router",
]
