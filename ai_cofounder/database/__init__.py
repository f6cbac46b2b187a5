"""
Database package for SQLAlchemy models and repository pattern.

This package provides:
- Async database connection management
- SQLAlchemy ORM models
- Repository pattern for clean data access
"""

from ai_cofounder.database.connection import (
    Base,
    DatabaseManager,
    get_db,
    init_db,
    close_db,
    db_manager
)

from ai_cofounder.database.models import (
    User,
    Cofounder,
    BusinessPlan
)

from ai_cofounder.database.repositories import (
    CofounderRepository,
    BusinessPlanRepository,
    UserRepository,
    seed_cofounder_directory
)

__all__ = [
    # Connection
    'Base',
    'DatabaseManager',
    'get_db',
    'init_db',
    'close_db',
    'db_manager',
    # Models
    'User',
    'Cofounder',
    'BusinessPlan',
    # Repositories
    'CofounderRepository',
    'BusinessPlanRepository',
    'UserRepository',
    'seed_cofounder_directory',
]
