"""
Pytest configuration and shared fixtures.
"""

import os
import sys
from pathlib import Path
from typing import List
from unittest.mock import AsyncMock, MagicMock
import pytest

# Ensure project root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Tests run against an in-memory database and without provider keys
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["GEMINI_API_KEY"] = ""
os.environ["OPENAI_API_KEY"] = ""
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["LOG_LEVEL"] = "WARNING"

from fastapi.testclient import TestClient

from ai_cofounder.config import Settings
from ai_cofounder.core.events import event_bus
from ai_cofounder.data.cofounders import InMemoryCofounderDirectory, seed_profiles
from ai_cofounder.models import CofounderProfile


# ============================================================================
# Test Data Fixtures
# ============================================================================

@pytest.fixture
def sample_profiles() -> List[CofounderProfile]:
    """The eight seed profiles."""
    return seed_profiles()


@pytest.fixture
def directory() -> InMemoryCofounderDirectory:
    """A fresh in-memory directory holding the seed profiles."""
    return InMemoryCofounderDirectory()


@pytest.fixture
def registration_payload() -> dict:
    return {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "email": "ada@university.edu",
        "password": "secret123",
        "university": "University of London",
        "major": "Mathematics",
        "interests": ["AI/ML"],
    }


# ============================================================================
# FastAPI Test Client Fixtures
# ============================================================================

@pytest.fixture
def client():
    """Test client with the lifespan running; each test gets a fresh database."""
    from ai_cofounder.main import app
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers(client, registration_payload) -> dict:
    """Authorization header of a freshly registered user."""
    response = client.post("/api/v1/auth/register", json=registration_payload)
    assert response.status_code == 201
    token = response.json()["token"]["access_token"]
    return {"Authorization": f"Bearer {token}"}


# ============================================================================
# Mock Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def clean_event_bus():
    """Drop subscribers added by a test."""
    yield
    event_bus.clear()


@pytest.fixture
def make_settings():
    """Build Settings without reading .env; keyword overrides win."""
    def factory(**overrides) -> Settings:
        values = {
            "gemini_api_key": "",
            "openai_api_key": None,
            "default_llm_provider": "gemini",
            "llm_fallback_order": "gemini,openai",
            "ai_timeout_seconds": 1.0,
        }
        values.update(overrides)
        return Settings(_env_file=None, **values)
    return factory


@pytest.fixture
def mock_llm_provider():
    """Create a mock LLM provider."""
    provider = MagicMock()
    provider.name = "gemini"
    provider.generate_text = AsyncMock(return_value="{}")
    return provider


@pytest.fixture
def provider_factory(mock_llm_provider):
    """Provider factory handing out `mock_llm_provider` for every name."""
    return AsyncMock(return_value=mock_llm_provider)
