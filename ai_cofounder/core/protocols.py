"""
Protocol-based interfaces for the application.
Uses Python's Protocol for structural subtyping (duck typing with type safety).

Providers and repositories are injected wherever they are used, so tests can
swap in in-memory or mocked implementations without inheritance.
"""

from typing import (
    List, Optional, Dict, Any, Protocol, runtime_checkable
)
from dataclasses import dataclass, field
from datetime import datetime

from ai_cofounder.models.schemas import CofounderProfile, CofounderCreate


# ============================================================================
# Configuration Dataclasses
# ============================================================================

@dataclass(frozen=True)
class LLMConfig:
    """Immutable configuration for LLM providers."""
    model_name: str
    temperature: float = 0.7
    max_tokens: int = 4096
    system_prompt: Optional[str] = None
    extra_params: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ProviderState:
    """Mutable state for providers."""
    initialized: bool = False
    last_used: Optional[datetime] = None
    request_count: int = 0
    error_count: int = 0


# ============================================================================
# Provider Protocols (Structural Subtyping)
# ============================================================================

@runtime_checkable
class LLMProvider(Protocol):
    """
    Protocol for Language Model providers.
    Any class implementing these methods is considered an LLMProvider.

    Usage:
        async def use_llm(provider: LLMProvider):
            raw = await provider.generate_text(prompt)
    """

    @property
    def name(self) -> str:
        """Provider name (e.g., 'gemini', 'openai')."""
        ...

    @property
    def config(self) -> LLMConfig:
        """Provider configuration."""
        ...

    async def generate_text(self, prompt: str) -> str:
        """Send a single prompt and return the raw text reply."""
        ...


@runtime_checkable
class Initializable(Protocol):
    """Protocol for providers that need initialization."""

    async def initialize(self) -> None:
        ...

    async def cleanup(self) -> None:
        ...


# ============================================================================
# Repository Protocols
# ============================================================================

@runtime_checkable
class CofounderDirectory(Protocol):
    """
    Storage for co-founder profiles.

    Implemented in memory (seed data, tests) and on top of SQLAlchemy
    (production).
    """

    async def list_profiles(self) -> List[CofounderProfile]:
        """Return every profile in directory order."""
        ...

    async def get_profile(self, profile_id: int) -> Optional[CofounderProfile]:
        """Return one profile or None."""
        ...

    async def add_profile(self, data: CofounderCreate) -> CofounderProfile:
        """Store a new profile and return it with its id."""
        ...


# ============================================================================
# Base Implementation Mixin
# ============================================================================

class ProviderMixin:
    """
    Mixin providing usage bookkeeping for providers.
    """

    def __init__(self):
        self._state = ProviderState()

    @property
    def state(self) -> ProviderState:
        return self._state

    @property
    def is_initialized(self) -> bool:
        return self._state.initialized

    def mark_initialized(self) -> None:
        self._state.initialized = True
        self._state.last_used = datetime.utcnow()

    def record_request(self) -> None:
        self._state.request_count += 1
        self._state.last_used = datetime.utcnow()

    def record_error(self) -> None:
        self._state.error_count += 1

