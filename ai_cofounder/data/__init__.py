"""
Static seed data: the co-founder directory and idea form choices.
"""

from ai_cofounder.data.cofounders import (
    SEED_COFOUNDERS,
    InMemoryCofounderDirectory,
    seed_profiles,
)

__all__ = [
    "SEED_COFOUNDERS",
    "InMemoryCofounderDirectory",
    "seed_profiles",
]
