"""
Unit tests for CofounderService over the in-memory directory.
"""

import asyncio
from types import SimpleNamespace

import pytest

from ai_cofounder.core.events import event_bus, EventType
from ai_cofounder.core.exceptions import ResourceNotFoundError, ValidationError
from ai_cofounder.data.cofounders import InMemoryCofounderDirectory, PLACEHOLDER_IMAGE
from ai_cofounder.models import Availability, CofounderCreate
from ai_cofounder.services.cofounder_service import CofounderService


class TestCofounderServiceListing:
    """Tests for listing and lookup."""

    def test_list_all(self, directory):
        service = CofounderService(directory)

        result = asyncio.run(service.list_profiles())

        assert result.total == 8
        assert len(result.cofounders) == 8

    def test_list_with_filters_and_skills(self, directory):
        service = CofounderService(directory)

        result = asyncio.run(service.list_profiles(
            availability="Part-time", skills=["python"]))

        assert [p.id for p in result.cofounders] == [1, 5]
        assert result.total == 2

    def test_pagination(self, directory):
        service = CofounderService(directory)

        result = asyncio.run(service.list_profiles(limit=3, offset=6))

        assert [p.id for p in result.cofounders] == [7, 8]
        assert result.total == 8
        assert result.limit == 3
        assert result.offset == 6

    def test_unknown_experience_bucket(self, directory):
        service = CofounderService(directory)

        with pytest.raises(ValidationError):
            asyncio.run(service.list_profiles(experience="guru"))

    def test_get_profile(self, directory):
        service = CofounderService(directory)

        profile = asyncio.run(service.get_profile(4))

        assert profile.name == "David Kim"

    def test_get_missing_profile(self, directory):
        service = CofounderService(directory)

        with pytest.raises(ResourceNotFoundError):
            asyncio.run(service.get_profile(999))


class TestCofounderServiceCreate:
    """Tests for adding profiles."""

    def test_create_assigns_next_id_and_defaults(self, directory):
        service = CofounderService(directory)
        data = CofounderCreate(name="Grace Hopper", title="Compiler Engineer",
                               skills=["COBOL", " Compilers "])

        profile = asyncio.run(service.create_profile(data))

        assert profile.id == 9
        assert profile.skills == ["COBOL", "Compilers"]
        assert profile.location == "Remote"
        assert profile.availability == Availability.PART_TIME.value
        assert profile.image == PLACEHOLDER_IMAGE
        assert asyncio.run(service.get_profile(9)).name == "Grace Hopper"

    def test_created_profile_is_matchable(self, directory):
        service = CofounderService(directory)
        asyncio.run(service.create_profile(CofounderCreate(
            name="Grace Hopper", title="Compiler Engineer", skills=["COBOL"])))

        response = asyncio.run(service.find_matches(["cobol"]))

        assert [m.name for m in response.matches] == ["Grace Hopper"]

    def test_create_publishes_event(self, directory):
        received = []
        event_bus.subscribe(EventType.PROFILE_CREATED, received.append)
        service = CofounderService(directory)

        asyncio.run(service.create_profile(CofounderCreate(
            name="Grace Hopper", title="Compiler Engineer", skills=["COBOL"])))

        assert received[0].data == {"id": 9, "name": "Grace Hopper"}

    def test_directories_do_not_share_state(self):
        first = CofounderService(InMemoryCofounderDirectory())
        second = CofounderService(InMemoryCofounderDirectory())

        asyncio.run(first.create_profile(CofounderCreate(
            name="Grace Hopper", title="Compiler Engineer", skills=["COBOL"])))

        assert asyncio.run(second.list_profiles()).total == 8


class TestCofounderServiceMatching:
    """Tests for matching with idea suggestions."""

    def test_matches_with_suggestions(self, directory):
        service = CofounderService(directory)

        response = asyncio.run(service.find_matches(
            ["kotlin"], idea="a mobile app for students"))

        assert response.total_matches == 1
        assert response.matches[0].id == 7
        assert "Mobile Development" in response.skills_suggestions

    def test_no_idea_no_suggestions(self, directory):
        service = CofounderService(directory)

        response = asyncio.run(service.find_matches(["python"]))

        assert response.skills_suggestions == []
        assert response.total_matches == 2

    def test_empty_required_skills(self, directory):
        service = CofounderService(directory)

        with pytest.raises(ValidationError):
            asyncio.run(service.find_matches([" "]))


class TestCofounderServicePlanMatching:
    """Tests for ranking the directory against a stored plan."""

    def test_ranks_directory(self, directory):
        service = CofounderService(directory)
        plan = SimpleNamespace(id=3, idea="a campus food delivery app")

        result = asyncio.run(service.match_plan(plan))

        assert result.total_matches == 8
        assert result.business_plan.id == 3
        scores = [m.match_score for m in result.matches]
        assert scores == sorted(scores, reverse=True)

    def test_empty_directory_suggests_types(self):
        service = CofounderService(InMemoryCofounderDirectory(profiles=[]))

        result = asyncio.run(service.match_plan(SimpleNamespace(id=1, idea="a tutoring app")))

        assert result.total_matches == 5
        assert all(m.is_ai_generated for m in result.matches)

    def test_publishes_event(self, directory):
        received = []
        event_bus.subscribe(EventType.MATCHES_COMPUTED, received.append)
        service = CofounderService(directory)

        asyncio.run(service.match_plan(SimpleNamespace(id=4, idea="an app")))

        assert received[0].data == {"plan_id": 4, "total_matches": 8}
