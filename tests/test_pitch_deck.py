"""
Unit tests for pitch deck generation and share link expiry.
"""

from datetime import datetime, timedelta

from ai_cofounder.services.pitch_deck import (
    SHARE_LINK_DAYS,
    build_pitch_deck,
    company_name,
    share_expired,
    share_expires_at,
)

SLIDE_IDS = [
    "title", "problem", "solution", "market", "business-model",
    "traction", "competition", "team", "financials", "funding",
]

NOW = datetime(2024, 3, 1, 9, 30)


def _content(deck, slide_id):
    return next(s.content for s in deck.slides if s.id == slide_id)


class TestCompanyName:

    def test_first_two_words(self):
        assert company_name("campus food delivery") == "CampusFoodTech"

    def test_single_word(self):
        assert company_name("Tutoring") == "TutoringTech"


class TestBuildPitchDeck:
    """Tests for the ten-slide deck."""

    def test_slide_order(self):
        deck = build_pitch_deck(1, "a software tool", now=NOW)

        assert [s.id for s in deck.slides] == SLIDE_IDS
        assert deck.metadata.total_slides == 10
        assert deck.metadata.industry == "technology"
        assert deck.metadata.business_plan_id == 1

    def test_deck_fields(self):
        deck = build_pitch_deck(1, "a software tool", style="minimal", now=NOW)

        assert deck.id.startswith("pitch-deck-")
        assert deck.style == "minimal"
        assert deck.version == "1.0"
        assert deck.generated_at == deck.last_modified == NOW

    def test_industry_defaults_without_plan_sections(self):
        deck = build_pitch_deck(1, "a software tool", now=NOW)

        title = _content(deck, "title")
        assert deck.title == title["companyName"] == "ASoftwareTech"
        assert title["tagline"] == "Innovating the Future"
        assert title["date"] == 2024
        assert _content(deck, "problem")["headline"] == "The Problem with Current Technology Solutions"
        assert _content(deck, "market")["growth"] == "18% CAGR"

    def test_plan_sections_take_precedence(self):
        deck = build_pitch_deck(
            7, "a campus food delivery app",
            problem_statement="Students skip meals.",
            pitch_deck_summary={
                "title": "CampusBites",
                "tagline": "Food for finals",
                "theAsk": "$500K Seed",
            },
            lean_canvas={
                "valuePropositions": ["Cheap", "Fast", "Healthy", "Local", "Late-night"],
                "revenueStreams": ["Commission"],
            },
            now=NOW,
        )

        assert deck.title == "CampusBites"
        assert _content(deck, "title")["tagline"] == "Food for finals"
        assert _content(deck, "problem")["description"] == "Students skip meals."
        assert _content(deck, "solution")["features"] == ["Cheap", "Fast", "Healthy", "Local"]
        assert _content(deck, "business-model")["pricing"] == ["Commission"]
        assert _content(deck, "funding")["headline"] == "$500K Seed"

    def test_custom_message_appended(self):
        deck = build_pitch_deck(1, "an app", custom_message="Focus on B2B", now=NOW)

        assert _content(deck, "problem")["description"].endswith(
            "\n\nCustom requirements: Focus on B2B")
        assert _content(deck, "solution")["description"].endswith(
            "\n\nCustom requirements: Focus on B2B")

    def test_blank_idea(self):
        deck = build_pitch_deck(1, "", now=NOW)

        assert deck.metadata.idea == "Your startup idea"

    def test_camel_case_dump(self):
        data = build_pitch_deck(1, "an app", now=NOW).model_dump(by_alias=True, mode="json")

        assert "lastModified" in data
        assert data["metadata"]["totalSlides"] == 10
        assert "useOfFunds" in data["slides"][-1]["content"]


class TestShareExpiry:
    """Tests for the share window."""

    def test_expires_after_window(self):
        assert share_expires_at(NOW) == NOW + timedelta(days=SHARE_LINK_DAYS)

    def test_fresh_link(self):
        assert not share_expired(NOW, now=NOW + timedelta(days=29))

    def test_last_day_still_valid(self):
        assert not share_expired(NOW, now=NOW + timedelta(days=30))

    def test_expired_link(self):
        assert share_expired(NOW, now=NOW + timedelta(days=30, seconds=1))

    def test_never_shared(self):
        assert share_expired(None)
