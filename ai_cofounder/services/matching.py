"""
Skill matching, plan matching, directory filters and idea-based skill
suggestions.

Pure functions over lower-cased, trimmed strings; no I/O.
"""

import re
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ai_cofounder.core.exceptions import ValidationError
from ai_cofounder.core.rounding import round_half_up
from ai_cofounder.data.cofounders import PLACEHOLDER_IMAGE
from ai_cofounder.data.industries import (
    COFOUNDER_TYPES,
    REQUIRED_SKILLS,
    detect_plan_industry,
    for_industry,
)
from ai_cofounder.models import CofounderProfile, ExperienceLevel, MatchResult, PlanMatch

EXPERIENCE_BUCKETS: Dict[str, Tuple[int, int]] = {
    ExperienceLevel.ENTRY.value: (0, 2),
    ExperienceLevel.MID.value: (3, 5),
    ExperienceLevel.SENIOR.value: (6, 10),
}

SKILL_CATEGORIES: Dict[str, List[str]] = {
    "app": ["Mobile Development", "React Native", "iOS", "Android"],
    "web": ["React", "Node.js", "JavaScript", "Frontend Development"],
    "ai": ["Machine Learning", "Python", "Data Science", "AI/ML"],
    "marketplace": ["Product Management", "Business Development", "Operations"],
    "saas": ["Backend Development", "Cloud Computing", "DevOps", "API Development"],
    "fintech": ["Finance", "Blockchain", "Security", "Compliance"],
    "edtech": ["Education", "Learning Management", "Content Creation"],
    "health": ["Healthcare", "Medical", "Compliance", "Data Privacy"],
}

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def normalize_skills(skills: Iterable[str]) -> List[str]:
    """Lower-case and trim skills, dropping blank entries."""
    normalized = []
    for skill in skills:
        value = skill.strip().lower()
        if value:
            normalized.append(value)
    return normalized


def skills_overlap(required: str, candidate_skills: Sequence[str]) -> bool:
    """True if `required` contains, or is contained in, any candidate skill."""
    return any(cs in required or required in cs for cs in candidate_skills)


def find_matches(
    profiles: Sequence[CofounderProfile],
    required_skills: Sequence[str],
    user_skills: Optional[Sequence[str]] = None
) -> List[MatchResult]:
    """
    Score profiles by the share of required skills they cover.

    A required skill counts as covered when it overlaps (bidirectional
    substring) with any of the profile's skills. Profiles scoring 0 are
    dropped; the rest are sorted by score, highest first, keeping directory
    order among equal scores.

    `user_skills` (the caller's own skills) does not affect the score.

    Raises:
        ValidationError: if no non-blank required skill is given.
    """
    required = normalize_skills(required_skills)
    if not required:
        raise ValidationError(
            "At least one non-empty required skill is needed",
            field="required_skills"
        )

    results: List[MatchResult] = []
    for profile in profiles:
        candidate = normalize_skills(profile.skills)
        matching = [skill for skill in required if skills_overlap(skill, candidate)]
        score = round_half_up(100 * len(matching) / len(required))
        if score == 0:
            continue
        results.append(MatchResult(
            **profile.model_dump(exclude={"match_score"}),
            matching_skills=matching,
            match_score=score,
        ))

    results.sort(key=lambda r: r.match_score, reverse=True)
    return results


def parse_experience_years(experience: str) -> Optional[int]:
    """Leading integer of an experience text ("5 years" -> 5), or None."""
    match = _LEADING_INT.match(experience or "")
    if not match:
        return None
    return int(match.group(1))


def filter_profiles(
    profiles: Sequence[CofounderProfile],
    location: Optional[str] = None,
    availability: Optional[str] = None,
    experience: Optional[str] = None
) -> List[CofounderProfile]:
    """
    Narrow profiles by location substring, availability and experience bucket.

    Profiles whose experience text has no leading number are excluded when
    an experience bucket is requested.
    """
    results = list(profiles)

    if location:
        needle = location.lower()
        results = [p for p in results if needle in p.location.lower()]

    if availability:
        wanted = availability.lower()
        results = [p for p in results if p.availability.lower() == wanted]

    if experience:
        bucket = EXPERIENCE_BUCKETS.get(experience.lower())
        if bucket is None:
            raise ValidationError(
                f"Unknown experience level '{experience}'. "
                f"Must be one of: {', '.join(EXPERIENCE_BUCKETS)}",
                field="experience"
            )
        low, high = bucket
        filtered = []
        for profile in results:
            years = parse_experience_years(profile.experience)
            if years is not None and low <= years <= high:
                filtered.append(profile)
        results = filtered

    return results


def filter_by_skills(
    profiles: Sequence[CofounderProfile],
    skills: Sequence[str]
) -> List[CofounderProfile]:
    """Keep profiles with any skill containing one of `skills`."""
    wanted = normalize_skills(skills)
    if not wanted:
        return list(profiles)
    return [
        p for p in profiles
        if any(w in s for s in normalize_skills(p.skills) for w in wanted)
    ]


def suggest_skills(idea: str) -> List[str]:
    """
    Skills suggested by keywords found in the idea.

    Every keyword contained in the lower-cased idea contributes its skill
    list; duplicates are removed keeping first-seen order.
    """
    idea_lower = (idea or "").lower()
    suggestions: List[str] = []
    for keyword, skills in SKILL_CATEGORIES.items():
        if keyword in idea_lower:
            suggestions.extend(skills)
    return list(dict.fromkeys(suggestions))


# ============================================================================
# Plan-based matching
# ============================================================================

PLAN_MATCH_LIMIT = 10
PLAN_BASE_SCORE = 20
PLAN_SKILL_WEIGHT = 40

# (minimum years, bonus), highest first
EXPERIENCE_BONUS: Tuple[Tuple[int, int], ...] = ((5, 15), (3, 10), (1, 5))
STARTUP_BONUS: Tuple[Tuple[int, int], ...] = ((3, 10), (1, 5))
AVAILABILITY_BONUS: Dict[str, int] = {"full-time": 10, "part-time": 5}


def _bonus(value: Optional[int], table: Tuple[Tuple[int, int], ...]) -> int:
    if value is None:
        return 0
    return next((bonus for minimum, bonus in table if value >= minimum), 0)


def plan_match_score(profile: CofounderProfile, required_skills: Sequence[str]) -> int:
    """
    Fit of a profile for a plan's industry, 0 to 100.

    A base of 20, up to 40 for the share of the profile's skills that
    mention a required skill, then bonuses for years of experience,
    previous startups and availability.
    """
    required = normalize_skills(required_skills)
    skills = normalize_skills(profile.skills)
    matching = [s for s in skills if any(r in s for r in required)]

    score = float(PLAN_BASE_SCORE)
    if required:
        score += len(matching) / len(required) * PLAN_SKILL_WEIGHT
    score += _bonus(parse_experience_years(profile.experience), EXPERIENCE_BONUS)
    score += _bonus(profile.previous_startups, STARTUP_BONUS)
    score += AVAILABILITY_BONUS.get(profile.availability.lower(), 0)
    return min(round_half_up(score), 100)


def match_for_plan(profiles: Sequence[CofounderProfile], idea: str) -> List[PlanMatch]:
    """
    Score the first ten directory profiles against the idea's industry.

    Falls back to suggested co-founder types when the directory is empty.
    """
    if not profiles:
        return suggested_cofounders(idea)

    required = for_industry(REQUIRED_SKILLS, detect_plan_industry(idea))
    matches = [
        PlanMatch(
            **profile.model_dump(exclude={"match_score"}),
            match_score=plan_match_score(profile, required)
        )
        for profile in profiles[:PLAN_MATCH_LIMIT]
    ]
    matches.sort(key=lambda m: m.match_score, reverse=True)
    return matches


def suggested_cofounders(idea: str) -> List[PlanMatch]:
    """Co-founder types tailored to the idea, scored 95 down in steps of 5."""
    idea = idea or "Your startup idea"
    return [
        PlanMatch(
            name=f"AI-Generated Match #{index + 1}",
            title=kind["title"],
            location="Remote",
            experience=kind["experience"],
            skills=list(kind["skills"]),
            availability=kind["availability"],
            bio=kind["bio"].format(idea=idea),
            education=kind["education"],
            looking_for=kind["looking_for"].format(idea=idea),
            previous_startups=kind["previous_startups"],
            image=PLACEHOLDER_IMAGE,
            match_score=95 - index * 5,
            is_ai_generated=True
        )
        for index, kind in enumerate(COFOUNDER_TYPES)
    ]
