"""
Seed co-founder directory and its in-memory store.
"""

import copy
from typing import List, Optional, Dict, Any

from ai_cofounder.models import CofounderProfile, CofounderCreate

PLACEHOLDER_IMAGE = "https://via.placeholder.com/150"

SEED_COFOUNDERS: List[Dict[str, Any]] = [
    {
        "id": 1,
        "name": "Sarah Chen",
        "title": "Full-Stack Developer",
        "location": "San Francisco, CA",
        "experience": "5 years",
        "skills": ["React", "Node.js", "Python", "AWS", "Machine Learning", "JavaScript", "TypeScript"],
        "availability": "Part-time",
        "bio": "Passionate developer with experience in building scalable web applications. "
               "Looking to join an early-stage startup focused on education technology.",
        "previous_startups": 2,
        "education": "Stanford University - Computer Science",
        "looking_for": "Technical co-founder for EdTech startup",
        "image": PLACEHOLDER_IMAGE,
    },
    {
        "id": 2,
        "name": "Michael Rodriguez",
        "title": "Product Manager",
        "location": "New York, NY",
        "experience": "7 years",
        "skills": ["Product Strategy", "User Research", "Agile", "Analytics", "Growth", "Business Development"],
        "availability": "Full-time",
        "bio": "Product leader with experience scaling products from 0 to 1M users. "
               "Specialized in B2B SaaS and marketplace platforms.",
        "previous_startups": 3,
        "education": "MIT - Business Administration",
        "looking_for": "Business co-founder for marketplace startup",
        "image": PLACEHOLDER_IMAGE,
    },
    {
        "id": 3,
        "name": "Emily Johnson",
        "title": "UX/UI Designer",
        "location": "Austin, TX",
        "experience": "4 years",
        "skills": ["Figma", "User Research", "Prototyping", "Design Systems", "Mobile Design", "Adobe Creative Suite"],
        "availability": "Part-time",
        "bio": "Creative designer focused on creating intuitive user experiences. "
               "Passionate about solving real-world problems through design.",
        "previous_startups": 1,
        "education": "Art Center College of Design",
        "looking_for": "Design co-founder for consumer app",
        "image": PLACEHOLDER_IMAGE,
    },
    {
        "id": 4,
        "name": "David Kim",
        "title": "Marketing Specialist",
        "location": "Seattle, WA",
        "experience": "6 years",
        "skills": ["Digital Marketing", "Growth Hacking", "Content Strategy", "SEO", "Social Media", "PPC"],
        "availability": "Full-time",
        "bio": "Growth-focused marketer with experience in scaling startups from seed to Series A. "
               "Expert in digital marketing and user acquisition.",
        "previous_startups": 2,
        "education": "University of Washington - Marketing",
        "looking_for": "Marketing co-founder for SaaS startup",
        "image": PLACEHOLDER_IMAGE,
    },
    {
        "id": 5,
        "name": "Lisa Wang",
        "title": "Data Scientist",
        "location": "Boston, MA",
        "experience": "3 years",
        "skills": ["Python", "Machine Learning", "Data Analysis", "SQL", "Statistics", "TensorFlow", "Pandas"],
        "availability": "Part-time",
        "bio": "Data scientist with expertise in machine learning and analytics. "
               "Passionate about using data to drive business decisions.",
        "previous_startups": 1,
        "education": "Harvard University - Data Science",
        "looking_for": "Technical co-founder for AI startup",
        "image": PLACEHOLDER_IMAGE,
    },
    {
        "id": 6,
        "name": "James Wilson",
        "title": "Business Development",
        "location": "Chicago, IL",
        "experience": "8 years",
        "skills": ["Sales", "Partnerships", "Strategy", "Fundraising", "Operations", "Business Strategy"],
        "availability": "Full-time",
        "bio": "Business development expert with experience in B2B sales and partnerships. "
               "Successfully raised $2M+ in previous startups.",
        "previous_startups": 3,
        "education": "Northwestern University - Business",
        "looking_for": "Business co-founder for B2B startup",
        "image": PLACEHOLDER_IMAGE,
    },
    {
        "id": 7,
        "name": "Alex Chen",
        "title": "Mobile Developer",
        "location": "Los Angeles, CA",
        "experience": "4 years",
        "skills": ["React Native", "iOS", "Android", "Swift", "Kotlin", "Flutter", "Mobile Development"],
        "availability": "Part-time",
        "bio": "Mobile development specialist with experience in both iOS and Android. "
               "Passionate about creating smooth mobile experiences.",
        "previous_startups": 2,
        "education": "UCLA - Computer Science",
        "looking_for": "Technical co-founder for mobile app",
        "image": PLACEHOLDER_IMAGE,
    },
    {
        "id": 8,
        "name": "Maria Garcia",
        "title": "Finance & Operations",
        "location": "Miami, FL",
        "experience": "6 years",
        "skills": ["Financial Planning", "Operations", "Accounting", "Fundraising", "Business Analysis", "Excel"],
        "availability": "Full-time",
        "bio": "Finance professional with startup experience. "
               "Expert in financial modeling, fundraising, and operational efficiency.",
        "previous_startups": 2,
        "education": "University of Miami - Finance",
        "looking_for": "Business co-founder for fintech startup",
        "image": PLACEHOLDER_IMAGE,
    },
]


def seed_profiles() -> List[CofounderProfile]:
    """Fresh copies of the seed profiles."""
    return [CofounderProfile(**copy.deepcopy(p)) for p in SEED_COFOUNDERS]


class InMemoryCofounderDirectory:
    """
    CofounderDirectory kept in a list.

    Each instance owns its profiles, so two directories never share state.
    """

    def __init__(self, profiles: Optional[List[CofounderProfile]] = None):
        self._profiles: List[CofounderProfile] = (
            list(profiles) if profiles is not None else seed_profiles()
        )

    async def list_profiles(self) -> List[CofounderProfile]:
        return [p.model_copy(deep=True) for p in self._profiles]

    async def get_profile(self, profile_id: int) -> Optional[CofounderProfile]:
        for profile in self._profiles:
            if profile.id == profile_id:
                return profile.model_copy(deep=True)
        return None

    async def add_profile(self, data: CofounderCreate) -> CofounderProfile:
        next_id = max((p.id for p in self._profiles), default=0) + 1
        profile = CofounderProfile(
            id=next_id,
            image=data.image or PLACEHOLDER_IMAGE,
            **data.model_dump(exclude={"image", "availability"}),
            availability=data.availability.value,
        )
        self._profiles.append(profile)
        return profile.model_copy(deep=True)
