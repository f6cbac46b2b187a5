"""
Per-industry reference data for plan-based matching, scenario projections,
market research and pitch decks.

Every table is keyed by the industries `detect_plan_industry` returns;
lookups fall back to technology.
"""

from typing import Any, Dict, List, NamedTuple, Tuple

DEFAULT_PLAN_INDUSTRY = "technology"

# Checked in order; the first industry with a keyword in the idea wins
PLAN_INDUSTRY_KEYWORDS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("food", ("food", "restaurant", "meal")),
    ("healthcare", ("health", "medical", "fitness")),
    ("education", ("education", "student", "learning")),
    ("finance", ("finance", "money", "payment")),
    ("technology", ("tech", "app", "software")),
    ("transportation", ("transport", "delivery", "logistics")),
)


def detect_plan_industry(idea: str) -> str:
    """Industry of an idea, by the first keyword group it mentions."""
    idea_lower = (idea or "").lower()
    for industry, keywords in PLAN_INDUSTRY_KEYWORDS:
        if any(keyword in idea_lower for keyword in keywords):
            return industry
    return DEFAULT_PLAN_INDUSTRY


def for_industry(table: Dict[str, Any], industry: str) -> Any:
    return table.get(industry, table[DEFAULT_PLAN_INDUSTRY])


# ============================================================================
# Co-founder matching
# ============================================================================

REQUIRED_SKILLS: Dict[str, List[str]] = {
    "food": ["business development", "operations", "marketing", "technology", "logistics"],
    "healthcare": ["medical", "technology", "compliance", "data analysis", "user experience"],
    "education": ["education", "technology", "content creation", "user research", "product management"],
    "finance": ["finance", "technology", "compliance", "data analysis", "security"],
    "technology": ["software development", "product management", "user experience", "data analysis", "cloud computing"],
    "transportation": ["logistics", "technology", "operations", "data analysis", "user experience"],
}

# Offered when the directory has no profiles; {idea} is filled in
COFOUNDER_TYPES: List[Dict[str, Any]] = [
    {
        "title": "Technical Co-founder",
        "skills": ["Full-Stack Development", "AI/ML", "Cloud Architecture", "DevOps", "Database Design"],
        "experience": "5+ years",
        "availability": "Part-time",
        "bio": "Perfect technical partner for your {idea}. Specialized in building scalable "
               "solutions and technical architecture.",
        "education": "Computer Science",
        "looking_for": "Technical co-founder for {idea}",
        "previous_startups": 2,
    },
    {
        "title": "Business Co-founder",
        "skills": ["Business Strategy", "Market Analysis", "Operations", "Sales", "Partnerships"],
        "experience": "7+ years",
        "availability": "Full-time",
        "bio": "Ideal business partner for your {idea}. Experienced in scaling startups and "
               "building strategic partnerships.",
        "education": "Business Administration",
        "looking_for": "Business co-founder for {idea}",
        "previous_startups": 3,
    },
    {
        "title": "Design Co-founder",
        "skills": ["UX/UI Design", "User Research", "Prototyping", "Design Systems", "Brand Design"],
        "experience": "4+ years",
        "availability": "Part-time",
        "bio": "Perfect design partner for your {idea}. Specialized in creating user-centered "
               "experiences and building strong brands.",
        "education": "Design",
        "looking_for": "Design co-founder for {idea}",
        "previous_startups": 1,
    },
    {
        "title": "Marketing Co-founder",
        "skills": ["Digital Marketing", "Growth Hacking", "Content Strategy", "SEO", "Social Media"],
        "experience": "6+ years",
        "availability": "Full-time",
        "bio": "Marketing expert for your {idea}. Experienced in building brand awareness and "
               "driving user acquisition.",
        "education": "Marketing",
        "looking_for": "Marketing co-founder for {idea}",
        "previous_startups": 2,
    },
    {
        "title": "Data & Analytics Co-founder",
        "skills": ["Python", "Machine Learning", "Data Analysis", "SQL", "Statistics"],
        "experience": "3+ years",
        "availability": "Part-time",
        "bio": "Data expert for your {idea}. Specialized in analytics, machine learning, and "
               "data-driven decision making.",
        "education": "Data Science",
        "looking_for": "Data co-founder for {idea}",
        "previous_startups": 1,
    },
]


# ============================================================================
# Financial projections
# ============================================================================

class IndustryFinance(NamedTuple):
    market_size: float
    growth_rate: float          # percent per month
    arpu: float
    monthly_costs: float
    initial_funding: float
    initial_users: float
    churn_rate: float           # percent per month
    cac: float
    cost_per_user: float
    target_market_share: float  # fraction of the market


FINANCE: Dict[str, IndustryFinance] = {
    "food": IndustryFinance(2.3e9, 15, 25, 15000, 100000, 50, 8, 35, 8, 0.001),
    "healthcare": IndustryFinance(4.2e12, 12, 150, 25000, 200000, 25, 5, 75, 45, 0.0001),
    "education": IndustryFinance(6.3e12, 18, 45, 12000, 75000, 100, 6, 50, 15, 0.0005),
    "finance": IndustryFinance(12.6e12, 20, 80, 20000, 150000, 75, 4, 60, 20, 0.0001),
    "technology": IndustryFinance(5e12, 25, 30, 10000, 50000, 200, 7, 40, 10, 0.001),
    "transportation": IndustryFinance(8e11, 16, 60, 18000, 120000, 80, 6, 55, 25, 0.0005),
}

# Revenue multiplier per calendar month, January first
SEASONALITY: Dict[str, List[float]] = {
    "food": [0.8, 0.7, 0.9, 1.0, 1.1, 1.2, 1.3, 1.2, 1.1, 1.0, 0.9, 0.8],
    "healthcare": [1.1, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.1, 1.2],
    "education": [0.3, 0.3, 1.2, 1.0, 1.0, 0.8, 0.2, 0.2, 1.2, 1.0, 1.0, 0.8],
    "finance": [1.0] * 12,
    "technology": [1.0] * 12,
    "transportation": [0.9, 0.8, 1.0, 1.1, 1.2, 1.3, 1.2, 1.1, 1.0, 1.0, 0.9, 0.8],
}

# Percent of spend per category
EXPENSE_SPLIT: Dict[str, Dict[str, float]] = {
    "food": {"development": 30, "marketing": 35, "operations": 25, "admin": 10},
    "healthcare": {"development": 40, "marketing": 25, "operations": 20, "admin": 15},
    "education": {"development": 35, "marketing": 30, "operations": 25, "admin": 10},
    "finance": {"development": 45, "marketing": 20, "operations": 20, "admin": 15},
    "technology": {"development": 40, "marketing": 30, "operations": 20, "admin": 10},
    "transportation": {"development": 35, "marketing": 30, "operations": 25, "admin": 10},
}

DEFAULT_REVENUE_STREAMS = ["Subscription Revenue", "Premium Features", "Enterprise Sales"]

REVENUE_STREAM_SHARES: Dict[str, float] = {
    "Subscription Revenue": 60,
    "Premium Features": 25,
    "Enterprise Sales": 15,
    "Transaction Fees": 40,
    "Advertising": 20,
    "Data Licensing": 10,
    "Consulting": 30,
}
