"""
Deterministic mock content used when no LLM provider can answer.

Food ideas get the canned "CampusBites" plan; every other idea gets a generic
plan assembled from per-industry tables. The same idea always produces the
same payload.
"""

import copy
from typing import Any, Dict, List

FOOD_KEYWORDS = ("food", "restaurant", "meal")
DEFAULT_INDUSTRY = "technology"

INDUSTRY_KEYWORDS: Dict[str, List[str]] = {
    "healthcare": ["health", "medical", "doctor", "patient", "hospital", "clinic", "wellness", "fitness"],
    "education": ["education", "school", "student", "teacher", "learning", "course", "university", "college"],
    "finance": ["finance", "money", "bank", "payment", "investment", "trading", "crypto", "fintech"],
    "ecommerce": ["shop", "buy", "sell", "marketplace", "retail", "product", "store", "commerce"],
    "technology": ["app", "software", "tech", "ai", "data", "cloud", "mobile", "web", "platform"],
    "transportation": ["transport", "delivery", "ride", "travel", "logistics", "shipping", "uber", "taxi"],
    "entertainment": ["entertainment", "game", "music", "video", "streaming", "media", "content", "social"],
}

PERSONA_NAMES = {
    "healthcare": "Dr. Sarah Martinez",
    "education": "Professor Alex Johnson",
    "finance": "James Thompson",
    "ecommerce": "Jennifer Lee",
    "technology": "Alex Chen",
    "transportation": "David Martinez",
    "entertainment": "Emma Wilson",
}

OCCUPATIONS = {
    "healthcare": "Medical Professional",
    "education": "Educator",
    "finance": "Financial Analyst",
    "ecommerce": "E-commerce Manager",
    "technology": "Software Engineer",
    "transportation": "Logistics Coordinator",
    "entertainment": "Content Creator",
}

PAIN_POINTS = {
    "healthcare": ["Long wait times", "High medical costs", "Complex insurance processes", "Limited access to specialists"],
    "education": ["Expensive tuition", "Outdated curriculum", "Limited practical experience", "Poor student engagement"],
    "finance": ["High fees", "Complex processes", "Limited transparency", "Poor customer service"],
    "ecommerce": ["High shipping costs", "Limited product variety", "Poor return policies", "Slow delivery"],
    "technology": ["Complex interfaces", "High subscription costs", "Poor customer support", "Data security concerns"],
    "transportation": ["High costs", "Unreliable service", "Limited availability", "Poor user experience"],
    "entertainment": ["High subscription costs", "Limited content variety", "Poor streaming quality", "Complex navigation"],
}

GOALS = {
    "healthcare": ["Improve health outcomes", "Reduce medical costs", "Increase accessibility", "Enhance patient experience"],
    "education": ["Improve learning outcomes", "Reduce educational costs", "Increase accessibility", "Enhance student engagement"],
    "finance": ["Save money", "Increase financial security", "Simplify financial management", "Improve investment returns"],
    "ecommerce": ["Save money on purchases", "Find better products", "Simplify shopping experience", "Get faster delivery"],
    "technology": ["Increase productivity", "Simplify workflows", "Reduce costs", "Improve user experience"],
    "transportation": ["Save time on travel", "Reduce transportation costs", "Improve reliability", "Enhance convenience"],
    "entertainment": ["Access better content", "Reduce entertainment costs", "Improve streaming quality", "Simplify content discovery"],
}

# Lean canvas section -> industry -> bullet points
CANVAS_TABLES: Dict[str, Dict[str, List[str]]] = {
    "keyPartners": {
        "healthcare": ["Medical institutions", "Healthcare providers", "Insurance companies", "Medical device manufacturers"],
        "education": ["Educational institutions", "Content providers", "Technology partners", "Accreditation bodies"],
        "finance": ["Banks", "Payment processors", "Financial institutions", "Regulatory bodies"],
        "ecommerce": ["Suppliers", "Logistics partners", "Payment gateways", "Marketing agencies"],
        "technology": ["Cloud providers", "API partners", "Development tools", "Security providers"],
        "transportation": ["Vehicle manufacturers", "Fuel suppliers", "Insurance providers", "Maintenance partners"],
        "entertainment": ["Content creators", "Streaming platforms", "Media companies", "Distribution partners"],
    },
    "keyActivities": {
        "healthcare": ["Patient care delivery", "Medical research", "Health monitoring", "Treatment optimization"],
        "education": ["Curriculum development", "Student assessment", "Learning analytics", "Content creation"],
        "finance": ["Risk assessment", "Transaction processing", "Compliance monitoring", "Customer onboarding"],
        "ecommerce": ["Inventory management", "Order fulfillment", "Customer service", "Market analysis"],
        "technology": ["Software development", "User experience design", "Data analysis", "System maintenance"],
        "transportation": ["Route optimization", "Fleet management", "Customer service", "Safety monitoring"],
        "entertainment": ["Content production", "User engagement", "Platform optimization", "Content curation"],
    },
    "valuePropositions": {
        "healthcare": ["Improved patient outcomes", "Reduced healthcare costs", "Enhanced accessibility", "Better care coordination"],
        "education": ["Personalized learning", "Improved outcomes", "Cost-effective education", "Flexible learning options"],
        "finance": ["Lower fees", "Better returns", "Simplified processes", "Enhanced security"],
        "ecommerce": ["Better prices", "Faster delivery", "Wider selection", "Superior customer service"],
        "technology": ["Increased efficiency", "Cost reduction", "Better user experience", "Scalable solutions"],
        "transportation": ["Reliable service", "Cost savings", "Convenience", "Safety assurance"],
        "entertainment": ["High-quality content", "Affordable pricing", "Seamless experience", "Personalized recommendations"],
    },
    "customerRelationships": {
        "healthcare": ["Personalized care", "24/7 support", "Health monitoring", "Community engagement"],
        "education": ["Mentorship programs", "Peer learning", "Progress tracking", "Support communities"],
        "finance": ["Personalized advice", "Automated services", "Customer support", "Educational resources"],
        "ecommerce": ["Personalized recommendations", "Customer support", "Loyalty programs", "Community features"],
        "technology": ["Self-service platform", "Community support", "Personalized experience", "Proactive assistance"],
        "transportation": ["Reliable service", "Customer support", "Loyalty programs", "Real-time updates"],
        "entertainment": ["Personalized content", "Community features", "Customer support", "Social sharing"],
    },
    "customerSegments": {
        "healthcare": ["Patients", "Healthcare providers", "Insurance companies", "Medical institutions"],
        "education": ["Students", "Educators", "Educational institutions", "Parents"],
        "finance": ["Individual investors", "Small businesses", "Financial institutions", "Retail customers"],
        "ecommerce": ["Online shoppers", "Small businesses", "Retailers", "Consumers"],
        "technology": ["Tech professionals", "Small businesses", "Enterprises", "Developers"],
        "transportation": ["Commuters", "Business travelers", "Logistics companies", "Individual users"],
        "entertainment": ["Content consumers", "Content creators", "Advertisers", "Streaming enthusiasts"],
    },
    "keyResources": {
        "healthcare": ["Medical expertise", "Technology platform", "Patient data", "Regulatory compliance"],
        "education": ["Educational content", "Learning platform", "Student data", "Accreditation"],
        "finance": ["Financial expertise", "Technology platform", "Customer data", "Regulatory compliance"],
        "ecommerce": ["Product inventory", "Technology platform", "Customer data", "Supply chain"],
        "technology": ["Development team", "Technology platform", "User data", "Intellectual property"],
        "transportation": ["Fleet vehicles", "Technology platform", "Customer data", "Operational expertise"],
        "entertainment": ["Content library", "Streaming platform", "User data", "Content partnerships"],
    },
    "channels": {
        "healthcare": ["Medical platforms", "Healthcare networks", "Mobile apps", "Direct partnerships"],
        "education": ["Learning platforms", "Educational institutions", "Mobile apps", "Online communities"],
        "finance": ["Banking platforms", "Financial networks", "Mobile apps", "Partner channels"],
        "ecommerce": ["Online marketplace", "Mobile apps", "Social media", "Partner networks"],
        "technology": ["Web platform", "Mobile apps", "API integrations", "Partner channels"],
        "transportation": ["Mobile apps", "Web platform", "Partner networks", "Direct bookings"],
        "entertainment": ["Streaming platforms", "Mobile apps", "Social media", "Content networks"],
    },
    "costStructure": {
        "healthcare": ["Medical staff", "Technology infrastructure", "Regulatory compliance", "Insurance"],
        "education": ["Content development", "Technology platform", "Instructor costs", "Accreditation"],
        "finance": ["Technology infrastructure", "Compliance costs", "Security measures", "Staff costs"],
        "ecommerce": ["Inventory costs", "Technology platform", "Marketing expenses", "Logistics"],
        "technology": ["Development costs", "Technology infrastructure", "Marketing expenses", "Operational costs"],
        "transportation": ["Vehicle costs", "Fuel expenses", "Maintenance", "Insurance"],
        "entertainment": ["Content licensing", "Technology platform", "Marketing expenses", "Operational costs"],
    },
    "revenueStreams": {
        "healthcare": ["Service fees", "Subscription plans", "Insurance partnerships", "Premium features"],
        "education": ["Course fees", "Subscription plans", "Certification fees", "Corporate training"],
        "finance": ["Transaction fees", "Subscription plans", "Investment fees", "Premium services"],
        "ecommerce": ["Commission fees", "Subscription plans", "Advertising revenue", "Premium listings"],
        "technology": ["Subscription fees", "Transaction fees", "Premium features", "Enterprise licenses"],
        "transportation": ["Service fees", "Subscription plans", "Premium services", "Corporate partnerships"],
        "entertainment": ["Subscription fees", "Advertising revenue", "Premium content", "Transaction fees"],
    },
}

CAMPUS_FOOD_PLAN: Dict[str, Any] = {
    "problemStatement": (
        "Students struggle to find affordable, healthy food options near campus, often settling "
        "for expensive fast food or unhealthy choices due to limited time and budget constraints."
    ),
    "customerPersona": {
        "name": "Sarah Chen",
        "age": "22",
        "occupation": "Computer Science Student",
        "painPoints": ["High food costs", "Limited healthy options",
                       "Time constraints between classes", "Budget management"],
        "goals": ["Eat healthy on a budget", "Save time finding food",
                  "Discover new affordable restaurants", "Maintain good nutrition"],
    },
    "leanCanvas": {
        "keyPartners": ["Local restaurants", "University dining services",
                        "Food delivery platforms", "Student organizations"],
        "keyActivities": ["Restaurant discovery", "Price comparison",
                          "Menu analysis", "User reviews and ratings"],
        "valuePropositions": ["Affordable healthy food discovery", "Real-time price comparison",
                              "Student-friendly discounts", "Time-saving food search"],
        "customerRelationships": ["Self-service platform", "Community reviews",
                                  "Personalized recommendations", "Mobile app experience"],
        "customerSegments": ["College students", "Budget-conscious individuals",
                             "Health-conscious eaters", "Time-pressed professionals"],
        "keyResources": ["Restaurant database", "User review system",
                         "Mobile application", "Partnership agreements"],
        "channels": ["Mobile app", "University partnerships", "Social media", "Word of mouth"],
        "costStructure": ["App development", "Restaurant partnerships", "Marketing", "Server maintenance"],
        "revenueStreams": ["Restaurant commission fees", "Premium features",
                           "Advertising revenue", "Partnership deals"],
    },
    "pitchDeckSummary": {
        "title": "CampusBites",
        "tagline": "Affordable healthy food discovery for students",
        "problem": "Students waste time and money finding affordable, healthy food near campus",
        "solution": "AI-powered app that finds the best healthy food deals within walking distance",
        "marketSize": "$2.3B campus food market with 20M+ college students",
        "businessModel": "Commission-based revenue from restaurant partnerships and premium features",
        "theAsk": "$500K seed funding to expand to 50+ universities and build restaurant network",
    },
    "marketResearch": {
        "marketSize": "$2.3B campus food market with 20M+ college students",
        "competitors": ["Grubhub", "Uber Eats", "DoorDash", "Campus dining services", "Local restaurant apps"],
        "trends": [
            "Growing demand for healthy food options",
            "Mobile ordering becoming standard",
            "Student budget constraints driving innovation",
            "Sustainability focus in food choices",
            "Personalized nutrition recommendations",
        ],
    },
    "validation": {
        "surveyQuestions": [
            "How much do you typically spend on food per week?",
            "What's your biggest challenge when finding food near campus?",
            "How important is healthy food vs. convenience for you?",
            "Would you use an app that shows healthy food deals nearby?",
            "What features would make you choose one food app over another?",
        ],
        "landingPage": {
            "headline": "Find Healthy Food Deals Near Campus",
            "subheading": "Discover affordable, nutritious meals within walking distance of your university",
            "callToAction": "Get Early Access - Join 1,000+ Students Already Saving Money",
        },
        "adCampaign": {
            "adCopy": "Tired of expensive campus food? Find healthy deals nearby! Save 30% on meals with CampusBites.",
            "keywords": ["student food deals", "campus dining", "healthy food near me",
                         "college meal planning", "affordable student meals"],
        },
    },
}

GENERIC_PITCH_DECK: Dict[str, str] = {
    "title": "InnovateApp",
    "tagline": "Revolutionizing the way we approach everyday problems",
    "problem": "Current solutions are outdated and don't meet modern user needs",
    "solution": "A modern, user-friendly platform that addresses the core problem effectively",
    "marketSize": "$1.2B addressable market with 10M+ potential users",
    "businessModel": "Freemium model with premium features and subscription tiers",
    "theAsk": "$300K seed funding to accelerate development and user acquisition",
}

GENERIC_MARKET_RESEARCH: Dict[str, Any] = {
    "marketSize": "$1.2B addressable market with 10M+ potential users",
    "competitors": [
        "Existing solution providers in this space",
        "Traditional market leaders",
        "Emerging startups with similar solutions",
        "Alternative approaches and substitutes",
    ],
    "trends": [
        "Growing demand for innovative solutions",
        "Technology adoption accelerating",
        "Market consolidation expected",
        "Regulatory changes affecting the industry",
        "Consumer behavior shifts post-pandemic",
    ],
}

GENERIC_VALIDATION: Dict[str, Any] = {
    "surveyQuestions": [
        "What's your biggest pain point with current solutions?",
        "How much would you pay for a better solution?",
        "What features are most important to you?",
        "How often do you encounter this problem?",
        "Would you recommend this solution to others?",
    ],
    "landingPage": {
        "headline": "Solve Your Problem Better",
        "subheading": "A modern solution that actually works for your needs",
        "callToAction": "Try It Free - Join 500+ Early Users",
    },
    "adCampaign": {
        "adCopy": "Tired of broken solutions? Try our modern approach! Free trial available.",
        "keywords": ["problem solving", "modern solution", "user friendly", "cost effective", "time saving"],
    },
}

SURVEY_QUESTIONS = [
    "What's your biggest challenge with current solutions?",
    "How much would you pay for a better solution?",
    "What features are most important to you?",
    "How often do you encounter this problem?",
    "Would you recommend this solution to others?",
]


def is_food_idea(idea: str) -> bool:
    idea_lower = idea.lower()
    return any(keyword in idea_lower for keyword in FOOD_KEYWORDS)


def detect_industry(idea_words: List[str]) -> str:
    """First industry with a keyword contained in any word of the idea."""
    for industry, keywords in INDUSTRY_KEYWORDS.items():
        if any(keyword in word for keyword in keywords for word in idea_words):
            return industry
    return DEFAULT_INDUSTRY


def detect_target_age(idea_words: List[str]) -> str:
    words = set(idea_words)
    if words & {"student", "college", "university", "school"}:
        return "22"
    if words & {"senior", "elderly", "retirement"}:
        return "65"
    if words & {"child", "kid", "baby", "toddler"}:
        return "8"
    return "28"


def _industry_value(table: Dict[str, Any], industry: str) -> Any:
    return table.get(industry, table[DEFAULT_INDUSTRY])


def mock_business_plan(idea: str) -> Dict[str, Any]:
    """Full business plan payload keyed like the provider JSON contract."""
    if is_food_idea(idea):
        return copy.deepcopy(CAMPUS_FOOD_PLAN)

    idea_words = idea.lower().split(" ")
    industry = detect_industry(idea_words)
    target_age = detect_target_age(idea_words)

    return copy.deepcopy({
        "problemStatement": (
            f'The current market lacks an effective solution for "{idea}", leaving users '
            "frustrated with existing alternatives that are either too expensive, complex, "
            "or don't address the core needs."
        ),
        "customerPersona": {
            "name": _industry_value(PERSONA_NAMES, industry),
            "age": target_age,
            "occupation": _industry_value(OCCUPATIONS, industry),
            "painPoints": _industry_value(PAIN_POINTS, industry),
            "goals": _industry_value(GOALS, industry),
        },
        "leanCanvas": {
            section: _industry_value(table, industry)
            for section, table in CANVAS_TABLES.items()
        },
        "pitchDeckSummary": GENERIC_PITCH_DECK,
        "marketResearch": GENERIC_MARKET_RESEARCH,
        "validation": GENERIC_VALIDATION,
    })


def mock_validation_content(idea: str, content_type: str) -> Any:
    """Mock survey, landing page or ad copy for an idea."""
    if content_type == "survey":
        return list(SURVEY_QUESTIONS)
    if content_type == "landingPage":
        return {
            "headline": f"Revolutionary Solution for {idea}",
            "subheading": "The modern approach you've been waiting for",
            "callToAction": "Get Started Free - Join 1,000+ Early Users",
        }
    if content_type == "adCopy":
        return {
            "adCopy": f"Transform your experience with {idea}! Try our innovative solution today.",
            "keywords": ["innovation", "solution", "modern", "effective", "user-friendly"],
        }
    raise ValueError(f"Unknown validation content type: {content_type}")
