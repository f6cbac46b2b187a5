"""
Static choices offered by the idea input form.
"""

INDUSTRIES = [
    {"value": "technology", "label": "Technology"},
    {"value": "healthcare", "label": "Healthcare"},
    {"value": "education", "label": "Education"},
    {"value": "finance", "label": "Finance"},
    {"value": "ecommerce", "label": "E-commerce"},
    {"value": "sustainability", "label": "Sustainability"},
    {"value": "food-beverage", "label": "Food & Beverage"},
    {"value": "transportation", "label": "Transportation"},
    {"value": "real-estate", "label": "Real Estate"},
    {"value": "entertainment", "label": "Entertainment"},
    {"value": "sports-fitness", "label": "Sports & Fitness"},
    {"value": "travel-tourism", "label": "Travel & Tourism"},
    {"value": "other", "label": "Other"},
]

STAGES = [
    {"value": "concept", "label": "Just an idea"},
    {"value": "prototype", "label": "Have a prototype"},
    {"value": "mvp", "label": "Have an MVP"},
    {"value": "early-users", "label": "Have early users"},
    {"value": "revenue", "label": "Generating revenue"},
    {"value": "scaling", "label": "Scaling up"},
]

CHALLENGES = [
    "Finding co-founders",
    "Market validation",
    "Funding",
    "Technical development",
    "User acquisition",
    "Product-market fit",
    "Team building",
    "Legal and compliance",
    "Marketing and branding",
    "Operations and logistics",
]
