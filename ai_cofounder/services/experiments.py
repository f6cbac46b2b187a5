"""
Validation toolkit: generated validation content packaged with the tools,
extra questions and estimates a founder needs to run the experiment.
"""

from typing import Any, Dict, List, Optional

from ai_cofounder.core.exceptions import ValidationError
from ai_cofounder.models import (
    ABTestSuggestionsResponse,
    AdCampaign,
    AdCampaignKitResponse,
    LandingPage,
    LandingPageExtras,
    LandingPageKitResponse,
    PlatformRates,
    SurveyKitResponse,
    ToolLink,
    ValidationContentResult,
)
from ai_cofounder.services import projections

DEFAULT_AUDIENCE = "General audience"

ADDITIONAL_SURVEY_QUESTIONS = [
    "How often do you currently face this problem?",
    "What solutions have you tried before?",
    "How much would you be willing to pay for a solution?",
    "What would make you choose this solution over alternatives?",
    "How would you prefer to be contacted about this solution?",
]

SURVEY_TOOLS = [
    ToolLink(name="Google Forms", url="https://forms.google.com", free=True),
    ToolLink(name="Typeform", url="https://typeform.com", free=True),
    ToolLink(name="SurveyMonkey", url="https://surveymonkey.com", free=True),
]

LANDING_PAGE_EXTRAS = LandingPageExtras(
    features=[
        "Easy to use interface",
        "Quick setup process",
        "24/7 customer support",
        "Money-back guarantee",
    ],
    testimonials=[
        "This solution changed how I approach this problem!",
        "Finally, a tool that actually works for students.",
        "I wish I had found this sooner!",
    ],
    pricing={"free": "Free trial available", "paid": "Starting at $9.99/month"},
)

LANDING_PAGE_TOOLS = [
    ToolLink(name="Unbounce", url="https://unbounce.com", free=False),
    ToolLink(name="Leadpages", url="https://leadpages.com", free=False),
    ToolLink(name="Carrd", url="https://carrd.co", free=True),
    ToolLink(name="Landing Page Builder", url="https://landingpagebuilder.com", free=True),
]

TESTING_TOOLS = [
    ToolLink(name="Google Optimize", url="https://optimize.google.com", free=True),
    ToolLink(name="Optimizely", url="https://optimizely.com", free=False),
    ToolLink(name="VWO", url="https://vwo.com", free=False),
    ToolLink(name="Unbounce", url="https://unbounce.com", free=False),
]

AB_TEST_BEST_PRACTICES = [
    "Test one element at a time",
    "Run tests for at least 2 weeks",
    "Ensure statistical significance",
    "Document all results",
    "Iterate based on findings",
]

VALIDATION_TEMPLATES: Dict[str, Dict[str, Any]] = {
    "customerInterviews": {
        "title": "Customer Interview Template",
        "questions": [
            "Tell me about your current process for [problem area]",
            "What's the biggest challenge you face with this?",
            "How do you currently solve this problem?",
            "What would an ideal solution look like to you?",
            "How much would you pay for a solution like this?",
        ],
        "tips": [
            "Ask open-ended questions",
            "Listen more than you talk",
            "Ask follow-up questions",
            "Take detailed notes",
            "Thank them for their time",
        ],
    },
    "landingPageTest": {
        "title": "Landing Page Test Template",
        "elements": [
            "Headline and subheadline",
            "Value proposition",
            "Call-to-action button",
            "Social proof",
            "Pricing information",
        ],
        "metrics": ["Page views", "Time on page", "Bounce rate", "Conversion rate", "Email signups"],
    },
    "mvpTest": {
        "title": "MVP Test Template",
        "features": [
            "Core functionality only",
            "Simple user interface",
            "Basic user feedback",
            "Essential integrations",
        ],
        "metrics": ["User engagement", "Feature usage", "User retention", "Feedback quality", "Bug reports"],
    },
}


def survey_kit(result: ValidationContentResult, target_audience: Optional[str] = None) -> SurveyKitResponse:
    return SurveyKitResponse(
        questions=list(result.content),
        additional_questions=list(ADDITIONAL_SURVEY_QUESTIONS),
        survey_tools=SURVEY_TOOLS,
        target_audience=(target_audience or "").strip() or DEFAULT_AUDIENCE,
        source=result.source,
        provider=result.provider
    )


def landing_page_kit(result: ValidationContentResult) -> LandingPageKitResponse:
    page: LandingPage = result.content
    return LandingPageKitResponse(
        headline=page.headline,
        subheading=page.subheading,
        call_to_action=page.call_to_action,
        additional_elements=LANDING_PAGE_EXTRAS,
        tools=LANDING_PAGE_TOOLS,
        source=result.source,
        provider=result.provider
    )


def ad_campaign_kit(
    result: ValidationContentResult,
    budget: float = 500,
    platform: Optional[str] = None
) -> AdCampaignKitResponse:
    """
    Ad copy with a reach estimate on the chosen platform and the rates of
    every supported platform for comparison.

    Raises:
        ValidationError: if the platform is unknown.
    """
    campaign: AdCampaign = result.content
    return AdCampaignKitResponse(
        ad_copy=campaign.ad_copy,
        keywords=campaign.keywords,
        performance=projections.simulate_ad_campaign(
            budget=budget,
            keywords=campaign.keywords,
            platform=platform
        ),
        platforms=[
            PlatformRates(name=name, **rates)
            for name, rates in projections.PLATFORM_RATES.items()
        ],
        source=result.source,
        provider=result.provider
    )


def _element_key(name: str) -> str:
    return name.replace("_", "").replace("-", "").lower()


def ab_test_suggestions(idea: str, element: Optional[str] = None) -> ABTestSuggestionsResponse:
    """
    Variants worth testing on a landing page.

    Headlines use the first word of the idea. `element` narrows the result
    to one group (headlines, callToActions, pricing or socialProof).

    Raises:
        ValidationError: if the idea is blank or the element is unknown.
    """
    idea = (idea or "").strip()
    if not idea:
        raise ValidationError("Idea is required for A/B test suggestions", field="idea")

    subject = idea.split(" ")[0]
    suggestions: Dict[str, List[str]] = {
        "headlines": [
            f"Solve {subject} problems instantly",
            f"The {subject} solution you've been waiting for",
            f"Transform your {subject} experience today",
        ],
        "callToActions": [
            "Get Started Free",
            "Try It Now",
            "Learn More",
            "Sign Up Today",
            "Start Your Journey",
        ],
        "pricing": [
            "Free to start",
            "No credit card required",
            "14-day free trial",
            "Cancel anytime",
        ],
        "socialProof": [
            "Join 10,000+ satisfied users",
            "Trusted by students worldwide",
            "4.8/5 star rating",
            "Featured in top publications",
        ],
    }

    if element:
        wanted = _element_key(element)
        matched = {k: v for k, v in suggestions.items() if _element_key(k) == wanted}
        if not matched:
            raise ValidationError(
                f"Unknown test element '{element}'. "
                f"Must be one of: {', '.join(suggestions)}",
                field="element"
            )
        suggestions = matched

    return ABTestSuggestionsResponse(
        idea=idea,
        test_suggestions=suggestions,
        testing_tools=TESTING_TOOLS,
        best_practices=list(AB_TEST_BEST_PRACTICES)
    )
