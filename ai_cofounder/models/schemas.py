"""
Pydantic models and schemas for the application.

Business plan payloads use camelCase on the wire because the same keys are
the JSON contract the LLM prompt promises; directory payloads are snake_case.
"""

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional, List, Dict, Any, Union
from datetime import datetime
from enum import Enum


# ============================================================================
# Enums
# ============================================================================

class Availability(str, Enum):
    """Co-founder availability."""
    FULL_TIME = "Full-time"
    PART_TIME = "Part-time"
    CONSULTING = "Consulting"
    CONTRACT = "Contract"
    UNAVAILABLE = "Unavailable"


class ExperienceLevel(str, Enum):
    """Experience buckets used by the directory filter."""
    ENTRY = "entry"
    MID = "mid"
    SENIOR = "senior"


class ContentSource(str, Enum):
    """Where generated content came from."""
    PROVIDER = "provider"
    MOCK = "mock"


class ValidationType(str, Enum):
    """Kinds of validation content the AI gateway can produce."""
    SURVEY = "survey"
    LANDING_PAGE = "landingPage"
    AD_COPY = "adCopy"


class PlanStatus(str, Enum):
    """Lifecycle of a stored business plan."""
    DRAFT = "draft"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    ARCHIVED = "archived"


class Scenario(str, Enum):
    """Financial projection scenarios."""
    CONSERVATIVE = "conservative"
    REALISTIC = "realistic"
    OPTIMISTIC = "optimistic"


class SharePermission(str, Enum):
    """What the holder of a pitch deck share link may do."""
    VIEW = "view"
    COMMENT = "comment"
    EDIT = "edit"


class CamelModel(BaseModel):
    """Base for models serialized with camelCase keys."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


# ============================================================================
# Co-founder directory
# ============================================================================

class CofounderProfile(BaseModel):
    """Co-founder profile data model."""

    id: int
    name: str
    title: str
    location: str = "Remote"
    experience: str = "Not specified"
    skills: List[str] = Field(default_factory=list)
    availability: str = Availability.PART_TIME.value
    bio: str = "No bio provided"
    education: str = "Not specified"
    looking_for: str = "Open to opportunities"
    previous_startups: int = Field(default=0, ge=0)
    image: Optional[str] = None
    match_score: Optional[int] = None

    model_config = {
        "from_attributes": True,
        "json_schema_extra": {
            "example": {
                "id": 7,
                "name": "Alex Chen",
                "title": "Mobile Developer",
                "location": "Los Angeles, CA",
                "experience": "4 years",
                "skills": ["React Native", "iOS", "Android"],
                "availability": "Part-time",
            }
        }
    }


class MatchResult(CofounderProfile):
    """A profile scored against a list of requested skills."""

    matching_skills: List[str] = Field(default_factory=list)
    match_score: int = Field(..., ge=0, le=100)


class CofounderCreate(BaseModel):
    """Request to add a profile to the directory."""

    name: str = Field(..., min_length=1, max_length=200)
    title: str = Field(..., min_length=1, max_length=200)
    skills: List[str] = Field(..., min_length=1)
    location: str = "Remote"
    experience: str = "Not specified"
    availability: Availability = Availability.PART_TIME
    bio: str = Field(default="No bio provided", max_length=500)
    education: str = "Not specified"
    looking_for: str = "Open to opportunities"
    previous_startups: int = Field(default=0, ge=0)
    image: Optional[str] = None

    @field_validator("skills")
    @classmethod
    def skills_not_blank(cls, v: List[str]) -> List[str]:
        skills = [s.strip() for s in v if s.strip()]
        if not skills:
            raise ValueError("At least one non-empty skill is required")
        return skills


class CofounderListResponse(BaseModel):
    """Filtered directory listing."""

    cofounders: List[CofounderProfile]
    total: int
    limit: int
    offset: int


class MatchRequest(BaseModel):
    """Request to match directory profiles against required skills."""

    required_skills: List[str] = Field(..., min_length=1)
    user_skills: List[str] = Field(default_factory=list)
    idea: Optional[str] = Field(default=None, max_length=1000)


class MatchResponse(BaseModel):
    """Matching profiles plus skills suggested from the idea."""

    matches: List[MatchResult]
    total_matches: int
    skills_suggestions: List[str] = Field(default_factory=list)


class SkillsSuggestionRequest(BaseModel):
    """Request for skills suggested by an idea."""

    idea: str = Field(..., min_length=1, max_length=1000)


class SkillsSuggestionResponse(BaseModel):
    suggestions: List[str]


class PlanMatch(CofounderProfile):
    """
    A profile scored against a business plan.

    Suggested co-founder types (offered when the directory is empty) have
    no id.
    """

    id: Optional[int] = None
    match_score: int = Field(..., ge=0, le=100)
    is_ai_generated: bool = False


class PlanSummary(BaseModel):
    id: int
    idea: str


class PlanMatchResponse(BaseModel):
    """Co-founders ranked for a stored business plan."""

    matches: List[PlanMatch]
    total_matches: int
    business_plan: PlanSummary


# ============================================================================
# Business plan draft (LLM contract)
# ============================================================================

class CustomerPersona(CamelModel):
    name: str
    age: str
    occupation: str
    pain_points: List[str]
    goals: List[str]

    @field_validator("age", mode="before")
    @classmethod
    def age_as_text(cls, v: Any) -> Any:
        # Providers sometimes answer with a bare number.
        if isinstance(v, (int, float)):
            return str(v)
        return v


class LeanCanvas(CamelModel):
    key_partners: List[str]
    key_activities: List[str]
    value_propositions: List[str]
    customer_relationships: List[str]
    customer_segments: List[str]
    key_resources: List[str]
    channels: List[str]
    cost_structure: List[str]
    revenue_streams: List[str]


class PitchDeckSummary(CamelModel):
    title: str
    tagline: str
    problem: str
    solution: str
    market_size: str
    business_model: str
    the_ask: str


class MarketResearch(CamelModel):
    market_size: str
    competitors: List[str]
    trends: List[str]


class LandingPage(CamelModel):
    headline: str
    subheading: str
    call_to_action: str


class AdCampaign(CamelModel):
    ad_copy: str
    keywords: List[str]


class ValidationAssets(CamelModel):
    survey_questions: List[str]
    landing_page: LandingPage
    ad_campaign: AdCampaign


class BusinessPlanDraft(CamelModel):
    """
    Structured plan produced by the AI gateway.

    Every field is required: a provider reply missing any of them is
    rejected and replaced by mock content.
    """

    idea: str
    problem_statement: str
    customer_persona: CustomerPersona
    lean_canvas: LeanCanvas
    pitch_deck_summary: PitchDeckSummary
    market_research: MarketResearch
    validation: ValidationAssets


class PlanGenerationResult(CamelModel):
    """Business plan plus where it came from."""

    source: ContentSource
    provider: Optional[str] = None
    plan: BusinessPlanDraft


class ValidationContentResult(CamelModel):
    """Validation content plus where it came from."""

    type: ValidationType
    source: ContentSource
    provider: Optional[str] = None
    content: Union[List[str], LandingPage, AdCampaign]


# ============================================================================
# Plan workspace: scenario projections, market research, pitch deck
# ============================================================================

class PlanReferenceRequest(CamelModel):
    """Request naming one of the caller's business plans."""

    business_plan_id: int


class ScenarioProjectionRequest(CamelModel):
    """
    Scenario projection inputs. A zero value falls back to the default of
    the plan's industry.
    """

    business_plan_id: int
    initial_funding: float = Field(default=10000, ge=0)
    growth_rate: float = Field(default=20, ge=-100)
    monthly_costs: float = Field(default=5000, ge=0)
    revenue_per_user: float = Field(default=10, ge=0)
    initial_users: float = Field(default=100, ge=0)
    scenario: Scenario = Scenario.REALISTIC


class ScenarioMonth(CamelModel):
    month: int
    users: int
    revenue: float
    costs: float
    net_profit: float
    runway: float
    market_share: float


class ScenarioSummary(CamelModel):
    break_even_month: Optional[int] = None
    total_revenue: float
    total_costs: float
    final_runway: float
    final_users: int
    max_market_share: float
    scenario: Scenario
    industry: str


class UnitEconomics(CamelModel):
    arpu: float
    churn_rate: float
    cac: float
    ltv_cac: float
    ltv: float
    gross_margin: float


class FundingRequirements(CamelModel):
    seed_round: float
    series_a: float
    runway_months: int
    burn_rate: float
    profitability_month: Optional[int] = None


class MarketAnalysis(CamelModel):
    market_size: float
    target_market_share: float
    max_users: int
    industry: str


class ScenarioProjectionResponse(CamelModel):
    """Three-year projection of a stored plan under one scenario."""

    projections: List[ScenarioMonth]
    monthly_projections: List[ScenarioMonth]
    summary: ScenarioSummary
    metrics: UnitEconomics
    funding_requirements: FundingRequirements
    expense_breakdown: Dict[str, int]
    revenue_breakdown: Dict[str, float]
    market_analysis: MarketAnalysis


class MarketSizeEstimate(CamelModel):
    current: str
    projected: str
    unit: str = "USD"
    growth: str
    cagr: float


class CompetitorAnalysis(CamelModel):
    name: str
    analysis: str
    strengths: List[str]
    weaknesses: List[str]


class TrendAnalysis(CamelModel):
    name: str
    impact: str
    description: str


class CustomerSegment(CamelModel):
    segment: str
    size: str
    willingness: str
    pain_points: List[str]


class OpportunityScore(CamelModel):
    overall: float
    market_size: float
    competition: float
    growth: float


class MarketResearchReport(CamelModel):
    """Market research generated for a stored plan."""

    market_size: MarketSizeEstimate
    competitors: List[CompetitorAnalysis]
    trends: List[TrendAnalysis]
    customer_segments: List[CustomerSegment]
    opportunity_score: OpportunityScore
    insights: List[str]
    generated_at: datetime


class PitchDeckRequest(CamelModel):
    business_plan_id: int
    style: str = Field(default="modern", max_length=50)
    custom_message: Optional[str] = Field(default=None, max_length=1000)


class PitchDeckSlide(CamelModel):
    id: str
    title: str
    content: Dict[str, Any]


class PitchDeckMetadata(CamelModel):
    industry: str
    idea: str
    business_plan_id: int
    total_slides: int


class PitchDeck(CamelModel):
    """Ten-slide investor deck built from a stored plan."""

    id: str
    title: str
    style: str
    slides: List[PitchDeckSlide]
    generated_at: datetime
    last_modified: datetime
    version: str = "1.0"
    metadata: PitchDeckMetadata


class SlideUpdateRequest(CamelModel):
    """Fields merged into the slide's content."""

    content: Dict[str, Any]


class ShareRequest(CamelModel):
    permissions: SharePermission = SharePermission.VIEW


class ShareLinkResponse(CamelModel):
    share_url: str
    share_token: str
    permissions: SharePermission
    expires_at: datetime


class SharedPlanSummary(CamelModel):
    idea: str
    company_name: str


class SharedPitchDeckResponse(CamelModel):
    pitch_deck: PitchDeck
    business_plan: SharedPlanSummary


# ============================================================================
# Dashboard
# ============================================================================

class DashboardStats(CamelModel):
    ideas_submitted: int
    problem_refined: int
    market_research: int
    business_model: int
    experiments: int
    financial_projections: int
    pitch_deck: int


class ActivityItem(CamelModel):
    id: int
    type: str = "idea"
    title: str
    date: str
    status: str


class NextStep(CamelModel):
    id: int
    title: str
    description: str
    priority: str
    due_date: str
    progress: int = 0


class CurrentPlanSummary(CamelModel):
    id: int
    idea: str
    status: str
    progress: int
    business_model: str
    market_score: float


class DashboardResponse(CamelModel):
    stats: DashboardStats
    recent_activity: List[ActivityItem]
    next_steps: List[NextStep]
    current_business_plan: Optional[CurrentPlanSummary] = None
    total_business_plans: int


# ============================================================================
# Business plan documents
# ============================================================================

class GeneratePlanRequest(CamelModel):
    """Request to generate and store a business plan."""

    idea: str = Field(..., min_length=1, max_length=1000)
    api_provider: Optional[str] = None
    industry: Optional[str] = None
    stage: Optional[str] = None
    challenge: Optional[str] = None

    @field_validator("idea")
    @classmethod
    def idea_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Idea cannot be empty")
        return v.strip()


class ValidationContentRequest(CamelModel):
    idea: str = Field(..., min_length=1, max_length=1000)

    @field_validator("idea")
    @classmethod
    def idea_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Idea cannot be empty")
        return v.strip()


class BusinessPlanResponse(CamelModel):
    """Stored business plan document."""

    id: int
    user_id: str
    idea: str
    industry: Optional[str] = None
    stage: Optional[str] = None
    challenge: Optional[str] = None
    problem_statement: str
    customer_persona: CustomerPersona
    lean_canvas: LeanCanvas
    pitch_deck_summary: PitchDeckSummary
    market_research: MarketResearch
    validation: ValidationAssets
    source: ContentSource
    provider: Optional[str] = None
    status: PlanStatus
    tags: List[str] = Field(default_factory=list)
    is_public: bool = False
    financial_projections: Optional[ScenarioProjectionResponse] = None
    market_research_data: Optional[MarketResearchReport] = None
    pitch_deck: Optional[PitchDeck] = None
    created_at: datetime
    updated_at: datetime


class BusinessPlanUpdate(CamelModel):
    """Partial update of a stored business plan."""

    idea: Optional[str] = Field(default=None, min_length=1, max_length=1000)
    industry: Optional[str] = None
    stage: Optional[str] = None
    challenge: Optional[str] = None
    problem_statement: Optional[str] = None
    customer_persona: Optional[CustomerPersona] = None
    lean_canvas: Optional[LeanCanvas] = None
    pitch_deck_summary: Optional[PitchDeckSummary] = None
    market_research: Optional[MarketResearch] = None
    validation: Optional[ValidationAssets] = None
    status: Optional[PlanStatus] = None
    tags: Optional[List[str]] = None
    is_public: Optional[bool] = None


class Pagination(CamelModel):
    current: int
    pages: int
    total: int


class BusinessPlanListResponse(CamelModel):
    business_plans: List[BusinessPlanResponse]
    pagination: Pagination


# ============================================================================
# Planning calculators
# ============================================================================

class FinancialProjectionRequest(CamelModel):
    initial_funding: float = Field(default=10000, ge=0)
    growth_rate: float = Field(default=20, ge=-100)
    monthly_costs: float = Field(default=5000, ge=0)
    revenue_per_user: float = Field(default=10, ge=0)
    initial_users: float = Field(default=100, ge=0)


class MonthlyProjection(CamelModel):
    month: int
    users: int
    revenue: float
    costs: float
    net_profit: float
    runway: float


class ProjectionSummary(CamelModel):
    break_even_month: Optional[int] = None
    total_revenue: float
    total_costs: float
    final_runway: float


class FinancialProjectionResponse(CamelModel):
    projections: List[MonthlyProjection]
    summary: ProjectionSummary


class AdSimulationRequest(CamelModel):
    budget: float = Field(default=500, ge=0)
    keywords: List[str] = Field(default_factory=list)
    platform: str = "google"


class AdMetrics(CamelModel):
    ctr: str
    cpc: str
    conversion_rate: str


class AdSimulationResponse(CamelModel):
    budget: float
    platform: str
    impressions: int
    clicks: int
    leads: int
    metrics: AdMetrics
    keywords: List[str]


# ============================================================================
# Validation toolkit
# ============================================================================

class ToolLink(BaseModel):
    name: str
    url: str
    free: bool


class SurveyKitRequest(ValidationContentRequest):
    target_audience: Optional[str] = Field(default=None, max_length=200)


class SurveyKitResponse(CamelModel):
    questions: List[str]
    additional_questions: List[str]
    survey_tools: List[ToolLink]
    target_audience: str
    source: ContentSource
    provider: Optional[str] = None


class LandingPageExtras(CamelModel):
    features: List[str]
    testimonials: List[str]
    pricing: Dict[str, str]


class LandingPageKitResponse(CamelModel):
    headline: str
    subheading: str
    call_to_action: str
    additional_elements: LandingPageExtras
    tools: List[ToolLink]
    source: ContentSource
    provider: Optional[str] = None


class AdCampaignKitRequest(ValidationContentRequest):
    budget: float = Field(default=500, ge=0)
    platform: str = "google"


class PlatformRates(CamelModel):
    name: str
    cpc: float
    ctr: float
    conversion_rate: float


class AdCampaignKitResponse(CamelModel):
    ad_copy: str
    keywords: List[str]
    performance: AdSimulationResponse
    platforms: List[PlatformRates]
    source: ContentSource
    provider: Optional[str] = None


class ABTestRequest(ValidationContentRequest):
    element: Optional[str] = None


class ABTestSuggestionsResponse(CamelModel):
    idea: str
    test_suggestions: Dict[str, List[str]]
    testing_tools: List[ToolLink]
    best_practices: List[str]


# ============================================================================
# Idea form
# ============================================================================

class FormOption(BaseModel):
    value: str
    label: str


class FormDataResponse(BaseModel):
    industries: List[FormOption]
    stages: List[FormOption]
    challenges: List[str]


# ============================================================================
# System
# ============================================================================

class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    providers: Dict[str, bool] = Field(default_factory=dict)
    timestamp: datetime = Field(default_factory=datetime.utcnow)


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: Dict[str, Any]

    model_config = {
        "json_schema_extra": {
            "example": {
                "error": {
                    "code": "VALIDATION_ERROR",
                    "message": "Invalid input",
                    "details": {}
                }
            }
        }
    }
