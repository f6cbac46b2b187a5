"""
Models package containing all Pydantic schemas and data models.
"""

from ai_cofounder.models.schemas import (
    Availability,
    ExperienceLevel,
    ContentSource,
    ValidationType,
    PlanStatus,
    Scenario,
    SharePermission,
    CofounderProfile,
    CofounderCreate,
    CofounderListResponse,
    MatchResult,
    MatchRequest,
    MatchResponse,
    SkillsSuggestionRequest,
    SkillsSuggestionResponse,
    PlanMatch,
    PlanSummary,
    PlanMatchResponse,
    CustomerPersona,
    LeanCanvas,
    PitchDeckSummary,
    MarketResearch,
    LandingPage,
    AdCampaign,
    ValidationAssets,
    BusinessPlanDraft,
    PlanGenerationResult,
    ValidationContentResult,
    PlanReferenceRequest,
    ScenarioProjectionRequest,
    ScenarioMonth,
    ScenarioSummary,
    UnitEconomics,
    FundingRequirements,
    MarketAnalysis,
    ScenarioProjectionResponse,
    MarketSizeEstimate,
    CompetitorAnalysis,
    TrendAnalysis,
    CustomerSegment,
    OpportunityScore,
    MarketResearchReport,
    PitchDeckRequest,
    PitchDeckSlide,
    PitchDeckMetadata,
    PitchDeck,
    SlideUpdateRequest,
    ShareRequest,
    ShareLinkResponse,
    SharedPlanSummary,
    SharedPitchDeckResponse,
    DashboardStats,
    ActivityItem,
    NextStep,
    CurrentPlanSummary,
    DashboardResponse,
    GeneratePlanRequest,
    ValidationContentRequest,
    BusinessPlanResponse,
    BusinessPlanUpdate,
    BusinessPlanListResponse,
    Pagination,
    FinancialProjectionRequest,
    FinancialProjectionResponse,
    MonthlyProjection,
    ProjectionSummary,
    AdSimulationRequest,
    AdSimulationResponse,
    AdMetrics,
    ToolLink,
    SurveyKitRequest,
    SurveyKitResponse,
    LandingPageExtras,
    LandingPageKitResponse,
    AdCampaignKitRequest,
    PlatformRates,
    AdCampaignKitResponse,
    ABTestRequest,
    ABTestSuggestionsResponse,
    FormDataResponse,
    HealthResponse,
    ErrorResponse,
)

__all__ = [
    "Availability",
    "ExperienceLevel",
    "ContentSource",
    "ValidationType",
    "PlanStatus",
    "Scenario",
    "SharePermission",
    "CofounderProfile",
    "CofounderCreate",
    "CofounderListResponse",
    "MatchResult",
    "MatchRequest",
    "MatchResponse",
    "SkillsSuggestionRequest",
    "SkillsSuggestionResponse",
    "PlanMatch",
    "PlanSummary",
    "PlanMatchResponse",
    "CustomerPersona",
    "LeanCanvas",
    "PitchDeckSummary",
    "MarketResearch",
    "LandingPage",
    "AdCampaign",
    "ValidationAssets",
    "BusinessPlanDraft",
    "PlanGenerationResult",
    "ValidationContentResult",
    "PlanReferenceRequest",
    "ScenarioProjectionRequest",
    "ScenarioMonth",
    "ScenarioSummary",
    "UnitEconomics",
    "FundingRequirements",
    "MarketAnalysis",
    "ScenarioProjectionResponse",
    "MarketSizeEstimate",
    "CompetitorAnalysis",
    "TrendAnalysis",
    "CustomerSegment",
    "OpportunityScore",
    "MarketResearchReport",
    "PitchDeckRequest",
    "PitchDeckSlide",
    "PitchDeckMetadata",
    "PitchDeck",
    "SlideUpdateRequest",
    "ShareRequest",
    "ShareLinkResponse",
    "SharedPlanSummary",
    "SharedPitchDeckResponse",
    "DashboardStats",
    "ActivityItem",
    "NextStep",
    "CurrentPlanSummary",
    "DashboardResponse",
    "GeneratePlanRequest",
    "ValidationContentRequest",
    "BusinessPlanResponse",
    "BusinessPlanUpdate",
    "BusinessPlanListResponse",
    "Pagination",
    "FinancialProjectionRequest",
    "FinancialProjectionResponse",
    "MonthlyProjection",
    "ProjectionSummary",
    "AdSimulationRequest",
    "AdSimulationResponse",
    "AdMetrics",
    "ToolLink",
    "SurveyKitRequest",
    "SurveyKitResponse",
    "LandingPageExtras",
    "LandingPageKitResponse",
    "AdCampaignKitRequest",
    "PlatformRates",
    "AdCampaignKitResponse",
    "ABTestRequest",
    "ABTestSuggestionsResponse",
    "FormDataResponse",
    "HealthResponse",
    "ErrorResponse",
]
