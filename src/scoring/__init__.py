"""
Scoring Module for the Citation Readiness Engine

Calculates the Citation Guarantee Score (CGS, 0-100): how likely a
document is to be cited by an AI answer engine.

1. **Category Scores** (0-100 each)
   Trust & Authority, Structural Compliance, Technical Readiness and
   Semantic Depth, each a capped checklist of markup and metadata checks.

2. **Composite Score** (0-100)
   Weighted sum: 40% trust, 30% structure, 20% technical, 10% semantic.

3. **Risk Band**
   Excellent (>= 90), Good (>= 75), Moderate (>= 60), Poor.

4. **Recommendations**
   One per category scoring below 70, in category order.

Example Usage:
    from src.scoring import score, plan_actions

    result = score(
        "<h1>Project Management Guide</h1><p>Updated March 2025</p>",
        {"target_keyword": "project management", "domain_authority": 62},
    )
    print(f"CGS: {result.composite_score} ({result.risk_band.label})")
    for rec in result.recommendations:
        print(rec.priority.value, rec.action)
"""

# Helper utilities and constants
from .helpers import (
    ScoreCategory,
    CATEGORY_FIELDS,
    CATEGORY_WEIGHTS,
    CATEGORY_LABELS,
    RiskBand,
    classify_risk,
    get_risk_band,
    points_to_band,
    weighted_composite,
)

# Metadata
from .metadata import ContentMetadata, coerce_metadata

# Feature extractors
from .extractors import (
    FeatureCheck,
    CheckOutcome,
    FeatureExtractor,
    TrustAuthorityExtractor,
    StructuralComplianceExtractor,
    TechnicalReadinessExtractor,
    SemanticDepthExtractor,
    default_extractors,
)

# Recommendations and prescriptive actions
from .recommendations import (
    RECOMMENDATION_THRESHOLD,
    RecommendationPriority,
    Recommendation,
    RECOMMENDATION_RULES,
    synthesize_recommendations,
    PrescriptiveAction,
    plan_actions,
)

# Engine facade
from .citation import (
    ScoreBreakdown,
    ScoreResult,
    ScoreSummary,
    extract_breakdown,
    aggregate,
    synthesize,
    score,
    score_batch,
    get_score_summary,
)

__all__ = [
    # Helpers
    "ScoreCategory",
    "CATEGORY_FIELDS",
    "CATEGORY_WEIGHTS",
    "CATEGORY_LABELS",
    "RiskBand",
    "classify_risk",
    "get_risk_band",
    "points_to_band",
    "weighted_composite",

    # Metadata
    "ContentMetadata",
    "coerce_metadata",

    # Extractors
    "FeatureCheck",
    "CheckOutcome",
    "FeatureExtractor",
    "TrustAuthorityExtractor",
    "StructuralComplianceExtractor",
    "TechnicalReadinessExtractor",
    "SemanticDepthExtractor",
    "default_extractors",

    # Recommendations
    "RECOMMENDATION_THRESHOLD",
    "RecommendationPriority",
    "Recommendation",
    "RECOMMENDATION_RULES",
    "synthesize_recommendations",
    "PrescriptiveAction",
    "plan_actions",

    # Engine
    "ScoreBreakdown",
    "ScoreResult",
    "ScoreSummary",
    "extract_breakdown",
    "aggregate",
    "synthesize",
    "score",
    "score_batch",
    "get_score_summary",
]
