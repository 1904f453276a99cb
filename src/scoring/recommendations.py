"""
Recommendation Synthesis and Prescriptive Actions

Two outputs are derived from a scored document:

1. **Recommendations**: one per category scoring below 70, emitted in
   fixed category order (trust, structural, technical, semantic) and
   never re-sorted.

2. **Prescriptive actions**: the one-click fixes offered to the author,
   each enabled or disabled by the document state or category scores.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Mapping

from .helpers import CATEGORY_LABELS, ScoreCategory, count_anchors

logger = logging.getLogger(__name__)


RECOMMENDATION_THRESHOLD = 70


class RecommendationPriority(Enum):
    """Recommendation priority."""
    HIGH = "high"
    MEDIUM = "medium"


@dataclass(frozen=True)
class Recommendation:
    """A prioritized suggestion for raising one category's score."""
    priority: RecommendationPriority
    category: ScoreCategory
    action: str
    impact_estimate: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "priority": self.priority.value,
            "category": self.category.value,
            "category_label": CATEGORY_LABELS[self.category],
            "action": self.action,
            "impact_estimate": self.impact_estimate,
        }


# Fixed recommendation per category, in evaluation order
RECOMMENDATION_RULES: Dict[ScoreCategory, Recommendation] = {
    ScoreCategory.TRUST: Recommendation(
        priority=RecommendationPriority.HIGH,
        category=ScoreCategory.TRUST,
        action="Add citations from high-authority sources (DA > 85)",
        impact_estimate="+15 CGS points",
    ),
    ScoreCategory.STRUCTURAL: Recommendation(
        priority=RecommendationPriority.HIGH,
        category=ScoreCategory.STRUCTURAL,
        action='Add an Answer-First "Key Takeaway" box at the top',
        impact_estimate="+20 CGS points",
    ),
    ScoreCategory.TECHNICAL: Recommendation(
        priority=RecommendationPriority.MEDIUM,
        category=ScoreCategory.TECHNICAL,
        action="Add JSON-LD schema markup for FAQPage",
        impact_estimate="+15 CGS points",
    ),
    ScoreCategory.SEMANTIC: Recommendation(
        priority=RecommendationPriority.MEDIUM,
        category=ScoreCategory.SEMANTIC,
        action="Increase entity bolding and keyword density",
        impact_estimate="+10 CGS points",
    ),
}


def synthesize_recommendations(scores: Mapping[ScoreCategory, int]) -> List[Recommendation]:
    """
    Build recommendations for every category below the action threshold.

    Args:
        scores: Category -> score (0-100)

    Returns:
        Recommendations in category order (empty if every category >= 70)
    """
    recommendations = []
    for category in ScoreCategory:
        if scores.get(category, 0) < RECOMMENDATION_THRESHOLD:
            recommendations.append(RECOMMENDATION_RULES[category])
    return recommendations


# ============================================================================
# PRESCRIPTIVE ACTIONS
# ============================================================================

ACTION_SCORE_THRESHOLD = 80
MIN_CITATIONS_FOR_ENHANCER = 3


@dataclass(frozen=True)
class PrescriptiveAction:
    """A one-click content fix offered for a scored document."""
    id: str
    title: str
    description: str
    category: ScoreCategory
    impact: str
    enabled: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "category": self.category.value,
            "impact": self.impact,
            "enabled": self.enabled,
        }


def plan_actions(content: str, scores: Mapping[ScoreCategory, int]) -> List[PrescriptiveAction]:
    """
    List the prescriptive fixes for a document and whether each applies.

    Args:
        content: Document markup
        scores: Category -> score for the same document

    Returns:
        Actions in fixed order: answer-first, eeat-filler,
        structure-optimizer, citation-enhancer
    """
    trust = scores.get(ScoreCategory.TRUST, 0)
    structural = scores.get(ScoreCategory.STRUCTURAL, 0)

    actions = [
        PrescriptiveAction(
            id="answer-first",
            title="Answer-First Rewriter",
            description="Rewrites the introduction into a liftable, fact-first summary optimized for AI extraction",
            category=ScoreCategory.STRUCTURAL,
            impact="+20 CGS points",
            enabled="aeo-answer-box" not in content,
        ),
        PrescriptiveAction(
            id="eeat-filler",
            title="E-E-A-T Gap Filler",
            description="Adds missing authority signals (author credentials, citations, dates)",
            category=ScoreCategory.TRUST,
            impact="+15 CGS points",
            enabled=trust < ACTION_SCORE_THRESHOLD,
        ),
        PrescriptiveAction(
            id="structure-optimizer",
            title="Structure Optimizer",
            description="Fixes heading hierarchy, paragraph length and content formatting",
            category=ScoreCategory.STRUCTURAL,
            impact="+18 CGS points",
            enabled=structural < ACTION_SCORE_THRESHOLD,
        ),
        PrescriptiveAction(
            id="citation-enhancer",
            title="Citation Enhancer",
            description="Suggests high-authority sources (DA > 85) to cite for credibility",
            category=ScoreCategory.TRUST,
            impact="+12 CGS points",
            enabled=count_anchors(content) < MIN_CITATIONS_FOR_ENHANCER,
        ),
    ]

    enabled = sum(1 for action in actions if action.enabled)
    logger.debug(f"Planned {len(actions)} prescriptive actions ({enabled} enabled)")
    return actions
