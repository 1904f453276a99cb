"""
Citation Guarantee Score (CGS) Engine

Calculates citation readiness (0-100) from 4 weighted categories:

1. Trust & Authority (E-E-A-T signals): 40%
2. Structural Compliance (extraction readiness): 30%
3. Technical Readiness (machine indexing): 20%
4. Semantic Depth (query intent alignment): 10%

Formula:
    CGS = round(0.40 × Trust + 0.30 × Structure + 0.20 × Technical + 0.10 × Semantic)

The composite is classified into a risk band and every category below
70 yields one recommendation. Scoring is pure: no I/O, no shared state,
identical inputs always give identical results.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Sequence, Tuple

from .extractors import FeatureExtractor, default_extractors
from .helpers import (
    CATEGORY_FIELDS,
    RiskBand,
    ScoreCategory,
    classify_risk,
    mean,
    weighted_composite,
)
from .metadata import MetadataInput, coerce_metadata
from .recommendations import Recommendation, synthesize_recommendations

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoreBreakdown:
    """Per-category scores (each 0-100)."""
    trust_authority: int = 0
    structural_compliance: int = 0
    technical_readiness: int = 0
    semantic_depth: int = 0

    @classmethod
    def from_scores(cls, scores: Dict[ScoreCategory, int]) -> "ScoreBreakdown":
        return cls(**{
            CATEGORY_FIELDS[category]: score
            for category, score in scores.items()
        })

    def by_category(self) -> Dict[ScoreCategory, int]:
        """Scores keyed by category, in evaluation order."""
        return {
            category: getattr(self, field_name)
            for category, field_name in CATEGORY_FIELDS.items()
        }

    def to_dict(self) -> Dict[str, int]:
        return {
            field_name: getattr(self, field_name)
            for field_name in CATEGORY_FIELDS.values()
        }


@dataclass(frozen=True)
class ScoreResult:
    """Result of a CGS calculation."""
    composite_score: int
    breakdown: ScoreBreakdown
    risk_band: RiskBand
    recommendations: List[Recommendation] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "composite_score": self.composite_score,
            "breakdown": self.breakdown.to_dict(),
            "risk_band": self.risk_band.to_dict(),
            "recommendations": [rec.to_dict() for rec in self.recommendations],
        }


# Built once; extractors hold no per-call state
_EXTRACTORS: Dict[ScoreCategory, FeatureExtractor] = default_extractors()


def extract_breakdown(content: str, metadata: MetadataInput = None) -> ScoreBreakdown:
    """
    Run all 4 category extractors.

    Args:
        content: Document markup
        metadata: ContentMetadata, plain mapping, or None

    Returns:
        ScoreBreakdown with one score per category
    """
    meta = coerce_metadata(metadata)
    scores = {
        category: extractor.extract(content, meta)
        for category, extractor in _EXTRACTORS.items()
    }
    return ScoreBreakdown.from_scores(scores)


def aggregate(breakdown: ScoreBreakdown) -> int:
    """Weighted composite of a breakdown (0-100)."""
    return weighted_composite(breakdown.by_category())


def synthesize(breakdown: ScoreBreakdown) -> List[Recommendation]:
    """Recommendations for every category of the breakdown below 70."""
    return synthesize_recommendations(breakdown.by_category())


def score(content: str, metadata: MetadataInput = None) -> ScoreResult:
    """
    Calculate the Citation Guarantee Score for a document.

    Never raises: empty or malformed markup scores 0 in every category,
    and metadata fields that are missing or of the wrong type simply
    leave their checks unsatisfied.

    Args:
        content: Document markup (headings, paragraphs, lists, anchors, ...)
        metadata: Optional target_keyword, domain_authority, meta_description

    Returns:
        ScoreResult with composite score, breakdown, risk band and
        ordered recommendations

    Example:
        result = score("<h1>Guide</h1><p>Updated ...</p>", {"target_keyword": "guide"})
        print(result.composite_score, result.risk_band.label)
    """
    if not isinstance(content, str):
        logger.warning(f"Non-text content ({type(content).__name__}) scored as empty document")
        content = ""

    breakdown = extract_breakdown(content, metadata)
    composite = aggregate(breakdown)
    band = classify_risk(composite)
    recommendations = synthesize(breakdown)

    logger.debug(
        f"CGS {composite} ({band.level}): {breakdown.to_dict()}, "
        f"{len(recommendations)} recommendations"
    )

    return ScoreResult(
        composite_score=composite,
        breakdown=breakdown,
        risk_band=band,
        recommendations=recommendations,
    )


# ============================================================================
# BATCH SCORING
# ============================================================================

def score_batch(
    documents: Iterable[Tuple[str, MetadataInput]],
) -> List[ScoreResult]:
    """
    Score a batch of (content, metadata) pairs, preserving input order.

    Args:
        documents: Iterable of (content, metadata) tuples

    Returns:
        List of ScoreResult, one per document
    """
    results = [score(content, metadata) for content, metadata in documents]
    logger.info(f"Scored {len(results)} documents")
    return results


@dataclass
class ScoreSummary:
    """Aggregate view of a scored batch."""
    total_documents: int
    average_composite: float
    band_counts: Dict[str, int]
    category_averages: Dict[str, float]
    citation_ready_count: int
    needs_work_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_documents": self.total_documents,
            "average_composite": self.average_composite,
            "band_counts": self.band_counts,
            "category_averages": self.category_averages,
            "citation_ready_count": self.citation_ready_count,
            "needs_work_count": self.needs_work_count,
        }


def get_score_summary(results: Sequence[ScoreResult]) -> ScoreSummary:
    """
    Summarize a batch of score results.

    Args:
        results: ScoreResult list

    Returns:
        ScoreSummary with band distribution and category averages
    """
    band_counts = {band.level: 0 for band in RiskBand}
    for result in results:
        band_counts[result.risk_band.level] += 1

    category_averages = {
        field_name: round(mean([getattr(r.breakdown, field_name) for r in results]), 1)
        for field_name in CATEGORY_FIELDS.values()
    }

    return ScoreSummary(
        total_documents=len(results),
        average_composite=round(mean([r.composite_score for r in results]), 1),
        band_counts=band_counts,
        category_averages=category_averages,
        citation_ready_count=band_counts[RiskBand.EXCELLENT.level],
        needs_work_count=band_counts[RiskBand.MODERATE.level] + band_counts[RiskBand.POOR.level],
    )
