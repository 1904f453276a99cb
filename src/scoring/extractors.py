"""
Feature Extractors for Citation Readiness Scoring

Implements 4 category extractors, each an ordered checklist of
independent checks worth a fixed number of points:

- Trust & Authority (5 checks, E-E-A-T signals)
- Structural Compliance (5 checks, extraction readiness)
- Technical Readiness (4 checks, machine indexing)
- Semantic Depth (4 checks, query intent alignment)

Each category score is the sum of awarded points, capped at 100.
Extractors are pure and total: absent or malformed metadata simply
leaves a check unsatisfied.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List

from .helpers import (
    ANSWER_FIRST_MARKERS,
    MAX_SCORE,
    SEMANTIC_CONTAINER_TAGS,
    STRUCTURED_DATA_MARKERS,
    ScoreCategory,
    as_number,
    as_text,
    contains_any,
    count_anchors,
    count_emphasis,
    count_tags,
    has_tag,
    image_alt_counts,
    mean,
    paragraph_lengths,
    top_heading_text,
    word_count,
)
from .metadata import ContentMetadata, MetadataInput, coerce_metadata

logger = logging.getLogger(__name__)


# A check returns the points it awards (0 when unsatisfied)
PointsFn = Callable[[str, ContentMetadata], int]


@dataclass(frozen=True)
class FeatureCheck:
    """Definition of a single scoring check."""
    name: str
    description: str
    points: int
    points_fn: PointsFn

    def award(self, content: str, metadata: ContentMetadata) -> int:
        awarded = self.points_fn(content, metadata)
        return max(0, min(self.points, awarded))


@dataclass(frozen=True)
class CheckOutcome:
    """Result of running a feature check."""
    name: str
    passed: bool
    points: int
    max_points: int


def when(predicate: Callable[[str, ContentMetadata], bool], points: int) -> PointsFn:
    """Award all points when the predicate holds, none otherwise."""
    def _points(content: str, metadata: ContentMetadata) -> int:
        return points if predicate(content, metadata) else 0
    return _points


class FeatureExtractor:
    """
    Base class for a category extractor.

    Subclasses declare `category` and register their checks in
    `_register_checks`. Usage:

        extractor = TrustAuthorityExtractor()
        score = extractor.extract(content, metadata)
        outcomes = extractor.evaluate(content, metadata)
    """

    category: ScoreCategory

    def __init__(self):
        self.checks: List[FeatureCheck] = []
        self._register_checks()

    def _register_checks(self):
        raise NotImplementedError

    def add_check(self, name: str, description: str, points: int, points_fn: PointsFn):
        self.checks.append(FeatureCheck(
            name=name,
            description=description,
            points=points,
            points_fn=points_fn,
        ))

    def evaluate(self, content: str, metadata: MetadataInput = None) -> List[CheckOutcome]:
        """Run every check in order and report what each awarded."""
        metadata = coerce_metadata(metadata)
        outcomes = []
        for check in self.checks:
            awarded = check.award(content, metadata)
            outcomes.append(CheckOutcome(
                name=check.name,
                passed=awarded > 0,
                points=awarded,
                max_points=check.points,
            ))
        return outcomes

    def extract(self, content: str, metadata: MetadataInput = None) -> int:
        """Category score: awarded points summed and capped at 100."""
        total = sum(outcome.points for outcome in self.evaluate(content, metadata))
        score = min(total, MAX_SCORE)
        logger.debug(f"{self.category.value} score: {score} (raw {total})")
        return score


# ============================================================================
# TRUST & AUTHORITY
# ============================================================================

CITATION_POINTS_EACH = 5
CITATION_POINTS_CAP = 25
DOMAIN_AUTHORITY_THRESHOLD = 50
EVIDENCE_TERMS = ("study", "research", "data")
AUTHORSHIP_MARKERS = ("By", "Author")
FRESHNESS_MARKERS = ("Updated", "Published")


class TrustAuthorityExtractor(FeatureExtractor):
    """E-E-A-T signals: authorship, freshness, citations, authority, evidence."""

    category = ScoreCategory.TRUST

    def _register_checks(self):
        self.add_check(
            "author_attribution",
            "Emphasised author byline",
            20,
            when(_has_author_attribution, 20),
        )
        self.add_check(
            "freshness_marker",
            "Updated or published date",
            15,
            when(lambda c, m: contains_any(c, FRESHNESS_MARKERS), 15),
        )
        self.add_check(
            "external_citations",
            f"{CITATION_POINTS_EACH} points per linked citation",
            CITATION_POINTS_CAP,
            _citation_points,
        )
        self.add_check(
            "domain_authority",
            f"Domain authority above {DOMAIN_AUTHORITY_THRESHOLD}",
            20,
            when(_has_domain_authority, 20),
        )
        self.add_check(
            "evidentiary_language",
            "References studies, research or data",
            20,
            when(lambda c, m: contains_any(c, EVIDENCE_TERMS, case_sensitive=False), 20),
        )


def _has_author_attribution(content: str, metadata: ContentMetadata) -> bool:
    return count_emphasis(content) > 0 and contains_any(content, AUTHORSHIP_MARKERS)


def _citation_points(content: str, metadata: ContentMetadata) -> int:
    return min(count_anchors(content) * CITATION_POINTS_EACH, CITATION_POINTS_CAP)


def _has_domain_authority(content: str, metadata: ContentMetadata) -> bool:
    authority = as_number(metadata.domain_authority)
    return authority is not None and authority > DOMAIN_AUTHORITY_THRESHOLD


# ============================================================================
# STRUCTURAL COMPLIANCE
# ============================================================================

MIN_SECONDARY_HEADINGS = 3
MAX_MEAN_PARAGRAPH_LENGTH = 400
MIN_EMPHASIS_FOR_ENTITIES = 5


class StructuralComplianceExtractor(FeatureExtractor):
    """Extraction readiness: answer-first block, headings, lists, brevity."""

    category = ScoreCategory.STRUCTURAL

    def _register_checks(self):
        self.add_check(
            "answer_first_block",
            "Key Takeaway / answer box near the top",
            30,
            when(lambda c, m: contains_any(c, ANSWER_FIRST_MARKERS), 30),
        )
        self.add_check(
            "heading_hierarchy",
            f"One H1 and at least {MIN_SECONDARY_HEADINGS} H2s",
            25,
            when(_has_heading_hierarchy, 25),
        )
        self.add_check(
            "list_usage",
            "Ordered or unordered list",
            20,
            when(lambda c, m: has_tag(c, "ul") or has_tag(c, "ol"), 20),
        )
        self.add_check(
            "paragraph_brevity",
            f"Mean paragraph length under {MAX_MEAN_PARAGRAPH_LENGTH} characters",
            15,
            when(_has_short_paragraphs, 15),
        )
        self.add_check(
            "entity_emphasis",
            f"At least {MIN_EMPHASIS_FOR_ENTITIES} emphasised entities",
            10,
            when(lambda c, m: count_emphasis(c) >= MIN_EMPHASIS_FOR_ENTITIES, 10),
        )


def _has_heading_hierarchy(content: str, metadata: ContentMetadata) -> bool:
    return count_tags(content, "h1") == 1 and count_tags(content, "h2") >= MIN_SECONDARY_HEADINGS


def _has_short_paragraphs(content: str, metadata: ContentMetadata) -> bool:
    lengths = paragraph_lengths(content)
    # No paragraphs means no mean to compare
    if not lengths:
        return False
    return mean(lengths) < MAX_MEAN_PARAGRAPH_LENGTH


# ============================================================================
# TECHNICAL READINESS
# ============================================================================

MIN_META_DESCRIPTION_LENGTH = 100


class TechnicalReadinessExtractor(FeatureExtractor):
    """Machine indexing: structured data, semantic HTML, meta, alt text."""

    category = ScoreCategory.TECHNICAL

    def _register_checks(self):
        self.add_check(
            "structured_data",
            "Schema / JSON-LD block",
            40,
            when(lambda c, m: contains_any(c, STRUCTURED_DATA_MARKERS), 40),
        )
        self.add_check(
            "semantic_sectioning",
            "Semantic container element",
            30,
            when(lambda c, m: any(has_tag(c, tag) for tag in SEMANTIC_CONTAINER_TAGS), 30),
        )
        self.add_check(
            "meta_description",
            f"Meta description longer than {MIN_META_DESCRIPTION_LENGTH} characters",
            15,
            when(_has_meta_description, 15),
        )
        self.add_check(
            "image_accessibility",
            "Every image has alt text",
            15,
            when(_has_accessible_images, 15),
        )


def _has_meta_description(content: str, metadata: ContentMetadata) -> bool:
    description = as_text(metadata.meta_description)
    return description is not None and len(description) > MIN_META_DESCRIPTION_LENGTH


def _has_accessible_images(content: str, metadata: ContentMetadata) -> bool:
    images, alts = image_alt_counts(content)
    return images > 0 and alts == images


# ============================================================================
# SEMANTIC DEPTH
# ============================================================================

INTENT_CUES = ("what", "how", "why", "when", "where", "best", "guide", "tips")

# (minimum words, points), highest tier first
CONTENT_DEPTH_TIERS = (
    (1000, 20),
    (500, 10),
)
MIN_EMPHASIS_FOR_RELATIONSHIPS = 10


class SemanticDepthExtractor(FeatureExtractor):
    """Query intent alignment: keyword placement, intent cues, depth, entities."""

    category = ScoreCategory.SEMANTIC

    def _register_checks(self):
        self.add_check(
            "keyword_in_top_heading",
            "Target keyword in the H1",
            30,
            when(_keyword_in_top_heading, 30),
        )
        self.add_check(
            "intent_cue",
            "Question or guide intent wording",
            30,
            when(lambda c, m: contains_any(c, INTENT_CUES, case_sensitive=False), 30),
        )
        self.add_check(
            "content_depth",
            "More than 500 / 1000 words",
            CONTENT_DEPTH_TIERS[0][1],
            _content_depth_points,
        )
        self.add_check(
            "entity_relationships",
            f"At least {MIN_EMPHASIS_FOR_RELATIONSHIPS} emphasised entities",
            20,
            when(lambda c, m: count_emphasis(c) >= MIN_EMPHASIS_FOR_RELATIONSHIPS, 20),
        )


def _keyword_in_top_heading(content: str, metadata: ContentMetadata) -> bool:
    keyword = as_text(metadata.target_keyword)
    if not keyword:
        return False
    heading = top_heading_text(content)
    return heading is not None and keyword.lower() in heading.lower()


def _content_depth_points(content: str, metadata: ContentMetadata) -> int:
    words = word_count(content)
    for minimum, points in CONTENT_DEPTH_TIERS:
        if words > minimum:
            return points
    return 0


# ============================================================================
# REGISTRY
# ============================================================================

def default_extractors() -> Dict[ScoreCategory, FeatureExtractor]:
    """One extractor per category, in evaluation order."""
    extractors = [
        TrustAuthorityExtractor(),
        StructuralComplianceExtractor(),
        TechnicalReadinessExtractor(),
        SemanticDepthExtractor(),
    ]
    return {extractor.category: extractor for extractor in extractors}
