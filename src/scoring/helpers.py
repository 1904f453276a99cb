"""
Scoring Helper Functions and Constants

Contains the category weights, risk band thresholds, markup pattern
helpers and aggregation utilities used across the citation scoring engine.
"""

import math
import re
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from numbers import Real
from typing import Any, Dict, List, Mapping, Optional, Tuple


# ============================================================================
# CATEGORY WEIGHTS (compiled-in, never configuration)
# ============================================================================

class ScoreCategory(Enum):
    """Scoring categories, in evaluation order."""
    TRUST = "trust"
    STRUCTURAL = "structural"
    TECHNICAL = "technical"
    SEMANTIC = "semantic"


# Breakdown field name for each category
CATEGORY_FIELDS: Dict[ScoreCategory, str] = {
    ScoreCategory.TRUST: "trust_authority",
    ScoreCategory.STRUCTURAL: "structural_compliance",
    ScoreCategory.TECHNICAL: "technical_readiness",
    ScoreCategory.SEMANTIC: "semantic_depth",
}

CATEGORY_WEIGHTS: Dict[ScoreCategory, float] = {
    ScoreCategory.TRUST: 0.40,        # E-E-A-T signals
    ScoreCategory.STRUCTURAL: 0.30,   # Extraction readiness
    ScoreCategory.TECHNICAL: 0.20,    # Machine indexing
    ScoreCategory.SEMANTIC: 0.10,     # Query intent alignment
}

CATEGORY_LABELS: Dict[ScoreCategory, str] = {
    ScoreCategory.TRUST: "Trust & Authority",
    ScoreCategory.STRUCTURAL: "Structural Compliance",
    ScoreCategory.TECHNICAL: "Technical Readiness",
    ScoreCategory.SEMANTIC: "Semantic Depth",
}

WEIGHT_TOLERANCE = 1e-9

MAX_SCORE = 100
MIN_SCORE = 0


def _validate_weights(weights: Mapping[ScoreCategory, float]) -> None:
    total = sum(Decimal(str(w)) for w in weights.values())
    if abs(total - Decimal(1)) > Decimal(str(WEIGHT_TOLERANCE)):
        raise ValueError(f"Category weights must sum to 1.0, got {total}")


_validate_weights(CATEGORY_WEIGHTS)


# ============================================================================
# RISK BANDS
# ============================================================================

class RiskBand(Enum):
    """
    Citation risk bands, ordered from best to worst.

    Each member carries its inclusive lower-bound threshold, display
    label and display colour.
    """
    EXCELLENT = ("excellent", 90, "Citation Ready", "#10b981")
    GOOD = ("good", 75, "High Probability", "#3b82f6")
    MODERATE = ("moderate", 60, "Needs Optimization", "#f59e0b")
    POOR = ("poor", 0, "High Risk", "#ef4444")

    def __init__(self, level: str, threshold: int, label: str, color: str):
        self.level = level
        self.threshold = threshold
        self.label = label
        self.color = color

    def to_dict(self) -> Dict[str, Any]:
        return {
            "level": self.level,
            "threshold": self.threshold,
            "label": self.label,
            "color": self.color,
        }


def classify_risk(composite_score: int) -> RiskBand:
    """
    Map a composite score to its risk band.

    Bands are evaluated top-down and the first whose threshold the
    score reaches wins, so boundaries are inclusive on the lower bound.

    Args:
        composite_score: Composite CGS score (0-100)

    Returns:
        RiskBand enum
    """
    for band in RiskBand:
        if composite_score >= band.threshold:
            return band
    return RiskBand.POOR


def get_risk_band(level: str) -> Optional[RiskBand]:
    """Look up a band by its level name (e.g. "good")."""
    for band in RiskBand:
        if band.level == level.lower():
            return band
    return None


def points_to_band(composite_score: int, band: RiskBand) -> int:
    """
    Composite points still needed to reach a band.

    Args:
        composite_score: Current composite score
        band: Target band

    Returns:
        Points needed (0 if already at or above the band threshold)
    """
    return max(0, band.threshold - composite_score)


# ============================================================================
# AGGREGATION
# ============================================================================

def round_half_up(value: Decimal) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def weighted_composite(scores: Mapping[ScoreCategory, int]) -> int:
    """
    Combine category scores into the composite CGS score.

    The weighted sum is computed in decimal arithmetic so that exact
    halves (e.g. 84.5) round up instead of drifting under binary floats.

    Args:
        scores: Category -> score (0-100)

    Returns:
        Composite score (0-100)
    """
    total = sum(
        Decimal(str(weight)) * Decimal(int(scores.get(category, 0)))
        for category, weight in CATEGORY_WEIGHTS.items()
    )
    return clamp_score(round_half_up(total))


def clamp_score(value: int) -> int:
    """Clamp a score into [0, 100]."""
    return max(MIN_SCORE, min(MAX_SCORE, value))


def mean(values: List[float]) -> float:
    """Arithmetic mean, 0.0 for an empty list."""
    if not values:
        return 0.0
    return sum(values) / len(values)


# ============================================================================
# MARKUP PATTERNS
# ============================================================================

EMPHASIS_TAG = "strong"
SEMANTIC_CONTAINER_TAGS = ("article", "section", "header", "nav", "main")
STRUCTURED_DATA_MARKERS = ("schema-tag", "application/ld+json")
ANSWER_FIRST_MARKERS = ("aeo-answer-box", "Key Takeaway")

_TAG_PATTERNS: Dict[str, re.Pattern] = {}

# Attribute runs stop at the next "<" so unclosed tags cannot rescan the document
ANCHOR_PATTERN = re.compile(r"<a\s[^<>]*href\s*=")
PARAGRAPH_OPEN_PATTERN = re.compile(r"<p(?:\s[^<>]*)?>")
PARAGRAPH_CLOSE = "</p>"
TOP_HEADING_OPEN_PATTERN = re.compile(r"<h1(?:\s[^<>]*)?>", re.IGNORECASE)
TOP_HEADING_CLOSE_PATTERN = re.compile(r"</h1>", re.IGNORECASE)
IMAGE_PATTERN = re.compile(r"<img(?=[\s>/])[^<>]*>")
ALT_PATTERN = re.compile(r"\salt\s*=\s*[\"']")


def _tag_pattern(tag: str) -> re.Pattern:
    """Opening-tag pattern for a tag name, with or without attributes."""
    pattern = _TAG_PATTERNS.get(tag)
    if pattern is None:
        pattern = re.compile(rf"<{tag}(?=[\s>/])")
        _TAG_PATTERNS[tag] = pattern
    return pattern


def count_tags(content: str, tag: str) -> int:
    """Count opening tags of the given name (`<strong>`, `<h2 id=...>`)."""
    return len(_tag_pattern(tag).findall(content))


def has_tag(content: str, tag: str) -> bool:
    return _tag_pattern(tag).search(content) is not None


def count_anchors(content: str) -> int:
    """Count anchor elements that carry an href."""
    return len(ANCHOR_PATTERN.findall(content))


def count_emphasis(content: str) -> int:
    return count_tags(content, EMPHASIS_TAG)


def paragraph_lengths(content: str) -> List[int]:
    """
    Character length of every paragraph block, tags included.

    Each opening tag pairs with the next closing tag; blocks never
    overlap. Runs in one pass over the document.
    """
    lengths = []
    position = 0
    for match in PARAGRAPH_OPEN_PATTERN.finditer(content):
        if match.start() < position:
            continue
        close = content.find(PARAGRAPH_CLOSE, match.end())
        # No closing tag after this one means none after later ones either
        if close == -1:
            break
        position = close + len(PARAGRAPH_CLOSE)
        lengths.append(position - match.start())
    return lengths


def top_heading_text(content: str) -> Optional[str]:
    """Text inside the first top-level heading, or None."""
    opening = TOP_HEADING_OPEN_PATTERN.search(content)
    if opening is None:
        return None
    closing = TOP_HEADING_CLOSE_PATTERN.search(content, opening.end())
    if closing is None:
        return None
    return content[opening.end():closing.start()]


def image_alt_counts(content: str) -> Tuple[int, int]:
    """
    Count images and images carrying an alt attribute.

    Returns:
        (image_count, alt_count)
    """
    images = IMAGE_PATTERN.findall(content)
    alts = sum(1 for tag in images if ALT_PATTERN.search(tag))
    return len(images), alts


def word_count(content: str) -> int:
    return len(content.split())


def contains_any(content: str, markers, case_sensitive: bool = True) -> bool:
    """True if any marker occurs as a substring of the content."""
    if not case_sensitive:
        content = content.lower()
        return any(marker.lower() in content for marker in markers)
    return any(marker in content for marker in markers)


# ============================================================================
# METADATA COERCION
# ============================================================================

def as_number(value: Any) -> Optional[float]:
    """
    Interpret a metadata value as a finite number.

    Booleans, NaN, infinities, values too large for a float and
    non-numeric values are treated as absent.
    """
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        return None
    try:
        number = float(value)
    except (OverflowError, ValueError, TypeError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def as_text(value: Any) -> Optional[str]:
    """Interpret a metadata value as text; non-strings are absent."""
    return value if isinstance(value, str) else None
