"""
Pytest Configuration and Shared Fixtures

Provides sample documents and metadata for all test modules.
"""

import pytest
from typing import Any, Dict


# ============================================================================
# Sample Documents
# ============================================================================

PARAGRAPH = (
    "<p>Teams plan sprints with clear owners and measurable milestones "
    "so every release ships on schedule.</p>"
)

FULL_CREDIT_DOCUMENT = "\n".join([
    "<article>",
    "<header><h1>Project Planning Guide for Remote Teams</h1></header>",
    '<script type="application/ld+json">{"@type": "FAQPage"}</script>',
    '<div class="aeo-answer-box"><strong>Key Takeaway:</strong> Plan in short cycles.</div>',
    "<p>By <strong>Jane Doe</strong>, Head of Delivery. Updated March 2025.</p>",
    "<p>Recent research from <strong>Gartner</strong> and <strong>Forrester</strong> backs this up.</p>",
    '<p>Sources: <a href="https://hbr.org/1">HBR</a>, <a href="https://mit.edu/2">MIT</a>, '
    '<a href="https://pmi.org/3">PMI</a>, <a href="https://atlassian.com/4">Atlassian</a>, '
    '<a href="https://asana.com/5">Asana</a></p>',
    "<h2>What is project planning?</h2>",
    "<p><strong>Scope</strong>, <strong>schedule</strong> and <strong>budget</strong> are the core levers.</p>",
    "<h2>How to plan a sprint</h2>",
    "<ul><li><strong>Backlog</strong> grooming</li><li><strong>Capacity</strong> check</li></ul>",
    "<h2>Tips for remote teams</h2>",
    "<p><strong>Slack</strong> and <strong>Jira</strong> keep work visible.</p>",
    '<img src="/img/board.png" alt="Sprint board">',
] + [PARAGRAPH] * 90 + [
    "</article>",
])

FULL_CREDIT_METADATA: Dict[str, Any] = {
    "target_keyword": "project planning",
    "domain_authority": 80,
    "meta_description": (
        "A practical guide to project planning for remote teams: sprint cadence, "
        "scope control, tooling and the research behind each recommendation here."
    ),
}

# Trust 100, structural 50, technical 45, semantic 80
MIXED_DOCUMENT = "\n".join([
    "<section>",
    "<h1>Project Planning Guide</h1>",
    '<div class="aeo-answer-box">Plan in short cycles.</div>',
    "By <strong>Jane Doe</strong>. Updated March 2025.",
    "Backed by research.",
    '<a href="https://hbr.org/1">1</a> <a href="https://mit.edu/2">2</a> '
    '<a href="https://pmi.org/3">3</a> <a href="https://atlassian.com/4">4</a> '
    '<a href="https://asana.com/5">5</a>',
    "<ul><li>Backlog</li></ul>",
    "lorem " * 1100,
    "</section>",
])

MIXED_METADATA: Dict[str, Any] = {
    "target_keyword": "project planning",
    "domain_authority": 80,
    "meta_description": "x" * 150,
}


@pytest.fixture
def full_credit_document() -> str:
    """Document satisfying every check in every category."""
    return FULL_CREDIT_DOCUMENT


@pytest.fixture
def full_credit_metadata() -> Dict[str, Any]:
    """Metadata completing the full-credit document."""
    return dict(FULL_CREDIT_METADATA)


@pytest.fixture
def mixed_document() -> str:
    """Document strong on trust/semantic, weak on structure/technical."""
    return MIXED_DOCUMENT


@pytest.fixture
def mixed_metadata() -> Dict[str, Any]:
    return dict(MIXED_METADATA)
