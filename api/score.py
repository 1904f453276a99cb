"""
API Endpoints for Citation Readiness Scoring

FastAPI handlers that:
1. Validate request content at the boundary (text only, size limits)
2. Run the CGS engine on one document or a batch
3. Return the score, breakdown, risk band, recommendations and
   prescriptive actions

The engine itself never sees invalid input; everything rejected here
is rejected with an HTTP error before scoring.
"""

import logging
import sys
from typing import List, Optional

from fastapi import APIRouter, FastAPI, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from src.scoring import (
    ContentMetadata,
    get_score_summary,
    plan_actions,
    score,
    score_batch,
)
from src.utils import get_settings

settings = get_settings()

# Configure logging to stdout
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stdout,
    force=True,
)
logger = logging.getLogger(__name__)

# Quiet down chatty loggers
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)

router = APIRouter(
    prefix="/api/cgs",
    tags=["cgs"],
)


# =============================================================================
# REQUEST / RESPONSE MODELS
# =============================================================================

class MetadataPayload(BaseModel):
    """Optional document metadata. Accepts snake_case or camelCase keys."""
    model_config = ConfigDict(populate_by_name=True)

    target_keyword: Optional[str] = Field(
        default=None,
        alias="targetKeyword",
        description="Keyword the document targets (checked against the H1)",
    )
    domain_authority: Optional[float] = Field(
        default=None,
        alias="domainAuthority",
        ge=0,
        le=100,
        description="Domain authority of the publishing site (0-100)",
    )
    meta_description: Optional[str] = Field(
        default=None,
        alias="metaDescription",
        description="Page meta description",
    )

    def to_metadata(self) -> ContentMetadata:
        return ContentMetadata(
            target_keyword=self.target_keyword,
            domain_authority=self.domain_authority,
            meta_description=self.meta_description,
        )


class ScoreRequest(BaseModel):
    """Request to score one document."""
    content: str = Field(description="Document markup (HTML)")
    metadata: Optional[MetadataPayload] = None


class BatchScoreRequest(BaseModel):
    """Request to score several documents."""
    documents: List[ScoreRequest]


# =============================================================================
# HELPERS
# =============================================================================

def _check_content_size(content: str):
    limit = settings.MAX_DOCUMENT_CHARS
    if len(content) > limit:
        logger.warning(f"Rejected document of {len(content)} chars (limit {limit})")
        raise HTTPException(
            status_code=413,
            detail=f"Document exceeds {limit} characters",
        )


def _metadata_of(request: ScoreRequest) -> ContentMetadata:
    return request.metadata.to_metadata() if request.metadata else ContentMetadata()


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.get("/health")
async def health():
    """Liveness check."""
    return {"status": "ok", "environment": settings.ENVIRONMENT}


# Scoring is CPU-bound; plain `def` handlers run in the threadpool
@router.post("/score")
def score_document(request: ScoreRequest):
    """
    Score a single document.

    Returns the CGS result plus the prescriptive actions available
    for this document.
    """
    _check_content_size(request.content)

    result = score(request.content, _metadata_of(request))
    actions = plan_actions(request.content, result.breakdown.by_category())

    logger.info(f"Scored document: CGS {result.composite_score} ({result.risk_band.level})")

    response = result.to_dict()
    response["actions"] = [action.to_dict() for action in actions]
    return response


@router.post("/score/batch")
def score_documents(request: BatchScoreRequest):
    """Score a batch of documents and summarize the results."""
    if not request.documents:
        raise HTTPException(status_code=422, detail="At least one document is required")

    if len(request.documents) > settings.MAX_BATCH_SIZE:
        raise HTTPException(
            status_code=413,
            detail=f"Batch exceeds {settings.MAX_BATCH_SIZE} documents",
        )

    for document in request.documents:
        _check_content_size(document.content)

    results = score_batch(
        (document.content, _metadata_of(document))
        for document in request.documents
    )
    summary = get_score_summary(results)

    return {
        "results": [result.to_dict() for result in results],
        "summary": summary.to_dict(),
    }


# Create FastAPI app
app = FastAPI(
    title="Citation Readiness Engine",
    description="Citation Guarantee Score (CGS) for AI answer-engine readiness",
    version="1.0.0",
)
app.include_router(router)
