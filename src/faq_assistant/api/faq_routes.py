"""
FAQ Routes

Direct access to the FAQ matcher and index administration.

Reloading the corpus is the one privileged action. `POST /faq/reload`
needs the configured reload key, sent as the `x-admin-key` header or the
`key` query parameter; with no key configured reloading is switched off.
"""

import logging
import secrets
from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Header, status

from .models import (
    IndexStatsResponse,
    MatchRequest,
    SearchRequest,
    SearchResult,
)
from ..config import settings
from ..faq.knowledge_base import KnowledgeBase
from ..faq.matcher import rank
from ..faq.models import MatchResult
from .dependencies import get_knowledge_base

router = APIRouter(prefix="/faq", tags=["faq"])
logger = logging.getLogger("faq.api")


# ---------------------------------------------------------------------
# Reload key
# ---------------------------------------------------------------------

def _reload_key_matches(provided: str) -> bool:
    expected = settings.admin_api_key.get_secret_value()
    return secrets.compare_digest(provided.encode("utf-8"), expected.encode("utf-8"))


async def require_reload_key(
    x_admin_key: Optional[str] = Header(None, alias="x-admin-key"),
    key: Optional[str] = Query(None),
) -> None:
    """Reject the reload unless the caller presents the configured key."""
    if settings.admin_api_key is None or not settings.admin_api_key.get_secret_value():
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="FAQ reload is disabled (no reload key configured)",
        )

    provided = x_admin_key or key
    if not provided or not _reload_key_matches(provided):
        logger.warning("Rejected FAQ reload with missing or wrong key")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid or missing reload key",
        )


def _stats(kb: KnowledgeBase) -> IndexStatsResponse:
    index = kb.index
    return IndexStatsResponse(
        entries=len(index),
        vocabulary_size=len(index.vocabulary),
        loaded=kb.loaded,
        load_error=kb.load_error,
        source=kb.source,
    )


# ---------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------

@router.post(
    "/match",
    response_model=MatchResult,
    summary="Best FAQ answer for a query",
)
def match_query(
    req: MatchRequest,
    kb: Annotated[KnowledgeBase, Depends(get_knowledge_base)],
) -> MatchResult:
    return kb.match(req.query)


@router.post(
    "/search",
    response_model=List[SearchResult],
    summary="Ranked FAQ candidates for a query",
)
def search(
    req: SearchRequest,
    kb: Annotated[KnowledgeBase, Depends(get_knowledge_base)],
) -> List[SearchResult]:
    """
    Return the top-k FAQ entries by cosine similarity, best first.
    """
    index = kb.index
    results: List[SearchResult] = []
    for entry_index, score in rank(req.query, index, k=req.k):
        entry = index.entries[entry_index]
        results.append(
            SearchResult(question=entry.question, answer=entry.answer, score=score)
        )
    return results


@router.get(
    "/stats",
    response_model=IndexStatsResponse,
    summary="FAQ index statistics",
)
def get_stats(
    kb: Annotated[KnowledgeBase, Depends(get_knowledge_base)],
) -> IndexStatsResponse:
    return _stats(kb)


@router.post(
    "/reload",
    response_model=IndexStatsResponse,
    summary="Reload the FAQ from its configured source",
    dependencies=[Depends(require_reload_key)],
)
async def reload_faq(
    kb: Annotated[KnowledgeBase, Depends(get_knowledge_base)],
) -> IndexStatsResponse:
    await kb.load(settings.faq_source)
    return _stats(kb)
