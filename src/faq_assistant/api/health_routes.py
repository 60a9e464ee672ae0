from typing import Annotated

from fastapi import APIRouter, Depends

from ..faq.knowledge_base import KnowledgeBase
from .dependencies import get_knowledge_base

router = APIRouter(tags=["health"])

@router.get("/health")
def health(kb: Annotated[KnowledgeBase, Depends(get_knowledge_base)]):
    return {"status": "ok", "faq_loaded": kb.loaded, "faq_entries": len(kb.index)}
