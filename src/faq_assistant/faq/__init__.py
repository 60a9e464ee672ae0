"""
FAQ Matching Package

TF-IDF indexing of FAQ questions and cosine-similarity matching of user
queries against them.
"""

from .tokenizer import tokenize
from .models import FaqEntry, MatchResult
from .index import FaqIndex, build_index
from .matcher import (
    CONFIDENCE_THRESHOLD,
    LOW_CONFIDENCE_MESSAGE,
    NO_ANSWER_MESSAGE,
    match,
    rank,
    score_query,
)
from .loader import FaqLoader, FaqLoadError
from .knowledge_base import KnowledgeBase, knowledge_base

__all__ = [
    "tokenize",
    "FaqEntry",
    "MatchResult",
    "FaqIndex",
    "build_index",
    "CONFIDENCE_THRESHOLD",
    "LOW_CONFIDENCE_MESSAGE",
    "NO_ANSWER_MESSAGE",
    "match",
    "rank",
    "score_query",
    "FaqLoader",
    "FaqLoadError",
    "KnowledgeBase",
    "knowledge_base",
]
