"""
FAQ Query Matcher

Scores a free-text query against an indexed FAQ corpus and picks the
canned answer to return.

Matching is a pure function of (query, FaqIndex): it never mutates the
snapshot and allocates its own query vector per call. Degenerate input
(blank query, empty corpus, no overlapping vocabulary) always resolves to
a fallback message instead of raising.
"""

from __future__ import annotations

from typing import List, Tuple

import numpy as np

from .index import FaqIndex, l2_normalize, term_frequencies
from .models import MatchResult
from .tokenizer import tokenize


# ---------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------

CONFIDENCE_THRESHOLD = 0.1

NO_ANSWER_MESSAGE = (
    "I'm not sure how to answer that. Please try rephrasing your question."
)

LOW_CONFIDENCE_MESSAGE = (
    "I'm sorry, I don't have a direct answer for that. You can try asking "
    "about our services, fees, or contact information."
)


# ---------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------

def query_vector(query: str, index: FaqIndex) -> np.ndarray:
    """
    Unit-length TF-IDF vector for `query` in the index's vocabulary space.
    """
    tf = term_frequencies(tokenize(query), index.vocabulary)
    return l2_normalize(tf * index.idf_vector())


def score_query(query: str, index: FaqIndex) -> np.ndarray:
    """
    Cosine similarity of `query` against every indexed entry.

    Rows of the matrix and the query vector are both unit length (or zero),
    so the dot product is the cosine.
    """
    if index.is_empty:
        return np.zeros(0, dtype=np.float64)
    return index.matrix @ query_vector(query, index)


def rank(query: str, index: FaqIndex, k: int = 5) -> List[Tuple[int, float]]:
    """
    Return up to `k` (entry_index, score) pairs, best first.

    Equal scores keep corpus order.
    """
    if not query or not query.strip() or index.is_empty:
        return []

    scores = score_query(query, index)
    order = np.argsort(-scores, kind="stable")[:k]
    return [(int(i), float(scores[i])) for i in order]


def match(query: str, index: FaqIndex) -> MatchResult:
    """
    Pick the best answer for `query`.

    Parameters
    ----------
    query : str
        Raw user text.

    index : FaqIndex
        Snapshot produced by `build_index`.

    Returns
    -------
    MatchResult
        The best entry's answer when its score exceeds
        CONFIDENCE_THRESHOLD, otherwise a fallback message. Ties go to the
        entry that comes first in the corpus.
    """
    if not query or not query.strip() or index.is_empty:
        return MatchResult(answer=NO_ANSWER_MESSAGE)

    scores = score_query(query, index)

    # strict ">" keeps the first-seen entry on ties
    best_index, best_score = 0, float(scores[0])
    for i in range(1, len(scores)):
        if scores[i] > best_score:
            best_index, best_score = i, float(scores[i])

    if best_score > CONFIDENCE_THRESHOLD:
        entry = index.entries[best_index]
        return MatchResult(
            answer=entry.answer,
            score=best_score,
            matched=True,
            entry_index=best_index,
            question=entry.question,
        )

    return MatchResult(answer=LOW_CONFIDENCE_MESSAGE, score=best_score)
