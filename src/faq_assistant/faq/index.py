"""
TF-IDF FAQ Index

This module turns a list of FAQ entries into an immutable TF-IDF snapshot
that the query matcher scores against.

Key Properties
--------------
- Vocabulary order is first-seen order over the corpus questions; it fixes
  the column index of every term everywhere downstream
- Smoothed IDF: ln((N + 1) / (df + 1)) + 1, always > 0
- Every document row is L2-normalized, except all-zero rows which stay zero
- The snapshot is never mutated after construction (read-only matrix,
  read-only IDF mapping, tuples for entries and vocabulary)
"""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Sequence, Tuple

import numpy as np

from .models import FaqEntry
from .tokenizer import tokenize


# ---------------------------------------------------------------------
# Snapshot
# ---------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class FaqIndex:
    """
    Indexed FAQ corpus.

    Attributes
    ----------
    entries : Tuple[FaqEntry, ...]
        The corpus, in source order. Row i of `matrix` belongs to entry i.

    vocabulary : Tuple[str, ...]
        Distinct terms in first-seen order. Column j of `matrix` is term j.

    idf : Mapping[str, float]
        Inverse document frequency per vocabulary term.

    matrix : np.ndarray
        float64 array of shape (len(entries), len(vocabulary)).
    """

    entries: Tuple[FaqEntry, ...]
    vocabulary: Tuple[str, ...]
    idf: Mapping[str, float]
    matrix: np.ndarray

    @classmethod
    def empty(cls) -> "FaqIndex":
        """Snapshot of a corpus with no entries."""
        return build_index([])

    @property
    def is_empty(self) -> bool:
        return not self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def idf_vector(self) -> np.ndarray:
        """IDF weights aligned to vocabulary order."""
        return np.array([self.idf[t] for t in self.vocabulary], dtype=np.float64)


# ---------------------------------------------------------------------
# Vector helpers
# ---------------------------------------------------------------------

def term_frequencies(tokens: Sequence[str], vocabulary: Sequence[str]) -> np.ndarray:
    """
    Project raw token counts onto `vocabulary`.

    Tokens outside the vocabulary are dropped.
    """
    counts = Counter(tokens)
    return np.array([counts.get(t, 0) for t in vocabulary], dtype=np.float64)


def l2_normalize(vec: np.ndarray) -> np.ndarray:
    """Scale to unit length; a zero vector is returned unchanged."""
    norm = float(np.linalg.norm(vec))
    if norm == 0.0:
        return np.zeros_like(vec)
    return vec / norm


# ---------------------------------------------------------------------
# Index construction
# ---------------------------------------------------------------------

def _build_vocabulary(docs: List[List[str]]) -> Tuple[str, ...]:
    seen: Dict[str, None] = {}
    for tokens in docs:
        for t in tokens:
            if t not in seen:
                seen[t] = None
    return tuple(seen)


def _compute_idf(docs: List[List[str]], vocabulary: Tuple[str, ...]) -> Dict[str, float]:
    n_docs = len(docs)
    doc_sets = [set(tokens) for tokens in docs]

    idf: Dict[str, float] = {}
    for term in vocabulary:
        df = sum(1 for s in doc_sets if term in s)
        idf[term] = math.log((n_docs + 1) / (df + 1)) + 1
    return idf


def build_index(entries: Sequence[FaqEntry]) -> FaqIndex:
    """
    Build a TF-IDF snapshot from FAQ entries.

    Only the questions are indexed. An empty `entries` sequence yields an
    empty vocabulary, empty IDF table and a (0, 0) matrix.

    Parameters
    ----------
    entries : Sequence[FaqEntry]
        Corpus in source order.

    Returns
    -------
    FaqIndex
        Immutable snapshot ready for matching.
    """
    entries = tuple(entries)
    docs = [tokenize(e.question) for e in entries]

    vocabulary = _build_vocabulary(docs)
    idf = _compute_idf(docs, vocabulary)
    idf_vec = np.array([idf[t] for t in vocabulary], dtype=np.float64)

    matrix = np.zeros((len(entries), len(vocabulary)), dtype=np.float64)
    for i, tokens in enumerate(docs):
        matrix[i] = l2_normalize(term_frequencies(tokens, vocabulary) * idf_vec)

    matrix.setflags(write=False)

    return FaqIndex(
        entries=entries,
        vocabulary=vocabulary,
        idf=MappingProxyType(idf),
        matrix=matrix,
    )
