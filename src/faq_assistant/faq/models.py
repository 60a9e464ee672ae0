"""
FAQ Data Models

This module defines the canonical records flowing through the FAQ matcher:
the question/answer pairs supplied by the FAQ data source, and the result
of matching one user query against them.
"""

from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


class FaqEntry(BaseModel):
    """
    A single question/answer pair.

    Entries are read-only once loaded; the matcher never creates or
    removes them. Extra keys in a source record (ids, categories) are
    ignored, and a question with no usable words is indexed as a zero row.
    """

    question: str = Field(
        ...,
        description="Question text used to build the TF-IDF index.",
    )

    answer: str = Field(
        ...,
        min_length=1,
        description="Canned answer returned when the question matches.",
    )

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
    )


class MatchResult(BaseModel):
    """
    Outcome of matching one query against the indexed corpus.

    `score` is None when no scoring was attempted (blank query or empty
    corpus). `matched` is True only when an entry cleared the confidence
    threshold, in which case `entry_index` and `question` identify it.
    """

    answer: str = Field(..., min_length=1)
    score: Optional[float] = None
    matched: bool = False
    entry_index: Optional[int] = Field(default=None, ge=0)
    question: Optional[str] = None

    model_config = ConfigDict(extra="forbid", frozen=True)
