"""
API Models for the FAQ Assistant

This module defines all Pydantic models used for request/response validation
across the chat, FAQ matching and index administration endpoints.

Design Goals
------------
- Strong typing
- Safe defaults (no shared mutable state)
- Unknown request fields rejected
"""

from __future__ import annotations

from typing import List, Optional, Literal
from pydantic import BaseModel, Field, ConfigDict


# ---------------------------------------------------------------------
# Shared
# ---------------------------------------------------------------------

class OperationResult(BaseModel):
    """
    Standardized mutation operation result.
    """
    status: Literal["deleted", "ok"]

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------
# Chat Models
# ---------------------------------------------------------------------

class ChatMessage(BaseModel):
    """
    Single message in a chat transcript.
    """
    role: Literal["user", "assistant"]
    content: str = Field(..., min_length=1)

    model_config = ConfigDict(extra="forbid")


class ChatRequest(BaseModel):
    """
    One user message sent from the chat widget.
    """
    message: str
    session_id: Optional[str] = None

    model_config = ConfigDict(extra="forbid")


class ChatResponse(BaseModel):
    """
    Assistant reply to a single user message.
    """
    answer: str = Field(..., min_length=1)
    score: Optional[float] = None
    matched: bool
    session_id: Optional[str] = None

    model_config = ConfigDict(extra="forbid")


class SessionResponse(BaseModel):
    """
    Chat session transcript.
    """
    session_id: str
    messages: List[ChatMessage] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------
# FAQ Models
# ---------------------------------------------------------------------

class MatchRequest(BaseModel):
    """
    Free-text query to match against the FAQ.
    """
    query: str

    model_config = ConfigDict(extra="forbid")


class SearchRequest(BaseModel):
    """
    Ranked FAQ lookup.
    """
    query: str = Field(..., min_length=1, max_length=2000)
    k: int = Field(default=5, ge=1, le=100)

    model_config = ConfigDict(extra="forbid")


class SearchResult(BaseModel):
    """
    Individual ranked FAQ candidate.
    """
    question: str
    answer: str = Field(..., min_length=1)
    score: float

    model_config = ConfigDict(extra="forbid")


class IndexStatsResponse(BaseModel):
    """
    Current state of the FAQ index.
    """
    entries: int = Field(..., ge=0)
    vocabulary_size: int = Field(..., ge=0)
    loaded: bool
    load_error: Optional[str] = None
    source: Optional[str] = None

    model_config = ConfigDict(extra="forbid")
