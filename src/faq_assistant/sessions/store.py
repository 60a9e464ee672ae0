"""
Session Store

In-memory transcript storage for chat widget sessions.

Design choices
--------------
- In-memory only (no persistence across process restarts).
- Per-session message lists with an optional maximum length.
- Thread-safe access using a re-entrant lock.
- Copy-on-read semantics (callers cannot mutate internal state).
- Global singleton `session_store` for typical application use, while still
  allowing custom instances to be created for tests.
"""

from __future__ import annotations

import uuid
from typing import Dict, List, Optional
from threading import RLock

from ..api.models import ChatMessage
from ..config import settings


class SessionStore:
    """
    In-memory store mapping session IDs to ordered lists of ChatMessage objects.
    """

    def __init__(self, max_messages_per_session: Optional[int] = None) -> None:
        """
        Initialize a new SessionStore.

        Parameters
        ----------
        max_messages_per_session : Optional[int]
            If provided, each session's message history is truncated to keep
            at most this many most recent messages. If None, history is
            unbounded.
        """
        self._store: Dict[str, List[ChatMessage]] = {}
        self._lock = RLock()
        self._max_messages_per_session = max_messages_per_session

    # ------------------------------------------------------------------
    # Core operations
    # ------------------------------------------------------------------

    def create(self, messages: Optional[List[ChatMessage]] = None) -> str:
        """
        Start a new session and return its generated ID.
        """
        session_id = uuid.uuid4().hex
        with self._lock:
            self._store[session_id] = []
            if messages:
                self.add_messages(session_id, messages)
        return session_id

    def get_history(self, session_id: str) -> List[ChatMessage]:
        """
        Return a shallow copy of the message history for `session_id`.

        Unknown sessions yield an empty list.
        """
        with self._lock:
            return list(self._store.get(session_id, []))

    def add_messages(self, session_id: str, new_messages: List[ChatMessage]) -> None:
        """
        Append new messages to the given session's history.

        If the session does not exist yet, it is created. If
        `max_messages_per_session` is set, the history is truncated to the most
        recent N messages after insertion.
        """
        if not new_messages:
            return

        with self._lock:
            history = self._store.setdefault(session_id, [])
            history.extend(new_messages)

            limit = self._max_messages_per_session
            if limit is not None and limit > 0:
                excess = len(history) - limit
                if excess > 0:
                    self._store[session_id] = history[excess:]

    def clear(self, session_id: str) -> bool:
        """
        Remove all history for `session_id`.

        Returns True if the session existed.
        """
        with self._lock:
            return self._store.pop(session_id, None) is not None

    # ------------------------------------------------------------------
    # Utility operations
    # ------------------------------------------------------------------

    def clear_all(self) -> None:
        """
        Remove all sessions. Intended for test setup/teardown.
        """
        with self._lock:
            self._store.clear()

    def has_session(self, session_id: str) -> bool:
        with self._lock:
            return session_id in self._store

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)


# Global singleton used by the application.
session_store = SessionStore(max_messages_per_session=settings.session_max_messages)
