"""
Chat Assistant

Conversation layer on top of the FAQ knowledge base. It produces the
opening transcript for a new chat window and answers each user message
with the best-matching FAQ answer, recording both sides of the exchange.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from ..api.models import ChatMessage
from ..config import settings
from ..faq.knowledge_base import KnowledgeBase
from ..faq.models import MatchResult
from ..sessions.store import SessionStore

logger = logging.getLogger("faq.chat")

LOAD_FAILURE_MESSAGE = (
    "Sorry, I'm having trouble accessing my knowledge base right now."
)


class ChatAssistant:
    """
    Answers chat messages from the FAQ knowledge base.

    Parameters
    ----------
    knowledge_base : KnowledgeBase
        Source of the current FAQ snapshot.

    store : SessionStore
        Transcript storage.

    greeting : Optional[str]
        Opening message. Defaults to settings.greeting.
    """

    def __init__(
        self,
        knowledge_base: KnowledgeBase,
        store: SessionStore,
        greeting: Optional[str] = None,
    ) -> None:
        self.knowledge_base = knowledge_base
        self.store = store
        self.greeting = greeting or settings.greeting

    def opening_messages(self) -> List[ChatMessage]:
        messages = [ChatMessage(role="assistant", content=self.greeting)]
        if self.knowledge_base.load_error:
            messages.append(ChatMessage(role="assistant", content=LOAD_FAILURE_MESSAGE))
        return messages

    def open_session(self) -> Tuple[str, List[ChatMessage]]:
        """
        Start a session seeded with the opening messages.

        Returns
        -------
        Tuple[str, List[ChatMessage]]
            New session ID and its transcript.
        """
        messages = self.opening_messages()
        session_id = self.store.create(messages)
        return session_id, messages

    def submit_query(self, text: str, session_id: Optional[str] = None) -> MatchResult:
        """
        Answer one user message.

        Blank input gets the fallback answer and is not recorded in the
        transcript. The returned answer is never empty.
        """
        text = (text or "").strip()
        result = self.knowledge_base.match(text)

        if text and session_id:
            self.store.add_messages(
                session_id,
                [
                    ChatMessage(role="user", content=text),
                    ChatMessage(role="assistant", content=result.answer),
                ],
            )

        logger.debug(
            "Query answered: matched=%s score=%s entry=%s",
            result.matched,
            result.score,
            result.entry_index,
        )
        return result
