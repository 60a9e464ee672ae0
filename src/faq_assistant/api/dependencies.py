from typing import Annotated

from fastapi import Depends

from ..chat.assistant import ChatAssistant
from ..faq.knowledge_base import KnowledgeBase, knowledge_base
from ..sessions.store import SessionStore, session_store


def get_knowledge_base() -> KnowledgeBase:
    return knowledge_base


def get_session_store() -> SessionStore:
    return session_store


def get_assistant(
    kb: Annotated[KnowledgeBase, Depends(get_knowledge_base)],
    store: Annotated[SessionStore, Depends(get_session_store)],
) -> ChatAssistant:
    return ChatAssistant(kb, store)
