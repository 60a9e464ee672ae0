"""
Knowledge base lifecycle tests: initial state, successful loads, failed
loads and reloads.
"""

from unittest.mock import AsyncMock, patch

import pytest

from faq_assistant.faq.knowledge_base import KnowledgeBase
from faq_assistant.faq.loader import FaqLoader, FaqLoadError
from faq_assistant.faq.matcher import NO_ANSWER_MESSAGE
from faq_assistant.faq.models import FaqEntry

ENTRIES = [
    FaqEntry(question="What are your fees?", answer="Flat fee consultations start at $150."),
    FaqEntry(question="Where is your office?", answer="67 Hugill Street, Sault Ste. Marie."),
]


@pytest.fixture
def mock_loader():
    mock = AsyncMock(spec=FaqLoader)
    mock.load.return_value = ENTRIES
    return mock


def test_starts_empty():
    kb = KnowledgeBase()
    assert kb.index.is_empty
    assert kb.loaded is False
    assert kb.load_error is None

def test_query_before_load_gets_fallback():
    result = KnowledgeBase().match("what are your fees")
    assert result.answer == NO_ANSWER_MESSAGE

@pytest.mark.asyncio
async def test_load_builds_index(mock_loader):
    kb = KnowledgeBase(loader=mock_loader)
    index = await kb.load("faq.json")

    mock_loader.load.assert_awaited_once_with("faq.json")
    assert len(index) == 2
    assert kb.index is index
    assert kb.loaded is True
    assert kb.source == "faq.json"
    assert kb.match("where is your office").entry_index == 1

@pytest.mark.asyncio
async def test_load_defaults_to_configured_source(mock_loader):
    kb = KnowledgeBase(loader=mock_loader)
    with patch("faq_assistant.faq.knowledge_base.settings") as mock_settings:
        mock_settings.faq_source = "https://example.com/faq.json"
        await kb.load()
    mock_loader.load.assert_awaited_once_with("https://example.com/faq.json")

@pytest.mark.asyncio
async def test_failed_load_leaves_corpus_empty(mock_loader):
    mock_loader.load.side_effect = FaqLoadError("FAQ fetch failed: ConnectError")
    kb = KnowledgeBase(loader=mock_loader)

    index = await kb.load("https://example.com/faq.json")

    assert index.is_empty
    assert kb.loaded is False
    assert kb.load_error == "FAQ fetch failed: ConnectError"
    assert kb.match("what are your fees").answer == NO_ANSWER_MESSAGE

@pytest.mark.asyncio
async def test_failed_reload_discards_previous_corpus(mock_loader):
    kb = KnowledgeBase(loader=mock_loader)
    await kb.load("faq.json")
    assert kb.loaded

    mock_loader.load.side_effect = FaqLoadError("boom")
    await kb.load("faq.json")

    assert kb.index.is_empty
    assert kb.load_error == "boom"

@pytest.mark.asyncio
async def test_successful_reload_clears_error(mock_loader):
    mock_loader.load.side_effect = [FaqLoadError("boom"), ENTRIES]
    kb = KnowledgeBase(loader=mock_loader)

    await kb.load("faq.json")
    assert kb.load_error == "boom"

    await kb.load("faq.json")
    assert kb.load_error is None
    assert len(kb.index) == 2

def test_load_entries_swaps_snapshot():
    kb = KnowledgeBase()
    old = kb.index
    new = kb.load_entries(ENTRIES, source="inline")
    assert new is not old
    assert kb.index is new
    assert kb.source == "inline"
    # the previous snapshot is untouched
    assert old.is_empty
