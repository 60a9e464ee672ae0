import asyncio
import os
import sys

# Ensure src is in pythonpath
sys.path.append(os.path.join(os.path.dirname(__file__), "..", "src"))

from dotenv import load_dotenv
load_dotenv()

from faq_assistant.config import settings
from faq_assistant.faq.knowledge_base import KnowledgeBase

async def main(queries):
    kb = KnowledgeBase()

    print(f"Loading FAQ from {settings.faq_source}...")
    index = await kb.load(settings.faq_source)
    if kb.load_error:
        print(f"Load failed: {kb.load_error}")
    print(f"Indexed {len(index)} entries, {len(index.vocabulary)} terms.")

    for query in queries:
        result = kb.match(query)
        score = "n/a" if result.score is None else f"{result.score:.3f}"
        print(f"\nQ: {query}")
        print(f"   score={score} matched={result.matched}")
        print(f"A: {result.answer}")

if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("usage: query_faq.py QUESTION [QUESTION ...]")
        sys.exit(1)
    asyncio.run(main(sys.argv[1:]))
