"""
Text tokenizer shared by FAQ indexing and query matching.

Both sides of the matcher must normalize text identically, so this is the
only place tokenization rules live.
"""

from __future__ import annotations

import re
from typing import List

# Word characters are ASCII only (accented letters are stripped), while any
# Unicode whitespace still separates tokens.
_NON_WORD = re.compile(r"[^A-Za-z0-9_\s]")

MIN_TOKEN_LENGTH = 2


def tokenize(text: str) -> List[str]:
    """
    Lower-case `text`, strip punctuation and split on whitespace.

    Tokens shorter than two characters are dropped. Duplicates and order
    are kept, since term frequency is counted from the result.
    """
    cleaned = _NON_WORD.sub("", text.lower())
    return [t for t in cleaned.split() if len(t) >= MIN_TOKEN_LENGTH]
