"""
txt.py
-------------------
Text metrics for article bodies.

Intended to be used by the Document dataclass for word count and
reading time shown on listing pages.

Chinese and Japanese are written without spaces between words, so each
Han or kana character counts as one word and is read at its own rate.
Everything else is counted by textstat.
"""

from __future__ import annotations

# --- Standard library imports ---
import re
from typing import Tuple

# --- Third-party library imports ---
from textstat import lexicon_count  # type: ignore

# Average adult silent reading speed
WORDS_PER_MINUTE = 260
# Same, for Chinese and Japanese text in characters
CJK_CHARS_PER_MINUTE = 300

# Han ideographs (incl. extensions and compatibility block), kana
CJK_CHAR = re.compile(
    "[\u3040-\u30ff\u3400-\u4dbf\u4e00-\u9fff\uf900-\ufaff\U00020000-\U0003134f]"
)


# ----- Word-count & ~reading time -----
def compute_metrics(text: str) -> Tuple[int, float]:
    """
    input: text, markdown body of the article
    output: (word_count, reading_time_min)
        - word_count: int, spaced words plus Han/kana characters
        - reading_time_min: float, minutes to read
    """
    if not text.strip():
        return (0, 0.0)
    cjk = len(CJK_CHAR.findall(text))
    rest = CJK_CHAR.sub(" ", text)
    rest = " ".join(line.strip() for line in rest.splitlines())
    words: int = lexicon_count(rest, removepunct=True) if rest.strip() else 0
    # texstat.reading_time gives inflated result.
    # Calculate manually with 260 WPM
    rt: float = words / WORDS_PER_MINUTE + cjk / CJK_CHARS_PER_MINUTE
    return (words + cjk, rt)
