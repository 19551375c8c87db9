"""Split a matched sentence into highlighted and plain spans."""

from __future__ import annotations

import re

from ._search import word_variants
from ._types import HighlightSpan


def _is_variant(part: str, variants: list[str]) -> bool:
    lowered = part.lower()
    dehyphenated = lowered.replace("-", "")
    for v in variants:
        v_lower = v.lower()
        if lowered == v_lower or dehyphenated == v_lower.replace("-", ""):
            return True
    return False


def highlight(sentence: str, word: str | None) -> list[HighlightSpan]:
    """Mark every occurrence of word's variants in sentence.

    Concatenating the span texts reproduces sentence exactly. An empty
    word leaves the sentence as a single plain span.
    """
    if not sentence:
        return []
    variants = word_variants(word)
    if not variants:
        return [HighlightSpan(sentence, False)]

    # Longest alternative first so "api-key" wins over "api".
    alternatives = sorted(variants, key=len, reverse=True)
    pattern = re.compile(
        "(" + "|".join(re.escape(v) for v in alternatives) + ")",
        re.IGNORECASE,
    )

    spans: list[HighlightSpan] = []
    for part in pattern.split(sentence):
        if part:
            spans.append(HighlightSpan(part, _is_variant(part, variants)))
    return spans
