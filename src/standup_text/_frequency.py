"""Word-frequency aggregation for word clouds."""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

from ._tokenizer import Tokenizer
from ._types import WordFrequencyEntry

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ._types import Source

TOP_N: int = 100

# Section order is the first-seen order used when merging sections.
SECTION_SOURCES: tuple[Source, ...] = ("progress", "blockers", "nextSteps")

# Highest priority first: blockers are the most visually salient.
_SOURCE_PRIORITY: tuple[Source, ...] = ("blockers", "nextSteps", "progress")


@lru_cache(maxsize=1)
def default_tokenizer() -> Tokenizer:
    return Tokenizer()


def count_tokens(
    text: str | None,
    mode: str,
    *,
    tokenizer: Tokenizer | None = None,
) -> dict[str, int]:
    """Count surviving tokens by normalized form, in first-seen order."""
    tokenizer = tokenizer or default_tokenizer()
    counts: dict[str, int] = {}
    for token in tokenizer.tokenize(text or "", mode):
        counts[token.normalized] = counts.get(token.normalized, 0) + 1
    return counts


def rank(
    entries: list[WordFrequencyEntry], limit: int = TOP_N
) -> list[WordFrequencyEntry]:
    """Stable sort by descending value, then keep the first ``limit``."""
    return sorted(entries, key=lambda e: -e.value)[:limit]


def compute_word_frequencies(
    text: str | None,
    mode: str = "any",
    *,
    tokenizer: Tokenizer | None = None,
    limit: int = TOP_N,
) -> list[WordFrequencyEntry]:
    """Tokenize text and return the top words by count.

    Empty or None text yields an empty list. Ties keep first-seen order.
    """
    counts = count_tokens(text, mode, tokenizer=tokenizer)
    return rank(
        [WordFrequencyEntry(text=w, value=c) for w, c in counts.items()],
        limit,
    )


def _resolve_source(counts: Mapping[str, int]) -> Source:
    for source in _SOURCE_PRIORITY:
        if counts.get(source, 0) > 0:
            return source
    return "default"


def merge_section_frequencies(
    sections: Mapping[str, str | None],
    mode: str = "any",
    *,
    tokenizer: Tokenizer | None = None,
    limit: int = TOP_N,
) -> list[WordFrequencyEntry]:
    """Merge per-section word frequencies into one tagged word cloud.

    Args:
        sections: Section source ("progress", "blockers", "nextSteps")
            to section text. Other keys are counted but tagged "default".
        mode: Stop-word filter mode.

    Each entry's value is the sum over sections; its source is the
    highest-priority section it appears in (blockers > nextSteps > progress).
    """
    ordered = [s for s in SECTION_SOURCES if s in sections]
    ordered += [s for s in sections if s not in SECTION_SOURCES]

    per_word: dict[str, dict[str, int]] = {}
    for section in ordered:
        for entry in compute_word_frequencies(
            sections[section], mode, tokenizer=tokenizer, limit=limit,
        ):
            per_word.setdefault(entry.text, {})[section] = entry.value

    merged = [
        WordFrequencyEntry(
            text=word,
            value=sum(counts.values()),
            source=_resolve_source(counts),
        )
        for word, counts in per_word.items()
    ]
    return rank(merged, limit)


def size_tier(value: int, max_value: int) -> int:
    """Map a count to a display tier 0 (smallest) to 3 (largest)."""
    if max_value <= 0:
        return 0
    ratio = value / max_value
    if ratio > 0.75:
        return 3
    if ratio > 0.5:
        return 2
    if ratio > 0.25:
        return 1
    return 0
