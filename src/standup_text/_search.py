"""Sentence search with orthographic variant matching."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from ._script import THAI_RANGE, contains_thai
from ._sentence import split_sentences, strip_markdown
from ._types import SentenceMatch, TextSource

if TYPE_CHECKING:
    from collections.abc import Iterable

_NON_ALNUM_RE = re.compile(f"[^a-zA-Z0-9{THAI_RANGE}]")


def word_variants(word: str | None) -> list[str]:
    """Orthographic variants of a search word, deduplicated, in order.

    The word itself, lower and upper case, special characters removed,
    special characters replaced with hyphens, and hyphens removed.
    """
    if not word:
        return []
    candidates = [
        word,
        word.lower(),
        word.upper(),
        _NON_ALNUM_RE.sub("", word),
        _NON_ALNUM_RE.sub("-", word),
        word.replace("-", ""),
    ]
    variants: list[str] = []
    for v in candidates:
        if v and v not in variants:
            variants.append(v)
    return variants


def _boundary_pattern(variant: str) -> re.Pattern[str]:
    # Hyphens inside the variant are optional: "wo-rd" also matches "word".
    body = "-?".join(re.escape(part) for part in variant.split("-"))
    return re.compile(rf"\b{body}\b", re.IGNORECASE)


class WordMatcher:
    """Decides whether a sentence contains a word or one of its variants."""

    __slots__ = ("_word_lower", "_patterns", "_thai_variants")

    def __init__(self, word: str) -> None:
        self._word_lower = word.lower()
        self._patterns: list[re.Pattern[str]] = []
        self._thai_variants: list[str] = []
        for v in word_variants(word):
            if contains_thai(v):
                self._thai_variants.append(v.lower())
            elif v.strip("-"):
                self._patterns.append(_boundary_pattern(v))

    def matches(self, sentence: str) -> bool:
        sentence_lower = sentence.lower()
        if self._word_lower and self._word_lower in sentence_lower:
            return True
        for pattern in self._patterns:
            if pattern.search(sentence):
                return True
        for v in self._thai_variants:
            if v in sentence_lower:
                return True
        return False


def sentence_matches(sentence: str, word: str | None) -> bool:
    """True if sentence contains word under variant matching."""
    if not word:
        return False
    return WordMatcher(word).matches(sentence)


def find_sentences(
    sources: Iterable[TextSource | tuple[str | None, str]],
    word: str | None,
) -> list[SentenceMatch]:
    """Find sentences containing word across labelled text sources.

    Sources are scanned in the order given and sentences in document
    order. Markdown emphasis and rules are removed before splitting.
    Sources with empty text are skipped; an empty word finds nothing.
    """
    if not word:
        return []

    matcher = WordMatcher(word)
    found: list[SentenceMatch] = []
    for text, label in sources:
        cleaned = strip_markdown(text)
        if not cleaned:
            continue
        for sentence in split_sentences(cleaned):
            if matcher.matches(sentence):
                found.append(SentenceMatch(sentence=sentence, source=label))
    return found


def find_sentences_in_text(text: str | None, word: str | None) -> list[str]:
    """Single-source form of find_sentences returning bare sentences."""
    return [
        m.sentence for m in find_sentences([TextSource(text, "")], word)
    ]
