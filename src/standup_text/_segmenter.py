"""Thai word segmentation strategies.

Thai has no spaces between words, so Thai runs are handed to a segmenter
chosen once at configuration time: PyThaiNLP when it is installed, or a
longest-match dictionary scan over an Aho-Corasick automaton.
"""

from __future__ import annotations

import importlib.util
import logging
import re
from typing import TYPE_CHECKING, Protocol

import ahocorasick

from ._script import THAI_RANGE, is_thai_char
from ._thai_words import MAX_WORD_LENGTH, THAI_WORDS

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

logger = logging.getLogger(__name__)

# Characters grouped into one heuristic word when nothing in the
# dictionary matches at a position.
_FALLBACK_GROUP = 5

_WORDLIKE_RE = re.compile(f"[\\w{THAI_RANGE}]")


class ThaiSegmenter(Protocol):
    def segment(self, text: str) -> list[str]: ...


class DictionarySegmenter:
    """Longest-match dictionary scan with heuristic grouping for unknown text."""

    __slots__ = ("_words", "_automaton", "_max_word_length")

    def __init__(
        self,
        words: Iterable[str] = THAI_WORDS,
        max_word_length: int = MAX_WORD_LENGTH,
    ) -> None:
        if max_word_length < 1:
            raise ValueError("max_word_length must be >= 1")
        self._max_word_length = max_word_length
        self._words: frozenset[str] = frozenset()
        self._automaton: ahocorasick.Automaton | None = None
        self.rebuild(words)

    @property
    def words(self) -> frozenset[str]:
        return self._words

    @property
    def max_word_length(self) -> int:
        return self._max_word_length

    def rebuild(self, words: Iterable[str]) -> None:
        """Replace the dictionary and rebuild the automaton."""
        self._words = frozenset(w for w in words if w)
        if not self._words:
            self._automaton = None
            return
        ac = ahocorasick.Automaton()
        for word in self._words:
            ac.add_word(word, len(word))
        ac.make_automaton()
        self._automaton = ac
        logger.debug("Built Thai dictionary automaton with %d words", len(self._words))

    def longest_matches(self, text: str) -> dict[int, int]:
        """Map each start position to its longest dictionary match length.

        Matches longer than max_word_length are ignored.
        """
        longest: dict[int, int] = {}
        if self._automaton is None:
            return longest
        for end_inclusive, length in self._automaton.iter(text):
            if length > self._max_word_length:
                continue
            start = end_inclusive - length + 1
            if length > longest.get(start, 0):
                longest[start] = length
        return longest

    def segment(self, text: str) -> list[str]:
        if not text:
            return []

        longest = self.longest_matches(text)
        tokens: list[str] = []
        n = len(text)
        i = 0

        while i < n:
            length = longest.get(i)
            if length:
                tokens.append(text[i:i + length])
                i += length
                continue

            if not is_thai_char(text[i]):
                i += 1
                continue

            # Out-of-vocabulary: group up to _FALLBACK_GROUP Thai characters
            j = i + 1
            while j < n and j < i + _FALLBACK_GROUP and is_thai_char(text[j]):
                j += 1
            if j - i > 1:
                tokens.append(text[i:j])
            i = j

        return tokens


class PyThaiNLPSegmenter:
    """Segmenter backed by ``pythainlp.tokenize.word_tokenize``."""

    __slots__ = ("_engine", "_word_tokenize")

    def __init__(self, engine: str = "newmm") -> None:
        from pythainlp.tokenize import word_tokenize

        self._engine = engine
        self._word_tokenize: Callable[..., list[str]] = word_tokenize

    @property
    def engine(self) -> str:
        return self._engine

    def segment(self, text: str) -> list[str]:
        if not text:
            return []
        pieces = self._word_tokenize(
            text, engine=self._engine, keep_whitespace=False,
        )
        return [
            p for p in pieces
            if len(p.strip()) > 1 and _WORDLIKE_RE.search(p)
        ]


def pythainlp_available() -> bool:
    return importlib.util.find_spec("pythainlp") is not None


def make_segmenter(
    kind: str | ThaiSegmenter = "auto",
    *,
    words: Iterable[str] = THAI_WORDS,
    engine: str = "newmm",
) -> ThaiSegmenter:
    """Resolve a segmenter choice to a concrete segmenter.

    Args:
        kind: "auto", "dictionary", "pythainlp", or a ready segmenter
            object, which is returned unchanged.
        words: Dictionary for the dictionary segmenter.
        engine: PyThaiNLP engine name.
    """
    if not isinstance(kind, str):
        return kind
    if kind == "dictionary":
        return DictionarySegmenter(words)
    if kind == "pythainlp":
        return PyThaiNLPSegmenter(engine)
    if kind == "auto":
        if pythainlp_available():
            return PyThaiNLPSegmenter(engine)
        logger.debug("pythainlp is not installed; using dictionary Thai segmentation")
        return DictionarySegmenter(words)
    raise ValueError(
        f"segmenter must be 'auto', 'dictionary' or 'pythainlp', got {kind!r}"
    )
