"""Script split, sub-tokenizers and token clean/filter pipeline."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from ._script import THAI_RANGE, contains_thai, split_script_runs
from ._segmenter import make_segmenter
from ._stop_words import (
    ENGLISH_STOP_WORDS,
    THAI_STOP_WORDS,
    check_mode,
    stop_words_for,
)
from ._types import Token

if TYPE_CHECKING:
    from ._segmenter import ThaiSegmenter

_STRIP_RE = re.compile(f"[^\\w{THAI_RANGE}]")
_NUMERIC_RE = re.compile(r"\d+")


def clean_token(raw: str) -> Token:
    """Lowercase (non-Thai only) and strip non-word, non-Thai characters."""
    is_thai = contains_thai(raw)
    normalized = raw if is_thai else raw.lower()
    normalized = _STRIP_RE.sub("", normalized)
    return Token(surface=raw, normalized=normalized, is_thai=is_thai)


def is_countable(token: Token, stop_words: frozenset[str]) -> bool:
    """Reject short, purely numeric and stop-word tokens."""
    word = token.normalized
    if len(word) < 2:
        return False
    if _NUMERIC_RE.fullmatch(word):
        return False
    return word.lower() not in stop_words


class Tokenizer:
    __slots__ = ("_segmenter", "_english_stop_words", "_thai_stop_words")

    def __init__(
        self,
        segmenter: ThaiSegmenter | str = "auto",
        english_stop_words: frozenset[str] = ENGLISH_STOP_WORDS,
        thai_stop_words: frozenset[str] = THAI_STOP_WORDS,
    ) -> None:
        self._segmenter = make_segmenter(segmenter)
        self._english_stop_words = english_stop_words
        self._thai_stop_words = thai_stop_words

    @property
    def segmenter(self) -> ThaiSegmenter:
        return self._segmenter

    @property
    def english_stop_words(self) -> frozenset[str]:
        return self._english_stop_words

    @property
    def thai_stop_words(self) -> frozenset[str]:
        return self._thai_stop_words

    def stop_words(self, mode: str) -> frozenset[str]:
        return stop_words_for(
            mode, self._english_stop_words, self._thai_stop_words,
        )

    def extend_stop_words(self, words: frozenset[str], language: str) -> None:
        if language == "english":
            self._english_stop_words = self._english_stop_words | words
        elif language == "thai":
            self._thai_stop_words = self._thai_stop_words | words
        else:
            raise ValueError(
                f"language must be 'english' or 'thai', got {language!r}"
            )

    def split_words(self, text: str, mode: str) -> list[str]:
        """Split text into raw words: non-Thai runs first, then Thai runs.

        Non-Thai runs are split on whitespace when mode is english/any;
        Thai runs go through the segmenter when mode is thai/any.
        """
        check_mode(mode)
        if not text:
            return []

        thai_runs, other_runs = split_script_runs(text)
        words: list[str] = []
        if mode in ("english", "any"):
            for run in other_runs:
                words.extend(run.split())
        if mode in ("thai", "any"):
            for run in thai_runs:
                words.extend(self._segmenter.segment(run))
        return words

    def tokenize(self, text: str, mode: str) -> list[Token]:
        """Return the cleaned tokens that survive stop-word filtering."""
        stop_words = self.stop_words(mode)
        tokens: list[Token] = []
        for raw in self.split_words(text, mode):
            token = clean_token(raw)
            if is_countable(token, stop_words):
                tokens.append(token)
        return tokens
