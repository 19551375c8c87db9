"""TextAnalyzer: configured entry point for word clouds and sentence search."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ._frequency import TOP_N, compute_word_frequencies, merge_section_frequencies
from ._highlight import highlight
from ._search import find_sentences
from ._segmenter import DictionarySegmenter, make_segmenter
from ._stop_words import ENGLISH_STOP_WORDS, THAI_STOP_WORDS
from ._surface import SurfaceForms
from ._thai_words import THAI_WORDS
from ._tokenizer import Tokenizer

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ._report import ReportText
    from ._segmenter import ThaiSegmenter
    from ._types import HighlightSpan, SentenceMatch, TextSource, WordFrequencyEntry

logger = logging.getLogger(__name__)


class TextAnalyzer:
    """Holds the lexicon and Thai segmenter and exposes the public API."""

    __slots__ = ("_tokenizer", "_thai_words")

    def __init__(
        self,
        *,
        segmenter: ThaiSegmenter | str = "auto",
        thai_words: Iterable[str] = THAI_WORDS,
        english_stop_words: Iterable[str] = ENGLISH_STOP_WORDS,
        thai_stop_words: Iterable[str] = THAI_STOP_WORDS,
        pythainlp_engine: str = "newmm",
    ) -> None:
        self._thai_words = frozenset(thai_words)
        self._tokenizer = Tokenizer(
            make_segmenter(
                segmenter, words=self._thai_words, engine=pythainlp_engine,
            ),
            english_stop_words=frozenset(english_stop_words),
            thai_stop_words=frozenset(thai_stop_words),
        )

    @property
    def tokenizer(self) -> Tokenizer:
        return self._tokenizer

    @property
    def segmenter(self) -> ThaiSegmenter:
        return self._tokenizer.segmenter

    @property
    def thai_words(self) -> frozenset[str]:
        return self._thai_words

    # -- Word cloud --

    def word_frequencies(
        self, text: str | None, mode: str = "any", *, limit: int = TOP_N
    ) -> list[WordFrequencyEntry]:
        """Top words of a single text, most frequent first."""
        return compute_word_frequencies(
            text, mode, tokenizer=self._tokenizer, limit=limit,
        )

    def word_cloud(
        self, report: ReportText, mode: str = "any", *, limit: int = TOP_N
    ) -> list[WordFrequencyEntry]:
        """Merged, source-tagged word cloud for a report."""
        return merge_section_frequencies(
            report.section_texts(), mode, tokenizer=self._tokenizer, limit=limit,
        )

    # -- Sentence search --

    def find_sentences(
        self, sources: Iterable[TextSource], word: str | None
    ) -> list[SentenceMatch]:
        return find_sentences(sources, word)

    def surface_forms(self, report: ReportText) -> SurfaceForms:
        return SurfaceForms.from_texts(report.section_texts().values())

    def references(
        self, report: ReportText, word: str | None
    ) -> list[SentenceMatch]:
        """Sentences of report containing a word clicked in its cloud.

        The normalized cloud word is first mapped back to the form typed
        in the report.
        """
        if not word:
            return []
        typed = self.surface_forms(report).resolve(word)
        return find_sentences(report.text_sources(), typed)

    def highlight(self, sentence: str, word: str | None) -> list[HighlightSpan]:
        return highlight(sentence, word)

    # -- Lexicon extension --

    def add_thai_words(self, words: Iterable[str]) -> int:
        """Add words to the Thai dictionary and rebuild the automaton.

        Returns the number of words that were new. Has no effect on
        segmentation unless the dictionary segmenter is in use.

        Raises:
            ValueError: If any word is empty or whitespace.
        """
        new = _validated(words)
        added = new - self._thai_words
        self._thai_words = self._thai_words | new

        segmenter = self._tokenizer.segmenter
        if isinstance(segmenter, DictionarySegmenter):
            segmenter.rebuild(self._thai_words)
        else:
            logger.debug(
                "Thai dictionary extended but %s does not use it",
                type(segmenter).__name__,
            )
        return len(added)

    def add_stop_words(self, words: Iterable[str], language: str) -> None:
        """Extend the English or Thai stop-word set.

        Raises:
            ValueError: If language is unknown or any word is empty.
        """
        new = frozenset(w.lower() for w in _validated(words))
        self._tokenizer.extend_stop_words(new, language)


def _validated(words: Iterable[str]) -> frozenset[str]:
    result: set[str] = set()
    for word in words:
        word = word.strip()
        if not word:
            raise ValueError("word must not be empty")
        result.add(word)
    return frozenset(result)
