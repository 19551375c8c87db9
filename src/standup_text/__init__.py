"""standup_text: bilingual (English/Thai) word clouds and sentence search for standup reports."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._analyzer import TextAnalyzer
from ._errors import (
    InvalidModeError,
    LexiconChecksumError,
    LexiconError,
    LexiconVersionError,
    StandupTextError,
)
from ._frequency import (
    TOP_N,
    compute_word_frequencies,
    merge_section_frequencies,
    size_tier,
)
from ._highlight import highlight
from ._report import ReportText, normalize_section
from ._search import find_sentences, find_sentences_in_text, word_variants
from ._segmenter import (
    DictionarySegmenter,
    PyThaiNLPSegmenter,
    ThaiSegmenter,
    make_segmenter,
)
from ._sentence import split_sentences, strip_markdown
from ._stop_words import ENGLISH_STOP_WORDS, THAI_STOP_WORDS
from ._surface import SurfaceForms
from ._thai_words import MAX_WORD_LENGTH, THAI_WORDS
from ._tokenizer import Tokenizer
from ._types import (
    HighlightSpan,
    SentenceMatch,
    TextSource,
    Token,
    WordFrequencyEntry,
)

if TYPE_CHECKING:
    from pathlib import Path

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "load",
    "DictionarySegmenter",
    "ENGLISH_STOP_WORDS",
    "HighlightSpan",
    "InvalidModeError",
    "LexiconChecksumError",
    "LexiconError",
    "LexiconVersionError",
    "MAX_WORD_LENGTH",
    "PyThaiNLPSegmenter",
    "ReportText",
    "SentenceMatch",
    "StandupTextError",
    "SurfaceForms",
    "THAI_STOP_WORDS",
    "THAI_WORDS",
    "TOP_N",
    "TextAnalyzer",
    "TextSource",
    "ThaiSegmenter",
    "Token",
    "Tokenizer",
    "WordFrequencyEntry",
    "compute_word_frequencies",
    "find_sentences",
    "find_sentences_in_text",
    "highlight",
    "make_segmenter",
    "merge_section_frequencies",
    "normalize_section",
    "size_tier",
    "split_sentences",
    "strip_markdown",
    "word_variants",
]


def load(
    data_dir: Path | str | None = None,
    *,
    segmenter: ThaiSegmenter | str = "auto",
    pythainlp_engine: str = "newmm",
) -> TextAnalyzer:
    """Return a ready-to-use TextAnalyzer.

    Args:
        data_dir: Optional lexicon extension directory. Its Thai words and
            stop words are added to the built-in ones.
        segmenter: "auto", "dictionary", "pythainlp" or a segmenter object.
        pythainlp_engine: Engine passed to PyThaiNLP's word_tokenize.
    """
    if data_dir is None:
        return TextAnalyzer(segmenter=segmenter, pythainlp_engine=pythainlp_engine)

    from ._loader import load_lexicon

    lexicon = load_lexicon(data_dir)
    return TextAnalyzer(
        segmenter=segmenter,
        thai_words=THAI_WORDS | lexicon["thai_words"],
        english_stop_words=ENGLISH_STOP_WORDS | lexicon["english_stop_words"],
        thai_stop_words=THAI_STOP_WORDS | lexicon["thai_stop_words"],
        pythainlp_engine=pythainlp_engine,
    )
