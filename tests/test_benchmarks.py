"""Benchmark suite for tokenization, word clouds and sentence search.

Run:  pytest tests/test_benchmarks.py --benchmark-enable
Skip: pytest tests/ -m "not benchmark"
"""

from __future__ import annotations

import pytest

from standup_text import (
    DictionarySegmenter,
    ReportText,
    TextSource,
    compute_word_frequencies,
    find_sentences,
    highlight,
)

pytestmark = pytest.mark.benchmark

# ---------------------------------------------------------------------------
# Sample texts
# ---------------------------------------------------------------------------

ENGLISH_STANDUP = (
    "Completed the main dashboard layout. Integrated the reporting module "
    "API and fixed several critical bugs in the authentication flow. "
    "Tomorrow: implement word cloud visualization, improve filtering "
    "options and start work on export functionality. Blocked on API "
    "access for the staging environment."
)

THAI_STANDUP = (
    "ทีมวิศวกรรมพัฒนาระบบเสร็จแล้ว  ทดสอบประสิทธิภาพการเชื่อมต่อฐานข้อมูล  "
    "แก้ไขปัญหาการแจ้งเตือนผู้ใช้  พรุ่งนี้ติดตั้งเซิร์ฟเวอร์ใหม่"
)

MIXED_STANDUP = ENGLISH_STANDUP + " " + THAI_STANDUP

SAMPLE_TEXTS = {
    "english": ENGLISH_STANDUP,
    "thai": THAI_STANDUP,
    "mixed": MIXED_STANDUP,
    "mixed_x20": " ".join([MIXED_STANDUP] * 20),
}


# ---------------------------------------------------------------------------
# 1. Thai segmentation
# ---------------------------------------------------------------------------


def test_bench_dictionary_segment(benchmark):
    seg = DictionarySegmenter()
    text = THAI_STANDUP.replace(" ", "")
    benchmark(seg.segment, text)


def test_bench_dictionary_out_of_vocabulary(benchmark):
    """Worst case: nothing matches, every position falls back to grouping."""
    seg = DictionarySegmenter()
    benchmark(seg.segment, "ฃ" * 5000)


# ---------------------------------------------------------------------------
# 2. Word frequencies
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("text_key", list(SAMPLE_TEXTS.keys()))
def test_bench_word_frequencies(benchmark, tokenizer, text_key):
    text = SAMPLE_TEXTS[text_key]
    benchmark.extra_info["text_key"] = text_key
    benchmark(compute_word_frequencies, text, "any", tokenizer=tokenizer)


def test_bench_word_cloud(benchmark, analyzer):
    report = ReportText.from_fields(
        progress=ENGLISH_STANDUP, blockers=THAI_STANDUP, next_steps=MIXED_STANDUP,
    )
    benchmark(analyzer.word_cloud, report, "any")


# ---------------------------------------------------------------------------
# 3. Sentence search and highlight
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("word", ["API", "api-key", "ระบบ"])
def test_bench_find_sentences(benchmark, word):
    sources = [
        TextSource(SAMPLE_TEXTS["mixed_x20"], "Progress"),
        TextSource(ENGLISH_STANDUP, "Blockers"),
    ]
    benchmark(find_sentences, sources, word)


def test_bench_highlight(benchmark):
    benchmark(highlight, ENGLISH_STANDUP, "API")
