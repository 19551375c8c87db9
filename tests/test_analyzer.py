"""Tests for the TextAnalyzer entry point."""

import pytest

import standup_text
from standup_text import (
    DictionarySegmenter,
    HighlightSpan,
    ReportText,
    SentenceMatch,
    TextAnalyzer,
    TextSource,
    WordFrequencyEntry,
)


class WholeRunSegmenter:
    """Treats every Thai run as a single word."""

    def segment(self, text):
        return [text]


@pytest.fixture
def report():
    return ReportText.from_fields(
        content="ignored because sections exist",
        progress=["Rotated the API-Key today.", "Updated docs"],
        blockers="Waiting on api-key approval",
    )


def test_load_default():
    analyzer = standup_text.load(segmenter="dictionary")
    assert isinstance(analyzer, TextAnalyzer)
    assert isinstance(analyzer.segmenter, DictionarySegmenter)


def test_word_frequencies(analyzer):
    result = analyzer.word_frequencies("deploy deploy ระบบ", "any")
    assert result == [
        WordFrequencyEntry("deploy", 2),
        WordFrequencyEntry("ระบบ", 1),
    ]


def test_word_cloud_tags_sources(analyzer, report):
    cloud = analyzer.word_cloud(report, "english")
    assert cloud[0] == WordFrequencyEntry("apikey", 2, "blockers")
    by_text = {e.text: e for e in cloud}
    assert by_text["docs"].source == "progress"
    assert "ignored" not in by_text


def test_word_cloud_content_fallback(analyzer):
    report = ReportText.from_fields(content="## Plan\n- ship the export")
    cloud = analyzer.word_cloud(report, "english")
    assert [(e.text, e.source) for e in cloud] == [
        ("plan", "default"), ("ship", "default"), ("export", "default"),
    ]


def test_references_resolve_surface_form(analyzer, report):
    assert analyzer.find_sentences(report.text_sources(), "apikey") == []
    assert analyzer.references(report, "apikey") == [
        SentenceMatch("Rotated the API-Key today", "Progress"),
        SentenceMatch("Waiting on api-key approval", "Blockers"),
    ]


def test_references_empty_word(analyzer, report):
    assert analyzer.references(report, "") == []


def test_find_sentences_blockers_example(analyzer):
    sources = [
        TextSource("**Blocked** on API access", "Blockers"),
        TextSource("No issues", "Progress"),
    ]
    assert analyzer.find_sentences(sources, "API") == [
        SentenceMatch("Blocked on API access", "Blockers"),
    ]


def test_highlight(analyzer):
    assert analyzer.highlight("ship it", "ship") == [
        HighlightSpan("ship", True),
        HighlightSpan(" it", False),
    ]


def test_add_thai_words(analyzer):
    before = [e.text for e in analyzer.word_frequencies("บริการลูกค้า", "thai")]
    assert "บริการ" not in before

    assert analyzer.add_thai_words(["บริการ"]) == 1
    assert analyzer.add_thai_words(["บริการ"]) == 0
    assert "บริการ" in analyzer.thai_words

    after = [e.text for e in analyzer.word_frequencies("บริการลูกค้า", "thai")]
    assert after == ["บริการ", "ลูกค้า"]


def test_add_thai_words_custom_segmenter():
    analyzer = TextAnalyzer(segmenter=WholeRunSegmenter())
    assert analyzer.add_thai_words(["บริการ"]) == 1
    assert analyzer.word_frequencies("บริการลูกค้า", "thai") == [
        WordFrequencyEntry("บริการลูกค้า", 1),
    ]


def test_add_thai_words_rejects_empty(analyzer):
    with pytest.raises(ValueError, match="must not be empty"):
        analyzer.add_thai_words(["ระบบ", "  "])


def test_add_stop_words(analyzer):
    analyzer.add_stop_words(["Deploy"], "english")
    result = analyzer.word_frequencies("deploy service", "english")
    assert [e.text for e in result] == ["service"]

    analyzer.add_stop_words(["ระบบ"], "thai")
    assert analyzer.word_frequencies("ระบบใหม่", "thai") == [
        WordFrequencyEntry("ใหม่", 1),
    ]


def test_add_stop_words_unknown_language(analyzer):
    with pytest.raises(ValueError, match="language"):
        analyzer.add_stop_words(["x"], "klingon")


def test_references_for_every_cloud_word(analyzer):
    report = ReportText.from_fields(
        progress="Set up end-to-end tests. Upgraded Node.js runtime.",
    )
    cloud = [e.text for e in analyzer.word_cloud(report, "english")]
    assert "endtoend" in cloud
    assert "nodejs" in cloud
    for word in cloud:
        assert analyzer.references(report, word), word

    assert analyzer.references(report, "nodejs") == [
        SentenceMatch("Upgraded Node.js runtime", "Progress"),
    ]


def test_add_stop_words_lowercased_for_both_languages(analyzer):
    analyzer.add_stop_words(["Jira"], "thai")
    result = analyzer.word_frequencies("jira ระบบ", "any")
    assert [e.text for e in result] == ["ระบบ"]
