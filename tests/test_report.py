"""Tests for report normalization and merge policy."""

from standup_text import ReportText, TextSource, normalize_section


def test_normalize_absent_and_empty():
    assert normalize_section(None) == ()
    assert normalize_section("") == ()
    assert normalize_section([]) == ()


def test_normalize_list_strips_bullets():
    assert normalize_section(["- a", "", "  * b  "]) == ("a", "b")


def test_normalize_string_lines():
    value = "1. first\n2) second\n\n• third"
    assert normalize_section(value) == ("first", "second", "third")


def test_normalize_keeps_bold():
    assert normalize_section("- **Bold:** x") == ("**Bold:** x",)


def test_sections_win_over_content():
    report = ReportText.from_fields(content="ignored", progress=["- done"])
    assert report.has_sections
    assert report.section_texts() == {
        "progress": "done", "blockers": "", "nextSteps": "",
    }
    assert report.text_sources() == [TextSource("done", "Progress")]


def test_section_labels():
    report = ReportText.from_fields(
        progress="shipped", blockers=["waiting on API"], next_steps="- deploy",
    )
    assert [s.label for s in report.text_sources()] == [
        "Progress", "Blockers", "Next Steps",
    ]


def test_content_fallback():
    report = ReportText.from_fields(content="Some text", blockers=[])
    assert not report.has_sections
    assert report.section_texts() == {"default": "Some text"}
    assert report.text_sources() == [TextSource("Some text", "Report")]


def test_empty_report():
    report = ReportText.from_fields()
    assert report.section_texts() == {}
    assert report.text_sources() == []
