"""Shared fixtures for standup_text tests."""

import pytest

import standup_text


@pytest.fixture
def analyzer():
    """Analyzer pinned to dictionary Thai segmentation for stable results."""
    return standup_text.TextAnalyzer(segmenter="dictionary")


@pytest.fixture
def tokenizer():
    return standup_text.Tokenizer("dictionary")
