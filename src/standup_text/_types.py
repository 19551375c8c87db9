"""Data structures for standup_text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, NamedTuple

Mode = Literal["english", "thai", "any"]
Source = Literal["progress", "blockers", "nextSteps", "default"]

MODES: tuple[str, ...] = ("english", "thai", "any")


@dataclass(slots=True, frozen=True)
class Token:
    surface: str      # raw form as it appeared in the text
    normalized: str   # cleaned; lowercased unless Thai
    is_thai: bool


@dataclass(slots=True, frozen=True)
class WordFrequencyEntry:
    text: str
    value: int
    source: Source = "default"


class TextSource(NamedTuple):
    """A labelled block of report text, e.g. ("Blocked on X", "Blockers")."""

    text: str | None
    label: str


@dataclass(slots=True, frozen=True)
class SentenceMatch:
    sentence: str
    source: str     # label of the TextSource the sentence came from


@dataclass(slots=True, frozen=True)
class HighlightSpan:
    text: str
    highlighted: bool
