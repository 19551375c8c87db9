"""Markdown cleanup and regex-based sentence splitter."""

from __future__ import annotations

import re

from ._script import contains_thai

_BOLD_RE = re.compile(r"\*\*(.*?)\*\*")
_ITALIC_RE = re.compile(r"\*(.*?)\*")
_RULE_RE = re.compile(r"---")

# Terminal punctuation (including the danda) or a line break ends a sentence.
# A period between two word characters ("Node.js", "v1.2") does not.
_END = r"(?:[!?।\n]|(?<!\w)\.|\.(?!\w))+"
_SENTENCE_END_RE = re.compile(_END)
# Thai rarely uses terminal punctuation; wide gaps stand in for it.
_THAI_SENTENCE_END_RE = re.compile(rf"{_END}|\s{{2,}}")


def strip_markdown(text: str | None) -> str:
    """Unwrap **bold** and *italic* markers and drop --- rules."""
    if not text:
        return ""
    text = _BOLD_RE.sub(r"\1", text)
    text = _ITALIC_RE.sub(r"\1", text)
    text = _RULE_RE.sub("", text)
    return text.strip()


def split_sentences(text: str | None) -> list[str]:
    """Split text into trimmed, non-empty sentences.

    Terminal punctuation is consumed by the split.
    """
    if not text or not text.strip():
        return []

    pattern = _THAI_SENTENCE_END_RE if contains_thai(text) else _SENTENCE_END_RE

    sentences: list[str] = []
    for part in pattern.split(text):
        s = part.strip()
        if s:
            sentences.append(s)

    return sentences
