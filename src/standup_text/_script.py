"""Thai-script detection and script-run partitioning."""

from __future__ import annotations

import re

THAI_RANGE = "\u0E00-\u0E7F"

_THAI_CHAR_RE = re.compile(f"[{THAI_RANGE}]")
_NON_THAI_RUN_RE = re.compile(f"([^{THAI_RANGE}]+)")


def contains_thai(text: str) -> bool:
    """True if any character of text is in the Thai Unicode block."""
    return _THAI_CHAR_RE.search(text) is not None


def is_thai_char(ch: str) -> bool:
    return "\u0E00" <= ch <= "\u0E7F"


def split_script_runs(text: str) -> tuple[list[str], list[str]]:
    """Partition text into Thai runs and non-blank non-Thai runs.

    Returns (thai_runs, non_thai_runs), each in document order.
    """
    thai_runs: list[str] = []
    other_runs: list[str] = []
    for run in _NON_THAI_RUN_RE.split(text):
        if contains_thai(run):
            thai_runs.append(run)
        elif run.strip():
            other_runs.append(run)
    return thai_runs, other_runs
