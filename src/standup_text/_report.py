"""Report field normalization and the content/structured merge policy."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from ._types import TextSource

SectionValue = str | Sequence[str] | None

_BULLET_RE = re.compile(r"^\s*(?:[-*•]|\d+[.)])\s+")

SECTION_LABELS: dict[str, str] = {
    "progress": "Progress",
    "blockers": "Blockers",
    "nextSteps": "Next Steps",
}
CONTENT_LABEL = "Report"


def normalize_section(value: SectionValue) -> tuple[str, ...]:
    """Collapse a section field to a tuple of non-empty lines.

    Accepts None, a (possibly multi-line) string, or a sequence of
    strings. Leading bullet markers are removed.
    """
    if value is None:
        return ()
    items = value.splitlines() if isinstance(value, str) else value

    lines: list[str] = []
    for item in items:
        if not item:
            continue
        for line in str(item).splitlines():
            line = _BULLET_RE.sub("", line).strip()
            if line:
                lines.append(line)
    return tuple(lines)


@dataclass(slots=True, frozen=True)
class ReportText:
    """Text of one standup report, ready for analysis.

    Structured sections win over free-form content: when any of progress,
    blockers or next_steps has a line, content is ignored.
    """

    content: str = ""
    progress: tuple[str, ...] = ()
    blockers: tuple[str, ...] = ()
    next_steps: tuple[str, ...] = ()

    @classmethod
    def from_fields(
        cls,
        content: str | None = None,
        progress: SectionValue = None,
        blockers: SectionValue = None,
        next_steps: SectionValue = None,
    ) -> ReportText:
        return cls(
            content=content or "",
            progress=normalize_section(progress),
            blockers=normalize_section(blockers),
            next_steps=normalize_section(next_steps),
        )

    @property
    def has_sections(self) -> bool:
        return bool(self.progress or self.blockers or self.next_steps)

    def section_texts(self) -> dict[str, str]:
        """Source key to text, one line per section item."""
        if not self.has_sections:
            return {"default": self.content} if self.content.strip() else {}
        return {
            "progress": "\n".join(self.progress),
            "blockers": "\n".join(self.blockers),
            "nextSteps": "\n".join(self.next_steps),
        }

    def text_sources(self) -> list[TextSource]:
        """Labelled, non-empty sources in display order."""
        return [
            TextSource(text, SECTION_LABELS.get(key, CONTENT_LABEL))
            for key, text in self.section_texts().items()
            if text
        ]
