"""Lookup table from normalized cloud words back to their surface forms."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from ._script import THAI_RANGE, split_script_runs
from ._sentence import strip_markdown
from ._tokenizer import clean_token

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ._types import Token

_EDGE_RE = re.compile(f"^[^\\w{THAI_RANGE}]+|[^\\w{THAI_RANGE}]+$")


class SurfaceForms:
    """Recovers the capitalization and hyphenation a word was typed with.

    Cloud entries are lowercased and stripped of punctuation; sentence
    search should look for the form that actually appears in the report.
    """

    __slots__ = ("_forms",)

    def __init__(self, forms: dict[str, str] | None = None) -> None:
        self._forms: dict[str, str] = dict(forms or {})

    @classmethod
    def from_tokens(cls, tokens: Iterable[Token]) -> SurfaceForms:
        """Map each token's normalized form to its trimmed surface form.

        The lowercased surface ("api-key") is recorded as well. Later
        tokens win.
        """
        forms: dict[str, str] = {}
        for token in tokens:
            surface = _EDGE_RE.sub("", token.surface)
            if not surface or not token.normalized:
                continue
            forms[token.normalized] = surface
            forms[surface.lower()] = surface
        return cls(forms)

    @classmethod
    def from_texts(cls, texts: Iterable[str | None]) -> SurfaceForms:
        """Build the table from raw texts, word by word as the tokenizer sees them."""
        tokens: list[Token] = []
        for text in texts:
            thai_runs, other_runs = split_script_runs(strip_markdown(text))
            for run in other_runs:
                tokens.extend(clean_token(raw) for raw in run.split())
            tokens.extend(clean_token(run.strip()) for run in thai_runs)
        return cls.from_tokens(tokens)

    def __len__(self) -> int:
        return len(self._forms)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._forms

    def resolve(self, word: str) -> str:
        """Surface form recorded for word, or word itself if unseen."""
        return self._forms.get(word.lower(), word)
