"""English and Thai stop words for filtering noise from word clouds."""

from __future__ import annotations

from ._errors import InvalidModeError
from ._types import MODES

ENGLISH_STOP_WORDS: frozenset[str] = frozenset({
    # Determiners and articles
    "a", "an", "the",
    # Conjunctions and prepositions
    "and", "or", "but", "in", "on", "at", "to", "for", "with", "by",
    "about", "as", "into", "like", "through", "after", "over", "between",
    "out", "of", "from", "up", "down",
    # Be/have/do forms
    "is", "am", "are", "was", "were", "be", "been", "being",
    "have", "has", "had", "do", "does", "did",
    # Modals
    "will", "would", "shall", "should", "can", "could", "may", "might",
    "must",
    # Pronouns
    "i", "you", "he", "she", "it", "we", "they", "me", "him", "her", "us",
    "them", "my", "your", "his", "its", "our", "their",
    "mine", "yours", "hers", "ours", "theirs",
    "this", "that", "these", "those",
})

THAI_STOP_WORDS: frozenset[str] = frozenset({
    # Conjunctions, prepositions, particles
    "และ", "ของ", "ที่", "ใน", "กับ", "แต่", "เพื่อ", "จาก", "ถ้า", "โดย",
    "หรือ", "ตาม", "ด้วย", "ซึ่ง", "ถึง", "กว่า", "ทาง",
    # Verbs and auxiliaries
    "มี", "เป็น", "การ", "ให้", "ได้", "จะ", "อยู่", "ต้อง", "ทำ", "ยัง",
    "เคย", "ควร", "อาจ", "ช่วย", "ขึ้น", "ลง", "มา", "ไป", "กำลัง",
    # Pronouns and demonstratives
    "เรา", "เขา", "คุณ", "นี้", "นั้น",
    # Adverbs and quantifiers
    "ไม่", "ว่า", "ก็", "เมื่อ", "แล้ว", "หนึ่ง", "สอง", "มาก", "อื่น", "ทุก",
    "อย่าง", "เลย", "เสมอ", "จริง", "จัง",
    # Politeness particles
    "นะ", "ครับ", "ค่ะ", "นะคะ", "นะครับ", "จ้า", "จ้ะ",
    # Repetition mark
    "ๆ",
})


def check_mode(mode: str) -> None:
    if mode not in MODES:
        raise InvalidModeError(
            f"mode must be one of 'english', 'thai', 'any', got {mode!r}"
        )


def stop_words_for(
    mode: str,
    english: frozenset[str] = ENGLISH_STOP_WORDS,
    thai: frozenset[str] = THAI_STOP_WORDS,
) -> frozenset[str]:
    """Return the stop-word set active for a filter mode.

    ``any`` is the union of the English and Thai sets.
    """
    check_mode(mode)
    if mode == "english":
        return english
    if mode == "thai":
        return thai
    return english | thai
