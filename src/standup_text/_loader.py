"""Lexicon extension loading, manifest validation, and SHA-256 checksums."""

from __future__ import annotations

import hashlib
import json
import logging
from pathlib import Path
from typing import Any

import msgpack

from ._errors import LexiconChecksumError, LexiconError, LexiconVersionError

logger = logging.getLogger(__name__)

_EXPECTED_VERSION = "1.0"

_DATA_FILES = (
    "thai_words.bin",
    "stop_words.bin",
)

_STOP_WORD_LANGUAGES = ("english", "thai")


def _sha256(path: Path) -> str:
    h = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(65536), b""):
            h.update(chunk)
    return h.hexdigest()


def _read_manifest(data_dir: Path) -> dict[str, Any]:
    manifest_path = data_dir / "manifest.json"
    if not manifest_path.exists():
        raise LexiconError(f"manifest.json not found in {data_dir}")
    with open(manifest_path, encoding="utf-8") as f:
        try:
            manifest = json.load(f)
        except json.JSONDecodeError as e:
            raise LexiconError(f"manifest.json is not valid JSON: {e}") from e
    if not isinstance(manifest, dict):
        raise LexiconError("manifest.json must be a JSON object")
    return manifest


def _validate_manifest(manifest: dict[str, Any], data_dir: Path) -> None:
    version = manifest.get("version")
    if version != _EXPECTED_VERSION:
        raise LexiconVersionError(
            f"Expected lexicon version {_EXPECTED_VERSION!r}, got {version!r}"
        )
    checksums = manifest.get("files", {})
    if not isinstance(checksums, dict):
        raise LexiconError("manifest \"files\" must map file names to checksums")
    for filename in _DATA_FILES:
        filepath = data_dir / filename
        if not filepath.exists():
            raise LexiconError(f"Missing lexicon file: {filepath}")
        expected = checksums.get(filename)
        if expected is None:
            raise LexiconError(f"No checksum in manifest for {filename}")
        actual = _sha256(filepath)
        if actual != expected:
            raise LexiconChecksumError(
                f"Checksum mismatch for {filename}: "
                f"expected {str(expected)[:16]}..., got {actual[:16]}..."
            )


def _load_msgpack(path: Path) -> Any:
    with open(path, "rb") as f:
        data = f.read()
    try:
        return msgpack.unpackb(data, raw=False)
    except ValueError as e:
        raise LexiconError(f"{path.name} is not valid msgpack: {e}") from e


def _word_set(value: Any, what: str) -> frozenset[str]:
    if not isinstance(value, list):
        raise LexiconError(f"{what} must be a list of strings")
    words: set[str] = set()
    for item in value:
        if not isinstance(item, str):
            raise LexiconError(f"{what} contains a non-string entry: {item!r}")
        item = item.strip()
        if item:
            words.add(item)
    return frozenset(words)


def load_lexicon(data_dir: Path | str) -> dict[str, frozenset[str]]:
    """Load and validate a lexicon extension directory.

    Returns a dict with ``thai_words``, ``english_stop_words`` and
    ``thai_stop_words``. English stop words are lowercased.
    """
    data_dir = Path(data_dir)

    manifest = _read_manifest(data_dir)
    _validate_manifest(manifest, data_dir)

    thai_words = _word_set(
        _load_msgpack(data_dir / "thai_words.bin"), "thai_words.bin",
    )

    raw_stop = _load_msgpack(data_dir / "stop_words.bin")
    if not isinstance(raw_stop, dict):
        raise LexiconError("stop_words.bin must be a map of language to words")
    unknown = set(raw_stop) - set(_STOP_WORD_LANGUAGES)
    if unknown:
        raise LexiconError(f"Unknown stop-word languages: {sorted(unknown)}")

    english = _word_set(raw_stop.get("english", []), "english stop words")
    thai = _word_set(raw_stop.get("thai", []), "thai stop words")

    logger.info(
        "Loaded lexicon from %s: %d Thai words, %d English and %d Thai stop words",
        data_dir, len(thai_words), len(english), len(thai),
    )

    return {
        "thai_words": thai_words,
        "english_stop_words": frozenset(w.lower() for w in english),
        "thai_stop_words": thai,
    }
