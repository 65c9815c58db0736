"""Lequel: language identification with character trigram profiles."""

from __future__ import annotations

from collections.abc import Sequence

from lequel._utils import DEFAULT_MAX_LINES
from lequel.models import LanguageProfile, load_languages
from lequel.pipeline import NO_MATCH, IdentificationResult
from lequel.pipeline.orchestrator import identify_language, rank_languages
from lequel.text import text_from_string
from lequel.trigrams import (
    TrigramProfile,
    build_trigram_profile,
    cosine_similarity,
    normalize_trigram_profile,
)

__version__ = "1.0.0"
__all__ = [
    "IdentificationResult",
    "LanguageProfile",
    "TrigramProfile",
    "build_trigram_profile",
    "cosine_similarity",
    "detect",
    "detect_all",
    "identify_language",
    "normalize_trigram_profile",
    "rank_languages",
]


def _as_text(data: str | bytes | bytearray | Sequence[str]) -> Sequence[str]:
    if isinstance(data, (str, bytes, bytearray)):
        return text_from_string(data)
    return data


def detect(
    data: str | bytes | bytearray | Sequence[str],
    languages: Sequence[LanguageProfile] | None = None,
    max_lines: int | None = DEFAULT_MAX_LINES,
) -> dict[str, str | float | None]:
    """Identify the language of *data*.

    :param data: A string, UTF-8 bytes, or a sequence of lines.
    :param languages: Reference profiles to choose from.  Defaults to the
        bundled set.
    :param max_lines: Maximum number of lines examined.
    :returns: A dict with ``"language"`` (``None`` when nothing matched) and
        ``"similarity"`` keys.
    """
    if languages is None:
        languages = load_languages()
    results = rank_languages(_as_text(data), languages, max_lines=max_lines)
    return (results[0] if results else NO_MATCH).to_dict()


def detect_all(
    data: str | bytes | bytearray | Sequence[str],
    languages: Sequence[LanguageProfile] | None = None,
    max_lines: int | None = DEFAULT_MAX_LINES,
) -> list[dict[str, str | float | None]]:
    """Rank every language that shares at least one trigram with *data*.

    If nothing matches, a single no-match entry is returned so the caller
    always receives at least one result.
    """
    if languages is None:
        languages = load_languages()
    results = rank_languages(_as_text(data), languages, max_lines=max_lines)
    return [r.to_dict() for r in results or [NO_MATCH]]
