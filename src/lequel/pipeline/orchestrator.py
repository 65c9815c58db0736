"""Pipeline orchestrator: build, normalize, score and select a language."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from lequel._utils import DEFAULT_MAX_LINES
from lequel.models import LanguageProfile
from lequel.pipeline import IdentificationResult
from lequel.pipeline.scoring import score_candidates
from lequel.trigrams import build_trigram_profile, normalize_trigram_profile

logger = logging.getLogger(__name__)


def _score_text(
    text: Iterable[str | bytes],
    languages: Sequence[LanguageProfile],
    max_lines: int | None,
    workers: int | None,
) -> list[tuple[str, float]] | None:
    """Return per-candidate similarities, or None if the text has no trigrams."""
    profile = build_trigram_profile(text, max_lines=max_lines)
    if not normalize_trigram_profile(profile):
        logger.debug("text has no trigrams, skipping %d candidates", len(languages))
        return None
    return score_candidates(profile, languages, workers=workers)


def identify_language(
    text: Iterable[str | bytes],
    languages: Sequence[LanguageProfile],
    max_lines: int | None = DEFAULT_MAX_LINES,
    workers: int | None = None,
) -> str | None:
    """Return the code of the language most similar to *text*.

    The best candidate must beat a baseline similarity of 0.0 with a strict
    comparison, so ties go to the candidate listed first and a text sharing
    no trigram with any language gets no match.

    :param text: The lines of text to identify.
    :param languages: Normalized reference profiles, in tie-break order.
    :param max_lines: Maximum number of lines examined.
    :param workers: Number of scoring processes (see
        :func:`~lequel.pipeline.scoring.score_candidates`).
    :returns: The winning language code, or ``None`` when there is no match
        (including texts too short to hold a single trigram).
    """
    scores = _score_text(text, languages, max_lines, workers)
    if scores is None:
        return None

    best_code: str | None = None
    best_similarity = 0.0
    for code, similarity in scores:
        if similarity > best_similarity:
            best_similarity = similarity
            best_code = code
    logger.debug("best match %r with similarity %.6f", best_code, best_similarity)
    return best_code


def rank_languages(
    text: Iterable[str | bytes],
    languages: Sequence[LanguageProfile],
    max_lines: int | None = DEFAULT_MAX_LINES,
    workers: int | None = None,
) -> list[IdentificationResult]:
    """Return every candidate with a positive similarity, best first.

    The sort is stable, so candidates with equal similarity keep their
    order and the first entry always agrees with :func:`identify_language`.
    """
    scores = _score_text(text, languages, max_lines, workers)
    if not scores:
        return []
    results = [
        IdentificationResult(language=code, similarity=similarity)
        for code, similarity in scores
        if similarity > 0.0
    ]
    results.sort(key=lambda r: r.similarity, reverse=True)
    return results
