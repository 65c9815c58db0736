"""Cosine-similarity scoring of a text profile with optional parallelism."""

from __future__ import annotations

import concurrent.futures
import itertools
import logging
import os
from collections.abc import Sequence

from lequel.models import LanguageProfile
from lequel.trigrams import TrigramProfile, cosine_similarity

logger = logging.getLogger(__name__)

_PARALLEL_THRESHOLD = 6


def _resolve_workers(workers: int | None) -> int:
    if workers is not None:
        return workers
    return int(os.environ.get("LEQUEL_WORKERS", "1") or "1")


def score_candidates(
    profile: TrigramProfile,
    languages: Sequence[LanguageProfile],
    workers: int | None = None,
) -> list[tuple[str, float]]:
    """Score a normalized text profile against every candidate language.

    :param profile: The normalized text profile.
    :param languages: The candidate profiles, already normalized.
    :param workers: Number of worker processes.  Defaults to the
        ``LEQUEL_WORKERS`` environment variable, or 1.
    :returns: ``(code, similarity)`` pairs in candidate order.
    """
    if not profile or not languages:
        return []

    workers = _resolve_workers(workers)
    if len(languages) > _PARALLEL_THRESHOLD and workers > 1:
        try:
            with concurrent.futures.ProcessPoolExecutor(max_workers=workers) as pool:
                # map() yields in submission order, keeping tie-breaks stable.
                similarities = list(
                    pool.map(
                        cosine_similarity,
                        itertools.repeat(profile),
                        [lang.trigrams for lang in languages],
                        chunksize=max(1, len(languages) // workers),
                    )
                )
            return [
                (lang.code, s) for lang, s in zip(languages, similarities, strict=True)
            ]
        except (RuntimeError, OSError) as e:
            logger.debug("process pool unavailable, scoring sequentially: %s", e)

    return [(lang.code, cosine_similarity(profile, lang.trigrams)) for lang in languages]
