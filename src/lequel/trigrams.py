"""Trigram profiles: building, normalization and cosine similarity.

A trigram profile maps every 3-character sequence of a text to a weight.
Raw profiles hold occurrence counts; normalized profiles are unit vectors
(sum of squared weights equal to 1) so that the dot product of two of them
is their cosine similarity.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

from lequel._utils import DEFAULT_MAX_LINES, _validate_max_lines

logger = logging.getLogger(__name__)

#: Mapping of 3-code-point strings to weights.
TrigramProfile = dict[str, float]

TRIGRAM_LENGTH = 3


def build_trigram_profile(
    text: Iterable[str | bytes],
    max_lines: int | None = DEFAULT_MAX_LINES,
) -> TrigramProfile:
    """Build a raw trigram profile from a sequence of lines.

    Each line is handled on its own, so trigrams never span two lines.
    Windows are taken over code points, never bytes; ``bytes`` lines are
    decoded as UTF-8 with replacement characters first.

    :param text: The lines of text.  Lines should not contain terminators.
    :param max_lines: Only the first *max_lines* lines are examined.
        ``None`` examines every line.
    :returns: A new profile mapping each trigram to its occurrence count.
    :raises ValueError: If *max_lines* is not ``None`` or a positive integer.
    """
    _validate_max_lines(max_lines)
    profile: TrigramProfile = {}
    _get = profile.get
    for count, line in enumerate(text):
        if max_lines is not None and count >= max_lines:
            break
        if isinstance(line, (bytes, bytearray)):
            line = bytes(line).decode("utf-8", errors="replace")
        for i in range(len(line) - TRIGRAM_LENGTH + 1):
            trigram = line[i : i + TRIGRAM_LENGTH]
            profile[trigram] = _get(trigram, 0.0) + 1.0
    return profile


def normalize_trigram_profile(profile: TrigramProfile) -> bool:
    """Scale *profile* in place to unit length.

    The caller must not hold on to the previous weights: every value is
    replaced.

    :param profile: The profile to normalize.
    :returns: ``True`` on success, ``False`` if the profile has no weight
        at all (empty, or all zero), in which case it is left unchanged.
    """
    sq_sum = 0.0
    for weight in profile.values():
        sq_sum += weight * weight
    if sq_sum == 0.0:
        logger.debug("cannot normalize a trigram profile with zero magnitude")
        return False
    norm = math.sqrt(sq_sum)
    for trigram in profile:
        profile[trigram] /= norm
    return True


def cosine_similarity(a: TrigramProfile, b: TrigramProfile) -> float:
    """Return the dot product of two profiles over their shared trigrams.

    For normalized profiles this is the cosine similarity, between 0.0 (no
    trigram in common) and 1.0 (same direction).  The smaller profile is
    scanned and the larger one probed; ``math.fsum`` makes the result
    independent of which one that is.
    """
    if len(a) > len(b):
        a, b = b, a
    return math.fsum(
        weight * b[trigram] for trigram, weight in a.items() if trigram in b
    )
