"""Reference language profiles: CSV loading and the bundled data set.

Reference data is a directory holding ``languagecode_names.csv`` (rows of
``code,name``) and a ``trigrams/`` directory with one ``<code>.csv`` file per
language (rows of ``trigram,count``).
"""

from __future__ import annotations

import csv
import dataclasses
import importlib.resources
import logging
import threading
from pathlib import Path

from lequel._utils import DEFAULT_MAX_TRIGRAMS, _validate_positive_int
from lequel.trigrams import TRIGRAM_LENGTH, TrigramProfile, normalize_trigram_profile

logger = logging.getLogger(__name__)

LANGUAGE_NAMES_FILE = "languagecode_names.csv"
TRIGRAMS_DIR = "trigrams"

_LANGUAGES_CACHE: list[LanguageProfile] | None = None
_LANGUAGES_CACHE_LOCK = threading.Lock()
_NAMES_CACHE: dict[str, str] | None = None
_NAMES_CACHE_LOCK = threading.Lock()


@dataclasses.dataclass(frozen=True, slots=True)
class LanguageProfile:
    """A language code and its normalized reference trigram profile.

    The profile is shared by every identification call and must not be
    mutated after loading.
    """

    code: str
    trigrams: TrigramProfile


def read_csv(path: str | Path) -> list[list[str]]:
    """Read a UTF-8 CSV file (BOM optional) into a list of rows."""
    with Path(path).open(encoding="utf-8-sig", newline="") as f:
        return list(csv.reader(f))


def read_language_codes(path: str | Path) -> dict[str, str]:
    """Read a ``code,name`` table, preserving file order.

    Rows that do not have exactly two fields are skipped.

    :raises ValueError: If a language code appears twice.
    """
    names: dict[str, str] = {}
    for fields in read_csv(path):
        if len(fields) != 2:
            continue
        code, name = fields
        if code in names:
            msg = f"corrupt language table {path}: duplicate code {code!r}"
            raise ValueError(msg)
        names[code] = name
    return names


def cut_low_frequency_trigrams(
    profile: TrigramProfile, max_trigrams: int
) -> TrigramProfile:
    """Return the *max_trigrams* most frequent entries of *profile*.

    Entries are explicitly sorted by weight descending (ties broken by the
    trigram itself) so the result does not depend on the input's order.
    """
    if len(profile) <= max_trigrams:
        return dict(profile)
    ranked = sorted(profile.items(), key=lambda item: (-item[1], item[0]))
    return dict(ranked[:max_trigrams])


def parse_trigram_rows(
    rows: list[list[str]], source: str = "<rows>"
) -> TrigramProfile:
    """Turn ``trigram,count`` rows into a raw profile.

    Rows that do not have exactly two fields are skipped.

    :raises ValueError: On a malformed trigram or count, or a duplicate
        trigram.
    """
    profile: TrigramProfile = {}
    for lineno, fields in enumerate(rows, 1):
        if len(fields) != 2:
            continue
        trigram, count = fields
        if len(trigram) != TRIGRAM_LENGTH:
            msg = (
                f"corrupt trigram profile {source}:{lineno}: "
                f"{trigram!r} is not {TRIGRAM_LENGTH} characters long"
            )
            raise ValueError(msg)
        try:
            frequency = int(count)
        except ValueError:
            frequency = -1
        if frequency < 0:
            msg = f"corrupt trigram profile {source}:{lineno}: bad count {count!r}"
            raise ValueError(msg)
        if trigram in profile:
            msg = f"corrupt trigram profile {source}:{lineno}: duplicate {trigram!r}"
            raise ValueError(msg)
        profile[trigram] = float(frequency)
    return profile


def read_trigram_profile(
    path: str | Path, max_trigrams: int = DEFAULT_MAX_TRIGRAMS
) -> TrigramProfile:
    """Read, truncate and normalize a reference trigram profile.

    :param path: A CSV file of ``trigram,count`` rows.
    :param max_trigrams: Number of most frequent trigrams to keep.
    :returns: The normalized profile.
    :raises ValueError: If the file is malformed or holds no usable counts.
    """
    _validate_positive_int(max_trigrams, "max_trigrams")
    profile = parse_trigram_rows(read_csv(path), source=str(path))
    profile = cut_low_frequency_trigrams(profile, max_trigrams)
    if not normalize_trigram_profile(profile):
        msg = f"corrupt trigram profile {path}: no trigram has a positive count"
        raise ValueError(msg)
    return profile


def load_language_profiles(
    data_dir: str | Path, max_trigrams: int = DEFAULT_MAX_TRIGRAMS
) -> tuple[dict[str, str], list[LanguageProfile]]:
    """Load every language listed in *data_dir*'s language table.

    Profiles are returned in the order of the language table, which is the
    tie-break order used during identification.

    :returns: A ``(names, profiles)`` tuple, where *names* maps each code to
        its display name.
    :raises OSError: If a file is missing or unreadable.
    :raises ValueError: If any file is malformed.
    """
    data_dir = Path(data_dir)
    logger.info("reading language codes from %s", data_dir / LANGUAGE_NAMES_FILE)
    names = read_language_codes(data_dir / LANGUAGE_NAMES_FILE)

    languages: list[LanguageProfile] = []
    for code in names:
        path = data_dir / TRIGRAMS_DIR / f"{code}.csv"
        logger.debug("reading trigram profile for language code %r", code)
        trigrams = read_trigram_profile(path, max_trigrams)
        languages.append(LanguageProfile(code=code, trigrams=trigrams))
    logger.info("loaded %d language profiles", len(languages))
    return names, languages


def _bundled_dir() -> Path:
    return Path(str(importlib.resources.files("lequel.models")))


def load_languages() -> list[LanguageProfile]:
    """Load the bundled reference profiles.

    The result is cached for the lifetime of the process and shared by all
    callers.

    :returns: The bundled language profiles in table order.
    """
    global _LANGUAGES_CACHE  # noqa: PLW0603
    if _LANGUAGES_CACHE is not None:
        return _LANGUAGES_CACHE

    with _LANGUAGES_CACHE_LOCK:
        if _LANGUAGES_CACHE is None:
            _, _LANGUAGES_CACHE = load_language_profiles(_bundled_dir())
        return _LANGUAGES_CACHE


def load_language_names() -> dict[str, str]:
    """Return the bundled ``code -> name`` table (cached)."""
    global _NAMES_CACHE  # noqa: PLW0603
    if _NAMES_CACHE is not None:
        return _NAMES_CACHE

    with _NAMES_CACHE_LOCK:
        if _NAMES_CACHE is None:
            _NAMES_CACHE = read_language_codes(_bundled_dir() / LANGUAGE_NAMES_FILE)
        return _NAMES_CACHE
