# tests/conftest.py
"""Shared test fixtures."""

from __future__ import annotations

import csv
from pathlib import Path

import pytest

from lequel.models import LanguageProfile
from lequel.trigrams import build_trigram_profile, normalize_trigram_profile

ENGLISH_SAMPLE = [
    "the quick brown fox jumps over the lazy dog",
    "there is nothing the brown fox likes more than the quiet of the evening",
    "she thought that the weather would be better on the other side of the hill",
]

SPANISH_SAMPLE = [
    "el rápido zorro marrón salta sobre el perro perezoso",
    "no hay nada que el zorro quiera más que la tranquilidad de la tarde",
    "ella pensaba que el tiempo sería mejor al otro lado de la colina",
]

RUSSIAN_SAMPLE = [
    "быстрая коричневая лиса прыгает через ленивую собаку",
    "лиса больше всего любит вечернюю тишину",
]


def make_language(code: str, lines: list[str]) -> LanguageProfile:
    """Build a normalized reference profile from sample lines."""
    trigrams = build_trigram_profile(lines)
    assert normalize_trigram_profile(trigrams)
    return LanguageProfile(code=code, trigrams=trigrams)


@pytest.fixture
def english() -> LanguageProfile:
    return make_language("en", ENGLISH_SAMPLE)


@pytest.fixture
def spanish() -> LanguageProfile:
    return make_language("es", SPANISH_SAMPLE)


@pytest.fixture
def russian() -> LanguageProfile:
    return make_language("ru", RUSSIAN_SAMPLE)


def write_reference_data(
    data_dir: Path, samples: dict[str, tuple[str, list[str]]]
) -> Path:
    """Write a reference data directory from ``code -> (name, lines)``."""
    (data_dir / "trigrams").mkdir(parents=True, exist_ok=True)
    with (data_dir / "languagecode_names.csv").open(
        "w", encoding="utf-8", newline=""
    ) as f:
        csv.writer(f).writerows((code, name) for code, (name, _) in samples.items())
    for code, (_, lines) in samples.items():
        counts = build_trigram_profile(lines)
        ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
        with (data_dir / "trigrams" / f"{code}.csv").open(
            "w", encoding="utf-8", newline=""
        ) as f:
            csv.writer(f).writerows((t, int(c)) for t, c in ranked)
    return data_dir


@pytest.fixture
def reference_dir(tmp_path: Path) -> Path:
    """A reference data directory with English, Spanish and Russian."""
    return write_reference_data(
        tmp_path / "data",
        {
            "en": ("English", ENGLISH_SAMPLE),
            "es": ("Spanish", SPANISH_SAMPLE),
            "ru": ("Russian", RUSSIAN_SAMPLE),
        },
    )
