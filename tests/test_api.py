# tests/test_api.py
from __future__ import annotations

import pytest

import lequel


def test_detect_returns_dict():
    result = lequel.detect("the quick brown fox")
    assert isinstance(result, dict)
    assert set(result) == {"language", "similarity"}


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("The children walked along the river to the market in the morning.", "en"),
        ("Die Kinder gingen mit ihren Freunden auf der Straße zur Schule.", "de"),
        ("Les enfants allaient à l'école avec leurs amis après le déjeuner.", "fr"),
        ("Дети шли в школу по старой дороге и говорили о погоде.", "ru"),
    ],
)
def test_detect_bundled_languages(text, expected):
    result = lequel.detect(text)
    assert result["language"] == expected
    assert 0.0 < result["similarity"] <= 1.0


def test_detect_bytes():
    result = lequel.detect("Дети шли в школу по старой дороге.".encode())
    assert result["language"] == "ru"


def test_detect_sequence_of_lines(english, spanish):
    result = lequel.detect(["the quick brown fox"], languages=[spanish, english])
    assert result["language"] == "en"


def test_detect_too_short():
    assert lequel.detect("a") == {"language": None, "similarity": 0.0}


def test_detect_empty():
    assert lequel.detect(b"") == {"language": None, "similarity": 0.0}


def test_detect_multiline_string_does_not_span_lines(english):
    result = lequel.detect("ab\ncd", languages=[english])
    assert result["language"] is None


def test_detect_all_returns_ranked_list(english, spanish, russian):
    results = lequel.detect_all(
        "the quick brown fox", languages=[russian, spanish, english]
    )
    assert results[0]["language"] == "en"
    sims = [r["similarity"] for r in results]
    assert sims == sorted(sims, reverse=True)
    assert all(r["similarity"] > 0.0 for r in results)


def test_detect_all_no_match():
    assert lequel.detect_all("x") == [{"language": None, "similarity": 0.0}]


def test_detect_max_lines(english, russian):
    text = "собака спит\nthe quick brown fox jumps"
    result = lequel.detect(text, languages=[english, russian], max_lines=1)
    assert result["language"] == "ru"


def test_public_primitives_exported():
    profile = lequel.build_trigram_profile(["hello"])
    assert lequel.normalize_trigram_profile(profile)
    assert lequel.cosine_similarity(profile, profile) == pytest.approx(1.0)
    assert lequel.identify_language(["hello"], []) is None


def test_version():
    assert lequel.__version__ == "1.0.0"
