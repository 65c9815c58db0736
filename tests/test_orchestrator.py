# tests/test_orchestrator.py
from __future__ import annotations

import pytest
from conftest import make_language

from lequel.models import LanguageProfile
from lequel.pipeline import IdentificationResult
from lequel.pipeline.orchestrator import identify_language, rank_languages


def test_identify_english(english, russian):
    assert identify_language(["the quick brown fox"], [russian, english]) == "en"


def test_identify_spanish(english, spanish):
    text = ["el perro perezoso duerme en la casa de la colina"]
    assert identify_language(text, [english, spanish]) == "es"


def test_identify_russian(english, spanish, russian):
    text = ["ленивая собака спит"]
    assert identify_language(text, [english, spanish, russian]) == "ru"


def test_single_character_line_is_no_match(english, spanish):
    assert identify_language(["a"], [english, spanish]) is None


def test_empty_text_is_no_match(english):
    assert identify_language([], [english]) is None


def test_no_candidates_is_no_match():
    assert identify_language(["the quick brown fox"], []) is None


def test_all_zero_scores_is_no_match(english, spanish):
    assert identify_language(["ЖЖЖЖЖ"], [english, spanish]) is None


def test_tie_keeps_earliest_candidate():
    first = make_language("first", ["abcdef"])
    second = make_language("second", ["abcdef"])
    text = ["abcdef"]
    assert identify_language(text, [first, second]) == "first"
    assert identify_language(text, [second, first]) == "second"


def test_later_strictly_better_candidate_wins():
    weak = make_language("weak", ["abcxyz"])
    strong = make_language("strong", ["abcdef"])
    assert identify_language(["abcdef"], [weak, strong]) == "strong"


def test_zero_scoring_candidate_never_wins(english):
    unrelated = LanguageProfile(code="xx", trigrams={"qqq": 1.0})
    assert identify_language(["the quick brown fox"], [unrelated, english]) == "en"


def test_identify_respects_max_lines(english, russian):
    text = ["ленивая собака спит", "the quick brown fox jumps over the dog"]
    assert identify_language(text, [english, russian], max_lines=1) == "ru"


def test_identify_does_not_mutate_candidates(english, spanish):
    before = dict(english.trigrams)
    identify_language(["the quick brown fox"], [english, spanish])
    assert english.trigrams == before


def test_rank_languages_sorted(english, spanish, russian):
    results = rank_languages(
        ["the brown fox likes the evening"], [russian, spanish, english]
    )
    assert all(isinstance(r, IdentificationResult) for r in results)
    sims = [r.similarity for r in results]
    assert sims == sorted(sims, reverse=True)
    assert results[0].language == "en"
    assert "ru" not in [r.language for r in results]


def test_rank_languages_agrees_with_identify_on_ties():
    first = make_language("first", ["abcdef"])
    second = make_language("second", ["abcdef"])
    results = rank_languages(["abcdef"], [first, second])
    assert [r.language for r in results] == ["first", "second"]
    assert results[0].similarity == pytest.approx(1.0)


def test_rank_languages_empty_text(english):
    assert rank_languages(["ab"], [english]) == []


def test_identification_result_to_dict():
    r = IdentificationResult(language="en", similarity=0.5)
    assert r.to_dict() == {"language": "en", "similarity": 0.5}


def test_identification_result_is_frozen():
    r = IdentificationResult(language="en", similarity=0.5)
    with pytest.raises(AttributeError):
        r.language = "fr"  # type: ignore[misc]
