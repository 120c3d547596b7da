"""
Contract-Tests für Review und Enhancer: Wertebereiche und Robustheit bei
Randfällen (leer, nur Satzzeichen, Unicode, sehr lange Texte).
"""

import pytest

from app.services.tooltips.enhancer import TooltipEnhancer
from app.services.tooltips.review import review_tooltip

EDGE_TEXTS = [
    "x",
    "...",
    "!!! ???",
    "ÄÖÜ ß 漢字 😀",
    "Kosten steigen um 12% pro Jahr.",
    "word " * 5000,
    "Sentence. " * 2000,
    "no punctuation at all just words flowing on and on",
]


@pytest.mark.parametrize("text", EDGE_TEXTS)
def test_review_score_in_range(text):
    r = review_tooltip(text)
    assert isinstance(r.readability_score, float)
    assert 0.0 <= r.readability_score <= 100.0
    assert r.word_count == len(text.split())


@pytest.mark.parametrize("text", EDGE_TEXTS)
def test_review_suggestions_are_consistent(text):
    r = review_tooltip(text)
    assert r.needs_improvement == bool(r.suggested_improvements)
    assert len(set(r.suggested_improvements)) == len(r.suggested_improvements)


@pytest.mark.parametrize("text", EDGE_TEXTS)
def test_enhance_never_drops_original(first_chooser, text):
    enhanced = TooltipEnhancer(chooser=first_chooser).enhance(text, "COMPLIANCE")
    assert len(enhanced) >= len(text)
    assert text in enhanced or (text[0].lower() + text[1:]) in enhanced


def test_punctuation_only_text_has_no_sentences():
    r = review_tooltip("...")
    assert r.word_count == 1
    assert r.readability_score == 100.0


def test_very_long_run_on_sentence_scores_low():
    text = " ".join(["cost"] * 300)
    assert review_tooltip(text).readability_score == 0.0
    assert review_tooltip(text).plain_language is False
