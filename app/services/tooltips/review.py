"""
Review-Aggregator: kombiniert Textmetriken und Detektoren zu einem
ReviewResult mit Verbesserungsvorschlägen.

Die Vorschläge sind abgeleitet, nicht frei setzbar: die Liste ist genau
dann leer, wenn der Tooltip alle Checks besteht (plain language, kein
unerklärter Jargon, Metriken, Beispiele, Mindest-Wortzahl).

Reine Funktion ohne geteilten Zustand, kann parallel aufgerufen werden.
"""

from dataclasses import dataclass
from typing import Optional

from app.models.pydantic import ReviewResult
from app.services.tooltips.detectors import (
    DEFAULT_PLAIN_LANGUAGE_MIN_SCORE,
    has_examples,
    has_metrics,
    identify_jargon,
    is_plain_language,
)
from app.services.tooltips.text_metrics import WORST_READABILITY, extract_metrics

SUGGEST_COMPLETE_EXPLANATION = "add a complete explanation."
SUGGEST_SIMPLIFY = "simplify language / reduce sentence complexity"
SUGGEST_JARGON = "explain or replace jargon: {terms}"
SUGGEST_METRICS = "add specific numbers/percentages/timeframes"
SUGGEST_EXAMPLE = "include a practical example"
SUGGEST_EXPAND = "expand explanation with more context"


@dataclass(frozen=True)
class ReviewThresholds:
    min_word_count: int = 50
    plain_language_min_score: float = DEFAULT_PLAIN_LANGUAGE_MIN_SCORE


DEFAULT_THRESHOLDS = ReviewThresholds()


def _empty_review() -> ReviewResult:
    return ReviewResult(
        plain_language=False,
        jargon_identified=[],
        has_metrics=False,
        has_examples=False,
        word_count=0,
        readability_score=WORST_READABILITY,
        suggested_improvements=[SUGGEST_COMPLETE_EXPLANATION],
    )


def build_suggestions(
    plain_language: bool,
    jargon: list[str],
    metrics: bool,
    examples: bool,
    word_count: int,
    thresholds: ReviewThresholds = DEFAULT_THRESHOLDS,
) -> list[str]:
    suggestions: list[str] = []

    if not plain_language:
        suggestions.append(SUGGEST_SIMPLIFY)

    if jargon:
        suggestions.append(SUGGEST_JARGON.format(terms=", ".join(jargon)))

    if not metrics:
        suggestions.append(SUGGEST_METRICS)

    if not examples:
        suggestions.append(SUGGEST_EXAMPLE)

    if word_count < thresholds.min_word_count:
        suggestions.append(SUGGEST_EXPAND)

    return suggestions


def review_tooltip(
    help_text: Optional[str],
    category: Optional[str] = None,
    thresholds: ReviewThresholds = DEFAULT_THRESHOLDS,
) -> ReviewResult:
    """
    Prüft einen Tooltip-Text.

    Args:
        help_text: Tooltip-Text; None/leer/nur Whitespace ist gültig und
            ergibt ein minimales Ergebnis ("add a complete explanation.").
        category: Fragen-Kategorie. Für das Review selbst ohne Einfluss,
            wird für eine einheitliche Signatur mit dem Enhancer mitgeführt.
        thresholds: Mindest-Wortzahl und Plain-Language-Schwelle.

    Returns:
        ReviewResult (frozen)
    """
    if not help_text or not help_text.strip():
        return _empty_review()

    metrics = extract_metrics(help_text)
    plain = is_plain_language(metrics.readability_score, thresholds.plain_language_min_score)
    jargon = identify_jargon(help_text)
    with_metrics = has_metrics(help_text)
    with_examples = has_examples(help_text)

    return ReviewResult(
        plain_language=plain,
        jargon_identified=jargon,
        has_metrics=with_metrics,
        has_examples=with_examples,
        word_count=metrics.word_count,
        readability_score=metrics.readability_score,
        suggested_improvements=build_suggestions(
            plain, jargon, with_metrics, with_examples, metrics.word_count, thresholds
        ),
    )
