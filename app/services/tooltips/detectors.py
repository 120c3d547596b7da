"""
Unabhängige Pattern-Detektoren für Tooltip-Texte.

Jeder Detektor ist ein reines Prädikat über einen String und wirft für
keinen String (leer, nur Whitespace, Unicode, sehr lang); None wird wie
ein leerer String behandelt.
"""

import re
from typing import Optional, Union

from app.services.tooltips.text_metrics import readability_score
from app.services.tooltips.vocabulary import (
    BUSINESS_IMPACT_WORDS,
    EXAMPLE_PHRASES,
    JARGON_TERMS,
)

DEFAULT_PLAIN_LANGUAGE_MIN_SCORE = 60.0

_METRICS_RE = re.compile(
    r"\d+%"
    r"|\$\d+"
    r"|\d+(?:\.\d+)?\s*(?:day|week|month|year|hour)s?\b",
    re.IGNORECASE,
)
_EXAMPLES_RE = re.compile(
    "|".join(re.escape(p) for p in EXAMPLE_PHRASES),
    re.IGNORECASE,
)
_BUSINESS_IMPACT_RE = re.compile(
    "|".join(BUSINESS_IMPACT_WORDS),
    re.IGNORECASE,
)


def _jargon_patterns(term: str) -> tuple[re.Pattern, re.Pattern]:
    escaped = re.escape(term)
    found = re.compile(rf"\b{escaped}\b", re.IGNORECASE)
    defined = re.compile(rf"\b{escaped}\s+(?:is|means|refers\s+to)\b", re.IGNORECASE)
    return found, defined


_JARGON_PATTERNS = [(term, *_jargon_patterns(term)) for term in JARGON_TERMS]


def has_metrics(text: Optional[str]) -> bool:
    """Prozentwert (12%), Geldbetrag ($300) oder Zeitangabe (3 days)."""
    if not text:
        return False
    return bool(_METRICS_RE.search(text))


def has_examples(text: Optional[str]) -> bool:
    if not text:
        return False
    return bool(_EXAMPLES_RE.search(text))


def has_business_impact(text: Optional[str]) -> bool:
    if not text:
        return False
    return bool(_BUSINESS_IMPACT_RE.search(text))


def identify_jargon(text: Optional[str]) -> list[str]:
    """
    Fachbegriffe aus JARGON_TERMS, die im Text vorkommen und dort nicht
    direkt erklärt werden ("ROI means ...", "HIPAA is ...", "PHI refers to ...").

    Reihenfolge = Vokabular-Reihenfolge, Schreibweise = Vokabular-Schreibweise.
    """
    if not text:
        return []
    return [
        term
        for term, found, defined in _JARGON_PATTERNS
        if found.search(text) and not defined.search(text)
    ]


def is_plain_language(
    text_or_score: Union[str, float, None],
    min_score: float = DEFAULT_PLAIN_LANGUAGE_MIN_SCORE,
) -> bool:
    """
    Plain language = Readability-Score >= min_score (0..100, höher = besser).
    Akzeptiert den Text oder einen bereits berechneten Score.
    """
    if isinstance(text_or_score, (int, float)) and not isinstance(text_or_score, bool):
        score = float(text_or_score)
    else:
        score = readability_score(text_or_score)
    return score >= min_score
