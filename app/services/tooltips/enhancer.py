"""
TooltipEnhancer: ergänzt schwache Tooltips um fehlende Inhalte.

Reihenfolge (jeder Schritt prüft den bis dahin erzeugten Text):
1) Plain-Language-Opening vor den Text (nur wenn nicht plain language)
2) Metrik-Satz (nur wenn keine Metriken)
3) Beispiel-Satz (nur wenn keine Beispiele)
4) Business-Impact-Satz (nur wenn weder "impact", "affect" noch "benefit")

Bestehender Text wird nie umgeschrieben, nur ergänzt. Einzige Änderung am
Original: beim Opening wird das erste Zeichen kleingeschrieben, außer der
Text beginnt mit einem Akronym ("HIPAA", "ROI").

Die Template-Auswahl läuft über einen Chooser (Callable[[Sequence[str]], str]),
damit Tests eine feste Auswahl injizieren können.
"""

import random
from typing import Callable, Optional, Sequence

from app.services.tooltips.detectors import (
    has_business_impact,
    has_examples,
    has_metrics,
    is_plain_language,
)
from app.services.tooltips.review import DEFAULT_THRESHOLDS, ReviewThresholds, review_tooltip
from app.services.tooltips.vocabulary import (
    BUSINESS_IMPACT_TEMPLATES,
    EXAMPLE_TEMPLATES,
    METRIC_TEMPLATES,
    OPENING_TEMPLATES,
    templates_for,
)

Chooser = Callable[[Sequence[str]], str]

DEFAULT_MIN_LENGTH = 200


def seeded_chooser(seed: Optional[int] = None) -> Chooser:
    """Chooser auf Basis von random.Random; seed=None -> nicht deterministisch."""
    return random.Random(seed).choice


class TooltipEnhancer:
    def __init__(
        self,
        chooser: Optional[Chooser] = None,
        thresholds: ReviewThresholds = DEFAULT_THRESHOLDS,
        min_length: int = DEFAULT_MIN_LENGTH,
    ) -> None:
        self.chooser = chooser or seeded_chooser()
        self.thresholds = thresholds
        self.min_length = min_length

    def is_comprehensive(self, help_text: str) -> bool:
        """Lang genug + Metriken + Beispiele, oder alle Review-Checks bestanden."""
        if (
            len(help_text) > self.min_length
            and has_metrics(help_text)
            and has_examples(help_text)
        ):
            return True
        return not review_tooltip(help_text, thresholds=self.thresholds).needs_improvement

    def enhance(self, help_text: Optional[str], category: Optional[str] = None) -> str:
        # Ohne Text gibt es nichts zu ergänzen; das Review meldet den fehlenden Tooltip.
        if not help_text or not help_text.strip():
            return help_text or ""

        if self.is_comprehensive(help_text):
            return help_text

        enhanced = help_text

        if not is_plain_language(enhanced, self.thresholds.plain_language_min_score):
            enhanced = self._add_opening(enhanced, category)

        if not has_metrics(enhanced):
            enhanced += self._pick(METRIC_TEMPLATES, category)

        if not has_examples(enhanced):
            enhanced += self._pick(EXAMPLE_TEMPLATES, category)

        if not has_business_impact(enhanced):
            enhanced += self._pick(BUSINESS_IMPACT_TEMPLATES, category)

        return enhanced

    def _pick(self, pool, category) -> str:
        return self.chooser(templates_for(pool, category))

    def _add_opening(self, text: str, category) -> str:
        opening = self._pick(OPENING_TEMPLATES, category)
        if text[1:2].isupper():
            return opening + text
        return opening + text[0].lower() + text[1:]
