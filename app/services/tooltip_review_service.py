from typing import Iterable, Optional

from app.core.config import Settings, settings as default_settings
from app.data.reference_tooltips import get_reference_tooltips
from app.models.pydantic import AggregateReport, Question, ReviewResult
from app.services.tooltips.enhancer import Chooser, TooltipEnhancer, seeded_chooser
from app.services.tooltips.report import build_report, render_markdown
from app.services.tooltips.review import ReviewThresholds, review_tooltip


class TooltipReviewService:
    """
    Einstiegspunkt für API und Scripts: verdrahtet Settings (Schwellen,
    Seed) mit Review, Enhancer und Report.

    Mit gesetztem ENHANCER_SEED bekommt jeder Aufruf einen frisch geseedeten
    Chooser, d.h. gleiche Eingabe -> gleiche Ausgabe, unabhängig davon,
    wie viele Requests vorher liefen.
    """

    def __init__(self, settings: Optional[Settings] = None, chooser: Optional[Chooser] = None) -> None:
        self.settings = settings or default_settings
        self.thresholds = ReviewThresholds(
            min_word_count=self.settings.min_word_count,
            plain_language_min_score=self.settings.plain_language_min_score,
        )
        self.chooser = chooser

    def _enhancer(self) -> TooltipEnhancer:
        chooser = self.chooser or seeded_chooser(self.settings.enhancer_seed)
        return TooltipEnhancer(
            chooser=chooser,
            thresholds=self.thresholds,
            min_length=self.settings.enhance_min_length,
        )

    def review(self, help_text: Optional[str], category: Optional[str] = None) -> ReviewResult:
        return review_tooltip(help_text, category, thresholds=self.thresholds)

    def enhance(self, help_text: Optional[str], category: Optional[str] = None) -> str:
        return self._enhancer().enhance(help_text, category)

    def build_report(
        self,
        questions: Iterable[Question],
        include_enhancements: bool = True,
        max_examples: Optional[int] = None,
    ) -> AggregateReport:
        return build_report(
            questions,
            enhancer=self._enhancer() if include_enhancements else None,
            thresholds=self.thresholds,
            max_examples=self.settings.report_max_examples if max_examples is None else max_examples,
        )

    def render_markdown(self, report: AggregateReport) -> str:
        return render_markdown(report)

    def reference_tooltips(self, category: Optional[str]) -> dict[str, str]:
        return get_reference_tooltips(category)
