"""
Batch-Review über eine Fragensammlung und Markdown-Rendering.

1) Review: jede Frage wird einzeln geprüft (fehlender Tooltip zählt als
   "missing" und als verbesserungsbedürftig).
2) Enhancement (optional): verbesserungsbedürftige Tooltips mit Text werden
   vom Enhancer ergänzt; die ersten N bilden die Beispiel-Sektion.
3) Aggregation: Summary, Kategorien (Reihenfolge des ersten Auftretens),
   Top-Issues (Häufigkeit absteigend, bei Gleichstand erstes Auftreten zuerst).
4) Rendering: render_markdown() ist eine reine Funktion des Reports;
   Schreiben/Printen entscheidet der Aufrufer.
"""

from __future__ import annotations

from collections import Counter
import logging
from typing import Any, Dict, Iterable, List, Optional

from app.models.pydantic import (
    AggregateReport,
    CategoryStats,
    ExampleEnhancement,
    IssueCount,
    Question,
    QuestionReview,
    ReportSummary,
)
from app.services.tooltips.enhancer import TooltipEnhancer
from app.services.tooltips.review import DEFAULT_THRESHOLDS, ReviewThresholds, review_tooltip

logger = logging.getLogger(__name__)

DEFAULT_MAX_EXAMPLES = 5
REPORT_TITLE = "# Tooltip Readability Review Report"


def percent(part: int, total: int) -> int:
    """Ganzzahliger Prozentwert, kaufmännisch gerundet; total=0 -> 0."""
    if total <= 0:
        return 0
    return int(part * 100 / total + 0.5)


def _mean(values: List[float]) -> float:
    return round(sum(values) / len(values), 2) if values else 0.0


def _review_questions(
    questions: Iterable[Question],
    thresholds: ReviewThresholds,
    enhancer: Optional[TooltipEnhancer],
) -> List[QuestionReview]:
    reviews: List[QuestionReview] = []
    for q in questions:
        help_text = q.help_text or ""
        if not help_text.strip():
            logger.warning("Question %s has no helpText", q.id)

        review = review_tooltip(help_text, q.category, thresholds=thresholds)

        enhanced = None
        if enhancer is not None and review.needs_improvement and help_text.strip():
            enhanced = enhancer.enhance(help_text, q.category)

        reviews.append(
            QuestionReview(
                question_id=q.id,
                category=q.category,
                question_text=q.text,
                help_text=help_text,
                review=review,
                enhanced_help_text=enhanced,
            )
        )
    return reviews


def _summary(reviews: List[QuestionReview]) -> ReportSummary:
    total = len(reviews)
    missing = sum(1 for r in reviews if not r.help_text.strip())
    with_metrics = sum(1 for r in reviews if r.review.has_metrics)
    with_examples = sum(1 for r in reviews if r.review.has_examples)
    with_plain = sum(1 for r in reviews if r.review.plain_language)
    with_jargon = sum(1 for r in reviews if r.review.jargon_identified)
    need_improvement = sum(1 for r in reviews if r.review.needs_improvement)

    return ReportSummary(
        total_reviewed=total,
        missing_tooltips=missing,
        with_metrics=with_metrics,
        with_examples=with_examples,
        with_plain_language=with_plain,
        with_jargon=with_jargon,
        need_improvement=need_improvement,
        percent_with_metrics=percent(with_metrics, total),
        percent_with_examples=percent(with_examples, total),
        percent_with_plain_language=percent(with_plain, total),
        percent_with_jargon=percent(with_jargon, total),
        percent_need_improvement=percent(need_improvement, total),
        average_readability=_mean(
            [r.review.readability_score for r in reviews if r.help_text.strip()]
        ),
    )


def _categories(reviews: List[QuestionReview]) -> List[CategoryStats]:
    # dict behält die Reihenfolge des ersten Auftretens
    buckets: Dict[str, List[QuestionReview]] = {}
    for r in reviews:
        buckets.setdefault(r.category, []).append(r)

    stats: List[CategoryStats] = []
    for category, items in buckets.items():
        need = sum(1 for r in items if r.review.needs_improvement)
        stats.append(
            CategoryStats(
                category=category,
                total=len(items),
                need_improvement=need,
                missing=sum(1 for r in items if not r.help_text.strip()),
                percent_need_improvement=percent(need, len(items)),
                average_readability=_mean(
                    [r.review.readability_score for r in items if r.help_text.strip()]
                ),
            )
        )
    return stats


def _top_issues(reviews: List[QuestionReview]) -> List[IssueCount]:
    counts: Counter = Counter()
    for r in reviews:
        counts.update(r.review.suggested_improvements)
    # most_common sortiert stabil -> Gleichstand bleibt in Einfügereihenfolge
    return [IssueCount(issue=issue, count=n) for issue, n in counts.most_common()]


def _examples(reviews: List[QuestionReview], max_examples: int) -> List[ExampleEnhancement]:
    examples: List[ExampleEnhancement] = []
    for r in reviews:
        if len(examples) >= max_examples:
            break
        # unverändert zurückgegebene Tooltips sind kein Vorher/Nachher-Beispiel
        if r.enhanced_help_text is None or r.enhanced_help_text == r.help_text:
            continue
        examples.append(
            ExampleEnhancement(
                question_id=r.question_id,
                category=r.category,
                issues=list(r.review.suggested_improvements),
                original=r.help_text,
                enhanced=r.enhanced_help_text,
            )
        )
    return examples


def build_report(
    questions: Iterable[Question],
    enhancer: Optional[TooltipEnhancer] = None,
    thresholds: ReviewThresholds = DEFAULT_THRESHOLDS,
    max_examples: int = DEFAULT_MAX_EXAMPLES,
) -> AggregateReport:
    reviews = _review_questions(questions, thresholds, enhancer)
    report = AggregateReport(
        summary=_summary(reviews),
        categories=_categories(reviews),
        top_issues=_top_issues(reviews),
        reviews=reviews,
        examples=_examples(reviews, max(0, max_examples)),
    )
    logger.info(
        "Reviewed %s tooltips, %s need improvement",
        report.summary.total_reviewed,
        report.summary.need_improvement,
    )
    return report


def render_markdown(report: AggregateReport) -> str:
    s = report.summary
    lines: List[str] = [REPORT_TITLE, "", "## Summary"]
    lines += [
        f"- Total tooltips reviewed: {s.total_reviewed}",
        f"- Tooltips with metrics: {s.with_metrics} ({s.percent_with_metrics}%)",
        f"- Tooltips with examples: {s.with_examples} ({s.percent_with_examples}%)",
        f"- Tooltips with plain language: {s.with_plain_language} ({s.percent_with_plain_language}%)",
        f"- Tooltips with unexplained jargon: {s.with_jargon} ({s.percent_with_jargon}%)",
        f"- Tooltips needing improvement: {s.need_improvement} ({s.percent_need_improvement}%)",
    ]

    lines += ["", "## Category Breakdown"]
    if report.categories:
        for c in report.categories:
            lines.append(
                f"- {c.category}: {c.need_improvement}/{c.total} need improvement "
                f"({c.percent_need_improvement}%)"
            )
    else:
        lines.append("_No questions reviewed._")

    lines += ["", "## Top Issues"]
    if report.top_issues:
        for item in report.top_issues:
            noun = "occurrence" if item.count == 1 else "occurrences"
            lines.append(f"- {item.issue}: {item.count} {noun}")
    else:
        lines.append("_No issues found._")

    lines += ["", "## Example Enhancements"]
    if report.examples:
        for ex in report.examples:
            lines += [
                "",
                f"### {ex.question_id} ({ex.category})",
                f"**Issues:** {', '.join(ex.issues)}",
                "",
                f"**Original:** {ex.original}",
                "",
                f"**Enhanced:** {ex.enhanced}",
            ]
    else:
        lines.append("_No enhancements generated._")

    return "\n".join(lines) + "\n"


CSV_FIELDS = [
    "id",
    "category",
    "question",
    "help_text",
    "word_count",
    "readability_score",
    "plain_language",
    "has_metrics",
    "has_examples",
    "jargon",
    "needs_improvement",
    "suggested_improvements",
    "enhanced_help_text",
]


def report_rows(report: AggregateReport) -> List[Dict[str, Any]]:
    """Flache Zeilen pro Frage für den CSV-Export."""
    rows: List[Dict[str, Any]] = []
    for r in report.reviews:
        rows.append(
            {
                "id": r.question_id,
                "category": r.category,
                "question": r.question_text,
                "help_text": r.help_text,
                "word_count": r.review.word_count,
                "readability_score": round(r.review.readability_score, 2),
                "plain_language": r.review.plain_language,
                "has_metrics": r.review.has_metrics,
                "has_examples": r.review.has_examples,
                "jargon": "; ".join(r.review.jargon_identified),
                "needs_improvement": r.review.needs_improvement,
                "suggested_improvements": "; ".join(r.review.suggested_improvements),
                "enhanced_help_text": r.enhanced_help_text or "",
            }
        )
    return rows
