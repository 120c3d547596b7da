"""
Service-Fassade: Settings-Verdrahtung und reproduzierbare Ausgaben bei
gesetztem Seed, auch über mehrere Aufrufe hinweg.
"""

from app.core.config import Settings
from app.services.tooltip_review_service import TooltipReviewService

TRAINING = "Regular staff training ensures team skills stay current."
NOT_PLAIN = " ".join(["Organizational"] + ["organizational"] * 58 + ["considerations."])


def test_seeded_enhance_does_not_depend_on_previous_calls():
    service = TooltipReviewService(settings=Settings(enhancer_seed=7))
    first = service.enhance(NOT_PLAIN, "COMPLIANCE")
    for _ in range(5):
        service.enhance(TRAINING, "FINANCIAL")
    assert service.enhance(NOT_PLAIN, "COMPLIANCE") == first

    other = TooltipReviewService(settings=Settings(enhancer_seed=7))
    assert other.enhance(NOT_PLAIN, "COMPLIANCE") == first


def test_seeded_reports_are_identical(sample_questions):
    service = TooltipReviewService(settings=Settings(enhancer_seed=3))
    a = service.build_report(sample_questions)
    service.enhance(TRAINING, "STAFFING")
    b = service.build_report(sample_questions)
    assert a == b


def test_thresholds_come_from_settings():
    service = TooltipReviewService(settings=Settings(min_word_count=5))
    text = "Costs rose 12% in 3 months. For example, rent went up."
    assert service.review(text).suggested_improvements == []
    assert service.enhance(text, "FINANCIAL") == text


def test_report_without_enhancements(sample_questions):
    report = TooltipReviewService().build_report(sample_questions, include_enhancements=False)
    assert report.examples == []
