import logging

from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse

from app.models.pydantic import (
    AggregateReport,
    EnhanceRequest,
    EnhanceResponse,
    ReferenceTooltipsResponse,
    ReportRequest,
    ReviewRequest,
    ReviewResult,
)
from app.services.tooltip_review_service import TooltipReviewService

logger = logging.getLogger(__name__)

router = APIRouter()
tooltip_review_service = TooltipReviewService()


# einfacher Health-Check
@router.get("/health")
async def health():
    return {"status": "ok"}


# prüft einen einzelnen Tooltip
@router.post("/tooltips/review", response_model=ReviewResult)
def review_tooltip(req: ReviewRequest):
    try:
        return tooltip_review_service.review(req.help_text, req.category)
    except Exception as e:
        logger.exception("Tooltip review failed")
        raise HTTPException(status_code=500, detail=str(e))


# ergänzt einen Tooltip um fehlende Metriken/Beispiele/Impact
@router.post("/tooltips/enhance", response_model=EnhanceResponse)
def enhance_tooltip(req: EnhanceRequest):
    try:
        original = req.help_text or ""
        enhanced = tooltip_review_service.enhance(original, req.category)
        return EnhanceResponse(
            original=original,
            enhanced=enhanced,
            changed=enhanced != original,
            review=tooltip_review_service.review(enhanced, req.category),
        )
    except Exception as e:
        logger.exception("Tooltip enhancement failed")
        raise HTTPException(status_code=500, detail=str(e))


# Batch-Review über mehrere Fragen (JSON)
@router.post("/tooltips/report", response_model=AggregateReport)
def tooltip_report(req: ReportRequest):
    try:
        return tooltip_review_service.build_report(
            req.questions, include_enhancements=req.include_enhancements
        )
    except Exception as e:
        logger.exception("Tooltip report failed")
        raise HTTPException(status_code=500, detail=str(e))


# Batch-Review als Markdown
@router.post("/tooltips/report/markdown", response_class=PlainTextResponse)
def tooltip_report_markdown(req: ReportRequest):
    try:
        report = tooltip_review_service.build_report(
            req.questions, include_enhancements=req.include_enhancements
        )
        return PlainTextResponse(
            tooltip_review_service.render_markdown(report),
            media_type="text/markdown",
        )
    except Exception as e:
        logger.exception("Tooltip markdown report failed")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/tooltips/reference/{category}", response_model=ReferenceTooltipsResponse)
def reference_tooltips(category: str):
    return ReferenceTooltipsResponse(
        category=category.strip().upper(),
        tooltips=tooltip_review_service.reference_tooltips(category),
    )
