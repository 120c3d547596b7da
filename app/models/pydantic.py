from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class AssessmentCategory(str, Enum):
    FINANCIAL = "FINANCIAL"
    COMPLIANCE = "COMPLIANCE"
    STAFFING = "STAFFING"
    TECHNOLOGY = "TECHNOLOGY"
    OPERATIONS = "OPERATIONS"
    PATIENTS = "PATIENTS"
    AUTOMATION = "AUTOMATION"
    FACILITIES = "FACILITIES"
    GEOGRAPHY = "GEOGRAPHY"
    MARKETING = "MARKETING"


class Question(BaseModel):
    """
    Eine Frage aus dem Fragenkatalog. Für das Review zählen nur
    `help_text` (der Tooltip) und `category`.
    JSON-Dateien aus dem Frontend nutzen camelCase (`helpText`), daher der Alias.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    text: str = ""
    category: str = ""
    help_text: Optional[str] = Field(default=None, alias="helpText")


class ReviewResult(BaseModel):
    """
    Ergebnis eines Tooltip-Reviews.

    Frozen: `suggested_improvements` wird ausschließlich vom Review aus den
    Detektor-Ergebnissen abgeleitet und kann nicht separat gesetzt werden.
    """
    model_config = ConfigDict(frozen=True)

    plain_language: bool
    jargon_identified: List[str] = Field(default_factory=list)
    has_metrics: bool
    has_examples: bool
    word_count: int = Field(ge=0)
    # 0..100, höher = besser lesbar
    readability_score: float = Field(ge=0.0, le=100.0)
    suggested_improvements: List[str] = Field(default_factory=list)

    @property
    def needs_improvement(self) -> bool:
        return bool(self.suggested_improvements)


class ReviewRequest(BaseModel):
    """
    Request-Body für /tooltips/review.
    """
    help_text: Optional[str] = None
    category: Optional[str] = None


class EnhanceRequest(BaseModel):
    """
    Request-Body für /tooltips/enhance.
    """
    help_text: Optional[str] = None
    category: Optional[str] = None


class EnhanceResponse(BaseModel):
    original: str
    enhanced: str
    changed: bool
    review: ReviewResult


class ReportRequest(BaseModel):
    """
    Request-Body für /tooltips/report und /tooltips/report/markdown.
    """
    questions: List[Question]
    include_enhancements: bool = True


class ReportSummary(BaseModel):
    total_reviewed: int
    missing_tooltips: int
    with_metrics: int
    with_examples: int
    with_plain_language: int
    with_jargon: int
    need_improvement: int
    percent_with_metrics: int
    percent_with_examples: int
    percent_with_plain_language: int
    percent_with_jargon: int
    percent_need_improvement: int
    # Mittelwert nur über vorhandene (nicht leere) Tooltips
    average_readability: float


class CategoryStats(BaseModel):
    category: str
    total: int
    need_improvement: int
    missing: int
    percent_need_improvement: int
    average_readability: float


class IssueCount(BaseModel):
    issue: str
    count: int


class QuestionReview(BaseModel):
    question_id: str
    category: str
    question_text: str
    help_text: str
    review: ReviewResult
    enhanced_help_text: Optional[str] = None


class ExampleEnhancement(BaseModel):
    question_id: str
    category: str
    issues: List[str]
    original: str
    enhanced: str


class AggregateReport(BaseModel):
    """
    Ergebnis eines Batch-Reviews über eine Fragensammlung.
    Wird vom Markdown-Renderer, dem JSON-Export und der Trend-Historie genutzt.
    """
    summary: ReportSummary
    categories: List[CategoryStats] = Field(default_factory=list)
    top_issues: List[IssueCount] = Field(default_factory=list)
    reviews: List[QuestionReview] = Field(default_factory=list)
    examples: List[ExampleEnhancement] = Field(default_factory=list)


class ReferenceTooltipsResponse(BaseModel):
    category: str
    tooltips: Dict[str, str] = Field(default_factory=dict)
