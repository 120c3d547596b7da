"""
Demo-Fragenset für das Tooltip-Review (ein guter, ein mittlerer und zwei
knappe Tooltips). Wird vom Batch-Script ohne --questions und in Tests genutzt.
"""

from app.models.pydantic import AssessmentCategory, Question

OVERHEAD_RATIO_HELP = (
    "Overhead ratio shows what percentage of your income goes to running costs before "
    "paying practitioners. To calculate it: Add up all expenses (rent, staff wages, "
    "utilities, supplies, etc.) but don't include what you pay to practitioners. Then "
    "divide by your total income and multiply by 100. For example, if your practice makes "
    "$300,000 per year and spends $150,000 on expenses (not counting payments to "
    "practitioners), your overhead ratio is 50%. The lower this number, the more money "
    "available for practitioners and profit. Most successful practices keep this under "
    "45%, while practices struggling with profitability often have overhead over 65%. Even "
    "a 5% reduction in overhead could mean thousands of dollars more available for "
    "practitioner pay or practice investment."
)

COMPLIANCE_RISK_HELP = (
    "A compliance risk assessment is simply a check-up of your practice's ability to follow "
    "healthcare rules and regulations. Think of it like a safety inspection for your "
    "business. These assessments look for gaps in how you protect patient information, bill "
    "insurance correctly, maintain proper documentation, and follow healthcare laws. Rules "
    "change frequently, and penalties for breaking them can be severe, often $10,000+ per "
    "violation. Having an independent expert do this assessment is best because they bring "
    "fresh eyes and specialized knowledge. For example, they might spot that your patient "
    "consent forms are outdated, your staff needs HIPAA refresher training, or your "
    "documentation doesn't support the billing codes you're using."
)

SAMPLE_QUESTIONS: list[Question] = [
    Question(
        id="fin-exp-001",
        text="What is your practice's overhead ratio?",
        category=AssessmentCategory.FINANCIAL.value,
        help_text=OVERHEAD_RATIO_HELP,
    ),
    Question(
        id="comp-risk-001",
        text="When was your last compliance risk assessment conducted?",
        category=AssessmentCategory.COMPLIANCE.value,
        help_text=COMPLIANCE_RISK_HELP,
    ),
    Question(
        id="tech-dig-001",
        text="Do you use digital tools to track patient outcomes?",
        category=AssessmentCategory.TECHNOLOGY.value,
        help_text="Digital outcome tracking improves treatment success rates.",
    ),
    Question(
        id="staff-train-001",
        text="How frequently do staff receive training?",
        category=AssessmentCategory.STAFFING.value,
        help_text="Regular staff training ensures team skills stay current.",
    ),
]
