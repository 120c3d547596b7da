"""
Musterhafte Tooltips pro Kategorie und Thema.

Dienen Autoren als Vorlage für eigene Tooltips (Metriken, Beispiel,
Business-Impact in einfacher Sprache) und werden über die API ausgeliefert.
"""

from typing import Dict, Optional

from app.models.pydantic import AssessmentCategory
from app.data.sample_questions import COMPLIANCE_RISK_HELP, OVERHEAD_RATIO_HELP

FINANCIAL_REFERENCE_TOOLTIPS: Dict[str, str] = {
    "overhead_ratio": OVERHEAD_RATIO_HELP,
    "profit_margin": (
        "Profit margin shows what percentage of your revenue becomes profit after all "
        "expenses. To calculate it: Subtract all expenses from your total revenue, then divide "
        "by your total revenue and multiply by 100. For example, if your practice makes "
        "$300,000 per year and has total expenses of $240,000, your profit margin is 20%. The "
        "higher this number, the more profitable your practice. Most successful practices "
        "maintain at least a 15-20% profit margin. Practices with margins below 10% often "
        "struggle to invest in growth or weather unexpected expenses."
    ),
    "cash_flow": (
        "Cash flow refers to the money moving in and out of your practice every month. "
        "Positive cash flow means more money coming in than going out, while negative cash "
        "flow means you're spending more than you're earning in that period. For example, a "
        "practice might have $30,000 coming in from patient payments but $35,000 in expenses "
        "that month, resulting in negative cash flow of $5,000. Even profitable practices can "
        "experience cash flow problems if timing of payments and expenses isn't managed "
        "carefully. Most financially stable practices maintain a cash reserve equal to 3-6 "
        "months of operating expenses."
    ),
    "revenue_cycle": (
        "Revenue cycle refers to the entire process from when a patient schedules an "
        "appointment until you receive full payment for services. This includes scheduling, "
        "insurance verification, treatment, billing, collections, and payment posting. For "
        "example, a practice with an efficient revenue cycle might receive payment within 30 "
        "days of service, while a practice with poor revenue cycle management might wait "
        "60-90 days or longer. Improving your revenue cycle by just 15 days can increase your "
        "available cash by 15-20% and reduce billing costs by 10-15%."
    ),
}

COMPLIANCE_REFERENCE_TOOLTIPS: Dict[str, str] = {
    "risk_assessment": COMPLIANCE_RISK_HELP,
    "hipaa_compliance": (
        "HIPAA is the law that protects patient health information. For your practice, this "
        "means having clear rules about who can access patient records, how information is "
        "shared, and keeping data secure. For example, you might need a secure patient portal "
        "instead of emailing test results, privacy screens on computers, and staff training "
        "about not discussing patients in public areas. HIPAA violations can cost between "
        "$100-$50,000 per violation depending on whether they were accidental or willful. "
        "About 70% of practices have at least one security gap that could lead to a HIPAA "
        "violation."
    ),
    "documentation_requirements": (
        "Documentation requirements refer to what needs to be recorded in patient charts to "
        "properly support treatment and billing. This includes things like assessment "
        "findings, treatment plans, progress notes, and outcome measurements. For example, if "
        "you bill for therapeutic exercise, your notes must clearly show what exercises were "
        "performed, their purpose, direct supervision, and patient response. Without proper "
        "documentation, insurance can deny claims or demand refunds years later. Around "
        "40-60% of audited claims have documentation deficiencies, often resulting in payment "
        "denials or recoupments averaging $100-$150 per visit."
    ),
    "compliance_program": (
        "A compliance program is your practice's system for making sure you follow all "
        "healthcare laws and regulations. It includes written policies, staff training, "
        "regular audits, and a way to report concerns. Think of it like having a safety "
        "system to prevent speeding tickets: it helps you avoid expensive penalties before "
        "they happen. For example, a good compliance program would regularly check that your "
        "billing matches your documentation, that staff are following privacy rules, and that "
        "proper patient consent is obtained. Practices with formal compliance programs "
        "typically reduce their violation risk by 60-80% and recover faster when issues occur."
    ),
}

REFERENCE_TOOLTIPS: Dict[str, Dict[str, str]] = {
    AssessmentCategory.FINANCIAL.value: FINANCIAL_REFERENCE_TOOLTIPS,
    AssessmentCategory.COMPLIANCE.value: COMPLIANCE_REFERENCE_TOOLTIPS,
}


def get_reference_tooltips(category: Optional[str]) -> Dict[str, str]:
    """Referenz-Tooltips einer Kategorie (Kopie); unbekannte Kategorie -> {}."""
    if not category:
        return {}
    return dict(REFERENCE_TOOLTIPS.get(category.strip().upper(), {}))
