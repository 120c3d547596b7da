"""
Feste Vokabular- und Template-Tabellen für das Tooltip-Review.

- JARGON_TERMS: Fachbegriffe/Abkürzungen, die ein Laie ohne Erklärung
  vermutlich nicht versteht. Die Reihenfolge ist die Ausgabereihenfolge
  von identify_jargon().
- *_TEMPLATES: pro Kategorie ein kleiner Pool an Sätzen, aus denen der
  Enhancer per Chooser einen auswählt. "default" greift für alle anderen
  (auch ungültigen) Kategorien.

Alles read-only; keine Registry, keine Plugins.
"""

from typing import Dict, Tuple

DEFAULT_CATEGORY = "default"

JARGON_TERMS: Tuple[str, ...] = (
    "ROI", "KPI", "amortization", "depreciation", "liquidity", "liability",
    "HIPAA", "PHI", "BAA", "OCR", "NPP", "CFR", "CPT", "CCI", "OIG",
    "interoperability", "utilization", "revenue cycle", "variance",
    "fiscal", "capital", "procurement", "audit", "compliance",
)

EXAMPLE_PHRASES: Tuple[str, ...] = (
    "for example", "such as", "instance", "e.g.", "to illustrate", "scenario",
)

BUSINESS_IMPACT_WORDS: Tuple[str, ...] = ("impact", "affect", "benefit")

# Opening wird vor den (kleingeschriebenen) Originaltext gesetzt
OPENING_TEMPLATES: Dict[str, Tuple[str, ...]] = {
    "FINANCIAL": (
        "In simple terms, ",
        "To put it simply, ",
        "This is about ",
    ),
    "COMPLIANCE": (
        "This essentially means ",
        "In everyday terms, ",
        "Simply put, ",
    ),
    DEFAULT_CATEGORY: (
        "This refers to ",
        "This means ",
        "In basic terms, ",
    ),
}

# Jeder Satz muss selbst has_metrics() erfüllen
METRIC_TEMPLATES: Dict[str, Tuple[str, ...]] = {
    "FINANCIAL": (
        " Typically, practices see a 15-25% improvement when addressing this area.",
        " Industry benchmarks suggest a target of 10-15% for optimal performance.",
        " Most successful practices score at least 20% better than average in this area.",
    ),
    "COMPLIANCE": (
        " Compliance issues in this area typically result in penalties of $5,000-$10,000 per occurrence.",
        " About 60-70% of practices have gaps in this area when first assessed.",
        " Implementing best practices here can reduce audit risk by 40-50%.",
    ),
    DEFAULT_CATEGORY: (
        " Studies show a 15-20% improvement when this area is optimized.",
        " The top 25% of practices excel in this measurement.",
        " Addressing this can lead to 10-15% better outcomes.",
    ),
}

# Jeder Satz muss selbst has_examples() erfüllen
EXAMPLE_TEMPLATES: Dict[str, Tuple[str, ...]] = {
    "FINANCIAL": (
        " For example, tracking this weekly rather than monthly often identifies cost-saving opportunities faster.",
        " For instance, practices that systematically review this area typically find 5-10% in recoverable revenue.",
        " To illustrate, reducing this by even 3-5% can significantly improve your bottom line.",
    ),
    "COMPLIANCE": (
        " For example, implementing a checklist for this process can prevent common compliance issues.",
        " For instance, regular staff training on this topic is considered a best practice by regulatory bodies.",
        " To illustrate, documenting this properly can serve as a defense during an audit.",
    ),
    DEFAULT_CATEGORY: (
        " For example, top-performing practices have clear protocols for this.",
        " For instance, addressing this systematically rather than reactively improves outcomes.",
        " To illustrate, measuring this consistently provides valuable insights for improvement.",
    ),
}

BUSINESS_IMPACT_TEMPLATES: Dict[str, Tuple[str, ...]] = {
    "FINANCIAL": (
        " This directly impacts your practice's profitability and sustainability.",
        " Optimizing this area typically leads to improved financial performance.",
        " This has a direct effect on cash flow and profitability.",
    ),
    "COMPLIANCE": (
        " This significantly affects your regulatory risk and potential liability.",
        " Addressing this properly protects your practice from penalties and reputation damage.",
        " This directly impacts your practice's legal compliance and risk exposure.",
    ),
    DEFAULT_CATEGORY: (
        " This plays an important role in your overall practice success.",
        " This affects multiple aspects of practice performance.",
        " Improvement in this area yields benefits across your practice.",
    ),
}


def normalize_category(category) -> str:
    """Kategorie-Key für die Template-Pools; alles Unbekannte -> DEFAULT_CATEGORY."""
    if not isinstance(category, str):
        return DEFAULT_CATEGORY
    key = category.strip().upper()
    if key in OPENING_TEMPLATES and key != DEFAULT_CATEGORY:
        return key
    return DEFAULT_CATEGORY


def templates_for(pool: Dict[str, Tuple[str, ...]], category) -> Tuple[str, ...]:
    return pool.get(normalize_category(category), pool[DEFAULT_CATEGORY])
