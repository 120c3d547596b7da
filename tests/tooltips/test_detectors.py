from app.services.tooltips.detectors import (
    has_business_impact,
    has_examples,
    has_metrics,
    identify_jargon,
    is_plain_language,
)


def test_has_metrics_percent_currency_duration():
    assert has_metrics("Costs rose 12%")
    assert has_metrics("Reducing it can save $10,000 annually.")
    assert has_metrics("takes 3 days")
    assert has_metrics("about 1 hour per patient")
    assert has_metrics("a 2.5 weeks backlog")


def test_has_metrics_negative():
    assert not has_metrics("Costs rose a lot")
    assert not has_metrics("every year")
    assert not has_metrics("")
    assert not has_metrics(None)


def test_has_examples():
    assert has_examples("for example, X")
    assert has_examples("For Example, rent went up.")
    assert has_examples("Fixed costs such as rent.")
    assert has_examples("Costs (e.g. rent) rise.")
    assert has_examples("Consider this scenario.")
    assert not has_examples("no illustrative text")
    assert not has_examples("")


def test_identify_jargon_follows_vocabulary_order():
    found = identify_jargon("The KPI and ROI are low")
    assert "KPI" in found
    assert "ROI" in found
    assert found == ["ROI", "KPI"]


def test_identify_jargon_skips_terms_defined_in_text():
    assert "ROI" not in identify_jargon("ROI means return on investment")
    assert identify_jargon("HIPAA is the law that protects patient data.") == []
    assert identify_jargon("PHI refers to protected health information.") == []


def test_identify_jargon_is_case_insensitive_and_uses_vocabulary_spelling():
    assert identify_jargon("our kpi dashboard") == ["KPI"]


def test_identify_jargon_matches_whole_words_and_phrases():
    assert identify_jargon("Capitalize on trends") == []
    assert identify_jargon("Track the revenue cycle weekly") == ["revenue cycle"]


def test_identify_jargon_empty():
    assert identify_jargon("") == []
    assert identify_jargon(None) == []


def test_has_business_impact():
    assert has_business_impact("This affects revenue.")
    assert has_business_impact("Big Impact on morale.")
    assert has_business_impact("Staff benefits from it.")
    assert not has_business_impact("Nothing here.")


def test_is_plain_language_accepts_score_or_text():
    assert is_plain_language(75.0)
    assert not is_plain_language(59.9)
    assert is_plain_language(60.0)
    assert not is_plain_language("")
    assert is_plain_language("Keep costs low.")
    assert not is_plain_language(" ".join(["organization"] * 60) + ".")
