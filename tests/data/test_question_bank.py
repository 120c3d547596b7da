import json

import pytest

from app.data.question_bank import QuestionBankError, load_questions, parse_questions
from app.data.reference_tooltips import get_reference_tooltips


def test_parse_list_with_camel_case_and_snake_case():
    questions = parse_questions(
        [
            {"id": "q1", "text": "Q1", "category": "FINANCIAL", "helpText": "Costs rose 12%."},
            {"id": "q2", "text": "Q2", "category": "STAFFING", "help_text": "Train staff."},
            {"id": "q3"},
        ]
    )
    assert [q.id for q in questions] == ["q1", "q2", "q3"]
    assert questions[0].help_text == "Costs rose 12%."
    assert questions[1].help_text == "Train staff."
    assert questions[2].help_text is None
    assert questions[2].category == ""


def test_parse_object_with_questions_key():
    questions = parse_questions({"questions": [{"id": "q1", "helpText": "x"}]})
    assert len(questions) == 1


@pytest.mark.parametrize("data", [None, "questions", 42, {"items": []}])
def test_parse_rejects_unexpected_shapes(data):
    with pytest.raises(QuestionBankError):
        parse_questions(data)


def test_parse_names_index_of_invalid_entry():
    with pytest.raises(QuestionBankError, match="index 1"):
        parse_questions([{"id": "ok"}, {"text": "missing id"}])


def test_load_questions_from_file(tmp_path):
    path = tmp_path / "questions.json"
    path.write_text(
        json.dumps({"questions": [{"id": "q1", "category": "COMPLIANCE", "helpText": "Äö"}]}),
        encoding="utf-8",
    )
    questions = load_questions(path)
    assert questions[0].help_text == "Äö"


def test_load_questions_missing_file(tmp_path):
    with pytest.raises(QuestionBankError, match="not found"):
        load_questions(tmp_path / "missing.json")


def test_load_questions_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(QuestionBankError, match="Invalid JSON"):
        load_questions(path)


def test_reference_tooltips_lookup():
    financial = get_reference_tooltips(" financial ")
    assert set(financial) == {"overhead_ratio", "profit_margin", "cash_flow", "revenue_cycle"}
    assert "compliance_program" in get_reference_tooltips("COMPLIANCE")
    assert get_reference_tooltips("TECHNOLOGY") == {}
    assert get_reference_tooltips("") == {}
    assert get_reference_tooltips(None) == {}


def test_reference_tooltips_returns_copy():
    get_reference_tooltips("FINANCIAL")["overhead_ratio"] = "changed"
    assert get_reference_tooltips("FINANCIAL")["overhead_ratio"] != "changed"


def test_load_questions_invalid_utf8(tmp_path):
    path = tmp_path / "latin1.json"
    path.write_bytes(b'[{"id": "1", "helpText": "caf\xe9"}]')
    with pytest.raises(QuestionBankError, match="Cannot read"):
        load_questions(path)


def test_load_questions_directory_path(tmp_path):
    with pytest.raises(QuestionBankError, match="Cannot read"):
        load_questions(tmp_path)
