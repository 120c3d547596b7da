"""
Integrationstest für die Batch-Scripts: Report-Artefakte, Trend-Historie,
Exit-Codes bei fehlerhaften Eingaben.
"""

import csv
import json

from scripts.tooltip_review import main as review_main
from scripts.view_tooltip_trends import main as trends_main


def test_batch_review_writes_artifacts(tmp_path, capsys):
    out_dir = tmp_path / "out"
    history = tmp_path / "history.jsonl"

    code = review_main(
        ["--out-dir", str(out_dir), "--seed", "1", "--history", str(history), "--quiet"]
    )
    assert code == 0

    report = json.loads((out_dir / "report.json").read_text(encoding="utf-8"))
    assert report["summary"]["total_reviewed"] == 4
    assert report["summary"]["need_improvement"] == 3

    markdown = (out_dir / "report.md").read_text(encoding="utf-8")
    assert markdown.startswith("# Tooltip Readability Review Report")

    with (out_dir / "reviews.csv").open(encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [r["id"] for r in rows] == [
        "fin-exp-001",
        "comp-risk-001",
        "tech-dig-001",
        "staff-train-001",
    ]

    assert len(history.read_text(encoding="utf-8").splitlines()) == 1
    out = capsys.readouterr().out
    assert "Summary: 3 out of 4 tooltips need improvement" in out
    assert "## Summary" not in out


def test_batch_review_is_reproducible_with_seed(tmp_path):
    for name in ("a", "b"):
        assert review_main(["--out-dir", str(tmp_path / name), "--seed", "5", "--quiet"]) == 0
    a = (tmp_path / "a" / "report.md").read_text(encoding="utf-8")
    b = (tmp_path / "b" / "report.md").read_text(encoding="utf-8")
    assert a == b


def test_batch_review_reads_question_file(tmp_path):
    questions = tmp_path / "questions.json"
    questions.write_text(
        json.dumps([{"id": "q1", "text": "Q", "category": "MARKETING", "helpText": "Short."}]),
        encoding="utf-8",
    )
    out_dir = tmp_path / "out"
    code = review_main(
        ["--questions", str(questions), "--out-dir", str(out_dir), "--no-enhance", "--quiet"]
    )
    assert code == 0
    report = json.loads((out_dir / "report.json").read_text(encoding="utf-8"))
    assert report["summary"]["total_reviewed"] == 1
    assert report["examples"] == []


def test_batch_review_bad_question_file(tmp_path, capsys):
    code = review_main(
        ["--questions", str(tmp_path / "missing.json"), "--out-dir", str(tmp_path / "out")]
    )
    assert code == 1
    assert "not found" in capsys.readouterr().err
    assert not (tmp_path / "out").exists()


def test_trend_viewer(tmp_path, capsys):
    history = tmp_path / "history.jsonl"
    for name in ("run1", "run2"):
        review_main(
            ["--out-dir", str(tmp_path / name), "--history", str(history), "--quiet"]
        )
    capsys.readouterr()

    assert trends_main(["--history", str(history)]) == 0
    out = capsys.readouterr().out
    assert "Found 2 review runs" in out
    assert "=== Overall Improvement ===" in out


def test_trend_viewer_without_history(tmp_path, capsys):
    assert trends_main(["--history", str(tmp_path / "none.jsonl")]) == 1
    assert "No tooltip review history" in capsys.readouterr().err


def test_batch_review_unreadable_question_file(tmp_path, capsys):
    questions = tmp_path / "latin1.json"
    questions.write_bytes(b'[{"id": "1", "helpText": "caf\xe9"}]')
    code = review_main(["--questions", str(questions), "--out-dir", str(tmp_path / "out")])
    assert code == 1
    assert "Cannot read" in capsys.readouterr().err

    assert review_main(["--questions", str(tmp_path), "--out-dir", str(tmp_path / "out")]) == 1
