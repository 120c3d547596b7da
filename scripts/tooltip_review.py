"""
Batch-Review aller Tooltips eines Fragenkatalogs.

Liest:
- --questions: JSON-Datei mit Fragen (Liste oder {"questions": [...]});
  ohne Angabe wird das Demo-Fragenset verwendet.

Schreibt (nach --out-dir, default: results/tooltip_review/<timestamp>/):
- report.md   (Markdown-Report, wird zusätzlich auf stdout ausgegeben)
- report.json (kompletter AggregateReport)
- reviews.csv (eine Zeile pro Frage)
- Optional: Trend-Eintrag in --history (JSON Lines)

Exit-Code 1, wenn die Fragen-Datei nicht gelesen werden kann.
"""

from __future__ import annotations

import argparse
import csv
from datetime import datetime
import json
import logging
from pathlib import Path
import sys
from typing import Any

# Add project root to path
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from app.core.config import Settings
from app.data.question_bank import QuestionBankError, load_questions
from app.data.sample_questions import SAMPLE_QUESTIONS
from app.models.pydantic import AggregateReport
from app.services.tooltip_review_service import TooltipReviewService
from app.services.tooltips.report import CSV_FIELDS, report_rows
from app.services.tooltips.trends import append_history, trend_entry

logger = logging.getLogger(__name__)


def write_csv(rows: list[dict[str, Any]], path: Path) -> None:
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        writer.writeheader()
        writer.writerows(rows)


def write_outputs(report: AggregateReport, markdown: str, out_dir: Path) -> dict[str, Path]:
    out_dir.mkdir(parents=True, exist_ok=True)
    paths = {
        "markdown": out_dir / "report.md",
        "json": out_dir / "report.json",
        "csv": out_dir / "reviews.csv",
    }
    paths["markdown"].write_text(markdown, encoding="utf-8")
    paths["json"].write_text(
        json.dumps(report.model_dump(), indent=2, ensure_ascii=False), encoding="utf-8"
    )
    write_csv(report_rows(report), paths["csv"])
    for kind, path in paths.items():
        logger.info("Wrote %s report: %s", kind, path)
    return paths


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Reviewt Tooltip-Texte und erzeugt einen Report")
    ap.add_argument("--questions", type=str, help="JSON-Datei mit Fragen (default: Demo-Set)")
    ap.add_argument("--out-dir", type=str, help="Output-Verzeichnis (default: aus Settings + Timestamp)")
    ap.add_argument("--seed", type=int, help="Seed für die Template-Auswahl des Enhancers")
    ap.add_argument("--no-enhance", action="store_true", help="Keine Enhancement-Beispiele erzeugen")
    ap.add_argument("--max-examples", type=int, help="Max. Anzahl Enhancement-Beispiele im Report")
    ap.add_argument("--history", type=str, help="JSONL-Datei für die Trend-Historie")
    ap.add_argument("--quiet", action="store_true", help="Markdown nicht auf stdout ausgeben")
    return ap.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    args = parse_args(argv)

    settings = Settings()
    if args.seed is not None:
        settings = settings.model_copy(update={"enhancer_seed": args.seed})

    if args.questions:
        try:
            questions = load_questions(args.questions)
        except QuestionBankError as e:
            print(f"❌ {e}", file=sys.stderr)
            return 1
    else:
        logger.info("No --questions given, using the demo question set")
        questions = list(SAMPLE_QUESTIONS)

    service = TooltipReviewService(settings=settings)
    report = service.build_report(
        questions,
        include_enhancements=not args.no_enhance,
        max_examples=args.max_examples,
    )
    markdown = service.render_markdown(report)

    if args.out_dir:
        out_dir = Path(args.out_dir)
    else:
        ts = datetime.now().strftime("%Y%m%d_%H%M%S")
        out_dir = Path(settings.report_output_dir) / ts
    write_outputs(report, markdown, out_dir)

    if args.history:
        append_history(Path(args.history), trend_entry(report))

    if not args.quiet:
        print(markdown)

    s = report.summary
    print(f"Summary: {s.need_improvement} out of {s.total_reviewed} tooltips need improvement")
    print(f"Artefakte gespeichert in: {out_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
