"""
Zeigt die Entwicklung der Tooltip-Qualität über mehrere Review-Läufe.

Liest die JSONL-Historie, die scripts/tooltip_review.py mit --history
schreibt, und gibt eine Tabelle plus Vergleich erster/letzter Lauf aus.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

# Add project root to path
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from app.core.config import settings
from app.services.tooltips.trends import load_history, render_trend_table, summarize_trend

DEFAULT_HISTORY = Path(settings.report_output_dir) / "history.jsonl"


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.WARNING)
    ap = argparse.ArgumentParser(description="Trend-Report für Tooltip-Reviews")
    ap.add_argument("--history", type=str, default=str(DEFAULT_HISTORY), help="JSONL-Historie")
    args = ap.parse_args(argv)

    history_path = Path(args.history)
    entries = load_history(history_path)
    if not entries:
        print(f"❌ No tooltip review history found in {history_path}", file=sys.stderr)
        print("   Run scripts/tooltip_review.py with --history first.", file=sys.stderr)
        return 1

    print(render_trend_table(entries, summarize_trend(entries)), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
