"""
Trend-Historie für Tooltip-Reviews.

Jeder Batch-Lauf kann eine Zeile (JSON Lines) mit den Kernkennzahlen
anhängen; der Trend-Viewer vergleicht ersten und letzten Lauf.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
import json
import logging
from pathlib import Path
from typing import Any, Optional

from app.models.pydantic import AggregateReport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrendEntry:
    timestamp: str
    total_tooltips: int
    percent_with_metrics: int
    percent_with_examples: int
    percent_need_improvement: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TrendEntry":
        return cls(
            timestamp=str(data["timestamp"]),
            total_tooltips=int(data["total_tooltips"]),
            percent_with_metrics=int(data["percent_with_metrics"]),
            percent_with_examples=int(data["percent_with_examples"]),
            percent_need_improvement=int(data["percent_need_improvement"]),
        )


@dataclass(frozen=True)
class TrendSummary:
    runs: int
    metrics_delta: int
    examples_delta: int
    # positiv = weniger Tooltips brauchen Verbesserung
    improvement_delta: int


def trend_entry(report: AggregateReport, timestamp: Optional[str] = None) -> TrendEntry:
    s = report.summary
    return TrendEntry(
        timestamp=timestamp or datetime.now().isoformat(timespec="seconds"),
        total_tooltips=s.total_reviewed,
        percent_with_metrics=s.percent_with_metrics,
        percent_with_examples=s.percent_with_examples,
        percent_need_improvement=s.percent_need_improvement,
    )


def append_history(path: Path, entry: TrendEntry) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(asdict(entry), ensure_ascii=False) + "\n")
    logger.info("Appended trend entry to %s", path)


def load_history(path: Path) -> list[TrendEntry]:
    """Lädt die Historie, sortiert nach Zeitstempel (älteste zuerst)."""
    entries: list[TrendEntry] = []
    if not path.exists():
        return entries
    with path.open("r", encoding="utf-8") as f:
        for line_no, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue
            try:
                entries.append(TrendEntry.from_dict(json.loads(line)))
            except (json.JSONDecodeError, KeyError, TypeError, ValueError):
                logger.warning("Skipping malformed history line %s in %s", line_no, path)
    entries.sort(key=lambda e: e.timestamp)
    return entries


def summarize_trend(entries: list[TrendEntry]) -> Optional[TrendSummary]:
    if not entries:
        return None
    first, last = entries[0], entries[-1]
    return TrendSummary(
        runs=len(entries),
        metrics_delta=last.percent_with_metrics - first.percent_with_metrics,
        examples_delta=last.percent_with_examples - first.percent_with_examples,
        improvement_delta=first.percent_need_improvement - last.percent_need_improvement,
    )


def _signed(value: int) -> str:
    return f"+{value}" if value > 0 else str(value)


def render_trend_table(entries: list[TrendEntry], summary: Optional[TrendSummary] = None) -> str:
    lines = [
        "=== Tooltip Quality Trend Report ===",
        f"Found {len(entries)} review runs",
        "",
        "Timestamp           | Total | % with Metrics | % with Examples | % Needing Improvement",
        "--------------------|-------|----------------|-----------------|----------------------",
    ]
    for e in entries:
        lines.append(
            f"{e.timestamp:<19} | {e.total_tooltips:<5} | {e.percent_with_metrics:>13}% | "
            f"{e.percent_with_examples:>14}% | {e.percent_need_improvement:>20}%"
        )

    if summary is not None and summary.runs > 1:
        lines += [
            "",
            "=== Overall Improvement ===",
            f"Tooltips with metrics: {_signed(summary.metrics_delta)} percentage points",
            f"Tooltips with examples: {_signed(summary.examples_delta)} percentage points",
            f"Tooltips needing improvement: {_signed(-summary.improvement_delta)} percentage points",
        ]
    return "\n".join(lines) + "\n"
