# browser_assert/reporting/writer.py
"""
Build a RunReport from runner outcomes and persist it as JSON and CSV.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable, Tuple

from ..core.controller.runner import ScenarioOutcome
from .schemas import RunReport, ScenarioResult, StepRecord


def build_report(base_url: str, outcomes: Iterable[ScenarioOutcome]) -> RunReport:
    items = [
        ScenarioResult(
            name=o.name,
            ok=o.ok,
            error=o.error,
            steps=[
                StepRecord(
                    index=s.index,
                    text=s.text,
                    status=s.status,
                    extracted=s.extracted,
                    meta=(s.meta or {}),
                    artifact_path=s.artifact_path,
                    detail=s.detail,
                )
                for s in o.steps
            ],
        )
        for o in outcomes
    ]
    return RunReport(
        base_url=base_url,
        total=len(items),
        passed=sum(1 for r in items if r.ok),
        failed=sum(1 for r in items if not r.ok),
        items=items,
    )


def write_report(report: RunReport, out_dir: Path) -> Tuple[Path, Path]:
    """
    Write a RunReport into out_dir as JSON and CSV.
    Returns (json_path, csv_path).
    """
    out_dir.mkdir(parents=True, exist_ok=True)

    json_path = out_dir / "report.json"
    csv_path = out_dir / "report.csv"

    json_path.write_text(report.model_dump_json(indent=2), encoding="utf-8")

    # CSV: one row per step
    with csv_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["scenario", "index", "step", "status", "detail", "artifact"])
        for item in report.items:
            for s in item.steps:
                writer.writerow(
                    [item.name, s.index, s.text, s.status.upper(), s.detail, s.artifact_path or ""]
                )

    return json_path, csv_path
